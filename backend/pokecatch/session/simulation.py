"""End-to-end simulation of one catch game.

A leader hosts a room, synthesized players join once per tick while the
join window is open, then the mission runs and resolves. All timing goes
through one EventScheduler, so swapping MonotonicClock for VirtualClock
runs the same game instantly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from pokecatch.logic.exceptions import CatchGameError, CatchValidationError, PlayerAdditionError
from pokecatch.logic.players import create_leader, create_player
from pokecatch.logic.pokemon import create_pokemon
from pokecatch.logic.rng import create_rng, pick_pokemon_name
from pokecatch.logic.settings import DEFAULT_LEADER_NAME, RoomSettings
from pokecatch.session.clock import MonotonicClock
from pokecatch.session.room_session import RoomSession
from pokecatch.session.scheduler import EventScheduler

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from pokecatch.logic.events import RoomEvent
    from pokecatch.logic.state import Player, RoomState
    from pokecatch.session.clock import Clock

logger = structlog.get_logger()

LEADER_PROMPT = "Host game: "
SYNTHESIZED_NAME_PREFIX = "Player"


@dataclass(frozen=True)
class SpawnTick:
    """Scheduler payload for the player-synthesis interval."""


@dataclass(frozen=True)
class SimulationReport:
    room: RoomState
    players_added: int


def read_leader_name(prompt: Callable[[str], str], default: str = DEFAULT_LEADER_NAME) -> str:
    """Ask for the leader's display name; empty or cancelled input gives the default."""
    try:
        raw = prompt(LEADER_PROMPT)
    except (EOFError, KeyboardInterrupt):
        return default
    return raw or default


class GameSimulation:
    """
    Wire a RoomSession to a scheduler and synthesize joining players.

    Players are named Player1, Player2, ... and one is attempted per
    tick until the roster reaches max_players or joins close, at which
    point the tick cancels itself.
    """

    def __init__(
        self,
        max_players: int,
        *,
        scheduler: EventScheduler,
        rng: random.Random,
        settings: RoomSettings,
    ) -> None:
        self._max_players = max_players
        self._scheduler = scheduler
        self._rng = rng
        self._settings = settings
        self._session = RoomSession(scheduler, rng)
        self._added = 1  # leader
        self._spawn_handle: int | None = None

    @property
    def session(self) -> RoomSession:
        return self._session

    @property
    def players_added(self) -> int:
        return self._added - 1

    def open_room(self, leader_name: str) -> RoomState:
        """Create the leader, pick the Pokemon and open the room."""
        ctx = self._session.context()
        leader = create_leader(leader_name, ctx=ctx)
        pokemon_name = pick_pokemon_name(self._rng, self._settings.pokemon_names)
        pokemon = create_pokemon(pokemon_name, self._settings.location)
        state = self._session.open(leader, pokemon, self._max_players, self._settings)
        self._spawn_handle = self._scheduler.schedule_interval(self._settings.join_interval_ms, SpawnTick())
        return state

    async def run(self) -> SimulationReport:
        await self._scheduler.run(self._dispatch)
        return SimulationReport(room=self._session.state, players_added=self.players_added)

    def _dispatch(self, event: SpawnTick | RoomEvent) -> None:
        if isinstance(event, SpawnTick):
            self._on_spawn_tick()
            return
        self._session.dispatch(event)

    def _on_spawn_tick(self) -> None:
        state = self._session.state
        now_ms = self._session.now_ms()
        if self._added < self._max_players and state.is_join_open and now_ms < state.join_deadline_ms:
            try:
                player = self._spawn_player(f"{SYNTHESIZED_NAME_PREFIX}{self._added}")
            except PlayerAdditionError as e:
                logger.warning("error adding player", player_name=e.player_name, error=e.reason)
                return
            self._session.join(player)
            self._added += 1
            return

        if self._spawn_handle is not None:
            self._scheduler.cancel(self._spawn_handle)
            self._spawn_handle = None
            logger.debug("player synthesis stopped", players_added=self.players_added)

    def _spawn_player(self, name: str) -> Player:
        try:
            return create_player(name, ctx=self._session.context())
        except CatchValidationError as e:
            raise PlayerAdditionError(name, str(e)) from e


async def simulate_game(  # noqa: PLR0913
    max_players: int = 3,
    *,
    settings: RoomSettings | None = None,
    clock: Clock | None = None,
    rng: random.Random | None = None,
    prompt: Callable[[str], str] = input,
    default_leader_name: str = DEFAULT_LEADER_NAME,
) -> SimulationReport | None:
    """
    Run one game from room creation to room end.

    Returns the final report, or None when the game could not run
    (invalid leader name, max_players below 1, ...). Failures are logged,
    never raised.
    """
    logger.info("starting pokemon catching game simulation", max_players=max_players)
    scheduler = EventScheduler(clock or MonotonicClock())
    simulation = GameSimulation(
        max_players,
        scheduler=scheduler,
        rng=rng or create_rng(None),
        settings=settings or RoomSettings(),
    )
    try:
        leader_name = read_leader_name(prompt, default_leader_name)
        simulation.open_room(leader_name)
        return await simulation.run()
    except CatchGameError as e:
        logger.error("error starting game", error=str(e))  # noqa: TRY400
        return None
