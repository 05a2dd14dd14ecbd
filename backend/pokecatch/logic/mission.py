"""
Mission lifecycle: create, start once, resolve once.

Both transitions are guarded. Starting twice or resolving a mission that
never started raises InvalidTransitionError instead of silently resetting
timestamps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pokecatch.logic.exceptions import InvalidTransitionError
from pokecatch.logic.ids import generate_id
from pokecatch.logic.players import catch_pokemon, mark_as_played
from pokecatch.logic.state import MissionState

if TYPE_CHECKING:
    import random
    from collections.abc import Sequence

    from pokecatch.logic.notices import CatchResultNotice
    from pokecatch.logic.state import Player, Pokemon
    from pokecatch.logic.types import TransitionContext


class MissionResolution(NamedTuple):
    """Outcome of ending a mission: resolved mission, updated roster, one notice per catch."""

    mission: MissionState
    players: tuple[Player, ...]
    notices: list[CatchResultNotice]


def _mission_phase(mission: MissionState) -> str:
    if mission.resolved:
        return "resolved"
    if mission.started:
        return "running"
    return "pending"


def create_mission(pokemon: Pokemon, *, ctx: TransitionContext, duration_ms: int = 10000) -> MissionState:
    return MissionState(id=generate_id(ctx.now_ms, ctx.rng), pokemon=pokemon, duration_ms=duration_ms)


def start_mission(mission: MissionState, now_ms: int) -> MissionState:
    """Stamp start and end times. A mission can only be started once."""
    if mission.started:
        raise InvalidTransitionError(
            action="start_mission",
            phase=_mission_phase(mission),
            reason="mission already started",
        )
    return mission.model_copy(update={"start_time_ms": now_ms, "end_time_ms": now_ms + mission.duration_ms})


def is_mission_active(mission: MissionState, now_ms: int) -> bool:
    """True while the mission has started, is unresolved and its end time is still ahead."""
    if mission.start_time_ms is None or mission.end_time_ms is None or mission.resolved:
        return False
    return now_ms < mission.end_time_ms


def end_mission(mission: MissionState, players: Sequence[Player], rng: random.Random) -> MissionResolution:
    """
    Resolve the mission for every player in roster order.

    Each player makes one catch attempt; the outcome is recorded under the
    player's id and the player is marked as played.
    """
    if not mission.started:
        raise InvalidTransitionError(action="end_mission", phase=_mission_phase(mission), reason="mission not started")
    if mission.resolved:
        raise InvalidTransitionError(
            action="end_mission",
            phase=_mission_phase(mission),
            reason="mission already resolved",
        )

    results = dict(mission.results)
    updated_players: list[Player] = []
    notices: list[CatchResultNotice] = []
    for player in players:
        outcome = catch_pokemon(player, rng, mission_id=mission.id)
        results[player.id] = outcome.success
        notices.append(outcome.notice)
        updated_players.append(mark_as_played(player))

    resolved = mission.model_copy(update={"results": results, "resolved": True})
    return MissionResolution(mission=resolved, players=tuple(updated_players), notices=notices)
