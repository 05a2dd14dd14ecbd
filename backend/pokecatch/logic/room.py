"""Room reducer: (RoomState, RoomEvent) -> RoomState.

Every transition is a pure function of the current state, the event and a
TransitionContext (current time plus random source). Timers are not armed
here; a transition returns follow-up events with delays, and the session
layer queues them on its scheduler.

Phase order is OPEN -> CLOSED -> MISSION_RUNNING -> ENDED. Join requests
are answered in any phase (rejected once joins close); every other event
is only legal in its own phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from pokecatch.logic.enums import JoinRejection, RoomPhase
from pokecatch.logic.events import (
    JoinRequested,
    JoinsClosed,
    MissionEndRequested,
    MissionStartRequested,
    RoomEndRequested,
)
from pokecatch.logic.exceptions import InvalidRoomSettingsError, InvalidTransitionError
from pokecatch.logic.ids import generate_id
from pokecatch.logic.mission import create_mission, end_mission, start_mission
from pokecatch.logic.notices import (
    JoinRejectedNotice,
    JoinsClosedNotice,
    LeaderAssignedNotice,
    MissionEndedNotice,
    MissionStartedNotice,
    Notice,
    PlayerJoinedNotice,
    RoomCreatedNotice,
    RoomEndedNotice,
)
from pokecatch.logic.settings import RoomSettings
from pokecatch.logic.state import RoomState

if TYPE_CHECKING:
    from pokecatch.logic.events import RoomEvent
    from pokecatch.logic.state import Player, Pokemon
    from pokecatch.logic.types import TransitionContext


@dataclass(frozen=True)
class FollowUp:
    """An event the scheduler should deliver delay_ms after the current transition."""

    delay_ms: int
    event: RoomEvent


class TransitionResult(NamedTuple):
    """
    Result of a room transition.

    Contains the new state, the notices to report and any follow-up
    events to schedule.
    """

    state: RoomState
    notices: list[Notice]
    follow_ups: tuple[FollowUp, ...] = ()


def create_room(
    leader: Player,
    pokemon: Pokemon,
    max_players: int,
    *,
    ctx: TransitionContext,
    settings: RoomSettings | None = None,
) -> TransitionResult:
    """
    Create a room seeded with its leader and one mission.

    Schedules the end of the join window as a follow-up.
    """
    if max_players < 1:
        raise InvalidRoomSettingsError(f"Max players must be at least 1, got {max_players}")
    settings = settings or RoomSettings()

    room_id = generate_id(ctx.now_ms, ctx.rng)
    mission = create_mission(pokemon, ctx=ctx, duration_ms=settings.mission_duration_ms)
    state = RoomState(
        id=room_id,
        leader_id=leader.id,
        players=(leader,),
        max_players=max_players,
        mission=mission,
        join_window_ms=settings.join_window_ms,
        created_at_ms=ctx.now_ms,
        join_deadline_ms=ctx.now_ms + settings.join_window_ms,
    )
    notices: list[Notice] = [
        LeaderAssignedNotice(player_name=leader.name),
        RoomCreatedNotice(
            room_id=room_id,
            leader_name=leader.name,
            max_players=max_players,
            join_window_seconds=settings.join_window_ms / 1000,
        ),
    ]
    return TransitionResult(
        state=state,
        notices=notices,
        follow_ups=(FollowUp(delay_ms=settings.join_window_ms, event=JoinsClosed()),),
    )


def apply_event(state: RoomState, event: RoomEvent, ctx: TransitionContext) -> TransitionResult:
    """Apply one input event to the room."""
    if isinstance(event, JoinRequested):
        return _apply_join(state, event.player, ctx)
    if isinstance(event, JoinsClosed):
        return _apply_close_joins(state)
    if isinstance(event, MissionStartRequested):
        return _apply_start_mission(state, ctx)
    if isinstance(event, MissionEndRequested):
        return _apply_end_mission(state, ctx)
    if isinstance(event, RoomEndRequested):
        return _apply_end_room(state)
    raise InvalidTransitionError(action=str(event.type), phase=state.phase.value, reason="unknown event")


def join_rejection(state: RoomState, player: Player, now_ms: int) -> JoinRejection | None:
    """Return why the player cannot join, or None when the join is allowed."""
    if state.has_player_named(player.name):
        return JoinRejection.DUPLICATE_NAME
    if state.is_full:
        return JoinRejection.ROOM_FULL
    if not state.is_join_open or now_ms >= state.join_deadline_ms:
        return JoinRejection.JOINS_CLOSED
    return None


def _require_phase(state: RoomState, expected: RoomPhase, action: str) -> None:
    if state.phase != expected:
        raise InvalidTransitionError(
            action=action,
            phase=state.phase.value,
            reason=f"expected phase {expected.value}",
        )


def _apply_join(state: RoomState, player: Player, ctx: TransitionContext) -> TransitionResult:
    rejection = join_rejection(state, player, ctx.now_ms)
    if rejection is not None:
        return TransitionResult(
            state=state,
            notices=[JoinRejectedNotice(player_name=player.name, reason=rejection)],
        )

    new_state = state.model_copy(update={"players": (*state.players, player)})
    return TransitionResult(
        state=new_state,
        notices=[
            PlayerJoinedNotice(
                player_name=player.name,
                player_count=new_state.player_count,
                max_players=new_state.max_players,
            ),
        ],
    )


def _apply_close_joins(state: RoomState) -> TransitionResult:
    _require_phase(state, RoomPhase.OPEN, "close_joins")
    new_state = state.model_copy(update={"is_join_open": False, "phase": RoomPhase.CLOSED})
    return TransitionResult(
        state=new_state,
        notices=[JoinsClosedNotice(player_count=new_state.player_count)],
        follow_ups=(FollowUp(delay_ms=0, event=MissionStartRequested()),),
    )


def _apply_start_mission(state: RoomState, ctx: TransitionContext) -> TransitionResult:
    _require_phase(state, RoomPhase.CLOSED, "start_mission")
    mission = start_mission(state.mission, ctx.now_ms)
    new_state = state.model_copy(update={"mission": mission, "phase": RoomPhase.MISSION_RUNNING})
    return TransitionResult(
        state=new_state,
        notices=[
            MissionStartedNotice(
                mission_id=mission.id,
                pokemon_name=mission.pokemon.name,
                location=mission.pokemon.location,
                duration_seconds=mission.duration_ms / 1000,
            ),
        ],
        follow_ups=(FollowUp(delay_ms=mission.duration_ms, event=MissionEndRequested()),),
    )


def _apply_end_mission(state: RoomState, ctx: TransitionContext) -> TransitionResult:
    _require_phase(state, RoomPhase.MISSION_RUNNING, "end_mission")
    resolution = end_mission(state.mission, state.players, ctx.rng)
    new_state = state.model_copy(update={"mission": resolution.mission, "players": resolution.players})
    catches = sum(1 for success in resolution.mission.results.values() if success)
    notices: list[Notice] = [
        *resolution.notices,
        MissionEndedNotice(
            mission_id=resolution.mission.id,
            catches=catches,
            attempts=len(resolution.mission.results),
        ),
    ]
    return TransitionResult(
        state=new_state,
        notices=notices,
        follow_ups=(FollowUp(delay_ms=0, event=RoomEndRequested()),),
    )


def _apply_end_room(state: RoomState) -> TransitionResult:
    _require_phase(state, RoomPhase.MISSION_RUNNING, "end_room")
    if not state.mission.resolved:
        raise InvalidTransitionError(action="end_room", phase=state.phase.value, reason="mission not resolved")
    new_state = state.model_copy(update={"phase": RoomPhase.ENDED})
    return TransitionResult(state=new_state, notices=[RoomEndedNotice(phase=new_state.phase)])
