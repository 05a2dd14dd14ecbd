"""Drive one room through the reducer on a scheduler.

RoomSession is the only owner of the room's current state. It feeds
events to pokecatch.logic.room, logs every returned notice and queues
follow-up events on the scheduler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pokecatch.logic.enums import RoomPhase
from pokecatch.logic.events import JoinRequested
from pokecatch.logic.exceptions import InvalidTransitionError
from pokecatch.logic.mission import is_mission_active
from pokecatch.logic.notices import JoinRejectedNotice, NoticeType
from pokecatch.logic.room import apply_event, create_room
from pokecatch.logic.types import TransitionContext

if TYPE_CHECKING:
    import random

    from pokecatch.logic.events import RoomEvent
    from pokecatch.logic.notices import Notice
    from pokecatch.logic.room import TransitionResult
    from pokecatch.logic.settings import RoomSettings
    from pokecatch.logic.state import Player, Pokemon, RoomState
    from pokecatch.session.scheduler import EventScheduler

logger = structlog.get_logger()

_NOTICE_MESSAGES: dict[NoticeType, str] = {
    NoticeType.LEADER_ASSIGNED: "room leader assigned",
    NoticeType.ROOM_CREATED: "room created",
    NoticeType.PLAYER_JOINED: "player joined",
    NoticeType.JOIN_REJECTED: "join rejected",
    NoticeType.JOINS_CLOSED: "joins closed, starting mission",
    NoticeType.MISSION_STARTED: "mission started",
    NoticeType.CATCH_RESULT: "catch result",
    NoticeType.MISSION_ENDED: "mission ended",
    NoticeType.ROOM_ENDED: "room ended, game over",
}


def log_notice(notice: Notice) -> None:
    """Write one log line for a notice; rejections are warnings, everything else info."""
    message = _NOTICE_MESSAGES[notice.type]
    fields = notice.model_dump(mode="json", exclude={"type"})
    if isinstance(notice, JoinRejectedNotice):
        logger.warning(message, **fields)
        return
    logger.info(message, **fields)


class RoomSession:
    """
    Own one room and move it through its phases.

    The room does not exist until open() is called. dispatch() is the
    scheduler's entry point for room events; join() is a convenience for
    callers submitting players directly.
    """

    def __init__(self, scheduler: EventScheduler, rng: random.Random) -> None:
        self._scheduler = scheduler
        self._rng = rng
        self._state: RoomState | None = None

    @property
    def state(self) -> RoomState:
        if self._state is None:
            raise InvalidTransitionError(action="read_state", phase="unopened", reason="room not opened")
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is not None

    @property
    def is_ended(self) -> bool:
        return self._state is not None and self._state.phase == RoomPhase.ENDED

    @property
    def mission_active(self) -> bool:
        return is_mission_active(self.state.mission, self.now_ms())

    def now_ms(self) -> int:
        return self._scheduler.clock.now_ms()

    def context(self) -> TransitionContext:
        return TransitionContext(now_ms=self.now_ms(), rng=self._rng)

    def open(
        self,
        leader: Player,
        pokemon: Pokemon,
        max_players: int,
        settings: RoomSettings | None = None,
    ) -> RoomState:
        """Create the room and arm its join-window timer."""
        if self._state is not None:
            raise InvalidTransitionError(action="open_room", phase=self._state.phase.value, reason="room already open")
        result = create_room(leader, pokemon, max_players, ctx=self.context(), settings=settings)
        self._commit(result)
        return result.state

    def dispatch(self, event: RoomEvent) -> RoomState:
        """Apply one event to the room."""
        result = apply_event(self.state, event, self.context())
        self._commit(result)
        return result.state

    def join(self, player: Player) -> bool:
        """Submit a join request. Returns True when the player was admitted."""
        before = self.state.player_count
        after = self.dispatch(JoinRequested(player=player))
        return after.player_count > before

    def _commit(self, result: TransitionResult) -> None:
        self._state = result.state
        with structlog.contextvars.bound_contextvars(room_id=result.state.id):
            for notice in result.notices:
                log_notice(notice)
        for follow_up in result.follow_ups:
            self._scheduler.schedule(follow_up.delay_ms, follow_up.event)

