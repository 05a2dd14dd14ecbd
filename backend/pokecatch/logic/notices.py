"""Notices emitted by room transitions.

Transitions are pure; anything worth telling the outside world comes back
as a notice. The session layer turns each notice into exactly one log line.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from pokecatch.logic.enums import JoinRejection, RoomPhase  # noqa: TC001


class NoticeType(StrEnum):
    """Types of room notices."""

    LEADER_ASSIGNED = "leader_assigned"
    ROOM_CREATED = "room_created"
    PLAYER_JOINED = "player_joined"
    JOIN_REJECTED = "join_rejected"
    JOINS_CLOSED = "joins_closed"
    MISSION_STARTED = "mission_started"
    CATCH_RESULT = "catch_result"
    MISSION_ENDED = "mission_ended"
    ROOM_ENDED = "room_ended"


class Notice(BaseModel):
    """Base class for all room notices."""

    model_config = ConfigDict(frozen=True)

    type: NoticeType


class LeaderAssignedNotice(Notice):
    """The room creator was made room leader."""

    type: Literal[NoticeType.LEADER_ASSIGNED] = NoticeType.LEADER_ASSIGNED
    player_name: str


class RoomCreatedNotice(Notice):
    type: Literal[NoticeType.ROOM_CREATED] = NoticeType.ROOM_CREATED
    room_id: str
    leader_name: str
    max_players: int
    join_window_seconds: float


class PlayerJoinedNotice(Notice):
    type: Literal[NoticeType.PLAYER_JOINED] = NoticeType.PLAYER_JOINED
    player_name: str
    player_count: int
    max_players: int


class JoinRejectedNotice(Notice):
    """A join request was turned away; the roster did not change."""

    type: Literal[NoticeType.JOIN_REJECTED] = NoticeType.JOIN_REJECTED
    player_name: str
    reason: JoinRejection


class JoinsClosedNotice(Notice):
    type: Literal[NoticeType.JOINS_CLOSED] = NoticeType.JOINS_CLOSED
    player_count: int


class MissionStartedNotice(Notice):
    type: Literal[NoticeType.MISSION_STARTED] = NoticeType.MISSION_STARTED
    mission_id: str
    pokemon_name: str
    location: str
    duration_seconds: float


class CatchResultNotice(Notice):
    """Outcome of one player's catch attempt."""

    type: Literal[NoticeType.CATCH_RESULT] = NoticeType.CATCH_RESULT
    mission_id: str
    player_name: str
    success: bool


class MissionEndedNotice(Notice):
    type: Literal[NoticeType.MISSION_ENDED] = NoticeType.MISSION_ENDED
    mission_id: str
    catches: int
    attempts: int


class RoomEndedNotice(Notice):
    type: Literal[NoticeType.ROOM_ENDED] = NoticeType.ROOM_ENDED
    phase: RoomPhase
