"""Input events consumed by the room reducer.

The scheduler queues these and hands them, one at a time, to
pokecatch.logic.room.apply_event.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from pokecatch.logic.state import Player  # noqa: TC001


class RoomEventType(StrEnum):
    """Types of room input events."""

    JOIN_REQUESTED = "join_requested"
    JOINS_CLOSED = "joins_closed"
    MISSION_START_REQUESTED = "mission_start_requested"
    MISSION_END_REQUESTED = "mission_end_requested"
    ROOM_END_REQUESTED = "room_end_requested"


class BaseRoomEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: RoomEventType


class JoinRequested(BaseRoomEvent):
    """A player asks to enter the room."""

    type: Literal[RoomEventType.JOIN_REQUESTED] = RoomEventType.JOIN_REQUESTED
    player: Player


class JoinsClosed(BaseRoomEvent):
    """The join window elapsed."""

    type: Literal[RoomEventType.JOINS_CLOSED] = RoomEventType.JOINS_CLOSED


class MissionStartRequested(BaseRoomEvent):
    type: Literal[RoomEventType.MISSION_START_REQUESTED] = RoomEventType.MISSION_START_REQUESTED


class MissionEndRequested(BaseRoomEvent):
    """The mission timer elapsed; resolve catches for the roster."""

    type: Literal[RoomEventType.MISSION_END_REQUESTED] = RoomEventType.MISSION_END_REQUESTED


class RoomEndRequested(BaseRoomEvent):
    type: Literal[RoomEventType.ROOM_END_REQUESTED] = RoomEventType.ROOM_END_REQUESTED


RoomEvent = Annotated[
    JoinRequested | JoinsClosed | MissionStartRequested | MissionEndRequested | RoomEndRequested,
    Field(discriminator="type"),
]
