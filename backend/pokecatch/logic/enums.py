"""
String enum definitions for catch-game concepts.
"""

from enum import Enum


class PlayerRole(str, Enum):
    """Role of a player within a room."""

    LEADER = "leader"
    PARTICIPANT = "participant"


class RoomPhase(str, Enum):
    """Phase of a room. Transitions only move forward; ENDED is terminal."""

    OPEN = "open"
    CLOSED = "closed"
    MISSION_RUNNING = "mission_running"
    ENDED = "ended"


class JoinRejection(str, Enum):
    """Reasons a join request is turned away."""

    DUPLICATE_NAME = "duplicate_name"
    ROOM_FULL = "room_full"
    JOINS_CLOSED = "joins_closed"
