"""
Immutable state models for players, Pokemon, missions and rooms.

Models are frozen Pydantic models. Transitions build new instances with
model_copy(update=...); nothing is mutated in place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pokecatch.logic.enums import PlayerRole, RoomPhase


class Player(BaseModel):
    """
    A player in a room.

    Leaders and participants share this one record; the role tag tells
    them apart.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    role: PlayerRole = PlayerRole.PARTICIPANT
    has_played: bool = False

    @property
    def is_leader(self) -> bool:
        return self.role == PlayerRole.LEADER


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    location: str


class MissionState(BaseModel):
    """
    A timed mission during which every player tries to catch one Pokemon.

    start_time_ms and end_time_ms stay None until the mission starts.
    results maps player id to catch outcome once the mission is resolved.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    pokemon: Pokemon
    duration_ms: int = 10000
    start_time_ms: int | None = None
    end_time_ms: int | None = None
    resolved: bool = False
    results: dict[str, bool] = Field(default_factory=dict)

    @property
    def started(self) -> bool:
        return self.start_time_ms is not None


class RoomState(BaseModel):
    """
    A room: a leader, a roster capped at max_players, a join window and one mission.

    The leader is always players[0].
    """

    model_config = ConfigDict(frozen=True)

    id: str
    leader_id: str
    players: tuple[Player, ...]
    max_players: int
    mission: MissionState
    join_window_ms: int = 5000
    created_at_ms: int
    join_deadline_ms: int
    is_join_open: bool = True
    phase: RoomPhase = RoomPhase.OPEN

    @property
    def leader(self) -> Player:
        return next(p for p in self.players if p.id == self.leader_id)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def player_names(self) -> list[str]:
        return [p.name for p in self.players]

    @property
    def is_full(self) -> bool:
        return self.player_count >= self.max_players

    def has_player_named(self, name: str) -> bool:
        return any(p.name == name for p in self.players)
