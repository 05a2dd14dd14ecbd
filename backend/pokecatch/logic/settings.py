"""Centralized rule settings for a catch-game room."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_POKEMON_NAMES: tuple[str, ...] = (
    "Pikachu",
    "Gengar",
    "Fudin",
    "Charizard",
    "Jigglypuff",
    "Eevee",
    "Snorlax",
    "Mewtwo",
    "Dragonite",
)
DEFAULT_LOCATION = "Park"
DEFAULT_LEADER_NAME = "DefaultLeader"


class RoomSettings(BaseModel):
    """
    Timing and content rules for a room.

    Defaults reproduce the classic game: 5 second join window,
    10 second mission, one synthesized join per second.
    """

    model_config = ConfigDict(frozen=True)

    join_window_ms: int = Field(default=5000, ge=0)
    mission_duration_ms: int = Field(default=10000, ge=0)
    join_interval_ms: int = Field(default=1000, gt=0)
    location: str = DEFAULT_LOCATION
    pokemon_names: tuple[str, ...] = DEFAULT_POKEMON_NAMES
