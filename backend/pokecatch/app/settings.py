"""Simulation runtime configuration via environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.sources.base import PydanticBaseSettingsSource

from pokecatch.logic.rng import validate_seed_hex
from pokecatch.logic.settings import DEFAULT_LEADER_NAME, DEFAULT_LOCATION, DEFAULT_POKEMON_NAMES, RoomSettings
from shared.validators import StringListEnvSettingsSource, parse_string_list


class SimulationSettings(BaseSettings):
    model_config = {"env_prefix": "CATCH_"}

    # Range is checked by room creation so a bad value is reported like any other game error.
    max_players: int = 5
    default_leader_name: str = Field(default=DEFAULT_LEADER_NAME, min_length=1)
    location: str = Field(default=DEFAULT_LOCATION, min_length=1)
    pokemon_names: list[str] = list(DEFAULT_POKEMON_NAMES)
    join_window_ms: int = Field(default=5000, ge=0)
    mission_duration_ms: int = Field(default=10000, ge=0)
    join_interval_ms: int = Field(default=1000, gt=0)
    seed: str | None = None
    log_dir: str | None = None
    virtual_time: bool = False

    @field_validator("pokemon_names", mode="before")
    @classmethod
    def validate_pokemon_names(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v)

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: str | None) -> str | None:
        if v is not None:
            validate_seed_hex(v)
        return v

    def to_room_settings(self) -> RoomSettings:
        return RoomSettings(
            join_window_ms=self.join_window_ms,
            mission_duration_ms=self.mission_duration_ms,
            join_interval_ms=self.join_interval_ms,
            location=self.location,
            pokemon_names=tuple(self.pokemon_names),
        )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, StringListEnvSettingsSource(settings_cls), dotenv_settings, file_secret_settings)
