"""Typed domain exceptions for the catch game.

Validation failures subclass CatchValidationError. Illegal state
transitions raise InvalidTransitionError. Everything derives from
CatchGameError so the simulation driver can contain failures at a
single boundary.
"""


class CatchGameError(Exception):
    """Base exception for catch-game failures."""


class CatchValidationError(CatchGameError):
    """Input rejected at construction time (names, locations, room limits)."""


class InvalidPlayerNameError(CatchValidationError):
    """Player name is empty or whitespace-only."""


class InvalidPokemonError(CatchValidationError):
    """Pokemon name or location is empty."""


class InvalidRoomSettingsError(CatchValidationError):
    """Room limits are out of range (e.g. max_players below 1)."""


class InvalidSettingsError(CatchValidationError):
    """Rule settings cannot be used (e.g. an empty Pokemon list)."""


class InvalidTransitionError(CatchGameError):
    """Raised when an event is applied in a phase that does not accept it.

    Attributes:
        action: The transition that was attempted (e.g. "start_mission").
        phase: The phase the room or mission was in.
        reason: Human-readable explanation.

    """

    def __init__(self, *, action: str, phase: str, reason: str) -> None:
        self.action = action
        self.phase = phase
        self.reason = reason
        super().__init__(f"cannot {action} in phase {phase}: {reason}")


class PlayerAdditionError(CatchGameError):
    """Raised when the simulation driver fails to synthesize a joining player."""

    def __init__(self, player_name: str, reason: str) -> None:
        self.player_name = player_name
        self.reason = reason
        super().__init__(f"failed to add player {player_name!r}: {reason}")
