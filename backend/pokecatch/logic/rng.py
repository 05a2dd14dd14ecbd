"""
Random number generation for catch outcomes, Pokemon selection and ids.

All randomness flows through a single random.Random instance created from
an optional hex seed. The same seed replays the same Pokemon, the same ids
and the same catch results, which keeps simulations reproducible in tests.
"""

import random
import secrets
from collections.abc import Sequence

from pokecatch.logic.exceptions import InvalidSettingsError

SEED_BYTES = 16
CATCH_SUCCESS_THRESHOLD = 0.5


def validate_seed_hex(seed_hex: str) -> None:
    """Validate that a seed string is the correct hex format.

    Enforces exact length (32 hex chars = 16 bytes) and valid hex characters.
    Raises TypeError for non-string input, ValueError for invalid format.
    """
    if not isinstance(seed_hex, str):
        raise TypeError(f"Seed must be a string, got {type(seed_hex).__name__}")
    expected_length = SEED_BYTES * 2
    if len(seed_hex) != expected_length:
        raise ValueError(f"Seed must be exactly {expected_length} hex characters, got {len(seed_hex)}")
    try:
        bytes.fromhex(seed_hex)
    except ValueError:
        raise ValueError("Seed contains invalid hex characters") from None


def generate_seed() -> str:
    """Generate a random seed as a hex string (32 chars / 128 bits)."""
    return secrets.token_bytes(SEED_BYTES).hex()


def create_rng(seed_hex: str | None) -> random.Random:
    """
    Create the random source for one simulation run.

    A None seed gives an unseeded generator; statistical quality of the
    stdlib Mersenne Twister is plenty for coin flips.
    """
    if seed_hex is None:
        return random.Random()  # noqa: S311
    validate_seed_hex(seed_hex)
    return random.Random(int(seed_hex, 16))  # noqa: S311


def roll_catch(rng: random.Random) -> bool:
    """Flip the catch coin: True with probability 0.5."""
    return rng.random() >= CATCH_SUCCESS_THRESHOLD


def pick_pokemon_name(rng: random.Random, names: Sequence[str]) -> str:
    """Pick one Pokemon name uniformly at random."""
    if not names:
        raise InvalidSettingsError("Pokemon name list must not be empty")
    return names[rng.randrange(len(names))]
