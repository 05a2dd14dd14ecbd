"""Shared constants for catch-game tests."""

from pokecatch.logic.rng import SEED_BYTES

# A fixed seed for deterministic tests (32 hex chars = 16 bytes)
FIXED_SEED = "ab" * SEED_BYTES
START_MS = 1_700_000_000_000
