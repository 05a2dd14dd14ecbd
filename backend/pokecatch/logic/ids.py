"""Identifier generation: millisecond timestamp followed by a base-36 suffix."""

import random
import string

ID_SUFFIX_LENGTH = 7
_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(now_ms: int, rng: random.Random) -> str:
    """Return an id unlikely to collide within one run; no cross-process guarantee."""
    suffix = "".join(rng.choice(_BASE36_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
    return f"{now_ms}{suffix}"
