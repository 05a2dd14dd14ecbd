"""
Shared value types passed between the reducer and the session layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random


@dataclass(frozen=True)
class TransitionContext:
    """Inputs a transition may read besides the state: the current time and the random source."""

    now_ms: int
    rng: random.Random
