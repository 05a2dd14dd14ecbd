"""
Player and leader construction plus the per-player catch action.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pokecatch.logic.enums import PlayerRole
from pokecatch.logic.exceptions import InvalidPlayerNameError
from pokecatch.logic.ids import generate_id
from pokecatch.logic.notices import CatchResultNotice
from pokecatch.logic.rng import roll_catch
from pokecatch.logic.state import Player

if TYPE_CHECKING:
    import random

    from pokecatch.logic.types import TransitionContext


class CatchOutcome(NamedTuple):
    """Result of a catch attempt: the coin flip and the notice reporting it."""

    success: bool
    notice: CatchResultNotice


def normalize_player_name(name: str | None) -> str:
    """Return the trimmed name, or raise if nothing is left."""
    stripped = (name or "").strip()
    if not stripped:
        raise InvalidPlayerNameError("Player name cannot be empty")
    return stripped


def create_player(name: str | None, *, ctx: TransitionContext) -> Player:
    """Create a participant with a fresh id."""
    return Player(
        id=generate_id(ctx.now_ms, ctx.rng),
        name=normalize_player_name(name),
        role=PlayerRole.PARTICIPANT,
    )


def create_leader(name: str | None, *, ctx: TransitionContext) -> Player:
    """
    Create the room leader.

    The leader shares every capability with participants; the
    leader-assigned notice is emitted when the leader's room is created.
    """
    return Player(
        id=generate_id(ctx.now_ms, ctx.rng),
        name=normalize_player_name(name),
        role=PlayerRole.LEADER,
    )


def catch_pokemon(player: Player, rng: random.Random, *, mission_id: str) -> CatchOutcome:
    """Attempt a catch. Has no state effect; the caller records the outcome."""
    success = roll_catch(rng)
    return CatchOutcome(
        success=success,
        notice=CatchResultNotice(mission_id=mission_id, player_name=player.name, success=success),
    )


def mark_as_played(player: Player) -> Player:
    if player.has_played:
        return player
    return player.model_copy(update={"has_played": True})
