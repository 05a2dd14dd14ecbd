"""Console entry point for the catch-game simulation.

Usage:
    pokecatch
    pokecatch --max-players 3 --seed 00112233445566778899aabbccddeeff
    pokecatch --virtual-time --leader Ash
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from pokecatch.app.settings import SimulationSettings
from pokecatch.logic.exceptions import CatchGameError
from pokecatch.logic.rng import create_rng, generate_seed
from pokecatch.session.clock import MonotonicClock, VirtualClock
from pokecatch.session.simulation import simulate_game
from shared.logging import setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pokecatch.session.simulation import SimulationReport

logger = structlog.get_logger()

LOG_SEED_PREFIX_LENGTH = 8


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokecatch", description="Simulate a Pokemon catching game room.")
    parser.add_argument(
        "-n",
        "--max-players",
        type=int,
        default=None,
        help="room capacity including the leader (default: CATCH_MAX_PLAYERS or 5)",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="32 hex character seed for a reproducible run (default: CATCH_SEED or random)",
    )
    parser.add_argument(
        "--virtual-time",
        action="store_true",
        default=None,
        help="skip real waiting and run the timers on a virtual clock",
    )
    parser.add_argument(
        "--leader",
        default=None,
        help="leader name; skips the interactive prompt",
    )
    return parser


async def run(
    settings: SimulationSettings,
    *,
    seed: str,
    leader: str | None = None,
) -> SimulationReport | None:
    """Run one game with the configured clock and a generator seeded from seed."""
    rng = create_rng(seed)
    clock = VirtualClock() if settings.virtual_time else MonotonicClock()
    logger.info("simulation configured", seed=seed, virtual_time=settings.virtual_time)
    return await simulate_game(
        settings.max_players,
        settings=settings.to_room_settings(),
        clock=clock,
        rng=rng,
        prompt=(lambda _message: leader) if leader is not None else input,
        default_leader_name=settings.default_leader_name,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        key: value
        for key, value in {
            "max_players": args.max_players,
            "seed": args.seed,
            "virtual_time": args.virtual_time,
        }.items()
        if value is not None
    }
    try:
        settings = SimulationSettings(**overrides)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    seed = settings.seed or generate_seed()
    setup_logging(log_dir=settings.log_dir, run_label=seed[:LOG_SEED_PREFIX_LENGTH])

    try:
        report = asyncio.run(run(settings, seed=seed, leader=args.leader))
    except CatchGameError as e:
        logger.error("error starting game", error=str(e))  # noqa: TRY400
        return 1
    return 0 if report is not None else 1


if __name__ == "__main__":
    sys.exit(main())
