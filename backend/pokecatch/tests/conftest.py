import pytest

from pokecatch.logic.players import create_leader, create_player
from pokecatch.logic.pokemon import create_pokemon
from pokecatch.logic.rng import create_rng
from pokecatch.logic.types import TransitionContext
from pokecatch.session.clock import VirtualClock
from pokecatch.session.room_session import RoomSession
from pokecatch.session.scheduler import EventScheduler
from pokecatch.tests.helpers import FIXED_SEED, START_MS


@pytest.fixture
def rng():
    return create_rng(FIXED_SEED)


@pytest.fixture
def clock():
    return VirtualClock(start_ms=START_MS)


@pytest.fixture
def ctx(rng):
    return TransitionContext(now_ms=START_MS, rng=rng)


@pytest.fixture
def leader(ctx):
    return create_leader("Oak", ctx=ctx)


@pytest.fixture
def pikachu():
    return create_pokemon("Pikachu", "Park")


@pytest.fixture
def make_player(ctx):
    def _make(name: str):
        return create_player(name, ctx=ctx)

    return _make


@pytest.fixture
def scheduler(clock):
    return EventScheduler(clock)


@pytest.fixture
def session(scheduler, rng):
    return RoomSession(scheduler, rng)
