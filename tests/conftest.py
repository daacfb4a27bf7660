import pytest

from pool_passport.codec import StateCodec
from pool_passport.models import Location
from pool_passport.storage import MemoryStore


def make_catalog(*ids):
    return [Location(id=pool_id, name=pool_id.upper(), lat=-33.85, lng=151.2) for pool_id in ids]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def codec(store):
    return StateCodec(store)


@pytest.fixture
def catalog():
    return make_catalog("a", "b", "c")
