import pytest

from prlens.infra.cache import MemoryCache, reset_default_cache
from tests.fakes import FakeClock, FakeLogger
from tests.fakes.pull_requests import BASE_TIME
from tests.settings import get_test_settings


@pytest.fixture
def clock():
    return FakeClock(BASE_TIME)


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def cache(clock, logger):
    return MemoryCache(clock, logger=logger)


@pytest.fixture(autouse=True)
def _fresh_default_cache():
    reset_default_cache()
    yield
    reset_default_cache()


@pytest.fixture
def test_settings():
    return get_test_settings()
