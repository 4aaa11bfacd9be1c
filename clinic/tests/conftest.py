import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _reset_throttle_counters():
    # Anonymous throttling keeps its counters in the cache
    cache.clear()
    yield
