import threading

import pytest

from session.counter_store import InMemoryCounterStore, RedisCounterStore


class FakeRedis:
    """Just the get/set/incr subset RedisCounterStore uses (decode_responses=True)."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        return True

    def incr(self, key):
        self.data[key] = str(int(self.data.get(key) or 0) + 1)
        return int(self.data[key])


@pytest.fixture(params=["memory", "redis"])
def store(request):
    if request.param == "memory":
        return InMemoryCounterStore()
    return RedisCounterStore(client=FakeRedis())


def test_recent_prunes_old_stamps(store):
    for ts in (100.0, 110.0, 120.0):
        store.append("k", ts)
    assert store.recent("k", 105.0) == [110.0, 120.0]
    # pruned on read
    assert store.recent("k", 0.0) == [110.0, 120.0]


def test_recent_is_strictly_newer(store):
    store.append("k", 100.0)
    assert store.recent("k", 100.0) == []


def test_unknown_keys_are_empty(store):
    assert store.recent("missing", 0.0) == []
    assert store.count("missing") == 0


def test_counters(store):
    assert store.increment("q") == 1
    assert store.increment("q") == 2
    assert store.count("q") == 2


def test_redis_keys_are_prefixed():
    fake = FakeRedis()
    store = RedisCounterStore(client=fake, key_prefix="t:")
    store.append("RL:x", 1.0)
    store.increment("DQ:x")
    assert set(fake.data) == {"t:RL:x", "t:DQ:x"}


def test_redis_corrupt_list_reads_empty():
    fake = FakeRedis()
    fake.data["barista:gate:k"] = "{not json"
    store = RedisCounterStore(client=fake)
    assert store.recent("k", 0.0) == []
    store.append("k", 5.0)
    assert store.recent("k", 0.0) == [5.0]


def test_in_memory_store_is_thread_safe():
    store = InMemoryCounterStore()

    def bump():
        for _ in range(500):
            store.increment("n")

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.count("n") == 4000
