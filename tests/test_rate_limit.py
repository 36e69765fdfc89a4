"""
Sliding-window rate limit and per-city daily quota.
"""
from session.counter_store import InMemoryCounterStore
from session.rate_limit import REASON_DAILY_QUOTA, REASON_RATE_LIMITED, RateQuotaGate

# 2025-10-15 03:00:00 UTC
T0 = 1760497200.0


class FakeClock:
    def __init__(self, now=T0):
        self.now = now

    def __call__(self):
        return self.now


def _gate(**kw):
    clock = FakeClock()
    store = InMemoryCounterStore()
    return RateQuotaGate(store, clock=clock, **kw), store, clock


def test_empty_session_is_always_allowed():
    gate, _, _ = _gate()
    for _ in range(20):
        assert gate.check("", "CLICK", city="Bangkok").ok


def test_short_window_allows_three_then_blocks():
    gate, _, clock = _gate()
    for _ in range(3):
        assert gate.check_rate_limit("s1", "CLICK").ok
        clock.now += 1

    blocked = gate.check_rate_limit("s1", "CLICK")
    assert not blocked.ok
    assert blocked.reason == REASON_RATE_LIMITED

    # the window slides past the first three
    clock.now = T0 + 31
    assert gate.check_rate_limit("s1", "CLICK").ok


def test_actions_and_sessions_are_counted_separately():
    gate, _, _ = _gate()
    for _ in range(3):
        gate.check_rate_limit("s1", "CLICK")
    assert not gate.check_rate_limit("s1", "CLICK").ok
    assert gate.check_rate_limit("s1", "ADD_TO_CART").ok
    assert gate.check_rate_limit("s2", "CLICK").ok


def test_long_window_blocks_eleventh_and_short_bucket_keeps_its_stamp():
    gate, store, clock = _gate()
    for i in range(10):
        clock.now = T0 + i * 15
        assert gate.check_rate_limit("s1", "CLICK").ok

    clock.now = T0 + 150
    result = gate.check_rate_limit("s1", "CLICK")
    assert result.reason == REASON_RATE_LIMITED

    # the 30s bucket was recorded before the 600s bucket said no
    assert T0 + 150 in store.recent("RL:CLICK:s1:30", T0 + 120)
    assert len(store.recent("RL:CLICK:s1:600", T0 + 150 - 600)) == 10


def test_daily_quota_caps_per_city_and_day():
    gate, store, clock = _gate(buckets=(), daily_quota=2)
    assert gate.check_daily_quota("s1", "Bangkok", "VIEW").ok
    assert gate.check_daily_quota("s1", "Bangkok", "VIEW").ok

    over = gate.check_daily_quota("s1", "Bangkok", "VIEW")
    assert not over.ok
    assert over.reason == REASON_DAILY_QUOTA
    assert store.count("DQ:VIEW:s1:Bangkok:20251015") == 2

    assert gate.check_daily_quota("s1", "Chiang Mai", "VIEW").ok
    assert gate.check_daily_quota("s1", "Bangkok", "VIEW", max_per_day=5).ok

    clock.now = T0 + 86400
    assert gate.check_daily_quota("s1", "Bangkok", "VIEW").ok


def test_daily_quota_skipped_without_city():
    gate, store, _ = _gate(buckets=(), daily_quota=1)
    for _ in range(5):
        assert gate.check_daily_quota("s1", None, "VIEW").ok
        assert gate.check_daily_quota("s1", "", "VIEW").ok


def test_rate_limit_runs_before_quota():
    gate, store, _ = _gate(daily_quota=100)
    for _ in range(3):
        assert gate.check("s1", "CLICK", city="Bangkok").ok

    result = gate.check("s1", "CLICK", city="Bangkok")
    assert result.reason == REASON_RATE_LIMITED
    # a rate-limited event does not use up quota
    assert store.count("DQ:CLICK:s1:Bangkok:20251015") == 3


def test_default_daily_cap_is_thirty():
    gate, _, _ = _gate(buckets=())
    results = [gate.check_daily_quota("s1", "Bangkok", "VIEW") for _ in range(31)]
    assert all(r.ok for r in results[:30])
    assert results[30].reason == REASON_DAILY_QUOTA
