# session/rate_limit.py
from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence, Tuple

from session.counter_store import CounterStore
from utils.logging import log_event

# (window seconds, max events inside the window)
RATE_LIMIT_BUCKETS: Tuple[Tuple[int, int], ...] = ((30, 3), (600, 10))
DAILY_QUOTA_DEFAULT = 30

REASON_RATE_LIMITED = "rateLimited"
REASON_DAILY_QUOTA = "dailyQuotaExceeded"


@dataclass(frozen=True)
class GateResult:
    ok: bool
    reason: Optional[str] = None


ALLOWED = GateResult(ok=True)


class RateQuotaGate:
    """
    Decides whether an analytics event for (session, action) may go out.
    Rejections are results, never exceptions.
    """

    def __init__(
        self,
        store: CounterStore,
        buckets: Sequence[Tuple[int, int]] = RATE_LIMIT_BUCKETS,
        daily_quota: int = DAILY_QUOTA_DEFAULT,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.store = store
        self.buckets = tuple(buckets)
        self.daily_quota = daily_quota
        self.clock = clock or time.time

    def check_rate_limit(self, session_id: str, action: str, trace_id: Optional[str] = None) -> GateResult:
        if not session_id:
            return ALLOWED

        now = self.clock()
        key_base = f"RL:{action}:{session_id}"

        for window_sec, limit in self.buckets:
            key = f"{key_base}:{window_sec}"
            recent = self.store.recent(key, now - window_sec)
            if len(recent) >= limit:
                # buckets after this one are left untouched
                if trace_id:
                    log_event(trace_id, "rate_limited", {
                        "action": action,
                        "window_sec": window_sec,
                        "limit": limit,
                    })
                return GateResult(ok=False, reason=REASON_RATE_LIMITED)
            self.store.append(key, now)
        return ALLOWED

    def check_daily_quota(
        self,
        session_id: str,
        city: Optional[str],
        action: str,
        max_per_day: Optional[int] = None,
        trace_id: Optional[str] = None,
    ) -> GateResult:
        if not session_id or not city:
            return ALLOWED

        cap = self.daily_quota if max_per_day is None else max_per_day
        day = datetime.fromtimestamp(self.clock(), tz=timezone.utc).strftime("%Y%m%d")
        key = f"DQ:{action}:{session_id}:{city}:{day}"

        if self.store.count(key) >= cap:
            if trace_id:
                log_event(trace_id, "daily_quota_exceeded", {"action": action, "city": city, "cap": cap})
            return GateResult(ok=False, reason=REASON_DAILY_QUOTA)

        self.store.increment(key)
        return ALLOWED

    def check(
        self,
        session_id: str,
        action: str,
        city: Optional[str] = None,
        trace_id: Optional[str] = None,
    ) -> GateResult:
        rl = self.check_rate_limit(session_id, action, trace_id=trace_id)
        if not rl.ok:
            return rl
        return self.check_daily_quota(session_id, city, action, trace_id=trace_id)
