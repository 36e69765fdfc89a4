# analytics/event_logger.py
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from analytics.event_payload import AnalyticsContext, build_event_fields
from analytics.transport import BeaconTransport
from domain.kiosk.timewindow import Clock
from session.counter_store import CounterStore, InMemoryCounterStore, RedisCounterStore
from session.rate_limit import DAILY_QUOTA_DEFAULT, GateResult, RateQuotaGate
from utils.logging import log_event


class EventLogger:
    """
    Gate -> build -> send for one analytics event.
    The daily quota only applies when the city is known.
    """

    def __init__(self, gate: RateQuotaGate, transport: BeaconTransport, clock: Optional[Clock] = None):
        self.gate = gate
        self.transport = transport
        self.clock = clock

    def log(
        self,
        action: str,
        ctx: AnalyticsContext,
        data: Optional[Dict[str, Any]] = None,
        trace_id: Optional[str] = None,
    ) -> GateResult:
        if not ctx.session_id:
            return GateResult(ok=False, reason="noSession")

        result = self.gate.check(ctx.session_id, action, city=ctx.city, trace_id=trace_id)
        if not result.ok:
            return result

        fields = build_event_fields(action, ctx, data, clock=self.clock)
        self.transport.send(fields, trace_id=trace_id)
        log_event(trace_id, "analytics_event_sent", {"action": action, "field_keys": sorted(fields)})
        return result


# ----------------------------
# factories (env driven)
# ----------------------------

def default_counter_store() -> CounterStore:
    redis_url = os.getenv("BARISTA_REDIS_URL", "").strip()
    if redis_url:
        return RedisCounterStore(redis_url=redis_url)
    return InMemoryCounterStore()


def default_gate(store: Optional[CounterStore] = None) -> RateQuotaGate:
    try:
        quota = int(os.getenv("BARISTA_DAILY_QUOTA", str(DAILY_QUOTA_DEFAULT)))
    except ValueError:
        quota = DAILY_QUOTA_DEFAULT
    return RateQuotaGate(store or default_counter_store(), daily_quota=quota)


def default_event_logger() -> EventLogger:
    url = os.getenv("BARISTA_ANALYTICS_URL", "").strip()
    return EventLogger(default_gate(), BeaconTransport(url))
