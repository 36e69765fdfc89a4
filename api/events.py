# api/events.py
from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from analytics.event_logger import EventLogger, default_event_logger
from analytics.event_payload import AnalyticsContext, CartLine
from api.menu import load_snapshot_or_502, get_catalog_repo
from domain.kiosk.catalog_repo import CatalogRepo
from models.api_models import CartLineIn, EventRequest, EventResponse, Meta
from session.context import OmniContext, StoreInfo, parse_store_info
from utils.logging import log_event

router = APIRouter()

_event_logger: Optional[EventLogger] = None


def get_event_logger() -> EventLogger:
    # one gate per process so counters survive between requests
    global _event_logger
    if _event_logger is None:
        _event_logger = default_event_logger()
    return _event_logger


def _analytics_context(meta: Meta, store: StoreInfo) -> AnalyticsContext:
    return AnalyticsContext(
        session_id=meta.session_id,
        language=meta.language,
        browser_language=meta.browser_language,
        store=store,
        city=meta.city,
        omni=OmniContext.build(weather=meta.weather, temp=meta.temp, time_of_day=meta.time_of_day),
    )


def _resolve_cart_line(line: CartLineIn, catalog: CatalogRepo, store: StoreInfo, trace_id: str) -> CartLine:
    snapshot = load_snapshot_or_502(catalog, store.number, trace_id)
    group = snapshot.find(line.group_id)
    if group is None:
        raise HTTPException(status_code=404, detail="group_not_found")
    variant = next((v for v in group.variants if v.code == line.variant_code), None)
    if variant is None:
        raise HTTPException(status_code=404, detail="variant_not_found")

    addons = [(a.name.strip(), a.price) for a in line.addons if a.name.strip()]

    return CartLine(
        variant=variant,
        group=group,
        size=line.size,
        sweetness=line.sweetness,
        addons=addons,
        price=line.price,
        quantity=line.quantity,
    )


@router.post("/events", response_model=EventResponse)
def events(
    req: EventRequest,
    catalog: CatalogRepo = Depends(get_catalog_repo),
    event_logger: EventLogger = Depends(get_event_logger),
):
    trace_id = uuid.uuid4().hex[:12]
    meta = req.meta
    store = parse_store_info(meta.br, meta.pos)

    log_event(trace_id, "request_in", {
        "path": "/events",
        "action": req.action,
        "session_id": meta.session_id,
        "has_cart_line": req.cart_line is not None,
    })

    data: Dict[str, Any] = {}
    if req.ai_followed:
        data["ai_followed"] = req.ai_followed
    if req.durations_ms:
        data["durations_ms"] = req.durations_ms
    if req.feedback:
        data["feedback"] = req.feedback.model_dump()
    if req.cart_line:
        data["cart_line"] = _resolve_cart_line(req.cart_line, catalog, store, trace_id)

    result = event_logger.log(req.action, _analytics_context(meta, store), data, trace_id=trace_id)
    body = EventResponse(trace_id=trace_id, ok=result.ok, reason=result.reason)
    if not result.ok:
        return JSONResponse(status_code=429, content=body.model_dump())
    return body
