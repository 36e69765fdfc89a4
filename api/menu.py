# api/menu.py
from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from domain.kiosk.catalog_http import CatalogFetchError
from domain.kiosk.catalog_repo import CatalogRepo
from domain.kiosk.grouping import CatalogSnapshot, ProductGroup
from domain.kiosk.policy import build_recommendation_card, default_catalog_repo, load_menu
from models.api_models import GroupCard, MenuResponse, RecommendRequest, RecommendResponse
from session.context import OmniContext, parse_store_info
from utils.lang_utils import normalize_language_key
from utils.logging import log_event
from utils.trace_utils import snapshot_summary

router = APIRouter()


def get_catalog_repo() -> CatalogRepo:
    return default_catalog_repo()


def _exc_info(e: Exception) -> dict:
    return {"error_type": type(e).__name__, "error_message": str(e)}


def load_snapshot_or_502(catalog: CatalogRepo, store_number: Optional[str], trace_id: str) -> CatalogSnapshot:
    try:
        return load_menu(catalog=catalog, store_number=store_number, trace_id=trace_id)
    except CatalogFetchError as e:
        log_event(trace_id, "menu_load_fail", _exc_info(e))
        raise HTTPException(status_code=502, detail="catalog_unavailable")


def _card(group: ProductGroup, lang: str) -> GroupCard:
    return GroupCard(
        id=group.id,
        name=group.display_name(lang),
        category=group.category,
        brand=group.brand,
        min_price=group.min_price,
        original_min_price=group.original_min_price,
        image=group.image,
        description=group.description,
        tags=list(group.tags),
        variant_count=len(group.variants),
    )


@router.get("/menu", response_model=MenuResponse)
def menu(store: Optional[str] = None, lang: Optional[str] = None, catalog: CatalogRepo = Depends(get_catalog_repo)):
    trace_id = uuid.uuid4().hex[:12]
    language = normalize_language_key(lang)
    store_info = parse_store_info(store)

    log_event(trace_id, "request_in", {"path": "/menu", "store": store, "language": language})

    snapshot = load_snapshot_or_502(catalog, store_info.number, trace_id)
    log_event(trace_id, "menu_ready", snapshot_summary(snapshot))

    return MenuResponse(
        trace_id=trace_id,
        language=language,
        store_number=store_info.number,
        groups=[_card(g, language) for g in snapshot.groups],
        highlight_id=snapshot.highlight.id if snapshot.highlight else None,
    )


@router.post("/menu/recommendation", response_model=RecommendResponse)
def recommendation(req: RecommendRequest, catalog: CatalogRepo = Depends(get_catalog_repo)):
    trace_id = uuid.uuid4().hex[:12]
    meta = req.meta
    store = parse_store_info(meta.br, meta.pos)

    log_event(trace_id, "request_in", {
        "path": "/menu/recommendation",
        "group_id": req.group_id,
        "session_id": meta.session_id,
        "language": meta.language,
    })

    snapshot = load_snapshot_or_502(catalog, store.number, trace_id)
    group = snapshot.find(req.group_id)
    if group is None:
        raise HTTPException(status_code=404, detail="group_not_found")

    context = OmniContext.build(weather=meta.weather, temp=meta.temp, time_of_day=meta.time_of_day)
    card = build_recommendation_card(group, context, meta.language, trace_id=trace_id)
    return RecommendResponse(trace_id=trace_id, **card)
