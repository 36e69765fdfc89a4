# domain/kiosk/policy.py
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from domain.kiosk.catalog_http import HttpCatalogRepo
from domain.kiosk.catalog_repo import CatalogRepo
from domain.kiosk.grouping import CatalogSnapshot, ProductGroup, normalize_catalog
from domain.kiosk.knowledge import KnowledgeBase, default_knowledge_base
from domain.kiosk.recommendation import RecommendationResult, recommend
from domain.kiosk.timewindow import DateRangeEvaluator
from session.context import OmniContext
from utils.logging import log_event
from utils.trace_utils import recommendation_summary


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


# ----------------------------
# Repo factory (default)
# ----------------------------

def default_catalog_repo(url: Optional[str] = None) -> CatalogRepo:
    """
    Sheet-backed HTTP catalog.
    - url: argument, else env BARISTA_CATALOG_URL
    - retry count / delay: BARISTA_CATALOG_RETRIES / BARISTA_CATALOG_RETRY_DELAY
    """
    if not url:
        url = os.getenv("BARISTA_CATALOG_URL", "").strip()
    return HttpCatalogRepo(
        url=url,
        retries=int(_env_float("BARISTA_CATALOG_RETRIES", 3)),
        delay=_env_float("BARISTA_CATALOG_RETRY_DELAY", 1.0),
    )


# ----------------------------
# Menu + recommendation
# ----------------------------

def load_menu(
    *,
    catalog: Optional[CatalogRepo] = None,
    store_number: Optional[str] = None,
    evaluator: Optional[DateRangeEvaluator] = None,
    trace_id: Optional[str] = None,
) -> CatalogSnapshot:
    """
    Fetch the feed and turn it into display groups for one branch.
    Fetch errors propagate: there is no cached fallback menu.
    """
    catalog = catalog or default_catalog_repo()
    records = catalog.fetch_products(trace_id=trace_id)
    return normalize_catalog(records, store_number=store_number, evaluator=evaluator, trace_id=trace_id)


def build_recommendation_card(
    group: ProductGroup,
    context: Optional[OmniContext],
    language: str,
    *,
    knowledge: Optional[KnowledgeBase] = None,
    trace_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Recommendation plus whatever the knowledge table says about the drink.
    Missing knowledge just leaves the profile empty.
    """
    kb = knowledge if knowledge is not None else default_knowledge_base()
    result: RecommendationResult = recommend(group, context, language, knowledge=kb)
    entry = kb.lookup(group.name_key)

    card = {
        "group_id": group.id,
        "name": group.display_name(language),
        "recommendation": result.as_dict(),
        "knowledge": {
            "main_flavor": entry.main_flavor,
            "profile": list(entry.profile),
            "base": entry.base,
        } if entry else None,
    }

    if trace_id:
        log_event(trace_id, "recommendation_built", recommendation_summary(group, context, language, result))
    return card
