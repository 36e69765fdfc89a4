# utils/trace_utils.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from domain.kiosk.grouping import CatalogSnapshot, ProductGroup
    from domain.kiosk.recommendation import RecommendationResult
    from session.context import OmniContext


def group_summary(group: "ProductGroup") -> Dict[str, Any]:
    """
    Log-sized view of a group: no images, no descriptions.
    """
    return {
        "id": group.id,
        "variants": len(group.variants),
        "types": group.types,
        "min_price": group.min_price,
        "original_min_price": group.original_min_price,
    }


def snapshot_summary(snapshot: "CatalogSnapshot", max_groups: int = 20) -> Dict[str, Any]:
    groups = snapshot.groups
    out: Dict[str, Any] = {
        "group_count": len(groups),
        "highlight_id": snapshot.highlight.id if snapshot.highlight else None,
        "groups": [group_summary(g) for g in groups[:max_groups]],
    }
    if len(groups) > max_groups:
        out["groups_truncated"] = True
    return out


def recommendation_summary(
    group: "ProductGroup",
    context: Optional["OmniContext"],
    language: str,
    result: "RecommendationResult",
) -> Dict[str, Any]:
    return {
        "group": group_summary(group),
        "language": language,
        "context": {
            "time_of_day": context.time_of_day if context else None,
            "temp": context.temp if context else None,
            "weather": context.weather if context else None,
        },
        "result": result.as_dict(),
    }
