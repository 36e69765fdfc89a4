# domain/kiosk/recommendation.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from domain.kiosk.catalog_repo import ProductRecord
from domain.kiosk.grouping import ProductGroup
from domain.kiosk.knowledge import KnowledgeBase, default_knowledge_base
from domain.kiosk.timewindow import Clock
from domain.kiosk.verticals.cafe import KIOSK_VERTICAL_CAFE
from session.context import OmniContext, current_time_bucket


@dataclass(frozen=True)
class RecommendationResult:
    """
    None on an axis means "nothing to recommend": the group offers a single
    option (or none) there, which is different from a recommended choice.
    """
    type: Optional[str] = None
    size: Optional[str] = None
    sweetness: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


def _time_of_day(context: Optional[OmniContext], clock: Optional[Clock]) -> str:
    tod = (context.time_of_day if context else "") or ""
    return tod.strip().lower() or current_time_bucket(clock)


def _type_scores(time_of_day: str, temp: Optional[float], vertical: Dict[str, Any]) -> Dict[str, int]:
    cfg = vertical["type_scoring"]
    scores = dict(cfg["baseline"])

    def apply(adjust: Dict[str, int]) -> None:
        for t, delta in adjust.items():
            if t in scores:
                scores[t] += delta

    apply(cfg["by_time_of_day"].get(time_of_day, {}))

    if temp is not None:
        if temp >= cfg["hot_weather"]["min_temp"]:
            apply(cfg["hot_weather"]["adjust"])
        elif temp <= cfg["cool_weather"]["max_temp"]:
            apply(cfg["cool_weather"]["adjust"])
    return scores


def recommend_type(
    group: ProductGroup,
    time_of_day: str,
    temp: Optional[float] = None,
    vertical: Dict[str, Any] = KIOSK_VERTICAL_CAFE,
) -> Optional[str]:
    types = [t for t in group.types if t]
    if len(types) == 1:
        return types[0]
    if not types:
        return None

    scores = _type_scores(time_of_day, temp, vertical)
    best: Optional[str] = None
    best_score: Optional[int] = None
    for t in types:
        sc = scores.get(t)
        # unscored types (e.g. "smoothie") never win
        if sc is None:
            continue
        if best_score is None or sc < best_score:
            best, best_score = t, sc
    return best


def _variants_for_type(group: ProductGroup, drink_type: Optional[str]) -> List[ProductRecord]:
    if not drink_type:
        return list(group.variants)
    return [v for v in group.variants if v.drink_type.lower() == drink_type]


def _size_rank(size: str, order: List[str]) -> int:
    # unknown sizes rank -1 and therefore sort ahead of "S"
    return order.index(size) if size in order else -1


def recommend_size(
    variants: List[ProductRecord],
    time_of_day: str,
    vertical: Dict[str, Any] = KIOSK_VERTICAL_CAFE,
) -> Optional[str]:
    sizes: List[str] = []
    for v in variants:
        for s in v.sizes:
            if s not in sizes:
                sizes.append(s)
    if len(sizes) <= 1:
        return None

    order = vertical["size_order"]
    ranked = sorted(sizes, key=lambda s: _size_rank(s, order))
    if time_of_day in vertical["small_size_buckets"]:
        return ranked[0]
    return ranked[-1]


def recommend_sweetness(
    group: ProductGroup,
    representative: Optional[ProductRecord],
    time_of_day: str,
    language: str,
    knowledge: KnowledgeBase,
    vertical: Dict[str, Any] = KIOSK_VERTICAL_CAFE,
) -> Optional[str]:
    if representative is None:
        return None
    options = representative.sweetness_options
    if len(options) <= 1:
        return None

    cfg = vertical["sweetness"]

    def first_offered(prefs: List[str]) -> Optional[str]:
        for p in prefs:
            if p in options:
                return p
        return None

    entry = knowledge.lookup(group.name_key)
    if entry and entry.has_profile(cfg["dessert_profile"]):
        pick = first_offered(cfg["dessert_pick"])
    elif language in cfg["western_languages"]:
        pick = first_offered(cfg["western_pick"])
    elif time_of_day == "morning":
        pick = first_offered(cfg["morning_pick"])
    else:
        pick = first_offered(cfg["default_pick"])

    if pick:
        return pick
    return cfg["fallback"] if cfg["fallback"] in options else options[0]


def recommend(
    group: ProductGroup,
    context: Optional[OmniContext],
    language: str,
    *,
    knowledge: Optional[KnowledgeBase] = None,
    clock: Optional[Clock] = None,
) -> RecommendationResult:
    """
    Suggest type, then size, then sweetness for one drink group.

    Pure given its inputs; the clock is only read when the context carries
    no time-of-day bucket.
    """
    if group is None or not group.variants:
        return RecommendationResult()

    kb = knowledge if knowledge is not None else default_knowledge_base()
    tod = _time_of_day(context, clock)
    temp = context.temp if context else None
    lang = (language or "").strip().lower()

    drink_type = recommend_type(group, tod, temp)
    variants = _variants_for_type(group, drink_type)
    size = recommend_size(variants, tod)

    representative = variants[0] if variants else group.variants[0]
    sweetness = recommend_sweetness(group, representative, tod, lang, kb)

    return RecommendationResult(type=drink_type, size=size, sweetness=sweetness)
