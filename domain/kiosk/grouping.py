# domain/kiosk/grouping.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from domain.kiosk.catalog_repo import ProductRecord
from domain.kiosk.promotion import effective_price
from domain.kiosk.timewindow import DateRangeEvaluator, default_evaluator
from utils.logging import log_event

HIGHLIGHT_TAG = "highlight"


@dataclass
class ProductGroup:
    """
    Display-level drink: every variant (type/size row) that shares
    brand + conceptual name + category.
    """
    id: str
    name_key: str
    category: str
    brand: str
    variants: List[ProductRecord] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    image: str = ""
    description: str = ""
    min_price: float = math.inf
    original_min_price: Optional[float] = None
    # feed row that opened the group; variants are re-sorted by price later
    name_source: Optional[ProductRecord] = None

    def display_name(self, lang: str) -> str:
        source = self.name_source or (self.variants[0] if self.variants else None)
        if source is None:
            return self.name_key
        return source.name_for(lang)

    @property
    def is_highlight(self) -> bool:
        return any(HIGHLIGHT_TAG in t.lower() for t in self.tags)

    @property
    def types(self) -> List[str]:
        out: List[str] = []
        for v in self.variants:
            t = v.drink_type.lower()
            if t not in out:
                out.append(t)
        return out


@dataclass
class CatalogSnapshot:
    groups: List[ProductGroup]
    highlight: Optional[ProductGroup] = None

    def find(self, group_id: str) -> Optional[ProductGroup]:
        for g in self.groups:
            if g.id == group_id:
                return g
        return None


def group_key(product: ProductRecord) -> str:
    return f"{product.brand}_{product.conceptual_name}_{product.category}"


def is_displayable(
    product: ProductRecord,
    *,
    store_number: Optional[str] = None,
    evaluator: Optional[DateRangeEvaluator] = None,
) -> bool:
    ev = evaluator or default_evaluator()
    if not ev.is_in_range(product.menu_start, product.menu_end):
        return False
    # incomplete rows are never shown
    if product.price is None or not product.image_url.strip():
        return False
    if store_number and store_number in product.hidden_at_branches:
        return False
    return True


def _resolve_prices(group: ProductGroup, evaluator: DateRangeEvaluator) -> None:
    lowest = math.inf
    lowest_regular = math.inf

    for v in group.variants:
        regular = v.price if v.price is not None else math.inf
        lowest_regular = min(lowest_regular, regular)

        price = effective_price(v, evaluator)
        lowest = min(lowest, price if price is not None else math.inf)

    group.min_price = lowest
    group.original_min_price = lowest_regular if lowest_regular > lowest else None


def group_products(
    products: Iterable[ProductRecord],
    evaluator: Optional[DateRangeEvaluator] = None,
) -> CatalogSnapshot:
    ev = evaluator or default_evaluator()
    groups: Dict[str, ProductGroup] = {}

    for p in products:
        key = group_key(p)
        g = groups.get(key)
        if g is None:
            g = ProductGroup(
                id=key,
                name_key=p.conceptual_name,
                category=p.category,
                brand=p.brand,
                image=p.image_url,
                description=p.description,
                name_source=p,
            )
            groups[key] = g

        g.variants.append(p)
        for t in p.tag_list:
            if t not in g.tags:
                g.tags.append(t)
        if not g.image.strip() and p.image_url.strip():
            g.image = p.image_url
        if not g.description.strip() and p.description.strip():
            g.description = p.description

    highlight: Optional[ProductGroup] = None
    ordered = list(groups.values())
    for g in ordered:
        # stable: equal prices keep feed order
        g.variants.sort(key=lambda v: v.price if v.price is not None else math.inf)
        _resolve_prices(g, ev)
        if highlight is None and g.is_highlight:
            highlight = g

    return CatalogSnapshot(groups=ordered, highlight=highlight)


def normalize_catalog(
    records: Iterable[ProductRecord],
    *,
    store_number: Optional[str] = None,
    evaluator: Optional[DateRangeEvaluator] = None,
    trace_id: Optional[str] = None,
) -> CatalogSnapshot:
    """
    Raw feed -> display groups.
    Filters out rows outside their menu window, rows without a readable
    price or an image, and rows hidden at the given branch, then groups
    and prices what is left.
    """
    ev = evaluator or default_evaluator()
    records = list(records)
    kept = [r for r in records if is_displayable(r, store_number=store_number, evaluator=ev)]
    snapshot = group_products(kept, ev)

    if trace_id:
        log_event(trace_id, "catalog_normalized", {
            "records_in": len(records),
            "records_kept": len(kept),
            "groups": len(snapshot.groups),
            "highlight_id": snapshot.highlight.id if snapshot.highlight else None,
            "store_number": store_number,
        })
    return snapshot
