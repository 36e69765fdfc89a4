# domain/kiosk/promotion.py
from __future__ import annotations

from typing import Optional

from domain.kiosk.catalog_repo import ProductRecord
from domain.kiosk.timewindow import DateRangeEvaluator, default_evaluator


def is_promotion_active(product: ProductRecord, evaluator: Optional[DateRangeEvaluator] = None) -> bool:
    """
    A promotion is live only when all three hold, checked in this order:
      1. the promotion price cell is filled in
      2. today is inside the promotion window
      3. today's weekday is listed, if a weekday list is given
    """
    if not product.promotion_price_raw.strip():
        return False

    ev = evaluator or default_evaluator()
    if not ev.is_in_range(product.promotion_start, product.promotion_end):
        return False

    days = product.promotion_days.strip()
    if not days:
        return True

    allowed = [d.strip().lower() for d in days.split(",")]
    return ev.weekday().lower() in allowed


def effective_price(product: ProductRecord, evaluator: Optional[DateRangeEvaluator] = None) -> Optional[float]:
    """
    Price the customer pays right now: the promotion price when active and
    readable, otherwise the regular price.
    """
    if is_promotion_active(product, evaluator):
        promo = product.promotion_price
        if promo is not None:
            return promo
    return product.price


def promotion_discount(product: ProductRecord, evaluator: Optional[DateRangeEvaluator] = None) -> float:
    if product.price is None or not is_promotion_active(product, evaluator):
        return 0.0
    promo = product.promotion_price
    if promo is None:
        return 0.0
    return max(product.price - promo, 0.0)
