# analytics/event_payload.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from domain.kiosk.catalog_repo import ProductRecord
from domain.kiosk.grouping import ProductGroup
from domain.kiosk.promotion import is_promotion_active, promotion_discount
from domain.kiosk.timewindow import Clock, DateRangeEvaluator
from session.context import OmniContext, StoreInfo, event_timestamp
from utils.lang_utils import normalize_browser_lang

ORDER_CONFIRMED = "ORDER_CONFIRMED"
NONE_TEXT = "None"


@dataclass
class AnalyticsContext:
    """Who/where an event came from. Filled by the session layer."""
    session_id: Optional[str]
    language: str
    browser_language: Optional[str] = None
    store: StoreInfo = field(default_factory=StoreInfo)
    city: Optional[str] = None
    omni: Optional[OmniContext] = None


@dataclass
class CartLine:
    variant: ProductRecord
    group: ProductGroup
    size: str = ""
    sweetness: str = ""
    addons: List[Tuple[str, float]] = field(default_factory=list)
    price: float = 0.0
    quantity: int = 1


def _fmt(n: float, digits: int = 2) -> str:
    return f"{n:.{digits}f}"


def _product_fields(line: CartLine, evaluator: Optional[DateRangeEvaluator]) -> Dict[str, str]:
    v = line.variant
    promo = is_promotion_active(v, evaluator) and v.promotion_price is not None
    discount = promotion_discount(v, evaluator) if promo else 0.0
    return {
        "Category": line.group.category or "",
        # leading quote keeps the sheet from eating zeros
        "Product_Code": f"'{v.code}'" if v.code else "",
        "Uniqcode": v.uniq_code,
        "Name_TH": v.name_th,
        "Name_EN": v.name_en,
        "Type": v.drink_type,
        "Sizes": line.size,
        "Sweetness": f"{line.sweetness}%" if line.sweetness else NONE_TEXT,
        "Add_ons": ", ".join(f"{name} ({price:g})" for name, price in line.addons) if line.addons else NONE_TEXT,
        "Price": f"{line.price:g}",
        "Quantity": str(line.quantity or 1),
        "PromotionUsed": "Yes" if promo else "No",
        "PromotionDiscount_Baht": _fmt(discount) if discount > 0 else "0.00",
    }


def build_event_fields(
    action: str,
    ctx: AnalyticsContext,
    data: Optional[Dict[str, Any]] = None,
    *,
    clock: Optional[Clock] = None,
    evaluator: Optional[DateRangeEvaluator] = None,
) -> Dict[str, str]:
    """
    Flat form fields for the analytics sheet.

    data keys understood:
      ai_followed      -> AIRecommendationFollowed
      cart_line        -> product columns (CartLine)
      durations_ms     -> {"menu", "customization", "total"} for ORDER_CONFIRMED
      feedback         -> {"type": "like"|"dislike", "message": str}
    """
    data = data or {}
    ts = event_timestamp(clock)

    fields: Dict[str, str] = {
        "Date": ts.strftime("%Y-%m-%d"),
        "Time": ts.strftime("%H:%M:%S"),
        "SessionId": ctx.session_id or "N/A",
        "LanguageAtEvent": ctx.language,
        "BrowserLanguage": normalize_browser_lang(ctx.browser_language),
        "StoreNumber": ctx.store.number or "",
        "StoreZone": ctx.store.zone or "",
        "ApproxLocation": ctx.city or "Unknown",
    }

    if ctx.omni is not None:
        if ctx.omni.temp is not None:
            fields["TemperatureAtEvent_C"] = _fmt(ctx.omni.temp, 1)
        if ctx.omni.weather:
            fields["WeatherCondition"] = ctx.omni.weather

    if data.get("ai_followed"):
        fields["AIRecommendationFollowed"] = str(data["ai_followed"])

    line = data.get("cart_line")
    if isinstance(line, CartLine):
        fields.update(_product_fields(line, evaluator))

    durations = data.get("durations_ms")
    if action == ORDER_CONFIRMED and isinstance(durations, dict):
        fields["TimeOnMenu_s"] = _fmt(float(durations.get("menu") or 0) / 1000)
        fields["TimeOnCustomization_s"] = _fmt(float(durations.get("customization") or 0) / 1000)
        fields["TotalDuration_s"] = _fmt(float(durations.get("total") or 0) / 1000)

    feedback = data.get("feedback")
    if isinstance(feedback, dict):
        fields["Like" if feedback.get("type") == "like" else "Not Like"] = "1"
        fields["Improve"] = str(feedback.get("message") or "")

    return fields
