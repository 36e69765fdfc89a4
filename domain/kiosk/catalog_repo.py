# domain/kiosk/catalog_repo.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from utils.lang_utils import LANGUAGE_KEYS

_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def _safe_str(x: Any) -> str:
    return x if isinstance(x, str) else "" if x is None else str(x)


def parse_number(x: Any) -> Optional[float]:
    """
    Lenient number read: the sheet sends prices as numbers or as text
    ("45", "45.00", "45 บาท"). The leading number wins, nothing else is guessed.
    """
    if isinstance(x, bool) or x is None:
        return None
    if isinstance(x, (int, float)):
        return float(x)
    m = _LEADING_NUMBER_RE.match(_safe_str(x))
    return float(m.group(1)) if m else None


def _number_text(x: Any) -> str:
    # 100 and 100.0 must both read "100" so sweetness options compare as text
    if isinstance(x, bool):
        return ""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return _safe_str(x).strip()


def _split_list(x: Any) -> Tuple[str, ...]:
    return tuple(p.strip() for p in _number_text(x).split(",") if p.strip())


@dataclass(frozen=True)
class ProductRecord:
    """
    One purchasable row of the catalog sheet, after coercion.
    """
    code: str
    name_en: str
    category: str
    drink_type: str = ""
    price: Optional[float] = None

    uniq_code: str = ""
    name_th: str = ""
    common_name_th: str = ""
    # per-language display names, keyed by LANGUAGE_KEYS ("jp", "zh", ...)
    names: Dict[str, str] = field(default_factory=dict)

    sizes: Tuple[str, ...] = ()
    sweetness: str = ""

    promotion_price_raw: str = ""
    promotion_start: str = ""
    promotion_end: str = ""
    promotion_days: str = ""

    menu_start: str = ""
    menu_end: str = ""
    hidden_at_branches: Tuple[str, ...] = ()

    brand: str = ""
    description: str = ""
    image_url: str = ""
    tags: str = ""

    @property
    def promotion_price(self) -> Optional[float]:
        return parse_number(self.promotion_price_raw)

    @property
    def size(self) -> str:
        return self.sizes[0] if self.sizes else ""

    @property
    def sweetness_options(self) -> List[str]:
        return [s.strip() for s in self.sweetness.split(",") if s.strip()]

    @property
    def tag_list(self) -> List[str]:
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    @property
    def conceptual_name(self) -> str:
        return self.common_name_th or self.name_en

    def name_for(self, lang: str) -> str:
        if lang == "th":
            return self.common_name_th or self.name_th or self.name_en
        return self.names.get(lang) or self.name_en

    @classmethod
    def from_raw(cls, row: Mapping[str, Any]) -> "ProductRecord":
        """
        Coerce a loosely typed sheet row (numbers and strings mixed freely)
        into a strict record. Unknown columns are ignored.
        """
        def s(key: str) -> str:
            return _number_text(row.get(key))

        names: Dict[str, str] = {}
        for lang in LANGUAGE_KEYS:
            v = s(f"Name_{lang.upper()}")
            if v:
                names[lang] = v

        return cls(
            code=s("Product_Code"),
            uniq_code=s("Uniqcode"),
            name_th=s("Name_TH"),
            common_name_th=s("Common_name_TH"),
            name_en=s("Name_EN"),
            names=names,
            category=s("Category"),
            drink_type=s("Type"),
            price=parse_number(row.get("Price")),
            sizes=_split_list(row.get("Sizes")),
            sweetness=s("Sweetness"),
            promotion_price_raw=s("Promotion_price"),
            promotion_start=s("Promotion_price_startdate"),
            promotion_end=s("Promotion_price_enddate"),
            promotion_days=s("special_day_conditions"),
            menu_start=s("Menu_startdate"),
            menu_end=s("Menu_enddate"),
            # column name is misspelled in the sheet
            hidden_at_branches=_split_list(row.get("special_conditon")),
            brand=s("Brand"),
            description=s("Description") or s("Descrpition"),
            image_url=s("Image_URL"),
            tags=s("Tags"),
        )


def coerce_rows(rows: Sequence[Any]) -> List[ProductRecord]:
    return [ProductRecord.from_raw(r) for r in rows if isinstance(r, Mapping)]


class CatalogRepo:
    """
    Catalog source interface.
    - production: the sheet-backed HTTP feed (HttpCatalogRepo)
    - tests/dev: InMemoryCatalogRepo
    Grouping and recommendation only see ProductRecord lists.
    """

    def fetch_products(self, *, trace_id: Optional[str] = None) -> List[ProductRecord]:
        raise NotImplementedError


class InMemoryCatalogRepo(CatalogRepo):
    def __init__(self, rows: Sequence[Any]):
        self._items = [r if isinstance(r, ProductRecord) else ProductRecord.from_raw(r) for r in rows]

    def fetch_products(self, *, trace_id: Optional[str] = None) -> List[ProductRecord]:
        return list(self._items)
