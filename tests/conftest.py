from datetime import datetime, timezone

import pytest

from domain.kiosk.catalog_repo import ProductRecord
from domain.kiosk.timewindow import DateRangeEvaluator

# Wednesday 2025-10-15, 10:00 in Bangkok
FIXED_UTC = datetime(2025, 10, 15, 3, 0, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_UTC


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def evaluator(clock):
    return DateRangeEvaluator(clock=clock)


@pytest.fixture
def make_record():
    """
    Factory for catalog rows that pass every display filter unless told otherwise.
    """
    def _make(**kw) -> ProductRecord:
        fields = dict(
            code="P001",
            name_en="Latte",
            name_th="ลาเต้",
            common_name_th="ลาเต้",
            category="Coffee",
            drink_type="Hot",
            price=45.0,
            brand="AllCafe",
            image_url="https://img.example/latte.png",
        )
        fields.update(kw)
        return ProductRecord(**fields)

    return _make
