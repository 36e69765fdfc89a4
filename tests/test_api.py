"""
HTTP surface: FastAPI TestClient with the catalog and event logger swapped out.
"""
import pytest
from fastapi.testclient import TestClient

from analytics.event_logger import EventLogger
from api.events import get_event_logger
from api.menu import get_catalog_repo
from domain.kiosk.catalog_http import CatalogFetchError
from domain.kiosk.catalog_repo import CatalogRepo, InMemoryCatalogRepo
from main import app
from session.counter_store import InMemoryCounterStore
from session.rate_limit import RateQuotaGate

SWEET = "0,25,50,75,100"
LATTE_ID = "AllCafe_ลาเต้_Coffee"


class RecordingTransport:
    def __init__(self):
        self.sent = []

    def send(self, fields, trace_id=None):
        self.sent.append(fields)


class DownCatalog(CatalogRepo):
    def fetch_products(self, *, trace_id=None):
        raise CatalogFetchError("sheet down")


@pytest.fixture
def records(make_record):
    return [
        make_record(code="L-HOT", drink_type="Hot", price=45.0, sizes=("M",), sweetness=SWEET, names={"jp": "ラテ"}),
        make_record(code="L-ICED-M", drink_type="Iced", price=50.0, sizes=("M",), sweetness=SWEET),
        make_record(code="L-ICED-L", drink_type="Iced", price=60.0, sizes=("L",), sweetness=SWEET),
        make_record(code="M-1", common_name_th="มอคค่า", name_en="Mocha", price=55.0, tags="Highlight"),
        make_record(code="SECRET", common_name_th="พิเศษ", name_en="Secret", hidden_at_branches=("0123",)),
    ]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(records, transport):
    event_logger = EventLogger(RateQuotaGate(InMemoryCounterStore()), transport)
    app.dependency_overrides[get_catalog_repo] = lambda: InMemoryCatalogRepo(records)
    app.dependency_overrides[get_event_logger] = lambda: event_logger
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _meta(**kw):
    meta = {"session_id": "sess-1", "language": "en", "br": "bkk0123", "time_of_day": "midday"}
    meta.update(kw)
    return meta


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_menu_filters_by_store_and_marks_highlight(client):
    r = client.get("/api/menu", params={"store": "bkk0123", "lang": "jp"})
    assert r.status_code == 200
    body = r.json()

    assert body["language"] == "jp"
    assert body["store_number"] == "0123"
    ids = [g["id"] for g in body["groups"]]
    assert ids == [LATTE_ID, "AllCafe_มอคค่า_Coffee"]
    assert body["highlight_id"] == "AllCafe_มอคค่า_Coffee"

    latte = body["groups"][0]
    assert latte["name"] == "ラテ"
    assert latte["min_price"] == 45.0
    assert latte["variant_count"] == 3


def test_menu_without_store_shows_everything(client):
    body = client.get("/api/menu").json()
    assert body["language"] == "th"
    assert len(body["groups"]) == 3


def test_menu_catalog_down_is_502(client):
    app.dependency_overrides[get_catalog_repo] = lambda: DownCatalog()
    r = client.get("/api/menu")
    assert r.status_code == 502


def test_recommendation(client):
    r = client.post("/api/menu/recommendation", json={"group_id": LATTE_ID, "meta": _meta(temp=30)})
    assert r.status_code == 200
    body = r.json()

    assert body["group_id"] == LATTE_ID
    assert body["name"] == "Latte"
    assert body["recommendation"] == {"type": "iced", "size": "L", "sweetness": "75"}
    assert body["knowledge"]["main_flavor"] == "espresso"
    assert body["knowledge"]["base"] == "coffee"


def test_recommendation_unknown_group_is_404(client):
    r = client.post("/api/menu/recommendation", json={"group_id": "nope", "meta": _meta()})
    assert r.status_code == 404


def test_recommendation_requires_session(client):
    r = client.post("/api/menu/recommendation", json={"group_id": LATTE_ID, "meta": _meta(session_id="")})
    assert r.status_code == 422


def test_event_is_sent_with_cart_line(client, transport):
    payload = {
        "action": "ADD_TO_CART",
        "meta": _meta(city="Bangkok", browser_language="en-gb"),
        "ai_followed": "Yes",
        "cart_line": {
            "group_id": LATTE_ID,
            "variant_code": "L-ICED-L",
            "size": "L",
            "sweetness": "75",
            "addons": [{"name": "Pearl", "price": 10}, {"name": " "}],
            "price": 70,
            "quantity": 1,
        },
    }
    r = client.post("/api/events", json=payload)
    assert r.status_code == 200
    assert r.json()["ok"] is True

    fields = transport.sent[0]
    assert fields["Product_Code"] == "'L-ICED-L'"
    assert fields["Add_ons"] == "Pearl (10)"
    assert fields["StoreNumber"] == "0123"
    assert fields["StoreZone"] == "BKK"
    assert fields["ApproxLocation"] == "Bangkok"
    assert fields["AIRecommendationFollowed"] == "Yes"


def test_event_unknown_variant_is_404(client):
    payload = {
        "action": "ADD_TO_CART",
        "meta": _meta(),
        "cart_line": {"group_id": LATTE_ID, "variant_code": "NOPE"},
    }
    assert client.post("/api/events", json=payload).status_code == 404


def test_events_are_rate_limited(client, transport):
    payload = {"action": "CLICK", "meta": _meta()}
    for _ in range(3):
        assert client.post("/api/events", json=payload).status_code == 200

    r = client.post("/api/events", json=payload)
    assert r.status_code == 429
    assert r.json()["ok"] is False
    assert r.json()["reason"] == "rateLimited"
    assert len(transport.sent) == 3


def test_event_rejects_non_numeric_addon_price(client, transport):
    payload = {
        "action": "ADD_TO_CART",
        "meta": _meta(),
        "cart_line": {
            "group_id": LATTE_ID,
            "variant_code": "L-HOT",
            "addons": [{"name": "Pearl", "price": "abc"}],
        },
    }
    assert client.post("/api/events", json=payload).status_code == 422
    assert transport.sent == []


def test_session_bootstrap_issues_fresh_ids(client):
    first = client.post("/api/session")
    second = client.post("/api/session")
    assert first.status_code == 200
    assert first.json()["session_id"]
    assert first.json()["session_id"] != second.json()["session_id"]
    assert first.json()["started_at"].endswith("+07:00")
