import uuid

import pytest

from session.context import (
    OmniContext,
    StoreInfo,
    current_time_bucket,
    event_timestamp,
    generate_session_id,
    parse_store_info,
    time_bucket_for_hour,
)
from utils.lang_utils import normalize_browser_lang, normalize_language_key


@pytest.mark.parametrize("hour,bucket", [
    (0, "night"), (4, "night"),
    (5, "morning"), (10, "morning"),
    (11, "midday"), (13, "midday"),
    (14, "afternoon"), (16, "afternoon"),
    (17, "evening"), (20, "evening"),
    (21, "late-night"), (23, "late-night"),
])
def test_time_buckets(hour, bucket):
    assert time_bucket_for_hour(hour) == bucket


def test_current_bucket_uses_bangkok_time(clock):
    assert current_time_bucket(clock) == "morning"


def test_omni_context_build(clock):
    ctx = OmniContext.build(weather="Clouds", temp=31.2, time_of_day="Afternoon", clock=clock)
    assert ctx == OmniContext(time_of_day="afternoon", weather="Clouds", temp=31.2)

    fallback = OmniContext.build(weather="", time_of_day="teatime", clock=clock)
    assert fallback.time_of_day == "morning"
    assert fallback.weather is None
    assert fallback.temp is None


def test_parse_store_info():
    assert parse_store_info("bkk0123", " POS-2 ") == StoreInfo(zone="BKK", number="0123", pos="POS-2")
    assert parse_store_info("0456") == StoreInfo(zone=None, number="0456")
    assert parse_store_info(None) == StoreInfo()


def test_session_ids_are_unique_uuids():
    a, b = generate_session_id(), generate_session_id()
    assert a != b
    assert str(uuid.UUID(a)) == a


def test_event_timestamp(clock):
    ts = event_timestamp(clock)
    assert ts.strftime("%Y-%m-%d %H:%M:%S") == "2025-10-15 10:00:00"


def test_language_normalization():
    assert normalize_language_key("JP") == "jp"
    assert normalize_language_key("de") == "th"
    assert normalize_language_key(None) == "th"

    assert normalize_browser_lang("en-gb") == "en-US"
    assert normalize_browser_lang("ja") == "ja-JP"
    assert normalize_browser_lang("zh_TW") == "zh-CN"
    assert normalize_browser_lang("de-DE") == "de-DE"
    assert normalize_browser_lang("") == "Unknown"
