# session/context.py
from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.kiosk.timewindow import Clock, bangkok_now

TIME_BUCKETS = ("night", "morning", "midday", "afternoon", "evening", "late-night")


def time_bucket_for_hour(hour: int) -> str:
    if 0 <= hour < 5:
        return "night"
    if 5 <= hour < 11:
        return "morning"
    if 11 <= hour < 14:
        return "midday"
    if 14 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 21:
        return "evening"
    return "late-night"


def current_time_bucket(clock: Optional[Clock] = None) -> str:
    return time_bucket_for_hour(bangkok_now(clock).hour)


@dataclass(frozen=True)
class OmniContext:
    """
    Ambient signal for recommendations. Weather and temperature come from an
    outside weather lookup and may be missing; time_of_day is always set.
    """
    time_of_day: str
    weather: Optional[str] = None
    temp: Optional[float] = None

    @classmethod
    def build(
        cls,
        *,
        weather: Optional[str] = None,
        temp: Optional[float] = None,
        time_of_day: Optional[str] = None,
        clock: Optional[Clock] = None,
    ) -> "OmniContext":
        tod = (time_of_day or "").strip().lower()
        if tod not in TIME_BUCKETS:
            tod = current_time_bucket(clock)
        return cls(time_of_day=tod, weather=weather or None, temp=temp)


@dataclass(frozen=True)
class StoreInfo:
    zone: Optional[str] = None
    number: Optional[str] = None
    pos: Optional[str] = None


_ZONE_RE = re.compile(r"^[a-zA-Z]+")
_NUMBER_RE = re.compile(r"\d+$")


def parse_store_info(br: Optional[str], pos: Optional[str] = None) -> StoreInfo:
    """
    Branch code from the QR link: "bkk0123" -> zone "BKK", number "0123".
    """
    code = (br or "").strip()
    zone = _ZONE_RE.search(code)
    number = _NUMBER_RE.search(code)
    return StoreInfo(
        zone=zone.group(0).upper() if zone else None,
        number=number.group(0) if number else None,
        pos=(pos or "").strip() or None,
    )


def generate_session_id() -> str:
    return str(uuid.uuid4())


def event_timestamp(clock: Optional[Clock] = None) -> datetime:
    return bangkok_now(clock)
