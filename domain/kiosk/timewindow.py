# domain/kiosk/timewindow.py
from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional

from utils.logging import log_event

# Stores operate on Bangkok time; the feed dates are calendar days in that zone.
BANGKOK_TZ = timezone(timedelta(hours=7), name="UTC+7")

WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

Clock = Callable[[], datetime]

_DMY_RE = re.compile(r"^\s*(\d{1,2})\s*/\s*(\d{1,2})\s*/\s*(\d{4,})")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def bangkok_now(clock: Optional[Clock] = None) -> datetime:
    return as_utc((clock or utc_now)()).astimezone(BANGKOK_TZ)


def parse_date(text: Optional[str]) -> Optional[date]:
    """
    Parse a feed date into a calendar date (UTC, no time part).

    DD/MM/YYYY is tried first since that is what the sheet editors type;
    anything ISO-8601 shaped (e.g. '2025-10-15T17:00:00.000Z' from the sheet
    API) is accepted next. Returns None for empty or unreadable input, which
    callers read as "no constraint".
    """
    if not isinstance(text, str) or not text.strip():
        return None
    s = text.strip()

    m = _DMY_RE.match(s)
    if m:
        day, month, year = (int(g) for g in m.groups())
        if year > 1000:
            try:
                return date(year, month, day)
            except ValueError:
                pass

    iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
    try:
        parsed = datetime.fromisoformat(iso)
    except ValueError:
        log_event(None, "date_parse_failed", {"value": s}, level=logging.WARNING)
        return None
    return as_utc(parsed).date()


class DateRangeEvaluator:
    """
    Decides whether "today" (UTC+7) falls inside an optional start/end window.

    fail_open is the answer given when the comparison itself blows up
    (a broken clock, a bad bound type). Parsing problems never reach it:
    an unreadable bound is simply treated as absent.
    """

    def __init__(self, clock: Optional[Clock] = None, fail_open: bool = True):
        self.clock: Clock = clock or utc_now
        self.fail_open = fail_open

    def now(self) -> datetime:
        return bangkok_now(self.clock)

    def today(self) -> date:
        return self.now().date()

    def weekday(self) -> str:
        return WEEKDAY_ABBR[self.today().weekday()]

    def is_in_range(self, start: Optional[str] = None, end: Optional[str] = None) -> bool:
        start_d = parse_date(start)
        end_d = parse_date(end)

        # permanent item
        if start_d is None and end_d is None:
            return True

        try:
            today = self.today()
            after_start = today >= start_d if start_d is not None else True
            before_end = today <= end_d if end_d is not None else True
            return after_start and before_end
        except Exception as e:
            log_event(
                None,
                "date_range_error",
                {"start": start, "end": end, "fail_open": self.fail_open, "error": e},
                level=logging.ERROR,
            )
            return self.fail_open


_default_evaluator = DateRangeEvaluator()


def default_evaluator() -> DateRangeEvaluator:
    return _default_evaluator


def is_date_in_range(start: Optional[str] = None, end: Optional[str] = None) -> bool:
    return _default_evaluator.is_in_range(start, end)
