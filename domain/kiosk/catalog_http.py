# domain/kiosk/catalog_http.py
from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Optional

import requests

from domain.kiosk.catalog_repo import CatalogRepo, ProductRecord, coerce_rows
from utils.logging import log_event


class CatalogFetchError(RuntimeError):
    """The catalog could not be fetched after all retries."""


class CatalogPayloadError(CatalogFetchError):
    """The endpoint answered, but not with a JSON array of rows."""


class HttpCatalogRepo(CatalogRepo):
    """
    Catalog rows from the sheet-backed web endpoint.
    - transient failures (network, non-2xx) are retried with a flat delay
    - a malformed body fails immediately; retrying would not change it
    """

    def __init__(
        self,
        url: str,
        retries: int = 3,
        delay: float = 1.0,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.url = url
        self.retries = max(1, int(retries))
        self.delay = delay
        self.timeout = timeout
        self.http = session or requests.Session()
        self._sleep = sleep

    def _get_once(self) -> Any:
        r = self.http.get(self.url, headers={"Cache-Control": "no-cache"}, timeout=self.timeout)
        if r.status_code < 200 or r.status_code >= 300:
            raise CatalogFetchError(f"Catalog HTTP {r.status_code}: {r.text[:200]}")
        try:
            data = r.json()
        except ValueError as e:
            raise CatalogPayloadError(f"Catalog body is not JSON: {r.text[:200]}") from e
        if not isinstance(data, list):
            raise CatalogPayloadError(f"Catalog body must be a JSON array, got {type(data).__name__}")
        return data

    def fetch_rows(self, *, trace_id: Optional[str] = None) -> List[Any]:
        if not self.url:
            raise CatalogFetchError("Catalog URL is not configured")

        last_err: Optional[Exception] = None
        for attempt in range(1, self.retries + 1):
            try:
                rows = self._get_once()
                log_event(trace_id, "catalog_fetched", {"attempt": attempt, "rows": len(rows)})
                return rows
            except CatalogPayloadError as e:
                log_event(trace_id, "catalog_payload_invalid", {"error": e}, level=logging.ERROR)
                raise
            except (requests.RequestException, CatalogFetchError) as e:
                last_err = e
                log_event(trace_id, "catalog_fetch_fail", {
                    "attempt": attempt,
                    "retries": self.retries,
                    "error": e,
                }, level=logging.WARNING)
                if attempt < self.retries:
                    self._sleep(self.delay)

        raise CatalogFetchError(f"Catalog fetch failed after {self.retries} attempts: {last_err}") from last_err

    def fetch_products(self, *, trace_id: Optional[str] = None) -> List[ProductRecord]:
        return coerce_rows(self.fetch_rows(trace_id=trace_id))
