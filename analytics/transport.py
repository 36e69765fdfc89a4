# analytics/transport.py
from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

import requests

from utils.logging import log_event


class BeaconTransport:
    """
    Fire-and-forget form POST. The caller never waits and never sees an error;
    failures only show up in the log.
    """

    def __init__(self, url: str, timeout: float = 10.0, background: bool = True):
        self.url = url
        self.timeout = timeout
        self.background = background

    def _post(self, fields: Dict[str, str], trace_id: Optional[str]) -> None:
        try:
            r = requests.post(self.url, data=fields, timeout=self.timeout)
            if r.status_code >= 400:
                log_event(trace_id, "analytics_send_http_error", {"status": r.status_code}, level=logging.WARNING)
        except Exception as e:
            log_event(trace_id, "analytics_send_fail", {"error": e}, level=logging.WARNING)

    def send(self, fields: Dict[str, str], trace_id: Optional[str] = None) -> None:
        if not self.url:
            log_event(trace_id, "analytics_disabled", {"field_count": len(fields)}, level=logging.DEBUG)
            return
        if not self.background:
            self._post(fields, trace_id)
            return
        try:
            t = threading.Thread(target=self._post, args=(fields, trace_id), daemon=True)
            t.start()
        except RuntimeError as e:
            # thread could not be started (interpreter shutting down)
            log_event(trace_id, "analytics_send_fail", {"error": e}, level=logging.WARNING)
