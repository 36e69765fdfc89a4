# utils/logging.py
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

SENSITIVE_KEYS = {
    "authorization",
    "api_key",
    "password",
    "secret",
    "cookie",
    "redis_url",
}

MAX_STR = 500
MAX_LIST = 40
MAX_DICT_KEYS = 60
MAX_DEPTH = 5


def _truncate_str(s: str) -> str:
    if len(s) <= MAX_STR:
        return s
    return s[:MAX_STR] + "...(truncated)"


def _sanitize(obj: Any, depth: int = 0) -> Any:
    """
    Make a payload JSON-safe, bounded in size, with sensitive keys masked.
    """
    if depth > MAX_DEPTH:
        return "...(max_depth)"

    if obj is None or isinstance(obj, (bool, int, float)):
        return obj
    if isinstance(obj, str):
        return _truncate_str(obj)
    if isinstance(obj, (bytes, bytearray)):
        return f"<bytes:{len(obj)}>"

    if isinstance(obj, dict):
        out: Dict[str, Any] = {}
        keys = list(obj.keys())
        if len(keys) > MAX_DICT_KEYS:
            keys = keys[:MAX_DICT_KEYS]
            out["_truncated_keys"] = True
        for k in keys:
            if str(k).lower() in SENSITIVE_KEYS:
                out[str(k)] = "***"
            else:
                out[str(k)] = _sanitize(obj.get(k), depth + 1)
        return out

    if isinstance(obj, (list, tuple, set, frozenset)):
        lst = list(obj)
        truncated = len(lst) > MAX_LIST
        out_list = [_sanitize(x, depth + 1) for x in lst[:MAX_LIST]]
        if truncated:
            out_list.append("...(truncated)")
        return out_list

    # pydantic models
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump(), depth + 1)
        except Exception:
            return _truncate_str(str(obj))

    if isinstance(obj, Exception):
        return {"error_type": type(obj).__name__, "error_message": _truncate_str(str(obj))}

    return _truncate_str(str(obj))


def _level_from_env() -> int:
    name = os.getenv("BARISTA_LOG_LEVEL", "INFO").strip().upper()
    return getattr(logging, name, logging.INFO) if name else logging.INFO


logger = logging.getLogger("barista")
logger.setLevel(_level_from_env())
logger.propagate = False

if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(h)


def log_event(
    trace_id: Optional[str],
    stage: str,
    payload: Dict[str, Any],
    level: int = logging.INFO,
) -> None:
    """
    One JSON line per pipeline stage, keyed by trace_id.
    """
    if not logger.isEnabledFor(level):
        return
    msg = {
        "trace_id": trace_id,
        "stage": stage,
        "payload": _sanitize(payload),
    }
    logger.log(level, json.dumps(msg, ensure_ascii=False))
