# session/counter_store.py
from __future__ import annotations

import json
import threading
from typing import Dict, List, Optional

import redis

from utils.logging import log_event


class CounterStore:
    """
    Key-value counters behind the rate/quota gate.

    Two shapes are stored:
      - timestamp lists (sliding windows), pruned lazily on read
      - integer counters (daily quotas)
    Keys are never expired or deleted here.
    """

    def recent(self, key: str, since: float) -> List[float]:
        """Timestamps for key strictly newer than `since`; older ones are dropped."""
        raise NotImplementedError

    def append(self, key: str, ts: float) -> None:
        raise NotImplementedError

    def count(self, key: str) -> int:
        raise NotImplementedError

    def increment(self, key: str) -> int:
        raise NotImplementedError


class InMemoryCounterStore(CounterStore):
    def __init__(self):
        self._lists: Dict[str, List[float]] = {}
        self._counters: Dict[str, int] = {}
        self._lock = threading.RLock()

    def recent(self, key: str, since: float) -> List[float]:
        with self._lock:
            kept = [t for t in self._lists.get(key, []) if t > since]
            self._lists[key] = kept
            return list(kept)

    def append(self, key: str, ts: float) -> None:
        with self._lock:
            self._lists.setdefault(key, []).append(ts)

    def count(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)

    def increment(self, key: str) -> int:
        with self._lock:
            self._counters[key] = self._counters.get(key, 0) + 1
            return self._counters[key]


class RedisCounterStore(CounterStore):
    """
    Redis-backed store so several kiosk workers share one view of a session.
    Timestamp lists are JSON strings; counters use INCR.
    Read-modify-write is not atomic: concurrent bursts in one session may be
    let through slightly over the limit.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        key_prefix: str = "barista:gate:",
        client: Optional[redis.Redis] = None,
    ):
        self.r = client if client is not None else redis.Redis.from_url(redis_url, decode_responses=True)
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def _load(self, key: str) -> List[float]:
        raw = self.r.get(self._key(key))
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            log_event(None, "counter_store_corrupt", {"key": key})
            return []
        return [float(x) for x in data] if isinstance(data, list) else []

    def recent(self, key: str, since: float) -> List[float]:
        stamps = self._load(key)
        kept = [t for t in stamps if t > since]
        if len(kept) != len(stamps):
            self.r.set(self._key(key), json.dumps(kept))
        return kept

    def append(self, key: str, ts: float) -> None:
        stamps = self._load(key)
        stamps.append(ts)
        self.r.set(self._key(key), json.dumps(stamps))

    def count(self, key: str) -> int:
        raw = self.r.get(self._key(key))
        try:
            return int(raw) if raw else 0
        except ValueError:
            return 0

    def increment(self, key: str) -> int:
        return int(self.r.incr(self._key(key)))
