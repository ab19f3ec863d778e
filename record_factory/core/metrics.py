"""In-process build counters, read with Factory.metrics.snapshot()."""

from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Dict


class FactoryMetrics:
    def __init__(self):
        self._lock = Lock()
        self._counters = defaultdict(int)

    def increment(self, key: str, n: int = 1):
        with self._lock:
            self._counters[key] += n

    def get(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counters)

    def reset(self):
        with self._lock:
            self._counters.clear()
