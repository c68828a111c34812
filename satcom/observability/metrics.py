"""Counters and gauges for ground station activity (subscriptions, deliveries, failures)."""

from collections import Counter
from typing import Dict


class Metrics:
    """In-memory collector; one instance per GroundStation unless shared explicitly."""

    def __init__(self) -> None:
        self._counters: Counter = Counter()
        self._gauges: Dict[str, int] = {}

    def increment(self, name: str, value: int = 1) -> None:
        self._counters[name] += value

    def set_gauge(self, name: str, value: int) -> None:
        self._gauges[name] = value

    def get_counter(self, name: str) -> int:
        return self._counters[name]

    def get_gauge(self, name: str) -> int:
        return self._gauges.get(name, 0)

    def reset(self) -> None:
        """Drop all counters and gauges (e.g. between demo runs)."""
        self._counters.clear()
        self._gauges.clear()

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        """Return plain-dict copies: {"counters": {...}, "gauges": {...}}."""
        return {
            "counters": dict(self._counters),
            "gauges": dict(self._gauges),
        }
