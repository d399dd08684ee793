"""In-process counters and timings for prediction requests."""

from typing import Dict, List
import threading


_CATEGORY_PREFIX = "predictions.category."
_INVALID_PREFIX = "predictions.invalid."


def _by_prefix(counters: Dict[str, int], prefix: str) -> Dict[str, int]:
    return {
        key[len(prefix):].upper(): value
        for key, value in counters.items()
        if key.startswith(prefix)
    }


class MetricsRecorder:
    """Thread-safe counters and millisecond timings.

    ``snapshot()`` also folds the ``predictions.*`` counters recorded by
    the service into per-category and per-error tallies.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._timings: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    def increment(self, key: str, value: int = 1) -> None:
        with self._lock:
            self._counters[key] = self._counters.get(key, 0) + int(value)

    def timing(self, key: str, value_ms: float) -> None:
        with self._lock:
            self._timings.setdefault(key, []).append(float(value_ms))

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._timings.clear()

    def snapshot(self) -> Dict[str, Dict]:
        with self._lock:
            counters = dict(self._counters)
            timings = {
                key: {
                    "count": len(values),
                    "avg_ms": sum(values) / len(values),
                    "max_ms": max(values),
                }
                for key, values in self._timings.items()
                if values
            }
        return {
            "counters": counters,
            "timings": timings,
            "predictions": {
                "requested": counters.get("predictions.requested", 0),
                "by_category": _by_prefix(counters, _CATEGORY_PREFIX),
                "by_error": _by_prefix(counters, _INVALID_PREFIX),
            },
        }


_DEFAULT_RECORDER = MetricsRecorder()


def get_metrics_recorder() -> MetricsRecorder:
    return _DEFAULT_RECORDER
