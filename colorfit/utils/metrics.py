"""
ColorFit Metrics Collection
In-process metrics collection for monitoring and performance tracking.
"""
import time
from collections import defaultdict, Counter
from typing import Any, Dict, List, Optional
from threading import Lock

from colorfit.config import config


class MetricsCollector:
    """Simple in-process metrics collector."""

    def __init__(self, enabled: bool = True):
        """Initialize metrics collector."""
        self.enabled = enabled
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._timings: Dict[str, List[float]] = defaultdict(list)
        self._last_errors: Dict[str, str] = {}
        self._start_time = time.time()

    def increment(self, name: str, amount: int = 1):
        """Increment a named counter."""
        if not self.enabled:
            return
        with self._lock:
            self._counters[name] += amount

    def record_operation_success(self, operation: str, duration_ms: float,
                                 metadata: Optional[Dict[str, Any]] = None):
        """Record a completed operation and its duration."""
        if not self.enabled:
            return
        with self._lock:
            self._counters[f"{operation}_total"] += 1
            self._timings[f"{operation}_duration_ms"].append(duration_ms)
            if metadata:
                for key, value in metadata.items():
                    if isinstance(value, str):
                        self._counters[f"{operation}_{key}_{value}"] += 1

    def record_operation_error(self, operation: str, error: str, duration_ms: float = 0.0):
        """Record a failed operation."""
        if not self.enabled:
            return
        with self._lock:
            self._counters[f"{operation}_failed_total"] += 1
            self._timings[f"{operation}_error_duration_ms"].append(duration_ms)
            self._last_errors[operation] = error[:200]

    def get_counters(self) -> Dict[str, int]:
        """Get current counter values."""
        with self._lock:
            return dict(self._counters)

    def get_timing_stats(self) -> Dict[str, Dict[str, float]]:
        """Get timing statistics."""
        with self._lock:
            stats = {}
            for operation, timings in self._timings.items():
                if timings:
                    stats[operation] = {
                        "count": len(timings),
                        "mean": sum(timings) / len(timings),
                        "min": min(timings),
                        "max": max(timings),
                        "p50": self._percentile(timings, 50),
                        "p95": self._percentile(timings, 95)
                    }
            return stats

    def get_uptime_seconds(self) -> float:
        """Get service uptime in seconds."""
        return time.time() - self._start_time

    def get_summary(self) -> Dict[str, Any]:
        """Get complete metrics summary."""
        with self._lock:
            last_errors = dict(self._last_errors)
        return {
            "uptime_seconds": self.get_uptime_seconds(),
            "counters": self.get_counters(),
            "timing_stats": self.get_timing_stats(),
            "last_errors": last_errors
        }

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._timings.clear()
            self._last_errors.clear()
            self._start_time = time.time()

    @staticmethod
    def _percentile(data: List[float], percentile: int) -> float:
        """Calculate percentile of data."""
        if not data:
            return 0.0

        sorted_data = sorted(data)
        k = (len(sorted_data) - 1) * percentile / 100
        f = int(k)
        c = k - f

        if f + 1 < len(sorted_data):
            return sorted_data[f] + c * (sorted_data[f + 1] - sorted_data[f])
        else:
            return sorted_data[f]


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector(enabled=config.METRICS_ENABLED)
    return _metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
