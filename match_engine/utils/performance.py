"""Performance monitoring utilities"""
import threading
import time
from functools import wraps
from dataclasses import dataclass, field
from typing import List
import numpy as np


@dataclass
class CallMetrics:
    """Latency and outcome counters for one measured operation"""
    total_calls: int = 0
    successful_calls: int = 0
    failed_calls: int = 0
    latencies: List[float] = field(default_factory=list)

    @property
    def avg_latency(self) -> float:
        return float(np.mean(self.latencies)) if self.latencies else 0.0

    @property
    def p95_latency(self) -> float:
        return float(np.percentile(self.latencies, 95)) if self.latencies else 0.0

    @property
    def throughput(self) -> float:
        """Successful calls per minute of measured time"""
        total_time = sum(self.latencies)
        return (self.successful_calls / total_time * 60) if total_time > 0 else 0.0

    def add_call(self, latency: float, success: bool = True):
        """Record a call"""
        self.total_calls += 1
        self.latencies.append(latency)
        if success:
            self.successful_calls += 1
        else:
            self.failed_calls += 1


class PerformanceMonitor:
    """Measure engine calls made by batch tooling.

    One monitor belongs to one batch run; the engine itself never touches it.
    """

    def __init__(self):
        self.metrics = CallMetrics()
        self._lock = threading.Lock()

    def record(self, latency: float, success: bool = True):
        with self._lock:
            self.metrics.add_call(latency, success)

    def measure(self, func):
        """Decorator to measure execution time"""
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                self.record(time.perf_counter() - start, False)
                raise
            self.record(time.perf_counter() - start, True)
            return result

        return wrapper

    def get_report(self) -> dict:
        """Generate performance report"""
        with self._lock:
            return {
                "total_calls": self.metrics.total_calls,
                "successful_calls": self.metrics.successful_calls,
                "failed_calls": self.metrics.failed_calls,
                "avg_latency_sec": round(self.metrics.avg_latency, 4),
                "p95_latency_sec": round(self.metrics.p95_latency, 4),
                "throughput_per_min": round(self.metrics.throughput, 0)
            }
