"""Per-operation metrics collection and tracking.

Tracks call counts, latencies, and failures (by error code) for each
conversion operation exposed through the MCP tools.
"""

import asyncio
import time
from dataclasses import dataclass, field

OPERATIONS = ("to_url", "to_local", "to_local_relaxed")


@dataclass
class OperationMetrics:
    """Metrics for a single conversion operation.

    All latency times are stored as milliseconds.
    """

    operation: str
    count: int = 0
    times: list[float] = field(default_factory=list)
    errors: dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(self.errors.values())

    def avg_ms(self) -> float:
        """Calculate average latency in milliseconds."""
        return sum(self.times) / len(self.times) if self.times else 0.0

    def to_dict(self) -> dict:
        """Convert metrics to dictionary format.

        Returns:
            Dictionary representation of metrics suitable for JSON serialization
        """
        return {
            "operation": self.operation,
            "count": self.count,
            "avg_ms": self.avg_ms(),
            "errors": self.error_count,
            "errors_by_code": dict(self.errors),
        }


class MetricsCollector:
    """Metrics collector for all conversion operations.

    Uses asyncio.Lock for safe access from concurrent tool calls.
    """

    def __init__(self) -> None:
        self._metrics: dict[str, OperationMetrics] = {}
        self._start_time = time.time()
        self._lock = asyncio.Lock()

    async def record(
        self,
        operation: str,
        duration_ms: float,
        error_code: str | None = None,
    ) -> None:
        """Record metrics for an operation.

        Args:
            operation: Operation name (to_url, to_local, to_local_relaxed)
            duration_ms: Duration in milliseconds
            error_code: Error code if the operation failed, None on success

        Raises:
            ValueError: If operation is not a valid operation name
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Invalid operation: {operation}")

        async with self._lock:
            if operation not in self._metrics:
                self._metrics[operation] = OperationMetrics(operation)

            metrics = self._metrics[operation]
            metrics.count += 1
            metrics.times.append(duration_ms)
            if error_code is not None:
                metrics.errors[error_code] = metrics.errors.get(error_code, 0) + 1

    def get_operation_metrics(self, operation: str) -> OperationMetrics | None:
        """Get metrics for a specific operation, or None if never recorded."""
        return self._metrics.get(operation)

    def get_all_metrics(self) -> list[OperationMetrics]:
        """Get metrics for all operations with recorded activity."""
        return list(self._metrics.values())

    def uptime_seconds(self) -> float:
        """Get time elapsed since collector initialization in seconds."""
        return time.time() - self._start_time


_collector: MetricsCollector | None = None


def get_metrics_collector() -> MetricsCollector:
    """Get the process-wide metrics collector, creating it on first call."""
    global _collector
    if _collector is None:
        _collector = MetricsCollector()
    return _collector


def reset_metrics_collector() -> None:
    """Reset the process-wide collector (for testing only)."""
    global _collector
    _collector = None
