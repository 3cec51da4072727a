"""Tests for metrics collection infrastructure."""

import asyncio

import pytest

from fileurl_mcp.metrics import (
    MetricsCollector,
    OperationMetrics,
    get_metrics_collector,
    reset_metrics_collector,
)


@pytest.fixture
def metrics_collector():
    """Create a fresh metrics collector for each test."""
    return MetricsCollector()


class TestOperationMetrics:
    """Test OperationMetrics data structure."""

    def test_initialization(self):
        metrics = OperationMetrics("to_url")
        assert metrics.count == 0
        assert metrics.times == []
        assert metrics.errors == {}
        assert metrics.error_count == 0

    def test_avg_ms(self):
        metrics = OperationMetrics("to_url")
        assert metrics.avg_ms() == 0.0
        metrics.times = [1.0, 2.0, 3.0]
        assert metrics.avg_ms() == 2.0

    def test_to_dict(self):
        metrics = OperationMetrics("to_local", count=3, times=[1.0, 3.0])
        metrics.errors = {"remote": 2, "unsupported": 1}
        assert metrics.to_dict() == {
            "operation": "to_local",
            "count": 3,
            "avg_ms": 2.0,
            "errors": 3,
            "errors_by_code": {"remote": 2, "unsupported": 1},
        }


class TestMetricsCollector:
    """Test MetricsCollector class."""

    @pytest.mark.asyncio
    async def test_record_success(self, metrics_collector):
        await metrics_collector.record("to_url", 0.5)

        metrics = metrics_collector.get_operation_metrics("to_url")
        assert metrics is not None
        assert metrics.count == 1
        assert metrics.times == [0.5]
        assert metrics.error_count == 0

    @pytest.mark.asyncio
    async def test_record_errors_by_code(self, metrics_collector):
        await metrics_collector.record("to_local", 0.1, "remote")
        await metrics_collector.record("to_local", 0.1, "remote")
        await metrics_collector.record("to_local", 0.1, "unsupported")
        await metrics_collector.record("to_local", 0.1)

        metrics = metrics_collector.get_operation_metrics("to_local")
        assert metrics.count == 4
        assert metrics.errors == {"remote": 2, "unsupported": 1}

    @pytest.mark.asyncio
    async def test_record_invalid_operation(self, metrics_collector):
        with pytest.raises(ValueError, match="Invalid operation"):
            await metrics_collector.record("hover", 1.0)

    @pytest.mark.asyncio
    async def test_concurrent_records(self, metrics_collector):
        await asyncio.gather(
            *(metrics_collector.record("to_local_relaxed", 0.1) for _ in range(50))
        )
        assert metrics_collector.get_operation_metrics("to_local_relaxed").count == 50

    def test_get_operation_metrics_unknown(self, metrics_collector):
        assert metrics_collector.get_operation_metrics("to_url") is None
        assert metrics_collector.get_all_metrics() == []

    def test_uptime_seconds(self, metrics_collector):
        assert metrics_collector.uptime_seconds() >= 0


class TestGlobalCollector:
    """Test the process-wide collector accessors."""

    def test_get_metrics_collector_is_singleton(self):
        assert get_metrics_collector() is get_metrics_collector()

    def test_reset_metrics_collector(self):
        collector = get_metrics_collector()
        reset_metrics_collector()
        assert get_metrics_collector() is not collector
