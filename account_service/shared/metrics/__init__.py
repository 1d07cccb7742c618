"""Prometheus request metrics."""

from account_service.shared.metrics.middleware import HttpMetrics, MetricsMiddleware

__all__ = ["HttpMetrics", "MetricsMiddleware"]
