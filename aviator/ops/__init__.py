"""Operational helpers."""

from aviator.ops.logging import configure_logging
from aviator.ops.metrics import MetricsRecorder, get_metrics_recorder

__all__ = ["configure_logging", "MetricsRecorder", "get_metrics_recorder"]
