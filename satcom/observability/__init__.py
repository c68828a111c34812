"""Observability: logging and metrics for the ground station."""

from satcom.observability.logger import get_logger
from satcom.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
