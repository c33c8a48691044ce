"""Operational helpers."""

from mlbperf.ops.logging import configure_logging

__all__ = ["configure_logging"]
