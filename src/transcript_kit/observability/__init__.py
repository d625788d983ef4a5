"""Metrics hooks for the parsing layer.

Callers plug in their own backend by implementing MetricsHook; the default
NoOpMetricsHook discards everything.
"""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
