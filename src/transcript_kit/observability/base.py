# src/transcript_kit/observability/base.py

from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parse metrics.

    Names come from ``observability.names``. Parse metrics are labelled with
    the parser ``format`` (plus ``error`` for failures, ``kind`` for
    placeholders). Implementations must not raise into the parse path.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Record one duration in milliseconds, e.g. a single parse call."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Add to a monotonic counter (requests, errors, segments emitted)."""
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Set a point-in-time value, e.g. the size of a file batch."""
        ...


class NoOpMetricsHook:
    """Default hook: parsing runs without any metrics backend."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass
