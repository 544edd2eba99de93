"""Metrics hook protocol and no-op default implementation.

postdiff emits counters and timings each time a revision is generated.  By
default a :class:`NoopMetricsHook` is used so there is zero overhead.  Users
can supply their own implementation that satisfies the :class:`MetricsHook`
protocol to route metrics to Datadog, Prometheus, StatsD, or any other
backend.

Emitted metric names:

* ``postdiff.revisions_total``        -- counter
* ``postdiff.deltas_total``           -- counter (tags ``field``, ``op``)
* ``postdiff.generate_duration_ms``   -- timing
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict whose keys and values are
    strings.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Metrics implementation that discards all data points.

    Used when the caller does not supply a :class:`MetricsHook`, so that
    call-sites never need ``if self._metrics is not None`` guards.
    """

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
