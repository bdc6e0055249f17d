"""Metrics hook protocol and its no-op default.

buildinify reports counters and timings at the request and page-fetch
level.  Nothing is recorded unless the caller passes an object satisfying
:class:`MetricsHook` as ``BuildinifyConfig(metrics=...)``.

Emitted metric names:

* ``buildinify.requests_total``          -- counter, tagged by status
* ``buildinify.retries_total``           -- counter, tagged by reason
* ``buildinify.rate_limited_total``      -- counter
* ``buildinify.request_duration_ms``     -- timing
* ``buildinify.rate_limit_wait_ms``      -- timing
* ``buildinify.blocks_fetched_total``    -- counter
* ``buildinify.page_fetch_duration_ms``  -- timing
* ``buildinify.render_warnings_total``   -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Structural interface for a metrics backend.

    *tags* are string key/value pairs; backends map them onto whatever
    labelling scheme they support.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Add *value* to the counter *name*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set the gauge *name* to *value*."""
        ...


class NoopMetricsHook:
    """Metrics backend that drops every data point."""

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

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(hook: MetricsHook | None) -> MetricsHook:
    """Return *hook*, or a shared :class:`NoopMetricsHook` when it is ``None``."""
    return hook if hook is not None else _NOOP


_NOOP = NoopMetricsHook()
