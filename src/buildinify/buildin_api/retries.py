"""Retry policy for the Buildin.ai transport.

Two pure functions decide *whether* to retry and *how long* to wait:

* :func:`should_retry` -- true for 429, 5xx and network-level failures
  while attempts remain.
* :func:`compute_backoff` -- exponential delay, ``Retry-After`` aware,
  with optional jitter.
"""

from __future__ import annotations

import random

import httpx

RETRYABLE_STATUSES: frozenset[int] = frozenset({429, 500, 502, 503, 504})

RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
)


def should_retry(
    status_code: int | None,
    exception: Exception | None,
    attempt: int,
    max_attempts: int,
) -> bool:
    """Return ``True`` if attempt number *attempt* (0-based) may be repeated.

    A failure is retryable when it is a network-level exception from
    :data:`RETRYABLE_EXCEPTIONS` or a response whose status is in
    :data:`RETRYABLE_STATUSES`, and at least one attempt is left.
    """
    if attempt + 1 >= max_attempts:
        return False
    if exception is not None:
        return isinstance(exception, RETRYABLE_EXCEPTIONS)
    return status_code is not None and status_code in RETRYABLE_STATUSES


def compute_backoff(
    attempt: int,
    base: float = 1.0,
    maximum: float = 60.0,
    jitter: bool = True,
    retry_after: float | None = None,
) -> float:
    """Seconds to sleep before attempt ``attempt + 1``.

    A server-supplied *retry_after* is used as-is (capped at *maximum*);
    otherwise the delay is ``base * 2 ** attempt`` capped at *maximum*.
    With *jitter* the delay is scaled to a random 50-100 % of itself.
    """
    if retry_after is not None and retry_after >= 0:
        delay = min(retry_after, maximum)
    else:
        delay = min(base * (2 ** attempt), maximum)

    if jitter:
        delay *= 0.5 + random.random() * 0.5

    return delay
