"""Async HTTP transport for the Buildin.ai API.

Request lifecycle:

1. Acquire a token-bucket slot (wait if needed).
2. Send the request with the bearer API key.
3. On ``2xx`` -- return the parsed JSON body.
4. On ``429`` -- honour ``Retry-After``, sleep, and retry.
5. On ``5xx`` / network error -- exponential backoff and retry.
6. On non-retryable ``4xx`` -- raise the matching typed error at once.
7. Out of attempts -- raise :class:`BuildinifyRetryExhaustedError`.

A ``2xx`` body that is not a JSON object is reported as a
:class:`BuildinifyTransportError`; nothing above this layer retries.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx

from buildinify.config import BuildinifyConfig
from buildinify.errors import (
    BuildinifyAuthError,
    BuildinifyNetworkError,
    BuildinifyNotFoundError,
    BuildinifyPermissionError,
    BuildinifyRetryExhaustedError,
    BuildinifyTransportError,
    BuildinifyValidationError,
)
from buildinify.observability import get_logger, resolve_metrics

from .rate_limit import AsyncTokenBucket
from .retries import RETRYABLE_STATUSES, compute_backoff, should_retry

log = get_logger("buildinify.transport")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_retry_after(response: httpx.Response) -> float | None:
    """Extract the ``Retry-After`` header value as a float, or ``None``."""
    raw = response.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return float(raw)
    except (ValueError, TypeError):
        return None


def _error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
    """Raise the typed error for a non-retryable ``4xx`` response."""
    status = response.status_code
    body = _error_body(response)
    api_message = body.get("message") or response.text[:500]
    api_code = body.get("code", "")
    context = {"status_code": status, "api_code": api_code, "path": path}

    if status == 401:
        raise BuildinifyAuthError(
            message=f"Authentication failed on {method} {path}: {api_message}",
            context=context,
        )
    if status == 403:
        raise BuildinifyPermissionError(
            message=f"Permission denied on {method} {path}: {api_message}",
            context={**context, "operation": f"{method} {path}"},
        )
    if status == 404:
        raise BuildinifyNotFoundError(
            message=f"Resource not found on {method} {path}: {api_message}",
            context=context,
        )
    raise BuildinifyValidationError(
        message=f"Client error {status} on {method} {path}: {api_message}",
        context={**context, "body": body},
    )


def _parse_success(response: httpx.Response, method: str, path: str) -> dict[str, Any]:
    if response.status_code == 204 or not response.content:
        return {}
    try:
        data = response.json()
    except ValueError as exc:
        raise BuildinifyTransportError(
            message=f"Invalid JSON in response to {method} {path}",
            context={"path": path, "status_code": response.status_code},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise BuildinifyTransportError(
            message=f"Expected a JSON object from {method} {path}, got {type(data).__name__}",
            context={"path": path, "status_code": response.status_code},
        )
    return data


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class AsyncBuildinTransport:
    """Asynchronous HTTP transport with auth, retry, and rate limiting.

    Parameters
    ----------
    config:
        A :class:`BuildinifyConfig` controlling all transport behaviour.
    client:
        Optional pre-built :class:`httpx.AsyncClient`.  Tests pass one
        backed by :class:`httpx.MockTransport`; when given, the caller is
        responsible for its ``base_url`` and headers.
    """

    def __init__(
        self,
        config: BuildinifyConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._bucket = AsyncTokenBucket(rate_rps=config.rate_limit_rps, burst=10)
        self._metrics = resolve_metrics(config.metrics)
        self._client = client if client is not None else httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.token}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=config.http_proxy,
        )

    async def request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Execute an HTTP request against the Buildin.ai API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ...).
        path:
            API path relative to ``base_url`` (e.g. ``/pages/<id>``).
        **kwargs:
            Forwarded to :meth:`httpx.AsyncClient.request` (``json=``,
            ``params=``, ``headers=``).

        Returns
        -------
        dict
            Parsed JSON response body.

        Raises
        ------
        BuildinifyAuthError
            On 401 responses.
        BuildinifyPermissionError
            On 403 responses.
        BuildinifyNotFoundError
            On 404 responses.
        BuildinifyValidationError
            On 400 and other non-retryable 4xx responses.
        BuildinifyNetworkError
            When a network failure persists through the last attempt.
        BuildinifyRetryExhaustedError
            When every attempt hit a retryable failure.
        BuildinifyTransportError
            When a successful response does not carry a JSON object.
        """
        max_attempts = self._config.retry_max_attempts
        last_status: int | None = None
        tags = {"method": method, "path": path}

        for attempt in range(max_attempts):
            wait = await self._bucket.acquire()
            if wait > 0:
                self._metrics.timing("buildinify.rate_limit_wait_ms", wait * 1000, tags=tags)

            t0 = time.monotonic()
            try:
                response = await self._client.request(method, path, **kwargs)
            except (httpx.TimeoutException, httpx.NetworkError) as exc:
                delay = self._on_network_error(method, path, exc, attempt)
                await asyncio.sleep(delay)
                continue
            elapsed_ms = (time.monotonic() - t0) * 1000

            last_status = response.status_code
            status_tags = {**tags, "status": str(response.status_code)}
            self._metrics.increment("buildinify.requests_total", tags=status_tags)
            self._metrics.timing("buildinify.request_duration_ms", elapsed_ms, tags=status_tags)

            if 200 <= response.status_code < 300:
                return _parse_success(response, method, path)

            if response.status_code not in RETRYABLE_STATUSES:
                _raise_for_status(response, method, path)

            if not should_retry(response.status_code, None, attempt, max_attempts):
                break

            retry_after: float | None = None
            reason = "server_error"
            if response.status_code == 429:
                retry_after = _parse_retry_after(response)
                reason = "rate_limited"
                self._metrics.increment("buildinify.rate_limited_total", tags=tags)
                log.warning(
                    "Rate limited by Buildin API",
                    extra={
                        "extra_fields": {
                            "op": "request",
                            "method": method,
                            "path": path,
                            "retry_after": retry_after,
                            "attempt": attempt + 1,
                        }
                    },
                )

            delay = compute_backoff(
                attempt,
                base=self._config.retry_base_delay,
                maximum=self._config.retry_max_delay,
                jitter=self._config.retry_jitter,
                retry_after=retry_after,
            )
            self._metrics.increment(
                "buildinify.retries_total", tags={**tags, "reason": reason},
            )
            await asyncio.sleep(delay)

        context: dict[str, Any] = {
            "attempts": max_attempts,
            "last_status_code": last_status,
            "path": path,
        }
        raise BuildinifyRetryExhaustedError(
            message=(
                f"All {max_attempts} attempts exhausted for {method} {path} "
                f"(last status: {last_status})"
            ),
            context=context,
        )

    def _on_network_error(
        self, method: str, path: str, exc: Exception, attempt: int,
    ) -> float:
        """Return the backoff delay for a retryable network failure.

        Raises :class:`BuildinifyNetworkError` on the final attempt.
        """
        self._metrics.increment(
            "buildinify.requests_total",
            tags={"method": method, "path": path, "status": "error"},
        )
        log.warning(
            "Request network error",
            extra={
                "extra_fields": {
                    "op": "request",
                    "method": method,
                    "path": path,
                    "attempt": attempt + 1,
                    "error": str(exc),
                }
            },
        )
        if not should_retry(None, exc, attempt, self._config.retry_max_attempts):
            raise BuildinifyNetworkError(
                message=f"Network error on {method} {path}: {exc}",
                context={"url": path, "attempt": attempt + 1},
                cause=exc,
            ) from exc
        self._metrics.increment(
            "buildinify.retries_total",
            tags={"method": method, "path": path, "reason": "network_error"},
        )
        return compute_backoff(
            attempt,
            base=self._config.retry_base_delay,
            maximum=self._config.retry_max_delay,
            jitter=self._config.retry_jitter,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncBuildinTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
