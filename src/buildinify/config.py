"""Client configuration for buildinify.

:class:`BuildinifyConfig` is a plain dataclass holding every tuneable knob
of the HTTP layer.  The only value without a usable default is ``token``,
which :meth:`BuildinifyConfig.from_env` reads from ``BUILDIN_API_KEY``.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from buildinify.errors import BuildinifyConfigError

API_KEY_ENV = "BUILDIN_API_KEY"
BASE_URL_ENV = "BUILDIN_BASE_URL"

DEFAULT_BASE_URL = "https://api.buildin.ai/v1"


@dataclass
class BuildinifyConfig:
    """Complete configuration for a buildinify client.

    Parameters
    ----------
    token:
        Buildin.ai API key.  **Required.**  Never logged.
    base_url:
        API root URL.  Override for proxy or testing environments.
    retry_max_attempts:
        Maximum number of attempts per request for retryable HTTP errors.
    retry_base_delay:
        Base delay (seconds) for exponential backoff.
    retry_max_delay:
        Upper cap (seconds) on computed backoff delay.
    retry_jitter:
        Scale each backoff delay to a random 50-100 % of its value.
    rate_limit_rps:
        Target requests per second for client-side pacing (token bucket).
    timeout_seconds:
        HTTP request timeout in seconds.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    metrics:
        Optional :class:`~buildinify.observability.MetricsHook` backend.
    """

    # ── Core ────────────────────────────────────────────────────────────
    token: str = ""

    base_url: str = DEFAULT_BASE_URL

    # ── Retry & rate ────────────────────────────────────────────────────
    retry_max_attempts: int = 5

    retry_base_delay: float = 1.0

    retry_max_delay: float = 60.0

    retry_jitter: bool = True

    rate_limit_rps: float = 3.0

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API key, or target localhost for testing."
            )

        if self.retry_max_attempts < 1:
            raise ValueError(f"retry_max_attempts must be >= 1, got {self.retry_max_attempts}")
        if self.retry_base_delay < 0:
            raise ValueError(f"retry_base_delay must be >= 0, got {self.retry_base_delay}")
        if self.retry_max_delay < 0:
            raise ValueError(f"retry_max_delay must be >= 0, got {self.retry_max_delay}")
        if self.rate_limit_rps <= 0:
            raise ValueError(f"rate_limit_rps must be > 0, got {self.rate_limit_rps}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> BuildinifyConfig:
        """Build a config from environment variables.

        ``BUILDIN_API_KEY`` is required; ``BUILDIN_BASE_URL`` is optional.
        Keyword *overrides* win over anything read from the environment.

        Raises
        ------
        BuildinifyConfigError
            If ``BUILDIN_API_KEY`` is unset or blank.
        """
        env = os.environ if environ is None else environ
        token = env.get(API_KEY_ENV, "").strip()
        if not token:
            raise BuildinifyConfigError(
                message=f"{API_KEY_ENV} environment variable is not set",
                context={"variable": API_KEY_ENV},
            )
        values: dict[str, Any] = {"token": token}
        base_url = env.get(BASE_URL_ENV)
        if base_url:
            values["base_url"] = base_url
        values.update(overrides)
        return cls(**values)

    def __repr__(self) -> str:
        """Mask the token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"BuildinifyConfig({', '.join(parts)})"
