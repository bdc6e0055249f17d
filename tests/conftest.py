"""Shared test fixtures for the buildinify test suite."""

from __future__ import annotations

from typing import Any

import pytest

from buildinify.config import BuildinifyConfig
from buildinify.converter.markdown_renderer import MarkdownRenderer


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(self, name: str, ms: float, tags: dict[str, str] | None = None) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def increment_names(self) -> list[str]:
        return [entry["name"] for entry in self.increments]


@pytest.fixture
def config() -> BuildinifyConfig:
    """Default test configuration with a dummy token."""
    return BuildinifyConfig(token="test_token_1234")


@pytest.fixture
def fast_config() -> BuildinifyConfig:
    """Configuration with zero backoff and a bucket that never blocks."""
    return BuildinifyConfig(
        token="test_token_1234",
        retry_max_attempts=3,
        retry_base_delay=0.0,
        retry_max_delay=0.0,
        retry_jitter=False,
        rate_limit_rps=10_000.0,
    )


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """A fresh block-tree-to-Markdown renderer."""
    return MarkdownRenderer()
