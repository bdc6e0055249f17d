"""buildinify.buildin_api -- Buildin.ai API transport and endpoint wrappers.

This sub-package provides:

* :mod:`.rate_limit` -- Async token bucket rate limiter.
* :mod:`.retries` -- Retry decision logic and exponential backoff.
* :mod:`.transport` -- HTTP transport with auth, retries, and rate limiting.
* :mod:`.pages` -- Page retrieval.
* :mod:`.blocks` -- Paginated block-children listing.
* :mod:`.search` -- Page search.
"""

from __future__ import annotations

from .blocks import AsyncBlockAPI
from .pages import AsyncPageAPI
from .rate_limit import AsyncTokenBucket
from .retries import compute_backoff, should_retry
from .search import AsyncSearchAPI
from .transport import AsyncBuildinTransport

__all__ = [
    "AsyncBlockAPI",
    "AsyncBuildinTransport",
    "AsyncPageAPI",
    "AsyncSearchAPI",
    "AsyncTokenBucket",
    "compute_backoff",
    "should_retry",
]
