"""buildinify: Buildin.ai knowledge base pages as Markdown.

Public re-exports
-----------------

* **Client:** :class:`AsyncBuildinifyClient`
* **Core:** :class:`BlockTreeFetcher`, :class:`MarkdownRenderer`,
  :func:`render_page_to_markdown`
* **Configuration:** :class:`BuildinifyConfig`
* **Errors:** Every :class:`BuildinifyError` subclass and :class:`ErrorCode`
* **Models:** Page, block, rich-text and search result types

Usage::

    from buildinify import AsyncBuildinifyClient

    async with AsyncBuildinifyClient(token="bk_xxx") as client:
        markdown = await client.page_to_markdown("<page_id>")
"""

from __future__ import annotations

# ── Client ─────────────────────────────────────────────────────────────
from buildinify.async_client import AsyncBuildinifyClient

# ── Configuration ───────────────────────────────────────────────────────
from buildinify.config import BuildinifyConfig

# ── Core ───────────────────────────────────────────────────────────────
from buildinify.converter import MarkdownRenderer, render_page_to_markdown, render_rich_text

# ── Errors ──────────────────────────────────────────────────────────────
from buildinify.errors import (
    BuildinifyAuthError,
    BuildinifyConfigError,
    BuildinifyError,
    BuildinifyNetworkError,
    BuildinifyNotFoundError,
    BuildinifyPermissionError,
    BuildinifyRetryExhaustedError,
    BuildinifyTransportError,
    BuildinifyValidationError,
    ErrorCode,
)
from buildinify.fetcher import BlockTreeFetcher, fetch_page_content

# ── Models ──────────────────────────────────────────────────────────────
from buildinify.models import (
    Block,
    ConversionWarning,
    Page,
    PageContent,
    ResourceLink,
    RichTextSpan,
    SearchResult,
)
from buildinify.search_formatter import format_search_response

__version__ = "0.1.0"

__all__ = [
    # Client
    "AsyncBuildinifyClient",
    # Configuration
    "BuildinifyConfig",
    # Core
    "BlockTreeFetcher",
    "MarkdownRenderer",
    "fetch_page_content",
    "format_search_response",
    "render_page_to_markdown",
    "render_rich_text",
    # Errors
    "BuildinifyError",
    "ErrorCode",
    "BuildinifyConfigError",
    "BuildinifyTransportError",
    "BuildinifyValidationError",
    "BuildinifyAuthError",
    "BuildinifyPermissionError",
    "BuildinifyNotFoundError",
    "BuildinifyRetryExhaustedError",
    "BuildinifyNetworkError",
    # Models
    "Block",
    "ConversionWarning",
    "Page",
    "PageContent",
    "ResourceLink",
    "RichTextSpan",
    "SearchResult",
]
