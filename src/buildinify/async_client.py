"""Asynchronous Buildin.ai client.

:class:`AsyncBuildinifyClient` wires the transport, endpoint wrappers,
block tree fetcher and Markdown renderer together behind three calls:
:meth:`~AsyncBuildinifyClient.fetch_page_content`,
:meth:`~AsyncBuildinifyClient.page_to_markdown` and
:meth:`~AsyncBuildinifyClient.search`.

Usage::

    import asyncio
    from buildinify import AsyncBuildinifyClient

    async def main():
        async with AsyncBuildinifyClient(token="bk_xxx") as client:
            print(await client.page_to_markdown("<page_id>"))

    asyncio.run(main())
"""

from __future__ import annotations

from typing import Any

import httpx

from buildinify.buildin_api.blocks import AsyncBlockAPI
from buildinify.buildin_api.pages import AsyncPageAPI
from buildinify.buildin_api.search import AsyncSearchAPI
from buildinify.buildin_api.transport import AsyncBuildinTransport
from buildinify.config import BuildinifyConfig
from buildinify.converter.markdown_renderer import MarkdownRenderer
from buildinify.fetcher import BlockTreeFetcher
from buildinify.models import PageContent, SearchResult
from buildinify.observability import get_logger, resolve_metrics
from buildinify.search_formatter import format_search_response

log = get_logger("buildinify.client")


class AsyncBuildinifyClient:
    """Asynchronous Buildin.ai client.

    Parameters
    ----------
    token:
        Buildin.ai API key.  Ignored when *config* is given.
    config:
        A ready-made :class:`BuildinifyConfig`.
    http_client:
        Optional :class:`httpx.AsyncClient` handed to the transport.
    **kwargs:
        Forwarded to :class:`BuildinifyConfig` when *config* is not given.
    """

    def __init__(
        self,
        token: str = "",
        *,
        config: BuildinifyConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self._config = config if config is not None else BuildinifyConfig(token=token, **kwargs)
        self._metrics = resolve_metrics(self._config.metrics)
        self._transport = AsyncBuildinTransport(self._config, client=http_client)
        self._pages = AsyncPageAPI(self._transport)
        self._blocks = AsyncBlockAPI(self._transport)
        self._search = AsyncSearchAPI(self._transport)
        self._fetcher = BlockTreeFetcher(self._pages, self._blocks, self._config.metrics)

    @property
    def config(self) -> BuildinifyConfig:
        return self._config

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    async def fetch_page_content(self, page_id: str) -> PageContent:
        """Fetch a page and its complete block tree."""
        return await self._fetcher.fetch_page_content(page_id)

    async def page_to_markdown(self, page_id: str) -> str:
        """Fetch a page and render it as Markdown.

        Renderer warnings (unrecognised block types) are logged and
        counted, never raised.
        """
        content = await self.fetch_page_content(page_id)
        renderer = MarkdownRenderer()
        markdown = renderer.render_page(content)

        if renderer.warnings:
            self._metrics.increment(
                "buildinify.render_warnings_total", len(renderer.warnings),
            )
            for warning in renderer.warnings:
                log.info(
                    warning.message,
                    extra={
                        "extra_fields": {
                            "op": "page_to_markdown",
                            "page_id": page_id,
                            "code": warning.code,
                            **warning.context,
                        }
                    },
                )
        return markdown

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(
        self,
        query: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> SearchResult:
        """Search pages and return them as resource links."""
        response = await self._search.search(
            query, start_cursor=start_cursor, page_size=page_size,
        )
        return format_search_response(response)

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the HTTP transport."""
        await self._transport.close()

    async def __aenter__(self) -> AsyncBuildinifyClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
