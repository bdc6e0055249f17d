"""Block tree fetcher.

Given a page ID, :class:`BlockTreeFetcher` retrieves the page metadata and
then every descendant block, following pagination cursors at each level,
and returns a :class:`~buildinify.models.PageContent` whose tree mirrors
the document's nesting.

Fetching is sequential and depth-first: a block's whole subtree is
resolved before its next sibling is looked at.  Any remote failure aborts
the whole fetch; there is no partial result and no retry at this level.
"""

from __future__ import annotations

import time
from typing import Any

from buildinify.buildin_api.blocks import AsyncBlockAPI
from buildinify.buildin_api.pages import AsyncPageAPI
from buildinify.models import Block, Page, PageContent
from buildinify.observability import MetricsHook, get_logger, resolve_metrics

log = get_logger("buildinify.fetcher")


class BlockTreeFetcher:
    """Assemble a page's full block tree from the paginated API.

    Parameters
    ----------
    pages:
        Page endpoint wrapper.
    blocks:
        Block endpoint wrapper.
    metrics:
        Optional metrics backend.
    """

    def __init__(
        self,
        pages: AsyncPageAPI,
        blocks: AsyncBlockAPI,
        metrics: MetricsHook | None = None,
    ) -> None:
        self._pages = pages
        self._blocks = blocks
        self._metrics = resolve_metrics(metrics)

    async def fetch_page_content(self, page_id: str) -> PageContent:
        """Fetch page metadata and its complete block tree.

        Raises
        ------
        BuildinifyNotFoundError
            If *page_id* does not name a page.
        BuildinifyTransportError
            If any remote call fails or returns a malformed listing.
        """
        t0 = time.monotonic()
        page = Page.from_api(await self._pages.retrieve(page_id))
        top_level = await self._blocks.list_all_children(page_id)
        blocks, count = await self._build_tree(top_level)
        elapsed_ms = (time.monotonic() - t0) * 1000

        self._metrics.increment("buildinify.blocks_fetched_total", count)
        self._metrics.timing("buildinify.page_fetch_duration_ms", elapsed_ms)
        log.debug(
            "page fetched",
            extra={
                "extra_fields": {
                    "op": "fetch_page_content",
                    "page_id": page_id,
                    "blocks": count,
                    "duration_ms": round(elapsed_ms, 1),
                }
            },
        )
        return PageContent(page=page, blocks=blocks)

    async def _build_tree(self, raw_blocks: list[dict[str, Any]]) -> tuple[list[Block], int]:
        """Convert *raw_blocks* to :class:`Block` nodes, fetching children.

        Returns the nodes and the total number of blocks in the subtree.
        """
        nodes: list[Block] = []
        count = 0
        for raw in raw_blocks:
            block = Block.from_api(raw)
            count += 1
            if block.has_children and block.id:
                children = await self._blocks.list_all_children(block.id)
                block.children, sub_count = await self._build_tree(children)
                count += sub_count
            nodes.append(block)
        return nodes, count


async def fetch_page_content(
    pages: AsyncPageAPI,
    blocks: AsyncBlockAPI,
    page_id: str,
) -> PageContent:
    """Fetch *page_id* with a throwaway :class:`BlockTreeFetcher`."""
    return await BlockTreeFetcher(pages, blocks).fetch_page_content(page_id)
