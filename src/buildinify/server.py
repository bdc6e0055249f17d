"""MCP server exposing Buildin.ai search and page content.

Capabilities:

* tool ``search`` -- page search returning resource links, plus a text
  note carrying the next cursor when more results exist;
* resource ``buildin:///pages/{page_id}`` -- the page rendered as Markdown;
* prompt ``buildin-instructions`` -- usage instructions for the agent.

Run with ``buildinify-mcp`` (stdio transport).  The API key is read from
``BUILDIN_API_KEY``.
"""

from __future__ import annotations

import argparse
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP
from mcp.types import ResourceLink as MCPResourceLink
from mcp.types import TextContent

from buildinify.async_client import AsyncBuildinifyClient
from buildinify.config import BuildinifyConfig
from buildinify.errors import BuildinifyConfigError
from buildinify.models import SearchResult
from buildinify.observability import get_logger
from buildinify.prompts import BUILDIN_INSTRUCTIONS
from buildinify.search_formatter import PAGE_URI_TEMPLATE

SERVER_NAME = "Buildout MCP"

log = get_logger("buildinify.server")


def build_search_content(result: SearchResult) -> list[MCPResourceLink | TextContent]:
    """Turn a :class:`SearchResult` into MCP tool content items."""
    content: list[MCPResourceLink | TextContent] = [
        MCPResourceLink(
            type="resource_link",
            uri=link.uri,
            name=link.name,
            description=link.description,
            mimeType=link.mime_type,
        )
        for link in result.results
    ]
    if result.has_more and result.next_cursor:
        content.append(
            TextContent(
                type="text",
                text=f"More results available. Next cursor: {result.next_cursor}",
            )
        )
    return content


def create_server(client: AsyncBuildinifyClient) -> FastMCP:
    """Build a FastMCP server whose handlers use *client*."""

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await client.close()

    server = FastMCP(SERVER_NAME, lifespan=lifespan)

    @server.resource(
        PAGE_URI_TEMPLATE,
        name="page",
        description="Page content from Buildin.ai",
        mime_type="text/markdown",
    )
    async def page(page_id: str) -> str:
        return await client.page_to_markdown(page_id)

    @server.tool(name="search", description="Searches for pages in Buildin.ai")
    async def search(
        query: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> list[MCPResourceLink | TextContent]:
        """Search Buildin.ai pages.

        Args:
            query: Search query.
            start_cursor: Pagination cursor for the next page of results.
            page_size: Number of results per page (server default: 20).
        """
        result = await client.search(query, start_cursor=start_cursor, page_size=page_size)
        return build_search_content(result)

    @server.prompt(
        name="buildin-instructions",
        description="System instructions for working with Buildin.ai knowledge base",
    )
    def instructions() -> str:
        return BUILDIN_INSTRUCTIONS

    return server


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``buildinify-mcp`` console script."""
    parser = argparse.ArgumentParser(description="Buildin.ai MCP server (stdio)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level for the stderr JSON log (default: INFO)",
    )
    args = parser.parse_args(argv)
    get_logger("buildinify").setLevel(args.log_level.upper())

    try:
        config = BuildinifyConfig.from_env()
    except BuildinifyConfigError as exc:
        log.error(exc.message, extra={"extra_fields": exc.context})
        raise SystemExit(1) from exc

    client = AsyncBuildinifyClient(config=config)
    server = create_server(client)
    log.info(f"{SERVER_NAME} server started")
    server.run()


if __name__ == "__main__":
    main()
