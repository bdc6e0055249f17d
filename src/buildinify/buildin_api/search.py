"""Search API wrapper for the Buildin.ai API."""

from __future__ import annotations

from typing import Any

from .transport import AsyncBuildinTransport


class AsyncSearchAPI:
    """Wrapper for ``POST /search``.

    Parameters
    ----------
    transport:
        A configured :class:`AsyncBuildinTransport` instance.
    """

    def __init__(self, transport: AsyncBuildinTransport) -> None:
        self._transport = transport

    async def search(
        self,
        query: str,
        start_cursor: str | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """Run a full-text page search and return the raw response.

        *start_cursor* and *page_size* are only sent when truthy, so the
        server defaults apply otherwise.
        """
        body: dict[str, Any] = {"query": query}
        if start_cursor:
            body["start_cursor"] = start_cursor
        if page_size:
            body["page_size"] = page_size
        return await self._transport.request("POST", "/search", json=body)
