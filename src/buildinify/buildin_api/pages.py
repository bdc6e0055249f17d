"""Page API wrapper for the Buildin.ai API."""

from __future__ import annotations

from typing import Any

from .transport import AsyncBuildinTransport


class AsyncPageAPI:
    """Read-only wrapper for the ``/pages`` endpoint.

    Parameters
    ----------
    transport:
        A configured :class:`AsyncBuildinTransport` instance.
    """

    def __init__(self, transport: AsyncBuildinTransport) -> None:
        self._transport = transport

    async def retrieve(self, page_id: str) -> dict[str, Any]:
        """Retrieve a page object (metadata and properties) by its ID.

        Raises :class:`~buildinify.errors.BuildinifyNotFoundError` when the
        ID does not name a page visible to the integration.
        """
        return await self._transport.request("GET", f"/pages/{page_id}")
