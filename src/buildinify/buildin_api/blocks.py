"""Block API wrapper for the Buildin.ai API.

:class:`AsyncBlockAPI` exposes one page of a block's children
(:meth:`~AsyncBlockAPI.list_children`) and the pull-until-exhausted loop
over all of them (:meth:`~AsyncBlockAPI.list_all_children`).  Page IDs are
valid block IDs here: a page's top-level content is its children list.
"""

from __future__ import annotations

from typing import Any

from buildinify.errors import BuildinifyTransportError

from .transport import AsyncBuildinTransport

PAGE_SIZE = 100


def _check_children_page(response: dict[str, Any], block_id: str) -> dict[str, Any]:
    """Validate the shape of one ``/blocks/{id}/children`` response."""
    results = response.get("results", [])
    if not isinstance(results, list):
        raise BuildinifyTransportError(
            message=f"Malformed children listing for block {block_id}: "
            f"'results' is {type(results).__name__}, expected list",
            context={"path": f"/blocks/{block_id}/children", "block_id": block_id},
        )
    cursor = response.get("next_cursor")
    if cursor is not None and not isinstance(cursor, str):
        raise BuildinifyTransportError(
            message=f"Malformed children listing for block {block_id}: "
            f"'next_cursor' is {type(cursor).__name__}, expected string",
            context={"path": f"/blocks/{block_id}/children", "block_id": block_id},
        )
    return {
        "results": results,
        "has_more": bool(response.get("has_more", False)),
        "next_cursor": cursor,
    }


class AsyncBlockAPI:
    """Read-only wrapper for the ``/blocks`` endpoints.

    Parameters
    ----------
    transport:
        A configured :class:`AsyncBuildinTransport` instance.
    """

    def __init__(self, transport: AsyncBuildinTransport) -> None:
        self._transport = transport

    async def list_children(
        self,
        block_id: str,
        cursor: str | None = None,
    ) -> dict[str, Any]:
        """Fetch one page of the children of *block_id*.

        Parameters
        ----------
        block_id:
            The ID of the parent block or page.
        cursor:
            ``next_cursor`` from the previous page.  ``None`` requests the
            first page.

        Returns
        -------
        dict
            ``{"results": [...], "has_more": bool, "next_cursor": str | None}``.

        Raises
        ------
        BuildinifyTransportError
            If the request fails or the listing is malformed.
        """
        params: dict[str, Any] = {"page_size": PAGE_SIZE}
        if cursor is not None:
            params["start_cursor"] = cursor
        response = await self._transport.request(
            "GET", f"/blocks/{block_id}/children", params=params,
        )
        return _check_children_page(response, block_id)

    async def list_all_children(self, block_id: str) -> list[dict[str, Any]]:
        """Fetch every direct child of *block_id*, following cursors.

        Stops when a page reports ``has_more`` false or carries no
        ``next_cursor``.  Order is preserved across pages.
        """
        children: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            page = await self.list_children(block_id, cursor)
            children.extend(page["results"])
            cursor = page["next_cursor"] if page["has_more"] else None
            if not cursor:
                return children
