"""Search response formatting.

Maps each search hit one-to-one onto a :class:`ResourceLink` pointing at
the page's ``buildin:///pages/{id}`` markdown resource.
"""

from __future__ import annotations

from typing import Any

from buildinify.models import ResourceLink, SearchResult

PAGE_URI_TEMPLATE = "buildin:///pages/{page_id}"


def page_uri(page_id: str) -> str:
    return PAGE_URI_TEMPLATE.format(page_id=page_id)


def get_page_title(result: dict[str, Any]) -> str:
    """Join the ``text.content`` of the hit's title property, or ``"Untitled"``."""
    properties = result.get("properties") or {}
    title_prop = properties.get("title") if isinstance(properties, dict) else None
    items = title_prop.get("title") if isinstance(title_prop, dict) else None
    if not isinstance(items, list):
        return "Untitled"
    parts: list[str] = []
    for item in items:
        text = item.get("text") if isinstance(item, dict) else None
        content = text.get("content") if isinstance(text, dict) else None
        parts.append(content if isinstance(content, str) else "")
    return "".join(parts)


def get_description(result: dict[str, Any]) -> str | None:
    """Describe where the hit lives, from its ``parent`` object."""
    parent = result.get("parent")
    if not isinstance(parent, dict):
        return None
    if parent.get("type") == "database_id":
        return f"From database: {parent.get('database_id')}"
    if parent.get("type") == "page_id":
        return f"Child of page: {parent.get('page_id')}"
    return None


def to_resource_link(result: dict[str, Any]) -> ResourceLink:
    page_id = result.get("id")
    if page_id is None:
        page_id = "unknown"
    return ResourceLink(
        uri=page_uri(page_id),
        name=get_page_title(result),
        description=get_description(result),
    )


def format_search_response(response: dict[str, Any]) -> SearchResult:
    """Convert a raw search response into a :class:`SearchResult`."""
    hits = response.get("results") or []
    cursor = response.get("next_cursor")
    return SearchResult(
        results=[to_resource_link(hit) for hit in hits if isinstance(hit, dict)],
        has_more=bool(response.get("has_more", False)),
        next_cursor=cursor if cursor else None,
    )
