"""Data models for buildinify.

The API speaks JSON; everything past the transport layer works on the
small dataclasses below.  ``from_api`` constructors never raise: a
missing or wrongly-typed field becomes an empty default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RichTextSpan:
    """One run of text with independent style annotations and an optional link."""

    plain_text: str = ""
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    code: bool = False
    href: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> RichTextSpan:
        """Build a span from an API rich-text object.

        ``plain_text`` is preferred; ``text.content`` is used when the
        object was built locally and never round-tripped through the API.
        """
        item = _as_dict(item)
        annotations = _as_dict(item.get("annotations"))
        text = item.get("plain_text")
        if not isinstance(text, str):
            content = _as_dict(item.get("text")).get("content")
            text = content if isinstance(content, str) else ""
        href = item.get("href")
        return cls(
            plain_text=text,
            bold=bool(annotations.get("bold")),
            italic=bool(annotations.get("italic")),
            strikethrough=bool(annotations.get("strikethrough")),
            code=bool(annotations.get("code")),
            href=href if isinstance(href, str) and href else None,
        )


def spans_from_api(items: Any) -> list[RichTextSpan]:
    """Convert an API rich-text array to spans; non-lists yield ``[]``."""
    if not isinstance(items, list):
        return []
    return [RichTextSpan.from_api(item) for item in items]


# ---------------------------------------------------------------------------
# Blocks and pages
# ---------------------------------------------------------------------------

@dataclass
class Block:
    """A node of the page's block tree.

    ``data`` is the type-specific payload exactly as the API returned it.
    ``children`` holds the already-fetched child blocks in document order.
    """

    id: str = ""
    type: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    has_children: bool = False
    children: list[Block] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> Block:
        """Build a childless :class:`Block` from an API block object.

        The payload lives under ``data``; objects shaped like Notion's API
        keep it under a key named after the block type instead, which is
        accepted as a fallback.
        """
        raw = _as_dict(raw)
        block_type = raw.get("type") if isinstance(raw.get("type"), str) else ""
        data = raw.get("data")
        if not isinstance(data, dict):
            data = _as_dict(raw.get(block_type)) if block_type else {}
        block_id = raw.get("id")
        return cls(
            id=block_id if isinstance(block_id, str) else "",
            type=block_type,
            data=data,
            has_children=bool(raw.get("has_children")),
        )


@dataclass
class Page:
    """Page metadata.  Only the title property is consumed by the renderer."""

    id: str = ""
    properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> Page:
        raw = _as_dict(raw)
        page_id = raw.get("id")
        return cls(
            id=page_id if isinstance(page_id, str) else "",
            properties=_as_dict(raw.get("properties")),
        )

    def title_property(self) -> dict[str, Any] | None:
        """Return the title property, looked up under ``title`` then ``Title``.

        Only a property whose ``type`` is ``"title"`` qualifies.
        """
        prop = self.properties.get("title")
        if prop is None:
            prop = self.properties.get("Title")
        if isinstance(prop, dict) and prop.get("type") == "title":
            return prop
        return None

    def title_text(self) -> str:
        """The page title as plain text, or ``""`` when there is none."""
        prop = self.title_property()
        if prop is None:
            return ""
        return "".join(span.plain_text for span in spans_from_api(prop.get("title")))


@dataclass
class PageContent:
    """A page plus its complete, ordered top-level block forest."""

    page: Page
    blocks: list[Block] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResourceLink:
    """A search hit expressed as a link to the page's markdown resource."""

    uri: str
    name: str
    description: str | None = None
    mime_type: str = "text/markdown"


@dataclass
class SearchResult:
    """One page of search hits plus the cursor for the next page."""

    results: list[ResourceLink] = field(default_factory=list)
    has_more: bool = False
    next_cursor: str | None = None


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------

@dataclass
class ConversionWarning:
    """A non-fatal note produced while rendering.

    Attributes
    ----------
    code:
        Machine-readable warning code, e.g. ``"UNKNOWN_BLOCK_TYPE"``.
    message:
        Human-readable description.
    context:
        Structured diagnostic data.
    """

    code: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)
