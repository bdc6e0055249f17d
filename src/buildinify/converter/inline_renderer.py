"""Inline rendering: rich-text arrays and small payload fields to Markdown.

Annotation wrapping order (innermost first)::

    code -> bold -> italic -> strikethrough -> link

so a link always encloses the style markers.  Text is emitted verbatim;
no Markdown escaping is applied.
"""

from __future__ import annotations

from typing import Any

from buildinify.models import RichTextSpan


def render_span(span: RichTextSpan) -> str:
    """Render one span; empty text yields ``""`` whatever its annotations."""
    text = span.plain_text
    if not text:
        return ""

    if span.code:
        text = f"`{text}`"
    if span.bold:
        text = f"**{text}**"
    if span.italic:
        text = f"*{text}*"
    if span.strikethrough:
        text = f"~~{text}~~"

    if span.href:
        text = f"[{text}]({span.href})"
    return text


def render_rich_text(rich_text: Any) -> str:
    """Render a rich-text array (API dicts or spans) to a Markdown string.

    ``None`` and other non-list values render as ``""``.
    """
    if not isinstance(rich_text, list):
        return ""
    spans = [
        item if isinstance(item, RichTextSpan) else RichTextSpan.from_api(item)
        for item in rich_text
    ]
    return "".join(render_span(span) for span in spans)


def render_icon(icon: Any) -> str:
    """Return the emoji of an ``emoji``-type icon, else ``""``."""
    if isinstance(icon, dict) and icon.get("type") == "emoji":
        emoji = icon.get("emoji")
        if isinstance(emoji, str):
            return emoji
    return ""


def resolve_url(data: dict[str, Any]) -> str:
    """URL of a media payload: ``url``, then ``file.url``, then ``external.url``.

    Only an absent (or null) URL falls through to the next source; an empty
    string is returned as-is.
    """
    url = data.get("url")
    for key in ("file", "external"):
        if url is not None:
            break
        ref = data.get(key)
        if isinstance(ref, dict):
            url = ref.get("url")
    return url if isinstance(url, str) else ""
