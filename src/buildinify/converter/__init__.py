"""Block tree → Markdown conversion.

Public API:

- :class:`MarkdownRenderer` -- stateful renderer collecting warnings.
- :func:`render_page_to_markdown` -- one-shot page rendering.
- :func:`render_rich_text` -- inline rich-text arrays to Markdown.
- :func:`render_table` -- table blocks to GFM tables.
"""

from buildinify.converter.inline_renderer import render_rich_text
from buildinify.converter.markdown_renderer import MarkdownRenderer, render_page_to_markdown
from buildinify.converter.tables import render_table

__all__ = [
    "MarkdownRenderer",
    "render_page_to_markdown",
    "render_rich_text",
    "render_table",
]
