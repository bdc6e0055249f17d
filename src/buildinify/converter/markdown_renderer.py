"""Block tree to Markdown renderer.

Converts a fetched :class:`~buildinify.models.PageContent` into a single
Markdown string by depth-first traversal.  Every block type has a fixed
layout rule; see the dispatch table at the bottom of this module.

``depth`` tracks list nesting for indentation (two spaces per level), not
raw tree depth.  Layout wrappers (column lists, columns, synced blocks,
templates) render their children at the *same* depth with no markup of
their own, and quotes and toggles restart their children at depth 0.

Rendering never raises.  Missing fields fall back to empty strings or
placeholders, and block types without a rule fall back to their text.

Usage::

    from buildinify.converter import render_page_to_markdown

    md = render_page_to_markdown(page_content)
"""

from __future__ import annotations

from collections.abc import Callable as _Callable

from buildinify.models import Block, ConversionWarning, PageContent

from .inline_renderer import render_icon, render_rich_text, resolve_url
from .tables import render_table

_INDENT = "  "


class MarkdownRenderer:
    """Renderer that converts a block tree to Markdown.

    Block types with no dedicated rule are recorded as
    :class:`ConversionWarning` instances in :attr:`warnings`, which is
    reset at the start of every :meth:`render_page` call.
    """

    def __init__(self) -> None:
        self.warnings: list[ConversionWarning] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_page(self, content: PageContent) -> str:
        """Render a page: optional ``# title`` heading, then every block.

        Leading and trailing whitespace is stripped from the result.
        """
        self.warnings = []
        parts: list[str] = []

        title = content.page.title_text()
        if title:
            parts.append(f"# {title}\n\n")

        parts.append(self.render_blocks(content.blocks))
        return "".join(parts).strip()

    def render_blocks(self, blocks: list[Block], depth: int = 0) -> str:
        """Render *blocks* in order and concatenate the results."""
        return "".join(self.render_block(block, depth) for block in blocks)

    def render_block(self, block: Block, depth: int = 0) -> str:
        """Render one block (and its children, where its rule includes them)."""
        renderer = _BLOCK_RENDERERS.get(block.type)
        if renderer is not None:
            return renderer(self, block, depth)
        return self._render_unknown(block)

    # ------------------------------------------------------------------
    # Text blocks
    # ------------------------------------------------------------------

    def _render_paragraph(self, block: Block, depth: int) -> str:
        text = render_rich_text(block.data.get("rich_text"))
        return f"{text}\n\n" if text else "\n"

    def _render_heading(self, block: Block, level: int) -> str:
        text = render_rich_text(block.data.get("rich_text"))
        return f"{'#' * level} {text}\n\n"

    def _render_heading_1(self, block: Block, depth: int) -> str:
        return self._render_heading(block, 1)

    def _render_heading_2(self, block: Block, depth: int) -> str:
        return self._render_heading(block, 2)

    def _render_heading_3(self, block: Block, depth: int) -> str:
        return self._render_heading(block, 3)

    def _render_quote(self, block: Block, depth: int) -> str:
        text = render_rich_text(block.data.get("rich_text"))
        lines = "\n".join(f"> {line}" for line in text.split("\n"))
        if not block.children:
            return f"{lines}\n\n"

        # Children are laid out from column zero, then quoted line by line.
        child_md = self.render_blocks(block.children, 0)
        quoted = "\n".join(f"> {line}" for line in child_md.split("\n"))
        return f"{lines}\n{quoted}\n\n"

    def _render_callout(self, block: Block, depth: int) -> str:
        text = render_rich_text(block.data.get("rich_text"))
        icon = render_icon(block.data.get("icon"))
        prefix = f"{icon} " if icon else ""
        return f"> {prefix}{text}\n\n"

    def _render_code(self, block: Block, depth: int) -> str:
        language = block.data.get("language") or ""
        code_text = render_rich_text(block.data.get("rich_text"))
        return f"```{language}\n{code_text}\n```\n\n"

    def _render_equation(self, block: Block, depth: int) -> str:
        expression = block.data.get("expression") or ""
        return f"$$\n{expression}\n$$\n\n"

    def _render_divider(self, block: Block, depth: int) -> str:
        return "---\n\n"

    # ------------------------------------------------------------------
    # Lists and toggles
    # ------------------------------------------------------------------

    def _render_list_item(self, block: Block, depth: int, marker: str) -> str:
        text = render_rich_text(block.data.get("rich_text"))
        result = f"{_INDENT * depth}{marker}{text}\n"
        if block.children:
            result += self.render_blocks(block.children, depth + 1)
        return result

    def _render_bulleted_list_item(self, block: Block, depth: int) -> str:
        return self._render_list_item(block, depth, "- ")

    def _render_numbered_list_item(self, block: Block, depth: int) -> str:
        # Markdown renumbers "1." items itself.
        return self._render_list_item(block, depth, "1. ")

    def _render_to_do(self, block: Block, depth: int) -> str:
        checkbox = "[x]" if block.data.get("checked") else "[ ]"
        return self._render_list_item(block, depth, f"- {checkbox} ")

    def _render_toggle(self, block: Block, depth: int) -> str:
        text = render_rich_text(block.data.get("rich_text"))
        result = f"<details>\n<summary>{text}</summary>\n\n"
        if block.children:
            result += self.render_blocks(block.children, 0)
        return result + "</details>\n\n"

    # ------------------------------------------------------------------
    # Media and links
    # ------------------------------------------------------------------

    def _render_image(self, block: Block, depth: int) -> str:
        url = resolve_url(block.data)
        caption = render_rich_text(block.data.get("caption"))
        return f"![{caption}]({url})\n\n"

    def _render_file(self, block: Block, depth: int) -> str:
        url = resolve_url(block.data)
        caption = render_rich_text(block.data.get("caption")) or "File"
        return f"[{caption}]({url})\n\n"

    def _render_web_link(self, block: Block, depth: int) -> str:
        """Bookmarks and embeds: the caption links to the URL, or the URL itself."""
        url = block.data.get("url") or ""
        caption = render_rich_text(block.data.get("caption")) or url
        return f"[{caption}]({url})\n\n"

    def _render_child_page(self, block: Block, depth: int) -> str:
        title = block.data.get("title")
        if title is None:
            title = "Untitled"
        return f"📄 **{title}**\n\n"

    def _render_child_database(self, block: Block, depth: int) -> str:
        title = block.data.get("title")
        if title is None:
            title = "Untitled Database"
        return f"🗃️ **{title}**\n\n"

    def _render_link_to_page(self, block: Block, depth: int) -> str:
        page_id = block.data.get("page_id") or ""
        return f"🔗 [Page Link]({page_id})\n\n"

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def _render_table(self, block: Block, depth: int) -> str:
        return render_table(block)

    def _render_table_row(self, block: Block, depth: int) -> str:
        # Rows only render through their parent table.
        return ""

    def _render_passthrough(self, block: Block, depth: int) -> str:
        """Layout wrappers: children at the same depth, no markup."""
        return self.render_blocks(block.children, depth)

    # ------------------------------------------------------------------
    # Fallback
    # ------------------------------------------------------------------

    def _render_unknown(self, block: Block) -> str:
        """Render an unrecognised block as a paragraph of its text, if any."""
        self.warnings.append(
            ConversionWarning(
                code="UNKNOWN_BLOCK_TYPE",
                message=f"No Markdown rule for block type {block.type!r}",
                context={"block_id": block.id, "block_type": block.type},
            )
        )
        text = render_rich_text(block.data.get("rich_text"))
        return f"{text}\n\n" if text else ""


# ------------------------------------------------------------------
# Block renderer dispatch table
# ------------------------------------------------------------------

_BlockRenderer = _Callable[["MarkdownRenderer", Block, int], str]

_BLOCK_RENDERERS: dict[str, _BlockRenderer] = {
    "paragraph": MarkdownRenderer._render_paragraph,
    "heading_1": MarkdownRenderer._render_heading_1,
    "heading_2": MarkdownRenderer._render_heading_2,
    "heading_3": MarkdownRenderer._render_heading_3,
    "bulleted_list_item": MarkdownRenderer._render_bulleted_list_item,
    "numbered_list_item": MarkdownRenderer._render_numbered_list_item,
    "to_do": MarkdownRenderer._render_to_do,
    "quote": MarkdownRenderer._render_quote,
    "code": MarkdownRenderer._render_code,
    "divider": MarkdownRenderer._render_divider,
    "image": MarkdownRenderer._render_image,
    "file": MarkdownRenderer._render_file,
    "bookmark": MarkdownRenderer._render_web_link,
    "embed": MarkdownRenderer._render_web_link,
    "callout": MarkdownRenderer._render_callout,
    "equation": MarkdownRenderer._render_equation,
    "toggle": MarkdownRenderer._render_toggle,
    "table": MarkdownRenderer._render_table,
    "table_row": MarkdownRenderer._render_table_row,
    "column_list": MarkdownRenderer._render_passthrough,
    "column": MarkdownRenderer._render_passthrough,
    "synced_block": MarkdownRenderer._render_passthrough,
    "template": MarkdownRenderer._render_passthrough,
    "child_page": MarkdownRenderer._render_child_page,
    "child_database": MarkdownRenderer._render_child_database,
    "link_to_page": MarkdownRenderer._render_link_to_page,
}


def render_page_to_markdown(content: PageContent) -> str:
    """Render *content* with a fresh :class:`MarkdownRenderer`."""
    return MarkdownRenderer().render_page(content)
