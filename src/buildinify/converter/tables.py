"""Table rendering: a ``table`` block and its ``table_row`` children to GFM.

Markdown tables cannot exist without a header row, so the first row is
always emitted in header position followed by a ``---`` separator, and the
remaining rows become data rows.  The table's ``has_column_header`` flag
therefore does not change the output: an unflagged table simply has its
first row promoted to the visual header, and that row is never repeated
as data.
"""

from __future__ import annotations

from buildinify.models import Block

from .inline_renderer import render_rich_text


def collect_rows(block: Block) -> list[list[str]]:
    """Render the cells of every ``table_row`` child that carries ``cells``."""
    rows: list[list[str]] = []
    for child in block.children:
        if child.type != "table_row":
            continue
        cells = child.data.get("cells")
        if not isinstance(cells, list):
            continue
        rows.append([render_rich_text(cell) for cell in cells])
    return rows


def pad_rows(rows: list[list[str]]) -> list[list[str]]:
    """Right-pad every row with empty cells to the widest row's length."""
    width = max(len(row) for row in rows)
    return [row + [""] * (width - len(row)) for row in rows]


def _format_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"


def render_table(block: Block) -> str:
    """Render *block* as a GFM table, or ``""`` when it has no rows.

    Parameters
    ----------
    block:
        A ``table`` block whose children have already been fetched.

    Returns
    -------
    str
        Header row, separator row, data rows, then one blank line.
    """
    rows = collect_rows(block)
    if not rows:
        return ""

    rows = pad_rows(rows)
    header, body = rows[0], rows[1:]

    parts = [_format_row(header), _format_row(["---"] * len(header))]
    parts.extend(_format_row(row) for row in body)
    return "".join(parts) + "\n"
