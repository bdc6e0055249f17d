"""Tests for converter/tables.py.

Covers row collection, ragged-row padding, header placement and checks
that the output parses back as a GFM table.
"""

from __future__ import annotations

import mistune

from buildinify.converter.tables import collect_rows, pad_rows, render_table
from buildinify.models import Block


def cell(text: str, **annotations) -> list[dict]:
    return [{"type": "text", "plain_text": text, "annotations": annotations}]


def row(*texts: str) -> Block:
    return Block(id="r", type="table_row", data={"cells": [cell(t) for t in texts]})


def table(*rows: Block, **data) -> Block:
    return Block(id="t", type="table", data=data, has_children=bool(rows), children=list(rows))


def parse_gfm(markdown: str) -> list[dict]:
    parser = mistune.create_markdown(renderer="ast", plugins=["table"])
    return parser(markdown)


class TestCollectRows:
    def test_skips_non_row_children(self):
        block = table(row("a"), Block(type="paragraph"), row("b"))
        assert collect_rows(block) == [["a"], ["b"]]

    def test_skips_rows_without_cells(self):
        block = table(row("a"), Block(type="table_row", data={}))
        assert collect_rows(block) == [["a"]]

    def test_keeps_rows_with_empty_cell_list(self):
        block = table(row("a"), Block(type="table_row", data={"cells": []}))
        assert collect_rows(block) == [["a"], []]

    def test_cells_render_inline_markdown(self):
        block = table(
            Block(type="table_row", data={"cells": [cell("x", bold=True), cell("y", code=True)]}),
        )
        assert collect_rows(block) == [["**x**", "`y`"]]


class TestPadRows:
    def test_pads_to_widest(self):
        assert pad_rows([["a", "b", "c"], ["1"]]) == [["a", "b", "c"], ["1", "", ""]]

    def test_equal_rows_unchanged(self):
        assert pad_rows([["a", "b"], ["1", "2"]]) == [["a", "b"], ["1", "2"]]


class TestRenderTable:
    def test_header_separator_and_rows(self):
        block = table(row("A", "B"), row("1", "2"), row("3", "4"), has_column_header=True)
        assert render_table(block) == (
            "| A | B |\n"
            "| --- | --- |\n"
            "| 1 | 2 |\n"
            "| 3 | 4 |\n"
            "\n"
        )

    def test_header_flag_does_not_change_output(self):
        flagged = table(row("A"), row("1"), has_column_header=True)
        unflagged = table(row("A"), row("1"), has_column_header=False)
        assert render_table(flagged) == render_table(unflagged)

    def test_first_row_not_repeated_as_data(self):
        out = render_table(table(row("H"), row("d")))
        assert out.count("| H |") == 1

    def test_single_row_table(self):
        assert render_table(table(row("only"))) == "| only |\n| --- |\n\n"

    def test_ragged_rows_padded(self):
        block = table(row("A", "B", "C"), row("1"))
        assert render_table(block) == (
            "| A | B | C |\n"
            "| --- | --- | --- |\n"
            "| 1 |  |  |\n"
            "\n"
        )

    def test_wider_body_row_widens_header(self):
        block = table(row("A"), row("1", "2"))
        assert render_table(block) == "| A |  |\n| --- | --- |\n| 1 | 2 |\n\n"

    def test_no_rows_renders_nothing(self):
        assert render_table(table()) == ""

    def test_output_parses_as_gfm_table(self):
        block = table(row("Name", "Age"), row("Ann", "31"), row("Bo", "7"))
        tokens = parse_gfm(render_table(block))
        tables = [tok for tok in tokens if tok["type"] == "table"]
        assert len(tables) == 1
        head, body = tables[0]["children"]
        assert head["type"] == "table_head"
        assert len(head["children"]) == 2
        assert body["type"] == "table_body"
        assert len(body["children"]) == 2
