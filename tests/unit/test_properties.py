"""Property-based tests for buildinify using Hypothesis.

These check invariants of the inline renderer, the table renderer, the
block renderer and the retry policy over a wide range of generated inputs.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from buildinify.buildin_api.retries import compute_backoff, should_retry
from buildinify.converter.inline_renderer import render_rich_text, render_span
from buildinify.converter.markdown_renderer import MarkdownRenderer, render_page_to_markdown
from buildinify.converter.tables import render_table
from buildinify.models import Block, Page, PageContent, RichTextSpan

# ---------------------------------------------------------------------------
# Reusable strategies
# ---------------------------------------------------------------------------

plain_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n|"),
    min_size=1,
    max_size=30,
)

spans = st.builds(
    RichTextSpan,
    plain_text=st.text(max_size=20),
    bold=st.booleans(),
    italic=st.booleans(),
    strikethrough=st.booleans(),
    code=st.booleans(),
    href=st.one_of(st.none(), st.just("https://example.com")),
)

table_rows = st.lists(
    st.lists(plain_text, min_size=0, max_size=5),
    min_size=1,
    max_size=6,
)


def _table_block(rows: list[list[str]]) -> Block:
    children = [
        Block(
            type="table_row",
            data={"cells": [[{"plain_text": text}] for text in row]},
        )
        for row in rows
    ]
    return Block(type="table", has_children=True, children=children)


# ---------------------------------------------------------------------------
# Inline rendering
# ---------------------------------------------------------------------------

@given(spans)
def test_span_contains_its_text(span):
    rendered = render_span(span)
    if span.plain_text:
        assert span.plain_text in rendered
    else:
        assert rendered == ""


@given(st.lists(spans, max_size=8))
def test_rich_text_is_concatenation_of_spans(items):
    assert render_rich_text(items) == "".join(render_span(s) for s in items)


@given(plain_text)
def test_plain_span_renders_verbatim(text):
    assert render_rich_text([{"plain_text": text}]) == text


# ---------------------------------------------------------------------------
# Block rendering
# ---------------------------------------------------------------------------

@given(plain_text)
def test_paragraph_round_trips_text(text):
    block = Block(type="paragraph", data={"rich_text": [{"plain_text": text}]})
    assert MarkdownRenderer().render_block(block) == f"{text}\n\n"


@given(st.lists(plain_text, max_size=10))
def test_paragraphs_render_in_order(texts):
    blocks = [Block(type="paragraph", data={"rich_text": [{"plain_text": t}]}) for t in texts]
    markdown = render_page_to_markdown(PageContent(page=Page(id="p"), blocks=blocks))
    assert markdown == "\n\n".join(texts).strip()


@given(st.integers(min_value=0, max_value=8), plain_text)
def test_list_indent_tracks_depth(depth, text):
    block = Block(type="bulleted_list_item", data={"rich_text": [{"plain_text": text}]})
    assert MarkdownRenderer().render_block(block, depth) == "  " * depth + f"- {text}\n"


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

@given(table_rows)
def test_table_shape(rows):
    lines = render_table(_table_block(rows)).split("\n")
    width = max(len(row) for row in rows)
    # header, separator, one line per data row, then the blank line
    assert len(lines) == len(rows) + 3
    assert lines[1] == "| " + " | ".join(["---"] * width) + " |"
    assert lines[-2:] == ["", ""]
    for line in lines[:-2]:
        assert line.startswith("| ")
        assert line.endswith(" |")


# ---------------------------------------------------------------------------
# Retry policy
# ---------------------------------------------------------------------------

@given(
    st.integers(min_value=0, max_value=20),
    st.floats(min_value=0, max_value=10),
    st.floats(min_value=0, max_value=120),
    st.booleans(),
)
def test_backoff_never_exceeds_maximum(attempt, base, maximum, jitter):
    delay = compute_backoff(attempt, base=base, maximum=maximum, jitter=jitter)
    assert 0.0 <= delay <= maximum


@given(st.integers(min_value=1, max_value=10), st.sampled_from([429, 500, 502, 503, 504]))
def test_no_retry_on_last_attempt(max_attempts, status):
    assert should_retry(status, None, max_attempts - 1, max_attempts) is False
