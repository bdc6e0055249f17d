"""Tests for search_formatter.py."""

from __future__ import annotations

from buildinify.models import ResourceLink
from buildinify.search_formatter import (
    format_search_response,
    get_description,
    get_page_title,
    page_uri,
    to_resource_link,
)


def hit(page_id: str | None = "p1", title: list | None = None, parent: dict | None = None) -> dict:
    result: dict = {"object": "page"}
    if page_id is not None:
        result["id"] = page_id
    if title is not None:
        result["properties"] = {"title": {"type": "title", "title": title}}
    if parent is not None:
        result["parent"] = parent
    return result


class TestPageTitle:
    def test_joins_text_content(self):
        title = [{"text": {"content": "Road"}}, {"text": {"content": "map"}}]
        assert get_page_title(hit(title=title)) == "Roadmap"

    def test_missing_title_is_untitled(self):
        assert get_page_title(hit()) == "Untitled"

    def test_empty_title_list(self):
        assert get_page_title(hit(title=[])) == ""

    def test_items_without_text(self):
        assert get_page_title(hit(title=[{"type": "mention"}, {"text": {"content": "x"}}])) == "x"


class TestDescription:
    def test_database_parent(self):
        parent = {"type": "database_id", "database_id": "db1"}
        assert get_description(hit(parent=parent)) == "From database: db1"

    def test_page_parent(self):
        parent = {"type": "page_id", "page_id": "p0"}
        assert get_description(hit(parent=parent)) == "Child of page: p0"

    def test_workspace_parent(self):
        assert get_description(hit(parent={"type": "workspace", "workspace": True})) is None

    def test_no_parent(self):
        assert get_description(hit()) is None


class TestResourceLinks:
    def test_page_uri(self):
        assert page_uri("abc") == "buildin:///pages/abc"

    def test_to_resource_link(self):
        link = to_resource_link(hit(
            "p9",
            title=[{"text": {"content": "Notes"}}],
            parent={"type": "page_id", "page_id": "p0"},
        ))
        assert link == ResourceLink(
            uri="buildin:///pages/p9",
            name="Notes",
            description="Child of page: p0",
            mime_type="text/markdown",
        )

    def test_missing_id(self):
        assert to_resource_link(hit(page_id=None)).uri == "buildin:///pages/unknown"

    def test_empty_id_kept(self):
        assert to_resource_link(hit(page_id="")).uri == "buildin:///pages/"


class TestFormatSearchResponse:
    def test_maps_hits_one_to_one(self):
        response = {
            "results": [hit("a", title=[{"text": {"content": "A"}}]), hit("b")],
            "has_more": True,
            "next_cursor": "cur",
        }
        result = format_search_response(response)
        assert [r.uri for r in result.results] == ["buildin:///pages/a", "buildin:///pages/b"]
        assert [r.name for r in result.results] == ["A", "Untitled"]
        assert result.has_more is True
        assert result.next_cursor == "cur"

    def test_empty_response(self):
        result = format_search_response({})
        assert result.results == []
        assert result.has_more is False
        assert result.next_cursor is None

    def test_skips_non_dict_hits(self):
        result = format_search_response({"results": [None, hit("a")]})
        assert len(result.results) == 1
