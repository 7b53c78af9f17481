"""Tests for wren.compose.paths — full-path index over parent-linked pages."""

import logging

import pytest

from wren.compose.paths import build_path_index, full_path
from wren.errors import DataIntegrityError, DuplicatePagePath, MissingParentReference, PageNotFound
from wren.models import PageNode


def _page(page_id: str, path: str, parent_id: str | None = None) -> PageNode:
    return PageNode(id=page_id, site_id="s1", path=path, parent_id=parent_id)


TREE = [
    _page("root", ""),
    _page("blog", "/blog", "root"),
    _page("post", "/post-1", "blog"),
    _page("about", "/about", "root"),
    _page("team", "/team", "about"),
]


class TestFullPath:
    def test_root_is_its_own_segment(self) -> None:
        by_id = {p.id: p for p in TREE}
        assert full_path(by_id, by_id["root"]) == ""

    def test_segments_concatenate_root_to_leaf(self) -> None:
        by_id = {p.id: p for p in TREE}
        assert full_path(by_id, by_id["post"]) == "/blog/post-1"

    def test_no_separator_is_added(self) -> None:
        pages = [_page("a", "x"), _page("b", "y", "a")]
        by_id = {p.id: p for p in pages}
        assert full_path(by_id, by_id["b"]) == "xy"

    def test_missing_parent_raises(self) -> None:
        orphan = _page("orphan", "/lost", "nowhere")
        with pytest.raises(MissingParentReference) as exc_info:
            full_path({"orphan": orphan}, orphan)
        assert exc_info.value.code == "Page.ParentNotFound"

    def test_cycle_raises_instead_of_looping(self) -> None:
        pages = [_page("a", "/a", "b"), _page("b", "/b", "a")]
        by_id = {p.id: p for p in pages}
        with pytest.raises(DataIntegrityError, match="cyclic"):
            full_path(by_id, by_id["a"])


class TestBuildPathIndex:
    def test_one_entry_per_page(self) -> None:
        index = build_path_index(TREE)
        assert len(index) == len(TREE)
        assert set(index.by_path) == {"", "/blog", "/blog/post-1", "/about", "/about/team"}

    def test_round_trip(self) -> None:
        index = build_path_index(TREE)
        for page in TREE:
            assert index.resolve(index.full_path(page)) is page

    def test_by_id_keeps_source_order(self) -> None:
        index = build_path_index(TREE)
        assert list(index.by_id) == ["root", "blog", "post", "about", "team"]

    def test_children_listed_before_parents(self) -> None:
        pages = [_page("post", "/post-1", "blog"), _page("blog", "/blog", "root"), _page("root", "")]
        index = build_path_index(pages)
        assert index.resolve("/blog/post-1").id == "post"

    def test_contains(self) -> None:
        index = build_path_index(TREE)
        assert "/about/team" in index
        assert "/about/nobody" not in index

    def test_empty_collection(self) -> None:
        index = build_path_index([])
        assert len(index) == 0
        with pytest.raises(PageNotFound):
            index.resolve("")


class TestResolve:
    def test_resolves_nested_page(self) -> None:
        assert build_path_index(TREE).resolve("/blog/post-1").id == "post"

    def test_missing_path_raises_page_not_found(self) -> None:
        with pytest.raises(PageNotFound) as exc_info:
            build_path_index(TREE).resolve("/blog/missing")
        assert exc_info.value.status == 404
        assert exc_info.value.code == "Page.NotFound"

    def test_trailing_slash_is_a_different_path(self) -> None:
        with pytest.raises(PageNotFound):
            build_path_index(TREE).resolve("/blog/")


class TestDuplicatePaths:
    def test_last_page_wins(self) -> None:
        pages = [*TREE, _page("blog-2", "/blog", "root")]
        index = build_path_index(pages)
        assert index.resolve("/blog").id == "blog-2"
        assert len(index) == len(TREE)

    def test_duplicate_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        pages = [*TREE, _page("blog-2", "/blog", "root")]
        with caplog.at_level(logging.WARNING, logger="wren.compose"):
            build_path_index(pages)
        assert "Duplicate full path '/blog'" in caplog.text

    def test_strict_mode_raises(self) -> None:
        pages = [*TREE, _page("blog-2", "/blog", "root")]
        with pytest.raises(DuplicatePagePath) as exc_info:
            build_path_index(pages, strict=True)
        assert exc_info.value.code == "Page.PathMustBeUnique"

    def test_strict_mode_accepts_unique_paths(self) -> None:
        assert len(build_path_index(TREE, strict=True)) == len(TREE)
