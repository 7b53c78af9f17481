"""Full-path index over a site's flat, parent-linked pages.

Pages arrive as a flat collection where hierarchy is expressed only by
``parent_id``. The index keeps an id-keyed table and reconstructs each
page's full path by walking parents upward, so no page ever holds a
reference to another page object.

Segments are concatenated with no separator; each segment already carries
its leading delimiter::

    ""  ->  "/blog"  ->  "/post-1"      full path: "/blog/post-1"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from wren.errors import DataIntegrityError, DuplicatePagePath, MissingParentReference, PageNotFound
from wren.models import PageNode

logger = logging.getLogger("wren.compose")


@dataclass(frozen=True, slots=True)
class PathIndex:
    """Lookup tables for one site's pages.

    Attributes:
        by_path: Full path to page. On duplicate paths the later page
            in source order wins (unless built in strict mode).
        by_id: Page id to page, in source order.
    """

    by_path: Mapping[str, PageNode]
    by_id: Mapping[str, PageNode]

    def resolve(self, path: str) -> PageNode:
        """Return the page at *path*.

        Raises:
            PageNotFound: If no page has that full path.
        """
        page = self.by_path.get(path)
        if page is None:
            raise PageNotFound(path)
        return page

    def full_path(self, page: PageNode) -> str:
        """Full path of *page*, computed against this index's pages."""
        return full_path(self.by_id, page)

    def __len__(self) -> int:
        return len(self.by_path)

    def __contains__(self, path: object) -> bool:
        return path in self.by_path


def full_path(pages_by_id: Mapping[str, PageNode], page: PageNode) -> str:
    """Concatenate segments from the root down to *page*.

    Raises:
        MissingParentReference: If a parent id is not in *pages_by_id*.
        DataIntegrityError: If the parent chain loops back on itself.
    """
    segments: list[str] = []
    current: PageNode | None = page
    # A chain longer than the table can only be a cycle
    remaining = len(pages_by_id) + 1
    while current is not None:
        if remaining == 0:
            raise DataIntegrityError(
                code="Page.ParentCycle",
                detail=f"Parent chain of page {page.id!r} is cyclic",
            )
        remaining -= 1
        segments.append(current.path)
        parent_id = current.parent_id
        if parent_id is None:
            current = None
        else:
            parent = pages_by_id.get(parent_id)
            if parent is None:
                raise MissingParentReference(current.id, parent_id)
            current = parent
    segments.reverse()
    return "".join(segments)


def build_path_index(pages: Iterable[PageNode], *, strict: bool = False) -> PathIndex:
    """Index *pages* by id and by full path.

    Args:
        pages: Every page of one site.
        strict: Raise ``DuplicatePagePath`` when two pages share a full
            path instead of keeping the later one.

    Returns:
        A :class:`PathIndex` with one path entry per distinct full path.
    """
    by_id: dict[str, PageNode] = {page.id: page for page in pages}
    by_path: dict[str, PageNode] = {}

    for page in by_id.values():
        path = full_path(by_id, page)
        previous = by_path.get(path)
        if previous is not None:
            if strict:
                raise DuplicatePagePath(path)
            logger.warning(
                "Duplicate full path %r: page %s replaces page %s", path, page.id, previous.id,
            )
        by_path[path] = page

    logger.debug("Indexed %d pages (%d distinct paths)", len(by_id), len(by_path))
    return PathIndex(by_path=by_path, by_id=by_id)
