"""Layout selection: page override, else site default.

Each of the three layout roles resolves independently. The precedence
rule lives in ``resolve_layout_id`` so it can be tested on its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial

from wren._internal.concurrency import gather
from wren.models import Layout, PageNode, Site
from wren.services import LayoutService

logger = logging.getLogger("wren.compose")


@dataclass(frozen=True, slots=True)
class LayoutSelection:
    """Resolved layout ids for the three layout roles."""

    primary: str
    edit: str
    detail: str


@dataclass(frozen=True, slots=True)
class ResolvedLayouts:
    """Loaded layouts for the three layout roles."""

    primary: Layout
    edit: Layout
    detail: Layout


def resolve_layout_id(override: str | None, default: str) -> str:
    """Return *override* when set, else *default*."""
    if override is not None:
        return override
    return default


def resolve_layouts(page: PageNode, site: Site) -> LayoutSelection:
    """Pick the primary, edit, and detail layout ids for *page*."""
    return LayoutSelection(
        primary=resolve_layout_id(page.layout_id, site.layout_id),
        edit=resolve_layout_id(page.edit_layout_id, site.edit_layout_id),
        detail=resolve_layout_id(page.detail_layout_id, site.detail_layout_id),
    )


async def load_layouts(layouts: LayoutService, selection: LayoutSelection) -> ResolvedLayouts:
    """Fetch the three selected layouts concurrently.

    Roles sharing a layout id share one lookup.

    Raises:
        LayoutNotFound: Propagated from *layouts* for any missing id.
    """
    wanted = dict.fromkeys((selection.primary, selection.edit, selection.detail))
    loaded: dict[str, Layout] = await gather(
        {layout_id: partial(layouts.get_by_id, layout_id) for layout_id in wanted}
    )

    logger.debug("Loaded layouts %s", ", ".join(wanted))
    return ResolvedLayouts(
        primary=loaded[selection.primary],
        edit=loaded[selection.edit],
        detail=loaded[selection.detail],
    )
