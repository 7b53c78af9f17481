"""Page composition: from a requested URL path to a render-ready bundle.

Five stages, each usable on its own:

- ``build_path_index`` — flat parent-linked pages to full-path lookup
- ``resolve_layouts`` — page layout override, else site default
- ``aggregate_sections`` — plugin instances grouped by section label
- ``build_access_context`` — site roles classified, user roles picked
- ``PageComposer`` — fetches everything and assembles the bundle

Usage::

    composer = PageComposer(services)
    bundle = await composer.compose_url("https://example.com/blog/post-1")
"""

from wren.compose.access import AccessContext, build_access_context
from wren.compose.assembler import PageComposer
from wren.compose.layouts import LayoutSelection, resolve_layout_id, resolve_layouts
from wren.compose.paths import PathIndex, build_path_index
from wren.compose.sections import aggregate_sections
from wren.compose.urls import split_url

__all__ = [
    "AccessContext",
    "LayoutSelection",
    "PageComposer",
    "PathIndex",
    "aggregate_sections",
    "build_access_context",
    "build_path_index",
    "resolve_layout_id",
    "resolve_layouts",
    "split_url",
]
