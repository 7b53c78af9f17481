"""Composed page bundle — the composer's output.

Frozen dataclasses built once per request and never persisted. Each type
has a ``to_dict()`` producing plain JSON-safe data for transport layers
and the CLI.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from wren.models import (
    ANONYMOUS,
    Layout,
    PageNode,
    PluginDefinition,
    Role,
    Site,
    UserIdentity,
)

_EMPTY: Mapping[str, str] = MappingProxyType({})
_NO_SECTIONS: Mapping[str, tuple] = MappingProxyType({})


def _plain(value: Any) -> Any:
    """Convert dataclasses, enums, mappings, and tuples to JSON-safe values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True, slots=True)
class PluginEntry:
    """A plugin placed in a section, with its definition and settings.

    ``settings`` is always present; it is empty when nothing is persisted
    for the instance. ``id`` is ``None`` only for the built-in setup entry.
    """

    id: str | None
    definition: PluginDefinition
    section: str
    settings: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    order: int = 0
    cols: int = 12
    locked: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)


@dataclass(frozen=True, slots=True)
class SiteContext:
    """The site plus its settings and classified roles."""

    site: Site | None = None
    settings: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    all_roles: tuple[Role, ...] = ()
    admin_roles: tuple[Role, ...] = ()
    contributor_roles: tuple[Role, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)


@dataclass(frozen=True, slots=True)
class UserContext:
    """The requesting user and the subset of site roles they hold."""

    identity: UserIdentity = ANONYMOUS
    roles: tuple[Role, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = _plain(self)
        data["is_authenticated"] = self.identity.is_authenticated
        return data


@dataclass(frozen=True, slots=True)
class ComposedPageBundle:
    """Everything needed to render one page.

    Attributes:
        full_path: The requested path that resolved to ``page``.
        sections: Section label to plugin entries, in placement order.
        edit_layout: ``None`` only in the setup bundle.
        detail_layout: ``None`` only in the setup bundle.
    """

    full_path: str
    page: PageNode
    site: SiteContext
    layout: Layout
    edit_layout: Layout | None = None
    detail_layout: Layout | None = None
    sections: Mapping[str, tuple[PluginEntry, ...]] = field(default_factory=lambda: _NO_SECTIONS)
    user: UserContext = field(default_factory=UserContext)

    @property
    def title(self) -> str:
        return self.page.title

    @property
    def locked(self) -> bool:
        return self.page.locked

    def to_dict(self) -> dict[str, Any]:
        data = _plain(self)
        data["title"] = self.title
        data["locked"] = self.locked
        return data


@dataclass(frozen=True, slots=True)
class PageSummary:
    """One row of a site's page listing."""

    page: PageNode
    full_path: str
    layout_id: str

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)
