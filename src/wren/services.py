"""Collaborator service protocols.

The composer never touches storage. Everything it needs arrives through
these async lookup services, bundled in a ``Services`` value. Any object
with matching methods satisfies a protocol; ``wren.memory.MemoryStore``
provides in-memory implementations of all of them for tests and the CLI.

Lookups that name a single entity raise the matching ``NotFound``
subclass when it does not exist. Collection lookups return an empty
sequence instead.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from wren.models import Layout, PageNode, PluginDefinition, PluginInstance, Role, Settings, Site


class SiteService(Protocol):
    async def get_by_url(self, domain: str) -> Site:
        """Return the site serving *domain*, or raise ``SiteNotFound``."""
        ...


class PageService(Protocol):
    async def get_by_site_id(self, site_id: str) -> Sequence[PageNode]: ...


class LayoutService(Protocol):
    async def get_by_id(self, layout_id: str) -> Layout:
        """Return the layout, or raise ``LayoutNotFound``."""
        ...


class PluginService(Protocol):
    async def get_by_page_id(self, page_id: str) -> Sequence[PluginInstance]: ...


class PluginDefinitionService(Protocol):
    async def get_all(self) -> Sequence[PluginDefinition]: ...


class SettingsService(Protocol):
    async def get_by_id(self, entity_id: str) -> Settings:
        """Return settings for *entity_id*; empty values when none are stored."""
        ...

    async def get_by_ids(self, entity_ids: Iterable[str]) -> Sequence[Settings]:
        """Return settings only for the ids that have any stored."""
        ...


class RoleService(Protocol):
    async def get_all_for_site(self, site_id: str) -> Sequence[Role] | None: ...


class UserRoleService(Protocol):
    async def get_user_role_ids(self, user_id: str, site_id: str) -> Sequence[str]: ...


class SetupService(Protocol):
    async def is_initialized(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class Services:
    """One instance of every collaborator the composer calls."""

    sites: SiteService
    pages: PageService
    layouts: LayoutService
    plugins: PluginService
    plugin_definitions: PluginDefinitionService
    settings: SettingsService
    roles: RoleService
    user_roles: UserRoleService
    setup: SetupService
