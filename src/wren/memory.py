"""In-memory collaborator services.

``MemoryStore`` holds sites, pages, layouts, plugins, settings, and roles
in plain dicts and exposes one async service per protocol in
``wren.services``. Used by the CLI and the test suite; any real deployment
supplies its own services backed by a database.

Loading from a JSON document::

    {
      "initialized": true,
      "sites": [{"id": "s1", "url": "example.com", "layout_id": "l1", ...}],
      "pages": [{"id": "p1", "site_id": "s1", "path": "", ...}],
      "layouts": [...],
      "plugin_definitions": [{"id": "d1", "name": "Text", "types": [...]}],
      "plugins": [{"id": "i1", "page_id": "p1", "definition_id": "d1", "section": "Main"}],
      "settings": [{"id": "i1", "values": {"text": "Hello"}}],
      "roles": [{"id": "r1", "site_id": "s1", "name": "Admins", "type": "Administrators"}],
      "user_roles": [{"user_id": "u1", "site_id": "s1", "role_ids": ["r1"]}]
    }

Every lookup is recorded in ``MemoryStore.calls`` as ``"<service>.<method>"``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from wren._internal.mapping import map_records, to_bool
from wren.errors import LayoutNotFound, SiteNotFound
from wren.models import (
    Layout,
    PageNode,
    PluginDefinition,
    PluginInstance,
    Role,
    Settings,
    Site,
    UserRoleLink,
)
from wren.services import Services

logger = logging.getLogger("wren.store")


class MemoryStore:
    """Snapshot data plus one service object per collaborator protocol."""

    def __init__(
        self,
        *,
        sites: Iterable[Site] = (),
        pages: Iterable[PageNode] = (),
        layouts: Iterable[Layout] = (),
        plugin_definitions: Iterable[PluginDefinition] = (),
        plugins: Iterable[PluginInstance] = (),
        settings: Iterable[Settings] = (),
        roles: Iterable[Role] = (),
        user_roles: Iterable[UserRoleLink] = (),
        initialized: bool = True,
    ) -> None:
        self.sites_by_url: dict[str, Site] = {s.url.lower(): s for s in sites}
        self.pages: list[PageNode] = list(pages)
        self.layouts: dict[str, Layout] = {layout.id: layout for layout in layouts}
        self.plugin_definitions: list[PluginDefinition] = list(plugin_definitions)
        self.plugins: list[PluginInstance] = list(plugins)
        self.settings: dict[str, Settings] = {s.id: s for s in settings}
        self.roles: list[Role] = list(roles)
        self.user_roles: list[UserRoleLink] = list(user_roles)
        self.initialized = initialized
        self.calls: list[str] = []

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MemoryStore:
        """Build a store from a decoded JSON document (see module docstring)."""
        if not isinstance(data, Mapping):
            msg = f"snapshot must be a JSON object, got {type(data).__name__}"
            raise TypeError(msg)
        return cls(
            sites=map_records(Site, data.get("sites", [])),
            pages=map_records(PageNode, data.get("pages", [])),
            layouts=map_records(Layout, data.get("layouts", [])),
            plugin_definitions=map_records(PluginDefinition, data.get("plugin_definitions", [])),
            plugins=map_records(PluginInstance, data.get("plugins", [])),
            settings=map_records(Settings, data.get("settings", [])),
            roles=map_records(Role, data.get("roles", [])),
            user_roles=map_records(UserRoleLink, data.get("user_roles", [])),
            initialized=to_bool(data.get("initialized", True)),
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> MemoryStore:
        """Load a store from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        store = cls.from_dict(data)
        logger.debug(
            "Loaded %s: %d sites, %d pages, %d plugins",
            path, len(store.sites_by_url), len(store.pages), len(store.plugins),
        )
        return store

    def services(self) -> Services:
        """All collaborator services backed by this store."""
        return Services(
            sites=_SiteService(self),
            pages=_PageService(self),
            layouts=_LayoutService(self),
            plugins=_PluginService(self),
            plugin_definitions=_PluginDefinitionService(self),
            settings=_SettingsService(self),
            roles=_RoleService(self),
            user_roles=_UserRoleService(self),
            setup=_SetupService(self),
        )

    def record(self, call: str) -> None:
        self.calls.append(call)


class _StoreService:
    __slots__ = ("_store",)

    def __init__(self, store: MemoryStore) -> None:
        self._store = store


class _SiteService(_StoreService):
    async def get_by_url(self, domain: str) -> Site:
        self._store.record("sites.get_by_url")
        site = self._store.sites_by_url.get(domain.lower())
        if site is None:
            raise SiteNotFound(domain)
        return site


class _PageService(_StoreService):
    async def get_by_site_id(self, site_id: str) -> Sequence[PageNode]:
        self._store.record("pages.get_by_site_id")
        return [p for p in self._store.pages if p.site_id == site_id]


class _LayoutService(_StoreService):
    async def get_by_id(self, layout_id: str) -> Layout:
        self._store.record("layouts.get_by_id")
        layout = self._store.layouts.get(layout_id)
        if layout is None:
            raise LayoutNotFound(layout_id)
        return layout


class _PluginService(_StoreService):
    async def get_by_page_id(self, page_id: str) -> Sequence[PluginInstance]:
        self._store.record("plugins.get_by_page_id")
        return [p for p in self._store.plugins if p.page_id == page_id]


class _PluginDefinitionService(_StoreService):
    async def get_all(self) -> Sequence[PluginDefinition]:
        self._store.record("plugin_definitions.get_all")
        return list(self._store.plugin_definitions)


class _SettingsService(_StoreService):
    async def get_by_id(self, entity_id: str) -> Settings:
        self._store.record("settings.get_by_id")
        return self._store.settings.get(entity_id) or Settings(id=entity_id)

    async def get_by_ids(self, entity_ids: Iterable[str]) -> Sequence[Settings]:
        self._store.record("settings.get_by_ids")
        stored = self._store.settings
        return [stored[i] for i in entity_ids if i in stored]


class _RoleService(_StoreService):
    async def get_all_for_site(self, site_id: str) -> Sequence[Role] | None:
        self._store.record("roles.get_all_for_site")
        return [r for r in self._store.roles if r.site_id == site_id]


class _UserRoleService(_StoreService):
    async def get_user_role_ids(self, user_id: str, site_id: str) -> Sequence[str]:
        self._store.record("user_roles.get_user_role_ids")
        role_ids: list[str] = []
        for link in self._store.user_roles:
            if link.user_id == user_id and link.site_id == site_id:
                role_ids.extend(link.role_ids)
        return role_ids


class _SetupService(_StoreService):
    async def is_initialized(self) -> bool:
        self._store.record("setup.is_initialized")
        return self._store.initialized
