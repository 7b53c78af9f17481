"""Page composition pipeline.

``PageComposer`` turns a (domain, path, identity) request into a
``ComposedPageBundle``. Two outcomes per request:

- **Uninitialized** system: the fixed setup bundle. Only the two setup
  template files are read; no collaborator beyond the setup check is
  called.
- **Initialized** system: the full pipeline::

      site by domain
        -> pages of the site -> path index -> page at path
        -> concurrently:
             layouts (page override, else site default)
             plugin instances -> their settings
             plugin definitions
             site settings
             site roles
             user role ids
        -> sections + access context
        -> ComposedPageBundle

Composition is all-or-nothing. The first failure (``NotFound``,
``DataIntegrityError``, a collaborator error, a timeout, or caller
cancellation) abandons the request; no partial bundle is returned and
nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import partial
from types import MappingProxyType

import anyio

from wren._internal.concurrency import gather
from wren.bundle import ComposedPageBundle, PageSummary, SiteContext, UserContext
from wren.compose.access import build_access_context
from wren.compose.layouts import ResolvedLayouts, load_layouts, resolve_layout_id, resolve_layouts
from wren.compose.paths import build_path_index
from wren.compose.sections import aggregate_sections, settings_by_id
from wren.compose.setup import SetupTemplates, build_setup_bundle
from wren.compose.urls import split_url
from wren.config import ComposerConfig
from wren.models import ANONYMOUS, PluginInstance, Settings, UserIdentity
from wren.services import Services

logger = logging.getLogger("wren.compose")


class PageComposer:
    """Composes render-ready page bundles from collaborator lookups.

    Holds no per-request state; one composer can serve concurrent
    requests. Usage::

        composer = PageComposer(services)
        bundle = await composer.compose("example.com", "/blog/post-1", identity)
    """

    __slots__ = ("_config", "_services", "_setup_templates")

    def __init__(self, services: Services, config: ComposerConfig | None = None) -> None:
        config = config or ComposerConfig()
        config.validate()
        self._services = services
        self._config = config
        self._setup_templates = SetupTemplates(
            config.template_dir,
            config.setup_head_template,
            config.setup_body_template,
        )

    @property
    def config(self) -> ComposerConfig:
        return self._config

    async def compose(
        self,
        domain: str,
        path: str,
        identity: UserIdentity = ANONYMOUS,
    ) -> ComposedPageBundle:
        """Compose the page at *path* on the site serving *domain*.

        Raises:
            SiteNotFound: No site serves *domain*.
            PageNotFound: The site has no page at *path*.
            LayoutNotFound: A resolved layout id does not exist.
            DataIntegrityError: Upstream data breaks a composition invariant.
            TimeoutError: ``fetch_timeout`` elapsed before completion.
        """
        timeout = self._config.fetch_timeout
        if timeout is None:
            return await self._compose(domain, path, identity)
        with anyio.fail_after(timeout):
            return await self._compose(domain, path, identity)

    async def compose_url(
        self,
        url: str,
        identity: UserIdentity = ANONYMOUS,
    ) -> ComposedPageBundle:
        """Compose the page addressed by a full URL.

        Raises:
            InvalidUrl: If *url* has no host.
        """
        domain, path = split_url(url)
        return await self.compose(domain, path, identity)

    async def setup_bundle(self) -> ComposedPageBundle:
        """The fixed bundle served while the system is uninitialized."""
        return build_setup_bundle(await self._setup_templates.load())

    async def list_pages(self, domain: str) -> tuple[PageSummary, ...]:
        """Every page of the site serving *domain*, with full path and layout.

        ``layout_id`` is the effective primary layout: the page override,
        else the site default.

        Pages keep the order the page service returned them in.
        """
        site = await self._services.sites.get_by_url(domain)
        pages = await self._services.pages.get_by_site_id(site.id)
        index = build_path_index(pages, strict=self._config.strict_paths)
        return tuple(
            PageSummary(
                page=page,
                full_path=index.full_path(page),
                layout_id=resolve_layout_id(page.layout_id, site.layout_id),
            )
            for page in index.by_id.values()
        )

    # -- Pipeline --------------------------------------------------------

    async def _compose(self, domain: str, path: str, identity: UserIdentity) -> ComposedPageBundle:
        if not await self._services.setup.is_initialized():
            logger.info("System not initialized, serving setup bundle for %s%s", domain, path)
            return await self.setup_bundle()
        return await self._compose_page(domain, path, identity)

    async def _compose_page(
        self,
        domain: str,
        path: str,
        identity: UserIdentity,
    ) -> ComposedPageBundle:
        services = self._services

        site = await services.sites.get_by_url(domain)
        pages = await services.pages.get_by_site_id(site.id)
        index = build_path_index(pages, strict=self._config.strict_paths)
        page = index.resolve(path)
        logger.debug("Resolved %s%s to page %s", domain, path, page.id)

        selection = resolve_layouts(page, site)
        fetched = await gather({
            "layouts": partial(load_layouts, services.layouts, selection),
            "plugins": partial(self._plugins_with_settings, page.id),
            "definitions": services.plugin_definitions.get_all,
            "site_settings": partial(services.settings.get_by_id, site.id),
            "roles": partial(services.roles.get_all_for_site, site.id),
            "user_role_ids": partial(self._user_role_ids, identity, site.id),
        })

        layouts: ResolvedLayouts = fetched["layouts"]
        instances, plugin_settings = fetched["plugins"]
        definitions = {d.id: d for d in fetched["definitions"]}
        site_settings: Settings = fetched["site_settings"]

        sections = aggregate_sections(instances, definitions, plugin_settings)
        access = build_access_context(fetched["roles"], fetched["user_role_ids"])

        logger.debug(
            "Composed %s%s: %d sections, %d plugins, %d user roles",
            domain, path, len(sections), len(instances), len(access.user_roles),
        )
        return ComposedPageBundle(
            full_path=path,
            page=page,
            site=SiteContext(
                site=site,
                settings=MappingProxyType(dict(site_settings.values)),
                all_roles=access.all_roles,
                admin_roles=access.admin_roles,
                contributor_roles=access.contributor_roles,
            ),
            layout=layouts.primary,
            edit_layout=layouts.edit,
            detail_layout=layouts.detail,
            sections=sections,
            user=UserContext(identity=identity, roles=access.user_roles),
        )

    async def _plugins_with_settings(
        self,
        page_id: str,
    ) -> tuple[Sequence[PluginInstance], dict[str, Mapping[str, str]]]:
        instances = await self._services.plugins.get_by_page_id(page_id)
        records = await self._services.settings.get_by_ids([i.id for i in instances])
        return instances, settings_by_id(records)

    async def _user_role_ids(self, identity: UserIdentity, site_id: str) -> Sequence[str]:
        if identity.user_id is None:
            return ()
        return await self._services.user_roles.get_user_role_ids(identity.user_id, site_id)
