"""The setup bundle served before the system is initialized.

Fabricated in-process: one locked page titled "Setup", a layout read
from two static template files, and a single locked "Main" section
holding the built-in setup plugin. No collaborator is consulted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType

import anyio

from wren.bundle import ComposedPageBundle, PluginEntry, SiteContext
from wren.models import Layout, PageNode, PluginDefinition, PluginDefinitionType

logger = logging.getLogger("wren.compose")

SETUP_SECTION = "Main"

SETUP_DEFINITION = PluginDefinition(
    id="setup",
    name="Setup",
    description="Setup View Plugin",
    assembly="Wren.Plugins.Admin",
    types=(PluginDefinitionType(name="Setup", type="SetupViewPlugin", is_default=True),),
    locked=True,
)

SETUP_PAGE = PageNode(id="setup", site_id="", title="Setup", locked=True)


class SetupTemplates:
    """Reads the setup layout's head and body once and keeps them.

    Attributes:
        template_dir: Directory holding both template files.
        head_name: File name of the head template.
        body_name: File name of the body template.
    """

    __slots__ = ("_layout", "body_name", "head_name", "template_dir")

    def __init__(self, template_dir: str | Path, head_name: str, body_name: str) -> None:
        self.template_dir = Path(template_dir)
        self.head_name = head_name
        self.body_name = body_name
        self._layout: Layout | None = None

    async def load(self) -> Layout:
        """Return the setup layout, reading the files on first use.

        Raises:
            FileNotFoundError: If either template file is missing.
        """
        if self._layout is None:
            root = anyio.Path(self.template_dir)
            head = await (root / self.head_name).read_text(encoding="utf-8")
            body = await (root / self.body_name).read_text(encoding="utf-8")
            logger.debug("Loaded setup templates from %s", self.template_dir)
            self._layout = Layout(id="setup", name="AuthLayout", head=head, body=body)
        return self._layout


def build_setup_bundle(layout: Layout) -> ComposedPageBundle:
    """Compose the fixed setup bundle around *layout*."""
    entry = PluginEntry(
        id=None,
        definition=SETUP_DEFINITION,
        section=SETUP_SECTION,
        locked=True,
    )
    return ComposedPageBundle(
        full_path="",
        page=SETUP_PAGE,
        site=SiteContext(),
        layout=layout,
        sections=MappingProxyType({SETUP_SECTION: (entry,)}),
    )
