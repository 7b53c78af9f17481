"""Shared pytest configuration for wren tests.

Provides a small but complete site snapshot for ``example.com``::

    ""              root          (site layouts)
    "/blog"         blog          primary layout override: l-blog
    "/blog/post-1"  post-1        plugins: Main[i1, i2], Sidebar[i3]
"""

import pytest

from wren.compose.assembler import PageComposer
from wren.memory import MemoryStore
from wren.models import (
    Layout,
    PageNode,
    PluginDefinition,
    PluginDefinitionType,
    PluginInstance,
    Role,
    RoleType,
    Settings,
    Site,
    UserRoleLink,
)

SITE = Site(
    id="s1",
    url="example.com",
    layout_id="l-main",
    edit_layout_id="l-edit",
    detail_layout_id="l-detail",
    name="Example",
)

ROOT = PageNode(id="p-root", site_id="s1", path="", title="Home")
BLOG = PageNode(id="p-blog", site_id="s1", path="/blog", parent_id="p-root", title="Blog", layout_id="l-blog")
POST = PageNode(id="p-post", site_id="s1", path="/post-1", parent_id="p-blog", title="Post 1")

TEXT = PluginDefinition(
    id="d-text",
    name="Text",
    description="Rich text",
    assembly="Wren.Plugins.Text",
    types=(PluginDefinitionType(name="View", type="TextViewPlugin", is_default=True),),
)
NAV = PluginDefinition(
    id="d-nav",
    name="Navigation",
    types=(PluginDefinitionType(name="Menu", type="MenuPlugin", is_default=True),),
)

ADMINS = Role(id="r-admin", site_id="s1", name="Administrators", type=RoleType.ADMINISTRATORS)
MEMBERS = Role(id="r-auth", site_id="s1", name="Members", type=RoleType.AUTHENTICATED)
EDITORS = Role(id="r-editor", site_id="s1", name="Editors", type=RoleType.USER_DEFINED)


def make_store(**overrides: object) -> MemoryStore:
    """Build the example store, replacing any collection by keyword."""
    data: dict[str, object] = {
        "sites": [SITE],
        "pages": [ROOT, BLOG, POST],
        "layouts": [
            Layout(id="l-main", name="Main", head="<title>main</title>", body="<main/>"),
            Layout(id="l-blog", name="Blog", body="<article/>"),
            Layout(id="l-edit", name="Edit"),
            Layout(id="l-detail", name="Detail"),
        ],
        "plugin_definitions": [TEXT, NAV],
        "plugins": [
            PluginInstance(id="i1", page_id="p-post", definition_id="d-text", section="Main"),
            PluginInstance(id="i2", page_id="p-post", definition_id="d-text", section="Main"),
            PluginInstance(id="i3", page_id="p-post", definition_id="d-nav", section="Sidebar"),
        ],
        "settings": [
            Settings(id="s1", values={"theme": "dark"}),
            Settings(id="i1", values={"text": "Hello"}),
        ],
        "roles": [ADMINS, MEMBERS, EDITORS],
        "user_roles": [UserRoleLink(user_id="u1", site_id="s1", role_ids=("r-admin", "r-editor"))],
    }
    data.update(overrides)
    return MemoryStore(**data)  # type: ignore[arg-type]


@pytest.fixture
def store() -> MemoryStore:
    return make_store()


@pytest.fixture
def composer(store: MemoryStore) -> PageComposer:
    return PageComposer(store.services())
