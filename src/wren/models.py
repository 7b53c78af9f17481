"""Domain snapshots handed to the composer by the collaborator services.

Immutable frozen dataclasses. The services own and mutate the underlying
records; the composer only ever sees one consistent snapshot per call.
Identifiers are opaque strings.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from wren.errors import MissingDefaultType

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Site:
    """A tenant: owns pages, default layouts, and site settings.

    All three default layout ids are required. Pages fall back to them
    when they carry no override of their own.
    """

    id: str
    url: str
    layout_id: str
    edit_layout_id: str
    detail_layout_id: str
    name: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class PageNode:
    """A node in a site's page tree.

    The tree is expressed through ``parent_id`` only. Full paths are
    reconstructed by walking parents (see ``wren.compose.paths``).

    Attributes:
        path: Local path segment including its leading delimiter
            (``"/about"``). Empty for the root page.
        layout_id: Primary layout override, or ``None`` to use the site's.
        edit_layout_id: Edit layout override.
        detail_layout_id: Detail layout override.
    """

    id: str
    site_id: str
    path: str = ""
    parent_id: str | None = None
    title: str = ""
    order: int = 0
    layout_id: str | None = None
    edit_layout_id: str | None = None
    detail_layout_id: str | None = None
    locked: bool = False


@dataclass(frozen=True, slots=True)
class Layout:
    """A reusable head/body template."""

    id: str
    name: str = ""
    head: str = ""
    body: str = ""


@dataclass(frozen=True, slots=True)
class PluginDefinitionType:
    """One renderable type of a plugin definition."""

    name: str
    type: str
    is_default: bool = False


@dataclass(frozen=True, slots=True)
class PluginDefinition:
    """Catalog entry for a pluggable content unit."""

    id: str
    name: str
    description: str = ""
    assembly: str = ""
    types: tuple[PluginDefinitionType, ...] = ()
    locked: bool = False

    def default_type(self) -> PluginDefinitionType:
        """Return the type marked as default.

        Raises:
            MissingDefaultType: If no type is marked default.
        """
        for definition_type in self.types:
            if definition_type.is_default:
                return definition_type
        raise MissingDefaultType(self.id)


@dataclass(frozen=True, slots=True)
class PluginInstance:
    """Placement of a plugin definition on one page.

    ``section`` is a free-form grouping key; nothing else is implied by it.
    """

    id: str
    page_id: str
    definition_id: str
    section: str
    order: int = 0
    cols: int = 12
    locked: bool = False


@dataclass(frozen=True, slots=True)
class Settings:
    """Key/value settings owned by the entity whose id is ``id``."""

    id: str
    values: Mapping[str, str] = field(default_factory=lambda: _EMPTY)


class RoleType(StrEnum):
    ADMINISTRATORS = "Administrators"
    AUTHENTICATED = "Authenticated"
    GUEST = "Guest"
    ALL = "All"
    USER_DEFINED = "UserDefined"


@dataclass(frozen=True, slots=True)
class Role:
    """A role defined for one site."""

    id: str
    site_id: str
    name: str
    type: RoleType = RoleType.USER_DEFINED
    description: str = ""


@dataclass(frozen=True, slots=True)
class UserRoleLink:
    """The roles a user holds on one site."""

    user_id: str
    site_id: str
    role_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """Who is making the request.

    ``ANONYMOUS`` is used when the caller has no authenticated user.
    """

    user_id: str | None = None
    username: str = ""

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = UserIdentity()
