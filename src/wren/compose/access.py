"""Role classification for the requesting user.

Contributor roles are currently selected with the same filter as
administrator roles (``RoleType.ADMINISTRATORS``). That mirrors the
behaviour the rest of the system depends on and is kept as is until a
contributor role type is specified; see ``is_contributor_role``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from wren.models import Role, RoleType


@dataclass(frozen=True, slots=True)
class AccessContext:
    """Site roles split by classification, plus the user's own roles."""

    all_roles: tuple[Role, ...] = ()
    admin_roles: tuple[Role, ...] = ()
    contributor_roles: tuple[Role, ...] = ()
    user_roles: tuple[Role, ...] = ()


def is_admin_role(role: Role) -> bool:
    return role.type == RoleType.ADMINISTRATORS


def is_contributor_role(role: Role) -> bool:
    # TODO: switch to a dedicated contributor role type once product defines one
    return role.type == RoleType.ADMINISTRATORS


def build_access_context(
    roles: Iterable[Role] | None,
    user_role_ids: Iterable[str] | None,
) -> AccessContext:
    """Classify *roles* and pick out the ones listed in *user_role_ids*.

    ``None`` or empty inputs produce empty tuples. All derived tuples keep
    the order of *roles*.
    """
    all_roles = tuple(roles or ())
    assigned = frozenset(user_role_ids or ())
    return AccessContext(
        all_roles=all_roles,
        admin_roles=tuple(r for r in all_roles if is_admin_role(r)),
        contributor_roles=tuple(r for r in all_roles if is_contributor_role(r)),
        user_roles=tuple(r for r in all_roles if r.id in assigned),
    )
