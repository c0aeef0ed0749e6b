"""
Role Permissions – capability matrix per role.

Every role lists the same base capabilities with an explicit ``granted`` flag
so the profile page can show what a role may *not* do as well. Admin carries
three extra organisation-wide capabilities.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from core.i18n.locale import locale
from pilot_eligibility.exceptions.errors import RoleTableError
from pilot_eligibility.models.permission import Permission
from pilot_eligibility.models.role import Role

BASE_PERMISSIONS: Tuple[str, ...] = (
    "view_actions",
    "view_calendar",
    "view_dashboard",
    "create_actions",
    "edit_actions",
    "validate_actions",
    "manage_users",
)

ADMIN_ONLY_PERMISSIONS: Tuple[str, ...] = (
    "manage_organization",
    "manage_roles",
    "manage_settings",
)


def _matrix(*granted: str, extra: Tuple[str, ...] = ()) -> Tuple[Permission, ...]:
    return tuple(Permission(p, p in granted) for p in BASE_PERMISSIONS + extra)


_VIEW = ("view_actions", "view_calendar", "view_dashboard")

ROLE_PERMISSIONS: Mapping[Role, Tuple[Permission, ...]] = MappingProxyType({
    Role.OPERATOR: _matrix(*_VIEW),
    Role.TEAM_LEADER: _matrix(*_VIEW, "create_actions", "edit_actions"),
    Role.SUPERVISOR: _matrix(*_VIEW, "create_actions", "edit_actions", "validate_actions"),
    Role.MANAGER: _matrix(*_VIEW, "create_actions", "edit_actions", "validate_actions", "manage_users"),
    # Admin has no calendar view
    Role.ADMIN: _matrix(
        "view_actions", "view_dashboard", "create_actions", "edit_actions",
        "validate_actions", "manage_users", *ADMIN_ONLY_PERMISSIONS,
        extra=ADMIN_ONLY_PERMISSIONS,
    ),
})

_missing = [r.value for r in Role if r not in ROLE_PERMISSIONS]
if _missing:
    raise RoleTableError(f"Roles without permissions: {_missing}")


def permissions_for(role: object) -> Tuple[Permission, ...]:
    """Permission matrix of ``role``; empty for unknown roles."""
    parsed = Role.parse(role)
    if parsed is None:
        return ()
    return ROLE_PERMISSIONS[parsed]


def has_permission(role: object, permission_id: str) -> bool:
    return any(p.id == permission_id and p.granted for p in permissions_for(role))


def permission_label(permission_id: str, lang: Optional[str] = None, role: object = None) -> str:
    """Label of a permission, worded for ``role`` where the dictionaries have a variant."""
    parsed = Role.parse(role)
    if parsed is not None:
        key = f"permission.{permission_id}.{parsed.value}"
        if locale.has(key, lang):
            return locale.t(key, lang)
    return locale.t(f"permission.{permission_id}", lang, default=permission_id)
