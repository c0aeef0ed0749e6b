"""
===============================================================================
Scope Hierarchy – role seniority and per-role scope keys
-------------------------------------------------------------------------------
Purpose:
    Single source of truth for "who outranks whom" and "how far down the org
    chart must a candidate of this role match the current selection".

Design:
    - Read-only tables keyed by Role, checked for exhaustiveness at import.
      A Role missing from any table raises RoleTableError.
    - Lookups are total: unknown role codes get seniority 0 and no scope key.
===============================================================================
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pilot_eligibility.exceptions.errors import RoleTableError
from pilot_eligibility.models.role import Role, ScopeKey

UNKNOWN_SENIORITY = 0

SENIORITY: Mapping[Role, int] = MappingProxyType({
    Role.OPERATOR: 1,
    Role.TEAM_LEADER: 2,
    Role.SUPERVISOR: 3,
    Role.MANAGER: 4,
    Role.ADMIN: 5,
})

SCOPE_KEYS: Mapping[Role, ScopeKey] = MappingProxyType({
    Role.OPERATOR: ScopeKey.POST,
    Role.TEAM_LEADER: ScopeKey.TEAM,
    Role.SUPERVISOR: ScopeKey.LINE,
    Role.MANAGER: ScopeKey.SERVICE,
    Role.ADMIN: ScopeKey.NONE,
})

# Levels checked for each key, narrowest first. The first level set in the
# scope decides; broader levels are only fallbacks.
SCOPE_CASCADES: Mapping[ScopeKey, Tuple[str, ...]] = MappingProxyType({
    ScopeKey.POST: ("post", "team", "line", "service"),
    ScopeKey.TEAM: ("team", "line", "service"),
    ScopeKey.LINE: ("line", "service"),
    ScopeKey.SERVICE: ("service",),
    ScopeKey.NONE: (),
})


def validate_tables(
    seniority_table: Mapping[Role, int] = SENIORITY,
    scope_keys: Mapping[Role, ScopeKey] = SCOPE_KEYS,
    cascades: Mapping[ScopeKey, Tuple[str, ...]] = SCOPE_CASCADES,
) -> None:
    """Raise RoleTableError unless the tables cover every Role and ScopeKey."""
    missing = [r.value for r in Role if r not in seniority_table]
    if missing:
        raise RoleTableError(f"Roles without seniority: {missing}")

    missing = [r.value for r in Role if r not in scope_keys]
    if missing:
        raise RoleTableError(f"Roles without scope key: {missing}")

    missing = [k.value for k in ScopeKey if k not in cascades]
    if missing:
        raise RoleTableError(f"Scope keys without cascade: {missing}")

    ranks = [seniority_table[r] for r in Role]
    if ranks != sorted(set(ranks)) or min(ranks) <= UNKNOWN_SENIORITY:
        raise RoleTableError(f"Seniority must be strictly increasing and positive: {ranks}")


def seniority(role: object) -> int:
    """Rank of ``role``; unknown or missing roles rank lowest (0)."""
    parsed = Role.parse(role)
    if parsed is None:
        return UNKNOWN_SENIORITY
    return SENIORITY[parsed]


def scope_key_for(role: object) -> Optional[ScopeKey]:
    """Scope key of ``role``, or None when the role has no table entry."""
    parsed = Role.parse(role)
    if parsed is None:
        return None
    return SCOPE_KEYS[parsed]


def cascade_for(key: ScopeKey) -> Tuple[str, ...]:
    return SCOPE_CASCADES[key]


validate_tables()
