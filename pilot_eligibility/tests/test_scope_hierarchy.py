"""Tests for the role seniority and scope key tables."""
from __future__ import annotations

from types import MappingProxyType

import pytest

from pilot_eligibility.exceptions.errors import RoleTableError
from pilot_eligibility.logic.policy.scope_hierarchy import (
    SCOPE_CASCADES,
    SCOPE_KEYS,
    SENIORITY,
    cascade_for,
    scope_key_for,
    seniority,
    validate_tables,
)
from pilot_eligibility.models.role import Role, ScopeKey


def test_seniority_follows_role_order() -> None:
    ranks = [seniority(r) for r in Role]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)
    assert seniority(Role.OPERATOR) < seniority(Role.TEAM_LEADER) < seniority(Role.SUPERVISOR)
    assert seniority(Role.SUPERVISOR) < seniority(Role.MANAGER) < seniority(Role.ADMIN)


def test_seniority_accepts_codes() -> None:
    assert seniority("manager") == seniority(Role.MANAGER)
    assert seniority(" Team_Leader ") == seniority(Role.TEAM_LEADER)


@pytest.mark.parametrize("role", [None, "", "guest", "superadmin", 42])
def test_unknown_roles_rank_zero(role) -> None:
    assert seniority(role) == 0
    assert scope_key_for(role) is None


def test_scope_keys() -> None:
    assert scope_key_for(Role.OPERATOR) is ScopeKey.POST
    assert scope_key_for("team_leader") is ScopeKey.TEAM
    assert scope_key_for(Role.SUPERVISOR) is ScopeKey.LINE
    assert scope_key_for(Role.MANAGER) is ScopeKey.SERVICE
    assert scope_key_for(Role.ADMIN) is ScopeKey.NONE


def test_cascades_run_narrow_to_broad() -> None:
    assert cascade_for(ScopeKey.POST) == ("post", "team", "line", "service")
    assert cascade_for(ScopeKey.TEAM) == ("team", "line", "service")
    assert cascade_for(ScopeKey.LINE) == ("line", "service")
    assert cascade_for(ScopeKey.SERVICE) == ("service",)
    assert cascade_for(ScopeKey.NONE) == ()


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        SENIORITY[Role.ADMIN] = 0  # type: ignore[index]


def test_missing_role_fails_loudly() -> None:
    partial = MappingProxyType({r: k for r, k in SCOPE_KEYS.items() if r is not Role.SUPERVISOR})
    with pytest.raises(RoleTableError, match="supervisor"):
        validate_tables(scope_keys=partial)

    partial_rank = MappingProxyType({r: n for r, n in SENIORITY.items() if r is not Role.ADMIN})
    with pytest.raises(RoleTableError, match="admin"):
        validate_tables(seniority_table=partial_rank)


def test_missing_cascade_fails_loudly() -> None:
    partial = MappingProxyType({k: v for k, v in SCOPE_CASCADES.items() if k is not ScopeKey.TEAM})
    with pytest.raises(RoleTableError, match="team"):
        validate_tables(cascades=partial)


def test_non_monotonic_seniority_rejected() -> None:
    swapped = dict(SENIORITY)
    swapped[Role.OPERATOR], swapped[Role.ADMIN] = swapped[Role.ADMIN], swapped[Role.OPERATOR]
    with pytest.raises(RoleTableError):
        validate_tables(seniority_table=swapped)
