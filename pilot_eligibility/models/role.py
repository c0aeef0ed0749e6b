"""pilot_eligibility/models/role.py
================================

Hierarchy roles and the organisational levels a role is scoped to.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Global user roles, listed from junior to senior."""

    OPERATOR = "operator"
    TEAM_LEADER = "team_leader"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Return the matching Role, or None for empty/unknown codes."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        code = str(value).strip().lower()
        for role in cls:
            if role.value == code:
                return role
        return None


class ScopeKey(str, Enum):
    """Organisational level a candidate has to match at."""

    POST = "post"
    TEAM = "team"
    LINE = "line"
    SERVICE = "service"
    NONE = "none"
