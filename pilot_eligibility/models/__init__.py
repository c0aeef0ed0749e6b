"""Value types of the pilot eligibility feature."""

from pilot_eligibility.models.candidate import Candidate
from pilot_eligibility.models.org_scope import OrgScope
from pilot_eligibility.models.org_unit import Line, Post, Service, Team
from pilot_eligibility.models.permission import Permission
from pilot_eligibility.models.role import Role, ScopeKey

__all__ = [
    "Candidate",
    "Line",
    "OrgScope",
    "Permission",
    "Post",
    "Role",
    "ScopeKey",
    "Service",
    "Team",
]
