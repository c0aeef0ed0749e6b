"""Assignee (pilot) eligibility for corrective actions.

Decides which users may be proposed as pilot of an action, given the viewer's
role and the service/line/team/post selected in the action form.
"""

from pilot_eligibility.logic.org_chart import OrgChart
from pilot_eligibility.logic.policy import (
    DenialReason,
    EligibilityPolicy,
    evaluate_eligibility,
    has_permission,
    partition_eligibility,
    permissions_for,
    scope_key_for,
    seniority,
)
from pilot_eligibility.logic.role_labels import role_label
from pilot_eligibility.models import Candidate, OrgScope, Role, ScopeKey

__all__ = [
    "Candidate",
    "DenialReason",
    "EligibilityPolicy",
    "OrgChart",
    "OrgScope",
    "Role",
    "ScopeKey",
    "evaluate_eligibility",
    "has_permission",
    "partition_eligibility",
    "permissions_for",
    "role_label",
    "scope_key_for",
    "seniority",
]
