"""Policy services for pilot eligibility.

Policy-driven business rules without I/O.
"""

from pilot_eligibility.logic.policy.eligibility_policy import (
    DenialReason,
    EligibilityDecision,
    EligibilityPolicy,
    evaluate_eligibility,
    partition_eligibility,
)
from pilot_eligibility.logic.policy.role_permissions import has_permission, permissions_for
from pilot_eligibility.logic.policy.scope_hierarchy import scope_key_for, seniority

__all__ = [
    "DenialReason",
    "EligibilityDecision",
    "EligibilityPolicy",
    "evaluate_eligibility",
    "has_permission",
    "partition_eligibility",
    "permissions_for",
    "scope_key_for",
    "seniority",
]
