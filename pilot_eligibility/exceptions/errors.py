"""Pilot eligibility exceptions."""
from __future__ import annotations


class PilotEligibilityError(Exception):
    """Base exception for the pilot eligibility feature."""


class RoleTableError(PilotEligibilityError):
    """Raised when a role is missing from one of the static policy tables."""


class ScopeContradictionError(PilotEligibilityError):
    """Raised when a scope selection does not describe a path in the org chart."""
