"""
===============================================================================
Eligibility Policy – who may be proposed as pilot of an action
-------------------------------------------------------------------------------
Purpose:
    Filter a user roster down to the candidates the current viewer may assign
    as pilot at the organisational scope selected in the action form.

Rules (applied per candidate, first failing rule wins):
    1. No viewer role            -> nothing is eligible
    2. Inactive candidate        -> excluded
    3. Candidate outranks viewer -> excluded (skipped when the viewer is admin)
    4. Scope containment, keyed by the *candidate's* role:
         operator    post  > team > line > service
         team_leader team  > line > service
         supervisor  line  > service
         manager     service
         admin       no check
       The narrowest level set in the scope decides. A candidate lacking the
       identifier for that level does not match.

Design:
    - No I/O besides audit logging, no state kept between calls.
    - Never raises for any input shape; degenerate input yields an empty or
      conservative result.
    - Unknown role codes are a configuration gap: reported to the audit log,
      ranked lowest, and never scope-matched (except for an admin viewer with
      a fully open scope).
===============================================================================
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from core.config.config_service import config_service
from core.logging.logic.logger import logger as audit_logger
from pilot_eligibility.logic.org_chart import OrgChart
from pilot_eligibility.logic.policy.scope_hierarchy import cascade_for, scope_key_for, seniority
from pilot_eligibility.models.candidate import Candidate
from pilot_eligibility.models.org_scope import OrgScope
from pilot_eligibility.models.role import Role

logger = logging.getLogger(__name__)

FEATURE_ID = "PilotEligibility"


class DenialReason(str, Enum):
    NO_VIEWER = "no_viewer"
    INCONSISTENT_SCOPE = "inconsistent_scope"
    MALFORMED = "malformed"
    INACTIVE = "inactive"
    SENIORITY = "seniority"
    UNKNOWN_ROLE = "unknown_role"
    SCOPE = "scope"


@dataclass(frozen=True)
class EligibilityDecision:
    eligible: bool
    reason: Optional[DenialReason] = None


class EligibilityPolicy:
    """
    Evaluate pilot eligibility.

    Parameters
    ----------
    org_chart : OrgChart, optional
        When given, the scope is checked for contradictions first.
    reject_inconsistent_scope, report_configuration_gaps : bool, optional
        Override ``[Eligibility]`` settings of the config service.
    """

    def __init__(
        self,
        *,
        org_chart: Optional[OrgChart] = None,
        reject_inconsistent_scope: Optional[bool] = None,
        report_configuration_gaps: Optional[bool] = None,
    ) -> None:
        cfg = config_service.eligibility
        self._org_chart = org_chart
        self._reject_inconsistent = (
            cfg.reject_inconsistent_scope if reject_inconsistent_scope is None else reject_inconsistent_scope
        )
        self._report_gaps = (
            cfg.report_configuration_gaps if report_configuration_gaps is None else report_configuration_gaps
        )

    # ------------------------------------------------------------------ #
    #  Public API                                                        #
    # ------------------------------------------------------------------ #
    def evaluate(self, candidates: Iterable[Any], viewer_role: Any, scope: Any) -> List[Any]:
        """Return the eligible candidates in input order."""
        eligible, _ = self.partition(candidates, viewer_role, scope)
        return eligible

    def partition(
        self, candidates: Iterable[Any], viewer_role: Any, scope: Any,
    ) -> Tuple[List[Any], List[Tuple[Any, DenialReason]]]:
        """Split candidates into (eligible, [(rejected, reason), ...]), input order kept."""
        eligible: List[Any] = []
        rejected: List[Tuple[Any, DenialReason]] = []
        for original, reason in self._decisions(candidates, viewer_role, scope):
            if reason is None:
                eligible.append(original)
            else:
                rejected.append((original, reason))
        return eligible, rejected

    def decide(self, candidate: Any, viewer_role: Any, scope: Any) -> EligibilityDecision:
        """Evaluate a single candidate and say why it was rejected."""
        org_scope = _coerce_scope(scope)
        reason = self._precheck(viewer_role, org_scope)
        if reason is None:
            gaps: Set[str] = set()
            reason = self._check(_coerce_candidate(candidate), viewer_role, org_scope, gaps)
            self._report(gaps)
        return EligibilityDecision(eligible=reason is None, reason=reason)

    def _decisions(
        self, candidates: Iterable[Any], viewer_role: Any, scope: Any,
    ) -> Iterator[Tuple[Any, Optional[DenialReason]]]:
        """Yield (candidate, reason) pairs; gaps are reported once, after the last one."""
        org_scope = _coerce_scope(scope)
        gate = self._precheck(viewer_role, org_scope)
        gaps: Set[str] = set()
        total = eligible = 0
        for original in candidates or ():
            total += 1
            reason = gate or self._check(_coerce_candidate(original), viewer_role, org_scope, gaps)
            if reason is None:
                eligible += 1
            yield original, reason

        self._report(gaps)
        logger.debug(
            "%d of %d candidates eligible (viewer=%s, scope=%s)",
            eligible, total, _code(viewer_role), org_scope.to_dict(),
        )

    # ------------------------------------------------------------------ #
    #  Rules                                                             #
    # ------------------------------------------------------------------ #
    def _precheck(self, viewer_role: Any, scope: OrgScope) -> Optional[DenialReason]:
        if _code(viewer_role) is None:
            return DenialReason.NO_VIEWER

        if self._org_chart is not None and self._reject_inconsistent:
            problems = self._org_chart.contradictions(scope)
            if problems:
                audit_logger.log(
                    feature=FEATURE_ID,
                    event="InconsistentScope",
                    level="WARNING",
                    message="; ".join(problems),
                )
                return DenialReason.INCONSISTENT_SCOPE

        if Role.parse(viewer_role) is None:
            self._report({_code(viewer_role) or ""}, subject="viewer")
        return None

    def _check(
        self,
        candidate: Optional[Candidate],
        viewer_role: Any,
        scope: OrgScope,
        gaps: Set[str],
    ) -> Optional[DenialReason]:
        if candidate is None:
            return DenialReason.MALFORMED

        if not candidate.is_active:
            return DenialReason.INACTIVE

        viewer = Role.parse(viewer_role)
        if viewer is not Role.ADMIN and seniority(candidate.role) > seniority(viewer_role):
            return DenialReason.SENIORITY

        key = scope_key_for(candidate.role)
        if key is None:
            gaps.add(candidate.role_code)
            if viewer is Role.ADMIN and scope.is_open:
                return None
            return DenialReason.UNKNOWN_ROLE

        for level in cascade_for(key):
            wanted = scope.get(level)
            if wanted is not None:
                return None if candidate.attachment(level) == wanted else DenialReason.SCOPE
        return None

    def _report(self, codes: Set[str], *, subject: str = "candidate") -> None:
        if not self._report_gaps:
            return
        for code in sorted(codes):
            audit_logger.log(
                feature=FEATURE_ID,
                event="ConfigurationGap",
                level="WARNING",
                reference_id=code,
                message=f"Role '{code}' of {subject} is missing from the role tables",
            )


# ---------------------------------------------------------------------- #
#  Input coercion                                                        #
# ---------------------------------------------------------------------- #
def _code(role: Any) -> Optional[str]:
    if role is None:
        return None
    text = role.value if isinstance(role, Role) else str(role).strip()
    return text or None


def _coerce_scope(scope: Any) -> OrgScope:
    if isinstance(scope, OrgScope):
        return scope
    if isinstance(scope, Mapping):
        return OrgScope.from_dict(scope)
    if scope is not None:
        logger.warning("Unsupported scope %r treated as open scope", scope)
    return OrgScope()


def _coerce_candidate(candidate: Any) -> Optional[Candidate]:
    if isinstance(candidate, Candidate):
        return candidate
    if isinstance(candidate, Mapping):
        return Candidate.from_dict(candidate)
    logger.warning("Skipping malformed candidate %r", candidate)
    return None


def evaluate_eligibility(
    candidates: Iterable[Any],
    viewer_role: Any,
    scope: Any,
    *,
    org_chart: Optional[OrgChart] = None,
) -> List[Any]:
    """Functional shortcut for :meth:`EligibilityPolicy.evaluate`."""
    return EligibilityPolicy(org_chart=org_chart).evaluate(candidates, viewer_role, scope)


def partition_eligibility(
    candidates: Iterable[Any],
    viewer_role: Any,
    scope: Any,
    *,
    org_chart: Optional[OrgChart] = None,
) -> Tuple[List[Any], List[Tuple[Any, DenialReason]]]:
    """Split candidates into (eligible, [(rejected, reason), ...]), input order kept."""
    return EligibilityPolicy(org_chart=org_chart).partition(candidates, viewer_role, scope)
