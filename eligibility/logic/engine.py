"""
Eligibility Engine

Main entry point that decides which admission units a student may apply to.

Pipeline flow (per unit, in input order):
1. Activity gate - inactive units are never eligible
2. Deadline gate - auto-closing units past their deadline are excluded
3. Rule evaluation - no rules means open to all, otherwise any rule must pass
4. Aggregation - eligible units are bucketed by institution

The engine is pure: the evaluation time is passed in, nothing is read from
a clock or a database, and inputs are never mutated.
"""

import logging
from datetime import datetime
from typing import Iterable, List

from .contracts import (
    StudentProfile,
    AdmissionUnit,
    InstitutionSummary,
    InstitutionEligibility,
    EligibilityResult,
    UnitDecision,
)
from .constants import ExclusionReason, ENGINE_VERSION, ENFORCE_YEAR_BOUNDS
from .deadline import as_utc, is_closed
from .rules import first_satisfied_rule
from .aggregator import group_by_institution, project_unit

logger = logging.getLogger(__name__)


class EligibilityEngine:
    """
    Evaluates student profiles against the admission unit catalog.
    """

    def __init__(self, enforce_year_bounds: bool = ENFORCE_YEAR_BOUNDS):
        """
        Args:
            enforce_year_bounds: Apply passing-year bounds of requirement rules.
                Applies to every variant alike.
        """
        self.enforce_year_bounds = enforce_year_bounds
        self.version = ENGINE_VERSION

    def evaluate_unit(
        self,
        profile: StudentProfile,
        unit: AdmissionUnit,
        now: datetime
    ) -> UnitDecision:
        """
        Decide whether a student may apply to a single unit.

        Returns:
            UnitDecision carrying the first reason for exclusion, if any
        """
        if not unit.is_active:
            return UnitDecision(unit_id=unit.unit_id, eligible=False, reason=ExclusionReason.INACTIVE)

        if is_closed(unit, now):
            return UnitDecision(unit_id=unit.unit_id, eligible=False, reason=ExclusionReason.DEADLINE_PASSED)

        if not unit.requirements:
            return UnitDecision(unit_id=unit.unit_id, eligible=True)

        matched = first_satisfied_rule(profile, unit.requirements, self.enforce_year_bounds)
        if matched is None:
            return UnitDecision(
                unit_id=unit.unit_id,
                eligible=False,
                reason=ExclusionReason.REQUIREMENTS_NOT_MET,
            )
        return UnitDecision(unit_id=unit.unit_id, eligible=True, matched_rule_index=matched)

    def eligible_units(
        self,
        profile: StudentProfile,
        units: Iterable[AdmissionUnit],
        now: datetime
    ) -> List[AdmissionUnit]:
        """Units the student may apply to, in input order."""
        eligible = []
        for unit in units:
            decision = self.evaluate_unit(profile, unit, now)
            if decision.eligible:
                eligible.append(unit)
            else:
                logger.debug(f"Unit {unit.unit_id} excluded: {decision.reason.value}")
        return eligible

    def compute_eligibility(
        self,
        profile: StudentProfile,
        units: Iterable[AdmissionUnit],
        now: datetime
    ) -> EligibilityResult:
        """
        Whole-catalog eligibility, grouped by institution.

        Args:
            profile: Student's academic profile
            units: Candidate units with rules and institution metadata attached
            now: Evaluation time

        Returns:
            EligibilityResult; institutions without eligible units are omitted
        """
        units = list(units)
        eligible = self.eligible_units(profile, units, now)

        return EligibilityResult(
            student_id=profile.student_id,
            institutions=group_by_institution(eligible),
            total_units_evaluated=len(units),
            total_eligible=len(eligible),
            evaluated_at=as_utc(now),
            engine_version=self.version,
        )

    def compute_institution_eligibility(
        self,
        profile: StudentProfile,
        institution: InstitutionSummary,
        units: Iterable[AdmissionUnit],
        now: datetime
    ) -> InstitutionEligibility:
        """
        Eligibility against one institution.

        Units belonging to other institutions are ignored. The institution is
        always returned, with an empty `units` list when nothing matches.
        """
        own_units = [u for u in units if u.institution_id == institution.institution_id]
        eligible = self.eligible_units(profile, own_units, now)

        return InstitutionEligibility(
            **institution.model_dump(),
            units=[project_unit(u) for u in eligible],
        )


# Convenience function for simple usage
def compute_eligibility(
    profile: StudentProfile,
    units: Iterable[AdmissionUnit],
    now: datetime
) -> EligibilityResult:
    """
    Compute whole-catalog eligibility with the default engine settings.
    """
    return EligibilityEngine().compute_eligibility(profile, units, now)
