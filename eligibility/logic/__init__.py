"""
Eligibility Logic Module

Provides the deterministic engine that matches student profiles to admission units.
"""

from .contracts import (
    StudentProfile,
    RequirementRule,
    InstitutionSummary,
    AdmissionUnit,
    EligibleUnit,
    InstitutionEligibility,
    EligibilityResult,
    UnitDecision,
    RuleEvaluation,
)
from .engine import EligibilityEngine, compute_eligibility
from .constants import Stream, ExclusionReason
from .errors import (
    EligibilityError,
    NotFoundError,
    StudentNotFoundError,
    InstitutionNotFoundError,
    UnitNotFoundError,
)

__all__ = [
    # Main engine
    "EligibilityEngine",
    "compute_eligibility",

    # Contracts
    "StudentProfile",
    "RequirementRule",
    "InstitutionSummary",
    "AdmissionUnit",
    "EligibleUnit",
    "InstitutionEligibility",
    "EligibilityResult",
    "UnitDecision",
    "RuleEvaluation",

    # Enums
    "Stream",
    "ExclusionReason",

    # Errors
    "EligibilityError",
    "NotFoundError",
    "StudentNotFoundError",
    "InstitutionNotFoundError",
    "UnitNotFoundError",
]
