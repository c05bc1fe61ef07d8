"""
Data Contracts for the Eligibility Engine

Defines Pydantic models for StudentProfile and AdmissionUnit (input) and
EligibilityResult (output). These contracts are the API boundary for the engine.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from .constants import Stream, ExclusionReason, ENGINE_VERSION


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class StudentProfile(BaseModel):
    """
    A student's academic profile.
    Any field may be missing; the engine substitutes defaults rather than failing.
    """
    # Identity (optional, for tracking)
    student_id: Optional[str] = None

    # Secondary School Certificate
    ssc_gpa: Optional[float] = None
    ssc_stream: Optional[Stream] = None
    ssc_year: Optional[int] = None

    # Higher Secondary Certificate
    hsc_gpa: Optional[float] = None
    hsc_stream: Optional[Stream] = None
    hsc_year: Optional[int] = None

    class Config:
        frozen = True


class RequirementRule(BaseModel):
    """
    One admissible combination of streams and thresholds.
    Absent thresholds impose no constraint.
    """
    ssc_stream: Stream
    hsc_stream: Stream

    min_ssc_gpa: Optional[float] = None
    min_hsc_gpa: Optional[float] = None
    min_combined_gpa: Optional[float] = None

    # Inclusive passing-year bounds
    min_ssc_year: Optional[int] = None
    max_ssc_year: Optional[int] = None
    min_hsc_year: Optional[int] = None
    max_hsc_year: Optional[int] = None

    class Config:
        frozen = True


class InstitutionSummary(BaseModel):
    """Display metadata of an institution."""
    institution_id: str
    name: str = ""
    short_name: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    type: Optional[str] = None
    ownership: Optional[str] = None
    established_year: Optional[int] = None
    logo_url: Optional[str] = None


class AdmissionUnit(BaseModel):
    """
    An admission unit (program/track) with its requirement rules.
    `institution` is attached for whole-catalog queries.
    """
    unit_id: str
    institution_id: str
    name: str = ""
    description: Optional[str] = None

    is_active: bool = True
    application_deadline: Optional[datetime] = None
    auto_close_after_deadline: bool = False

    # OR-combined; order kept for display
    requirements: List[RequirementRule] = Field(default_factory=list)

    institution: Optional[InstitutionSummary] = None


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class EligibleUnit(BaseModel):
    """Unit attributes surfaced to the student."""
    unit_id: str
    name: str
    description: Optional[str] = None
    application_deadline: Optional[datetime] = None
    is_active: bool = True


class InstitutionEligibility(InstitutionSummary):
    """An institution together with the units the student may apply to."""
    units: List[EligibleUnit] = Field(default_factory=list)


class EligibilityResult(BaseModel):
    """
    Output contract for the whole-catalog computation.
    Institutions appear once each, in order of their first eligible unit.
    """
    student_id: Optional[str] = None
    institutions: List[InstitutionEligibility] = Field(default_factory=list)

    # Summary Statistics
    total_units_evaluated: int = 0
    total_eligible: int = 0

    evaluated_at: datetime
    engine_version: str = ENGINE_VERSION


class UnitDecision(BaseModel):
    """Eligibility verdict for a single unit."""
    unit_id: str
    eligible: bool
    reason: Optional[ExclusionReason] = None
    matched_rule_index: Optional[int] = None


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class RuleEvaluation(BaseModel):
    """Outcome of every sub-condition of one requirement rule."""
    pass_ssc_gpa: bool = True
    pass_hsc_gpa: bool = True
    pass_combined_gpa: bool = True
    pass_stream: bool = True
    pass_ssc_year: bool = True
    pass_hsc_year: bool = True

    @property
    def satisfied(self) -> bool:
        return (
            self.pass_ssc_gpa
            and self.pass_hsc_gpa
            and self.pass_combined_gpa
            and self.pass_stream
            and self.pass_ssc_year
            and self.pass_hsc_year
        )

    def failed_checks(self) -> List[str]:
        return [name for name, passed in self.model_dump().items() if not passed]
