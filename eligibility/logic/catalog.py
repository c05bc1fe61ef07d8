"""
Catalog Lookups

Fetches student profiles, institutions and admission units from the database
and converts them into engine contracts. No eligibility logic lives here.
"""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from .contracts import StudentProfile, RequirementRule, InstitutionSummary, AdmissionUnit
from .errors import StudentNotFoundError, InstitutionNotFoundError, UnitNotFoundError
from ..models import Student, Institution, Unit, UnitRequirement


def fetch_student_profile(db: Session, student_id: str) -> StudentProfile:
    """
    Load a student's academic profile.

    Raises:
        StudentNotFoundError: no student with this id
    """
    student = db.get(Student, student_id)
    if student is None:
        raise StudentNotFoundError(student_id)
    return _build_profile(student)


def fetch_institution(db: Session, institution_id: str) -> InstitutionSummary:
    """
    Load an institution's display metadata.

    Raises:
        InstitutionNotFoundError: no institution with this id
    """
    institution = db.get(Institution, institution_id)
    if institution is None:
        raise InstitutionNotFoundError(institution_id)
    return _build_institution(institution)


def fetch_active_units(
    db: Session,
    institution_id: Optional[str] = None
) -> List[AdmissionUnit]:
    """
    Load all active units with their requirement rules and institution.

    Args:
        db: Database session
        institution_id: Restrict to one institution (None = whole catalog)

    Returns:
        AdmissionUnit list in stable catalog order
    """
    query = (
        select(Unit)
        .options(selectinload(Unit.requirements), selectinload(Unit.institution))
        .where(Unit.is_active.is_(True))
        .order_by(Unit.created_at, Unit.unit_id)
    )
    if institution_id is not None:
        query = query.where(Unit.institution_id == institution_id)

    units = db.execute(query).scalars().all()
    return [_build_unit(u) for u in units]


def fetch_unit(db: Session, unit_id: str) -> AdmissionUnit:
    """
    Load a single unit, active or not.

    Raises:
        UnitNotFoundError: no unit with this id
    """
    query = (
        select(Unit)
        .options(selectinload(Unit.requirements), selectinload(Unit.institution))
        .where(Unit.unit_id == unit_id)
    )
    unit = db.execute(query).scalar_one_or_none()
    if unit is None:
        raise UnitNotFoundError(unit_id)
    return _build_unit(unit)


def _build_profile(student: Student) -> StudentProfile:
    return StudentProfile(
        student_id=student.student_id,
        ssc_gpa=student.ssc_gpa,
        ssc_stream=student.ssc_stream or None,
        ssc_year=student.ssc_year,
        hsc_gpa=student.hsc_gpa,
        hsc_stream=student.hsc_stream or None,
        hsc_year=student.hsc_year,
    )


def _build_institution(institution: Institution) -> InstitutionSummary:
    return InstitutionSummary(
        institution_id=institution.institution_id,
        name=institution.name or "",
        short_name=institution.short_name,
        website=institution.website,
        description=institution.description,
        address=institution.address,
        type=institution.type,
        ownership=institution.ownership,
        established_year=institution.established_year,
        logo_url=institution.logo_url,
    )


def _build_rule(requirement: UnitRequirement) -> RequirementRule:
    return RequirementRule(
        ssc_stream=requirement.ssc_stream,
        hsc_stream=requirement.hsc_stream,
        min_ssc_gpa=requirement.min_ssc_gpa,
        min_hsc_gpa=requirement.min_hsc_gpa,
        min_combined_gpa=requirement.min_combined_gpa,
        min_ssc_year=requirement.min_ssc_year,
        max_ssc_year=requirement.max_ssc_year,
        min_hsc_year=requirement.min_hsc_year,
        max_hsc_year=requirement.max_hsc_year,
    )


def _build_unit(unit: Unit) -> AdmissionUnit:
    """
    Build an AdmissionUnit from database models.
    """
    return AdmissionUnit(
        unit_id=unit.unit_id,
        institution_id=unit.institution_id,
        name=unit.name or "",
        description=unit.description,
        is_active=bool(unit.is_active),
        application_deadline=unit.application_deadline,
        auto_close_after_deadline=bool(unit.auto_close_after_deadline),
        requirements=[_build_rule(r) for r in unit.requirements],
        institution=_build_institution(unit.institution) if unit.institution else None,
    )
