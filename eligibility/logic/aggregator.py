"""
Result Aggregator

Groups eligible units into per-institution buckets.
Buckets keep the order in which their institution was first seen and units
keep their input order.
"""

from typing import Dict, Iterable, List

from .contracts import AdmissionUnit, EligibleUnit, InstitutionEligibility


def project_unit(unit: AdmissionUnit) -> EligibleUnit:
    """Reduce a unit to the attributes shown to students."""
    return EligibleUnit(
        unit_id=unit.unit_id,
        name=unit.name,
        description=unit.description,
        application_deadline=unit.application_deadline,
        is_active=unit.is_active,
    )


def _new_bucket(unit: AdmissionUnit) -> InstitutionEligibility:
    # Display metadata comes from the first unit seen for the institution
    if unit.institution is not None:
        return InstitutionEligibility(**unit.institution.model_dump(), units=[])
    return InstitutionEligibility(institution_id=unit.institution_id, units=[])


def group_by_institution(units: Iterable[AdmissionUnit]) -> List[InstitutionEligibility]:
    """
    Bucket already-filtered units by owning institution.

    Args:
        units: Eligible units, in display order

    Returns:
        One InstitutionEligibility per institution, none of them empty
    """
    buckets: Dict[str, InstitutionEligibility] = {}

    for unit in units:
        bucket = buckets.get(unit.institution_id)
        if bucket is None:
            bucket = _new_bucket(unit)
            buckets[unit.institution_id] = bucket
        bucket.units.append(project_unit(unit))

    return list(buckets.values())
