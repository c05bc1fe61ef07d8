"""
Output Assembler

Transforms engine results into the JSON payload consumed by the frontend.
Keys are camelCase and their order is fixed.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from .contracts import EligibleUnit, InstitutionEligibility, EligibilityResult, UnitDecision
from .deadline import as_utc


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return as_utc(value).isoformat() if value else None


def serialize_unit(unit: EligibleUnit) -> Dict[str, Any]:
    return {
        "unitId": unit.unit_id,
        "name": unit.name,
        "description": unit.description,
        "applicationDeadline": _isoformat(unit.application_deadline),
        "isActive": unit.is_active,
    }


def serialize_institution(institution: InstitutionEligibility) -> Dict[str, Any]:
    """Institution display fields with its eligible units nested under `units`."""
    return {
        "institutionId": institution.institution_id,
        "name": institution.name,
        "shortName": institution.short_name,
        "website": institution.website,
        "description": institution.description,
        "address": institution.address,
        "type": institution.type,
        "ownership": institution.ownership,
        "establishedYear": institution.established_year,
        "logoUrl": institution.logo_url,
        "units": [serialize_unit(u) for u in institution.units],
    }


def serialize_result(result: EligibilityResult) -> List[Dict[str, Any]]:
    """Whole-catalog payload: one object per institution."""
    return [serialize_institution(i) for i in result.institutions]


def serialize_decision(decision: UnitDecision) -> Dict[str, Any]:
    return {
        "unitId": decision.unit_id,
        "eligible": decision.eligible,
        "reason": decision.reason.value if decision.reason else None,
        "matchedRuleIndex": decision.matched_rule_index,
    }
