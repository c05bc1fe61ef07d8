"""
Tests for the response payload shape.
"""

from datetime import datetime, timedelta, timezone

from eligibility.logic import (
    EligibleUnit,
    ExclusionReason,
    InstitutionEligibility,
    UnitDecision,
    compute_eligibility,
)
from eligibility.logic.output_assembler import (
    serialize_unit,
    serialize_institution,
    serialize_result,
    serialize_decision,
)


def test_unit_payload_keys_and_deadline_format():
    unit = EligibleUnit(
        unit_id="u1",
        name="Unit A",
        description=None,
        application_deadline=datetime(2025, 11, 30, 23, 59, 59),
        is_active=True,
    )
    assert serialize_unit(unit) == {
        "unitId": "u1",
        "name": "Unit A",
        "description": None,
        "applicationDeadline": "2025-11-30T23:59:59+00:00",
        "isActive": True,
    }


def test_unit_payload_without_deadline():
    payload = serialize_unit(EligibleUnit(unit_id="u1", name="Unit A"))
    assert payload["applicationDeadline"] is None


def test_institution_payload_nests_units():
    institution = InstitutionEligibility(
        institution_id="du",
        name="Dhaka University",
        short_name="DU",
        established_year=1921,
        units=[EligibleUnit(unit_id="u1", name="Unit A"), EligibleUnit(unit_id="u2", name="Unit B")],
    )
    payload = serialize_institution(institution)
    assert list(payload.keys()) == [
        "institutionId", "name", "shortName", "website", "description", "address",
        "type", "ownership", "establishedYear", "logoUrl", "units",
    ]
    assert payload["institutionId"] == "du"
    assert payload["establishedYear"] == 1921
    assert [u["unitId"] for u in payload["units"]] == ["u1", "u2"]


def test_result_payload_is_list_of_institutions(science_profile, unit_factory, now):
    units = [unit_factory("a1", institution_id="A"), unit_factory("b1", institution_id="B")]
    payload = serialize_result(compute_eligibility(science_profile, units, now))
    assert [p["institutionId"] for p in payload] == ["A", "B"]
    assert all(p["units"] for p in payload)


def test_decision_payload():
    rejected = UnitDecision(unit_id="u1", eligible=False, reason=ExclusionReason.DEADLINE_PASSED)
    assert serialize_decision(rejected) == {
        "unitId": "u1",
        "eligible": False,
        "reason": "deadline_passed",
        "matchedRuleIndex": None,
    }
    accepted = UnitDecision(unit_id="u1", eligible=True, matched_rule_index=0)
    assert serialize_decision(accepted)["matchedRuleIndex"] == 0
    assert serialize_decision(accepted)["reason"] is None


def test_aware_deadlines_are_rendered_in_utc():
    dhaka = timezone(timedelta(hours=6))
    unit = EligibleUnit(unit_id="u1", name="Unit A", application_deadline=datetime(2025, 12, 1, 6, 0, tzinfo=dhaka))
    assert serialize_unit(unit)["applicationDeadline"] == "2025-12-01T00:00:00+00:00"
