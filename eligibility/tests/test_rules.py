"""
Tests for requirement rule evaluation.
"""

from eligibility.logic import RequirementRule, StudentProfile
from eligibility.logic.rules import (
    evaluate_rule,
    is_rule_satisfied,
    first_satisfied_rule,
    meets_requirements,
    explain_rules,
    stream_matches,
    within_bounds,
)


def _rule(**fields):
    data = {"ssc_stream": "SCIENCE", "hsc_stream": "SCIENCE"}
    data.update(fields)
    return RequirementRule(**data)


def test_rule_without_thresholds_only_checks_stream(science_profile):
    assert is_rule_satisfied(science_profile, _rule())
    assert not is_rule_satisfied(science_profile, _rule(ssc_stream="ARTS", hsc_stream="ARTS"))


def test_gpa_minimums_are_inclusive(science_profile):
    assert is_rule_satisfied(science_profile, _rule(min_ssc_gpa=5.0, min_hsc_gpa=5.0))
    assert not is_rule_satisfied(science_profile, _rule(min_hsc_gpa=5.01))


def test_combined_gpa_uses_sum(science_profile):
    assert is_rule_satisfied(science_profile, _rule(min_combined_gpa=10.0))
    assert not is_rule_satisfied(science_profile, _rule(min_combined_gpa=10.5))


def test_missing_gpa_counts_as_zero():
    profile = StudentProfile(hsc_gpa=4.0)
    evaluation = evaluate_rule(profile, _rule(min_ssc_gpa=0.5, min_combined_gpa=4.0))
    assert not evaluation.pass_ssc_gpa
    assert evaluation.pass_combined_gpa
    assert evaluation.pass_stream
    assert not evaluation.satisfied
    assert evaluation.failed_checks() == ["pass_ssc_gpa"]


def test_every_subcondition_must_hold(science_profile):
    rule = _rule(min_ssc_gpa=4.0, min_hsc_gpa=4.0, min_combined_gpa=8.0, min_hsc_year=2024)
    evaluation = evaluate_rule(science_profile, rule)
    assert evaluation.pass_ssc_gpa and evaluation.pass_hsc_gpa and evaluation.pass_combined_gpa
    assert not evaluation.pass_hsc_year
    assert not evaluation.satisfied


def test_stream_bypassed_when_either_profile_stream_missing():
    rule = _rule(ssc_stream="COMMERCE", hsc_stream="COMMERCE")
    assert stream_matches(StudentProfile(), rule)
    assert stream_matches(StudentProfile(ssc_stream="ARTS"), rule)
    assert stream_matches(StudentProfile(hsc_stream="ARTS"), rule)
    assert not stream_matches(StudentProfile(ssc_stream="ARTS", hsc_stream="COMMERCE"), rule)


def test_both_streams_must_match():
    profile = StudentProfile(ssc_stream="SCIENCE", hsc_stream="COMMERCE")
    assert not stream_matches(profile, _rule(ssc_stream="SCIENCE", hsc_stream="SCIENCE"))
    assert stream_matches(profile, _rule(ssc_stream="SCIENCE", hsc_stream="COMMERCE"))


def test_year_bounds_inclusive(science_profile):
    assert is_rule_satisfied(science_profile, _rule(min_ssc_year=2021, max_ssc_year=2021))
    assert is_rule_satisfied(science_profile, _rule(min_hsc_year=2022, max_hsc_year=2023))
    assert not is_rule_satisfied(science_profile, _rule(max_ssc_year=2020))
    assert not is_rule_satisfied(science_profile, _rule(min_hsc_year=2024))


def test_missing_year_counts_as_zero():
    profile = StudentProfile(ssc_stream="SCIENCE", hsc_stream="SCIENCE")
    assert not is_rule_satisfied(profile, _rule(min_hsc_year=2020))
    assert is_rule_satisfied(profile, _rule(max_hsc_year=2020))


def test_year_bounds_can_be_disabled(science_profile):
    rule = _rule(min_ssc_year=2030, max_hsc_year=2000)
    assert not is_rule_satisfied(science_profile, rule)
    assert is_rule_satisfied(science_profile, rule, enforce_year_bounds=False)


def test_within_bounds_open_ends():
    assert within_bounds(2020, None, None)
    assert within_bounds(2020, 2020, None)
    assert within_bounds(2020, None, 2020)
    assert not within_bounds(2019, 2020, None)


def test_rules_are_or_combined(science_profile):
    failing = _rule(ssc_stream="ARTS", hsc_stream="ARTS")
    passing = _rule(min_combined_gpa=9.0)
    assert meets_requirements(science_profile, [failing, passing])
    assert meets_requirements(science_profile, [passing, failing])
    assert not meets_requirements(science_profile, [failing])
    assert first_satisfied_rule(science_profile, [failing, passing]) == 1
    assert first_satisfied_rule(science_profile, [failing]) is None


def test_empty_rule_set_is_open(science_profile):
    assert meets_requirements(science_profile, [])
    assert meets_requirements(StudentProfile(), [])


def test_explain_rules_keeps_rule_order(science_profile):
    failing = _rule(ssc_stream="ARTS", hsc_stream="ARTS")
    passing = _rule()
    evaluations = explain_rules(science_profile, [failing, passing])
    assert [e.satisfied for e in evaluations] == [False, True]
    assert evaluations[0].failed_checks() == ["pass_stream"]
