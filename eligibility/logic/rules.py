"""
Requirement Rule Evaluation

Checks a student profile against requirement rules.
Sub-conditions of one rule are AND-combined; a unit's rules are OR-combined.
Missing profile values are substituted, never rejected.
"""

from typing import List, Optional, Sequence

from .contracts import StudentProfile, RequirementRule, RuleEvaluation
from .constants import DEFAULT_GPA, DEFAULT_YEAR


def _gpa(value: Optional[float]) -> float:
    return DEFAULT_GPA if value is None else value


def _year(value: Optional[int]) -> int:
    return DEFAULT_YEAR if value is None else value


def meets_minimum(value: float, minimum: Optional[float]) -> bool:
    return minimum is None or value >= minimum


def within_bounds(value: int, lower: Optional[int], upper: Optional[int]) -> bool:
    """Inclusive range check; an absent bound is open."""
    return (lower is None or value >= lower) and (upper is None or value <= upper)


def stream_matches(profile: StudentProfile, rule: RequirementRule) -> bool:
    """
    Both streams must match the rule.

    A profile missing either stream is never excluded on stream grounds:
    an unknown stream is treated as a pass.
    """
    if not profile.ssc_stream or not profile.hsc_stream:
        return True
    return rule.ssc_stream == profile.ssc_stream and rule.hsc_stream == profile.hsc_stream


def evaluate_rule(
    profile: StudentProfile,
    rule: RequirementRule,
    enforce_year_bounds: bool = True
) -> RuleEvaluation:
    """
    Evaluate every sub-condition of a rule.

    Args:
        profile: Student's academic profile
        rule: Requirement rule to check
        enforce_year_bounds: If False, passing-year bounds always pass

    Returns:
        RuleEvaluation with one flag per sub-condition
    """
    ssc = _gpa(profile.ssc_gpa)
    hsc = _gpa(profile.hsc_gpa)

    evaluation = RuleEvaluation(
        pass_ssc_gpa=meets_minimum(ssc, rule.min_ssc_gpa),
        pass_hsc_gpa=meets_minimum(hsc, rule.min_hsc_gpa),
        pass_combined_gpa=meets_minimum(ssc + hsc, rule.min_combined_gpa),
        pass_stream=stream_matches(profile, rule),
    )

    if enforce_year_bounds:
        evaluation.pass_ssc_year = within_bounds(
            _year(profile.ssc_year), rule.min_ssc_year, rule.max_ssc_year
        )
        evaluation.pass_hsc_year = within_bounds(
            _year(profile.hsc_year), rule.min_hsc_year, rule.max_hsc_year
        )

    return evaluation


def is_rule_satisfied(
    profile: StudentProfile,
    rule: RequirementRule,
    enforce_year_bounds: bool = True
) -> bool:
    return evaluate_rule(profile, rule, enforce_year_bounds).satisfied


def first_satisfied_rule(
    profile: StudentProfile,
    rules: Sequence[RequirementRule],
    enforce_year_bounds: bool = True
) -> Optional[int]:
    """Index of the first rule the profile satisfies, or None."""
    for index, rule in enumerate(rules):
        if is_rule_satisfied(profile, rule, enforce_year_bounds):
            return index
    return None


def meets_requirements(
    profile: StudentProfile,
    rules: Sequence[RequirementRule],
    enforce_year_bounds: bool = True
) -> bool:
    """
    True if the profile satisfies at least one rule.
    A unit without rules is open to everyone.
    """
    if not rules:
        return True
    return first_satisfied_rule(profile, rules, enforce_year_bounds) is not None


def explain_rules(
    profile: StudentProfile,
    rules: Sequence[RequirementRule],
    enforce_year_bounds: bool = True
) -> List[RuleEvaluation]:
    """Per-rule evaluations, in rule order."""
    return [evaluate_rule(profile, rule, enforce_year_bounds) for rule in rules]
