"""
Engine Runner

Orchestrates the eligibility pipeline:
1. Looks up the student profile (and institution/unit where needed)
2. Fetches the active unit catalog
3. Runs the eligibility engine at the current time
4. Returns the engine result

This is a pure orchestration layer - NO rule logic. Lookup failures raise
NotFoundError before the engine runs.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session

from .catalog import fetch_student_profile, fetch_institution, fetch_active_units, fetch_unit
from .contracts import EligibilityResult, InstitutionEligibility, UnitDecision
from .engine import EligibilityEngine

logger = logging.getLogger(__name__)


def resolve_now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def run_eligibility(
    db: Session,
    student_id: str,
    now: Optional[datetime] = None,
    engine: Optional[EligibilityEngine] = None
) -> EligibilityResult:
    """
    Main entry point: every institution the student can apply to.

    Args:
        db: Database session
        student_id: Student to evaluate
        now: Evaluation time (defaults to the current UTC time)
        engine: Engine instance (defaults to one built from configuration)

    Returns:
        EligibilityResult grouped by institution
    """
    engine = engine or EligibilityEngine()
    now = resolve_now(now)

    logger.info(f"🚀 Starting eligibility pipeline for student: {student_id}")
    profile = fetch_student_profile(db, student_id)

    units = fetch_active_units(db)
    logger.info(f"📦 Active units fetched: {len(units)}")

    start_time = time.perf_counter()
    result = engine.compute_eligibility(profile, units, now)
    processing_time = (time.perf_counter() - start_time) * 1000

    logger.info(
        f"✅ Eligible units: {result.total_eligible} across "
        f"{len(result.institutions)} institutions ({processing_time:.2f}ms)"
    )
    return result


def run_institution_eligibility(
    db: Session,
    student_id: str,
    institution_id: str,
    now: Optional[datetime] = None,
    engine: Optional[EligibilityEngine] = None
) -> InstitutionEligibility:
    """
    Units of a single institution the student can apply to.
    """
    engine = engine or EligibilityEngine()
    now = resolve_now(now)

    logger.info(f"🚀 Eligibility for student {student_id} at institution {institution_id}")
    profile = fetch_student_profile(db, student_id)
    institution = fetch_institution(db, institution_id)

    units = fetch_active_units(db, institution_id=institution_id)
    result = engine.compute_institution_eligibility(profile, institution, units, now)

    logger.info(f"✅ Eligible units: {len(result.units)} of {len(units)}")
    return result


def run_unit_check(
    db: Session,
    student_id: str,
    unit_id: str,
    now: Optional[datetime] = None,
    engine: Optional[EligibilityEngine] = None
) -> UnitDecision:
    """
    Whether the student may apply to one unit, with the reason if not.
    """
    engine = engine or EligibilityEngine()
    now = resolve_now(now)

    profile = fetch_student_profile(db, student_id)
    unit = fetch_unit(db, unit_id)

    decision = engine.evaluate_unit(profile, unit, now)
    if not decision.eligible:
        logger.info(f"⚠️ Student {student_id} not eligible for unit {unit_id}: {decision.reason.value}")
    return decision
