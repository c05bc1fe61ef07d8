"""
Eligibility API Routes

Exposes the eligibility engine via REST API.
Student identity arrives in the path; authentication happens upstream.
"""

import logging
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from db import get_db
from .logic.contracts import StudentProfile, AdmissionUnit
from .logic.constants import ENGINE_VERSION
from .logic.engine import EligibilityEngine
from .logic.errors import NotFoundError
from .logic.runner import run_eligibility, run_institution_eligibility, run_unit_check, resolve_now
from .logic.output_assembler import (
    serialize_result,
    serialize_institution,
    serialize_decision,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class EvaluationRequest(BaseModel):
    """Request body for stateless evaluation."""
    profile: StudentProfile = Field(
        ...,
        description="Student academic profile",
        examples=[{
            "ssc_gpa": 5.0,
            "hsc_gpa": 5.0,
            "ssc_stream": "SCIENCE",
            "hsc_stream": "SCIENCE",
            "ssc_year": 2022,
            "hsc_year": 2024,
        }],
    )
    units: List[AdmissionUnit] = Field(
        default_factory=list,
        description="Candidate units with requirement rules"
    )
    now: Optional[datetime] = Field(
        default=None,
        description="Evaluation time (defaults to server time)"
    )


def _server_error(e: Exception) -> JSONResponse:
    logger.exception(f"Eligibility request failed: {e}")
    return JSONResponse(
        status_code=500,
        content={"status": 500, "message": "Something went wrong"}
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/students/{student_id}/institutions", summary="Institutions a student may apply to")
def eligible_institutions(student_id: str, db: Session = Depends(get_db)):
    """
    All institutions with at least one unit the student is eligible for.

    **Response:**
    - `data`: institutions, each with its eligible `units`
    """
    try:
        result = run_eligibility(db, student_id)
        return {
            "status": 200,
            "data": serialize_result(result),
            "summary": {
                "total_evaluated": result.total_units_evaluated,
                "total_eligible": result.total_eligible,
            },
        }
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except Exception as e:
        return _server_error(e)


@router.get(
    "/students/{student_id}/institutions/{institution_id}",
    summary="Eligible units at one institution"
)
def eligible_institution_by_id(student_id: str, institution_id: str, db: Session = Depends(get_db)):
    """
    One institution with the units the student is eligible for.
    An empty `units` list is a valid answer.
    """
    try:
        result = run_institution_eligibility(db, student_id, institution_id)
        return {"status": 200, "data": serialize_institution(result)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except Exception as e:
        return _server_error(e)


@router.get("/students/{student_id}/units/{unit_id}", summary="Check eligibility for one unit")
def unit_eligibility(student_id: str, unit_id: str, db: Session = Depends(get_db)):
    """
    Whether the student may apply to a unit, and why not if they can't.
    """
    try:
        decision = run_unit_check(db, student_id, unit_id)
        return {"status": 200, "data": serialize_decision(decision)}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.detail)
    except Exception as e:
        return _server_error(e)


@router.post("/evaluate", summary="Evaluate a profile against supplied units")
def evaluate(request: EvaluationRequest):
    """
    Run the engine on a profile and units given in the request body.
    Nothing is read from the database.
    """
    engine = EligibilityEngine()
    result = engine.compute_eligibility(request.profile, request.units, resolve_now(request.now))
    return {
        "status": 200,
        "data": serialize_result(result),
        "summary": {
            "total_evaluated": result.total_units_evaluated,
            "total_eligible": result.total_eligible,
        },
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Eligibility engine health check")
def health_check():
    """Check if eligibility engine is operational."""
    return {"status": "ok", "engine": "eligibility", "version": ENGINE_VERSION}
