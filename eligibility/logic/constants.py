"""
Eligibility Engine Constants

Defines the enums, defaults and environment-driven settings used by the
eligibility engine. All rule logic is deterministic.
"""

import os
from enum import Enum

from dotenv import load_dotenv

load_dotenv()

ENGINE_VERSION = "1.0.0"

# =============================================================================
# ENUMS
# =============================================================================

class Stream(str, Enum):
    """Academic stream of an SSC/HSC certificate."""
    SCIENCE = "SCIENCE"
    ARTS = "ARTS"
    COMMERCE = "COMMERCE"


class ExclusionReason(str, Enum):
    """Why a unit was not offered to a student."""
    INACTIVE = "inactive"
    DEADLINE_PASSED = "deadline_passed"
    REQUIREMENTS_NOT_MET = "requirements_not_met"


# =============================================================================
# DEFAULT VALUES
# =============================================================================

# Substituted for missing GPA / passing year values during comparison
DEFAULT_GPA = 0.0
DEFAULT_YEAR = 0

# =============================================================================
# CONFIGURATION
# =============================================================================

def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Year bounds apply to both the whole-catalog and single-institution paths.
# Setting this to false disables them everywhere.
ENFORCE_YEAR_BOUNDS = _env_flag("ELIGIBILITY_ENFORCE_YEAR_BOUNDS", "true")
