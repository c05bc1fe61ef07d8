# Export all eligibility models for easy imports
from .base import Base
from .student import Student
from .institution import Institution
from .unit import Unit, UnitRequirement

__all__ = [
    "Base",
    "Student",
    "Institution",
    "Unit",
    "UnitRequirement",
]
