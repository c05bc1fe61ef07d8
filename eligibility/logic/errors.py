"""
Lookup errors raised by the catalog collaborators.

The engine itself never raises; these short-circuit before it runs.
"""


class EligibilityError(Exception):
    """Base class for eligibility service errors."""


class NotFoundError(EligibilityError):
    entity = "Entity"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{self.entity} not found: {identifier}")

    @property
    def detail(self) -> str:
        return f"{self.entity} not found"


class StudentNotFoundError(NotFoundError):
    entity = "Student"


class InstitutionNotFoundError(NotFoundError):
    entity = "Institution"


class UnitNotFoundError(NotFoundError):
    entity = "Unit"
