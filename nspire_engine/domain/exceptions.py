"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidArgumentError(DomainException, ValueError):
    """Scoring input violates the engine contract (bad sample size, unit defect without unit id)"""

    pass


class MalformedDefectRowError(InvalidArgumentError):
    """Raw defect row is missing required fields or carries invalid values"""

    pass


class DefectSourceError(DomainException):
    """Defect source could not supply units or open defects for a property"""

    pass


class ScoreComputationError(DomainException):
    """Unable to compute a score for a property"""

    def __init__(self, property_id: str, reason: str):
        super().__init__(f"Unable to compute score for property {property_id}: {reason}")
        self.property_id = property_id
        self.reason = reason
