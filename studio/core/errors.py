"""
Error taxonomy for the booking and payroll engine.

Every error is a recoverable, user-facing condition. They subclass
ValueError so callers that only know about ValueError keep working.
"""


class StudioError(ValueError):
    """Base class for engine errors"""

    code = "STUDIO_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(StudioError):
    code = "NOT_FOUND"


class CapacityExceeded(StudioError):
    code = "CAPACITY_EXCEEDED"


class AlreadyEnrolled(StudioError):
    code = "ALREADY_ENROLLED"


class ScheduleCollision(StudioError):
    code = "SCHEDULE_COLLISION"


class NoEligiblePlan(StudioError):
    code = "NO_ELIGIBLE_PLAN"


class ValidationError(StudioError):
    code = "VALIDATION_ERROR"
