"""Error kinds raised by plan operations."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories surfaced in response envelopes."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"
    BACKEND_FAILURE = "BACKEND_FAILURE"
    STORE_FAILURE = "STORE_FAILURE"
    INTERNAL = "INTERNAL"


class PlanError(Exception):
    """Base error for plan operations."""

    kind: ErrorKind = ErrorKind.INTERNAL


class PlanNotFoundError(PlanError):
    """Raised when a plan id does not resolve to a stored plan."""

    kind = ErrorKind.NOT_FOUND


class InvalidCaloriesError(PlanError):
    """Raised when a calorie target is outside the accepted range."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidPlanStateError(PlanError):
    """Raised when a stored plan cannot be rescaled."""

    kind = ErrorKind.INVALID_STATE


class BackendError(PlanError):
    """Raised when an AI provider fails or returns an unusable draft."""

    kind = ErrorKind.BACKEND_FAILURE


class StoreError(PlanError):
    """Raised when the plan store fails."""

    kind = ErrorKind.STORE_FAILURE
