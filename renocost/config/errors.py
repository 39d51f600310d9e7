"""RenoCost error handling.

Custom exceptions and error codes. The calculators themselves degrade to
defined outputs instead of raising; these errors are reserved for explicit
caller-driven operations such as payment status updates and settings
validation.
"""

from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Payment Schedule Errors
    MILESTONE_NOT_FOUND = "MILESTONE_NOT_FOUND"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"


class RenoCostError(Exception):
    """Base exception for RenoCost errors.

    Provides structured error information for API responses.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API response."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"RenoCostError(code={self.code!r}, message={self.message!r})"


class ValidationError(RenoCostError):
    """Validation-specific error."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )


class MilestoneNotFoundError(RenoCostError):
    """Raised when a status update names a milestone that is not in the schedule."""

    def __init__(self, milestone_id: str, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.MILESTONE_NOT_FOUND,
            message=f"Payment milestone '{milestone_id}' not found",
            details={**(details or {}), "milestone_id": milestone_id}
        )
        self.milestone_id = milestone_id


class InvalidStatusTransitionError(RenoCostError):
    """Raised when a payment milestone cannot move to the requested status."""

    def __init__(
        self,
        milestone_id: str,
        current_status: str,
        requested_status: str,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            message=(
                f"Milestone '{milestone_id}' cannot move from "
                f"{current_status} to {requested_status}"
            ),
            details={
                **(details or {}),
                "milestone_id": milestone_id,
                "current_status": current_status,
                "requested_status": requested_status,
            }
        )
        self.milestone_id = milestone_id
        self.current_status = current_status
        self.requested_status = requested_status
