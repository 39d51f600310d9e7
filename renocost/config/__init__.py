"""RenoCost configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from renocost.config.settings import settings, Settings
from renocost.config.errors import (
    ErrorCode,
    RenoCostError,
    ValidationError,
    MilestoneNotFoundError,
    InvalidStatusTransitionError,
)

__all__ = [
    "settings",
    "Settings",
    "ErrorCode",
    "RenoCostError",
    "ValidationError",
    "MilestoneNotFoundError",
    "InvalidStatusTransitionError",
]
