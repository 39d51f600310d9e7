"""Utility modules for RenoCost."""

from renocost.utils.calc_logger import (
    configure_logging,
    log_estimate_complete,
)

__all__ = [
    "configure_logging",
    "log_estimate_complete",
]
