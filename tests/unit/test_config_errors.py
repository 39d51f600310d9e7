"""Unit tests for settings, error types and logging configuration."""

import pytest
import structlog
from structlog.testing import capture_logs

from renocost.config.errors import (
    ErrorCode,
    InvalidStatusTransitionError,
    MilestoneNotFoundError,
    RenoCostError,
    ValidationError,
)
from renocost.config.settings import Settings, settings as app_settings
from renocost.models.roi import ROIDefaults
from renocost.utils.calc_logger import configure_logging, log_estimate_complete


# =============================================================================
# Settings
# =============================================================================


class TestSettings:
    """Tests for environment-backed settings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "RENOCOST_CLOSING_COST_RATE",
            "RENOCOST_CARRYING_COST_RATE",
            "RENOCOST_LABOR_RATE",
            "RENOCOST_LABOR_WORKERS",
            "RENOCOST_DEFAULT_TIMELINE",
        ):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.closing_cost_rate == 0.06
        assert settings.carrying_cost_rate == 0.02
        assert settings.labor_rate == 55
        assert settings.labor_workers == 2
        assert settings.default_timeline == "4-8 weeks"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RENOCOST_CLOSING_COST_RATE", "0.08")
        monkeypatch.setenv("RENOCOST_LABOR_WORKERS", "3")
        settings = Settings()
        assert settings.closing_cost_rate == 0.08
        assert settings.labor_workers == 3

    def test_validate_rejects_negative_rate(self):
        settings = Settings()
        settings.carrying_cost_rate = -0.01
        with pytest.raises(ValidationError, match="carrying_cost_rate") as exc_info:
            settings.validate()
        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
        assert exc_info.value.details == {"field": "carrying_cost_rate"}

    def test_validate_rejects_empty_crew(self):
        settings = Settings()
        settings.labor_workers = 0
        with pytest.raises(ValidationError) as exc_info:
            settings.validate()
        assert exc_info.value.details["field"] == "labor_workers"

    def test_default_settings_are_valid(self):
        Settings().validate()

    def test_roi_defaults_from_settings(self, monkeypatch):
        monkeypatch.setattr(app_settings, "closing_cost_rate", 0.1)
        defaults = ROIDefaults.from_settings()
        assert defaults.closing_cost_rate == 0.1


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    """Tests for the structured error hierarchy."""

    def test_base_error_to_dict(self):
        error = RenoCostError(ErrorCode.VALIDATION_ERROR, "bad input", {"field": "area"})
        assert error.to_dict() == {
            "code": "VALIDATION_ERROR",
            "message": "bad input",
            "details": {"field": "area"},
        }
        assert str(error) == "bad input"

    def test_validation_error_records_field(self):
        error = ValidationError("must be positive", field="area_sqft")
        assert error.code == ErrorCode.VALIDATION_ERROR
        assert error.details == {"field": "area_sqft"}

    def test_validation_error_without_field(self):
        assert ValidationError("bad").details == {}

    def test_milestone_not_found(self):
        error = MilestoneNotFoundError("bonus")
        assert isinstance(error, RenoCostError)
        assert error.details["milestone_id"] == "bonus"
        assert "bonus" in error.message

    def test_invalid_transition(self):
        error = InvalidStatusTransitionError("deposit", "paid", "due")
        assert error.code == ErrorCode.INVALID_STATUS_TRANSITION
        assert error.requested_status == "due"
        assert "paid" in error.message


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    """Tests for structlog configuration and estimate logging."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_configure_logging_accepts_level_names(self):
        configure_logging("DEBUG")
        configure_logging("warning")
        configure_logging("not-a-level")

    def test_log_estimate_complete(self):
        with capture_logs() as cap_logs:
            log_estimate_complete("bathroom", "premium", 24000, ["totals", "breakdown"])
        assert cap_logs == [{
            "event": "estimate_complete",
            "log_level": "info",
            "category": "bathroom",
            "quality_tier": "premium",
            "total": 24000,
            "components": ["totals", "breakdown"],
        }]
