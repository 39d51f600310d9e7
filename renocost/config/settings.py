"""RenoCost configuration settings.

Loads configuration from environment variables with sensible defaults.
The calculators never read the environment directly; they receive named
default structures built from this module (see ROIDefaults.from_settings).
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

from renocost.config.errors import ValidationError

# Load .env file for local overrides (rates, log level)
load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ROI defaults (fraction of purchase price)
    closing_cost_rate: float = field(default_factory=lambda: float(os.getenv("RENOCOST_CLOSING_COST_RATE", "0.06")))
    carrying_cost_rate: float = field(default_factory=lambda: float(os.getenv("RENOCOST_CARRYING_COST_RATE", "0.02")))

    # Rental analysis defaults
    rental_expense_ratio: float = field(default_factory=lambda: float(os.getenv("RENOCOST_RENTAL_EXPENSE_RATIO", "0.5")))
    down_payment_rate: float = field(default_factory=lambda: float(os.getenv("RENOCOST_DOWN_PAYMENT_RATE", "0.25")))

    # Labor assumptions used to derive labor hours from a labor subtotal
    labor_rate: float = field(default_factory=lambda: float(os.getenv("RENOCOST_LABOR_RATE", "55")))
    labor_workers: int = field(default_factory=lambda: int(os.getenv("RENOCOST_LABOR_WORKERS", "2")))

    # Cost totals estimation
    default_timeline: str = field(default_factory=lambda: os.getenv("RENOCOST_DEFAULT_TIMELINE", "4-8 weeks"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate settings are within usable ranges.

        Raises:
            ValidationError: If a rate is negative or the labor crew is empty.
        """
        for name in ("closing_cost_rate", "carrying_cost_rate", "rental_expense_ratio", "down_payment_rate"):
            if getattr(self, name) < 0:
                raise ValidationError(f"{name} must be non-negative", field=name)
        if self.labor_rate <= 0:
            raise ValidationError("labor_rate must be positive", field="labor_rate")
        if self.labor_workers < 1:
            raise ValidationError("labor_workers must be at least 1", field="labor_workers")


# Singleton settings instance
settings = Settings()
