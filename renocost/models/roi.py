"""Investment return Pydantic models for RenoCost.

This module defines the fix-and-flip ROI result, what-if scenarios and
the buy-and-hold rental analysis.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class RiskTier(str, Enum):
    """Risk classification of a flip, driven by ROI percentage."""

    LOW = "Low"            # ROI >= 20
    MODERATE = "Moderate"  # 15 <= ROI < 20
    HIGH = "High"          # ROI < 15, including losses


class ROIQualityLabel(str, Enum):
    """Display label for an ROI percentage."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    BELOW_AVERAGE = "Below Average"
    POOR = "Poor"


# =============================================================================
# DEFAULTS
# =============================================================================


class ROIDefaults(BaseModel):
    """Named fallback rates for optional ROI inputs.

    Passed explicitly to the calculator so callers and tests can override
    them deterministically.
    """

    model_config = ConfigDict(frozen=True)

    closing_cost_rate: float = Field(default=0.06, ge=0, description="Closing costs as fraction of purchase price")
    carrying_cost_rate: float = Field(default=0.02, ge=0, description="Carrying costs as fraction of purchase price")
    rental_expense_ratio: float = Field(default=0.5, ge=0, description="Monthly expenses as fraction of rent")
    down_payment_rate: float = Field(default=0.25, ge=0, description="Down payment as fraction of purchase price")

    @classmethod
    def from_settings(cls) -> "ROIDefaults":
        """Build defaults from environment-backed settings."""
        from renocost.config.settings import settings
        return cls(
            closing_cost_rate=settings.closing_cost_rate,
            carrying_cost_rate=settings.carrying_cost_rate,
            rental_expense_ratio=settings.rental_expense_ratio,
            down_payment_rate=settings.down_payment_rate,
        )


# =============================================================================
# INPUTS
# =============================================================================


class ROIInputs(BaseModel):
    """Flip inputs as entered. Optional costs fall back to ROIDefaults."""

    model_config = ConfigDict(frozen=True)

    purchase_price: float = Field(default=0.0, ge=0)
    rehab_budget: float = Field(default=0.0, ge=0)
    after_repair_value: float = Field(default=0.0, ge=0)
    closing_costs: Optional[float] = Field(None, ge=0, description="Defaults to a share of purchase price")
    carrying_costs: Optional[float] = Field(None, ge=0, description="Defaults to a share of purchase price")

    def scaled(self, input_name: str, factor: float) -> "ROIInputs":
        """Return a copy with one input multiplied by factor."""
        current = getattr(self, input_name)
        if current is None:
            return self.model_copy()
        return self.model_copy(update={input_name: current * factor})


# =============================================================================
# FLIP ROI RESULT
# =============================================================================


class ROIResult(BaseModel):
    """Fix-and-flip return analysis."""

    model_config = ConfigDict(frozen=True)

    # Inputs as resolved (defaults applied)
    purchase_price: float = Field(..., ge=0)
    rehab_budget: float = Field(..., ge=0)
    after_repair_value: float = Field(..., ge=0)
    closing_costs: float = Field(..., ge=0)
    carrying_costs: float = Field(..., ge=0)

    # Outputs
    total_investment: float = Field(..., ge=0)
    estimated_profit: float = Field(..., description="ARV minus total investment; negative on a loss")
    roi_percentage: float = Field(..., description="Profit as a percentage of total investment")
    breakeven_sale_price: float = Field(..., ge=0)
    margin_of_safety: float = Field(..., description="Percentage buffer between ARV and breakeven")
    risk_tier: RiskTier = Field(...)
    quality_label: ROIQualityLabel = Field(...)
    recommendations: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict format for prompt payloads."""
        return {
            "purchasePrice": self.purchase_price,
            "rehabBudget": self.rehab_budget,
            "afterRepairValue": self.after_repair_value,
            "closingCosts": self.closing_costs,
            "carryingCosts": self.carrying_costs,
            "totalInvestment": self.total_investment,
            "estimatedProfit": self.estimated_profit,
            "roiPercentage": self.roi_percentage,
            "breakevenSalePrice": self.breakeven_sale_price,
            "marginOfSafety": self.margin_of_safety,
            "riskTier": self.risk_tier.value,
            "qualityLabel": self.quality_label.value,
            "recommendations": list(self.recommendations),
        }


class WhatIfScenario(BaseModel):
    """A re-evaluation of the ROI formula with one input perturbed."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Scenario name")
    description: str = Field(..., description="What was changed")
    perturbed_input: str = Field(..., description="Perturbed input name")
    factor: float = Field(..., gt=0, description="Multiplier applied to the input")
    result: ROIResult = Field(..., description="Re-evaluated result")
    profit_delta: float = Field(..., description="Change in estimated profit versus base")
    roi_delta: float = Field(..., description="Change in ROI percentage points versus base")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "perturbedInput": self.perturbed_input,
            "factor": self.factor,
            "estimatedProfit": self.result.estimated_profit,
            "roiPercentage": self.result.roi_percentage,
            "riskTier": self.result.risk_tier.value,
            "profitDelta": self.profit_delta,
            "roiDelta": self.roi_delta,
        }


# =============================================================================
# RENTAL ANALYSIS
# =============================================================================


class RentalAnalysis(BaseModel):
    """Buy-and-hold rental return analysis."""

    model_config = ConfigDict(frozen=True)

    purchase_price: float = Field(..., ge=0)
    rehab_budget: float = Field(..., ge=0)
    down_payment: float = Field(..., ge=0)
    total_investment: float = Field(..., ge=0, description="Down payment plus rehab")
    monthly_rent: float = Field(..., ge=0)
    monthly_expenses: float = Field(..., ge=0)
    net_cash_flow: float = Field(..., description="Monthly rent minus expenses")
    cap_rate: float = Field(..., description="Annual net income over property value, percent")
    cash_on_cash_return: float = Field(..., description="Annual net income over cash invested, percent")
    one_percent_rule: bool = Field(..., description="Rent at least 1% of property value")
    break_even_ratio: float = Field(..., ge=0, description="Expenses over rent")
    annual_return: float = Field(..., description="Annual net income")
    recommendations: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "purchasePrice": self.purchase_price,
            "rehabBudget": self.rehab_budget,
            "downPayment": self.down_payment,
            "totalInvestment": self.total_investment,
            "monthlyRent": self.monthly_rent,
            "monthlyExpenses": self.monthly_expenses,
            "netCashFlow": self.net_cash_flow,
            "capRate": self.cap_rate,
            "cashOnCashReturn": self.cash_on_cash_return,
            "onePercentRule": self.one_percent_rule,
            "breakEvenRatio": self.break_even_ratio,
            "annualReturn": self.annual_return,
            "recommendations": list(self.recommendations),
        }
