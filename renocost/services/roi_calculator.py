"""ROI Calculator for RenoCost.

Fix-and-flip return analysis, what-if re-evaluations and buy-and-hold
rental metrics.

Flip formulas:
    total_investment     = purchase + rehab + closing + carrying
    estimated_profit     = ARV - total_investment
    roi_percentage       = profit / total_investment x 100   (0 when investment is 0)
    breakeven_sale_price = total_investment
    margin_of_safety     = (ARV - breakeven) / ARV x 100      (0 when ARV is 0)
"""

from typing import Any, List, Optional, Tuple

import structlog

from renocost.models.roi import (
    RentalAnalysis,
    RiskTier,
    ROIDefaults,
    ROIInputs,
    ROIQualityLabel,
    ROIResult,
    WhatIfScenario,
)
from renocost.utils.numbers import coerce_amount, coerce_optional_amount, safe_percentage

logger = structlog.get_logger(__name__)


# =============================================================================
# THRESHOLDS
# =============================================================================


LOW_RISK_ROI = 20.0
MODERATE_RISK_ROI = 15.0

QUALITY_LABEL_THRESHOLDS: Tuple[Tuple[float, ROIQualityLabel], ...] = (
    (25.0, ROIQualityLabel.EXCELLENT),
    (20.0, ROIQualityLabel.GOOD),
    (15.0, ROIQualityLabel.FAIR),
    (10.0, ROIQualityLabel.BELOW_AVERAGE),
)

# (name, description, input, factor)
WHAT_IF_SCENARIOS: Tuple[Tuple[str, str, str, float], ...] = (
    ("Negotiate Purchase Price", "Purchase price 5% lower", "purchase_price", 0.95),
    ("Higher Sale Price", "After-repair value 5% higher", "after_repair_value", 1.05),
    ("Rehab Savings", "Rehab budget 10% lower", "rehab_budget", 0.90),
    ("Rehab Overrun", "Rehab budget 10% higher", "rehab_budget", 1.10),
    ("Soft Market", "After-repair value 5% lower", "after_repair_value", 0.95),
)


def classify_risk(roi_percentage: float) -> RiskTier:
    """Risk tier for an ROI percentage; losses are High."""
    if roi_percentage >= LOW_RISK_ROI:
        return RiskTier.LOW
    if roi_percentage >= MODERATE_RISK_ROI:
        return RiskTier.MODERATE
    return RiskTier.HIGH


def quality_label(roi_percentage: float) -> ROIQualityLabel:
    for threshold, label in QUALITY_LABEL_THRESHOLDS:
        if roi_percentage >= threshold:
            return label
    return ROIQualityLabel.POOR


def _flip_recommendations(
    roi_percentage: float,
    margin_of_safety: float,
    rehab_budget: float,
    after_repair_value: float,
) -> List[str]:
    recommendations = []
    if roi_percentage < 20:
        recommendations.append("Consider looking for properties with higher profit potential")
    if margin_of_safety < 15:
        recommendations.append("This deal has limited safety margin - proceed with caution")
    if rehab_budget > after_repair_value * 0.2:
        recommendations.append("Rehab budget seems high relative to ARV - verify estimates")
    if roi_percentage >= 25:
        recommendations.append("Excellent ROI potential - this looks like a strong deal")
    return recommendations


# =============================================================================
# FLIP ROI
# =============================================================================


def evaluate_roi(inputs: ROIInputs, defaults: Optional[ROIDefaults] = None) -> ROIResult:
    """Evaluate the flip formulas for already-validated inputs.

    Closing and carrying costs that are missing or zero fall back to the
    default share of the purchase price.
    """
    defaults = defaults or ROIDefaults()

    purchase = inputs.purchase_price
    rehab = inputs.rehab_budget
    arv = inputs.after_repair_value
    closing = inputs.closing_costs or purchase * defaults.closing_cost_rate
    carrying = inputs.carrying_costs or purchase * defaults.carrying_cost_rate

    total_investment = purchase + rehab + closing + carrying
    estimated_profit = arv - total_investment
    roi_percentage = safe_percentage(estimated_profit, total_investment)
    breakeven_sale_price = total_investment
    margin_of_safety = safe_percentage(arv - breakeven_sale_price, arv)

    return ROIResult(
        purchase_price=purchase,
        rehab_budget=rehab,
        after_repair_value=arv,
        closing_costs=closing,
        carrying_costs=carrying,
        total_investment=total_investment,
        estimated_profit=estimated_profit,
        roi_percentage=roi_percentage,
        breakeven_sale_price=breakeven_sale_price,
        margin_of_safety=margin_of_safety,
        risk_tier=classify_risk(roi_percentage),
        quality_label=quality_label(roi_percentage),
        recommendations=_flip_recommendations(roi_percentage, margin_of_safety, rehab, arv),
    )


def build_roi_inputs(
    purchase_price: Any,
    rehab_budget: Any,
    after_repair_value: Any,
    closing_costs: Any = None,
    carrying_costs: Any = None,
) -> ROIInputs:
    """Coerce raw form values into ROIInputs (NaN and negatives become 0)."""
    return ROIInputs(
        purchase_price=coerce_amount(purchase_price),
        rehab_budget=coerce_amount(rehab_budget),
        after_repair_value=coerce_amount(after_repair_value),
        closing_costs=coerce_optional_amount(closing_costs),
        carrying_costs=coerce_optional_amount(carrying_costs),
    )


def calculate_roi(
    purchase_price: Any,
    rehab_budget: Any,
    after_repair_value: Any,
    closing_costs: Any = None,
    carrying_costs: Any = None,
    defaults: Optional[ROIDefaults] = None,
) -> ROIResult:
    """Calculate flip ROI from raw inputs.

    Args:
        purchase_price: Property purchase price.
        rehab_budget: Renovation budget.
        after_repair_value: Projected resale value after renovation.
        closing_costs: Optional; defaults to 6% of purchase price.
        carrying_costs: Optional; defaults to 2% of purchase price.
        defaults: Fallback rates (ROIDefaults() when omitted).

    Returns:
        ROIResult. Never raises for degenerate inputs.
    """
    inputs = build_roi_inputs(
        purchase_price, rehab_budget, after_repair_value, closing_costs, carrying_costs
    )
    result = evaluate_roi(inputs, defaults)

    logger.debug(
        "roi_calculated",
        total_investment=result.total_investment,
        estimated_profit=result.estimated_profit,
        roi_percentage=round(result.roi_percentage, 2),
        risk_tier=result.risk_tier.value
    )

    return result


def generate_what_if_scenarios(
    inputs: ROIInputs,
    defaults: Optional[ROIDefaults] = None,
    scenarios: Tuple[Tuple[str, str, str, float], ...] = WHAT_IF_SCENARIOS,
) -> List[WhatIfScenario]:
    """Re-evaluate the flip with one input perturbed per scenario.

    The inputs are never modified; each scenario evaluates a fresh copy.
    Defaulted closing and carrying costs are recomputed from the perturbed
    purchase price.
    """
    base = evaluate_roi(inputs, defaults)

    results = []
    for name, description, input_name, factor in scenarios:
        result = evaluate_roi(inputs.scaled(input_name, factor), defaults)
        results.append(
            WhatIfScenario(
                name=name,
                description=description,
                perturbed_input=input_name,
                factor=factor,
                result=result,
                profit_delta=result.estimated_profit - base.estimated_profit,
                roi_delta=result.roi_percentage - base.roi_percentage,
            )
        )

    logger.debug("what_if_scenarios_generated", count=len(results), base_roi=round(base.roi_percentage, 2))
    return results


# =============================================================================
# RENTAL ANALYSIS
# =============================================================================


def _rental_recommendations(
    cap_rate: float,
    cash_on_cash_return: float,
    one_percent_rule: bool,
    net_cash_flow: float,
) -> List[str]:
    recommendations = []
    if cap_rate < 8:
        recommendations.append("Cap rate is below market average - consider negotiating price")
    if cash_on_cash_return < 12:
        recommendations.append("Cash-on-cash return could be improved with better financing")
    if not one_percent_rule:
        recommendations.append("Property doesn't meet 1% rule - may indicate poor cash flow")
    if net_cash_flow < 0:
        recommendations.append("Negative cash flow - this property will require monthly contributions")
    if cap_rate >= 10 and cash_on_cash_return >= 15:
        recommendations.append("Excellent rental property with strong returns!")
    return recommendations


def analyze_rental(
    purchase_price: Any,
    rehab_budget: Any,
    monthly_rent: Any,
    monthly_expenses: Any = None,
    down_payment: Any = None,
    defaults: Optional[ROIDefaults] = None,
) -> RentalAnalysis:
    """Buy-and-hold rental metrics.

    Missing monthly expenses default to half the rent and a missing down
    payment to 25% of the purchase price. Ratios over a zero base are 0.
    """
    defaults = defaults or ROIDefaults()

    purchase = coerce_amount(purchase_price)
    rehab = coerce_amount(rehab_budget)
    rent = coerce_amount(monthly_rent)
    expenses = coerce_optional_amount(monthly_expenses) or rent * defaults.rental_expense_ratio
    down = coerce_optional_amount(down_payment) or purchase * defaults.down_payment_rate

    total_investment = down + rehab
    net_cash_flow = rent - expenses
    annual_net_income = net_cash_flow * 12
    property_value = purchase + rehab

    cap_rate = safe_percentage(annual_net_income, property_value)
    cash_on_cash_return = safe_percentage(annual_net_income, total_investment)
    one_percent_rule = property_value > 0 and rent >= property_value * 0.01
    break_even_ratio = expenses / rent if rent > 0 else 0.0

    logger.debug(
        "rental_analyzed",
        cap_rate=round(cap_rate, 2),
        cash_on_cash_return=round(cash_on_cash_return, 2),
        net_cash_flow=net_cash_flow
    )

    return RentalAnalysis(
        purchase_price=purchase,
        rehab_budget=rehab,
        down_payment=down,
        total_investment=total_investment,
        monthly_rent=rent,
        monthly_expenses=expenses,
        net_cash_flow=net_cash_flow,
        cap_rate=cap_rate,
        cash_on_cash_return=cash_on_cash_return,
        one_percent_rule=one_percent_rule,
        break_even_ratio=break_even_ratio,
        annual_return=annual_net_income,
        recommendations=_rental_recommendations(
            cap_rate, cash_on_cash_return, one_percent_rule, net_cash_flow
        ),
    )
