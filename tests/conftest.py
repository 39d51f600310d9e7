"""Pytest configuration and shared fixtures for RenoCost tests."""

import os
import sys
from datetime import date

import pytest


# ============================================================================
# Ensure local imports work (renocost/, tests/fixtures/)
# ============================================================================
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


from renocost.models.cost_breakdown import CostTotals
from renocost.models.roi import ROIDefaults, ROIInputs
from renocost.services.classifier import describe_project


# ============================================================================
# Project Fixtures
# ============================================================================

@pytest.fixture
def kitchen_descriptor():
    """Standard-tier kitchen with a known Montgomery County ZIP."""
    return describe_project(
        "Kitchen Remodel",
        area_sqft=200,
        quality_tier="standard",
        zip_code="20814",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 3, 1),
    )


@pytest.fixture
def kitchen_totals():
    """Consistent kitchen subtotals (overhead = 4000)."""
    return CostTotals(materials=10000, labor=8800, permits=1200, total=24000)


@pytest.fixture
def inconsistent_totals():
    """Subtotals exceeding the total (overhead = -2000)."""
    return CostTotals(materials=10000, labor=8000, permits=2000, total=18000)


# ============================================================================
# ROI Fixtures
# ============================================================================

@pytest.fixture
def flip_inputs():
    """The reference flip: 500k purchase, 75k rehab, 650k ARV."""
    return ROIInputs(purchase_price=500000, rehab_budget=75000, after_repair_value=650000)


@pytest.fixture
def roi_defaults():
    return ROIDefaults()
