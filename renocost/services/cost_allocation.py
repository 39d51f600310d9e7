"""Cost Allocation Engine for RenoCost.

Decomposes category subtotals (materials, labor, permits, equipment &
overhead) into itemized line entries using fixed per-category weight
tables.

Rules:
- Material items: round(materials x weight x quality multiplier)
- Labor items: round(labor x weight); labor is not quality-scaled
- Permit and overhead items: fixed weights, no quality scaling
- Every item is rounded on its own, so item sums may drift from the
  subtotal by a few units. The drift is kept, not renormalized.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

import structlog

from renocost.config.settings import settings
from renocost.models.cost_breakdown import CostBreakdown, CostSection, CostTotals, LineItem
from renocost.models.project import ProjectCategory, QualityTier
from renocost.services.quality import get_quality_multiplier
from renocost.utils.numbers import coerce_amount, coerce_signed, round_half_up

logger = structlog.get_logger(__name__)


# =============================================================================
# TABLE STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class QuantityRule:
    """How an item's quantity is derived.

    quantity = constant + area_sqft x area_factor + labor_hours x hours_factor
    """

    constant: float = 0.0
    area_factor: float = 0.0
    hours_factor: float = 0.0
    rounded: bool = True

    def resolve(self, area_sqft: float, labor_hours: float) -> float:
        quantity = self.constant + area_sqft * self.area_factor + labor_hours * self.hours_factor
        return float(round_half_up(quantity)) if self.rounded else quantity


def constant(value: float) -> QuantityRule:
    return QuantityRule(constant=value)


def per_area(factor: float = 1.0, rounded: bool = True) -> QuantityRule:
    return QuantityRule(area_factor=factor, rounded=rounded)


def per_hours(factor: float) -> QuantityRule:
    return QuantityRule(hours_factor=factor)


@dataclass(frozen=True)
class ItemTemplate:
    """One row of an allocation table."""

    name: str
    weight: float
    unit: str
    quantity: QuantityRule
    description: str
    tier_descriptions: Mapping[QualityTier, str] = field(default_factory=dict)

    def describe(self, quality_tier: QualityTier) -> str:
        return self.tier_descriptions.get(quality_tier, self.description)


@dataclass(frozen=True)
class AllocationTable:
    """Material and labor templates for one family of projects."""

    name: str
    materials: Tuple[ItemTemplate, ...]
    labor: Tuple[ItemTemplate, ...]


def _labor(name: str, weight: float, description: str) -> ItemTemplate:
    return ItemTemplate(name, weight, "hours", per_hours(weight), description)


# =============================================================================
# ALLOCATION TABLES
# =============================================================================


KITCHEN_TABLE = AllocationTable(
    name="kitchen",
    materials=(
        ItemTemplate("Cabinets", 0.35, "linear feet", constant(20), "Base and wall cabinets"),
        ItemTemplate(
            "Countertops", 0.25, "sq ft", per_area(0.1), "Laminate/Quartz",
            {QualityTier.PREMIUM: "Granite", QualityTier.LUXURY: "Marble/Quartz"},
        ),
        ItemTemplate("Appliances", 0.20, "package", constant(1), "Range, refrigerator, dishwasher"),
        ItemTemplate(
            "Sink & Faucet", 0.08, "set", constant(1), "Standard undermount",
            {QualityTier.LUXURY: "Farmhouse sink with premium faucet"},
        ),
        ItemTemplate(
            "Flooring", 0.12, "sq ft", per_area(), "Tile/Vinyl",
            {QualityTier.LUXURY: "Hardwood/Stone"},
        ),
    ),
    labor=(
        _labor("Cabinet Installation", 0.30, "Professional cabinet mounting"),
        _labor("Countertop Installation", 0.20, "Template, cut, install"),
        _labor("Plumbing Work", 0.25, "Sink, dishwasher, disposal connections"),
        _labor("Electrical Work", 0.15, "Appliance circuits, under-cabinet lighting"),
        _labor("Flooring Installation", 0.10, "Prep and install flooring"),
    ),
)

BATHROOM_TABLE = AllocationTable(
    name="bathroom",
    materials=(
        ItemTemplate("Vanity & Cabinet", 0.25, "piece", constant(1), "Bathroom vanity with storage"),
        ItemTemplate("Tile & Stone", 0.30, "sq ft", per_area(1.5), "Floor and wall tile"),
        ItemTemplate(
            "Toilet", 0.10, "piece", constant(1), "Standard toilet",
            {QualityTier.LUXURY: "Smart toilet"},
        ),
        ItemTemplate(
            "Shower/Tub", 0.20, "piece", constant(1), "Standard tub/shower",
            {QualityTier.LUXURY: "Walk-in shower with glass"},
        ),
        ItemTemplate("Faucets & Fixtures", 0.15, "set", constant(1), "Sink faucet, shower fixtures, accessories"),
    ),
    labor=(
        _labor("Plumbing Installation", 0.40, "Rough-in and fixture installation"),
        _labor("Tile Installation", 0.30, "Floor and wall tile work"),
        _labor("Electrical Work", 0.15, "Lighting, ventilation, GFCI outlets"),
        _labor("Vanity Installation", 0.15, "Mount vanity, connect plumbing"),
    ),
)

GENERAL_CONSTRUCTION_TABLE = AllocationTable(
    name="general_construction",
    materials=(
        ItemTemplate("Lumber & Framing", 0.25, "board feet", constant(500), "Structural lumber and framing materials"),
        ItemTemplate("Drywall & Insulation", 0.20, "sq ft", per_area(2, rounded=False), "Drywall sheets, mud, tape, insulation"),
        ItemTemplate("Flooring Materials", 0.20, "sq ft", per_area(rounded=False), "Flooring and underlayment"),
        ItemTemplate("Paint & Finishes", 0.15, "gallons", constant(10), "Primer, paint, trim materials"),
        ItemTemplate("Hardware & Fasteners", 0.10, "misc", constant(1), "Nails, screws, brackets"),
        ItemTemplate("Electrical Materials", 0.10, "misc", constant(1), "Wire, outlets, switches, fixtures"),
    ),
    labor=(
        _labor("Framing & Structural", 0.30, "Rough framing and structural work"),
        _labor("Drywall Installation", 0.25, "Hang, mud, sand, prime"),
        _labor("Finish Carpentry", 0.20, "Trim, doors, baseboards"),
        _labor("Painting", 0.15, "Prime and paint all surfaces"),
        _labor("Final Installation", 0.10, "Hardware, fixtures, cleanup"),
    ),
)

# Every category maps to a table explicitly.
ALLOCATION_TABLES: Mapping[ProjectCategory, AllocationTable] = MappingProxyType({
    ProjectCategory.KITCHEN: KITCHEN_TABLE,
    ProjectCategory.BATHROOM: BATHROOM_TABLE,
    ProjectCategory.BASEMENT: GENERAL_CONSTRUCTION_TABLE,
    ProjectCategory.ADDITION: GENERAL_CONSTRUCTION_TABLE,
    ProjectCategory.GENERIC: GENERAL_CONSTRUCTION_TABLE,
})

PERMIT_ITEMS: Tuple[ItemTemplate, ...] = (
    ItemTemplate("Building Permit", 0.60, "permit", constant(1), "Main construction permit"),
    ItemTemplate("Electrical Permit", 0.25, "permit", constant(1), "Electrical work permit"),
    ItemTemplate("Plumbing Permit", 0.15, "permit", constant(1), "Plumbing work permit"),
)

OVERHEAD_ITEMS: Tuple[ItemTemplate, ...] = (
    ItemTemplate("Tool Rental", 0.30, "days", constant(10), "Equipment and tool rental"),
    ItemTemplate("Waste Disposal", 0.20, "loads", constant(3), "Dumpster and disposal fees"),
    ItemTemplate("Project Management", 0.25, "hours", constant(20), "Supervision and coordination"),
    ItemTemplate("Insurance & Overhead", 0.25, "project", constant(1), "Insurance, overhead, profit margin"),
)

SECTION_TITLES: Tuple[Tuple[str, str], ...] = (
    ("materials", "Materials"),
    ("labor", "Labor"),
    ("permits", "Permits & Fees"),
    ("other", "Equipment & Overhead"),
)

_HOURS_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")


# =============================================================================
# HELPERS
# =============================================================================


def get_allocation_table(category: Any) -> AllocationTable:
    """Return the allocation table for a category; unknown values get the general table."""
    return ALLOCATION_TABLES[ProjectCategory.from_label(category)]


def make_cost_totals(materials: Any, labor: Any, permits: Any, total: Any) -> CostTotals:
    """Build CostTotals from raw inputs.

    NaN, None and negative subtotals become 0. The total keeps its sign and
    is not checked against the subtotals.
    """
    return CostTotals(
        materials=coerce_amount(materials),
        labor=coerce_amount(labor),
        permits=coerce_amount(permits),
        total=coerce_signed(total),
    )


def parse_timeline_hours(timeline: Optional[str]) -> Optional[float]:
    """Extract an hours figure from a timeline such as '40 hours'.

    Returns None unless the text names hours explicitly.
    """
    if not timeline or not isinstance(timeline, str):
        return None
    lowered = timeline.lower()
    match = _HOURS_PATTERN.search(lowered)
    if match and "hour" in lowered:
        hours = float(match.group(1))
        return hours if hours > 0 else None
    return None


def estimate_labor_hours(
    labor_cost: float,
    timeline: Optional[str] = None,
    labor_rate: Optional[float] = None,
    labor_workers: Optional[int] = None,
) -> int:
    """Total crew hours behind a labor subtotal.

    An explicit hours timeline wins; otherwise hours are the labor cost
    spread over the crew at the hourly rate.
    """
    timeline_hours = parse_timeline_hours(timeline)
    if timeline_hours is not None:
        return round_half_up(timeline_hours)

    rate = coerce_amount(labor_rate, settings.labor_rate)
    workers = labor_workers if labor_workers is not None else settings.labor_workers
    crew_rate = rate * workers
    if crew_rate <= 0:
        return 0
    return round_half_up(coerce_amount(labor_cost) / crew_rate)


def _build_items(
    templates: Tuple[ItemTemplate, ...],
    subtotal: float,
    multiplier: float,
    quality_tier: QualityTier,
    area_sqft: float,
    labor_hours: float,
) -> list:
    return [
        LineItem(
            name=template.name,
            cost=float(round_half_up(subtotal * template.weight * multiplier)),
            unit=template.unit,
            quantity=template.quantity.resolve(area_sqft, labor_hours),
            description=template.describe(quality_tier),
        )
        for template in templates
    ]


# =============================================================================
# ENGINE
# =============================================================================


def allocate_costs(
    totals: CostTotals,
    category: Any,
    quality_tier: Any = None,
    area_sqft: Any = 0,
    timeline: Optional[str] = None,
    labor_rate: Optional[float] = None,
    labor_workers: Optional[int] = None,
) -> CostBreakdown:
    """Decompose category totals into itemized sections.

    Args:
        totals: Category subtotals.
        category: ProjectCategory (unknown values use the general table).
        quality_tier: QualityTier or label; unknown means Standard.
        area_sqft: Project area, drives area-based quantities.
        timeline: Optional timeline text; "N hours" fixes the labor hours.
        labor_rate: Hourly rate per worker (defaults from settings).
        labor_workers: Crew size (defaults from settings).

    Returns:
        CostBreakdown with materials, labor, permits and equipment &
        overhead sections, in that order.
    """
    category = ProjectCategory.from_label(category)
    tier = QualityTier.from_label(quality_tier)
    multiplier = get_quality_multiplier(tier)
    area = coerce_amount(area_sqft)
    table = get_allocation_table(category)
    labor_hours = estimate_labor_hours(totals.labor, timeline, labor_rate, labor_workers)

    overhead_total = totals.overhead
    if overhead_total < 0:
        logger.warning(
            "negative_overhead",
            total=totals.total,
            materials=totals.materials,
            labor=totals.labor,
            permits=totals.permits,
            overhead=overhead_total
        )
    # Items stay non-negative; the section total keeps the raw remainder.
    overhead_base = max(0.0, overhead_total)

    section_items = {
        "materials": _build_items(table.materials, totals.materials, multiplier, tier, area, labor_hours),
        "labor": _build_items(table.labor, totals.labor, 1.0, tier, area, labor_hours),
        "permits": _build_items(PERMIT_ITEMS, totals.permits, 1.0, tier, area, labor_hours),
        "other": _build_items(OVERHEAD_ITEMS, overhead_base, 1.0, tier, area, labor_hours),
    }
    section_totals = {
        "materials": totals.materials,
        "labor": totals.labor,
        "permits": totals.permits,
        "other": overhead_total,
    }

    sections = [
        CostSection(
            id=section_id,
            title=title,
            total=section_totals[section_id],
            items=section_items[section_id],
        )
        for section_id, title in SECTION_TITLES
    ]

    logger.debug(
        "cost_breakdown_allocated",
        category=category.value,
        table=table.name,
        quality_tier=tier.value,
        quality_multiplier=multiplier,
        labor_hours=labor_hours,
        total=totals.total
    )

    return CostBreakdown(
        category=category,
        quality_tier=tier,
        quality_multiplier=multiplier,
        labor_hours=labor_hours,
        sections=sections,
        total=totals.total,
    )
