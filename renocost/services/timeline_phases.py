"""Timeline Phase Generator for RenoCost.

Expands a project category into an ordered list of construction phases
from static templates, then applies the quality-tier adjustment. Premium
and luxury finishes take longer, so every number in their duration
strings is bumped by one ("2-3 days" -> "3-4 days").

The overall duration comes from a separate (category, tier) table. It is
maintained independently of the phase templates and is never derived by
summing phases, so the two can disagree.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Tuple

import structlog

from renocost.models.project import ProjectCategory, QualityTier
from renocost.models.timeline import ProjectTimeline, TimelinePhase

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PhaseTemplate:
    id: str
    name: str
    duration: str
    critical: bool
    tasks: Tuple[str, ...]


# =============================================================================
# PHASE TEMPLATES
# =============================================================================


KITCHEN_PHASES: Tuple[PhaseTemplate, ...] = (
    PhaseTemplate("planning", "Planning & Permits", "1-2 weeks", True, (
        "Finalize layout and design", "Order cabinets and appliances", "Submit permit applications",
    )),
    PhaseTemplate("demolition", "Demolition", "2-3 days", False, (
        "Remove cabinets and countertops", "Remove flooring", "Haul away debris",
    )),
    PhaseTemplate("rough_in", "Plumbing & Electrical Rough-In", "3-5 days", True, (
        "Relocate supply and drain lines", "Run appliance circuits", "Rough-in inspection",
    )),
    PhaseTemplate("drywall", "Drywall & Paint", "3-4 days", False, (
        "Patch and hang drywall", "Prime and paint walls and ceiling",
    )),
    PhaseTemplate("cabinets", "Cabinet Installation", "2-3 days", True, (
        "Set base cabinets", "Hang wall cabinets", "Level and secure",
    )),
    PhaseTemplate("countertops", "Countertop Installation", "1-2 weeks", False, (
        "Template countertops", "Fabricate and install", "Cut sink and cooktop openings",
    )),
    PhaseTemplate("flooring", "Flooring & Backsplash", "3-4 days", False, (
        "Install flooring", "Tile backsplash", "Grout and seal",
    )),
    PhaseTemplate("fixtures", "Fixtures & Appliances", "1-2 days", False, (
        "Install sink and faucet", "Connect appliances", "Install lighting",
    )),
    PhaseTemplate("final_inspection", "Final Inspection & Walkthrough", "1-2 days", True, (
        "Final inspection", "Punch list", "Client walkthrough",
    )),
)

BATHROOM_PHASES: Tuple[PhaseTemplate, ...] = (
    PhaseTemplate("planning", "Planning & Permits", "1-2 weeks", True, (
        "Finalize layout and fixtures", "Order tile and vanity", "Submit permit applications",
    )),
    PhaseTemplate("demolition", "Demolition", "1-2 days", False, (
        "Remove fixtures and vanity", "Remove tile and subfloor as needed", "Haul away debris",
    )),
    PhaseTemplate("rough_in", "Plumbing & Electrical Rough-In", "2-3 days", True, (
        "Set drain and supply lines", "Install exhaust fan circuit", "Rough-in inspection",
    )),
    PhaseTemplate("waterproofing", "Waterproofing", "1-2 days", True, (
        "Install cement board", "Apply waterproof membrane", "Flood test shower pan",
    )),
    PhaseTemplate("tile", "Tile Installation", "3-5 days", False, (
        "Set floor tile", "Set wall and shower tile", "Grout and seal",
    )),
    PhaseTemplate("fixtures", "Vanity & Fixture Installation", "1-2 days", False, (
        "Install vanity and top", "Set toilet", "Install faucets, shower trim and accessories",
    )),
    PhaseTemplate("final_inspection", "Final Inspection & Punch List", "1-2 days", True, (
        "Final inspection", "Caulk and touch-up", "Client walkthrough",
    )),
)

BASEMENT_PHASES: Tuple[PhaseTemplate, ...] = (
    PhaseTemplate("planning", "Planning & Permits", "1-2 weeks", True, (
        "Assess moisture and egress", "Finalize layout", "Submit permit applications",
    )),
    PhaseTemplate("waterproofing", "Waterproofing & Moisture Control", "2-4 days", True, (
        "Seal foundation walls", "Install vapor barrier", "Address drainage or sump",
    )),
    PhaseTemplate("framing", "Framing", "3-5 days", True, (
        "Frame exterior walls", "Frame partitions and soffits", "Framing inspection",
    )),
    PhaseTemplate("rough_in", "Plumbing & Electrical Rough-In", "3-5 days", True, (
        "Run circuits and boxes", "Rough-in plumbing for wet areas", "Rough-in inspection",
    )),
    PhaseTemplate("drywall", "Insulation & Drywall", "1-2 weeks", False, (
        "Insulate walls", "Hang and finish drywall", "Prime",
    )),
    PhaseTemplate("flooring", "Flooring", "3-4 days", False, (
        "Install subfloor system", "Install finish flooring",
    )),
    PhaseTemplate("finishes", "Trim, Paint & Fixtures", "3-5 days", False, (
        "Install doors and trim", "Paint", "Install lights and devices",
    )),
    PhaseTemplate("final_inspection", "Final Inspection", "1-2 days", True, (
        "Final inspection", "Punch list", "Client walkthrough",
    )),
)

ADDITION_PHASES: Tuple[PhaseTemplate, ...] = (
    PhaseTemplate("planning", "Design & Permits", "3-6 weeks", True, (
        "Architectural and structural drawings", "Zoning review", "Submit permit applications",
    )),
    PhaseTemplate("site_prep", "Site Prep & Excavation", "3-5 days", False, (
        "Layout and staking", "Excavate footings", "Protect existing structure",
    )),
    PhaseTemplate("foundation", "Foundation", "1-2 weeks", True, (
        "Pour footings", "Build foundation walls", "Foundation inspection",
    )),
    PhaseTemplate("framing", "Framing & Roofing", "2-3 weeks", True, (
        "Frame floor, walls and roof", "Tie into existing structure", "Dry-in and roofing",
    )),
    PhaseTemplate("rough_in", "Rough-In (Plumbing, Electrical, HVAC)", "1-2 weeks", True, (
        "Run plumbing and electrical", "Extend HVAC", "Rough-in inspection",
    )),
    PhaseTemplate("drywall", "Insulation & Drywall", "1-2 weeks", False, (
        "Insulation and inspection", "Hang and finish drywall",
    )),
    PhaseTemplate("finishes", "Interior Finishes", "2-3 weeks", False, (
        "Flooring", "Trim and doors", "Paint and fixtures",
    )),
    PhaseTemplate("final_inspection", "Final Inspection", "1-2 days", True, (
        "Final inspection", "Certificate of occupancy", "Client walkthrough",
    )),
)

# Generic projects use the kitchen sequence.
PHASE_TEMPLATES: Mapping[ProjectCategory, Tuple[PhaseTemplate, ...]] = MappingProxyType({
    ProjectCategory.KITCHEN: KITCHEN_PHASES,
    ProjectCategory.BATHROOM: BATHROOM_PHASES,
    ProjectCategory.BASEMENT: BASEMENT_PHASES,
    ProjectCategory.ADDITION: ADDITION_PHASES,
    ProjectCategory.GENERIC: KITCHEN_PHASES,
})


# =============================================================================
# TOTAL DURATION TABLE
# =============================================================================

_TIERS = (
    QualityTier.BUDGET,
    QualityTier.STANDARD,
    QualityTier.MID_RANGE,
    QualityTier.PREMIUM,
    QualityTier.LUXURY,
)


def _by_tier(*durations: str) -> Mapping[QualityTier, str]:
    return MappingProxyType(dict(zip(_TIERS, durations)))


TOTAL_DURATIONS: Mapping[ProjectCategory, Mapping[QualityTier, str]] = MappingProxyType({
    ProjectCategory.KITCHEN: _by_tier("4-6 weeks", "4-8 weeks", "6-8 weeks", "8-10 weeks", "10-14 weeks"),
    ProjectCategory.BATHROOM: _by_tier("2-3 weeks", "2-4 weeks", "3-5 weeks", "4-6 weeks", "6-8 weeks"),
    ProjectCategory.BASEMENT: _by_tier("5-8 weeks", "6-12 weeks", "8-12 weeks", "10-14 weeks", "12-16 weeks"),
    ProjectCategory.ADDITION: _by_tier("10-16 weeks", "12-20 weeks", "14-20 weeks", "16-24 weeks", "20-28 weeks"),
    ProjectCategory.GENERIC: _by_tier("1-3 weeks", "2-6 weeks", "3-6 weeks", "4-8 weeks", "6-10 weeks"),
})

_NUMBER = re.compile(r"\d+")
_DURATION = re.compile(r"(\d+)(?:\s*-\s*(\d+))?\s*(day|week|month)", re.IGNORECASE)
_UNIT_DAYS = {"day": 1, "week": 7, "month": 30}


def increment_duration(duration: str) -> str:
    """Add one to every number in a duration string."""
    return _NUMBER.sub(lambda match: str(int(match.group()) + 1), duration)


def parse_duration_days(duration: str) -> Tuple[int, int]:
    """Calendar-day range for a duration such as '1-2 weeks'.

    Returns (0, 0) when the string cannot be read.
    """
    match = _DURATION.search(duration or "")
    if not match:
        return (0, 0)
    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) else low
    days = _UNIT_DAYS[match.group(3).lower()]
    return (low * days, high * days)


def get_total_duration(category: Any, quality_tier: Any) -> str:
    """Overall duration estimate from the (category, tier) table."""
    tier = QualityTier.from_label(quality_tier)
    return TOTAL_DURATIONS[ProjectCategory.from_label(category)][tier]


def generate_timeline(category: Any, quality_tier: Any = None) -> ProjectTimeline:
    """Generate the phase-based timeline for a project.

    Args:
        category: ProjectCategory; unknown values use the generic (kitchen)
            sequence.
        quality_tier: QualityTier or label; Premium and Luxury lengthen
            every phase.

    Returns:
        ProjectTimeline with phases ordered from 1.
    """
    category = ProjectCategory.from_label(category)
    tier = QualityTier.from_label(quality_tier)
    templates = PHASE_TEMPLATES[category]

    phases = []
    for order, template in enumerate(templates, start=1):
        duration = template.duration
        if tier.is_premium_or_higher:
            duration = increment_duration(duration)
        phases.append(
            TimelinePhase(
                id=template.id,
                name=template.name,
                duration=duration,
                order=order,
                critical=template.critical,
                tasks=list(template.tasks),
            )
        )

    timeline = ProjectTimeline(
        category=category,
        quality_tier=tier,
        phases=phases,
        total_duration=get_total_duration(category, tier),
    )

    logger.debug(
        "timeline_generated",
        category=category.value,
        quality_tier=tier.value,
        phase_count=len(phases),
        critical_phases=timeline.critical_phase_ids,
        total_duration=timeline.total_duration
    )

    return timeline


def summarize_phase_days(timeline: ProjectTimeline) -> Tuple[int, int]:
    """Sum of phase durations in calendar days, as a (low, high) range.

    Purely informational; the timeline's total_duration is not derived
    from it.
    """
    low = high = 0
    for phase in timeline.phases:
        phase_low, phase_high = parse_duration_days(phase.duration)
        low += phase_low
        high += phase_high
    return (low, high)
