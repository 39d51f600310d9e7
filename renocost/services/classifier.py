"""Project category classification.

Free-form project type text ("Kitchen Remodel", "basement-finish", ...) is
mapped onto the closed ProjectCategory set by case-insensitive keyword
search. Keywords are tested in a fixed priority order, so text naming
several areas resolves deterministically.
"""

from datetime import date
from typing import Any, Optional, Tuple

import structlog

from renocost.models.project import ProjectCategory, ProjectDescriptor, QualityTier
from renocost.utils.numbers import coerce_amount

logger = structlog.get_logger(__name__)


# Priority order: kitchen > bathroom > basement > addition
CATEGORY_KEYWORDS: Tuple[Tuple[str, ProjectCategory], ...] = (
    ("kitchen", ProjectCategory.KITCHEN),
    ("bathroom", ProjectCategory.BATHROOM),
    ("basement", ProjectCategory.BASEMENT),
    ("addition", ProjectCategory.ADDITION),
)

COMMON_CATEGORIES = frozenset({ProjectCategory.KITCHEN, ProjectCategory.BATHROOM})
COMMON_GENERIC_KEYWORD = "flooring"


def classify_project_type(text: Optional[str]) -> ProjectCategory:
    """Classify free-form project type text. Never fails."""
    if not text or not isinstance(text, str):
        return ProjectCategory.GENERIC

    lowered = text.lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in lowered:
            return category
    return ProjectCategory.GENERIC


def is_common_project(text: Optional[str], category: ProjectCategory) -> bool:
    """Whether the project is one of the common, well-priced types.

    Kitchens and bathrooms are common; among generic projects only
    flooring installs are.
    """
    if category in COMMON_CATEGORIES:
        return True
    if category == ProjectCategory.GENERIC and isinstance(text, str):
        return COMMON_GENERIC_KEYWORD in text.lower()
    return False


def describe_project(
    raw_type_text: Optional[str],
    area_sqft: Any = 0,
    quality_tier: Any = None,
    zip_code: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> ProjectDescriptor:
    """Build a ProjectDescriptor from raw form inputs.

    The category is classified from the type text, the tier label is
    parsed leniently and invalid areas become 0.
    """
    category = classify_project_type(raw_type_text)
    tier = QualityTier.from_label(quality_tier)
    zip_code = zip_code.strip() if isinstance(zip_code, str) and zip_code.strip() else None

    logger.debug(
        "project_classified",
        raw_type_text=raw_type_text,
        category=category.value,
        quality_tier=tier.value
    )

    return ProjectDescriptor(
        category=category,
        raw_type_text=raw_type_text or "",
        area_sqft=coerce_amount(area_sqft),
        quality_tier=tier,
        zip_code=zip_code,
        start_date=start_date,
        end_date=end_date,
    )
