"""Estimate confidence scoring.

Confidence depends only on input completeness: whether a 5-character
postal code was supplied and whether the project is a common type.
Precedence: Low (missing postal code or an addition) overrides High
(postal code and common project), which overrides the Medium default.
"""

from typing import Any, Optional

import structlog

from renocost.models.estimate import ConfidenceAssessment
from renocost.models.project import ConfidenceLevel, ProjectCategory
from renocost.services.classifier import is_common_project

logger = structlog.get_logger(__name__)

ZIP_CODE_LENGTH = 5
CONTINGENCY_NOTE = "Add 15-20% buffer for unexpected costs"


def has_valid_zip(zip_code: Optional[str]) -> bool:
    """True when a postal code of exactly five characters was supplied."""
    return isinstance(zip_code, str) and len(zip_code.strip()) == ZIP_CODE_LENGTH


def score_confidence_level(has_zip: bool, is_common: bool, is_addition: bool = False) -> ConfidenceLevel:
    """Lookup over the completeness flags."""
    level = ConfidenceLevel.MEDIUM
    if has_zip and is_common:
        level = ConfidenceLevel.HIGH
    if not has_zip or is_addition:
        level = ConfidenceLevel.LOW
    return level


def score_confidence(
    zip_code: Optional[str],
    category: Any,
    raw_type_text: str = "",
) -> ConfidenceAssessment:
    """Rate confidence in an estimate.

    Args:
        zip_code: Postal code as entered, or None.
        category: ProjectCategory of the project.
        raw_type_text: Original project type text, used to recognize
            flooring installs among generic projects.

    Returns:
        ConfidenceAssessment with the level and the factors behind it.
    """
    category = ProjectCategory.from_label(category)

    has_zip = has_valid_zip(zip_code)
    is_common = is_common_project(raw_type_text, category)
    level = score_confidence_level(has_zip, is_common, category == ProjectCategory.ADDITION)

    key_factors = [
        "Prices adjusted for your area" if has_zip else "National average pricing used",
        "Common project type with reliable pricing data" if is_common else "Less common project type; pricing varies more",
        CONTINGENCY_NOTE,
    ]

    logger.debug(
        "confidence_scored",
        category=category.value,
        has_zip=has_zip,
        is_common=is_common,
        level=level.value
    )

    return ConfidenceAssessment(
        level=level,
        has_zip=has_zip,
        is_common_project=is_common,
        key_factors=key_factors,
    )
