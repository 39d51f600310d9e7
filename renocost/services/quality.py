"""Quality multiplier table.

Maps a material quality tier to the multiplier applied to material
line items. Labor, permits and overhead are never quality-scaled.
"""

from types import MappingProxyType
from typing import Any, Mapping

from renocost.models.project import QualityTier


QUALITY_MULTIPLIERS: Mapping[QualityTier, float] = MappingProxyType({
    QualityTier.BUDGET: 0.8,
    QualityTier.STANDARD: 1.0,
    QualityTier.MID_RANGE: 1.2,
    QualityTier.PREMIUM: 1.5,
    QualityTier.LUXURY: 2.0,
})

DEFAULT_QUALITY_MULTIPLIER = 1.0


def get_quality_multiplier(quality_tier: Any) -> float:
    """Return the material multiplier for a tier.

    Accepts a QualityTier or a free-form label; anything unrecognized,
    including None, gets the Standard multiplier.
    """
    tier = QualityTier.from_label(quality_tier)
    return QUALITY_MULTIPLIERS.get(tier, DEFAULT_QUALITY_MULTIPLIER)
