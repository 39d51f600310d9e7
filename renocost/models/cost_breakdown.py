"""Cost breakdown Pydantic models for RenoCost.

This module defines the category totals a caller supplies and the
itemized breakdown the allocation engine produces from them.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field

from renocost.models.project import ProjectCategory, QualityTier


# =============================================================================
# COST TOTALS
# =============================================================================


class CostTotals(BaseModel):
    """Category subtotals for a project.

    ``overhead`` is whatever remains of ``total`` after materials, labor and
    permits. It is negative when the caller's subtotals exceed the total;
    that is reported as-is, never clamped.
    """

    model_config = ConfigDict(frozen=True)

    materials: float = Field(default=0.0, ge=0, description="Materials subtotal")
    labor: float = Field(default=0.0, ge=0, description="Labor subtotal")
    permits: float = Field(default=0.0, ge=0, description="Permits & fees subtotal")
    total: float = Field(default=0.0, description="Project total")

    @computed_field
    @property
    def overhead(self) -> float:
        """Equipment & overhead remainder."""
        return self.total - self.materials - self.labor - self.permits

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {
            "materials": self.materials,
            "labor": self.labor,
            "permits": self.permits,
            "overhead": self.overhead,
            "total": self.total,
        }


# =============================================================================
# LINE ITEM
# =============================================================================


class LineItem(BaseModel):
    """Display-only decomposition of a category subtotal."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Item name")
    cost: float = Field(..., ge=0, description="Item cost, rounded to whole currency units")
    unit: str = Field(..., description="Unit of measurement")
    quantity: float = Field(..., ge=0, description="Quantity in units")
    description: str = Field(default="", description="Item description")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cost": self.cost,
            "unit": self.unit,
            "quantity": self.quantity,
            "description": self.description,
        }


# =============================================================================
# SECTIONS AND BREAKDOWN
# =============================================================================


class CostSection(BaseModel):
    """One category of the breakdown with its itemized entries.

    ``total`` is the caller's subtotal; the item costs may drift from it by
    a few units because every item is rounded independently.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Section id: materials, labor, permits or other")
    title: str = Field(..., description="Display title")
    total: float = Field(..., description="Category subtotal")
    items: List[LineItem] = Field(default_factory=list, description="Itemized entries")

    @computed_field
    @property
    def items_total(self) -> float:
        """Sum of item costs (may differ from ``total``)."""
        return sum(item.cost for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "total": self.total,
            "items": [item.to_dict() for item in self.items],
        }


class CostBreakdown(BaseModel):
    """Complete itemized breakdown output from the allocation engine."""

    model_config = ConfigDict(frozen=True)

    category: ProjectCategory = Field(..., description="Project category")
    quality_tier: QualityTier = Field(..., description="Quality tier applied")
    quality_multiplier: float = Field(..., gt=0, description="Multiplier applied to materials")
    labor_hours: int = Field(default=0, ge=0, description="Total labor hours used for quantities")
    sections: List[CostSection] = Field(..., description="Sections in display order")
    total: float = Field(..., description="Project total")

    def section(self, section_id: str) -> CostSection:
        """Return a section by id."""
        for section in self.sections:
            if section.id == section_id:
                return section
        raise KeyError(section_id)

    @property
    def materials(self) -> CostSection:
        return self.section("materials")

    @property
    def labor(self) -> CostSection:
        return self.section("labor")

    @property
    def permits(self) -> CostSection:
        return self.section("permits")

    @property
    def overhead(self) -> CostSection:
        return self.section("other")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict format for prompt payloads and export tooling."""
        return {
            "category": self.category.value,
            "qualityTier": self.quality_tier.value,
            "qualityMultiplier": self.quality_multiplier,
            "laborHours": self.labor_hours,
            "sections": [section.to_dict() for section in self.sections],
            "total": self.total,
        }
