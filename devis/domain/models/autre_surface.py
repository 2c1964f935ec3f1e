"""Custom surface (autre surface) data model.

A custom surface adds to or deducts from a room surface: a chimney breast,
a shower tray, a cupboard... Dimensions are authored in meters.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field, field_validator

from devis.core.constants import SurfaceImpactee
from devis.domain.calculator.geometry import calculate_custom_area
from devis.domain.models.base import DevisModel, new_id, normalize_surface


class AutreSurface(DevisModel):
    """Custom surface adjustment attached to a room."""

    id: str = Field(default_factory=new_id, description="Custom surface identifier")
    type: str = Field(default="", description="Catalog type name")
    name: str = Field(default="", description="Display name")
    designation: str = Field(default="", description="Designation printed on the quote")
    description: str = Field(default="", description="Free description")
    largeur: float = Field(default=0.0, description="Width in m")
    hauteur: float = Field(default=0.0, description="Height in m")
    quantity: int = Field(default=1, description="Number of identical items")
    surface_impactee: SurfaceImpactee = Field(default=SurfaceImpactee.MUR, description="Target surface")
    est_deduction: bool = Field(default=False, description="Subtracted from (True) or added to the target")
    impacte_plinthe: bool = Field(default=False, description="Impacts the baseboard")

    @field_validator("surface_impactee", mode="before")
    @classmethod
    def validate_surface(cls, v: Any) -> SurfaceImpactee:
        """Accept any known spelling of the target surface."""
        return normalize_surface(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def default_quantity(cls, v: Any) -> Any:
        return 1 if v is None else v

    @field_validator("est_deduction", "impacte_plinthe", mode="before")
    @classmethod
    def default_flags(cls, v: Any) -> Any:
        return False if v is None else v

    @computed_field
    @property
    def surface(self) -> float:
        """Surface of one item in m²."""
        return calculate_custom_area(self.largeur, self.hauteur)
