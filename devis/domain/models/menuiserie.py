"""Opening (menuiserie) data model.

Doors, windows and other openings are authored in centimeters; their
surface is exposed in m².
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field, field_validator

from devis.core.constants import DOOR_KEYWORD, SurfaceImpactee
from devis.domain.calculator.geometry import calculate_opening_area
from devis.domain.models.base import DevisModel, new_id, normalize_surface


class Menuiserie(DevisModel):
    """Opening placed in a room."""

    id: str = Field(default_factory=new_id, description="Opening identifier")
    type: str = Field(default="", description="Type name, e.g. 'Porte', 'Fenêtre'")
    type_id: str | None = Field(None, description="Catalog type identifier")
    name: str = Field(default="", description="Display name")
    largeur: float = Field(default=0.0, description="Width in cm")
    hauteur: float = Field(default=0.0, description="Height in cm")
    quantity: int = Field(default=1, description="Number of identical openings")
    surface_impactee: SurfaceImpactee = Field(default=SurfaceImpactee.MUR, description="Target surface")
    impacte_plinthe: bool = Field(default=False, description="Width is cut from the baseboard")

    @field_validator("surface_impactee", mode="before")
    @classmethod
    def validate_surface(cls, v: Any) -> SurfaceImpactee:
        """Accept any known spelling of the target surface."""
        return normalize_surface(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def default_quantity(cls, v: Any) -> Any:
        return 1 if v is None else v

    @field_validator("impacte_plinthe", mode="before")
    @classmethod
    def default_flag(cls, v: Any) -> Any:
        return False if v is None else v

    @computed_field
    @property
    def surface(self) -> float:
        """Surface of one opening in m²."""
        return calculate_opening_area(self.largeur, self.hauteur)

    @property
    def is_door(self) -> bool:
        """Door types always cut the baseboard."""
        return DOOR_KEYWORD in self.type.lower()
