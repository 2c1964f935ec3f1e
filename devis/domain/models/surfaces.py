"""Room surface record.

Output of the room surface assembler, consumed by the recap and quote
layout collaborators. All values are m² except `perimetre` and
`longueur_plinthes` (m).
"""

from __future__ import annotations

from pydantic import Field, computed_field

from devis.core.numbers import round2
from devis.domain.models.base import DevisModel


class RoomSurfaces(DevisModel):
    """Raw and net surfaces of one room."""

    # Raw
    surface_brute_sol: float = Field(..., description="Raw floor area")
    surface_brute_plafond: float = Field(..., description="Raw ceiling area")
    surface_brute_murs: float = Field(..., description="Raw wall area")

    # Linear (m)
    perimetre: float = Field(..., description="Room perimeter")
    longueur_plinthes: float = Field(..., description="Net baseboard length")
    surface_plinthes: float = Field(..., description="Baseboard surface")

    # Openings
    menuiseries_murs: float = Field(default=0.0, description="Openings on walls")
    menuiseries_plafond: float = Field(default=0.0, description="Openings on ceiling")
    menuiseries_sol: float = Field(default=0.0, description="Openings on floor")

    # Custom surfaces
    autres_murs_ajout: float = Field(default=0.0, description="Custom additions on walls")
    autres_murs_deduction: float = Field(default=0.0, description="Custom deductions on walls")
    autres_plafond_ajout: float = Field(default=0.0, description="Custom additions on ceiling")
    autres_plafond_deduction: float = Field(default=0.0, description="Custom deductions on ceiling")
    autres_sol_ajout: float = Field(default=0.0, description="Custom additions on floor")
    autres_sol_deduction: float = Field(default=0.0, description="Custom deductions on floor")

    # Net
    surface_nette_murs: float = Field(..., description="Net wall surface")
    surface_nette_sol: float = Field(..., description="Net floor surface")
    surface_nette_plafond: float = Field(..., description="Net ceiling surface")

    @computed_field
    @property
    def total_menuiseries(self) -> float:
        """Openings on every surface."""
        return round2(self.menuiseries_murs + self.menuiseries_plafond + self.menuiseries_sol)

    @computed_field
    @property
    def autres_surfaces_murs(self) -> float:
        """Net custom contribution on walls."""
        return round2(self.autres_murs_ajout - self.autres_murs_deduction)

    @computed_field
    @property
    def autres_surfaces_plafond(self) -> float:
        """Net custom contribution on ceiling."""
        return round2(self.autres_plafond_ajout - self.autres_plafond_deduction)

    @computed_field
    @property
    def autres_surfaces_sol(self) -> float:
        """Net custom contribution on floor."""
        return round2(self.autres_sol_ajout - self.autres_sol_deduction)

    @computed_field
    @property
    def has_negative_surface(self) -> bool:
        """Deductions exceed a raw surface (values are never clamped)."""
        return min(
            self.surface_nette_murs,
            self.surface_nette_sol,
            self.surface_nette_plafond,
            self.longueur_plinthes,
        ) < 0
