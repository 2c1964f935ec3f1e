"""Work item (travail) data model.

A travail is one priced line of the quote: a quantity of labour and supplies
applied to a room. Totals are computed by `devis.domain.calculator.travaux`.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from devis.core.constants import SurfaceImpactee
from devis.core.settings import get_settings
from devis.domain.models.base import DevisModel, new_id, normalize_surface


class Travail(DevisModel):
    """Priced work item attached to a room."""

    id: str = Field(default_factory=new_id, description="Work item identifier")
    piece_id: str = Field(..., description="Owning room identifier")

    # Catalog classification
    type_travaux_id: str = Field(default="", description="Work category identifier")
    type_travaux_label: str = Field(default="", description="Work category label")
    sous_type_id: str = Field(default="", description="Work sub-category identifier")
    sous_type_label: str = Field(default="", description="Work sub-category label")
    menuiserie_id: str | None = Field(None, description="Opening the work applies to")

    # Quantity & pricing
    quantite: float = Field(default=1.0, description="Quantity in `unite`")
    unite: str = Field(default_factory=lambda: get_settings().default_unite, description="Unit of measure")
    prix_fournitures: float = Field(default=0.0, description="Supply price per unit (€ HT)")
    prix_main_oeuvre: float = Field(default=0.0, description="Labour price per unit (€ HT)")
    taux_tva: float = Field(
        default_factory=lambda: get_settings().default_tva_rate,
        alias="tauxTVA",
        description="VAT rate in %",
    )

    # Free text
    description: str = Field(default="", description="Description printed on the quote")
    commentaire: str = Field(default="", description="Internal comment")
    personnalisation: str | None = Field(None, description="Customized wording")
    surface_impactee: SurfaceImpactee | None = Field(None, description="Surface the work is measured on")

    @field_validator("surface_impactee", mode="before")
    @classmethod
    def validate_surface(cls, v: Any) -> SurfaceImpactee | None:
        """Keep 'no surface' as None, normalize anything else."""
        if v is None or v == "":
            return None
        return normalize_surface(v)
