"""Financial aggregate records for work items."""

from __future__ import annotations

from pydantic import Field

from devis.domain.models.base import DevisModel


class VatGroupTotals(DevisModel):
    """Totals of the work items sharing one VAT rate."""

    taux_tva: float = Field(..., alias="tauxTVA", description="VAT rate in %")
    count: int = Field(default=0, ge=0, description="Number of work items")
    total_ht: float = Field(default=0.0, description="Pre-tax total")
    total_tva: float = Field(default=0.0, description="VAT amount")
    total_ttc: float = Field(default=0.0, description="Tax-inclusive total")


class TravauxTotals(DevisModel):
    """Totals of a list of work items (a room or the whole project)."""

    total_ht: float = Field(default=0.0, description="Pre-tax total")
    total_tva: float = Field(default=0.0, description="VAT amount")
    total_ttc: float = Field(default=0.0, description="Tax-inclusive total")
    total_fournitures: float = Field(default=0.0, description="Supply share of the pre-tax total")
    total_main_oeuvre: float = Field(default=0.0, description="Labour share of the pre-tax total")
    groupes_tva: list[VatGroupTotals] = Field(default_factory=list, description="Totals per VAT rate")
