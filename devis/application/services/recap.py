"""Quote recap service.

Assembles, for every room, its surfaces and the totals of its work items,
then the project totals per VAT rate. The resulting records and tables are
what the recap screen and the quote layout consume.
"""

from __future__ import annotations

import pandas as pd
from pydantic import Field

from devis.core.logging import get_logger
from devis.domain.calculator.surfaces import calculate_room_surfaces
from devis.domain.calculator.travaux import (
    calculate_line_total_ht,
    calculate_line_total_ttc,
    calculate_line_vat,
    calculate_travaux_totals,
    calculate_unit_price_ht,
    filter_travaux_by_piece,
)
from devis.domain.models.base import DevisModel
from devis.domain.models.project import ProjectState
from devis.domain.models.room import Room
from devis.domain.models.surfaces import RoomSurfaces
from devis.domain.models.totals import TravauxTotals
from devis.domain.models.travail import Travail

log = get_logger(__name__)


class RoomRecap(DevisModel):
    """Surfaces and work item totals of one room."""

    room_id: str = Field(..., description="Room identifier")
    name: str = Field(..., description="Room name")
    type: str = Field(..., description="Room category")
    surfaces: RoomSurfaces = Field(..., description="Derived surfaces")
    totals: TravauxTotals = Field(..., description="Totals of the room's work items")
    travaux_count: int = Field(default=0, ge=0, description="Number of work items")


class ProjectRecap(DevisModel):
    """Recap of a whole project."""

    rooms: list[RoomRecap] = Field(default_factory=list, description="Room recaps in room order")
    totals: TravauxTotals = Field(default_factory=TravauxTotals, description="Project totals")
    warnings: list[str] = Field(default_factory=list, description="Rooms needing a check")


def build_room_recap(room: Room, travaux: list[Travail]) -> RoomRecap:
    """Recap of one room.

    Args:
        room: Room to summarize
        travaux: Work items of the project (filtered on the room id)

    Returns:
        RoomRecap
    """
    room_travaux = filter_travaux_by_piece(travaux, room.id)
    return RoomRecap(
        room_id=room.id,
        name=room.name,
        type=room.type,
        surfaces=calculate_room_surfaces(room),
        totals=calculate_travaux_totals(room_travaux),
        travaux_count=len(room_travaux),
    )


def build_project_recap(state: ProjectState) -> ProjectRecap:
    """Recap of a project.

    Negative net surfaces are reported as warnings and left as computed.

    Args:
        state: Project state

    Returns:
        ProjectRecap
    """
    room_recaps = [build_room_recap(room, state.travaux) for room in state.rooms]

    warnings = []
    for recap in room_recaps:
        if recap.surfaces.has_negative_surface:
            log.warning("negative_room_surface", room_id=recap.room_id, room=recap.name)
            warnings.append(f"{recap.name}: deductions exceed a raw surface")

    return ProjectRecap(
        rooms=room_recaps,
        totals=calculate_travaux_totals(state.travaux),
        warnings=warnings,
    )


def rooms_dataframe(recap: ProjectRecap) -> pd.DataFrame:
    """One row per room: net surfaces and totals."""
    rows = [
        {
            "Pièce": r.name,
            "Type": r.type,
            "Surface sol (m²)": r.surfaces.surface_nette_sol,
            "Surface murs (m²)": r.surfaces.surface_nette_murs,
            "Surface plafond (m²)": r.surfaces.surface_nette_plafond,
            "Plinthes (ml)": r.surfaces.longueur_plinthes,
            "Travaux": r.travaux_count,
            "Total HT": r.totals.total_ht,
            "Total TVA": r.totals.total_tva,
            "Total TTC": r.totals.total_ttc,
        }
        for r in recap.rooms
    ]
    return pd.DataFrame(rows, columns=[
        "Pièce", "Type", "Surface sol (m²)", "Surface murs (m²)", "Surface plafond (m²)",
        "Plinthes (ml)", "Travaux", "Total HT", "Total TVA", "Total TTC",
    ])


def vat_dataframe(recap: ProjectRecap) -> pd.DataFrame:
    """One row per VAT rate, sorted by rate."""
    rows = [
        {
            "Taux TVA (%)": g.taux_tva,
            "Lignes": g.count,
            "Total HT": g.total_ht,
            "Total TVA": g.total_tva,
            "Total TTC": g.total_ttc,
        }
        for g in recap.totals.groupes_tva
    ]
    return pd.DataFrame(rows, columns=["Taux TVA (%)", "Lignes", "Total HT", "Total TVA", "Total TTC"])


def travaux_dataframe(state: ProjectState) -> pd.DataFrame:
    """One row per work item, grouped by room in room order."""
    rows = []
    for room in state.rooms:
        for t in filter_travaux_by_piece(state.travaux, room.id):
            rows.append({
                "Pièce": room.name,
                "Travaux": t.type_travaux_label,
                "Prestation": t.sous_type_label,
                "Quantité": t.quantite,
                "Unité": t.unite,
                "PU HT": calculate_unit_price_ht(t),
                "Total HT": calculate_line_total_ht(t),
                "Taux TVA (%)": t.taux_tva,
                "TVA": calculate_line_vat(t),
                "Total TTC": calculate_line_total_ttc(t),
            })
    return pd.DataFrame(rows, columns=[
        "Pièce", "Travaux", "Prestation", "Quantité", "Unité", "PU HT",
        "Total HT", "Taux TVA (%)", "TVA", "Total TTC",
    ])
