"""Room surface assembler.

Builds the full surface record of a room from its raw fields. The steps run
in a fixed order and each one consumes the rounded output of the previous
ones: deferring the rounding to the end changes the totals by cents.
"""

from __future__ import annotations

from devis.core.constants import SURFACE_REFERENCES, SurfaceImpactee
from devis.domain.calculator.geometry import (
    calculate_floor_area,
    calculate_net_horizontal_surface,
    calculate_net_wall_surface,
    calculate_perimeter,
    calculate_plinth_length,
    calculate_plinth_surface,
    calculate_wall_area,
)
from devis.domain.calculator.openings import (
    plinth_cut_widths,
    sum_custom_surfaces,
    sum_openings_by_surface,
)
from devis.domain.models.room import Room
from devis.domain.models.surfaces import RoomSurfaces


def calculate_room_surfaces(room: Room) -> RoomSurfaces:
    """Compute every derived surface of a room.

    Pure: calling it twice on the same room gives identical records.

    Args:
        room: Room with its openings and custom surfaces

    Returns:
        RoomSurfaces record (net values are not clamped at zero)
    """
    # 1. Raw dimensions
    surface_brute_sol = calculate_floor_area(room.length, room.width)
    surface_brute_plafond = surface_brute_sol
    perimetre = calculate_perimeter(room.length, room.width)
    surface_brute_murs = calculate_wall_area(room.length, room.width, room.height)

    # 2. Openings per target
    menuiseries_murs = sum_openings_by_surface(room.menuiseries, SurfaceImpactee.MUR)
    menuiseries_plafond = sum_openings_by_surface(room.menuiseries, SurfaceImpactee.PLAFOND)
    menuiseries_sol = sum_openings_by_surface(room.menuiseries, SurfaceImpactee.SOL)

    # 3. Custom surfaces per target and intent
    autres = room.autres_surfaces
    autres_murs_ajout = sum_custom_surfaces(autres, SurfaceImpactee.MUR, False)
    autres_murs_deduction = sum_custom_surfaces(autres, SurfaceImpactee.MUR, True)
    autres_plafond_ajout = sum_custom_surfaces(autres, SurfaceImpactee.PLAFOND, False)
    autres_plafond_deduction = sum_custom_surfaces(autres, SurfaceImpactee.PLAFOND, True)
    autres_sol_ajout = sum_custom_surfaces(autres, SurfaceImpactee.SOL, False)
    autres_sol_deduction = sum_custom_surfaces(autres, SurfaceImpactee.SOL, True)

    # 4. Baseboard
    longueur_plinthes = calculate_plinth_length(perimetre, plinth_cut_widths(room.menuiseries))
    surface_plinthes = calculate_plinth_surface(longueur_plinthes, room.plinth_height)

    # 5-7. Net surfaces
    surface_nette_murs = calculate_net_wall_surface(
        surface_brute_murs,
        menuiseries_murs,
        surface_plinthes,
        autres_murs_ajout,
        autres_murs_deduction,
    )
    surface_nette_sol = calculate_net_horizontal_surface(
        surface_brute_sol,
        menuiseries_sol,
        autres_sol_ajout,
        autres_sol_deduction,
    )
    surface_nette_plafond = calculate_net_horizontal_surface(
        surface_brute_plafond,
        menuiseries_plafond,
        autres_plafond_ajout,
        autres_plafond_deduction,
    )

    return RoomSurfaces(
        surface_brute_sol=surface_brute_sol,
        surface_brute_plafond=surface_brute_plafond,
        surface_brute_murs=surface_brute_murs,
        perimetre=perimetre,
        longueur_plinthes=longueur_plinthes,
        surface_plinthes=surface_plinthes,
        menuiseries_murs=menuiseries_murs,
        menuiseries_plafond=menuiseries_plafond,
        menuiseries_sol=menuiseries_sol,
        autres_murs_ajout=autres_murs_ajout,
        autres_murs_deduction=autres_murs_deduction,
        autres_plafond_ajout=autres_plafond_ajout,
        autres_plafond_deduction=autres_plafond_deduction,
        autres_sol_ajout=autres_sol_ajout,
        autres_sol_deduction=autres_sol_deduction,
        surface_nette_murs=surface_nette_murs,
        surface_nette_sol=surface_nette_sol,
        surface_nette_plafond=surface_nette_plafond,
    )


def reference_quantity(surfaces: RoomSurfaces, reference: str | None) -> float:
    """Quantity a work item is pre-filled with from its catalog reference.

    Args:
        surfaces: Surfaces of the room the work item is added to
        reference: Catalog surface reference ("murs", "SurfaceNetteSol",
            "plinthes", "perimetre"...)

    Returns:
        The referenced measure, or 1.0 for direct quantities ("Aucune",
        "Unite", "Forfait" or unknown references)
    """
    if not reference:
        return 1.0
    attribute = SURFACE_REFERENCES.get(reference.strip().lower())
    if attribute is None:
        return 1.0
    return getattr(surfaces, attribute)
