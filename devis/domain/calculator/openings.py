"""Opening and custom surface aggregation.

Sums the contributions of openings (menuiseries) and custom surfaces
(autres surfaces) per target surface and, for custom surfaces, per intent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from devis.core.constants import SurfaceImpactee
from devis.core.numbers import round2

if TYPE_CHECKING:
    from devis.domain.models.autre_surface import AutreSurface
    from devis.domain.models.menuiserie import Menuiserie


def cuts_plinth(menuiserie: Menuiserie) -> bool:
    """Whether an opening interrupts the baseboard.

    Only wall openings qualify, when flagged or when they are doors.
    """
    return menuiserie.surface_impactee == SurfaceImpactee.MUR and (
        menuiserie.impacte_plinthe or menuiserie.is_door
    )


def plinth_cut_widths(menuiseries: Iterable[Menuiserie]) -> list[tuple[float, int]]:
    """(width in cm, quantity) of the openings interrupting the baseboard."""
    return [(m.largeur, m.quantity) for m in menuiseries if cuts_plinth(m)]


def sum_openings_by_surface(
    menuiseries: Iterable[Menuiserie],
    surface: SurfaceImpactee,
) -> float:
    """Total opening surface on one target.

    Args:
        menuiseries: Openings of a room
        surface: Target surface

    Returns:
        round2 of Σ surface × quantity over the matching openings, in m²
    """
    return round2(
        sum(m.surface * m.quantity for m in menuiseries if m.surface_impactee == surface)
    )


def sum_custom_surfaces(
    autres_surfaces: Iterable[AutreSurface],
    surface: SurfaceImpactee,
    est_deduction: bool,
) -> float:
    """Total custom surface on one target for one intent.

    Args:
        autres_surfaces: Custom surfaces of a room
        surface: Target surface
        est_deduction: True for deductions, False for additions

    Returns:
        round2 of Σ surface × quantity over the matching items, in m²
    """
    return round2(
        sum(
            s.surface * s.quantity
            for s in autres_surfaces
            if s.surface_impactee == surface and s.est_deduction == est_deduction
        )
    )
