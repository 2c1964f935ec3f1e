"""Dimension and geometry calculations.

Room dimensions are in meters, opening dimensions in centimeters. Every
function rounds its result with `round2`; callers chain the rounded values,
never the raw products, so totals match the quotes to the cent.
"""

from __future__ import annotations

from devis.core.numbers import round2


def calculate_floor_area(length: float, width: float) -> float:
    """Raw floor area, also the raw ceiling area.

    Args:
        length: Room length in m
        width: Room width in m

    Returns:
        Area in m²
    """
    return round2(length * width)


def calculate_perimeter(length: float, width: float) -> float:
    """Room perimeter in m."""
    return round2(2 * (length + width))


def calculate_wall_area(length: float, width: float, height: float) -> float:
    """Raw wall area: rounded perimeter times height.

    Args:
        length: Room length in m
        width: Room width in m
        height: Room height in m

    Returns:
        Area in m²
    """
    return round2(calculate_perimeter(length, width) * height)


def calculate_plinth_length(perimeter: float, cut_widths: list[tuple[float, int]]) -> float:
    """Net baseboard length.

    Args:
        perimeter: Rounded room perimeter in m
        cut_widths: (width in cm, quantity) of each opening interrupting
            the baseboard

    Returns:
        Length in m, not clamped at zero
    """
    removed = sum((largeur / 100) * quantity for largeur, quantity in cut_widths)
    return round2(perimeter - removed)


def calculate_plinth_surface(plinth_length: float, plinth_height: float) -> float:
    """Baseboard surface in m²."""
    return round2(plinth_length * plinth_height)


def calculate_opening_area(largeur_cm: float, hauteur_cm: float) -> float:
    """Surface of one opening, converted from cm to m²."""
    return round2((largeur_cm / 100) * (hauteur_cm / 100))


def calculate_custom_area(largeur: float, hauteur: float) -> float:
    """Surface of one custom surface item, authored in m."""
    return round2(largeur * hauteur)


def calculate_net_wall_surface(
    raw_wall: float,
    openings: float,
    plinth_surface: float,
    custom_additions: float,
    custom_deductions: float,
) -> float:
    """Net wall surface.

    raw − openings − baseboard + custom additions − custom deductions,
    not clamped at zero.
    """
    return round2(raw_wall - openings - plinth_surface + custom_additions - custom_deductions)


def calculate_net_horizontal_surface(
    raw_area: float,
    openings: float,
    custom_additions: float,
    custom_deductions: float,
) -> float:
    """Net floor or ceiling surface, not clamped at zero."""
    return round2(raw_area - openings + custom_additions - custom_deductions)
