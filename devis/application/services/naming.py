"""Automatic naming of rooms, openings, custom surfaces and quotes."""

from __future__ import annotations

import re
from datetime import date
from typing import Iterable, Sequence

from devis.domain.models.autre_surface import AutreSurface
from devis.domain.models.menuiserie import Menuiserie
from devis.domain.models.room import Room

_TRAILING_NUMBER = re.compile(r"\s(\d+)$")


def generate_room_name(rooms: Sequence[Room], room_type: str) -> str:
    """Next sequential name for a room of the given type.

    The number is one more than the highest suffix already used by a room
    of that type, so "Chambre 1" and "Chambre 3" give "Chambre 4".

    Args:
        rooms: Existing rooms
        room_type: Type of the room being created

    Returns:
        Name like "Chambre 4"
    """
    max_number = 0
    for room in rooms:
        if room.type != room_type:
            continue
        match = _TRAILING_NUMBER.search(room.name)
        if match:
            max_number = max(max_number, int(match.group(1)))
    return f"{room_type} {max_number + 1}"


def generate_menuiserie_name(
    menuiseries: Sequence[Menuiserie],
    menuiserie_type: str,
    largeur: float,
    hauteur: float,
) -> str:
    """Name like "Menuiserie n° 2 (Fenêtre (120×100 cm))"."""
    base_info = f" ({menuiserie_type} ({largeur:g}×{hauteur:g} cm))" if menuiserie_type else ""
    return f"Menuiserie n° {len(menuiseries) + 1}{base_info}"


def generate_autre_surface_name(autres_surfaces: Sequence[AutreSurface], surface_type: str) -> str:
    """Name like "Placard 3", numbered after the units of that type."""
    count = sum(s.quantity for s in autres_surfaces if s.type == surface_type)
    return f"{surface_type} {count + 1}"


def generate_devis_number(existing: Iterable[str], today: date) -> str:
    """Next quote number of the month, formatted "AAMM-N".

    N is one more than the highest number already used in the same month,
    so "2504-1" and "2504-3" give "2504-4". Numbers of other months and
    malformed entries are ignored.

    Args:
        existing: Quote numbers already attributed
        today: Date of the quote

    Returns:
        Quote number like "2504-4"
    """
    year_month = today.strftime("%y%m")
    max_number = 0
    for number in existing:
        prefix, sep, suffix = (number or "").partition("-")
        if sep and prefix == year_month and suffix.isdigit():
            max_number = max(max_number, int(suffix))
    return f"{year_month}-{max_number + 1}"
