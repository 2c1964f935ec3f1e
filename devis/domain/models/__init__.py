"""Data models for devis."""

from .autre_surface import AutreSurface
from .menuiserie import Menuiserie
from .project import ProjectState
from .property import Property
from .room import Room
from .surfaces import RoomSurfaces
from .totals import TravauxTotals, VatGroupTotals
from .travail import Travail

__all__ = [
    "AutreSurface",
    "Menuiserie",
    "ProjectState",
    "Property",
    "Room",
    "RoomSurfaces",
    "Travail",
    "TravauxTotals",
    "VatGroupTotals",
]
