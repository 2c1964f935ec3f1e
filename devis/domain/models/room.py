"""Room (pièce) data model.

Only raw fields are stored. Surfaces are derived on every read by
`devis.domain.calculator.surfaces.calculate_room_surfaces`.
"""

from __future__ import annotations

from pydantic import Field

from devis.core.constants import DEFAULT_ROOM_TYPE
from devis.domain.models.autre_surface import AutreSurface
from devis.domain.models.base import DevisModel, new_id
from devis.domain.models.menuiserie import Menuiserie


class Room(DevisModel):
    """Room with its dimensions, openings and custom surfaces."""

    id: str = Field(default_factory=new_id, description="Room identifier, never reused")
    name: str = Field(default="", description="Display name, generated when blank")
    type: str = Field(default=DEFAULT_ROOM_TYPE, description="Room category")

    # Dimensions (m)
    length: float = Field(default=0.0, description="Length in m")
    width: float = Field(default=0.0, description="Width in m")
    height: float = Field(default=0.0, description="Height in m")
    plinth_height: float = Field(default=0.0, description="Baseboard height in m")

    menuiseries: list[Menuiserie] = Field(default_factory=list, description="Openings")
    autres_surfaces: list[AutreSurface] = Field(default_factory=list, description="Custom surfaces")
