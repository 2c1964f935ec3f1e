"""Property (bien) data model."""

from __future__ import annotations

from pydantic import Field

from devis.core.constants import PropertyType
from devis.core.settings import get_settings
from devis.domain.models.base import DevisModel


class Property(DevisModel):
    """Description of the renovated property.

    Edited wholesale by the user; carries no derived fields.
    """

    type: PropertyType = Field(default=PropertyType.APPARTEMENT, description="Property kind")
    floors: int = Field(default=1, ge=1, description="Number of floors")
    total_area: float = Field(default=0.0, ge=0, description="Total area in m²")
    rooms_count: int = Field(default=0, ge=0, alias="rooms", description="Declared number of rooms")
    ceiling_height: float = Field(
        default_factory=lambda: get_settings().default_ceiling_height,
        ge=0,
        description="Ceiling height in m",
    )
