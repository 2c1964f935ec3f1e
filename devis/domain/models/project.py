"""Project state data model.

The project is the aggregate a quote is computed from: one property, an
ordered list of rooms and an ordered list of work items.
"""

from __future__ import annotations

from pydantic import Field

from devis.domain.models.base import DevisModel
from devis.domain.models.property import Property
from devis.domain.models.room import Room
from devis.domain.models.travail import Travail


class ProjectState(DevisModel):
    """Immutable snapshot of a project.

    Transitions are produced by
    `devis.application.services.project_store.project_reducer`.
    """

    property: Property = Field(default_factory=Property, description="Property description")
    rooms: list[Room] = Field(default_factory=list, description="Rooms in display order")
    travaux: list[Travail] = Field(default_factory=list, description="Work items in entry order")

    @classmethod
    def initial(cls) -> ProjectState:
        """Empty project used for 'new project' and resets."""
        return cls()

    def get_room(self, room_id: str) -> Room | None:
        """Room with the given id, if any."""
        return next((r for r in self.rooms if r.id == room_id), None)

    def travaux_for_room(self, room_id: str) -> list[Travail]:
        """Work items of one room, in entry order."""
        return [t for t in self.travaux if t.piece_id == room_id]
