"""Project state transitions.

The project is an immutable `ProjectState`. Every change goes through
`project_reducer(state, action)`, which returns a new state, and
`ProjectStore` wraps the reducer with the current state and observers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from devis.application.services.naming import generate_room_name
from devis.core.exceptions import InvalidActionError
from devis.core.logging import get_logger
from devis.domain.models.base import new_id
from devis.domain.models.project import ProjectState
from devis.domain.models.property import Property
from devis.domain.models.room import Room
from devis.domain.models.travail import Travail

log = get_logger(__name__)


# --- Actions ---

@dataclass(frozen=True)
class UpdateProperty:
    """Merge field changes into the property."""
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddRoom:
    """Append a room, naming it when its name is blank."""
    room: Room


@dataclass(frozen=True)
class UpdateRoom:
    """Replace the room with the given id."""
    room_id: str
    room: Room


@dataclass(frozen=True)
class DeleteRoom:
    """Remove a room and every work item attached to it."""
    room_id: str


@dataclass(frozen=True)
class AddTravail:
    """Append a work item."""
    travail: Travail


@dataclass(frozen=True)
class UpdateTravail:
    """Replace the work item with the given id."""
    travail_id: str
    travail: Travail


@dataclass(frozen=True)
class DeleteTravail:
    """Remove one work item."""
    travail_id: str


@dataclass(frozen=True)
class ResetProject:
    """Back to the empty initial project."""


@dataclass(frozen=True)
class LoadProject:
    """Replace the whole project."""
    state: ProjectState


ProjectAction = Union[
    UpdateProperty,
    AddRoom,
    UpdateRoom,
    DeleteRoom,
    AddTravail,
    UpdateTravail,
    DeleteTravail,
    ResetProject,
    LoadProject,
]


# --- Reducer ---

def _add_room(state: ProjectState, room: Room) -> ProjectState:
    updates: dict[str, Any] = {}
    if not room.name.strip():
        updates["name"] = generate_room_name(state.rooms, room.type)
    if any(r.id == room.id for r in state.rooms):
        updates["id"] = new_id()
    if updates:
        room = room.model_copy(update=updates)
    return state.model_copy(update={"rooms": [*state.rooms, room]})


def project_reducer(state: ProjectState, action: ProjectAction) -> ProjectState:
    """Apply one action to a project state.

    The input state is never modified. Updates and deletions of unknown
    ids leave the collections unchanged.

    Args:
        state: Current project state
        action: Action to apply

    Returns:
        New project state

    Raises:
        InvalidActionError: If `action` is not a project action
    """
    if isinstance(action, UpdateProperty):
        # Changes may use JSON aliases ("ceilingHeight") or attribute names
        names = {(f.alias or name): name for name, f in Property.model_fields.items()}
        changes = {names.get(key, key): value for key, value in action.changes.items()}
        merged = {**state.property.model_dump(), **changes}
        return state.model_copy(update={"property": Property.model_validate(merged)})

    if isinstance(action, AddRoom):
        return _add_room(state, action.room)

    if isinstance(action, UpdateRoom):
        rooms = [action.room if r.id == action.room_id else r for r in state.rooms]
        return state.model_copy(update={"rooms": rooms})

    if isinstance(action, DeleteRoom):
        return state.model_copy(update={
            "rooms": [r for r in state.rooms if r.id != action.room_id],
            "travaux": [t for t in state.travaux if t.piece_id != action.room_id],
        })

    if isinstance(action, AddTravail):
        return state.model_copy(update={"travaux": [*state.travaux, action.travail]})

    if isinstance(action, UpdateTravail):
        travaux = [action.travail if t.id == action.travail_id else t for t in state.travaux]
        return state.model_copy(update={"travaux": travaux})

    if isinstance(action, DeleteTravail):
        return state.model_copy(update={
            "travaux": [t for t in state.travaux if t.id != action.travail_id],
        })

    if isinstance(action, ResetProject):
        return ProjectState.initial()

    if isinstance(action, LoadProject):
        return action.state

    raise InvalidActionError(action)


# --- Store ---

Listener = Callable[[ProjectState, ProjectAction], None]


class ProjectStore:
    """Current project state plus the observers of its transitions."""

    def __init__(self, state: ProjectState | None = None):
        """Initialize store.

        Args:
            state: Initial state. Defaults to an empty project.
        """
        self._state = state if state is not None else ProjectState.initial()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ProjectState:
        return self._state

    def dispatch(self, action: ProjectAction) -> ProjectState:
        """Apply an action and notify observers.

        A failing observer is logged and does not stop the others: the
        transition has already happened.

        Args:
            action: Action to apply

        Returns:
            The new current state
        """
        self._state = project_reducer(self._state, action)
        log.info(
            "project_action_applied",
            action=type(action).__name__,
            rooms=len(self._state.rooms),
            travaux=len(self._state.travaux),
        )
        for listener in list(self._listeners):
            try:
                listener(self._state, action)
            except Exception:
                log.exception("project_listener_failed", action=type(action).__name__)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register an observer called after every transition.

        Returns:
            Function removing the observer
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
