"""Application services."""

from .project_io import ProjectRepository, project_from_dict, project_to_dict
from .project_store import ProjectStore, project_reducer
from .recap import ProjectRecap, RoomRecap, build_project_recap, build_room_recap

__all__ = [
    "ProjectStore",
    "project_reducer",
    "ProjectRepository",
    "project_to_dict",
    "project_from_dict",
    "ProjectRecap",
    "RoomRecap",
    "build_project_recap",
    "build_room_recap",
]
