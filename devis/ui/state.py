"""Session state management for the Streamlit recap viewer.

Keeps one `ProjectStore` per browser session in ``st.session_state``.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from devis.application.services.project_store import LoadProject, ProjectStore
from devis.domain.models.project import ProjectState

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key not present

    Returns:
        Value from session state or default
    """
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


class SessionManager:
    """Manages the session's project store and selection."""

    STORE_KEY = "project_store"

    @classmethod
    def get_store(cls) -> ProjectStore:
        """Project store of the session, created on first access."""
        if cls.STORE_KEY not in st.session_state:
            st.session_state[cls.STORE_KEY] = ProjectStore()
        return st.session_state[cls.STORE_KEY]

    @classmethod
    def get_project_name(cls) -> str | None:
        """Name of the loaded project."""
        return get_state("project_name", None)

    @classmethod
    def load_project(cls, name: str, state: ProjectState) -> None:
        """Replace the session project."""
        cls.get_store().dispatch(LoadProject(state))
        set_state("project_name", name)
