"""Recap viewer entry point.

Run with ``streamlit run app.py``. Lists the projects saved in the
projects directory and shows the recap of the selected one.
"""

import streamlit as st

from devis.application.services.project_io import ProjectRepository
from devis.core.exceptions import ProjectLoadError
from devis.core.logging import get_logger
from devis.ui.recap_page import render_recap_page
from devis.ui.state import SessionManager


def render_sidebar(repository: ProjectRepository) -> None:
    """Project picker."""
    with st.sidebar:
        st.title("📂 Projets")
        names = repository.list_projects()
        if not names:
            st.caption(f"Aucun projet dans {repository.base_dir}")
            return

        current = SessionManager.get_project_name()
        index = names.index(current) if current in names else 0
        selected = st.selectbox("Projet", names, index=index)
        if selected != current:
            try:
                SessionManager.load_project(selected, repository.load(selected))
            except ProjectLoadError as e:
                st.error(str(e))


def main() -> None:
    """Main application entry point."""
    st.set_page_config(page_title="Devis rénovation", page_icon="🧾", layout="wide")
    log = get_logger(__name__)
    log.info("app_started")

    repository = ProjectRepository()
    render_sidebar(repository)

    store = SessionManager.get_store()
    render_recap_page(store.state, SessionManager.get_project_name())


if __name__ == "__main__":
    main()
