"""Recap page rendering.

Read-only view of a project: property, surfaces per room and totals per
VAT rate.
"""

from __future__ import annotations

import streamlit as st

from devis.application.services.recap import (
    ProjectRecap,
    build_project_recap,
    rooms_dataframe,
    travaux_dataframe,
    vat_dataframe,
)
from devis.core.numbers import format_currency, format_quantity
from devis.domain.models.project import ProjectState


def render_property(state: ProjectState) -> None:
    """Render the property summary."""
    prop = state.property
    cols = st.columns(4)
    cols[0].metric("Type", prop.type.value)
    cols[1].metric("Niveaux", prop.floors)
    cols[2].metric("Surface totale", f"{format_quantity(prop.total_area)} m²")
    cols[3].metric("Hauteur sous plafond", f"{format_quantity(prop.ceiling_height)} m")


def render_totals(recap: ProjectRecap) -> None:
    """Render grand totals and the VAT breakdown."""
    cols = st.columns(3)
    cols[0].metric("Total HT", format_currency(recap.totals.total_ht))
    cols[1].metric("Total TVA", format_currency(recap.totals.total_tva))
    cols[2].metric("Total TTC", format_currency(recap.totals.total_ttc))
    st.dataframe(vat_dataframe(recap), hide_index=True, use_container_width=True)


def render_recap_page(state: ProjectState, project_name: str | None = None) -> None:
    """Render the full recap of a project.

    Args:
        state: Project to display
        project_name: Title of the page
    """
    st.title(f"🧾 Récapitulatif {project_name or ''}".strip())
    render_property(state)

    if not state.rooms:
        st.info("Aucune pièce n'a été ajoutée.")
        return

    recap = build_project_recap(state)
    for warning in recap.warnings:
        st.warning(warning)

    st.subheader("Pièces")
    st.dataframe(rooms_dataframe(recap), hide_index=True, use_container_width=True)

    if not state.travaux:
        st.info("Aucun travail n'a été ajouté.")
        return

    st.subheader("Détail des travaux")
    st.dataframe(travaux_dataframe(state), hide_index=True, use_container_width=True)

    st.subheader("Totaux")
    render_totals(recap)
