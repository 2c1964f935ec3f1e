"""Pytest fixtures for devis tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from devis.core.settings import get_settings
from devis.domain.models import Menuiserie, ProjectState, Property, Room, Travail


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached: start and end every test with a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def window():
    """120×100 cm window on a wall."""
    return Menuiserie(type="Fenêtre", largeur=120, hauteur=100, surface_impactee="mur")


@pytest.fixture
def door():
    """90×204 cm door on a wall, cutting the baseboard."""
    return Menuiserie(
        type="Porte",
        largeur=90,
        hauteur=204,
        surface_impactee="mur",
        impacte_plinthe=True,
    )


@pytest.fixture
def sample_room(window, door):
    """4m × 3m × 2.5m room with a window, a door and a 10 cm baseboard."""
    return Room(
        id="room-salon",
        name="Salon 1",
        type="Salon",
        length=4.0,
        width=3.0,
        height=2.5,
        plinth_height=0.1,
        menuiseries=[window, door],
    )


@pytest.fixture
def bedroom():
    """Bare 3m × 3m × 2.5m bedroom."""
    return Room(id="room-chambre", name="Chambre 1", type="Chambre", length=3.0, width=3.0, height=2.5)


@pytest.fixture
def sample_travaux():
    """Two items at 10 % (HT 100 and 50) and one at 20 % (HT 200)."""
    return [
        Travail(
            id="t-peinture",
            piece_id="room-salon",
            type_travaux_label="Peinture",
            sous_type_label="Peinture murs",
            quantite=1,
            prix_fournitures=60.0,
            prix_main_oeuvre=40.0,
            taux_tva=10.0,
        ),
        Travail(
            id="t-plinthes",
            piece_id="room-chambre",
            type_travaux_label="Menuiserie",
            sous_type_label="Pose plinthes",
            quantite=2,
            unite="Ml",
            prix_fournitures=10.0,
            prix_main_oeuvre=15.0,
            taux_tva=10.0,
        ),
        Travail(
            id="t-electricite",
            piece_id="room-salon",
            type_travaux_label="Electricité",
            sous_type_label="Prise",
            quantite=2,
            unite="Unité",
            prix_fournitures=50.0,
            prix_main_oeuvre=50.0,
            taux_tva=20.0,
        ),
    ]


@pytest.fixture
def sample_project(sample_room, bedroom, sample_travaux):
    """Project with two rooms and three work items."""
    return ProjectState(
        property=Property(type="Maison", floors=2, total_area=85.0, rooms_count=4, ceiling_height=2.5),
        rooms=[sample_room, bedroom],
        travaux=sample_travaux,
    )
