"""Unit tests for devis.domain.calculator.surfaces module."""

import pytest

from devis.domain.calculator.geometry import calculate_wall_area
from devis.domain.calculator.surfaces import calculate_room_surfaces, reference_quantity
from devis.domain.models import AutreSurface, Menuiserie, Room


class TestCalculateRoomSurfaces:
    """Tests for the room surface assembler."""

    def test_raw_surfaces(self, sample_room):
        s = calculate_room_surfaces(sample_room)
        assert s.surface_brute_sol == 12.0
        assert s.surface_brute_plafond == 12.0
        assert s.surface_brute_murs == 35.0
        assert s.perimetre == 14.0

    def test_baseboard(self, sample_room):
        """Only the door is removed from the 14m perimeter."""
        s = calculate_room_surfaces(sample_room)
        assert s.longueur_plinthes == 13.1
        assert s.surface_plinthes == 1.31

    def test_net_wall_surface(self, sample_room):
        """35 − (1.2 window + 1.84 door) − 1.31 baseboard."""
        s = calculate_room_surfaces(sample_room)
        assert s.menuiseries_murs == 3.04
        assert s.total_menuiseries == 3.04
        assert s.surface_nette_murs == 30.65

    def test_window_only_room(self, window):
        """Window on the wall, 10 cm baseboard on the full perimeter."""
        room = Room(length=4.0, width=3.0, height=2.5, plinth_height=0.1, menuiseries=[window])
        s = calculate_room_surfaces(room)
        assert s.surface_plinthes == 1.4
        assert s.surface_nette_murs == 32.4

    def test_net_wall_composition(self):
        """35 m² of wall − 1.2 m² French window − 1.31 m² baseboard = 32.49."""
        french_window = Menuiserie(type="Porte-fenêtre", largeur=90, hauteur=133.33, surface_impactee="mur")
        room = Room(length=4.0, width=3.0, height=2.5, plinth_height=0.1, menuiseries=[french_window])
        s = calculate_room_surfaces(room)
        assert s.surface_brute_murs == 35.0
        assert s.menuiseries_murs == 1.2
        assert s.longueur_plinthes == 13.1
        assert s.surface_plinthes == 1.31
        assert s.surface_nette_murs == 32.49

    def test_floor_and_ceiling_unaffected_by_wall_openings(self, sample_room):
        s = calculate_room_surfaces(sample_room)
        assert s.surface_nette_sol == 12.0
        assert s.surface_nette_plafond == 12.0

    def test_rounding_checkpoints(self):
        """Raw areas are rounded before anything consumes them."""
        room = Room(length=3.333, width=2.222, height=2.5)
        s = calculate_room_surfaces(room)
        assert s.surface_brute_sol == 7.41
        assert s.surface_nette_sol == 7.41
        assert s.perimetre == 11.11
        assert s.surface_brute_murs == calculate_wall_area(3.333, 2.222, 2.5)

    def test_custom_surfaces(self):
        room = Room(
            length=4.0,
            width=3.0,
            height=2.5,
            autres_surfaces=[
                AutreSurface(type="Coffrage", largeur=1.0, hauteur=2.5, surface_impactee="mur"),
                AutreSurface(type="Placard", largeur=0.8, hauteur=0.6, surface_impactee="sol", est_deduction=True),
                AutreSurface(type="Trappe", largeur=1.0, hauteur=1.0, quantity=2, surface_impactee="plafond", est_deduction=True),
            ],
        )
        s = calculate_room_surfaces(room)
        assert s.autres_murs_ajout == 2.5
        assert s.surface_nette_murs == 37.5
        assert s.surface_nette_sol == 11.52
        assert s.autres_surfaces_sol == -0.48
        assert s.surface_nette_plafond == 10.0

    def test_ceiling_opening(self):
        velux = Menuiserie(type="Velux", largeur=78, hauteur=98, surface_impactee="plafond")
        s = calculate_room_surfaces(Room(length=4.0, width=3.0, height=2.5, menuiseries=[velux]))
        assert s.menuiseries_plafond == 0.76
        assert s.surface_nette_plafond == 11.24
        assert s.surface_nette_murs == 35.0

    def test_negative_surface_not_clamped(self):
        """Deductions larger than the floor give a negative net floor."""
        room = Room(
            length=1.0,
            width=1.0,
            height=1.0,
            autres_surfaces=[
                AutreSurface(type="Estrade", largeur=2.0, hauteur=2.0, surface_impactee="sol", est_deduction=True),
            ],
        )
        s = calculate_room_surfaces(room)
        assert s.surface_nette_sol == -3.0
        assert s.has_negative_surface

    def test_positive_room_has_no_warning(self, sample_room):
        assert not calculate_room_surfaces(sample_room).has_negative_surface

    def test_idempotent(self, sample_room):
        """Two computations on the same room are identical."""
        assert calculate_room_surfaces(sample_room) == calculate_room_surfaces(sample_room)


class TestReferenceQuantity:
    """Tests for reference_quantity function."""

    @pytest.fixture
    def surfaces(self, sample_room):
        return calculate_room_surfaces(sample_room)

    @pytest.mark.parametrize("reference,attribute", [
        ("murs", "surface_nette_murs"),
        ("SurfaceNetteMurs", "surface_nette_murs"),
        ("sol", "surface_nette_sol"),
        ("SurfaceNettePlafond", "surface_nette_plafond"),
        ("menuiseries", "total_menuiseries"),
        ("plinthes", "longueur_plinthes"),
        ("LineaireNet", "longueur_plinthes"),
        ("perimetre", "perimetre"),
    ])
    def test_references(self, surfaces, reference, attribute):
        assert reference_quantity(surfaces, reference) == getattr(surfaces, attribute)

    @pytest.mark.parametrize("reference", [None, "", "Aucune", "Forfait", "Unite", "inconnue"])
    def test_direct_quantity(self, surfaces, reference):
        assert reference_quantity(surfaces, reference) == 1.0
