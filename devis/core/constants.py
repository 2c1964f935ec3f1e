"""Domain constants - single source of truth for enumerated values.

Room categories, VAT rates, units of measure and the catalog "surface
reference" codes used to pre-fill work item quantities.
"""

from __future__ import annotations

from enum import Enum


class PropertyType(str, Enum):
    """Kind of property being renovated."""
    APPARTEMENT = "Appartement"
    MAISON = "Maison"
    STUDIO = "Studio"
    LOFT = "Loft"
    AUTRE = "Autre"


class SurfaceImpactee(str, Enum):
    """Surface an opening or custom surface is applied to."""
    MUR = "mur"
    PLAFOND = "plafond"
    SOL = "sol"
    AUCUNE = "aucune"


# Accepted spellings (frontend, database and plural forms)
SURFACE_ALIASES: dict[str, SurfaceImpactee] = {
    "mur": SurfaceImpactee.MUR,
    "murs": SurfaceImpactee.MUR,
    "wall": SurfaceImpactee.MUR,
    "plafond": SurfaceImpactee.PLAFOND,
    "plafonds": SurfaceImpactee.PLAFOND,
    "ceiling": SurfaceImpactee.PLAFOND,
    "sol": SurfaceImpactee.SOL,
    "sols": SurfaceImpactee.SOL,
    "floor": SurfaceImpactee.SOL,
    "aucune": SurfaceImpactee.AUCUNE,
    "none": SurfaceImpactee.AUCUNE,
}

ROOM_TYPES = [
    "Salon",
    "Chambre",
    "Cuisine",
    "Salle de bain",
    "Toilettes",
    "Bureau",
    "Entrée",
    "Couloir",
    "Autre",
]

DEFAULT_ROOM_TYPE = "Salon"

# VAT rates offered for renovation work (%)
TVA_RATES: dict[float, str] = {
    5.5: "Travaux de rénovation énergétique",
    10.0: "Travaux de rénovation",
    20.0: "Taux normal",
}

UNITES = ["M²", "Ml", "M³", "Unité", "Ens.", "Forfait"]

# Substring of an opening type name that marks a door (doors always cut the baseboard)
DOOR_KEYWORD = "porte"

# Catalog surface references -> RoomSurfaces attribute
SURFACE_REFERENCES: dict[str, str] = {
    "murs": "surface_nette_murs",
    "surfacenettemurs": "surface_nette_murs",
    "sol": "surface_nette_sol",
    "surfacenettesol": "surface_nette_sol",
    "plafond": "surface_nette_plafond",
    "surfacenetteplafond": "surface_nette_plafond",
    "menuiseries": "total_menuiseries",
    "plinthes": "longueur_plinthes",
    "lineairenet": "longueur_plinthes",
    "perimetre": "perimetre",
}
