"""Shared base model for devis entities.

Python attributes are snake_case; the persisted JSON documents use the
camelCase keys of the quote editor (``plinthHeight``, ``surfaceImpactee``...).
"""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from devis.core.constants import SURFACE_ALIASES, SurfaceImpactee


def new_id() -> str:
    """Opaque unique identifier for a new entity."""
    return str(uuid.uuid4())


def normalize_surface(value: Any) -> SurfaceImpactee:
    """Map any accepted spelling of a target surface to SurfaceImpactee.

    Missing or unknown values fall back to the wall, like the catalog adapter.
    """
    if isinstance(value, SurfaceImpactee):
        return value
    if not value:
        return SurfaceImpactee.MUR
    return SURFACE_ALIASES.get(str(value).strip().lower(), SurfaceImpactee.MUR)


class DevisModel(BaseModel):
    """Immutable value object with camelCase JSON aliases.

    Unknown keys are ignored so that derived values stored by older
    documents are never read back: they are recomputed from raw fields.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
        "extra": "ignore",
    }
