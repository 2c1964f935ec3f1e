"""Core primitives: rounding, formatting, settings, logging and exceptions."""

from .exceptions import (
    ConfigurationError,
    DevisError,
    InvalidActionError,
    InvalidParameterError,
    ProjectLoadError,
    ProjectSaveError,
)
from .numbers import format_currency, format_percent, format_quantity, round2

__all__ = [
    "round2",
    "format_currency",
    "format_quantity",
    "format_percent",
    # Exceptions
    "DevisError",
    "ProjectLoadError",
    "ProjectSaveError",
    "InvalidActionError",
    "InvalidParameterError",
    "ConfigurationError",
]
