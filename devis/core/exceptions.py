"""Custom exceptions for devis.

Domain-specific exception types for better error handling and debugging.
The surface and financial calculators never raise: these cover the state,
persistence and configuration layers around them.
"""

from __future__ import annotations

from typing import Any


class DevisError(Exception):
    """Base exception for all devis errors."""
    pass


# --- Persistence Errors ---

class ProjectLoadError(DevisError):
    """Failed to load or parse a persisted project document."""
    pass


class ProjectSaveError(DevisError):
    """Failed to write a project document."""
    pass


# --- State Errors ---

class InvalidActionError(DevisError):
    """Object dispatched to the project reducer is not a known action."""

    def __init__(self, action: Any):
        self.action = action
        super().__init__(f"Unknown project action: {type(action).__name__}")


class InvalidParameterError(DevisError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Configuration Errors ---

class ConfigurationError(DevisError):
    """Error in application configuration."""
    pass
