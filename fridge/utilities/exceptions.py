"""Exceptions raised at the store and recipe-provider boundaries.

Translation misses are not errors: they surface as ``resolved=False`` on the
pantry term. Everything below is a failure the caller has to report.
"""
from typing import Optional


class FridgeError(Exception):
    """Base class for all service errors."""


class ConfigurationMissingError(FridgeError):
    """Raised when a required credential (the recipe API key) is not configured."""


class ExternalFetchError(FridgeError):
    """Raised once when a recipe provider request fails or cannot be decoded."""

    def __init__(self, message: str, *, reason: str = "request", status_code: Optional[int] = None):
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code


class PersistenceWriteError(FridgeError):
    """Raised when a local store write fails. Previously committed entries are kept."""


class EmptyPantryError(FridgeError):
    """Raised when a recipe search is requested without any usable ingredient term."""
