"""
Core error types for simple-dto.

Every exception raised by the library derives from ``SimpleDtoError`` so
callers (request handlers, view-model code) can catch them in one place.
"""

from __future__ import annotations

from typing import Optional


class SimpleDtoError(Exception):
    """
    Base exception for all simple-dto errors.
    """


class ConfigError(SimpleDtoError):
    """
    Raised when configuration is missing, invalid, or inconsistent.
    """


class DtoDefinitionError(SimpleDtoError):
    """
    Raised when an entity or collection variant is declared incorrectly.
    """


class MissingPropertyError(DtoDefinitionError):
    """
    Raised when a field is looked up on a variant that does not declare it.
    """

    def __init__(self, property_name: str, owner: Optional[type] = None) -> None:
        self.property_name = property_name
        self.owner = owner
        where = f" on {owner.__name__}" if owner is not None else ""
        super().__init__(f"Property {property_name!r} does not exist{where}")


class FieldResolutionError(DtoDefinitionError):
    """
    Raised when the declared type of a field cannot be resolved.
    """


class HydrationError(SimpleDtoError):
    """
    Raised when raw data cannot be turned into an entity or collection.
    """
