"""simple-dto: typed, recursively hydrated data transfer objects."""

from .core.collection import EntityCollection
from .core.dto import Entity, FieldKind, FieldSpec
from .core.errors import (
    ConfigError,
    DtoDefinitionError,
    FieldResolutionError,
    HydrationError,
    MissingPropertyError,
    SimpleDtoError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DtoDefinitionError",
    "Entity",
    "EntityCollection",
    "FieldKind",
    "FieldResolutionError",
    "FieldSpec",
    "HydrationError",
    "MissingPropertyError",
    "SimpleDtoError",
]
