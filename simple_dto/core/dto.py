"""
Entity base class for simple-dto.

An entity is a ``@dataclass`` subclass of ``Entity``. Its annotated fields are
the declared properties, and their types decide how raw data is hydrated:

- a field typed as another ``Entity`` variant is built from a nested mapping
  (a nested list builds it too, but only with its defaults);
- a field typed as an ``EntityCollection`` variant is built from a nested
  list (or from the values of a nested mapping);
- any other field receives the raw value unchanged.

Design choices:
- The field-type table of each variant is resolved once and cached, so
  hydration is a dictionary lookup per key rather than repeated
  introspection.
- No coercion or validation happens here. A scalar given for a nested field
  is stored as-is, and unknown keys are dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
import types
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .collection import EntityCollection
from .errors import DtoDefinitionError, FieldResolutionError, HydrationError, MissingPropertyError
from .logging import get_logger
from .wire import entity_json_schema, wire_core_schema


logger = get_logger("simple_dto.core.dto")

T_Entity = TypeVar("T_Entity", bound="Entity")


class FieldKind(str, Enum):
    """
    How a declared field is treated during hydration and flattening.
    """

    PLAIN = "plain"
    ENTITY = "entity"
    COLLECTION = "collection"


@dataclass(frozen=True)
class FieldSpec:
    """
    Resolved declaration of one entity field.

    ``target`` is the nested class used to build the value for ``ENTITY`` and
    ``COLLECTION`` fields, and ``None`` for plain ones.
    """

    name: str
    kind: FieldKind
    target: Optional[type] = None
    init: bool = True


_FIELD_SPECS_ATTR = "_simple_dto_field_specs"


def _unwrap_optional(hint: Any) -> Any:
    """
    Reduce ``Optional[X]`` / ``X | None`` to ``X``; leave other hints alone.
    """

    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _classify(hint: Any) -> Tuple[FieldKind, Optional[type]]:
    hint = _unwrap_optional(hint)
    if isinstance(hint, type):
        if issubclass(hint, Entity):
            return FieldKind.ENTITY, hint
        if issubclass(hint, EntityCollection):
            return FieldKind.COLLECTION, hint
    return FieldKind.PLAIN, None


def _build_field_specs(cls: type) -> Dict[str, FieldSpec]:
    # is_dataclass() is inherited, so check the class's own namespace
    if "__dataclass_fields__" not in cls.__dict__:
        raise DtoDefinitionError(f"{cls.__name__} must be declared with @dataclass")

    try:
        hints = get_type_hints(cls)
    except (NameError, AttributeError, TypeError) as exc:
        raise FieldResolutionError(
            f"Cannot resolve field types of {cls.__name__}: {exc}"
        ) from exc

    specs: Dict[str, FieldSpec] = {}
    for declared in fields(cls):
        kind, target = _classify(hints.get(declared.name, Any))
        specs[declared.name] = FieldSpec(
            name=declared.name,
            kind=kind,
            target=target,
            init=declared.init,
        )

    logger.debug(
        "Resolved %d field(s) for %s: %s",
        len(specs),
        cls.__name__,
        ", ".join(f"{name}={spec.kind.value}" for name, spec in specs.items()),
    )
    return specs


@dataclass
class Entity:
    """
    Base class for DTOs hydrated from raw request data.

    Subclasses must be dataclasses and should give every field a default so
    partial input can be hydrated.
    """

    # Introspection

    @classmethod
    def field_specs(cls) -> Dict[str, FieldSpec]:
        """
        Return the cached field-type table of this variant.
        """

        # own namespace only; a subclass must not reuse its parent's table
        specs = cls.__dict__.get(_FIELD_SPECS_ATTR)
        if specs is None:
            specs = _build_field_specs(cls)
            setattr(cls, _FIELD_SPECS_ATTR, specs)
        return specs

    @classmethod
    def field_type(cls, name: str) -> FieldSpec:
        """
        Return the declaration of ``name``.

        Raises ``MissingPropertyError`` if this variant does not declare it.
        """

        try:
            return cls.field_specs()[name]
        except KeyError:
            raise MissingPropertyError(name, cls) from None

    @classmethod
    def is_entity_field(cls, name: str) -> bool:
        return cls.field_type(name).kind is FieldKind.ENTITY

    @classmethod
    def is_collection_field(cls, name: str) -> bool:
        return cls.field_type(name).kind is FieldKind.COLLECTION

    # Hydration

    @classmethod
    def from_dict(cls: Type[T_Entity], data: Optional[Mapping[str, Any]] = None) -> T_Entity:
        """
        Construct this entity from a raw mapping, hydrating nested entities
        and collections.

        Keys that are not declared fields are ignored. Declared fields that
        are missing from ``data`` keep their defaults.
        """

        if cls is Entity:
            raise DtoDefinitionError("Entity is abstract; subclass it to declare fields")
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise HydrationError(
                f"{cls.__name__} expects a mapping, got {type(data).__name__}"
            )

        specs = cls.field_specs()
        init_values: Dict[str, Any] = {}
        late_values: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in specs:
                logger.debug("Ignoring unknown key %r for %s", key, cls.__name__)
                continue

            spec = cls.field_type(key)
            value = cls._hydrate_value(spec, value)
            if spec.init:
                init_values[key] = value
            else:
                late_values[key] = value

        try:
            instance = cls(**init_values)
        except TypeError as exc:
            raise HydrationError(f"Cannot construct {cls.__name__}: {exc}") from exc

        for key, value in late_values.items():
            object.__setattr__(instance, key, value)

        return instance

    @classmethod
    def _hydrate_value(cls, spec: FieldSpec, value: Any) -> Any:
        target = spec.target

        if spec.kind is FieldKind.ENTITY:
            if isinstance(value, Mapping):
                logger.debug("Hydrating %s.%s as %s", cls.__name__, spec.name, target.__name__)
                return target.from_dict(value)
            if isinstance(value, (list, tuple)):
                # positional keys never name a field, so this yields the defaults
                logger.debug("Hydrating %s.%s as %s from a sequence", cls.__name__, spec.name, target.__name__)
                return target.from_dict(dict(enumerate(value)))

        if spec.kind is FieldKind.COLLECTION and not isinstance(value, EntityCollection):
            if isinstance(value, Mapping):
                logger.debug("Hydrating %s.%s as %s", cls.__name__, spec.name, target.__name__)
                return target(value.values())
            if isinstance(value, (list, tuple)):
                logger.debug("Hydrating %s.%s as %s", cls.__name__, spec.name, target.__name__)
                return target(value)

        if target is not None and value is not None and not isinstance(value, target):
            logger.debug(
                "Keeping %s value for %s.%s as-is (declared %s)",
                type(value).__name__,
                cls.__name__,
                spec.name,
                target.__name__,
            )
        return value

    # Flattening

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert this entity, and all nested entities and collections, into
        plain nested data.
        """

        result: Dict[str, Any] = {}
        for declared in fields(self):
            value = getattr(self, declared.name)
            if isinstance(value, Entity):
                value = value.to_dict()
            elif isinstance(value, EntityCollection):
                value = value.to_list()
            result[declared.name] = value
        return result

    # Wire bridge

    def to_wire(self) -> Dict[str, Any]:
        return self.to_dict()

    @classmethod
    def from_wire(cls: Type[T_Entity], value: Optional[Mapping[str, Any]]) -> T_Entity:
        return cls.from_dict(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return wire_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Dict[str, Any]:
        return entity_json_schema(cls, handler)
