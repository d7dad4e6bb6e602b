"""
Bridge between simple-dto objects and pydantic's serialization machinery.

Entities and collections expose ``to_wire`` / ``from_wire``. The schema
built here lets pydantic (and anything built on it, such as FastAPI request
and response models) call those two methods when it meets one of our types
as a field annotation.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic_core import core_schema

from .errors import SimpleDtoError


def wire_core_schema(cls: type) -> core_schema.CoreSchema:
    """
    Build a pydantic core schema that hydrates ``cls`` from wire data and
    dumps it back with ``to_wire``.
    """

    def validate(value: Any) -> Any:
        if isinstance(value, cls):
            return value
        try:
            return cls.from_wire(value)  # type: ignore[attr-defined]
        except SimpleDtoError as exc:
            # pydantic only turns ValueError/AssertionError into validation errors
            raise ValueError(str(exc)) from exc

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda instance: instance.to_wire(),
        ),
    )


def entity_json_schema(cls: type, handler: Any) -> Dict[str, Any]:
    """
    JSON schema for an entity on the wire: an object of flattened fields.
    """

    json_schema = handler(core_schema.dict_schema(keys_schema=core_schema.str_schema()))
    json_schema["title"] = cls.__name__
    return json_schema


def collection_json_schema(cls: type, handler: Any) -> Dict[str, Any]:
    """
    JSON schema for a collection on the wire: an array of flattened entities.
    """

    item_class = getattr(cls, "item_class", None)
    items_schema = core_schema.dict_schema(keys_schema=core_schema.str_schema())
    json_schema = handler(core_schema.list_schema(items_schema))
    if item_class is not None:
        json_schema["items"]["title"] = item_class.__name__
    json_schema["title"] = cls.__name__
    return json_schema
