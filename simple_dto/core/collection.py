"""
Typed collection of entities.

An ``EntityCollection`` subclass is bound to a single entity variant through
its ``item_class`` attribute. Construction turns every raw mapping into that
variant, so code holding a collection never sees raw data::

    @dataclass
    class LineItem(Entity):
        sku: str = ""
        quantity: int = 0


    class LineItemCollection(EntityCollection):
        item_class = LineItem


    items = LineItemCollection([{"sku": "A-1", "quantity": 2}])
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional, Type, TypeVar

from .errors import DtoDefinitionError, HydrationError
from .logging import get_logger
from .wire import collection_json_schema, wire_core_schema

if TYPE_CHECKING:
    from .dto import Entity


logger = get_logger("simple_dto.core.collection")

T_Collection = TypeVar("T_Collection", bound="EntityCollection")


class EntityCollection(list):
    """
    Ordered sequence holding instances of exactly one entity variant.

    Everything besides construction and flattening (iteration, indexing,
    ``len``, membership) is plain ``list`` behaviour.
    """

    item_class: ClassVar[Optional[Type["Entity"]]] = None

    def __init__(self, items: Iterable[Any] = ()) -> None:
        item_class = type(self).item_class
        if item_class is None:
            raise DtoDefinitionError(
                f"{type(self).__name__} must declare an item_class"
            )

        coerced: List["Entity"] = []
        for index, item in enumerate(items):
            if isinstance(item, item_class):
                coerced.append(item)
                continue
            if isinstance(item, Mapping):
                coerced.append(item_class.from_dict(item))
                continue
            raise HydrationError(
                f"{type(self).__name__} item {index} must be a mapping or "
                f"{item_class.__name__}, got {type(item).__name__}"
            )

        logger.debug("Built %s with %d item(s)", type(self).__name__, len(coerced))
        super().__init__(coerced)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    def to_list(self) -> List[Dict[str, Any]]:
        """
        Flatten every element to plain data, preserving order.
        """

        return [item.to_dict() for item in self]

    def to_wire(self) -> List[Dict[str, Any]]:
        return self.to_list()

    @classmethod
    def from_wire(cls: Type[T_Collection], value: Iterable[Any]) -> T_Collection:
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return wire_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> Dict[str, Any]:
        return collection_json_schema(cls, handler)
