"""
Unit tests for EntityCollection construction and flattening.
"""

from dataclasses import dataclass

import pytest

from simple_dto.core.collection import EntityCollection
from simple_dto.core.dto import Entity
from simple_dto.core.errors import DtoDefinitionError, HydrationError


@dataclass
class Tag(Entity):
    label: str = ""
    weight: int = 1


class TagCollection(EntityCollection):
    item_class = Tag


@dataclass
class Other(Entity):
    label: str = ""


class UnboundCollection(EntityCollection):
    pass


class TestConstruction:
    """Test coercion of raw items into the element variant."""

    def test_raw_mappings_become_entities(self):
        """Test that each mapping is hydrated into item_class."""
        tags = TagCollection([{"label": "urgent", "weight": 3}, {"label": "later"}])

        assert len(tags) == 2
        assert all(isinstance(tag, Tag) for tag in tags)
        assert tags[0] == Tag(label="urgent", weight=3)
        assert tags[1].weight == 1

    def test_mixed_input_preserves_order_and_identity(self):
        """Test that existing instances are kept and order matches input."""
        existing = Tag(label="b")
        tags = TagCollection([{"label": "a"}, existing, {"label": "c"}])

        assert [tag.label for tag in tags] == ["a", "b", "c"]
        assert tags[1] is existing
        assert all(isinstance(tag, Tag) for tag in tags)

    def test_no_deduplication(self):
        """Test that equal items are all kept."""
        tags = TagCollection([{"label": "a"}, {"label": "a"}])

        assert len(tags) == 2

    def test_empty(self):
        """Test that a collection may be built with no items."""
        assert list(TagCollection()) == []

    def test_accepts_any_iterable(self):
        """Test that generators are consumed in order."""
        tags = TagCollection({"label": str(n)} for n in range(3))

        assert [tag.label for tag in tags] == ["0", "1", "2"]

    def test_scalar_item_raises(self):
        """Test that a bare scalar item is rejected with its index."""
        with pytest.raises(HydrationError, match="item 1 must be a mapping or Tag, got int"):
            TagCollection([{"label": "a"}, 5])

    def test_foreign_entity_item_raises(self):
        """Test that an instance of another variant is rejected."""
        with pytest.raises(HydrationError, match="got Other"):
            TagCollection([Other(label="x")])

    def test_missing_item_class_raises(self):
        """Test that a collection must declare its element variant."""
        with pytest.raises(DtoDefinitionError, match="UnboundCollection must declare an item_class"):
            UnboundCollection([])

    def test_base_collection_is_abstract(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(DtoDefinitionError):
            EntityCollection()


class TestSequenceBehaviour:
    """Test that list behaviour is inherited."""

    def test_iteration_indexing_and_membership(self):
        """Test basic sequence operations."""
        first = Tag(label="a")
        tags = TagCollection([first, {"label": "b"}])

        assert tags[-1].label == "b"
        assert first in tags
        assert [tag.label for tag in tags] == ["a", "b"]

    def test_repr_names_the_variant(self):
        """Test that repr shows the collection class."""
        assert repr(TagCollection()) == "TagCollection([])"


class TestFlatten:
    """Test flattening a collection to plain data."""

    def test_to_list(self):
        """Test that each element is flattened in order."""
        tags = TagCollection([{"label": "a", "weight": 2}, Tag(label="b")])

        assert tags.to_list() == [{"label": "a", "weight": 2}, {"label": "b", "weight": 1}]

    def test_wire_bridge(self):
        """Test that to_wire/from_wire mirror to_list/construction."""
        raw = [{"label": "a", "weight": 2}]
        tags = TagCollection.from_wire(raw)

        assert isinstance(tags, TagCollection)
        assert tags.to_wire() == raw
