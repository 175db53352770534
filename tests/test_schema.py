import pytest

from relcalc.algebra.model.schema import RelationSchema


def test_schema_of_keeps_order():
    schema = RelationSchema.of(["name", "age", "city"])
    assert schema.attributes == ("name", "age", "city")
    assert schema.arity == 3
    assert schema.index_of("city") == 2

def test_schema_of_duplicates_degrades_to_empty():
    assert RelationSchema.of(["a", "b", "a"]).attributes == ()
    assert RelationSchema.of(None).arity == 0

def test_schema_constructor_rejects_duplicates():
    with pytest.raises(ValueError):
        RelationSchema(("a", "a"))

def test_schema_merge_and_shared():
    left = RelationSchema.of(["id", "x"])
    right = RelationSchema.of(["y", "id"])
    assert left.merge(right).attributes == ("id", "x", "y")
    assert left.shared_with(right) == ("id",)
    assert left.contains_all(["x"])
    assert not left.contains_all(["x", "z"])
