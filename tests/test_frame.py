import pandas as pd

from relcalc.algebra.engine.calculator import RelationalCalculator
from relcalc.algebra.engine.frame import to_frame, from_frame, to_records
from relcalc.algebra.engine.operators import ErrorKind
from relcalc.algebra.model.relation import Relation


def test_to_frame_keeps_schema_and_order():
    relation = Relation(["name", "age"])
    relation.insert(["Alice", "30"])
    relation.insert(["Bob", "25"])

    df = to_frame(relation)
    assert list(df.columns) == ["name", "age"]
    assert df["name"].tolist() == ["Alice", "Bob"]
    assert to_records(relation) == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]

def test_to_frame_empty_relation():
    df = to_frame(Relation(["a", "b"]))
    assert list(df.columns) == ["a", "b"]
    assert len(df) == 0

def test_from_frame_coerces_to_strings():
    df = pd.DataFrame({"id": [1, 2, 2], "score": [0.5, None, None]})
    relation = from_frame(df)
    assert relation.attributes() == ("id", "score")
    assert relation.tuple_count() == 2
    assert relation.contains(["1", "0.5"])
    assert relation.contains(["2", ""])

def test_from_frame_duplicate_columns():
    df = pd.DataFrame([[1, 2]], columns=["a", "a"])
    assert from_frame(df) is None

def test_calculator_frame_round_trip():
    calc = RelationalCalculator()
    df = pd.DataFrame({"city": ["Paris", "Lyon"], "country": ["FR", "FR"]})
    assert calc.assign_frame("cities", df).ok
    assert calc.get("cities").tuple_count() == 2

    exported = calc.to_frame("cities")
    assert exported.to_dict(orient="records") == df.to_dict(orient="records")
    assert calc.to_frame("missing") is None

    bad = pd.DataFrame([[1, 2]], columns=["a", "a"])
    assert calc.assign_frame("bad", bad).kind is ErrorKind.SCHEMA_CONFLICT
    assert calc.get("bad") is None
