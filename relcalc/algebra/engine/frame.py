import pandas as pd
from typing import Any, Dict, List, Optional
import logging

from ..model.relation import Relation

logger = logging.getLogger(__name__)

def to_frame(relation: Relation) -> pd.DataFrame:
    """
    Export a relation as a DataFrame with one object-dtype column per attribute.

    Rows come out in the relation's insertion order.
    """
    columns = list(relation.attributes())
    rows = [list(row) for row in relation.tuples() if len(row) == len(columns)]
    if not rows:
        return pd.DataFrame({col: pd.Series(dtype="object") for col in columns})
    df = pd.DataFrame(rows, columns=columns)
    for col in columns:
        df[col] = df[col].astype(object)
    return df.reset_index(drop=True)

def from_frame(df: pd.DataFrame) -> Optional[Relation]:
    """
    Build a relation from a DataFrame.

    Column labels become attributes and every value is coerced to str; missing
    values become the empty string. Duplicate rows collapse.

    Returns:
        The relation, or None if the column labels are not distinct.
    """
    columns = [str(col) for col in df.columns]
    if len(set(columns)) != len(columns):
        logger.warning(f"[FROM_FRAME] Duplicate column labels: {columns}")
        return None

    relation = Relation(columns)
    cleaned = df.astype(object).where(pd.notna(df), "")
    for record in cleaned.itertuples(index=False, name=None):
        relation.insert(tuple(str(value) for value in record))
    logger.debug(f"[FROM_FRAME] Loaded {relation.tuple_count()} tuples into {relation!r}")
    return relation

def to_records(relation: Relation) -> List[Dict[str, Any]]:
    return to_frame(relation).to_dict(orient="records")
