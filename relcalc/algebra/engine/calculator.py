import logging
from typing import Optional, Sequence, Union

import pandas as pd

from ..model.relation import Relation
from .config import config
from .operators import Operator, ErrorKind
from . import frame as frame_io

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('[%(levelname)s] %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(config.get_log_level())

class OperationResult:
    """Outcome of a calculator call.

    Calls never raise for domain failures; they return one of these instead, so
    callers can branch on `ok` and still learn what went wrong from `kind`.
    """
    def __init__(self, status="success", kind=None, message="", relation=None):
        self.status = status  # success, error
        self.kind = kind
        self.message = message
        self.relation = relation

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def has_error(self) -> bool:
        return self.status == "error"

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"OperationResult(success, {self.message!r})"
        return f"OperationResult(error, {self.kind.value}, {self.message!r})"

    @classmethod
    def success(cls, relation=None, message=""):
        return cls(status="success", relation=relation, message=message)

    @classmethod
    def error(cls, kind: ErrorKind, message: str):
        """Create an error result with the specified kind and message"""
        return cls(status="error", kind=kind, message=message)

RowLike = Sequence[str]
OperatorLike = Union[Operator, str]

class RelationalCalculator:
    """
    Holds named relations and applies the relational operators to them.

    Every mutating method returns an OperationResult. The most recent one is
    also kept on the instance, so `ok()` reports whether the last mutating call
    succeeded.
    """
    def __init__(self) -> None:
        self._variables: dict[str, Relation] = {}
        self._last_result: OperationResult = OperationResult.error(
            ErrorKind.INVALID_OPERATOR, "No operation performed yet"
        )

    def _record(self, result: OperationResult) -> OperationResult:
        self._last_result = result
        if result.has_error():
            logger.debug(f"[RESULT] {result!r}")
        return result

    def assign(self, name: str, attributes: Optional[RowLike]) -> OperationResult:
        """
        Bind `name` to a new empty relation over `attributes`, replacing any
        previous binding. Fails when `attributes` is None or empty.
        """
        if attributes is None or len(attributes) == 0:
            logger.warning(f"[ASSIGN] Refusing to assign '{name}': no attributes given")
            return self._record(OperationResult.error(
                ErrorKind.INVALID_ATTRIBUTES, f"No attributes given for '{name}'"
            ))

        relation = Relation(attributes)
        self._variables[name] = relation
        logger.debug(f"[ASSIGN] {name} := {relation!r}")

        if relation.columns() == 0:
            # still assigned, with an empty schema
            logger.warning(f"[ASSIGN] Duplicate attributes for '{name}': {list(attributes)}")
            return self._record(OperationResult.success(
                relation, message=f"{ErrorKind.SCHEMA_CONFLICT.value}: '{name}' has an empty schema"
            ))
        return self._record(OperationResult.success(relation))

    def update(self, name: str, operator: OperatorLike, row: Optional[RowLike]) -> OperationResult:
        """Insert a tuple into, or delete a tuple from, the relation bound to `name`."""
        relation = self._variables.get(name)
        if relation is None:
            return self._record(OperationResult.error(
                ErrorKind.UNKNOWN_RELATION, f"Unknown relation '{name}'"
            ))
        if row is None or len(row) != relation.columns():
            return self._record(OperationResult.error(
                ErrorKind.ARITY_MISMATCH,
                f"Tuple {row!r} does not fit the {relation.columns()} attributes of '{name}'"
            ))

        op = Operator.parse(operator)
        if op is Operator.INSERT:
            if relation.insert(row):
                logger.debug(f"[UPDATE] Inserted {tuple(row)} into '{name}'")
                return self._record(OperationResult.success(relation))
            return self._record(OperationResult.error(
                ErrorKind.DUPLICATE_TUPLE, f"Tuple {tuple(row)} already in '{name}'"
            ))
        if op is Operator.DELETE:
            if relation.delete(row):
                logger.debug(f"[UPDATE] Deleted {tuple(row)} from '{name}'")
                return self._record(OperationResult.success(relation))
            return self._record(OperationResult.error(
                ErrorKind.TUPLE_NOT_FOUND, f"Tuple {tuple(row)} not in '{name}'"
            ))
        return self._record(OperationResult.error(
            ErrorKind.INVALID_OPERATOR, f"Operator {operator!r} is not an update operator"
        ))

    def assign_operation(self, target: str, source_b: str, operator: OperatorLike, source_c: str) -> OperationResult:
        """
        Evaluate `source_b <operator> source_c` and bind the result to `target`.

        For project and select, the attribute list of `source_c` is the argument
        (projected names, or the selection condition). For multiply, union and
        intersection, `source_c` is the second operand. The target is left
        untouched when the operation fails.
        """
        rel_b = self._variables.get(source_b)
        rel_c = self._variables.get(source_c)
        if rel_b is None or rel_c is None:
            missing = source_b if rel_b is None else source_c
            return self._record(OperationResult.error(
                ErrorKind.UNKNOWN_RELATION, f"Unknown relation '{missing}'"
            ))

        op = Operator.parse(operator)
        if op is None or not op.is_binary():
            return self._record(OperationResult.error(
                ErrorKind.INVALID_OPERATOR, f"Operator {operator!r} cannot be assigned"
            ))

        match op:
            case Operator.PROJECT:
                result = rel_b.project(rel_c.attributes())
                failure = ErrorKind.PROJECTION_INVALID
            case Operator.SELECT:
                result = rel_b.select(rel_c.attributes())
                failure = ErrorKind.ARITY_MISMATCH
            case Operator.MULTIPLY:
                result = rel_b.multiply(rel_c)
                failure = ErrorKind.SCHEMA_MISMATCH
            case Operator.UNION:
                result = rel_b.union(rel_c)
                failure = ErrorKind.SCHEMA_MISMATCH
            case Operator.INTERSECTION:
                result = rel_b.intersection(rel_c)
                failure = ErrorKind.SCHEMA_MISMATCH

        if result is None:
            return self._record(OperationResult.error(
                failure, f"{op.name.lower()} of '{source_b}' with '{source_c}' failed"
            ))

        self._variables[target] = result
        logger.debug(f"[ASSIGN_OP] {target} := {source_b} {op.name.lower()} {source_c} -> {result!r}")
        return self._record(OperationResult.success(result))

    def assign_union(self, target: str, source_b: str, source_c: str) -> OperationResult:
        return self.assign_operation(target, source_b, Operator.UNION, source_c)

    def assign_intersection(self, target: str, source_b: str, source_c: str) -> OperationResult:
        return self.assign_operation(target, source_b, Operator.INTERSECTION, source_c)

    def assign_frame(self, name: str, df: pd.DataFrame) -> OperationResult:
        """Bind `name` to a relation built from a DataFrame."""
        relation = frame_io.from_frame(df)
        if relation is None:
            return self._record(OperationResult.error(
                ErrorKind.SCHEMA_CONFLICT, f"Duplicate column labels for '{name}'"
            ))
        if relation.columns() == 0:
            return self._record(OperationResult.error(
                ErrorKind.INVALID_ATTRIBUTES, f"No columns given for '{name}'"
            ))
        self._variables[name] = relation
        logger.debug(f"[ASSIGN_FRAME] {name} := {relation!r}")
        return self._record(OperationResult.success(relation))

    def to_frame(self, name: str) -> Optional[pd.DataFrame]:
        relation = self._variables.get(name)
        if relation is None:
            return None
        return frame_io.to_frame(relation)

    def remove(self, name: str) -> OperationResult:
        if self._variables.pop(name, None) is None:
            return self._record(OperationResult.error(
                ErrorKind.UNKNOWN_RELATION, f"Unknown relation '{name}'"
            ))
        logger.debug(f"[REMOVE] {name}")
        return self._record(OperationResult.success())

    def reset(self) -> None:
        """Drop every variable."""
        self._variables.clear()

    def variables(self) -> list[str]:
        return sorted(self._variables)

    def get(self, name: str) -> Optional[Relation]:
        return self._variables.get(name)

    def to_string(self, name: str) -> str:
        relation = self._variables.get(name)
        if relation is None:
            return config.get_not_found_message()
        return relation.to_display()

    def ok(self) -> bool:
        return self._last_result.ok

    @property
    def last_result(self) -> OperationResult:
        return self._last_result
