"""
Enumerations for calculator operators and failure kinds.
"""
from enum import Enum
from typing import Optional, Union

class Operator(str, Enum):
    """
    Operators understood by the RelationalCalculator.

    Values are the single-letter codes of the calculator's command set; the full
    lowercase names are accepted as well by `Operator.parse`.
    """
    INSERT = "i"
    DELETE = "d"
    PROJECT = "p"
    SELECT = "s"
    MULTIPLY = "m"
    UNION = "u"
    INTERSECTION = "n"

    @classmethod
    def get_all_codes(cls) -> list[str]:
        """Return a list of all operator codes."""
        return [op.value for op in cls]

    @classmethod
    def parse(cls, operator: Union[str, 'Operator', None]) -> Optional['Operator']:
        """Resolve an enum member, a code or a name; None if unrecognized."""
        if isinstance(operator, Operator):
            return operator
        if not isinstance(operator, str):
            return None
        token = operator.strip().lower()
        for op in cls:
            if token == op.value or token == op.name.lower():
                return op
        return None

    def is_update(self) -> bool:
        return self in (Operator.INSERT, Operator.DELETE)

    def is_binary(self) -> bool:
        return not self.is_update()


class ErrorKind(str, Enum):
    """Why a calculator operation did not succeed."""
    SCHEMA_CONFLICT = "schema_conflict"
    ARITY_MISMATCH = "arity_mismatch"
    PROJECTION_INVALID = "projection_invalid"
    SCHEMA_MISMATCH = "schema_mismatch"
    UNKNOWN_RELATION = "unknown_relation"
    INVALID_ATTRIBUTES = "invalid_attributes"
    INVALID_OPERATOR = "invalid_operator"
    DUPLICATE_TUPLE = "duplicate_tuple"
    TUPLE_NOT_FOUND = "tuple_not_found"
