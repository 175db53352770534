import logging
from typing import Iterable, Iterator, Optional, Sequence

from .schema import RelationSchema
from ..engine.config import config

logger = logging.getLogger(__name__)

Row = tuple[str, ...]

class Relation:
    """
    An in-memory relation: an ordered attribute schema plus a set of string tuples.

    insert/delete mutate the relation in place. Every other operator returns a
    freshly built Relation (or None when its precondition fails) and never shares
    the tuple storage of its inputs.

    Tuples are kept in a dict used as an insertion-ordered set, so equality is
    element-wise and case-sensitive, and display order is the insertion order.
    """
    __slots__ = ("_schema", "_tuples")

    def __init__(self, attributes: Optional[Iterable[str]]) -> None:
        names = tuple(attributes) if attributes is not None else None
        self._schema = RelationSchema.of(names)
        if names and self._schema.arity == 0:
            logger.debug(f"[RELATION] Duplicate attributes in {names!r}, using empty schema")
        self._tuples: dict[Row, None] = {}

    @classmethod
    def from_schema(cls, schema: RelationSchema) -> 'Relation':
        relation = cls.__new__(cls)
        relation._schema = schema
        relation._tuples = {}
        return relation

    @property
    def schema(self) -> RelationSchema:
        return self._schema

    def attributes(self) -> tuple[str, ...]:
        return self._schema.attributes

    def columns(self) -> int:
        return self._schema.arity

    def tuple_count(self) -> int:
        return len(self._tuples)

    def tuples(self) -> tuple[Row, ...]:
        """Snapshot of the stored tuples, in insertion order."""
        return tuple(self._tuples)

    def insert(self, row: Sequence[str]) -> bool:
        """
        Add a tuple unless an element-wise equal one is already stored.

        The comparison is case-sensitive. Arity is not checked unless
        `relation.strict_arity` is enabled in the configuration.

        Returns:
            True if the tuple was added, False otherwise.
        """
        key = tuple(row)
        if config.is_strict_arity() and len(key) != self.columns():
            logger.debug(f"[INSERT] Rejected {key}: arity {len(key)} != {self.columns()}")
            return False
        if key in self._tuples:
            return False
        self._tuples[key] = None
        return True

    def delete(self, row: Sequence[str]) -> bool:
        key = tuple(row)
        if len(key) != self.columns():
            logger.debug(f"[DELETE] Rejected {key}: arity {len(key)} != {self.columns()}")
            return False
        if key not in self._tuples:
            return False
        del self._tuples[key]
        return True

    def contains(self, row: Sequence[str]) -> bool:
        key = tuple(row)
        if len(key) != self.columns():
            return False
        return key in self._tuples

    def equals(self, other: Optional['Relation']) -> bool:
        """Same attribute sequence (order-sensitive) and the same set of tuples."""
        if not isinstance(other, Relation):
            return False
        return (self._schema.attributes == other._schema.attributes
                and self._tuples.keys() == other._tuples.keys())

    def copy(self) -> 'Relation':
        duplicate = Relation.from_schema(self._schema)
        duplicate._tuples = dict(self._tuples)
        return duplicate

    def _rows(self) -> Iterator[Row]:
        # rows stored without arity checks cannot be mapped by position
        arity = self.columns()
        for row in self._tuples:
            if len(row) == arity:
                yield row
            else:
                logger.debug(f"[RELATION] Skipping malformed row {row} for schema {self._schema!r}")

    def project(self, new_attributes: Sequence[str]) -> Optional['Relation']:
        """
        Restrict the relation to `new_attributes`, in the order given.

        Returns None if a name is not in the schema or is repeated.
        Projected rows that coincide are collapsed.
        """
        names = tuple(new_attributes)
        if not self._schema.contains_all(names):
            logger.debug(f"[PROJECT] {names} is not a subset of {self._schema!r}")
            return None
        if len(set(names)) != len(names):
            logger.debug(f"[PROJECT] Repeated attribute in {names}")
            return None

        positions = [self._schema.index_of(name) for name in names]
        projected = Relation.from_schema(RelationSchema(names))
        for row in self._rows():
            projected.insert(tuple(row[i] for i in positions))
        return projected

    def select(self, condition: Sequence[str], wildcard: Optional[str] = None) -> Optional['Relation']:
        """
        Keep the tuples matching a positional condition.

        Each position of `condition` is either the wildcard token, which matches
        anything, or a value that must equal the tuple's value at that position.

        Args:
            condition: One entry per attribute.
            wildcard: Overrides the configured `relation.wildcard` token.

        Returns:
            A relation with the same schema, or None if the condition has the wrong length.
        """
        condition = tuple(condition)
        if len(condition) != self.columns():
            logger.debug(f"[SELECT] Condition {condition} does not fit schema {self._schema!r}")
            return None
        if wildcard is None:
            wildcard = config.get_wildcard()

        checks = [(i, value) for i, value in enumerate(condition) if value != wildcard]
        selected = Relation.from_schema(self._schema)
        for row in self._rows():
            if all(row[i] == value for i, value in checks):
                selected.insert(row)
        return selected

    def multiply(self, other: 'Relation') -> 'Relation':
        """
        Natural join with `other`.

        The result schema lists this relation's attributes, then the attributes of
        `other` not already present. Rows pair up when they agree on every shared
        attribute; with no shared attribute this is the cartesian product.
        """
        combined = self._schema.merge(other._schema)
        shared = self._schema.shared_with(other._schema)
        left_keys = [self._schema.index_of(name) for name in shared]
        right_keys = [other._schema.index_of(name) for name in shared]
        # positions of `other`'s non-shared attributes, appended after ours
        right_extra = [other._schema.index_of(name) for name in combined.attributes[self.columns():]]

        result = Relation.from_schema(combined)
        right_rows = list(other._rows())
        for left in self._rows():
            left_key = [left[i] for i in left_keys]
            for right in right_rows:
                if [right[i] for i in right_keys] != left_key:
                    continue
                result.insert(left + tuple(right[i] for i in right_extra))
        return result

    def union(self, other: 'Relation') -> Optional['Relation']:
        if self._schema.attributes != other._schema.attributes:
            logger.debug(f"[UNION] Schema mismatch {self._schema!r} vs {other._schema!r}")
            return None

        result = Relation.from_schema(self._schema)
        for row in self._rows():
            result.insert(row)
        for row in other._rows():
            result.insert(row)
        return result

    def intersection(self, other: 'Relation') -> Optional['Relation']:
        if self._schema.attributes != other._schema.attributes:
            logger.debug(f"[INTERSECTION] Schema mismatch {self._schema!r} vs {other._schema!r}")
            return None

        result = Relation.from_schema(self._schema)
        for row in self._rows():
            if other.contains(row):
                result.insert(row)
        return result

    def to_display(self, separator: Optional[str] = None) -> str:
        """Header line of attribute names, then one line per tuple."""
        if separator is None:
            separator = config.get_separator()
        lines = [separator.join(self._schema.attributes)]
        lines.extend(separator.join(map(str, row)) for row in self._tuples)
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.to_display()

    def __repr__(self) -> str:
        return f"Relation(attributes={self._schema.attributes!r}, tuples={len(self._tuples)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __len__(self) -> int:
        return len(self._tuples)

    def __contains__(self, row: object) -> bool:
        if not isinstance(row, (tuple, list)):
            return False
        return self.contains(row)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.tuples())
