from dataclasses import dataclass
from typing import Iterable, Optional

@dataclass(frozen=True, slots=True)
class RelationSchema:
    """
    Relation schema: the ordered, pairwise distinct attribute names of a relation.

    Use `RelationSchema.of(...)` to build one from user input; duplicate names
    collapse to the empty schema instead of raising.
    """
    attributes: tuple[str, ...] = ()

    def __post_init__(self):
        if len(set(self.attributes)) != len(self.attributes):
            raise ValueError("RelationSchema: attribute names must be distinct.")

    @classmethod
    def of(cls, attributes: Optional[Iterable[str]]) -> 'RelationSchema':
        if attributes is None:
            return cls()
        names = tuple(attributes)
        if len(set(names)) != len(names):
            return cls()
        return cls(names)

    @property
    def arity(self) -> int:
        return len(self.attributes)

    def index_of(self, name: str) -> int:
        return self.attributes.index(name)

    def contains_all(self, names: Iterable[str]) -> bool:
        return set(names).issubset(self.attributes)

    def merge(self, other: 'RelationSchema') -> 'RelationSchema':
        """Attributes of self in order, then those of `other` not already present."""
        extra = tuple(a for a in other.attributes if a not in self.attributes)
        return RelationSchema(self.attributes + extra)

    def shared_with(self, other: 'RelationSchema') -> tuple[str, ...]:
        return tuple(a for a in self.attributes if a in other.attributes)

    def __repr__(self) -> str:
        return f"({', '.join(self.attributes)})"
