"""
In-memory relational algebra calculator.
"""
from .algebra.model.relation import Relation
from .algebra.model.schema import RelationSchema
from .algebra.engine.calculator import RelationalCalculator, OperationResult
from .algebra.engine.operators import Operator, ErrorKind
from .algebra.engine.config import config

__all__ = ['Relation', 'RelationSchema', 'RelationalCalculator', 'OperationResult',
           'Operator', 'ErrorKind', 'config']
