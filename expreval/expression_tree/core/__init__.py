"""Core expression tree components."""

from .node import Node, ConstantNode, ParameterNode, UnaryOpNode, BinaryOpNode, reduce_tree
from .tokens import Token
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, OP_SYMBOLS, CONSTANTS,
    UnaryFunction, BinaryFunction, UnaryOperator, BinaryOperator,
    ComposedUnary, FirstArgumentComposed, SecondArgumentComposed, ResultComposed,
    precedence, stronger, is_binary
)

__all__ = [
    'Node', 'ConstantNode', 'ParameterNode', 'UnaryOpNode', 'BinaryOpNode', 'reduce_tree',
    'Token',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'OP_SYMBOLS', 'CONSTANTS',
    'UnaryFunction', 'BinaryFunction', 'UnaryOperator', 'BinaryOperator',
    'ComposedUnary', 'FirstArgumentComposed', 'SecondArgumentComposed', 'ResultComposed',
    'precedence', 'stronger', 'is_binary'
]
