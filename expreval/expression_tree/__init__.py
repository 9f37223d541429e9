"""Expression Tree Module

Tokens, tree nodes, parsing, optimization and tree utilities.
"""

from .core import (
    Node, ConstantNode, ParameterNode, UnaryOpNode, BinaryOpNode, Token,
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
    UnaryFunction, BinaryFunction, UnaryOperator, BinaryOperator
)
from .parsing import parse, preparse, build_tree
from .optimization import optimize_tree, is_evaluable
from .utils import SymPySimplifier, tree_to_sympy, calculate_tree_depth, get_parameters

__all__ = [
    "Node", "ConstantNode", "ParameterNode", "UnaryOpNode", "BinaryOpNode", "Token",
    "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP",
    "UnaryFunction", "BinaryFunction", "UnaryOperator", "BinaryOperator",
    "parse", "preparse", "build_tree",
    "optimize_tree", "is_evaluable",
    "SymPySimplifier", "tree_to_sympy", "calculate_tree_depth", "get_parameters"
]
