"""Utilities for expression trees."""

from .sympy_utils import SymPySimplifier, tree_to_sympy
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_parameters, get_constants, validate_tree_structure
)

__all__ = [
    'SymPySimplifier', 'tree_to_sympy',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_parameters', 'get_constants', 'validate_tree_structure'
]
