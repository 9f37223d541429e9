"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. None of them recurse, so
they work on chains of any length.
"""

from collections import deque
from typing import List, Set, Type, cast

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, ParameterNode, reduce_tree


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    List every node of the tree.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (level by level, the default) or
            'depth_first' (pre-order, left child before right)

    Returns:
        The nodes in visiting order
    """
    if traversal_order == 'breadth_first':
        queue = deque([node])
        visited = []
        while queue:
            current = queue.popleft()
            visited.append(current)
            queue.extend(current.children())
        return visited
    if traversal_order == 'depth_first':
        stack = [node]
        visited = []
        while stack:
            current = stack.pop()
            visited.append(current)
            stack.extend(reversed(current.children()))
        return visited
    raise ValueError(f"Invalid traversal_order: {traversal_order}")


def calculate_tree_depth(node: Node) -> int:
    """Longest root-to-leaf path counted in nodes; a lone leaf has depth 1"""
    return reduce_tree(node, lambda _, depths: 1 + max(depths, default=0))


def find_nodes_by_type(node: Node, node_type: Type[Node]) -> List[Node]:
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def get_parameters(node: Node) -> Set[str]:
    """Names of all parameters referenced by the tree."""
    return {cast(ParameterNode, n).name for n in find_nodes_by_type(node, ParameterNode)}


def get_constants(node: Node) -> List[ConstantNode]:
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def validate_tree_structure(node: Node) -> bool:
    """
    Check that every operator has the children its arity requires.

    Args:
        node: Root node of the tree

    Returns:
        False on a missing child or a foreign object anywhere in the tree
    """
    pending = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, (BinaryOpNode, UnaryOpNode)):
            pending.extend(current.children())
        elif not isinstance(current, (ConstantNode, ParameterNode)):
            return False
    return True
