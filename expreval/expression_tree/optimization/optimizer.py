"""Constant folding and function-composition fusion."""

from typing import List
from ..core.node import Node, ConstantNode, ParameterNode, UnaryOpNode, BinaryOpNode, reduce_tree
from ..core.operators import (
    ComposedUnary, FirstArgumentComposed, SecondArgumentComposed, ResultComposed
)
from ...errors import InternalError


def is_evaluable(node: Node) -> bool:
  """True when the subtree contains no parameter"""
  stack = [node]
  while stack:
    current = stack.pop()
    if isinstance(current, ParameterNode):
      return False
    if not isinstance(current, (ConstantNode, UnaryOpNode, BinaryOpNode)):
      raise InternalError(f"Unknown node {current!r}")
    stack.extend(current.children())
  return True


def optimize_tree(node: Node) -> Node:
  """Rewrite a tree into an equivalent, shallower one and return its root.

  Children are optimized first. A subtree without parameters is folded into a
  constant; otherwise an operator is fused with each unary child (and a unary
  operator with a binary child) into a single node carrying the composed
  function. The composed function applies the inner one to the argument
  position its subtree occupied, so results are unchanged.
  """
  return reduce_tree(node, _optimize_node)


def _optimize_node(node: Node, children: List[Node]) -> Node:
  # children are already optimized, so a parameter-free child is a constant
  if isinstance(node, BinaryOpNode):
    node.left, node.right = children
    if all(isinstance(child, ConstantNode) for child in children):
      return ConstantNode(node.evaluate({}))

    # right is evaluated first and feeds the first argument
    if isinstance(node.right, UnaryOpNode):
      inner = node.right
      node = BinaryOpNode(FirstArgumentComposed(node.function, inner.function),
                          node.left, inner.operand)
    if isinstance(node.left, UnaryOpNode):
      inner = node.left
      node = BinaryOpNode(SecondArgumentComposed(node.function, inner.function),
                          inner.operand, node.right)
    return node

  if isinstance(node, UnaryOpNode):
    inner, = children
    node.operand = inner
    if isinstance(inner, ConstantNode):
      return ConstantNode(node.evaluate({}))
    if isinstance(inner, UnaryOpNode):
      return UnaryOpNode(ComposedUnary(node.function, inner.function), inner.operand)
    if isinstance(inner, BinaryOpNode):
      return BinaryOpNode(ResultComposed(node.function, inner.function),
                          inner.left, inner.right)
    return node

  if isinstance(node, (ConstantNode, ParameterNode)):
    return node
  raise InternalError(f"Unknown node {node!r}")
