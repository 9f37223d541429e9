"""Tree construction from a postfix token sequence."""

from typing import List, Optional
from ..core.node import Node, ConstantNode, ParameterNode, UnaryOpNode, BinaryOpNode
from ..core.operators import NodeType
from ..core.tokens import Token
from ...errors import BuildError, InternalError


class _PendingOperator:
  """Operator node whose child slots are still being filled"""

  __slots__ = ('token', 'children')

  def __init__(self, token: Token):
    self.token = token
    self.children: List[Node] = []

  @property
  def complete(self) -> bool:
    return len(self.children) == self.token.arity

  def to_node(self) -> Node:
    if self.token.kind == NodeType.UNARY_OP:
      return UnaryOpNode(self.token.payload, self.children[0])
    left, right = self.children
    return BinaryOpNode(self.token.payload, left, right)


def _leaf(token: Token) -> Node:
  if token.kind == NodeType.CONSTANT:
    return ConstantNode(token.payload)
  if token.kind == NodeType.PARAMETER:
    return ParameterNode(token.payload)
  raise InternalError(f"Token {token!r} is not a value")


def build_tree(tokens: List[Token]) -> Node:
  """Build a tree from a postfix token sequence.

  Tokens are consumed from last to first. The last one is the outermost
  operation and becomes the root; every following token fills the first free
  child slot of the innermost unfinished operator, left slot before right.
  """
  if not tokens:
    raise BuildError("Nothing to build")

  head = tokens[-1]
  if not head.is_operator and len(tokens) > 1:
    raise BuildError("Bad parsing or semantics: value followed by trailing tokens")
  if head.is_operator and len(tokens) == 1:
    raise BuildError("Function or operator without arguments")

  pending: List[_PendingOperator] = []
  root: Optional[Node] = None

  for token in reversed(tokens):
    if root is not None:
      raise BuildError("Too many operands: tokens left after the tree was complete")
    if token.is_operator:
      pending.append(_PendingOperator(token))
      continue

    node: Optional[Node] = _leaf(token)
    while node is not None:
      if not pending:
        root, node = node, None
        break
      parent = pending[-1]
      parent.children.append(node)
      if parent.complete:
        pending.pop()
        node = parent.to_node()
      else:
        node = None

  if pending or root is None:
    raise BuildError("Function or operator without enough arguments")
  return root
