import sympy as sp
from abc import ABC, abstractmethod
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, TypeVar
from .operators import NodeType, UnaryFunction, BinaryFunction
from ...errors import InternalError, UnassignedParameterError

T = TypeVar('T')


def reduce_tree(root: 'Node', combine: Callable[['Node', List[T]], T]) -> T:
  """Combine a tree bottom-up without recursion.

  ``combine(node, results)`` is called once per node, after it has been called
  for all of the node's children; ``results`` holds their values in
  ``children()`` order. The last child is visited first, so the right operand
  of a binary node is always handled before the left one. Depth is bounded
  by memory only.
  """
  results: List[T] = []
  stack = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    if not isinstance(node, Node):
      raise InternalError(f"Unknown node {node!r}")
    children = node.children()
    if children and not expanded:
      stack.append((node, True))
      stack.extend((child, False) for child in children)
      continue
    count = len(children)
    values = results[len(results) - count:]
    del results[len(results) - count:]
    values.reverse()
    results.append(combine(node, values))
  return results[0]


class Node(ABC):
  """Base node of an expression tree.

  Every node owns its children exclusively; ``copy`` always returns a deep
  copy so that trees can be rewritten in place without aliasing. Whole-tree
  operations go through ``reduce_tree``; subclasses only say how one node
  combines the results of its children.
  """

  __slots__ = ()

  node_type: NodeType

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def apply(self, values: Sequence, params: Mapping[str, float], name: Optional[str], value):
    """Value of this node given the values of its children"""

  @abstractmethod
  def render(self, operands: Sequence[str]) -> str:
    pass

  @abstractmethod
  def rebuild(self, children: Sequence['Node']) -> 'Node':
    pass

  @abstractmethod
  def sympify(self, operands: Sequence[sp.Expr]) -> sp.Expr:
    pass

  def evaluate(self, params: Mapping[str, float], name: Optional[str] = None, value=None):
    """Evaluate the subtree.

    ``params`` is the parameter dictionary. When ``name`` is given, a parameter
    with that name evaluates to ``value`` regardless of the dictionary.
    """
    return reduce_tree(self, lambda node, values: node.apply(values, params, name, value))

  def to_string(self) -> str:
    return reduce_tree(self, lambda node, operands: node.render(operands))

  def copy(self) -> 'Node':
    return reduce_tree(self, lambda node, children: node.rebuild(children))

  def to_sympy(self) -> sp.Expr:
    return reduce_tree(self, lambda node, operands: node.sympify(operands))

  def size(self) -> int:
    """Node count"""
    return reduce_tree(self, lambda node, counts: 1 + sum(counts))

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    self.value = float(value)

  def children(self):
    return ()

  def apply(self, values, params, name, value):
    return self.value

  def render(self, operands):
    return repr(self.value)

  def rebuild(self, children):
    return ConstantNode(self.value)

  def sympify(self, operands):
    return sp.Float(self.value)


class ParameterNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.PARAMETER

  def __init__(self, name: str):
    self.name = name

  def children(self):
    return ()

  def apply(self, values, params, name, value):
    if name is not None and self.name == name:
      return value
    try:
      return params[self.name]
    except KeyError:
      raise UnassignedParameterError(self.name) from None

  def render(self, operands):
    return self.name

  def rebuild(self, children):
    return ParameterNode(self.name)

  def sympify(self, operands):
    return sp.Symbol(self.name)


class UnaryOpNode(Node):
  __slots__ = ('function', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, function: UnaryFunction, operand: Node):
    self.function = function
    self.operand = operand

  def children(self):
    return (self.operand,)

  def apply(self, values, params, name, value):
    return self.function(values[0])

  def render(self, operands):
    return self.function.render(operands[0])

  def rebuild(self, children):
    return UnaryOpNode(self.function, children[0])

  def sympify(self, operands):
    return self.function.to_sympy(operands[0])


class BinaryOpNode(Node):
  """Binary operation.

  The tree is built from the reversed postfix sequence, so ``left`` holds the
  operand written second in the source and ``right`` the one written first.
  ``right`` is therefore evaluated first and passed as the first argument.
  """

  __slots__ = ('function', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, function: BinaryFunction, left: Node, right: Node):
    self.function = function
    self.left = left
    self.right = right

  def children(self):
    return (self.left, self.right)

  def apply(self, values, params, name, value):
    second, first = values
    return self.function(first, second)

  def render(self, operands):
    second, first = operands
    return self.function.render(first, second)

  def rebuild(self, children):
    left, right = children
    return BinaryOpNode(self.function, left, right)

  def sympify(self, operands):
    second, first = operands
    return self.function.to_sympy(first, second)
