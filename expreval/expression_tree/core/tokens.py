from dataclasses import dataclass
from typing import Union
from .operators import NodeType, OpType, UnaryOperator, BinaryOperator, is_binary


@dataclass(frozen=True)
class Token:
  """One element of a resolved postfix sequence, tagged by ``kind``"""

  kind: NodeType
  payload: Union[float, str, UnaryOperator, BinaryOperator]

  @classmethod
  def constant(cls, value: float) -> 'Token':
    return cls(NodeType.CONSTANT, float(value))

  @classmethod
  def parameter(cls, name: str) -> 'Token':
    return cls(NodeType.PARAMETER, name)

  @classmethod
  def operator(cls, op_type: OpType) -> 'Token':
    if is_binary(op_type):
      return cls(NodeType.BINARY_OP, BinaryOperator(op_type))
    return cls(NodeType.UNARY_OP, UnaryOperator(op_type))

  @property
  def is_operator(self) -> bool:
    return self.kind in (NodeType.UNARY_OP, NodeType.BINARY_OP)

  @property
  def arity(self) -> int:
    if self.kind == NodeType.BINARY_OP:
      return 2
    if self.kind == NodeType.UNARY_OP:
      return 1
    return 0
