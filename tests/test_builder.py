import pytest

from expreval.errors import BuildError
from expreval.expression_tree.core import (
  BinaryOpNode, ConstantNode, OpType, ParameterNode, Token, UnaryOpNode
)
from expreval.expression_tree.parsing import build_tree, parse
from expreval.expression_tree.utils import validate_tree_structure


def test_single_value():
  root = build_tree([Token.constant(5.0)])
  assert isinstance(root, ConstantNode)
  assert root.evaluate({}) == 5.0


def test_binary_operands_are_stored_reversed():
  root = build_tree(parse("2-1"))
  assert isinstance(root, BinaryOpNode)
  assert root.left.value == 1.0
  assert root.right.value == 2.0
  assert root.evaluate({}) == 1.0


def test_reversed_order_for_non_commutative_operators():
  tokens = [Token.constant(1.0), Token.constant(4.0), Token.operator(OpType.DIV)]
  assert build_tree(tokens).evaluate({}) == 0.25


def test_unary_node_has_single_operand():
  root = build_tree(parse("sqrt(x)"))
  assert isinstance(root, UnaryOpNode)
  assert isinstance(root.operand, ParameterNode)
  assert root.children() == (root.operand,)


def test_nested_shape():
  root = build_tree(parse("2+3*4"))
  assert isinstance(root, BinaryOpNode)
  assert isinstance(root.left, BinaryOpNode)
  assert root.right.value == 2.0
  assert validate_tree_structure(root)


def test_lone_function_is_arity_error():
  with pytest.raises(BuildError, match="without arguments"):
    build_tree(parse("sin"))


def test_value_with_trailing_tokens():
  with pytest.raises(BuildError, match="trailing"):
    build_tree(parse("1 2"))


def test_parameter_with_trailing_tokens():
  with pytest.raises(BuildError, match="trailing"):
    build_tree(parse("2x"))


def test_missing_operand():
  with pytest.raises(BuildError, match="enough arguments"):
    build_tree(parse("x+"))


def test_too_many_operands():
  with pytest.raises(BuildError, match="Too many operands"):
    build_tree(parse("1 2+3"))


def test_empty_sequence():
  with pytest.raises(BuildError):
    build_tree([])
