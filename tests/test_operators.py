import math
import numpy as np
import pytest

from expreval.expression_tree.core import (
  OpType, BinaryOperator, UnaryOperator, ComposedUnary,
  FirstArgumentComposed, SecondArgumentComposed, ResultComposed,
  precedence, stronger, is_binary
)


def test_precedence_levels():
  assert precedence(OpType.ADD) == precedence(OpType.SUB) == 0
  assert precedence(OpType.MUL) == precedence(OpType.DIV) == 1
  assert precedence(OpType.POW) == 2
  assert precedence(OpType.SIN) == precedence(OpType.ABS) == 3
  assert precedence(OpType.MOD) < precedence(OpType.ADD)
  assert stronger(OpType.MUL, OpType.ADD)
  assert not stronger(OpType.ADD, OpType.SUB)
  assert is_binary(OpType.MOD) and not is_binary(OpType.LN)


def test_remainder_truncates_like_c():
  mod = BinaryOperator(OpType.MOD)
  assert mod(7.0, 3.0) == 1.0
  assert mod(-7.0, 3.0) == -1.0
  assert mod(7.0, -3.0) == 1.0
  assert mod(9.9, 2.5) == 1.0


def test_kernels_accept_arrays():
  values = np.array([0.0, 1.0, 4.0])
  np.testing.assert_allclose(UnaryOperator(OpType.SQRT)(values), [0.0, 1.0, 2.0])
  np.testing.assert_allclose(BinaryOperator(OpType.POW)(values, 2.0), [0.0, 1.0, 16.0])


def test_operator_construction_checks_arity():
  with pytest.raises(ValueError):
    UnaryOperator(OpType.ADD)
  with pytest.raises(ValueError):
    BinaryOperator(OpType.SIN)


def test_composed_functions():
  sub = BinaryOperator(OpType.SUB)
  sin = UnaryOperator(OpType.SIN)
  sqrt = UnaryOperator(OpType.SQRT)
  assert ComposedUnary(sqrt, sin)(1.0) == pytest.approx(math.sqrt(math.sin(1.0)))
  assert FirstArgumentComposed(sub, sin)(1.0, 2.0) == pytest.approx(math.sin(1.0) - 2.0)
  assert SecondArgumentComposed(sub, sin)(1.0, 2.0) == pytest.approx(1.0 - math.sin(2.0))
  assert ResultComposed(sqrt, sub)(5.0, 1.0) == pytest.approx(2.0)
  assert FirstArgumentComposed(sub, sin).render('a', 'b') == "(sin(a) - b)"
  assert repr(ComposedUnary(sqrt, sin)) == "<ComposedUnary sqrt(sin(a))>"
