import math
import numpy as np
import numba
import sympy as sp
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable, Dict, Tuple

class NodeType(IntEnum):
  CONSTANT = 0
  PARAMETER = 1
  UNARY_OP = 2
  BINARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  MOD = 5
  # Unary ops
  SIN = 6
  COS = 7
  TAN = 8
  ASIN = 9
  ACOS = 10
  ATAN = 11
  LN = 12
  EXP = 13
  ABS = 14
  SQRT = 15
  CBRT = 16

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV,
                 '^': OpType.POW, '%': OpType.MOD}
UNARY_OP_MAP = {
    'sin': OpType.SIN, 'cos': OpType.COS,
    'tan': OpType.TAN, 'tg': OpType.TAN,
    'asin': OpType.ASIN, 'acos': OpType.ACOS,
    'atan': OpType.ATAN, 'atg': OpType.ATAN,
    'ln': OpType.LN, 'exp': OpType.EXP, 'abs': OpType.ABS,
    'sqrt': OpType.SQRT, 'cbrt': OpType.CBRT
}

OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}
OP_SYMBOLS.update({
    OpType.SIN: 'sin', OpType.COS: 'cos', OpType.TAN: 'tan',
    OpType.ASIN: 'asin', OpType.ACOS: 'acos', OpType.ATAN: 'atan',
    OpType.LN: 'ln', OpType.EXP: 'exp', OpType.ABS: 'abs',
    OpType.SQRT: 'sqrt', OpType.CBRT: 'cbrt'
})

CONSTANTS = {'pi': math.pi, 'e': math.e}

# '%' ranks below '+' and '-'
BINARY_PRECEDENCE = {
    OpType.MOD: -1,
    OpType.ADD: 0, OpType.SUB: 0,
    OpType.MUL: 1, OpType.DIV: 1,
    OpType.POW: 2,
}
FUNCTION_PRECEDENCE = 3


def is_binary(op_type: OpType) -> bool:
  return op_type in BINARY_PRECEDENCE


def precedence(op_type: OpType) -> int:
  return BINARY_PRECEDENCE.get(op_type, FUNCTION_PRECEDENCE)


def stronger(op_type: OpType, other: OpType) -> bool:
  """True when op_type binds strictly tighter than other"""
  return precedence(op_type) > precedence(other)


# Kernels accept float64 scalars as well as float64 arrays.
# error_model='numpy' keeps IEEE results (inf/nan) instead of raising.

@numba.njit(cache=True, error_model='numpy')
def _add(a, b):
  return a + b

@numba.njit(cache=True, error_model='numpy')
def _sub(a, b):
  return a - b

@numba.njit(cache=True, error_model='numpy')
def _mul(a, b):
  return a * b

@numba.njit(cache=True, error_model='numpy')
def _div(a, b):
  return a / b

@numba.njit(cache=True, error_model='numpy')
def _pow(a, b):
  return np.power(a, b)

@numba.njit(cache=True, error_model='numpy')
def _mod(a, b):
  # integer remainder with the sign of the dividend
  return np.fmod(np.trunc(a), np.trunc(b))

@numba.njit(cache=True, error_model='numpy')
def _sin(a):
  return np.sin(a)

@numba.njit(cache=True, error_model='numpy')
def _cos(a):
  return np.cos(a)

@numba.njit(cache=True, error_model='numpy')
def _tan(a):
  return np.tan(a)

@numba.njit(cache=True, error_model='numpy')
def _asin(a):
  return np.arcsin(a)

@numba.njit(cache=True, error_model='numpy')
def _acos(a):
  return np.arccos(a)

@numba.njit(cache=True, error_model='numpy')
def _atan(a):
  return np.arctan(a)

@numba.njit(cache=True, error_model='numpy')
def _ln(a):
  return np.log(a)

@numba.njit(cache=True, error_model='numpy')
def _exp(a):
  return np.exp(a)

@numba.njit(cache=True, error_model='numpy')
def _abs(a):
  return np.abs(a)

@numba.njit(cache=True, error_model='numpy')
def _sqrt(a):
  return np.sqrt(a)

@numba.njit(cache=True, error_model='numpy')
def _cbrt(a):
  return np.cbrt(a)


BINARY_KERNELS: Dict[OpType, Callable] = {
    OpType.ADD: _add, OpType.SUB: _sub, OpType.MUL: _mul,
    OpType.DIV: _div, OpType.POW: _pow, OpType.MOD: _mod
}
UNARY_KERNELS: Dict[OpType, Callable] = {
    OpType.SIN: _sin, OpType.COS: _cos, OpType.TAN: _tan,
    OpType.ASIN: _asin, OpType.ACOS: _acos, OpType.ATAN: _atan,
    OpType.LN: _ln, OpType.EXP: _exp, OpType.ABS: _abs,
    OpType.SQRT: _sqrt, OpType.CBRT: _cbrt
}

# C-style remainder has no SymPy counterpart
SYMPY_MOD = sp.Function('mod')

SYMPY_BINARY = {
    OpType.ADD: lambda a, b: sp.Add(a, b),
    OpType.SUB: lambda a, b: sp.Add(a, sp.Mul(-1, b)),
    OpType.MUL: lambda a, b: sp.Mul(a, b),
    OpType.DIV: lambda a, b: sp.Mul(a, sp.Pow(b, -1)),
    OpType.POW: lambda a, b: sp.Pow(a, b),
    OpType.MOD: lambda a, b: SYMPY_MOD(a, b),
}
SYMPY_UNARY = {
    OpType.SIN: sp.sin, OpType.COS: sp.cos, OpType.TAN: sp.tan,
    OpType.ASIN: sp.asin, OpType.ACOS: sp.acos, OpType.ATAN: sp.atan,
    OpType.LN: sp.log, OpType.EXP: sp.exp, OpType.ABS: sp.Abs,
    OpType.SQRT: sp.sqrt, OpType.CBRT: sp.cbrt
}


class UnaryFunction(ABC):
  """Callable of one argument carried by a unary node"""

  __slots__ = ()

  @abstractmethod
  def __call__(self, a):
    pass

  @abstractmethod
  def render(self, operand: str) -> str:
    pass

  @abstractmethod
  def to_sympy(self, operand) -> sp.Expr:
    pass

  def __repr__(self) -> str:
    return f"<{type(self).__name__} {self.render('a')}>"


class BinaryFunction(ABC):
  """Callable of two arguments carried by a binary node.

  Arguments are taken in reading order: ``first`` is the operand written on
  the left of the operator in the source string.
  """

  __slots__ = ()

  @abstractmethod
  def __call__(self, first, second):
    pass

  @abstractmethod
  def render(self, first: str, second: str) -> str:
    pass

  @abstractmethod
  def to_sympy(self, first, second) -> sp.Expr:
    pass

  def __repr__(self) -> str:
    return f"<{type(self).__name__} {self.render('a', 'b')}>"


class UnaryOperator(UnaryFunction):
  __slots__ = ('op_type', '_kernel')

  def __init__(self, op_type: OpType):
    if op_type not in UNARY_KERNELS:
      raise ValueError(f"{op_type!r} is not a unary function")
    self.op_type = op_type
    self._kernel = UNARY_KERNELS[op_type]

  def __call__(self, a):
    return self._kernel(a)

  def render(self, operand: str) -> str:
    return f"{OP_SYMBOLS[self.op_type]}({operand})"

  def to_sympy(self, operand):
    return SYMPY_UNARY[self.op_type](operand)


class BinaryOperator(BinaryFunction):
  __slots__ = ('op_type', '_kernel')

  def __init__(self, op_type: OpType):
    if op_type not in BINARY_KERNELS:
      raise ValueError(f"{op_type!r} is not a binary operator")
    self.op_type = op_type
    self._kernel = BINARY_KERNELS[op_type]

  def __call__(self, first, second):
    return self._kernel(first, second)

  def render(self, first: str, second: str) -> str:
    return f"({first} {OP_SYMBOLS[self.op_type]} {second})"

  def to_sympy(self, first, second):
    return SYMPY_BINARY[self.op_type](first, second)


class ComposedUnary(UnaryFunction):
  """a -> outer(inner(a))

  Nested compositions are flattened into one sequence of stages, innermost
  first, so a chain of any length is applied in a loop.
  """

  __slots__ = ('stages',)

  def __init__(self, outer: UnaryFunction, inner: UnaryFunction):
    self.stages = _stages(inner) + _stages(outer)

  def __call__(self, a):
    for stage in self.stages:
      a = stage(a)
    return a

  def render(self, operand: str) -> str:
    for stage in self.stages:
      operand = stage.render(operand)
    return operand

  def to_sympy(self, operand):
    for stage in self.stages:
      operand = stage.to_sympy(operand)
    return operand


def _stages(function: UnaryFunction) -> Tuple[UnaryFunction, ...]:
  if isinstance(function, ComposedUnary):
    return function.stages
  return (function,)


class FirstArgumentComposed(BinaryFunction):
  """(a, b) -> outer(inner(a), b)"""

  __slots__ = ('outer', 'inner')

  def __init__(self, outer: BinaryFunction, inner: UnaryFunction):
    self.outer = outer
    self.inner = inner

  def __call__(self, first, second):
    return self.outer(self.inner(first), second)

  def render(self, first: str, second: str) -> str:
    return self.outer.render(self.inner.render(first), second)

  def to_sympy(self, first, second):
    return self.outer.to_sympy(self.inner.to_sympy(first), second)


class SecondArgumentComposed(BinaryFunction):
  """(a, b) -> outer(a, inner(b))"""

  __slots__ = ('outer', 'inner')

  def __init__(self, outer: BinaryFunction, inner: UnaryFunction):
    self.outer = outer
    self.inner = inner

  def __call__(self, first, second):
    return self.outer(first, self.inner(second))

  def render(self, first: str, second: str) -> str:
    return self.outer.render(first, self.inner.render(second))

  def to_sympy(self, first, second):
    return self.outer.to_sympy(first, self.inner.to_sympy(second))


class ResultComposed(BinaryFunction):
  """(a, b) -> outer(inner(a, b))"""

  __slots__ = ('outer', 'inner')

  def __init__(self, outer: UnaryFunction, inner: BinaryFunction):
    if isinstance(inner, ResultComposed):
      outer = ComposedUnary(outer, inner.outer)
      inner = inner.inner
    self.outer = outer
    self.inner = inner

  def __call__(self, first, second):
    return self.outer(self.inner(first, second))

  def render(self, first: str, second: str) -> str:
    return self.outer.render(self.inner.render(first, second))

  def to_sympy(self, first, second):
    return self.outer.to_sympy(self.inner.to_sympy(first, second))
