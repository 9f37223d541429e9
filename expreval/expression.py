import numpy as np
import sympy as sp
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional, Set

from .errors import ExpressionError
from .expression_tree.core.node import Node
from .expression_tree.parsing import parse, build_tree
from .expression_tree.optimization import optimize_tree
from .expression_tree.utils import tree_to_sympy, calculate_tree_depth, get_parameters
from .logging_system import LogLevel, log_debug, log_detail, log_warning, should_log


class Policy(Enum):
  BUILD = 'build'
  OPTIMIZE = 'optimize'


def _check_name(name: str):
  if not isinstance(name, str) or len(name) != 1:
    raise ValueError(f"Parameter names must be a single character, got {name!r}")


class Expression:
  """Parsed arithmetic expression plus its parameter dictionary.

  The tree is built once per ``build`` call. Parameters are looked up at
  evaluation time, so the dictionary can be changed between evaluations
  without reparsing.
  """

  __slots__ = ('root', '_dictionary')

  def __init__(self, source: Optional[str] = None, policy: Policy = Policy.BUILD):
    self.root: Optional[Node] = None
    self._dictionary: Dict[str, float] = {}
    if source is not None:
      self.build(source, policy)

  def build(self, source: str, policy: Policy = Policy.BUILD) -> 'Expression':
    """Parse ``source`` and replace the current tree"""
    try:
      root = build_tree(parse(source))
    except ExpressionError as error:
      log_debug(f"Failed to build {source!r}: {error}")
      raise
    self.root = root
    if should_log(LogLevel.DETAILED):
      log_detail(f"Built {source!r} into {root.size()} nodes")
    if policy == Policy.OPTIMIZE:
      self.optimize()
    return self

  def optimize(self) -> 'Expression':
    if self.root is not None:
      verbose = should_log(LogLevel.DETAILED)
      before = self.root.size() if verbose else 0
      self.root = optimize_tree(self.root)
      if verbose:
        log_detail(f"Optimized tree from {before} to {self.root.size()} nodes")
    return self

  def eval(self, name: Optional[str] = None, value: Optional[float] = None) -> Optional[float]:
    """Evaluate against the dictionary, optionally overriding one parameter.

    Returns None when no tree has been built.
    """
    if (name is None) != (value is None):
      raise TypeError("eval() takes either no arguments or both name and value")
    if self.root is None:
      return None
    try:
      if name is None:
        return self.root.evaluate(self._dictionary)
      return self.root.evaluate(self._dictionary, name, float(value))
    except ExpressionError as error:
      log_debug(f"Evaluation of {self.to_string()} failed: {error}")
      raise

  def sweep(self, name: str, values: Iterable[float]) -> Optional[np.ndarray]:
    """Evaluate for every value of ``name`` at once"""
    if self.root is None:
      return None
    if name not in self.parameters():
      log_warning(f"Sweeping over {name!r}, which does not occur in {self.to_string()}")
    grid = np.asarray(values, dtype=np.float64)
    result = self.root.evaluate(self._dictionary, name, grid)
    return np.broadcast_to(np.asarray(result, dtype=np.float64), grid.shape).copy()

  def set_param(self, name: str, value: float) -> 'Expression':
    _check_name(name)
    self._dictionary[name] = float(value)
    return self

  @property
  def params(self) -> Mapping[str, float]:
    return MappingProxyType(self._dictionary)

  def as_unary(self, name: str = 'x') -> Optional[Callable[[float], float]]:
    """One-argument function of ``name`` over a private copy of this expression"""
    if self.root is None:
      return None
    return self.copy()._bind(name)

  def _bind(self, name: str) -> Callable[[float], float]:
    def function(x: float) -> float:
      return self.eval(name, x)
    return function

  def copy(self) -> 'Expression':
    other = Expression()
    other.root = self.root.copy() if self.root is not None else None
    other._dictionary = dict(self._dictionary)
    return other

  def to_string(self) -> str:
    return self.root.to_string() if self.root is not None else ''

  def to_sympy(self, simplify: bool = False) -> Optional[sp.Expr]:
    if self.root is None:
      return None
    return tree_to_sympy(self.root, simplify)

  def size(self) -> int:
    return self.root.size() if self.root is not None else 0

  def depth(self) -> int:
    return calculate_tree_depth(self.root) if self.root is not None else 0

  def parameters(self) -> Set[str]:
    return get_parameters(self.root) if self.root is not None else set()

  def __bool__(self) -> bool:
    return self.root is not None

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"


def compute(source: str, name: Optional[str] = None, value: Optional[float] = None) -> Optional[float]:
  """Build ``source`` and evaluate it once"""
  return Expression(source).eval(name, value)


def parse_function(source: str, name: str = 'x',
                   policy: Policy = Policy.BUILD) -> Optional[Callable[[float], float]]:
  """Build ``source`` and return it as a function of ``name``"""
  expression = Expression(source, policy)
  if not expression:
    return None
  # the expression is not shared, so it can be bound without a copy
  return expression._bind(name)
