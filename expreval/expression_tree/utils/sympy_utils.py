import sympy as sp
from typing import Dict, Any, Optional

from ..core.node import Node


def tree_to_sympy(node: Node, simplify: bool = False) -> sp.Expr:
  """Convert a tree, optimized or not, into a SymPy expression"""
  expr = node.to_sympy()
  return sp.simplify(expr) if simplify else expr


class SymPySimplifier:
  """Tries several SymPy strategies and keeps the smallest result"""

  def __init__(self):
    self.simplification_strategies = [
      'simplify',
      'expand',
      'factor',
      'trigsimp',
      'logcombine'
    ]

  def simplify_tree(self, node: Node) -> Dict[str, Any]:
    """
    Simplify the symbolic form of a tree

    Returns:
        Dict with the simplified expression and the strategy that produced it
    """
    sympy_expr = tree_to_sympy(node)
    best_simplified = sympy_expr
    best_complexity = sp.count_ops(sympy_expr)
    best_strategy = 'none'

    for strategy in self.simplification_strategies:
      simplified = self._apply(strategy, sympy_expr)
      if simplified is None:
        continue
      complexity = sp.count_ops(simplified)
      if complexity < best_complexity:
        best_simplified = simplified
        best_complexity = complexity
        best_strategy = strategy

    return {
      'original': sympy_expr,
      'simplified': best_simplified,
      'strategy': best_strategy,
      'complexity': best_complexity,
    }

  @staticmethod
  def _apply(strategy: str, expr: sp.Expr) -> Optional[sp.Expr]:
    if strategy == 'simplify':
      return sp.simplify(expr)
    elif strategy == 'expand':
      return sp.expand(expr)
    elif strategy == 'factor':
      return sp.factor(expr)
    elif strategy == 'trigsimp':
      return sp.trigsimp(expr)
    elif strategy == 'logcombine':
      return sp.logcombine(expr)
    return None
