"""Tree rewriting: constant folding and composition fusion."""

from .optimizer import optimize_tree, is_evaluable

__all__ = ['optimize_tree', 'is_evaluable']
