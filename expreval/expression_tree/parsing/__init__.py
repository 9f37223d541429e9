"""String to tree: precedence resolution and tree construction."""

from .resolver import parse, preparse
from .builder import build_tree

__all__ = ['parse', 'preparse', 'build_tree']
