"""expreval

Parse arithmetic expressions into trees, simplify them and evaluate them
against a parameter binding.
"""

from .expression import Expression, Policy, compute, parse_function
from .errors import (
  ExpressionError, ParseError, BuildError, EvaluationError,
  UnassignedParameterError, InternalError
)
from .expression_tree import (
  Node, ConstantNode, ParameterNode, UnaryOpNode, BinaryOpNode, Token,
  NodeType, OpType, parse, build_tree, optimize_tree
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Policy", "compute", "parse_function",
  "ExpressionError", "ParseError", "BuildError", "EvaluationError",
  "UnassignedParameterError", "InternalError",
  "Node", "ConstantNode", "ParameterNode", "UnaryOpNode", "BinaryOpNode", "Token",
  "NodeType", "OpType", "parse", "build_tree", "optimize_tree",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
