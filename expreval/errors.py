"""Exceptions raised while parsing, building and evaluating expressions."""


class ExpressionError(Exception):
  """Base class for every failure reported by expreval"""


class ParseError(ExpressionError):
  """The source string cannot be resolved into tokens"""


class BuildError(ExpressionError):
  """The token sequence does not form a single well-formed tree"""


class EvaluationError(ExpressionError):
  """Evaluation of a built tree failed"""


class UnassignedParameterError(EvaluationError):

  def __init__(self, name: str):
    super().__init__(f"Unassigned parameter {name}")
    self.name = name


class InternalError(ExpressionError):
  """A tree invariant was violated; never caused by user input"""
