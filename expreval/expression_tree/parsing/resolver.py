"""
Lexical and precedence resolution.

Turns a source string into a flat postfix sequence of tokens with a
shunting-yard pass. Parenthesized groups are resolved recursively and spliced
into the output as soon as they are read.
"""

import re
from typing import List
from ..core.operators import (
    OpType, BINARY_OP_MAP, UNARY_OP_MAP, CONSTANTS, stronger
)
from ..core.tokens import Token
from ...errors import ParseError
from ...logging_system import log_debug

REAL_PATTERN = re.compile(r'\d+(\.\d*)?([Ee][+-]?\d+)?')
FUNCTION_PATTERN = re.compile(r'a?sin|a?cos|a?t(?:an|g)|ln|exp|abs|sqrt|cbrt')
IDENTIFIER_PATTERN = re.compile(r'[A-Za-z]+')
IMPLICIT_PRODUCT_PATTERN = re.compile(r'(?<=[0-9)])\(')


def preparse(source: str) -> str:
  """Insert the implicit '*' in ``3(x)`` and ``(a)(b)``"""
  return IMPLICIT_PRODUCT_PATTERN.sub('*(', source)


def parse(source: str) -> List[Token]:
  """Resolve ``source`` into postfix order.

  An empty string resolves to the single constant 0.
  """
  if not source:
    return [Token.constant(0.0)]
  try:
    tokens = _resolve(preparse(source))
  except RecursionError:
    raise ParseError(f"Parentheses nested too deeply in {source!r}") from None
  log_debug(f"Resolved {source!r} into {len(tokens)} tokens")
  return tokens


def _matching_parenthesis(line: str, start: int) -> int:
  depth = 1
  index = start + 1
  while index < len(line):
    if line[index] == '(':
      depth += 1
    elif line[index] == ')':
      depth -= 1
      if depth == 0:
        return index
    index += 1
  raise ParseError(f"Unterminated parenthesis in {line[start:]!r}")


def _resolve(line: str) -> List[Token]:
  output: List[Token] = []
  operators: List[OpType] = []

  # A leading sign applies to an implicit 0
  stripped = line.lstrip()
  if stripped and stripped[0] in BINARY_OP_MAP:
    output.append(Token.constant(0.0))

  pos = 0
  while pos < len(line):
    char = line[pos]

    match = REAL_PATTERN.match(line, pos)
    if match:
      output.append(Token.constant(float(match.group())))
      pos = match.end()
      continue

    if char in BINARY_OP_MAP:
      op_type = BINARY_OP_MAP[char]
      while operators and not stronger(op_type, operators[-1]):
        output.append(Token.operator(operators.pop()))
      operators.append(op_type)
      pos += 1
      continue

    if char == '(':
      close = _matching_parenthesis(line, pos)
      if close > pos + 1:
        output.extend(_resolve(line[pos + 1:close]))
      pos = close + 1
      continue

    if char == ')':
      raise ParseError(f"Closed parenthesis without an opening one in {line!r}")

    if char.isspace():
      pos += 1
      continue

    match = FUNCTION_PATTERN.match(line, pos)
    if match:
      operators.append(UNARY_OP_MAP[match.group()])
      pos = match.end()
      continue

    if line[pos:pos + 2].lower() == 'pi':
      output.append(Token.constant(CONSTANTS['pi']))
      pos += 2
      continue

    if char == 'e':
      output.append(Token.constant(CONSTANTS['e']))
      pos += 1
      continue

    match = IDENTIFIER_PATTERN.match(line, pos)
    if match is None:
      raise ParseError(f"Unexpected symbol {char!r} in {line!r}")
    if len(match.group()) > 1:
      raise ParseError(
          f"Unexpected token {match.group()!r} (parameter names must be 1 char long)")
    output.append(Token.parameter(char))
    pos += 1

  while operators:
    output.append(Token.operator(operators.pop()))

  if not output:
    output.append(Token.constant(0.0))
  return output
