import sympy as sp

from expreval import Expression
from expreval.expression_tree.core import ConstantNode, ParameterNode, UnaryOpNode
from expreval.expression_tree.parsing import build_tree, parse
from expreval.expression_tree.utils import (
  SymPySimplifier, calculate_tree_depth, find_nodes_by_type, get_all_nodes,
  get_constants, get_parameters, tree_to_sympy, validate_tree_structure
)

x, y, z = sp.symbols('x y z')


def test_traversal_orders():
  root = build_tree(parse("1 + sin(x)"))
  breadth = [type(node).__name__ for node in get_all_nodes(root)]
  depth = [type(node).__name__ for node in get_all_nodes(root, 'depth_first')]
  assert breadth == ['BinaryOpNode', 'UnaryOpNode', 'ConstantNode', 'ParameterNode']
  assert depth == ['BinaryOpNode', 'UnaryOpNode', 'ParameterNode', 'ConstantNode']


def test_tree_queries():
  root = build_tree(parse("x * (y + 2) - sqrt(x)"))
  assert get_parameters(root) == {'x', 'y'}
  assert [node.value for node in get_constants(root)] == [2.0]
  assert len(find_nodes_by_type(root, ParameterNode)) == 3
  assert calculate_tree_depth(root) == 4
  assert root.size() == 8


def test_validate_tree_structure():
  root = build_tree(parse("sin(x) + 1"))
  assert validate_tree_structure(root)
  broken = UnaryOpNode(root.right.function, None)
  assert not validate_tree_structure(broken)
  assert validate_tree_structure(ConstantNode(1.0))


def test_tree_to_sympy():
  root = build_tree(parse("sin(x) - y / 2"))
  assert tree_to_sympy(root) == sp.sin(x) - y / sp.Float(2.0)


def test_sympy_export_survives_optimization():
  expression = Expression("sin(x) - cos(y)")
  exported = expression.to_sympy()
  expression.optimize()
  assert expression.to_sympy() == exported == sp.sin(x) - sp.cos(y)


def test_sympy_export_of_remainder():
  exported = Expression("x % 3").to_sympy()
  assert exported.func.__name__ == 'mod'
  assert exported.args == (x, sp.Float(3.0))


def test_simplifier_picks_smaller_form():
  result = SymPySimplifier().simplify_tree(build_tree(parse("x*y + x*z")))
  assert result['strategy'] != 'none'
  assert result['complexity'] < sp.count_ops(result['original'])
  assert sp.expand(result['simplified'] - result['original']) == 0


def test_traversals_handle_long_chains():
  root = build_tree(parse("*".join(["x"] * 1200)))
  assert len(get_all_nodes(root)) == len(get_all_nodes(root, 'depth_first')) == 2399
  assert calculate_tree_depth(root) == 1200
  assert validate_tree_structure(root)
