import pytest
import sympy as sp

from arithmetic_tree import (
    AbsoluteValue, Add, Constant, Divide, ExpressionValidator, Logarithm, Modulo, Multiply,
    Negate, Number, OpType, Power, Random, SequenceSource, Subtract, Variable, to_latex, to_sympy
)
from arithmetic_tree.utils import (
    calculate_tree_depth, calculate_tree_size, find_nodes_by_operator, get_all_nodes,
    get_constant_names, get_variable_names
)

x, y = Variable('x'), Variable('y')


@pytest.fixture
def tree():
    # (x + 2) * |y - pi|
    return Multiply(Add(x, Number(2)), AbsoluteValue(Subtract(y, Constant('pi'))))


def test_traversal_orders(tree):
    breadth = [n.render() for n in get_all_nodes(tree)]
    depth = [n.render() for n in get_all_nodes(tree, 'depth_first')]
    assert breadth[:3] == ['(x + 2) * |y - pi|', 'x + 2', '|y - pi|']
    assert depth[:4] == ['(x + 2) * |y - pi|', 'x + 2', 'x', '2']
    assert sorted(breadth) == sorted(depth)
    with pytest.raises(ValueError):
        get_all_nodes(tree, 'sideways')


def test_size_and_depth(tree):
    assert calculate_tree_size(tree) == 8
    assert calculate_tree_depth(tree) == 4
    assert calculate_tree_depth(Number(1)) == 1


def test_name_collection(tree):
    assert get_variable_names(tree) == {'x', 'y'}
    assert get_constant_names(tree) == {'pi'}


def test_find_nodes_by_operator():
    tree = Add(Add(x, y), Multiply(x, Add(y, Number(1))))
    assert len(find_nodes_by_operator(tree, OpType.ADD)) == 3
    assert len(find_nodes_by_operator(tree, OpType.POW)) == 0


def test_unbound_symbols(symbols):
    tree = Add(Variable('r'), Multiply(Variable('q'), Constant('tau')))
    assert ExpressionValidator.unbound_symbols(tree, symbols) == ['q', 'tau']
    assert ExpressionValidator.unbound_symbols(Variable('r'), symbols) == []


def test_is_valid_expression(symbols):
    assert ExpressionValidator.is_valid_expression(Divide(Variable('r'), Variable('s')), symbols)
    assert not ExpressionValidator.is_valid_expression(Divide(Variable('r'), Number(0)), symbols)
    assert not ExpressionValidator.is_valid_expression(Variable('q'), symbols)
    assert ExpressionValidator.is_valid_expression(Constant('pi'))
    assert ExpressionValidator.is_valid_expression(Random(), source=SequenceSource([0.5]))


def test_to_sympy_operators():
    sx, sy = sp.Symbol('x'), sp.Symbol('y')
    assert to_sympy(Subtract(x, y)) == sx - sy
    assert to_sympy(Divide(x, y)) == sx / sy
    assert to_sympy(Power(x, Number(2))) == sx ** 2
    assert to_sympy(Negate(x)) == -sx
    assert to_sympy(AbsoluteValue(x)) == sp.Abs(sx)
    assert to_sympy(Modulo(x, y)) == sp.Mod(sx, sy)
    assert to_sympy(Logarithm(Number(2), x)) == sp.log(sx, 2)
    assert to_sympy(Number(2.5)) == sp.Float(2.5)


def test_to_sympy_constants():
    assert to_sympy(Constant('pi')) == sp.pi
    assert to_sympy(Constant('e')) == sp.E
    assert to_sympy(Constant('phi')) == sp.GoldenRatio
    assert to_sympy(Constant('fi')) == sp.GoldenRatio
    assert to_sympy(Constant('Euler')) == sp.Symbol('Euler')


def test_to_sympy_random_is_opaque():
    expr = to_sympy(Random())
    assert expr.func.__name__ == 'random'
    assert expr.args == ()


def test_to_latex():
    assert to_latex(Divide(x, y)) == sp.latex(sp.Symbol('x') / sp.Symbol('y'))
