import math

import numpy as np
import pytest

from arithmetic_tree import (
    AbsoluteValue, Add, Constant, Divide, DivideByZeroError, ErrorKind, Evaluator,
    InvalidLogArgumentError, InvalidLogBaseError, InvalidPowerOfZeroError, Logarithm,
    Modulo, Multiply, Negate, NegativeBaseError, Number, NumericOverflowError, Power,
    Random, SequenceSource, Subtract, SymbolTable, UnknownSymbolError, Variable,
    evaluate, set_default_source
)


def test_number_and_symbols(symbols):
    assert Number(2.5).evaluate(symbols) == 2.5
    assert Variable('r').evaluate(symbols) == 10
    assert Constant('pi').evaluate(symbols) == pytest.approx(math.pi)
    assert Constant('e').evaluate(symbols) == pytest.approx(math.e)
    assert Constant('phi').evaluate(symbols) == pytest.approx((1 + math.sqrt(5)) / 2)


def test_default_symbol_table_has_constants():
    assert Constant('pi').evaluate() == pytest.approx(math.pi)
    with pytest.raises(UnknownSymbolError):
        Variable('r').evaluate()


def test_unknown_symbols(symbols):
    with pytest.raises(UnknownSymbolError) as info:
        Variable('missing').evaluate(symbols)
    assert info.value.kind == ErrorKind.UNKNOWN_SYMBOL
    with pytest.raises(UnknownSymbolError):
        Constant('missing').evaluate(symbols)


def test_constant_and_variable_namespaces_are_separate(symbols):
    with pytest.raises(UnknownSymbolError):
        Constant('r').evaluate(symbols)
    with pytest.raises(UnknownSymbolError):
        Variable('pi').evaluate(symbols)


def test_arithmetic(symbols):
    r, s = Variable('r'), Variable('s')
    assert Negate(r).evaluate(symbols) == -10
    assert Add(r, s).evaluate(symbols) == 15
    assert Subtract(r, s).evaluate(symbols) == 5
    assert Multiply(r, s).evaluate(symbols) == 50
    assert Divide(r, s).evaluate(symbols) == 2
    assert Modulo(r, s).evaluate(symbols) == 0
    assert Power(r, s).evaluate(symbols) == 100000


def test_circle_area(symbols):
    area = Multiply(Constant('pi'), Power(Variable('r'), Number(2)))
    assert area.evaluate(symbols) == pytest.approx(math.pi * 100)


def test_modulo_sign_follows_dividend():
    assert Modulo(Number(-7), Number(3)).evaluate() == -1
    assert Modulo(Number(7), Number(-3)).evaluate() == 1
    assert Modulo(Number(5.5), Number(2)).evaluate() == pytest.approx(1.5)


@pytest.mark.parametrize('ctor', [Divide, Modulo])
def test_zero_divisor(ctor, symbols):
    for dividend in (Number(3), Variable('r'), Number(0)):
        with pytest.raises(DivideByZeroError) as info:
            ctor(dividend, Number(0)).evaluate(symbols)
        assert info.value.kind == ErrorKind.DIVIDE_BY_ZERO
        assert isinstance(info.value, ZeroDivisionError)


@pytest.mark.parametrize('ctor', [Divide, Modulo])
def test_divisor_checked_before_dividend(ctor, symbols):
    with pytest.raises(DivideByZeroError):
        ctor(Variable('unbound'), Number(0)).evaluate(symbols)


def test_divide_evaluates_divisor_once(counting_symbols):
    Divide(Variable('r'), Variable('s')).evaluate(counting_symbols)
    assert counting_symbols.lookups == ['s', 'r']


def test_power_of_one_skips_exponent(counting_symbols):
    result = Power(Number(1), Variable('never_defined')).evaluate(counting_symbols)
    assert result == 1
    assert counting_symbols.lookups == []


def test_power_rules():
    assert Power(Number(0), Number(2)).evaluate() == 0
    assert Power(Number(5), Number(0)).evaluate() == 1
    assert Power(Number(4), Number(0.5)).evaluate() == pytest.approx(2)
    assert Power(Number(2), Number(-1)).evaluate() == pytest.approx(0.5)
    with pytest.raises(InvalidPowerOfZeroError) as info:
        Power(Number(0), Number(-1)).evaluate()
    assert info.value.kind == ErrorKind.INVALID_POWER_OF_ZERO
    with pytest.raises(InvalidPowerOfZeroError):
        Power(Number(0), Number(0)).evaluate()


def test_negative_base_checked_before_exponent():
    with pytest.raises(NegativeBaseError) as info:
        Power(Number(-2), Variable('unbound')).evaluate()
    assert info.value.kind == ErrorKind.NEGATIVE_BASE


def test_absolute_value(symbols):
    assert AbsoluteValue(Negate(Variable('r'))).evaluate(symbols) == 10
    assert AbsoluteValue(Number(3)).evaluate() == 3


def test_logarithm_rules():
    assert Logarithm(Number(2), Number(8)).evaluate() == pytest.approx(3)
    assert Logarithm(Constant('e'), Constant('e')).evaluate() == pytest.approx(1)
    with pytest.raises(InvalidLogBaseError) as info:
        Logarithm(Number(1), Number(10)).evaluate()
    assert info.value.kind == ErrorKind.INVALID_LOG_BASE
    with pytest.raises(InvalidLogBaseError):
        Logarithm(Number(-2), Number(10)).evaluate()
    with pytest.raises(InvalidLogBaseError):
        Logarithm(Number(0), Number(10)).evaluate()
    with pytest.raises(InvalidLogArgumentError) as info:
        Logarithm(Number(2), Number(-1)).evaluate()
    assert info.value.kind == ErrorKind.INVALID_LOG_ARGUMENT
    with pytest.raises(InvalidLogArgumentError):
        Logarithm(Number(2), Number(0)).evaluate()


def test_logarithm_base_checked_before_argument():
    with pytest.raises(InvalidLogBaseError):
        Logarithm(Number(1), Variable('unbound')).evaluate()


def test_overflow_is_an_error():
    with pytest.raises(NumericOverflowError) as info:
        Power(Number(10), Number(400)).evaluate()
    assert info.value.kind == ErrorKind.NUMERIC_OVERFLOW
    with pytest.raises(NumericOverflowError):
        Multiply(Number(1e308), Number(10)).evaluate()


def test_errors_propagate_from_deep_subtrees(symbols):
    tree = Add(Number(1), Multiply(Variable('r'), Divide(Number(1), Subtract(Variable('s'), Number(5)))))
    with pytest.raises(DivideByZeroError):
        tree.evaluate(symbols)


def test_random_uses_injected_source():
    source = SequenceSource([0.25, 0.5])
    node = Multiply(Random(), Number(4))
    assert node.evaluate(source=source) == 1
    assert node.evaluate(source=source) == 2
    assert node.evaluate(source=source) == 1


def test_random_default_source_in_unit_interval():
    values = [Random().evaluate() for _ in range(100)]
    assert all(0 <= v < 1 for v in values)


def test_random_uses_replaced_default_source():
    set_default_source(SequenceSource([0.75]))
    assert Random().evaluate() == 0.75


def test_reevaluation_after_rebinding(symbols):
    tree = Subtract(Variable('r'), Variable('s'))
    assert tree.evaluate(symbols) == tree.evaluate(symbols) == 5
    symbols.set_variable('s', 12)
    assert tree.evaluate(symbols) == -2


def test_evaluator_reuse_and_function_form(symbols):
    evaluator = Evaluator(symbols)
    assert evaluator.evaluate(Add(Variable('r'), Number(1))) == 11
    assert evaluate(Variable('s'), symbols) == 5


def test_results_are_python_floats(symbols):
    value = Divide(Variable('r'), Number(4)).evaluate(symbols)
    assert type(value) is float
    assert np.isfinite(value)


def test_symbols_may_be_shared_between_tables():
    tree = Add(Variable('x'), Number(1))
    first, second = SymbolTable(variables={'x': 1}), SymbolTable(variables={'x': 41})
    assert tree.evaluate(first) == 2
    assert tree.evaluate(second) == 42
