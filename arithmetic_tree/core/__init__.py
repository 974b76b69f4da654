"""Core expression tree components."""

from .node import (
    Node, Number, Constant, Variable, Negate,
    Add, Subtract, Multiply, Divide, Modulo, Power,
    Random, AbsoluteValue, Logarithm
)
from .operators import (
    NodeType, OpType, Associativity, OperatorInfo, OPERATOR_INFO, FUNCTION_INFO,
    evaluate_binary_op, evaluate_unary_op, evaluate_log
)
from .errors import (
    ErrorKind, ExpressionError, MissingOperandError, InvalidNameError, InvalidNumberError,
    UnknownSymbolError, DuplicateSymbolError, DivideByZeroError, NegativeBaseError,
    InvalidPowerOfZeroError, InvalidLogBaseError, InvalidLogArgumentError, NumericOverflowError
)
from .evaluator import Evaluator, evaluate
from .renderer import Renderer, RenderOptions, render, format_number

__all__ = [
    'Node', 'Number', 'Constant', 'Variable', 'Negate',
    'Add', 'Subtract', 'Multiply', 'Divide', 'Modulo', 'Power',
    'Random', 'AbsoluteValue', 'Logarithm',
    'NodeType', 'OpType', 'Associativity', 'OperatorInfo', 'OPERATOR_INFO', 'FUNCTION_INFO',
    'evaluate_binary_op', 'evaluate_unary_op', 'evaluate_log',
    'ErrorKind', 'ExpressionError', 'MissingOperandError', 'InvalidNameError', 'InvalidNumberError',
    'UnknownSymbolError', 'DuplicateSymbolError', 'DivideByZeroError', 'NegativeBaseError',
    'InvalidPowerOfZeroError', 'InvalidLogBaseError', 'InvalidLogArgumentError', 'NumericOverflowError',
    'Evaluator', 'evaluate', 'Renderer', 'RenderOptions', 'render', 'format_number'
]
