# Python

"""Arithmetic Expression Trees

Immutable expression trees with numeric evaluation and minimally
parenthesized infix rendering.
"""

from .core import (
  Node, Number, Constant, Variable, Negate,
  Add, Subtract, Multiply, Divide, Modulo, Power,
  Random, AbsoluteValue, Logarithm,
  NodeType, OpType, Associativity, OPERATOR_INFO,
  ErrorKind, ExpressionError, MissingOperandError, InvalidNameError, InvalidNumberError,
  UnknownSymbolError, DuplicateSymbolError, DivideByZeroError, NegativeBaseError,
  InvalidPowerOfZeroError, InvalidLogBaseError, InvalidLogArgumentError, NumericOverflowError,
  Evaluator, evaluate, Renderer, RenderOptions, render
)
from .expression import Expression
from .symbols import SymbolTable
from .sources import (
  NumericSource, GeneratorSource, SequenceSource,
  get_default_source, set_default_source, reset_default_source
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level
from .utils import ExpressionValidator, to_sympy, to_latex

__version__ = "0.1.0"
__all__ = [
  "Node", "Number", "Constant", "Variable", "Negate",
  "Add", "Subtract", "Multiply", "Divide", "Modulo", "Power",
  "Random", "AbsoluteValue", "Logarithm",
  "NodeType", "OpType", "Associativity", "OPERATOR_INFO",
  "ErrorKind", "ExpressionError", "MissingOperandError", "InvalidNameError", "InvalidNumberError",
  "UnknownSymbolError", "DuplicateSymbolError", "DivideByZeroError", "NegativeBaseError",
  "InvalidPowerOfZeroError", "InvalidLogBaseError", "InvalidLogArgumentError", "NumericOverflowError",
  "Evaluator", "evaluate", "Renderer", "RenderOptions", "render",
  "Expression", "SymbolTable",
  "NumericSource", "GeneratorSource", "SequenceSource",
  "get_default_source", "set_default_source", "reset_default_source",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
  "ExpressionValidator", "to_sympy", "to_latex"
]
