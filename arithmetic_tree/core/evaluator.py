"""Recursive numeric evaluation of expression trees."""

from typing import TYPE_CHECKING, Optional

from .errors import (
  DivideByZeroError, ExpressionError, InvalidLogArgumentError, InvalidLogBaseError,
  InvalidPowerOfZeroError, NegativeBaseError, NumericOverflowError, UnknownSymbolError
)
from .operators import (
  NodeType, OpType, OPERATOR_INFO,
  evaluate_binary_op, evaluate_unary_op, evaluate_log, is_finite
)
from ..logging_system import log_debug
from ..sources import NumericSource, get_default_source

if TYPE_CHECKING:
  from .node import Node
  from ..symbols import SymbolTable


class Evaluator:
  """Evaluates trees against one symbol table and one numeric source.

  Operands are evaluated left to right except where a guard needs a value
  first: the divisor of `/` and `%`, and the base of `^` and `log`. The
  exponent of `1 ^ x` is never evaluated.
  """

  __slots__ = ('symbols', 'source')

  def __init__(self, symbols: Optional['SymbolTable'] = None, source: Optional[NumericSource] = None):
    if symbols is None:
      from ..symbols import SymbolTable
      symbols = SymbolTable()
    self.symbols = symbols
    self.source = source

  def evaluate(self, node: 'Node') -> float:
    try:
      return self._evaluate(node)
    except ExpressionError as e:
      log_debug(f"evaluation failed [{e.kind.name}]: {e}")
      raise

  def _evaluate(self, node: 'Node') -> float:
    kind = node.kind
    if kind == NodeType.NUMBER:
      return node.value
    elif kind == NodeType.CONSTANT:
      value = self.symbols.lookup_constant(node.name)
      if value is None:
        raise UnknownSymbolError(f"unknown constant {node.name!r}")
      return value
    elif kind == NodeType.VARIABLE:
      value = self.symbols.get_variable(node.name)
      if value is None:
        raise UnknownSymbolError(f"unknown variable {node.name!r}")
      return value
    elif kind == NodeType.UNARY_OP:
      return evaluate_unary_op(self._evaluate(node.children[0]), node.op)
    elif kind == NodeType.BINARY_OP:
      return self._evaluate_binary(node)
    elif kind == NodeType.FUNCTION:
      return self._evaluate_function(node)
    raise TypeError(f"unexpected node kind {kind!r}")

  def _evaluate_binary(self, node: 'Node') -> float:
    op = node.op
    left, right = node.children

    if op in (OpType.DIV, OpType.MOD):
      b = self._evaluate(right)
      if b == 0:
        raise DivideByZeroError(f"divisor of '{OPERATOR_INFO[op].symbol}' evaluated to zero")
      a = self._evaluate(left)
    elif op == OpType.POW:
      a = self._evaluate(left)
      if a < 0:
        raise NegativeBaseError(f"cannot raise negative base {a} to a power")
      if a == 1:
        return 1.0
      b = self._evaluate(right)
      if a == 0:
        if b <= 0:
          raise InvalidPowerOfZeroError(f"cannot raise 0 to non-positive power {b}")
        return 0.0
      if b == 0:
        return 1.0
    else:
      a = self._evaluate(left)
      b = self._evaluate(right)

    return self._checked(evaluate_binary_op(a, b, op), node)

  def _evaluate_function(self, node: 'Node') -> float:
    op = node.op
    if op == OpType.RANDOM:
      source = self.source if self.source is not None else get_default_source()
      return float(source.next())
    elif op == OpType.ABS:
      return evaluate_unary_op(self._evaluate(node.children[0]), op)
    elif op == OpType.LOG:
      base_node, argument_node = node.children
      base = self._evaluate(base_node)
      if base <= 0 or base == 1:
        raise InvalidLogBaseError(f"logarithm base must be positive and not 1, got {base}")
      argument = self._evaluate(argument_node)
      if argument <= 0:
        raise InvalidLogArgumentError(f"logarithm argument must be positive, got {argument}")
      return self._checked(evaluate_log(base, argument), node)
    raise TypeError(f"unexpected function {op!r}")

  @staticmethod
  def _checked(result: float, node: 'Node') -> float:
    if not is_finite(result):
      raise NumericOverflowError(f"'{node.name}' produced a non-finite result ({result})")
    return result


def evaluate(node: 'Node', symbols: Optional['SymbolTable'] = None,
             source: Optional[NumericSource] = None) -> float:
  return Evaluator(symbols, source).evaluate(node)
