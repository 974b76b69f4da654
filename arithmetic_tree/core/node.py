from typing import Optional, Tuple

from .errors import MissingOperandError, check_name, check_number
from .evaluator import Evaluator
from .operators import NodeType, OpType, OPERATOR_INFO, FUNCTION_INFO
from .renderer import Renderer, RenderOptions
from ..sources import NumericSource


class Node:
  """One expression tree node.

  A single flat type for every kind of node: `kind` says which family it
  belongs to and `op` which operator or function it is. Nodes are immutable
  and own their children. Build them through the constructors below
  (`Number`, `Add`, `Logarithm`, ...), not directly.
  """

  __slots__ = ('kind', 'op', 'children', 'value', 'name', '_hash_cache')

  def __init__(self, kind: NodeType, op: Optional[OpType] = None, children: Tuple['Node', ...] = (),
               value: Optional[float] = None, name: Optional[str] = None):
    children = tuple(children)
    for child in children:
      if not isinstance(child, Node):
        raise MissingOperandError(f"expected an expression node as operand, got {child!r}")
    expected = _expected_arity(kind, op)
    if len(children) != expected:
      raise MissingOperandError(
        f"{kind.name} node {op!r} takes {expected} operand(s), got {len(children)}")
    object.__setattr__(self, 'kind', kind)
    object.__setattr__(self, 'op', op)
    object.__setattr__(self, 'children', children)
    object.__setattr__(self, 'value', value)
    object.__setattr__(self, 'name', name)
    object.__setattr__(self, '_hash_cache', None)

  def __setattr__(self, key, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, key):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @property
  def arity(self) -> int:
    return len(self.children)

  @property
  def priority(self) -> Optional[int]:
    """Precedence rank for operators, None for operands and functions"""
    info = OPERATOR_INFO.get(self.op) if self.is_operator() else None
    return info.priority if info is not None else None

  @property
  def symbol(self) -> Optional[str]:
    return OPERATOR_INFO[self.op].symbol if self.is_operator() else None

  def is_operand(self) -> bool:
    return self.kind in (NodeType.NUMBER, NodeType.CONSTANT, NodeType.VARIABLE)

  def is_function(self) -> bool:
    return self.kind == NodeType.FUNCTION

  def is_operator(self) -> bool:
    return self.kind in (NodeType.UNARY_OP, NodeType.BINARY_OP)

  def evaluate(self, symbols=None, source: Optional[NumericSource] = None) -> float:
    return Evaluator(symbols, source).evaluate(self)

  def render(self, options: Optional[RenderOptions] = None) -> str:
    return Renderer(options).render(self)

  def __str__(self) -> str:
    return self.render()

  def __repr__(self) -> str:
    if self.kind == NodeType.NUMBER:
      return f"Number({self.value!r})"
    if self.kind == NodeType.CONSTANT:
      return f"Constant({self.name!r})"
    if self.kind == NodeType.VARIABLE:
      return f"Variable({self.name!r})"
    args = ', '.join(repr(child) for child in self.children)
    return f"{_CONSTRUCTOR_NAMES[self.op]}({args})"

  def _key(self) -> tuple:
    return (self.kind, self.op, self.value, self.name, self.children)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', hash(self._key()))
    return self._hash_cache


def _expected_arity(kind: NodeType, op: Optional[OpType]) -> int:
  if kind in (NodeType.NUMBER, NodeType.CONSTANT, NodeType.VARIABLE):
    return 0
  if kind == NodeType.FUNCTION and op in FUNCTION_INFO:
    return FUNCTION_INFO[op][1]
  if kind in (NodeType.UNARY_OP, NodeType.BINARY_OP) and op in OPERATOR_INFO:
    arity = OPERATOR_INFO[op].arity
    if arity == (1 if kind == NodeType.UNARY_OP else 2):
      return arity
  raise ValueError(f"{op!r} is not a valid operator for a {kind.name} node")


# Operands

def Number(value: float) -> Node:
  return Node(NodeType.NUMBER, value=check_number(value, 'number literal'))


def Constant(name: str) -> Node:
  return Node(NodeType.CONSTANT, name=check_name(name, 'constant'))


def Variable(name: str) -> Node:
  return Node(NodeType.VARIABLE, name=check_name(name, 'variable'))


# Operators

def _unary(op: OpType, operand: Node) -> Node:
  if operand is None:
    raise MissingOperandError(f"'{OPERATOR_INFO[op].symbol}' requires an operand")
  return Node(NodeType.UNARY_OP, op, (operand,), name=OPERATOR_INFO[op].symbol)


def _binary(op: OpType, left: Node, right: Node) -> Node:
  if left is None or right is None:
    raise MissingOperandError(f"'{OPERATOR_INFO[op].symbol}' requires two operands")
  return Node(NodeType.BINARY_OP, op, (left, right), name=OPERATOR_INFO[op].symbol)


def Negate(operand: Node) -> Node:
  return _unary(OpType.NEG, operand)


def Add(left: Node, right: Node) -> Node:
  return _binary(OpType.ADD, left, right)


def Subtract(left: Node, right: Node) -> Node:
  return _binary(OpType.SUB, left, right)


def Multiply(left: Node, right: Node) -> Node:
  return _binary(OpType.MUL, left, right)


def Divide(left: Node, right: Node) -> Node:
  return _binary(OpType.DIV, left, right)


def Modulo(left: Node, right: Node) -> Node:
  return _binary(OpType.MOD, left, right)


def Power(base: Node, exponent: Node) -> Node:
  return _binary(OpType.POW, base, exponent)


# Functions

def _function(op: OpType, *args: Node) -> Node:
  name, arity = FUNCTION_INFO[op]
  if len(args) != arity or any(arg is None for arg in args):
    raise MissingOperandError(f"{name}() requires {arity} argument(s)")
  return Node(NodeType.FUNCTION, op, args, name=name)


def Random() -> Node:
  return _function(OpType.RANDOM)


def AbsoluteValue(operand: Node) -> Node:
  return _function(OpType.ABS, operand)


def Logarithm(base: Node, argument: Node) -> Node:
  return _function(OpType.LOG, base, argument)


_CONSTRUCTOR_NAMES = {
  OpType.NEG: 'Negate', OpType.ADD: 'Add', OpType.SUB: 'Subtract', OpType.MUL: 'Multiply',
  OpType.DIV: 'Divide', OpType.MOD: 'Modulo', OpType.POW: 'Power',
  OpType.RANDOM: 'Random', OpType.ABS: 'AbsoluteValue', OpType.LOG: 'Logarithm',
}
