import numpy as np
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict


class NodeType(IntEnum):
  NUMBER = 0
  CONSTANT = 1
  VARIABLE = 2
  UNARY_OP = 3
  BINARY_OP = 4
  FUNCTION = 5


class OpType(IntEnum):
  # Unary ops
  NEG = 0
  # Binary ops
  ADD = 1
  SUB = 2
  MUL = 3
  DIV = 4
  MOD = 5
  POW = 6
  # Functions
  RANDOM = 7
  ABS = 8
  LOG = 9


class Associativity(Enum):
  LEFT = 'left'
  NONE = 'none'  # grouped when nested under a multiplicative operator or `^`


@dataclass(frozen=True)
class OperatorInfo:
  symbol: str
  priority: int
  arity: int
  associativity: Associativity = Associativity.LEFT


# Binary priorities are negative; the larger rank binds tighter.
OPERATOR_INFO: Dict[OpType, OperatorInfo] = {
  OpType.NEG: OperatorInfo('-', 0, 1),
  OpType.POW: OperatorInfo('^', -10, 2, Associativity.NONE),
  OpType.MUL: OperatorInfo('*', -20, 2),
  OpType.DIV: OperatorInfo('/', -20, 2),
  OpType.MOD: OperatorInfo('%', -20, 2),
  OpType.ADD: OperatorInfo('+', -30, 2),
  OpType.SUB: OperatorInfo('-', -30, 2),
}

FUNCTION_INFO: Dict[OpType, tuple] = {
  OpType.RANDOM: ('random', 0),
  OpType.ABS: ('abs', 1),
  OpType.LOG: ('log', 2),
}


def evaluate_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  """Raw float64 kernel; domain checks are the caller's job."""
  a = np.float64(left_val)
  b = np.float64(right_val)
  with np.errstate(all='ignore'):
    if op_type == OpType.ADD:
      return float(a + b)
    elif op_type == OpType.SUB:
      return float(a - b)
    elif op_type == OpType.MUL:
      return float(a * b)
    elif op_type == OpType.DIV:
      return float(a / b)
    elif op_type == OpType.MOD:
      return float(np.fmod(a, b))
    elif op_type == OpType.POW:
      return float(np.power(a, b))
  raise ValueError(f"not a binary operator: {op_type!r}")


def evaluate_unary_op(operand_val: float, op_type: OpType) -> float:
  a = np.float64(operand_val)
  if op_type == OpType.NEG:
    return float(-a)
  elif op_type == OpType.ABS:
    return float(np.abs(a))
  raise ValueError(f"not a unary operator: {op_type!r}")


def evaluate_log(base: float, argument: float) -> float:
  with np.errstate(all='ignore'):
    return float(np.log(np.float64(argument)) / np.log(np.float64(base)))


def is_finite(value: float) -> bool:
  return bool(np.isfinite(value))
