"""Error taxonomy for expression construction and evaluation."""

import numbers
import numpy as np
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
  MISSING_OPERAND = 'missing_operand'
  INVALID_NAME = 'invalid_name'
  INVALID_NUMBER = 'invalid_number'
  UNKNOWN_SYMBOL = 'unknown_symbol'
  DUPLICATE_SYMBOL = 'duplicate_symbol'
  DIVIDE_BY_ZERO = 'divide_by_zero'
  NEGATIVE_BASE = 'negative_base'
  INVALID_POWER_OF_ZERO = 'invalid_power_of_zero'
  INVALID_LOG_BASE = 'invalid_log_base'
  INVALID_LOG_ARGUMENT = 'invalid_log_argument'
  NUMERIC_OVERFLOW = 'numeric_overflow'


class ExpressionError(Exception):
  """Base class for every failure raised by the package.

  `kind` identifies the failure independently of the message text.
  """

  kind: ErrorKind

  def __init__(self, message: str, kind: Optional[ErrorKind] = None):
    super().__init__(message)
    if kind is not None:
      self.kind = kind


# Construction time

class MissingOperandError(ExpressionError, ValueError):
  kind = ErrorKind.MISSING_OPERAND


class InvalidNameError(ExpressionError, ValueError):
  kind = ErrorKind.INVALID_NAME


class InvalidNumberError(ExpressionError, ValueError):
  kind = ErrorKind.INVALID_NUMBER


# Symbol table

class UnknownSymbolError(ExpressionError, LookupError):
  kind = ErrorKind.UNKNOWN_SYMBOL


class DuplicateSymbolError(ExpressionError, ValueError):
  kind = ErrorKind.DUPLICATE_SYMBOL


# Evaluation time

class DivideByZeroError(ExpressionError, ZeroDivisionError):
  kind = ErrorKind.DIVIDE_BY_ZERO


class NegativeBaseError(ExpressionError, ArithmeticError):
  kind = ErrorKind.NEGATIVE_BASE


class InvalidPowerOfZeroError(ExpressionError, ArithmeticError):
  kind = ErrorKind.INVALID_POWER_OF_ZERO


class InvalidLogBaseError(ExpressionError, ArithmeticError):
  kind = ErrorKind.INVALID_LOG_BASE


class InvalidLogArgumentError(ExpressionError, ArithmeticError):
  kind = ErrorKind.INVALID_LOG_ARGUMENT


class NumericOverflowError(ExpressionError, OverflowError):
  kind = ErrorKind.NUMERIC_OVERFLOW


def check_name(name, what: str = 'symbol') -> str:
  if not isinstance(name, str) or len(name) == 0:
    raise InvalidNameError(f"{what} name must be a non-empty string, got {name!r}")
  return name


def check_number(value, what: str = 'value') -> float:
  if isinstance(value, bool) or not isinstance(value, numbers.Real):
    raise InvalidNumberError(f"{what} must be a real number, got {value!r}")
  try:
    result = float(value)
  except (OverflowError, ValueError) as exc:
    raise InvalidNumberError(f"{what} is out of range, got {value!r}") from exc
  if not np.isfinite(result):
    raise InvalidNumberError(f"{what} must be finite, got {value!r}")
  return result
