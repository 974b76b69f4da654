"""Numeric sources backing the zero-argument `random()` function."""

import threading
from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class NumericSource(Protocol):
  def next(self) -> float:
    """Return a value in [0, 1)"""
    ...


class GeneratorSource:
  """Uniform values from a numpy Generator; pass `seed` for reproducibility"""

  __slots__ = ('rng',)

  def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
    self.rng = rng if rng is not None else np.random.default_rng(seed)

  def next(self) -> float:
    return float(self.rng.random())


class SequenceSource:
  """Replays fixed values in order, cycling when exhausted"""

  __slots__ = ('_values', '_position', '_lock')

  def __init__(self, values: Iterable[float]):
    self._values = [float(v) for v in values]
    if not self._values:
      raise ValueError("SequenceSource needs at least one value")
    for v in self._values:
      if not 0.0 <= v < 1.0:
        raise ValueError(f"source values must lie in [0, 1), got {v}")
    self._position = 0
    self._lock = threading.Lock()

  def next(self) -> float:
    with self._lock:
      value = self._values[self._position % len(self._values)]
      self._position += 1
    return value


# Global instance - lazily created, shared by evaluations without an explicit source
_DEFAULT_SOURCE: Optional[NumericSource] = None
_SOURCE_LOCK = threading.Lock()


def get_default_source() -> NumericSource:
  global _DEFAULT_SOURCE

  # Fast path - no locking needed once initialized
  if _DEFAULT_SOURCE is not None:
    return _DEFAULT_SOURCE

  with _SOURCE_LOCK:
    if _DEFAULT_SOURCE is None:
      _DEFAULT_SOURCE = GeneratorSource()

  return _DEFAULT_SOURCE


def set_default_source(source: NumericSource):
  global _DEFAULT_SOURCE
  if not isinstance(source, NumericSource):
    raise TypeError(f"expected an object with next(), got {type(source).__name__}")
  with _SOURCE_LOCK:
    _DEFAULT_SOURCE = source


def reset_default_source():
  global _DEFAULT_SOURCE
  with _SOURCE_LOCK:
    _DEFAULT_SOURCE = None
