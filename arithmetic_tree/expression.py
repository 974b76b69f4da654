from typing import Optional, Set

import sympy as sp

from .core.node import Node
from .core.errors import MissingOperandError
from .core.renderer import RenderOptions, format_number
from .logging_system import get_logger
from .sources import NumericSource
from .symbols import SymbolTable
from .utils.sympy_utils import to_sympy, to_latex
from .utils.tree_utils import (
  calculate_tree_depth, calculate_tree_size, get_constant_names, get_variable_names
)


class Expression:
  """A named handle on a tree with a cached rendering"""

  __slots__ = ('root', 'options', '_string_cache')

  def __init__(self, root: Node, options: Optional[RenderOptions] = None):
    if not isinstance(root, Node):
      raise MissingOperandError(f"expected an expression node as root, got {root!r}")
    self.root = root
    self.options = options
    self._string_cache: Optional[str] = None

  def evaluate(self, symbols: Optional[SymbolTable] = None,
               source: Optional[NumericSource] = None) -> float:
    return self.root.evaluate(symbols, source)

  def to_string(self) -> str:
    # Trees are immutable, so the rendering never goes stale.
    if self._string_cache is None:
      self._string_cache = self.root.render(self.options)
    return self._string_cache

  def summary(self, symbols: Optional[SymbolTable] = None,
              source: Optional[NumericSource] = None) -> str:
    """`<rendering> = <value>`; evaluation errors propagate"""
    value = self.evaluate(symbols, source)
    return get_logger().result_line(self.to_string(), format_number(value))

  def size(self) -> int:
    return calculate_tree_size(self.root)

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> Set[str]:
    return get_variable_names(self.root)

  def constants(self) -> Set[str]:
    return get_constant_names(self.root)

  def to_sympy(self) -> sp.Expr:
    return to_sympy(self.root)

  def to_latex(self) -> str:
    return to_latex(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
