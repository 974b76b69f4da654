from typing import List, Optional

from ..core.errors import ExpressionError
from ..core.node import Node
from ..sources import NumericSource
from ..symbols import SymbolTable
from .tree_utils import get_constant_names, get_variable_names


class ExpressionValidator:

  @staticmethod
  def unbound_symbols(node: Node, symbols: SymbolTable) -> List[str]:
    """Names in the tree that `symbols` cannot resolve, sorted"""
    missing = {name for name in get_constant_names(node) if not symbols.has_constant(name)}
    missing |= {name for name in get_variable_names(node) if not symbols.variable_exists(name)}
    return sorted(missing)

  @staticmethod
  def is_valid_expression(node: Node, symbols: Optional[SymbolTable] = None,
                          source: Optional[NumericSource] = None) -> bool:
    """True when the tree evaluates cleanly against `symbols`"""
    if symbols is None:
      symbols = SymbolTable()
    if ExpressionValidator.unbound_symbols(node, symbols):
      return False
    try:
      node.evaluate(symbols, source)
    except ExpressionError:
      return False
    return True
