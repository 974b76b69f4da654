"""Utilities for expression trees."""

from .sympy_utils import to_sympy, to_latex
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, calculate_tree_size,
    find_nodes_by_operator, get_variable_names, get_constant_names
)
from .validator import ExpressionValidator

__all__ = [
    'to_sympy', 'to_latex',
    'get_all_nodes', 'calculate_tree_depth', 'calculate_tree_size',
    'find_nodes_by_operator', 'get_variable_names', 'get_constant_names',
    'ExpressionValidator'
]
