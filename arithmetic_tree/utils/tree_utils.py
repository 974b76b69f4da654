"""
Tree Utility Functions

Traversal and inspection helpers for expression trees.
"""

from collections import deque
from typing import List, Set

from ..core.node import Node
from ..core.operators import NodeType, OpType


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left child before right child"""
    nodes = [node]
    for child in node.children:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)"""
    if not node.children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in node.children)


def calculate_tree_size(node: Node) -> int:
    return 1 + sum(calculate_tree_size(child) for child in node.children)


def find_nodes_by_operator(node: Node, op_type: OpType) -> List[Node]:
    return [n for n in get_all_nodes(node, 'depth_first') if n.op == op_type]


def _names_of_kind(node: Node, kind: NodeType) -> Set[str]:
    return {n.name for n in get_all_nodes(node) if n.kind == kind}


def get_variable_names(node: Node) -> Set[str]:
    return _names_of_kind(node, NodeType.VARIABLE)


def get_constant_names(node: Node) -> Set[str]:
    return _names_of_kind(node, NodeType.CONSTANT)
