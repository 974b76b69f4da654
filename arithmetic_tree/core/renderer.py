"""Infix rendering with precedence-aware parenthesization."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .operators import Associativity, NodeType, OpType, OPERATOR_INFO

if TYPE_CHECKING:
  from .node import Node

# Right operands that may drop their parentheses on a priority tie without
# changing the value under left-to-right reading.
_REGROUPABLE = {
  OpType.ADD: (OpType.ADD, OpType.SUB),
  OpType.MUL: (OpType.MUL, OpType.DIV),
}

# Parents under which a non-associative operand keeps its parentheses even
# though it binds tighter: `pi * (r ^ 2)`, `(a ^ b) ^ c`. Additive parents
# print it bare, as in `r ^ 2 + 1`.
_GROUPS_NON_ASSOCIATIVE = (OpType.MUL, OpType.DIV, OpType.MOD, OpType.POW)


@dataclass(frozen=True)
class RenderOptions:
  # False keeps the historical tie rule: an equal-priority child is never
  # parenthesized, so `a - (b - c)` prints as `a - b - c`.
  strict_associativity: bool = False


DEFAULT_OPTIONS = RenderOptions()


def format_number(value: float) -> str:
  """Shortest decimal form; integral values lose the trailing `.0`"""
  if float(value).is_integer() and abs(value) < 1e16:
    return str(int(value))
  return repr(float(value))


class Renderer:

  __slots__ = ('options',)

  def __init__(self, options: Optional[RenderOptions] = None):
    self.options = options if options is not None else DEFAULT_OPTIONS

  def render(self, node: 'Node') -> str:
    kind = node.kind
    if kind == NodeType.NUMBER:
      return format_number(node.value)
    elif kind in (NodeType.CONSTANT, NodeType.VARIABLE):
      return node.name
    elif kind == NodeType.FUNCTION:
      return self._render_function(node)
    elif kind == NodeType.UNARY_OP:
      return self._render_unary(node)
    elif kind == NodeType.BINARY_OP:
      return self._render_binary(node)
    raise TypeError(f"unexpected node kind {kind!r}")

  def _render_function(self, node: 'Node') -> str:
    if node.op == OpType.ABS:
      return f"|{self.render(node.children[0])}|"
    args = ', '.join(self.render(child) for child in node.children)
    return f"{node.name}({args})"

  def _render_unary(self, node: 'Node') -> str:
    child = node.children[0]
    text = self.render(child)
    if child.kind == NodeType.BINARY_OP:
      return f"{node.symbol} ({text})"
    return f"{node.symbol} {text}"

  def _render_binary(self, node: 'Node') -> str:
    left, right = node.children
    left_text = self.render(left)
    right_text = self.render(right)
    if self._needs_parens(node, left, is_right=False):
      left_text = f"({left_text})"
    if self._needs_parens(node, right, is_right=True):
      right_text = f"({right_text})"
    return f"{left_text} {node.symbol} {right_text}"

  def _needs_parens(self, parent: 'Node', child: 'Node', is_right: bool) -> bool:
    strict = self.options.strict_associativity
    if child.kind == NodeType.UNARY_OP:
      return strict and parent.op == OpType.POW and not is_right
    if child.kind != NodeType.BINARY_OP:
      return False

    info = OPERATOR_INFO[child.op]
    if info.associativity == Associativity.NONE and parent.op in _GROUPS_NON_ASSOCIATIVE:
      return True
    if info.priority > parent.priority:
      return False
    if info.priority < parent.priority:
      return True

    # Equal priority
    if strict and is_right:
      return child.op not in _REGROUPABLE.get(parent.op, ())
    return False


def render(node: 'Node', options: Optional[RenderOptions] = None) -> str:
  return Renderer(options).render(node)
