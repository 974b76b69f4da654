import sympy as sp

from ..core.node import Node
from ..core.operators import NodeType, OpType

# Well-known constants that have an exact SymPy counterpart
SYMPY_CONSTANTS = {
  'pi': sp.pi,
  'e': sp.E,
  'phi': sp.GoldenRatio,
  'fi': sp.GoldenRatio,
}

_random = sp.Function('random')


def _number_to_sympy(value: float) -> sp.Expr:
  if value.is_integer():
    return sp.Integer(int(value))
  return sp.Float(value)


def to_sympy(node: Node) -> sp.Expr:
  """Convert a tree to a SymPy expression.

  Variables and unknown constants become symbols. `%` maps to `sympy.Mod`,
  whose result follows the divisor's sign while evaluation follows the
  dividend's; the two agree for non-negative operands.
  """
  kind = node.kind
  if kind == NodeType.NUMBER:
    return _number_to_sympy(node.value)
  elif kind == NodeType.CONSTANT:
    return SYMPY_CONSTANTS.get(node.name, sp.Symbol(node.name))
  elif kind == NodeType.VARIABLE:
    return sp.Symbol(node.name)

  args = [to_sympy(child) for child in node.children]
  op = node.op
  if op == OpType.NEG:
    return -args[0]
  elif op == OpType.ADD:
    return sp.Add(args[0], args[1])
  elif op == OpType.SUB:
    return sp.Add(args[0], sp.Mul(-1, args[1]))
  elif op == OpType.MUL:
    return sp.Mul(args[0], args[1])
  elif op == OpType.DIV:
    return sp.Mul(args[0], sp.Pow(args[1], -1))
  elif op == OpType.MOD:
    return sp.Mod(args[0], args[1])
  elif op == OpType.POW:
    return sp.Pow(args[0], args[1])
  elif op == OpType.RANDOM:
    return _random()
  elif op == OpType.ABS:
    return sp.Abs(args[0])
  elif op == OpType.LOG:
    return sp.log(args[1], args[0])
  raise RuntimeWarning(f"to_sympy reached unexpected node {node!r}")


def to_latex(node: Node) -> str:
  return sp.latex(to_sympy(node))
