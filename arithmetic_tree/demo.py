"""
Sample session: builds a handful of trees over shared variables and
constants and prints one `<expression> = <value>` line per tree.
"""

import argparse
import sys
from typing import Dict, List, Optional

from .core.errors import ExpressionError
from .core.node import (
    AbsoluteValue, Add, Constant, Divide, Modulo, Multiply, Negate, Number,
    Power, Random, Subtract, Variable
)
from .core.renderer import RenderOptions
from .expression import Expression
from .logging_system import LogLevel, configure_logging, log_milestone, log_warning
from .sources import GeneratorSource, NumericSource
from .symbols import SymbolTable


def build_symbol_table() -> SymbolTable:
    symbols = SymbolTable()
    symbols.create_variable('r', 10)
    symbols.create_variable('s', 2)
    symbols.set_variable('s', 5)
    symbols.register_constant('Euler', 0.5772156649)
    return symbols


def build_sample_expressions(options: Optional[RenderOptions] = None) -> Dict[str, Expression]:
    r, s = Variable('r'), Variable('s')
    trees = {
        'circle_area': Multiply(Constant('pi'), Power(r, Number(2))),
        'sum': Add(r, s),
        'difference': Subtract(r, s),
        'product': Multiply(r, s),
        'quotient': Divide(r, s),
        'power': Power(r, s),
        'remainder': Modulo(r, s),
        'negation': Negate(r),
        'new_constant': Add(Number(1), Constant('Euler')),
        'absolute_value': AbsoluteValue(r),
        'scaled_random': Multiply(Random(), Number(100)),
    }
    return {name: Expression(tree, options) for name, tree in trees.items()}


def run(symbols: SymbolTable, expressions: Dict[str, Expression],
        source: Optional[NumericSource] = None) -> List[str]:
    """Evaluate every sample; failures are reported and skipped"""
    lines = []
    for name, expression in expressions.items():
        try:
            lines.append(expression.summary(symbols, source))
        except ExpressionError as e:
            log_warning(f"{name}: {expression} could not be evaluated ({e.kind.name}: {e})")
    log_milestone(f"evaluated {len(lines)}/{len(expressions)} sample expressions")
    return lines


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render and evaluate sample arithmetic expression trees")
    parser.add_argument('--strict', action='store_true',
                        help="parenthesize equal-priority right operands that cannot be regrouped")
    parser.add_argument('--seed', type=int, default=None, help="seed for random()")
    parser.add_argument('--log-level', choices=[level.name.lower() for level in LogLevel],
                        default='minimal')
    parser.add_argument('--log-file', default=None, help="also write log records to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(LogLevel[args.log_level.upper()],
                      log_to_file=args.log_file is not None,
                      log_file_path=args.log_file)

    symbols = build_symbol_table()
    expressions = build_sample_expressions(RenderOptions(strict_associativity=args.strict))
    for line in run(symbols, expressions, GeneratorSource(args.seed)):
        print(line)
    sys.stdout.flush()
    return 0
