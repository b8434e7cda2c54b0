"""Command-line entry point - evaluates each expression given on the command line"""
import argparse
import logging
import sys

from config.config import *
from core import DEFAULT_REGISTRY, EvaluationError
from calculator import ExpressionCalculator

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Configure root logging; --verbose enables the DEBUG trace"""
    level = LOGGING_CONFIG["verbose_level"] if verbose else LOGGING_CONFIG["level"]
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOGGING_CONFIG["format"]
    )


def format_result(value, precision=None):
    """Format a result with the given number of significant digits"""
    precision = OUTPUT_CONFIG["precision"] if precision is None else precision
    return f"{value:.{precision}g}"


def list_symbols(registry=DEFAULT_REGISTRY):
    """Listing of built-in functions and constants"""
    lines = ["Functions:"]
    for name in registry.function_names():
        lines.append(f"  {name} (arity {registry.function(name).arity})")
    lines.append("Constants:")
    for name in registry.constant_names():
        lines.append(f"  {name} = {format_result(registry.constant(name).value)}")
    return "\n".join(lines)


def main(args):
    calculator = ExpressionCalculator()

    if args.list_symbols:
        print(list_symbols(calculator.registry))
        if not args.expressions:
            return 0

    failures = 0
    for text in args.expressions:
        try:
            if args.rpn:
                print(f"{OUTPUT_CONFIG['rpn_prefix']}{calculator.to_rpn_string(text)}")
            result = calculator.evaluate(text)
        except EvaluationError as e:
            failures += 1
            print(f"{OUTPUT_CONFIG['error_prefix']}{e}")
            continue
        print(format_result(result, args.precision))

    if failures:
        logger.info(f"{failures} of {len(args.expressions)} expression(s) failed")
    return 1 if failures else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-yard arithmetic expression evaluator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. \"3 + 4 * 2 / (1 - 5) ^ 2 ^ 3\""
    )
    parser.add_argument(
        "--rpn",
        action="store_true",
        help="Also print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=OUTPUT_CONFIG["precision"],
        help="Significant digits in printed results"
    )
    parser.add_argument(
        "--list_symbols",
        action="store_true",
        help="List the built-in functions and constants"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log tokens and the shunting-yard trace at DEBUG level"
    )
    return parser


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.expressions and not args.list_symbols:
        parser.error("at least one expression is required")
    if args.precision < 1:
        parser.error("--precision must be at least 1")

    validate_config()
    setup_logging(args.verbose)
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
