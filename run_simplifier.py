#!/usr/bin/env python3
# run_simplifier.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Command-line interface for boolean simplification with configurable logging levels

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from parser import ParserOptions, format_to_boolean, format_to_latex, parse_expression
from parser.ast_nodes import Expr
from parser.exceptions import ParseError
from simplifier import SimplifierConfig, SimplificationResult, simplify
from simplifier.canonical import to_product_of_sums, to_sum_of_products
from simplifier.config import DEFAULT_MAX_TOTAL_ITERATIONS
from utils.logger import configure_logging, get_logger


def read_expression_file(filepath: Path) -> List[str]:
    """Read expressions from file, one per line.

    Blank lines and lines starting with ``%`` are skipped.

    Args:
        filepath: Path to the expression file

    Returns:
        Expressions in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file holds no expressions
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f]
    except FileNotFoundError:
        raise FileNotFoundError(f"Expression file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading expression file: {e}")

    expressions = [line for line in lines if line and not line.startswith("%")]
    if not expressions:
        raise ValueError("Expression file is empty")
    return expressions


def build_parser_options(args: argparse.Namespace) -> ParserOptions:
    """Map command line flags onto parser options."""
    input_format = None if args.format == "auto" else args.format
    return ParserOptions(input_format=input_format, auto_fix=not args.strict)


def build_config(args: argparse.Namespace) -> SimplifierConfig:
    """Map command line flags onto simplifier budgets."""
    return SimplifierConfig(
        max_total_iterations=args.max_iterations,
        verify_result=args.verify,
        minimize=args.minimize,
    )


def print_result(
    source: str, result: SimplificationResult, show_steps: bool, latex: bool
) -> None:
    """Print one simplification outcome to stdout.

    Args:
        source: Expression text as given
        result: Outcome of ``simplify``
        show_steps: Print every rewrite before the result
        latex: Print LaTeX instead of canonical text
    """
    final = (
        result.simplified_expression_latex if latex
        else result.simplified_expression_string
    )

    if show_steps:
        print(f"📋 {source}")
        if not result.steps:
            print("  (no rule applied)")
        for i, step in enumerate(result.steps, 1):
            print(f"  {i:>2}. {step.rule_name}: {step.expression_before} → {step.expression_after}")
        print(f"  = {final}")
    else:
        print(final)

    if result.max_iterations_reached:
        get_logger().warning(
            f"⚠️  Iteration budget exhausted for {source}; result may not be minimal"
        )
    if result.verified is False:
        get_logger().warning(f"❌ Result for {source} failed verification")
    elif result.verified:
        get_logger().info("✅ Result verified by truth table")


def print_canonical(tree: Expr, form: str, latex: bool) -> None:
    """Print the canonical ``sop`` or ``pos`` form of ``tree``.

    Raises:
        ValueError: Too many variables for a truth table
    """
    canonical = to_sum_of_products(tree) if form == "sop" else to_product_of_sums(tree)
    print(format_to_latex(canonical) if latex else format_to_boolean(canonical))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Quine Boolean Expression Simplifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_simplifier.py "(A * B) + (A * !B)"
  python run_simplifier.py "A AND NOT A" --steps
  python run_simplifier.py "A \\land \\overline{B}" --format latex --latex
  python run_simplifier.py -f expressions.txt --verify -v
  python run_simplifier.py "A ^ B" --canonical pos

Expression file format:
  One expression per line; blank lines and lines starting with % are ignored.

  expressions.txt:
    A * (B + !B)
    !(A + B)
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("expression", nargs="?", help="Expression to simplify")
    source.add_argument(
        "-f", "--file", type=Path, help="Path to file with one expression per line"
    )

    parser.add_argument(
        "--format",
        choices=["auto", "standard", "latex"],
        default="auto",
        help="Input notation (default: detect)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Disable implicit AND insertion and other input repairs",
    )

    parser.add_argument(
        "--latex", action="store_true", help="Print results as LaTeX"
    )

    parser.add_argument(
        "--steps", action="store_true", help="Print every rewrite step"
    )

    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON objects"
    )

    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check each result against its input by truth table",
    )

    parser.add_argument(
        "--minimize",
        action="store_true",
        help="Finish with Quine-McCluskey minimization",
    )

    parser.add_argument(
        "--canonical",
        choices=["sop", "pos"],
        help="Print the canonical sum of products or product of sums instead",
    )

    parser.add_argument(
        "--max-iterations",
        type=int,
        default=DEFAULT_MAX_TOTAL_ITERATIONS,
        help=f"Outer iteration budget (default: {DEFAULT_MAX_TOTAL_ITERATIONS})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the simplifier application.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))
    options = build_parser_options(args)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.file is not None:
            expressions = read_expression_file(args.file)
            logger.info(f"📋 Loaded {len(expressions)} expression(s) from {args.file}")
        else:
            expressions = [args.expression]

        for text in expressions:
            tree = parse_expression(text, options)
            logger.info(f"🔍 Parsed {text} as {tree}")
            if args.canonical:
                print_canonical(tree, args.canonical, args.latex)
                continue

            result = simplify(tree, config=config)

            if args.json:
                print(json.dumps(result.to_dict(), ensure_ascii=False))
            else:
                print_result(text, result, args.steps, args.latex)

        return 0

    except ParseError as e:
        logger.error(f"Expression parsing error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Simplification interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
