# parser/__init__.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Expression parsing components for boolean algebra

"""Boolean expression parsing for the simplifier.

This module turns text into expression trees. Input may be written in the
standard notation (``A * !B + C``), with word operators (``A AND NOT B``),
with Unicode logic symbols (``A ∧ ¬B``) or as LaTeX
(``A \\land \\overline{B}``). The text is normalized into canonical symbols,
tokenized by a SLY lexer and parsed by a SLY LALR grammar with a fixed
precedence ladder.

Core Functions:
    parse: Text to tree, raising a specific ``ParseError`` subclass
    parse_expression: The raising entry point used by the simplifier
    parse_boolean: Text to ``ParseResult``, never raising
    format_to_boolean / format_to_latex: Tree to text
    get_valid_examples: Sample inputs for user hints

Supported Operators (tightest binding first):
    - ! NOT
    - * AND, @ NAND
    - ^ XOR
    - <=> XNOR
    - + OR, # NOR

Example:
    >>> from parser import parse, format_to_boolean
    >>> format_to_boolean(parse("AB + !C"))
    '((A * B) + !(C))'
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from .ast_nodes import Expr
from .cache import ParseCache
from .exceptions import (
    ParseError,
    ExpressionError,
    EmptyExpressionError,
    UnbalancedParenthesesError,
    EmptyParenthesesError,
    InvalidVariableNameError,
    MissingOperandError,
    UnknownOperatorError,
    UnsupportedLatexCommandError,
    TokenizationError,
    InvalidLiteralTokenError,
    InvalidSyntaxError,
    FormatError,
)
from .formatter import to_boolean, to_latex
from .grammar import _BooleanParser
from .normalizer import InputFormat, detect_format, normalize
from utils.logger import get_logger

VALID_EXAMPLES = (
    "A + B",
    "A * B",
    "!(A + B)",
    "A * !B",
    "(A + B) * C",
    "A + (B * C)",
    "0 + 1",
    "A * (B + !C)",
    "!(A * B) + C",
)


@dataclass(frozen=True)
class ParserOptions:
    """Options controlling a single parse.

    Attributes:
        input_format: Dialect to assume, or None to detect it
        auto_fix: Insert implicit AND and repair ``1!A`` style inputs
        silent: Report ``parse_boolean`` failures at debug level only
    """

    input_format: Optional[Union[InputFormat, str]] = None
    auto_fix: bool = True
    silent: bool = False


@dataclass(frozen=True)
class ParseResult:
    """Outcome of ``parse_boolean``; exactly one of expression/error is set."""

    success: bool
    expression: Optional[Expr] = None
    error: Optional[str] = None


def parse(
    source: str,
    options: Optional[ParserOptions] = None,
    cache: Optional[ParseCache] = None,
) -> Expr:
    """Parse expression text into an Abstract Syntax Tree.

    Normalizes the dialect, tokenizes and parses with a fresh parser instance
    for each invocation, so concurrent calls never share parsing state. When
    a cache is supplied, results are looked up and stored under a key built
    from the raw input, the input format and the parse mode.

    Args:
        source: Expression text in any supported dialect
        options: Parsing options; defaults to auto-detection with auto-fix
        cache: Optional result cache owned by the caller

    Returns:
        Root AST node of the parsed expression

    Raises:
        ParseError: A specific subclass describing the defect. Input errors
            carry the assumed format and the raw input in their message.

    Example:
        >>> parse("A(B + C)")
        And(left=Variable(name='A'), right=Or(left=Variable(name='B'), right=Variable(name='C')))
    """
    logger = get_logger()
    options = options or ParserOptions()

    if source is not None and not isinstance(source, str):
        raise InvalidSyntaxError(
            f"Expression must be text, got {type(source).__name__}"
        )

    if source is None or not source.strip():
        raise EmptyExpressionError("Empty expression")

    try:
        fmt = (
            InputFormat(options.input_format)
            if options.input_format
            else detect_format(source)
        )
    except ValueError as exc:
        raise ParseError(f"Unknown input format: {options.input_format!r}") from exc

    mode = "autofix" if options.auto_fix else "strict"
    key = ParseCache.make_key(source, fmt.value, mode)

    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            logger.debug(f"Parse cache hit for {source!r}")
            return cached

    logger.debug(f"Parsing {fmt.value} expression: {source}")

    try:
        canonical = normalize(source, fmt, options.auto_fix)
        result = _BooleanParser().parse(canonical)

    except ExpressionError as exc:
        logger.debug(f"{type(exc).__name__} while parsing {source!r}")
        raise exc.with_context(source, fmt.value) from exc

    except ParseError:
        logger.debug("ParseError encountered during expression parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc

    logger.debug(f"Expression parsed successfully: {result}")

    if cache is not None:
        cache.put(key, result)
    return result


def parse_expression(
    source: str,
    options: Optional[ParserOptions] = None,
    cache: Optional[ParseCache] = None,
) -> Expr:
    """Parse text for the simplifier, raising on any defect.

    Same contract as ``parse``; kept as the name the simplification entry
    points call.
    """
    return parse(source, options, cache)


def parse_boolean(
    source: str,
    options: Optional[ParserOptions] = None,
    cache: Optional[ParseCache] = None,
) -> ParseResult:
    """Parse text and report the outcome as a value instead of raising.

    Args:
        source: Expression text in any supported dialect
        options: Parsing options; ``silent`` keeps failures out of the
            warning log
        cache: Optional result cache owned by the caller

    Returns:
        ParseResult with either the expression or the error message
    """
    options = options or ParserOptions()
    try:
        expression = parse(source, options, cache)
    except ParseError as exc:
        get_logger().parse_failure(str(source), str(exc), silent=options.silent)
        return ParseResult(success=False, error=str(exc))
    except Exception as exc:
        message = f"Parse failed: {type(exc).__name__}: {exc}"
        get_logger().parse_failure(str(source), message, silent=options.silent)
        return ParseResult(success=False, error=message)
    return ParseResult(success=True, expression=expression)


def format_to_boolean(expr: Expr) -> str:
    """Canonical text of an expression tree."""
    return to_boolean(expr)


def format_to_latex(expr: Expr) -> str:
    """LaTeX text of an expression tree."""
    return to_latex(expr)


def get_valid_examples() -> List[str]:
    """Return sample expressions accepted by the parser."""
    return list(VALID_EXAMPLES)


__all__ = [
    "parse",
    "parse_expression",
    "parse_boolean",
    "format_to_boolean",
    "format_to_latex",
    "get_valid_examples",
    "detect_format",
    "normalize",
    "InputFormat",
    "ParserOptions",
    "ParseResult",
    "ParseCache",
    "ParseError",
    "ExpressionError",
    "EmptyExpressionError",
    "UnbalancedParenthesesError",
    "EmptyParenthesesError",
    "InvalidVariableNameError",
    "MissingOperandError",
    "UnknownOperatorError",
    "UnsupportedLatexCommandError",
    "TokenizationError",
    "InvalidLiteralTokenError",
    "InvalidSyntaxError",
    "FormatError",
]

__version__ = "1.0.0"
__description__ = "Boolean expression parsing and formatting components"
