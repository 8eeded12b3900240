# parser/normalizer.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Input dialect detection, translation and validation before tokenization

"""Normalization of raw expression text into the canonical symbol set.

Users type expressions in several dialects: standard ASCII operators, word
operators (``A AND NOT B``), Unicode logic symbols and LaTeX commands. This
module turns all of them into the canonical form understood by the lexer::

    !  NOT        *  AND        +  OR        (  )
    ^  XOR        @  NAND       #  NOR       <=>  XNOR

The pipeline is:

1. Reject empty input and the literal words ``undefined`` / ``null``.
2. Translate the dialect (LaTeX commands, words, Unicode and ASCII symbols).
   Identifiers in LaTeX input are uppercased, so ``a \\land b`` is ``A*B``.
3. Reject invalid variable names (lowercase letters, underscores, digits).
4. Strip whitespace.
5. Reject structural defects that cannot be repaired safely: unbalanced or
   empty parentheses and operators without operands.
6. When auto-fix is enabled, insert implicit AND between adjacent terms
   (``AB`` becomes ``A*B``) and repair a constant written directly before a
   negation (``1!A`` becomes ``1*!A``) at every nesting depth.

Each rejection raises the most specific ``ExpressionError`` subclass.

Example:
    >>> normalize(r"\\overline{A \\land B}")
    '!(A*B)'
"""

import re
from enum import Enum
from typing import Optional

from .exceptions import (
    EmptyExpressionError,
    EmptyParenthesesError,
    InvalidLiteralTokenError,
    InvalidVariableNameError,
    MissingOperandError,
    UnbalancedParenthesesError,
    UnknownOperatorError,
    UnsupportedLatexCommandError,
)
from utils.logger import get_logger


class InputFormat(str, Enum):
    """Input dialects recognised by the normalizer."""

    STANDARD = "standard"
    LATEX = "latex"


LATEX_MARKERS = (
    r"\land",
    r"\lor",
    r"\lnot",
    r"\vee",
    r"\wedge",
    r"\neg",
    r"\overline",
    r"\oplus",
    r"\uparrow",
    r"\downarrow",
    r"\leftrightarrow",
)

UNICODE_MARKERS = ("∧", "∨", "¬")

_LATEX_COMMAND = re.compile(r"\\([a-zA-Z]+)")
_LATEX_SPACING = re.compile(r"\\[,;:! ]")
_LATEX_TEXT_CONSTANT = re.compile(r"\\(?:text|mathrm)\s*\{\s*([TF01])\s*\}")
_OVERLINE = re.compile(r"\\(?:overline|bar)\s*\{")

# Command name -> canonical replacement
_LATEX_COMMANDS = {
    "lnot": "!",
    "neg": "!",
    "land": "*",
    "wedge": "*",
    "cdot": "*",
    "times": "*",
    "lor": "+",
    "vee": "+",
    "oplus": "^",
    "uparrow": "@",
    "downarrow": "#",
    "leftrightarrow": "<=>",
    "Leftrightarrow": "<=>",
    "iff": "<=>",
    "equiv": "<=>",
    "top": "1",
    "bot": "0",
    "left": "",
    "right": "",
    "quad": " ",
    "qquad": " ",
}

_LITERAL_TOKEN = re.compile(r"\b(undefined|null)\b")
_UNKNOWN_WORD = re.compile(
    r"\b(XNOR|XOR|NAND|NOR|IMPLIES|IMPL|IFF|EQUIV)\b", re.IGNORECASE
)
_UNKNOWN_ARROW = re.compile(r"->|(?<!<)=>|<-")

_WORD_OPERATORS = (
    (re.compile(r"\bNOT\b", re.IGNORECASE), "!"),
    (re.compile(r"\bAND\b", re.IGNORECASE), "*"),
    (re.compile(r"\bOR\b", re.IGNORECASE), "+"),
)

# Order matters: doubled forms before single ones
_SYMBOL_OPERATORS = (
    ("&&", "*"),
    ("||", "+"),
    ("&", "*"),
    ("|", "+"),
    ("·", "*"),
    ("⋅", "*"),
    ("∧", "*"),
    ("∨", "+"),
    ("~", "!"),
    ("¬", "!"),
    ("⊕", "^"),
    ("⊼", "@"),
    ("↑", "@"),
    ("⊽", "#"),
    ("↓", "#"),
    ("⇔", "<=>"),
    ("↔", "<=>"),
    ("≡", "<=>"),
)

_LOWERCASE_NAME = re.compile(r"[A-Za-z0-9_]*[a-z][A-Za-z0-9_]*")
_UNDERSCORE_NAME = re.compile(r"[A-Z0-9]*_[A-Z0-9_]*")
_DIGIT_NAME = re.compile(r"[A-Z]+[0-9][A-Z0-9]*")

_OPERATOR = re.compile(r"<=>|[*+^@#!]")
_OPERATOR_NAMES = {
    "*": "AND",
    "+": "OR",
    "^": "XOR",
    "@": "NAND",
    "#": "NOR",
    "<=>": "XNOR",
}
# Characters after which an operand is missing / before which one is missing
_NO_LEFT_OPERAND = set("(*+^@#!>")
_NO_RIGHT_OPERAND = set(")*+^@#<")

_IMPLICIT_AND = (
    re.compile(r"([A-Z01)])(?=[A-Z01(])"),
    re.compile(r"([A-Z)])(?=!)"),
)
_NUMBER_BEFORE_NOT = re.compile(r"([01])!")


def detect_format(text: str) -> InputFormat:
    """Guess the dialect of an expression.

    LaTeX is assumed when the text contains a known LaTeX operator, any other
    backslash command, or one of the Unicode operators ``∧ ∨ ¬``.

    Args:
        text: Raw expression text

    Returns:
        ``InputFormat.LATEX`` or ``InputFormat.STANDARD``
    """
    if any(marker in text for marker in LATEX_MARKERS):
        return InputFormat.LATEX
    if _LATEX_COMMAND.search(text):
        return InputFormat.LATEX
    if any(marker in text for marker in UNICODE_MARKERS):
        return InputFormat.LATEX
    return InputFormat.STANDARD


def normalize(
    text: str,
    input_format: Optional[InputFormat] = None,
    auto_fix: bool = True,
) -> str:
    """Translate raw text into canonical, whitespace-free expression text.

    Args:
        text: Raw expression in any supported dialect
        input_format: Dialect to assume; detected when omitted
        auto_fix: Insert implicit AND and repair ``1!A`` style inputs

    Returns:
        Canonical expression string ready for the lexer

    Raises:
        ExpressionError: A subclass naming the first defect found
    """
    logger = get_logger()

    if text is None or not text.strip():
        raise EmptyExpressionError("Empty expression")

    literal = _LITERAL_TOKEN.search(text)
    if literal:
        raise InvalidLiteralTokenError(
            f"Invalid token '{literal.group(1)}' in expression"
        )

    fmt = InputFormat(input_format) if input_format else detect_format(text)
    logger.debug(f"Normalizing {fmt.value} input: {text}")

    result = text
    if fmt is InputFormat.LATEX:
        result = _translate_latex(result)
    result = _translate_words(result)
    result = _translate_symbols(result)

    _check_variable_names(result)

    result = re.sub(r"\s+", "", result)
    if not result:
        raise EmptyExpressionError("Empty expression")

    _check_parentheses(result)
    _check_operands(result)

    if auto_fix:
        result = insert_implicit_and(result)
        result = repair_number_before_not(result)

    logger.debug(f"Normalized form: {result}")
    return result


def _translate_latex(text: str) -> str:
    text = _replace_overlines(text)
    text = _LATEX_TEXT_CONSTANT.sub(
        lambda m: "1" if m.group(1) in ("T", "1") else "0", text
    )
    text = _LATEX_SPACING.sub(" ", text)
    text = _LATEX_COMMAND.sub(_replace_latex_command, text)
    # Identifiers left after command replacement are variables
    text = text.upper()
    return text.replace("{", "(").replace("}", ")")


def _replace_latex_command(match: re.Match) -> str:
    name = match.group(1)
    if name not in _LATEX_COMMANDS:
        raise UnsupportedLatexCommandError(f"Unsupported LaTeX command: \\{name}")
    return f" {_LATEX_COMMANDS[name]} "


def _replace_overlines(text: str) -> str:
    """Rewrite ``\\overline{X}`` and ``\\bar{X}`` as ``!(X)``, innermost last."""
    match = _OVERLINE.search(text)
    while match:
        open_brace = match.end() - 1
        depth = 0
        for index in range(open_brace, len(text)):
            if text[index] == "{":
                depth += 1
            elif text[index] == "}":
                depth -= 1
                if depth == 0:
                    break
        else:
            raise UnbalancedParenthesesError(
                f"Unbalanced braces after \\overline in expression: {text}"
            )

        inner = text[open_brace + 1 : index]
        text = f"{text[:match.start()]}!({inner}){text[index + 1:]}"
        match = _OVERLINE.search(text)
    return text


def _translate_words(text: str) -> str:
    unknown = _UNKNOWN_WORD.search(text)
    if unknown:
        raise UnknownOperatorError(
            f"Unknown operator: '{unknown.group(1)}'. "
            f"Use the symbols ^ (XOR), @ (NAND), # (NOR) or <=> (XNOR)"
        )

    arrow = _UNKNOWN_ARROW.search(text)
    if arrow:
        raise UnknownOperatorError(f"Unknown operator: '{arrow.group(0)}'")

    for pattern, replacement in _WORD_OPERATORS:
        text = pattern.sub(f" {replacement} ", text)
    return text


def _translate_symbols(text: str) -> str:
    for symbol, replacement in _SYMBOL_OPERATORS:
        text = text.replace(symbol, replacement)
    return text


def _check_variable_names(text: str) -> None:
    lowercase = _LOWERCASE_NAME.search(text)
    if lowercase:
        raise InvalidVariableNameError(
            f"Invalid variable name '{lowercase.group(0)}': lowercase letters "
            f"are not allowed, use uppercase letters (A-Z) for variables"
        )

    underscore = _UNDERSCORE_NAME.search(text)
    if underscore:
        raise InvalidVariableNameError(
            f"Invalid variable name '{underscore.group(0)}': underscores are not allowed"
        )

    digits = _DIGIT_NAME.search(text)
    if digits:
        raise InvalidVariableNameError(
            f"Invalid variable name '{digits.group(0)}': digits are not allowed "
            f"in variable names"
        )


def _check_parentheses(text: str) -> None:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                break
    if depth != 0:
        raise UnbalancedParenthesesError(
            f"Unbalanced parentheses in expression: {text}"
        )

    if "()" in text:
        raise EmptyParenthesesError(
            'Empty parentheses "()" found. Use a constant (0 or 1) or a '
            "variable instead"
        )


def _check_operands(text: str) -> None:
    for match in _OPERATOR.finditer(text):
        symbol = match.group(0)
        start, end = match.span()
        right_missing = end == len(text) or text[end] in _NO_RIGHT_OPERAND

        if symbol == "!":
            if right_missing:
                raise MissingOperandError("Missing operand for NOT operator (!)")
            continue

        left_missing = start == 0 or text[start - 1] in _NO_LEFT_OPERAND
        name = _OPERATOR_NAMES[symbol]

        if left_missing and right_missing:
            raise MissingOperandError(
                f"Missing operands on both sides of {name} operator ({symbol})"
            )
        if left_missing:
            raise MissingOperandError(
                f"Missing left operand for {name} operator ({symbol})"
            )
        if right_missing:
            raise MissingOperandError(
                f"Missing right operand for {name} operator ({symbol})"
            )


def insert_implicit_and(text: str) -> str:
    """Make juxtaposition explicit: ``AB``, ``A(``, ``)A``, ``)(`` and ``A!``.

    Args:
        text: Whitespace-free canonical text

    Returns:
        Text with ``*`` inserted between adjacent terms
    """
    for pattern in _IMPLICIT_AND:
        text = pattern.sub(r"\1*", text)
    return text


def repair_number_before_not(text: str) -> str:
    """Insert the AND hidden in ``1!A`` at every parenthesis depth.

    Each parenthesized group is repaired on its own before the enclosing
    level, so ``(1!A)*B`` and ``A*1!B+1!(C+D)`` are both fixed.

    Args:
        text: Whitespace-free canonical text with balanced parentheses

    Returns:
        Repaired text

    Example:
        >>> repair_number_before_not("A*1!B+1!(C+D)")
        'A*1*!B+1*!(C+D)'
    """
    pieces = []
    index = 0
    while index < len(text):
        if text[index] == "(":
            close = _matching_paren(text, index)
            pieces.append(f"({repair_number_before_not(text[index + 1:close])})")
            index = close + 1
        else:
            pieces.append(text[index])
            index += 1
    return _NUMBER_BEFORE_NOT.sub(r"\1*!", "".join(pieces))


def _matching_paren(text: str, open_index: int) -> int:
    depth = 0
    for index in range(open_index, len(text)):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == 0:
                return index
    raise UnbalancedParenthesesError(f"Unbalanced parentheses in expression: {text}")
