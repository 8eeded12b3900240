# parser/lexer.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Lexical analyzer for canonical boolean expressions using SLY

"""Lexical analyzer for canonical boolean expression strings.

This module tokenizes text that has already been normalized into the
canonical symbol set. It does a single left-to-right scan and fails on the
first character that does not start a token, naming that character.

Supported Tokens:
- Grouping: (, )
- Operators: ! (NOT), * (AND), + (OR), ^ (XOR), @ (NAND), # (NOR), <=> (XNOR)
- Variables: single uppercase letters A-Z
- Constants: 0 and 1, carried as bool values
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .exceptions import TokenizationError
from utils.logger import get_logger


class BooleanLexer(Lexer):
    """SLY-based lexer for canonical boolean expressions.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "LPAREN",
        "RPAREN",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "NAND",
        "NOR",
        "XNOR",
        "VARIABLE",
        "CONSTANT",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"
    XNOR = r"<=>"
    NOT = r"!"
    AND = r"\*"
    OR = r"\+"
    XOR = r"\^"
    NAND = r"@"
    NOR = r"\#"
    VARIABLE = r"[A-Z]"

    @_(r"[01]")
    def CONSTANT(self, t):
        t.value = t.value == "1"
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token pattern. Advances past the problematic character
        and raises an informative error.

        Args:
            t: SLY token object containing error context

        Raises:
            TokenizationError: Always raised with character and position
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise TokenizationError(
            f"Unexpected character '{illegal_char}' at position {error_pos}"
        )
