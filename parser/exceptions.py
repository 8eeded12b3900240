# parser/exceptions.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Custom exceptions for expression parsing and formatting

"""Domain-specific exceptions for boolean expression processing.

This module defines the error taxonomy raised while normalizing, tokenizing,
parsing and formatting boolean expressions. Input errors derive from
``ExpressionError`` and always end with a short list of valid expressions,
so that a message shown to a user also tells them what is accepted.

Hierarchy:
    ParseError (RuntimeError)
        ExpressionError
            EmptyExpressionError
            UnbalancedParenthesesError
            EmptyParenthesesError
            InvalidVariableNameError
            MissingOperandError
            UnknownOperatorError
            UnsupportedLatexCommandError
            TokenizationError
            InvalidLiteralTokenError
            InvalidSyntaxError
    FormatError (ValueError)
"""

from typing import Optional

EXAMPLES_HINT = "Examples of valid expressions: A + B, A * B, !(A + B)"


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails.

    Root of every error the parsing pipeline raises. Used throughout the
    pipeline to provide consistent error handling.
    """

    pass


class ExpressionError(ParseError):
    """Input error with a specific kind and a helpful message.

    The message is ``detail`` followed by the example hint. When the error is
    re-raised by the public parsing functions it gains the assumed input
    format and the raw input through ``with_context``.

    Attributes:
        detail: Description of the defect without the example hint
        source: Raw input that failed, when known
        input_format: Dialect the input was read as, when known
    """

    def __init__(
        self,
        detail: str,
        source: Optional[str] = None,
        input_format: Optional[str] = None,
    ):
        self.detail = detail
        self.source = source
        self.input_format = input_format

        if source is not None and input_format is not None:
            message = f'Failed to parse {input_format} expression "{source}": {detail}'
        else:
            message = detail
        super().__init__(f"{message}. {EXAMPLES_HINT}")

    def with_context(self, source: str, input_format: str) -> "ExpressionError":
        """Return a copy of this error carrying the raw input and its format.

        The copy keeps the concrete error class so callers can still catch
        the specific kind.
        """
        return type(self)(self.detail, source=source, input_format=input_format)


class EmptyExpressionError(ExpressionError):
    """The input is empty or only whitespace."""


class UnbalancedParenthesesError(ExpressionError):
    """Opening and closing parentheses do not pair up."""


class EmptyParenthesesError(ExpressionError):
    """A pair of parentheses encloses nothing."""


class InvalidVariableNameError(ExpressionError):
    """Variable names must be uppercase letters."""


class MissingOperandError(ExpressionError):
    """An operator lacks a left operand, a right operand or both."""


class UnknownOperatorError(ExpressionError):
    """An operator spelling outside the supported symbol set was used."""


class UnsupportedLatexCommandError(ExpressionError):
    """A LaTeX command with no boolean meaning was used."""


class TokenizationError(ExpressionError):
    """A character could not be turned into a token."""


class InvalidLiteralTokenError(ExpressionError):
    """The literal words ``undefined`` or ``null`` appeared in the input."""


class InvalidSyntaxError(ExpressionError):
    """Tokens are valid but do not form an expression."""


class FormatError(ValueError):
    """Exception raised when an expression tree cannot be formatted.

    Indicates a malformed node: a missing child, a non-boolean constant, an
    invalid variable name or a node type the formatter does not know.
    """

    pass
