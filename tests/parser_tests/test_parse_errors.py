# tests/parser_tests/test_parse_errors.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Test suite for parser error detection and reporting

"""Test suite for parse error handling.

Every defective input must raise the most specific ``ExpressionError``
subclass, and the message must carry the input format, the raw input and the
list of valid examples.
"""

import pytest
from parser import ParserOptions, parse
from parser.normalizer import InputFormat
from parser.exceptions import (
    EXAMPLES_HINT,
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
)
from utils.logger import get_logger


class TestParseErrors:
    """Test cases for error kinds raised by ``parse``."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    ERROR_CASES = [
        # Empty input
        ("", EmptyExpressionError),
        ("   ", EmptyExpressionError),
        # Parentheses
        ("(A + B", UnbalancedParenthesesError),
        ("A + B)", UnbalancedParenthesesError),
        (")A(", UnbalancedParenthesesError),
        ("()", EmptyParenthesesError),
        ("A * ()", EmptyParenthesesError),
        # Variable names
        ("a + B", InvalidVariableNameError),
        ("A + b", InvalidVariableNameError),
        ("A_1 + B", InvalidVariableNameError),
        ("A2 * B", InvalidVariableNameError),
        ("A1", InvalidVariableNameError),
        ("A10 + B", InvalidVariableNameError),
        ("AB0 * C", InvalidVariableNameError),
        # Missing operands
        ("A +", MissingOperandError),
        ("* B", MissingOperandError),
        ("*", MissingOperandError),
        ("A * !", MissingOperandError),
        ("(A +) * B", MissingOperandError),
        ("A ^", MissingOperandError),
        ("<=> B", MissingOperandError),
        # Unsupported operator spellings
        ("A XOR B", UnknownOperatorError),
        ("A nand B", UnknownOperatorError),
        ("A IMPLIES B", UnknownOperatorError),
        ("A -> B", UnknownOperatorError),
        ("A => B", UnknownOperatorError),
        # LaTeX commands with no boolean meaning
        (r"A \land \frac{B}{C}", UnsupportedLatexCommandError),
        # Characters outside every dialect
        ("A $ B", TokenizationError),
        ("A * 2", TokenizationError),
        # Literal words
        ("A + undefined", InvalidLiteralTokenError),
        ("null", InvalidLiteralTokenError),
        # Well-tokenized but malformed
        ("A B", None),
    ]

    @pytest.mark.parametrize("formula, expected_error", ERROR_CASES)
    def test_error_kind(self, formula, expected_error):
        """Test each defect raises its specific error class."""
        if expected_error is None:
            # Juxtaposition is repaired by auto-fix, so this one parses
            assert parse(formula) is not None
            return

        with pytest.raises(expected_error) as exc_info:
            parse(formula)

        self.logger.debug(f"{formula!r} -> {exc_info.value}")
        assert isinstance(exc_info.value, ExpressionError), (
            f"{type(exc_info.value).__name__} should derive from ExpressionError"
        )

    STRICT_ERROR_CASES = [
        ("A B", InvalidSyntaxError),
        ("AB", InvalidSyntaxError),
        ("A (B)", InvalidSyntaxError),
        ("1!A", InvalidSyntaxError),
    ]

    @pytest.mark.parametrize("formula, expected_error", STRICT_ERROR_CASES)
    def test_strict_mode_rejects_juxtaposition(self, formula, expected_error):
        """Test that without auto-fix adjacent terms are a syntax error."""
        with pytest.raises(expected_error):
            parse(formula, ParserOptions(auto_fix=False))

    def test_message_carries_context_and_examples(self):
        """Test messages name the format, echo the input and list examples."""
        with pytest.raises(MissingOperandError) as exc_info:
            parse("A +")

        message = str(exc_info.value)
        assert message.startswith('Failed to parse standard expression "A +": '), message
        assert "Missing right operand for OR operator (+)" in message
        assert message.endswith(EXAMPLES_HINT)

    def test_latex_context_in_message(self):
        """Test LaTeX input is reported as LaTeX."""
        with pytest.raises(UnsupportedLatexCommandError) as exc_info:
            parse(r"A \land \sqrt{B}")

        message = str(exc_info.value)
        assert "Failed to parse latex expression" in message
        assert "Unsupported LaTeX command: \\sqrt" in message

    def test_error_attributes(self):
        """Test the detail, source and format are available as attributes."""
        with pytest.raises(UnbalancedParenthesesError) as exc_info:
            parse("(A")

        error = exc_info.value
        assert error.source == "(A"
        assert error.input_format == "standard"
        assert "Unbalanced parentheses" in error.detail

    MISSING_OPERAND_MESSAGES = [
        ("!", "Missing operand for NOT operator (!)"),
        ("*", "Missing operands on both sides of AND operator (*)"),
        ("+ A", "Missing left operand for OR operator (+)"),
        ("A *", "Missing right operand for AND operator (*)"),
        ("A @", "Missing right operand for NAND operator (@)"),
        ("# A", "Missing left operand for NOR operator (#)"),
    ]

    @pytest.mark.parametrize("formula, expected_detail", MISSING_OPERAND_MESSAGES)
    def test_missing_operand_messages(self, formula, expected_detail):
        """Test missing operand errors name the operator and the side."""
        with pytest.raises(MissingOperandError) as exc_info:
            parse(formula)

        assert exc_info.value.detail == expected_detail, (
            f"Wrong detail for '{formula}': {exc_info.value.detail}"
        )

    def test_lowercase_variable_message(self):
        """Test lowercase names suggest uppercase letters."""
        with pytest.raises(InvalidVariableNameError) as exc_info:
            parse("x * Y")

        assert "uppercase letters (A-Z)" in str(exc_info.value)

    def test_unknown_input_format(self):
        """Test an unknown input format is a ParseError, not a crash."""
        with pytest.raises(ParseError, match="Unknown input format"):
            parse("A", ParserOptions(input_format="markdown"))

    def test_forced_standard_format_rejects_latex(self):
        """Test LaTeX commands read as standard text are invalid names."""
        with pytest.raises(ExpressionError):
            parse(r"A \land B", ParserOptions(input_format=InputFormat.STANDARD))

    def test_all_errors_are_parse_errors(self):
        """Test every input error is catchable as ParseError."""
        for formula in ("", "(A", "a", "A +", "A XOR B", "A $ B"):
            with pytest.raises(ParseError):
                parse(formula)
