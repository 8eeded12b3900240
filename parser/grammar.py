# parser/grammar.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# LALR(1) grammar and parser for boolean expressions using SLY

"""Boolean expression grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for canonical boolean
expressions. The parser constructs Abstract Syntax Trees from token streams
provided by the lexer; the precedence table encodes the fixed ladder so that
the grammar itself stays flat.

Grammar:
    expr := expr ('+' | '#') expr      -- OR / NOR
          | expr '<=>' expr            -- XNOR
          | expr '^' expr              -- XOR
          | expr ('*' | '@') expr      -- AND / NAND
          | '!' expr                   -- NOT
          | '(' expr ')'
          | VARIABLE | CONSTANT

Operator Precedence (lowest to highest):
- OR ('+'), NOR ('#'): left-associative
- XNOR ('<=>'): left-associative
- XOR ('^'): left-associative
- AND ('*'), NAND ('@'): left-associative
- NOT ('!'): right-associative
"""

from sly import Parser
from .lexer import BooleanLexer
from .ast_nodes import Expr, Variable, Constant, Not, And, Or, Xor, Nand, Nor, Xnor
from .exceptions import (
    ParseError,
    InvalidSyntaxError,
    MissingOperandError,
    UnbalancedParenthesesError,
)
from utils.logger import get_logger


class _BooleanParser(Parser):
    """SLY-based LALR(1) parser for canonical boolean expressions.

    A new instance is created for every parse so that no parsing state is
    shared between calls.

    Attributes:
        tokens: Token types from BooleanLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = BooleanLexer.tokens

    precedence = (
        ("left", "OR", "NOR"),
        ("left", "XNOR"),
        ("left", "XOR"),
        ("left", "AND", "NAND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete input is a single expression."""
        return p.expr

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        return Or(p.expr0, p.expr1)

    @_("expr NOR expr")
    def expr(self, p) -> Expr:
        return Nor(p.expr0, p.expr1)

    @_("expr XNOR expr")
    def expr(self, p) -> Expr:
        return Xnor(p.expr0, p.expr1)

    @_("expr XOR expr")
    def expr(self, p) -> Expr:
        return Xor(p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        return And(p.expr0, p.expr1)

    @_("expr NAND expr")
    def expr(self, p) -> Expr:
        return Nand(p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        return Not(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("VARIABLE")
    def expr(self, p) -> Expr:
        return Variable(p.VARIABLE)

    @_("CONSTANT")
    def expr(self, p) -> Expr:
        return Constant(p.CONSTANT)

    def parse(self, text: str) -> Expr:
        """Parse canonical expression text into an AST.

        Tokenizes the whole input first so that parenthesis balance can be
        asserted before the grammar runs, then hands the token stream to the
        LALR machinery.

        Args:
            text: Normalized expression string

        Returns:
            Root AST node representing the parsed expression

        Raises:
            ParseError: If the input is empty, unbalanced or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing canonical expression: {text}")

        try:
            tokens = list(BooleanLexer().tokenize(text))

            opened = sum(1 for tok in tokens if tok.type == "LPAREN")
            closed = sum(1 for tok in tokens if tok.type == "RPAREN")
            if opened != closed:
                raise UnbalancedParenthesesError(
                    f"Unbalanced parentheses in expression: {text}"
                )

            ast_result = super().parse(iter(tokens))

            if ast_result is None:
                raise InvalidSyntaxError(f"Failed to parse expression: {text}")

            logger.debug(
                f"Successfully parsed expression into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise InvalidSyntaxError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with the offending token and position
        """
        if token:
            raise InvalidSyntaxError(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )

        raise MissingOperandError("Unexpected end of expression")
