# parser/formatter.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Canonical text and LaTeX rendering of expression trees

"""Rendering of expression trees as canonical text or LaTeX.

Both renderings are total over well-formed trees and fully parenthesize every
binary node, so the output re-parses to the same tree. The canonical text
produced by ``to_boolean`` also serves as the signature of a tree during
simplification: two trees with the same canonical string are the same state.

Canonical text:
    ``0`` / ``1``, ``A``, ``!(x)``, ``(l * r)``, ``(l + r)``, ``(l ^ r)``,
    ``(l @ r)``, ``(l # r)``, ``(l <=> r)``

LaTeX:
    ``\\lnot``, ``\\land``, ``\\lor``, ``\\oplus``, ``\\uparrow``,
    ``\\downarrow``, ``\\leftrightarrow``

Malformed nodes raise ``FormatError`` instead of being coerced.
"""

from __future__ import annotations

from . import ast_nodes as ast
from .exceptions import FormatError

_NODE_TYPES = (
    ast.Variable,
    ast.Constant,
    ast.Not,
    ast.And,
    ast.Or,
    ast.Xor,
    ast.Nand,
    ast.Nor,
    ast.Xnor,
)


class _Renderer(ast.Visitor):
    """Shared validation and dispatch for both output styles."""

    def render(self, node: ast.Expr) -> str:
        if node is None:
            raise FormatError("Missing operand in expression")
        if type(node) not in _NODE_TYPES:
            raise FormatError(f"Unknown expression type: {type(node).__name__}")
        return node.accept(self)

    def visit_variable(self, n: ast.Variable) -> str:
        name = getattr(n, "name", None)
        if not isinstance(name, str) or not ast.VARIABLE_NAME.match(name):
            raise FormatError(f"Invalid variable name: {name!r}")
        return name

    def visit_constant(self, n: ast.Constant) -> str:
        value = getattr(n, "value", None)
        if not isinstance(value, bool):
            raise FormatError("Constant value must be a boolean.")
        return "1" if value else "0"

    def _children(self, n: ast.BinaryOp):
        left = getattr(n, "left", None)
        right = getattr(n, "right", None)
        if left is None or right is None:
            raise FormatError(
                f"Missing operand in {type(n).__name__.upper()} expression"
            )
        return self.render(left), self.render(right)

    def _operand(self, n: ast.Not) -> ast.Expr:
        operand = getattr(n, "operand", None)
        if operand is None:
            raise FormatError("Missing operand in NOT expression")
        return operand


class BooleanFormatter(_Renderer):
    """Renders canonical ASCII text."""

    def visit_not(self, n: ast.Not) -> str:
        return f"!({self.render(self._operand(n))})"

    def _binary(self, n: ast.BinaryOp) -> str:
        left, right = self._children(n)
        return f"({left} {n.symbol} {right})"

    visit_and = visit_or = visit_xor = _binary
    visit_nand = visit_nor = visit_xnor = _binary


class LatexFormatter(_Renderer):
    """Renders LaTeX markup."""

    def visit_not(self, n: ast.Not) -> str:
        operand = self._operand(n)
        inner = self.render(operand)
        # Atoms and binary nodes need no extra parentheses
        if isinstance(operand, (ast.Variable, ast.Constant, ast.BinaryOp)):
            return f"\\lnot {inner}"
        return f"\\lnot({inner})"

    def _binary(self, n: ast.BinaryOp) -> str:
        left, right = self._children(n)
        return f"({left} {n.latex} {right})"

    visit_and = visit_or = visit_xor = _binary
    visit_nand = visit_nor = visit_xnor = _binary


def to_boolean(expr: ast.Expr) -> str:
    """Render ``expr`` as canonical text, e.g. ``((A * B) + !(C))``.

    Raises:
        FormatError: The tree contains a malformed or unknown node
    """
    return BooleanFormatter().render(expr)


def to_latex(expr: ast.Expr) -> str:
    """Render ``expr`` as LaTeX, e.g. ``((A \\land B) \\lor \\lnot C)``.

    Raises:
        FormatError: The tree contains a malformed or unknown node
    """
    return LatexFormatter().render(expr)
