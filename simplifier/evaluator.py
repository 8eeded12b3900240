# simplifier/evaluator.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Truth-value evaluation, truth tables and equivalence checks

"""Evaluation of expression trees.

Used to verify simplification results: two expressions are equivalent when
they agree on every assignment of their combined variables. Exhaustive
checking doubles in cost with each variable, so it is refused beyond
``MAX_TRUTH_TABLE_VARIABLES``.
"""

from __future__ import annotations
from itertools import product
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from parser import ast_nodes as ast
from .rule import iter_subexpressions

MAX_TRUTH_TABLE_VARIABLES = 12

Assignment = Dict[str, bool]


class _Evaluator(ast.Visitor):
    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment

    def visit_variable(self, n: ast.Variable) -> bool:
        # Unassigned variables read as false
        return bool(self._assignment.get(n.name, False))

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return n.left.accept(self) and n.right.accept(self)

    def visit_or(self, n: ast.Or) -> bool:
        return n.left.accept(self) or n.right.accept(self)

    def visit_xor(self, n: ast.Xor) -> bool:
        return n.left.accept(self) != n.right.accept(self)

    def visit_nand(self, n: ast.Nand) -> bool:
        return not (n.left.accept(self) and n.right.accept(self))

    def visit_nor(self, n: ast.Nor) -> bool:
        return not (n.left.accept(self) or n.right.accept(self))

    def visit_xnor(self, n: ast.Xnor) -> bool:
        return n.left.accept(self) == n.right.accept(self)


def evaluate(expr: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate ``expr`` under ``assignment``.

    Args:
        expr: Expression tree
        assignment: Variable name to truth value; missing names are false

    Returns:
        Truth value of the expression
    """
    return expr.accept(_Evaluator(assignment))


def extract_variables(*exprs: ast.Expr) -> List[str]:
    """Sorted names of all variables occurring in the given trees."""
    names = {
        node.name
        for expr in exprs
        for node in iter_subexpressions(expr)
        if isinstance(node, ast.Variable)
    }
    return sorted(names)


def _assignments(variables: List[str]) -> Iterable[Assignment]:
    if len(variables) > MAX_TRUTH_TABLE_VARIABLES:
        raise ValueError(
            f"Truth table over {len(variables)} variables exceeds the limit of "
            f"{MAX_TRUTH_TABLE_VARIABLES}"
        )
    for values in product((False, True), repeat=len(variables)):
        yield dict(zip(variables, values))


def truth_table(
    expr: ast.Expr, variables: Optional[List[str]] = None
) -> List[Tuple[Assignment, bool]]:
    """Rows of ``(assignment, value)`` over every assignment of ``variables``.

    Args:
        expr: Expression tree
        variables: Columns to enumerate; defaults to the variables of ``expr``

    Raises:
        ValueError: More than ``MAX_TRUTH_TABLE_VARIABLES`` variables
    """
    columns = extract_variables(expr) if variables is None else list(variables)
    return [(row, evaluate(expr, row)) for row in _assignments(columns)]


def are_equivalent(first: ast.Expr, second: ast.Expr) -> bool:
    """True when both trees agree on every assignment of their variables.

    Raises:
        ValueError: More than ``MAX_TRUTH_TABLE_VARIABLES`` variables
    """
    variables = extract_variables(first, second)
    return all(
        evaluate(first, row) == evaluate(second, row) for row in _assignments(variables)
    )
