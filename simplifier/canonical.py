# simplifier/canonical.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Canonical sum-of-products and product-of-sums forms from the truth table

"""Canonical normal forms.

Both forms are read off the truth table over the sorted variables of an
expression. Row ``i`` of the table is the assignment whose bits, first
variable most significant, spell ``i``; that index is the minterm (or
maxterm) number.

- Sum of products: the OR of one full product (minterm) per true row.
- Product of sums: the AND of one full sum (maxterm) per false row.

An expression without variables is returned as its constant value, and a
function that is never true (SOP) or never false (POS) collapses to the
matching constant. Derived operators never appear in the output.

Example:
    >>> format_to_boolean(to_sum_of_products(parse("A ^ B")))
    '((!(A) * B) + (A * !(B)))'
"""

from functools import reduce
from typing import List, Mapping, Optional

from parser.ast_nodes import Expr, Variable, Constant, Not, And, Or
from utils.logger import get_logger
from .evaluator import evaluate, extract_variables, truth_table


def minterms(expr: Expr, variables: Optional[List[str]] = None) -> List[int]:
    """Indices of the truth-table rows on which ``expr`` is true.

    Raises:
        ValueError: More than ``MAX_TRUTH_TABLE_VARIABLES`` variables
    """
    rows = truth_table(expr, variables)
    return [index for index, (_, value) in enumerate(rows) if value]


def maxterms(expr: Expr, variables: Optional[List[str]] = None) -> List[int]:
    """Indices of the truth-table rows on which ``expr`` is false."""
    rows = truth_table(expr, variables)
    return [index for index, (_, value) in enumerate(rows) if not value]


def _literal(name: str, positive: bool) -> Expr:
    variable = Variable(name)
    return variable if positive else Not(variable)


def _minterm(variables: List[str], row: Mapping[str, bool]) -> Expr:
    return reduce(And, (_literal(name, row[name]) for name in variables))


def _maxterm(variables: List[str], row: Mapping[str, bool]) -> Expr:
    return reduce(Or, (_literal(name, not row[name]) for name in variables))


def to_sum_of_products(expr: Expr) -> Expr:
    """Canonical sum of products (disjunction of minterms) of ``expr``.

    Raises:
        ValueError: More than ``MAX_TRUTH_TABLE_VARIABLES`` variables
    """
    variables = extract_variables(expr)
    if not variables:
        return Constant(evaluate(expr, {}))

    products = [_minterm(variables, row) for row, value in truth_table(expr, variables) if value]
    get_logger().debug(f"Sum of products over {variables}: {len(products)} minterm(s)")

    if not products:
        return Constant(False)
    return reduce(Or, products)


def to_product_of_sums(expr: Expr) -> Expr:
    """Canonical product of sums (conjunction of maxterms) of ``expr``.

    Raises:
        ValueError: More than ``MAX_TRUTH_TABLE_VARIABLES`` variables
    """
    variables = extract_variables(expr)
    if not variables:
        return Constant(evaluate(expr, {}))

    sums = [_maxterm(variables, row) for row, value in truth_table(expr, variables) if not value]
    get_logger().debug(f"Product of sums over {variables}: {len(sums)} maxterm(s)")

    if not sums:
        return Constant(True)
    return reduce(And, sums)
