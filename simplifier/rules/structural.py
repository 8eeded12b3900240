# simplifier/rules/structural.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Double negation elimination and De Morgan's laws

"""Negation rules.

Both families work top-down so that a single application reaches every
negation in the tree: collapsing ``!!!A`` in one step, and pushing a negation
through nested groups (``!(A * (B + C))`` becomes ``!A + (!B * !C)``).
"""

from typing import List

from parser.ast_nodes import Expr, Not, And, Or
from ..rule import NEGATION, RuleInfo, SimplificationRule, recursive_rule


def _is_double_negation(node: Expr) -> bool:
    return isinstance(node, Not) and isinstance(node.operand, Not)


def _collapse_negations(node: Expr) -> Expr:
    """Strip a chain of negations, keeping one if the chain length is odd."""
    depth = 0
    inner = node
    while isinstance(inner, Not):
        depth += 1
        inner = inner.operand
    return inner if depth % 2 == 0 else Not(inner)


def _is_negated(node_type):
    return lambda node: isinstance(node, Not) and type(node.operand) is node_type


def _de_morgan_and(node: Not) -> Expr:
    return Or(Not(node.operand.left), Not(node.operand.right))


def _de_morgan_or(node: Not) -> Expr:
    return And(Not(node.operand.left), Not(node.operand.right))


def get_double_negation_rules() -> List[SimplificationRule]:
    return [
        recursive_rule(
            RuleInfo(
                name="Double Negation",
                description="Two negations cancel each other",
                formula=r"\lnot\lnot A = A",
                category=NEGATION,
            ),
            _is_double_negation,
            _collapse_negations,
            top_down=True,
        )
    ]


def get_de_morgan_rules() -> List[SimplificationRule]:
    return [
        recursive_rule(
            RuleInfo(
                name="De Morgan's Law (AND)",
                description="The negation of a conjunction is the disjunction of the negations",
                formula=r"\lnot(A \land B) = \lnot A \lor \lnot B",
                category=NEGATION,
            ),
            _is_negated(And),
            _de_morgan_and,
            top_down=True,
        ),
        recursive_rule(
            RuleInfo(
                name="De Morgan's Law (OR)",
                description="The negation of a disjunction is the conjunction of the negations",
                formula=r"\lnot(A \lor B) = \lnot A \land \lnot B",
                category=NEGATION,
            ),
            _is_negated(Or),
            _de_morgan_or,
            top_down=True,
        ),
    ]


def get_structural_rules() -> List[SimplificationRule]:
    """Double negation first, then De Morgan."""
    return get_double_negation_rules() + get_de_morgan_rules()
