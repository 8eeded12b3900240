# simplifier/rules/distributive.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Distribution, factorization and absorption

"""Distributive family.

The default rule set distributes AND over OR, which drives expressions
towards a sum of products where the redundancy, absorption and consensus
rules can work. Factorization is the inverse rewrite; it lives here for
callers that assemble their own rule list, but is kept out of the default
set because combining both directions only bounces between two shapes.
"""

from typing import List, Optional, Type

from parser.ast_nodes import Expr, And, Or, BinaryOp
from ..rule import (
    ABSORPTION,
    DISTRIBUTIVE,
    FACTORIZATION,
    RuleInfo,
    SimplificationRule,
    build_balanced,
    collect_terms,
    first_index_pair,
    recursive_rule,
)


def _distributes_left(outer: Type[BinaryOp], inner: Type[BinaryOp]):
    return lambda node: type(node) is outer and type(node.right) is inner


def _distributes_right(outer: Type[BinaryOp], inner: Type[BinaryOp]):
    return lambda node: type(node) is outer and type(node.left) is inner


def _distribute_left(node: BinaryOp) -> Expr:
    # X . (Y o Z) -> (X . Y) o (X . Z)
    outer, inner = type(node), type(node.right)
    x, y, z = node.left, node.right.left, node.right.right
    return inner(outer(x, y), outer(x, z))


def _distribute_right(node: BinaryOp) -> Expr:
    # (X o Y) . Z -> (X . Z) o (Y . Z)
    outer, inner = type(node), type(node.left)
    x, y, z = node.left.left, node.left.right, node.right
    return inner(outer(x, z), outer(y, z))


def get_distributive_rules() -> List[SimplificationRule]:
    """AND over OR, in both operand positions."""
    return [
        recursive_rule(
            RuleInfo(
                name="Distributive Law Left",
                description="AND distributes over an OR on its right",
                formula=r"X \land (Y \lor Z) = (X \land Y) \lor (X \land Z)",
                category=DISTRIBUTIVE,
            ),
            _distributes_left(And, Or),
            _distribute_left,
            top_down=True,
        ),
        recursive_rule(
            RuleInfo(
                name="Distributive Law Right",
                description="AND distributes over an OR on its left",
                formula=r"(X \lor Y) \land Z = (X \land Z) \lor (Y \land Z)",
                category=DISTRIBUTIVE,
            ),
            _distributes_right(And, Or),
            _distribute_right,
            top_down=True,
        ),
    ]


# --- Factorization ---------------------------------------------------------

# (name, common factor position in first term, in second term, formula)
_FACTORIZATIONS = (
    ("Factorization Left", "left", "left", r"(X \land Y) \lor (X \land Z) = X \land (Y \lor Z)"),
    ("Factorization Right", "right", "right", r"(Y \land X) \lor (Z \land X) = (Y \lor Z) \land X"),
    ("Factorization Left-Right", "left", "right", r"(X \land Y) \lor (Z \land X) = X \land (Y \lor Z)"),
    ("Factorization Right-Left", "right", "left", r"(Y \land X) \lor (X \land Z) = X \land (Y \lor Z)"),
)

_OTHER = {"left": "right", "right": "left"}


def _factorization(first_pos: str, second_pos: str):
    def matches(node: Expr) -> bool:
        return (
            type(node) is Or
            and type(node.left) is And
            and type(node.right) is And
            and getattr(node.left, first_pos) == getattr(node.right, second_pos)
        )

    def rewrite(node: Or) -> Expr:
        common = getattr(node.left, first_pos)
        y = getattr(node.left, _OTHER[first_pos])
        z = getattr(node.right, _OTHER[second_pos])
        if first_pos == second_pos == "right":
            return And(Or(y, z), common)
        return And(common, Or(y, z))

    return matches, rewrite


def get_factorization_rules() -> List[SimplificationRule]:
    """Factor a shared AND operand out of an OR, plus OR over AND distribution."""
    rules = []
    for name, first_pos, second_pos, formula in _FACTORIZATIONS:
        matches, rewrite = _factorization(first_pos, second_pos)
        rules.append(
            recursive_rule(
                RuleInfo(
                    name=name,
                    description="A factor shared by both products is pulled out",
                    formula=formula,
                    category=FACTORIZATION,
                ),
                matches,
                rewrite,
            )
        )
    rules.append(
        recursive_rule(
            RuleInfo(
                name="Distributive Law (OR over AND)",
                description="OR distributes over an AND on its right",
                formula=r"X \lor (Y \land Z) = (X \lor Y) \land (X \lor Z)",
                category=FACTORIZATION,
            ),
            _distributes_left(Or, And),
            _distribute_left,
            top_down=True,
        )
    )
    return rules


# --- Absorption ------------------------------------------------------------


def _absorbs(outer_type: Type[BinaryOp], inner_type: Type[BinaryOp]):
    """``X o (X . Y) = X``: a term whose factors include another term's goes."""

    def absorbed(kept: Expr, candidate: Expr) -> Optional[Expr]:
        if type(candidate) is not inner_type or kept == candidate:
            return None
        if set(collect_terms(kept, inner_type)) <= set(
            collect_terms(candidate, inner_type)
        ):
            return kept
        return None

    def find(node: Expr):
        if type(node) is not outer_type:
            return None
        terms = collect_terms(node, outer_type)
        found = first_index_pair(terms, absorbed)
        return (terms, found[1]) if found else None

    def matches(node: Expr) -> bool:
        return find(node) is not None

    def rewrite(node: Expr) -> Expr:
        terms, redundant = find(node)
        return build_balanced(
            [t for index, t in enumerate(terms) if index != redundant], outer_type
        )

    return matches, rewrite


def get_absorption_rules() -> List[SimplificationRule]:
    or_matches, or_rewrite = _absorbs(Or, And)
    and_matches, and_rewrite = _absorbs(And, Or)
    return [
        recursive_rule(
            RuleInfo(
                name="OR Absorption",
                description="A product containing another disjunct is absorbed",
                formula=r"X \lor (X \land Y) = X",
                category=ABSORPTION,
            ),
            or_matches,
            or_rewrite,
        ),
        recursive_rule(
            RuleInfo(
                name="AND Absorption",
                description="A sum containing another conjunct is absorbed",
                formula=r"X \land (X \lor Y) = X",
                category=ABSORPTION,
            ),
            and_matches,
            and_rewrite,
        ),
    ]
