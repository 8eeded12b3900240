# simplifier/rules/contradiction.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Contradiction, tautology and complement redundancy over flattened operands

"""Rules built on complementary operands.

Contradiction and tautology look at the flattened operand list of an AND or
OR chain, so ``(A * B) * !A`` is recognised even though ``A`` and ``!A`` are
not siblings. Operands are compared structurally, which makes the rules work
for compound operands such as ``(A + B) * !(A + B)``.

Complement redundancy merges two product terms that differ only in one
complemented factor: ``(A * B) + (A * !B) = A``, and its dual for sums.
"""

from collections import Counter
from typing import List, Optional, Type

from parser.ast_nodes import Expr, And, Or, BinaryOp, TRUE, FALSE
from ..rule import (
    CONTRADICTION,
    REDUNDANCY,
    RuleInfo,
    SimplificationRule,
    build_balanced,
    collect_terms,
    first_index_pair,
    has_complementary_pair,
    is_complement,
    recursive_rule,
)


def _chain_has_complement(node_type: Type[BinaryOp]):
    def matches(node: Expr) -> bool:
        return type(node) is node_type and has_complementary_pair(
            collect_terms(node, node_type)
        )

    return matches


def _merge_complement_pair(
    first: Expr, second: Expr, inner_type: Type[BinaryOp]
) -> Optional[Expr]:
    """Merge ``X*Y`` and ``X*!Y`` into ``X`` (or the dual for sums).

    Both terms are flattened over ``inner_type``; they merge when removing
    one complementary factor from each leaves the same multiset of factors.
    """
    if type(first) is not inner_type or type(second) is not inner_type:
        return None

    first_factors = collect_terms(first, inner_type)
    second_factors = collect_terms(second, inner_type)
    if len(first_factors) != len(second_factors):
        return None

    for i, x in enumerate(first_factors):
        for j, y in enumerate(second_factors):
            if not is_complement(x, y):
                continue
            rest = first_factors[:i] + first_factors[i + 1 :]
            if Counter(rest) == Counter(second_factors[:j] + second_factors[j + 1 :]):
                return build_balanced(rest, inner_type)
    return None


def _redundancy_rule(outer_type: Type[BinaryOp], inner_type: Type[BinaryOp]):
    def find(node: Expr):
        if type(node) is not outer_type:
            return None
        terms = collect_terms(node, outer_type)
        found = first_index_pair(
            terms, lambda a, b: _merge_complement_pair(a, b, inner_type)
        )
        return (terms, found) if found else None

    def matches(node: Expr) -> bool:
        return find(node) is not None

    def rewrite(node: Expr) -> Expr:
        terms, (i, j, merged) = find(node)
        kept = [merged if k == i else t for k, t in enumerate(terms) if k != j]
        return build_balanced(kept, outer_type)

    return matches, rewrite


def get_contradiction_rules() -> List[SimplificationRule]:
    """Contradiction (``A*!A=0``) and tautology (``A+!A=1``)."""
    return [
        recursive_rule(
            RuleInfo(
                name="Contradiction",
                description="A conjunction containing a term and its negation is false",
                formula=r"A \land \lnot A = 0",
                category=CONTRADICTION,
            ),
            _chain_has_complement(And),
            lambda node: FALSE,
        ),
        recursive_rule(
            RuleInfo(
                name="Tautology",
                description="A disjunction containing a term and its negation is true",
                formula=r"A \lor \lnot A = 1",
                category=CONTRADICTION,
            ),
            _chain_has_complement(Or),
            lambda node: TRUE,
        ),
    ]


def get_redundancy_rules() -> List[SimplificationRule]:
    """Complement redundancy for sums of products and products of sums."""
    or_matches, or_rewrite = _redundancy_rule(Or, And)
    and_matches, and_rewrite = _redundancy_rule(And, Or)
    return [
        recursive_rule(
            RuleInfo(
                name="Complement Redundancy (OR of ANDs)",
                description="Two products that differ only in one complemented factor merge",
                formula=r"(A \land B) \lor (A \land \lnot B) = A",
                category=REDUNDANCY,
            ),
            or_matches,
            or_rewrite,
        ),
        recursive_rule(
            RuleInfo(
                name="Complement Redundancy (AND of ORs)",
                description="Two sums that differ only in one complemented term merge",
                formula=r"(A \lor B) \land (A \lor \lnot B) = A",
                category=REDUNDANCY,
            ),
            and_matches,
            and_rewrite,
        ),
    ]
