# simplifier/rules/consensus.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Consensus theorem for sums of products and products of sums

"""Consensus theorem.

For sums of products::

    X*Y + !X*Z + Y*Z = X*Y + !X*Z

and dually for products of sums. The redundant third term may sit anywhere
in a flattened chain of any length, and each of the three terms may list its
factors in either order, so every ordered triple of terms is tried together
with both factor orders of the first two terms. Complementation is checked
with ``is_complement``, so it does not matter which of ``X`` / ``!X`` comes
first or whether ``X`` is itself compound.
"""

from itertools import permutations
from typing import List, Optional, Type

from parser.ast_nodes import Expr, And, Or, BinaryOp
from ..rule import (
    CONSENSUS,
    RuleInfo,
    SimplificationRule,
    build_balanced,
    collect_terms,
    is_complement,
    recursive_rule,
)


def is_consensus_triple(
    first: Expr, second: Expr, third: Expr, inner_type: Type[BinaryOp]
) -> bool:
    """True when ``third`` is the consensus of ``first`` and ``second``.

    Args:
        first: Term of shape ``X . Y``
        second: Term of shape ``!X . Z``
        third: Candidate redundant term ``Y . Z``
        inner_type: The ``.`` operator (And for the OR form)
    """
    if not all(type(t) is inner_type for t in (first, second, third)):
        return False

    for x, y in ((first.left, first.right), (first.right, first.left)):
        for x_bar, z in ((second.left, second.right), (second.right, second.left)):
            if not is_complement(x, x_bar):
                continue
            if (third.left == y and third.right == z) or (
                third.left == z and third.right == y
            ):
                return True
    return False


def _find_redundant(
    terms: List[Expr], inner_type: Type[BinaryOp]
) -> Optional[int]:
    if len(terms) < 3:
        return None
    for i, j, k in permutations(range(len(terms)), 3):
        if is_consensus_triple(terms[i], terms[j], terms[k], inner_type):
            return k
    return None


def _consensus(outer_type: Type[BinaryOp], inner_type: Type[BinaryOp]):
    def matches(node: Expr) -> bool:
        if type(node) is not outer_type:
            return False
        return _find_redundant(collect_terms(node, outer_type), inner_type) is not None

    def rewrite(node: Expr) -> Expr:
        terms = collect_terms(node, outer_type)
        redundant = _find_redundant(terms, inner_type)
        kept = [t for index, t in enumerate(terms) if index != redundant]
        return build_balanced(kept, outer_type)

    return matches, rewrite


def get_consensus_rules() -> List[SimplificationRule]:
    or_matches, or_rewrite = _consensus(Or, And)
    and_matches, and_rewrite = _consensus(And, Or)
    return [
        recursive_rule(
            RuleInfo(
                name="Consensus Theorem OR",
                description="The consensus term of two products is redundant",
                formula=(
                    r"(A \land B) \lor (\lnot A \land C) \lor (B \land C) = "
                    r"(A \land B) \lor (\lnot A \land C)"
                ),
                category=CONSENSUS,
            ),
            or_matches,
            or_rewrite,
        ),
        recursive_rule(
            RuleInfo(
                name="Consensus Theorem AND",
                description="The consensus term of two sums is redundant",
                formula=(
                    r"(A \lor B) \land (\lnot A \lor C) \land (B \lor C) = "
                    r"(A \lor B) \land (\lnot A \lor C)"
                ),
                category=CONSENSUS,
            ),
            and_matches,
            and_rewrite,
        ),
    ]
