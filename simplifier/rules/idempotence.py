# simplifier/rules/idempotence.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Removal of repeated operands in AND and OR chains

from typing import List, Type

from parser.ast_nodes import Expr, And, Or, BinaryOp
from ..rule import (
    IDEMPOTENCE,
    RuleInfo,
    SimplificationRule,
    build_balanced,
    collect_terms,
    recursive_rule,
)


def _idempotence(node_type: Type[BinaryOp]):
    def matches(node: Expr) -> bool:
        if type(node) is not node_type:
            return False
        terms = collect_terms(node, node_type)
        return len(set(terms)) < len(terms)

    def rewrite(node: Expr) -> Expr:
        # dict keeps first occurrences in order
        unique = list(dict.fromkeys(collect_terms(node, node_type)))
        return build_balanced(unique, node_type)

    return matches, rewrite


def get_idempotence_rules() -> List[SimplificationRule]:
    and_matches, and_rewrite = _idempotence(And)
    or_matches, or_rewrite = _idempotence(Or)
    return [
        recursive_rule(
            RuleInfo(
                name="AND Idempotence",
                description="A term conjoined with itself is the term",
                formula=r"A \land A = A",
                category=IDEMPOTENCE,
            ),
            and_matches,
            and_rewrite,
        ),
        recursive_rule(
            RuleInfo(
                name="OR Idempotence",
                description="A term disjoined with itself is the term",
                formula=r"A \lor A = A",
                category=IDEMPOTENCE,
            ),
            or_matches,
            or_rewrite,
        ),
    ]
