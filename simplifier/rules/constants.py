# simplifier/rules/constants.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Constant folding for AND, OR and NOT

from typing import List

from parser.ast_nodes import Expr, Constant, Not, And, Or, TRUE, FALSE
from ..rule import CONSTANT, RuleInfo, SimplificationRule, recursive_rule


def _fold(node: Expr) -> Expr:
    """Fold one node whose children are already folded.

    ``X*1=X, X*0=0, X+1=1, X+0=X, !1=0, !0=1``; anything else is returned
    unchanged.
    """
    if isinstance(node, Not) and isinstance(node.operand, Constant):
        return FALSE if node.operand.value else TRUE

    if isinstance(node, And):
        for constant, other in ((node.left, node.right), (node.right, node.left)):
            if isinstance(constant, Constant):
                return other if constant.value else FALSE

    if isinstance(node, Or):
        for constant, other in ((node.left, node.right), (node.right, node.left)):
            if isinstance(constant, Constant):
                return TRUE if constant.value else other

    return node


def _foldable(node: Expr) -> bool:
    return _fold(node) is not node


def get_constant_rules() -> List[SimplificationRule]:
    return [
        recursive_rule(
            RuleInfo(
                name="Constant Simplification",
                description="Fold AND, OR and NOT applied to the constants 0 and 1",
                formula=(
                    r"A \land 1 = A,\ A \land 0 = 0,\ A \lor 1 = 1,\ "
                    r"A \lor 0 = A,\ \lnot 1 = 0,\ \lnot 0 = 1"
                ),
                category=CONSTANT,
            ),
            _foldable,
            _fold,
        )
    ]
