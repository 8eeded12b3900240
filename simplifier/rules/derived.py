# simplifier/rules/derived.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Native simplification and expansion of XOR, NAND, NOR and XNOR

"""Rules for the derived operators.

Each derived operator has native rules (identities, constants, self
application, complements, double application) that simplify it without
leaving the operator, and one expansion rule that rewrites it into AND, OR
and NOT:

    A ^ B   = (A * !B) + (!A * B)
    A @ B   = !(A * B)
    A # B   = !(A + B)
    A <=> B = (A * B) + (!A * !B)

Native rules are listed before expansions so that the engine, which restarts
from the first rule of a phase after every rewrite, expands an operator only
once no native rule can make progress.
"""

from typing import Callable, List, Optional, Type

from parser.ast_nodes import (
    Expr,
    Not,
    And,
    Or,
    Xor,
    Nand,
    Nor,
    Xnor,
    BinaryOp,
    TRUE,
    FALSE,
)
from ..rule import (
    DERIVED,
    EXPANSION,
    RuleInfo,
    SimplificationRule,
    is_complement,
    is_constant,
    recursive_rule,
)

Rewrite = Callable[[Expr, Expr], Optional[Expr]]


def _with_constant(value: bool, build: Callable[[Expr], Expr]) -> Rewrite:
    """Match ``X op c`` or ``c op X`` for the constant ``c``."""

    def rewrite(left: Expr, right: Expr) -> Optional[Expr]:
        if is_constant(right, value):
            return build(left)
        if is_constant(left, value):
            return build(right)
        return None

    return rewrite


def _with_itself(build: Callable[[Expr], Expr]) -> Rewrite:
    return lambda left, right: build(left) if left == right else None


def _with_complement(result: Expr) -> Rewrite:
    return lambda left, right: result if is_complement(left, right) else None


def _native_rule(
    node_type: Type[BinaryOp], name: str, description: str, formula: str, rewrite: Rewrite
) -> SimplificationRule:
    def matches(node: Expr) -> bool:
        return type(node) is node_type and rewrite(node.left, node.right) is not None

    return recursive_rule(
        RuleInfo(name, description, formula, DERIVED),
        matches,
        lambda node: rewrite(node.left, node.right),
    )


def _double_application_rule(
    node_type: Type[BinaryOp], result_type: Type[BinaryOp], name: str, formula: str
) -> SimplificationRule:
    """``!(A @ B) = A * B`` and ``!(A # B) = A + B``."""
    return recursive_rule(
        RuleInfo(name, f"A negated {node_type.__name__.upper()} is a plain "
                 f"{result_type.__name__.upper()}", formula, DERIVED),
        lambda node: isinstance(node, Not) and type(node.operand) is node_type,
        lambda node: result_type(node.operand.left, node.operand.right),
    )


def _identity(expr: Expr) -> Expr:
    return expr


def _constant(value: Expr) -> Callable[[Expr], Expr]:
    return lambda expr: value


def get_xor_rules() -> List[SimplificationRule]:
    return [
        _native_rule(Xor, "XOR Identity", "XOR with 0 leaves a term unchanged",
                     r"A \oplus 0 = A", _with_constant(False, _identity)),
        _native_rule(Xor, "XOR with True", "XOR with 1 negates a term",
                     r"A \oplus 1 = \lnot A", _with_constant(True, Not)),
        _native_rule(Xor, "XOR Self-Cancellation", "A term XOR itself is 0",
                     r"A \oplus A = 0", _with_itself(_constant(FALSE))),
        _native_rule(Xor, "XOR with Complement", "A term XOR its negation is 1",
                     r"A \oplus \lnot A = 1", _with_complement(TRUE)),
    ]


def get_nand_rules() -> List[SimplificationRule]:
    return [
        _native_rule(Nand, "NAND with False", "NAND with 0 is 1",
                     r"A \uparrow 0 = 1", _with_constant(False, _constant(TRUE))),
        _native_rule(Nand, "NAND with True", "NAND with 1 negates a term",
                     r"A \uparrow 1 = \lnot A", _with_constant(True, Not)),
        _native_rule(Nand, "NAND Self-Negation", "A term NAND itself is its negation",
                     r"A \uparrow A = \lnot A", _with_itself(Not)),
        _native_rule(Nand, "NAND with Complement", "A term NAND its negation is 1",
                     r"A \uparrow \lnot A = 1", _with_complement(TRUE)),
        _double_application_rule(Nand, And, "Double NAND",
                                 r"\lnot(A \uparrow B) = A \land B"),
    ]


def get_nor_rules() -> List[SimplificationRule]:
    return [
        _native_rule(Nor, "NOR with True", "NOR with 1 is 0",
                     r"A \downarrow 1 = 0", _with_constant(True, _constant(FALSE))),
        _native_rule(Nor, "NOR with False", "NOR with 0 negates a term",
                     r"A \downarrow 0 = \lnot A", _with_constant(False, Not)),
        _native_rule(Nor, "NOR Self-Negation", "A term NOR itself is its negation",
                     r"A \downarrow A = \lnot A", _with_itself(Not)),
        _native_rule(Nor, "NOR with Complement", "A term NOR its negation is 0",
                     r"A \downarrow \lnot A = 0", _with_complement(FALSE)),
        _double_application_rule(Nor, Or, "Double NOR",
                                 r"\lnot(A \downarrow B) = A \lor B"),
    ]


def get_xnor_rules() -> List[SimplificationRule]:
    return [
        _native_rule(Xnor, "XNOR Identity", "XNOR with 1 leaves a term unchanged",
                     r"A \leftrightarrow 1 = A", _with_constant(True, _identity)),
        _native_rule(Xnor, "XNOR with False", "XNOR with 0 negates a term",
                     r"A \leftrightarrow 0 = \lnot A", _with_constant(False, Not)),
        _native_rule(Xnor, "XNOR Self-Equivalence", "A term XNOR itself is 1",
                     r"A \leftrightarrow A = 1", _with_itself(_constant(TRUE))),
        _native_rule(Xnor, "XNOR with Complement", "A term XNOR its negation is 0",
                     r"A \leftrightarrow \lnot A = 0", _with_complement(FALSE)),
    ]


def get_expansion_rules() -> List[SimplificationRule]:
    """Rewrite each derived operator into AND, OR and NOT."""

    def expansion(node_type, name, formula, build):
        return recursive_rule(
            RuleInfo(name, f"Express {node_type.__name__.upper()} with AND, OR and NOT",
                     formula, EXPANSION),
            lambda node: type(node) is node_type,
            lambda node: build(node.left, node.right),
        )

    return [
        expansion(Xor, "XOR Expansion", r"A \oplus B = (A \land \lnot B) \lor (\lnot A \land B)",
                  lambda a, b: Or(And(a, Not(b)), And(Not(a), b))),
        expansion(Nand, "NAND Expansion", r"A \uparrow B = \lnot(A \land B)",
                  lambda a, b: Not(And(a, b))),
        expansion(Nor, "NOR Expansion", r"A \downarrow B = \lnot(A \lor B)",
                  lambda a, b: Not(Or(a, b))),
        expansion(Xnor, "XNOR Expansion",
                  r"A \leftrightarrow B = (A \land B) \lor (\lnot A \land \lnot B)",
                  lambda a, b: Or(And(a, b), And(Not(a), Not(b)))),
    ]


def get_derived_rules() -> List[SimplificationRule]:
    """Native rules for every derived operator, then the expansions."""
    return (
        get_xor_rules()
        + get_nand_rules()
        + get_nor_rules()
        + get_xnor_rules()
        + get_expansion_rules()
    )
