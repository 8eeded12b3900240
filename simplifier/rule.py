# simplifier/rule.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Rule contract and structural helpers shared by every rule family

"""Simplification rule contract and tree helpers.

A rule is a pair of pure functions over expression trees: ``can_apply``
decides cheaply whether the rule has anything to do, and ``apply`` returns
the rewritten tree. When nothing changes, ``apply`` returns the very object it
was given, which lets the engine detect no-ops without formatting the tree.

Most algebraic laws are local patterns that may occur anywhere in a tree. The
helpers at the bottom of this module lift such a local rewrite to the whole
tree, either bottom-up (children first, then the node) or top-down (the node
first, then the children of whatever it became). Both rebuild only the spine
above a changed node and reuse every untouched subtree.

Commutative, associative laws (absorption, consensus, idempotence) work on
flattened operand lists; ``collect_terms`` produces those lists and
``build_balanced`` turns a list back into a tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Type

from parser.ast_nodes import Expr, Not, BinaryOp, Constant

# Rule categories, used by the engine to assign rules to phases
CONSTANT = "constant"
CONTRADICTION = "contradiction"
DERIVED = "derived"
EXPANSION = "expansion"
NEGATION = "negation"
IDEMPOTENCE = "idempotence"
REDUNDANCY = "redundancy"
ABSORPTION = "absorption"
CONSENSUS = "consensus"
DISTRIBUTIVE = "distributive"
FACTORIZATION = "factorization"
LAW = "law"
MINIMIZATION = "minimization"


@dataclass(frozen=True)
class RuleInfo:
    """Descriptive metadata of a rule.

    Attributes:
        name: Unique, human-readable rule name shown in step logs
        description: One-sentence explanation of the law
        formula: The law in LaTeX notation
        category: Rule family, used to place the rule in a phase
    """

    name: str
    description: str
    formula: str
    category: str = REDUNDANCY


class SimplificationRule:
    """A named rewrite with a cheap applicability test.

    ``apply`` consults ``can_apply`` first and hands back the input unchanged
    when the rule does not apply, so calling it on any well-formed tree is
    always safe.

    Attributes:
        info: Rule metadata
    """

    def __init__(
        self,
        info: RuleInfo,
        can_apply: Callable[[Expr], bool],
        apply: Callable[[Expr], Expr],
    ):
        self.info = info
        self._can_apply = can_apply
        self._apply = apply

    @property
    def name(self) -> str:
        return self.info.name

    def can_apply(self, expr: Expr) -> bool:
        """Return True when ``apply`` may change ``expr``."""
        return bool(self._can_apply(expr))

    def apply(self, expr: Expr) -> Expr:
        """Rewrite ``expr``; returns ``expr`` itself when nothing changes."""
        if not self._can_apply(expr):
            return expr
        return self._apply(expr)

    def __repr__(self) -> str:
        return f"SimplificationRule({self.info.name!r}, category={self.info.category!r})"


# --- Structural predicates -------------------------------------------------


def is_complement(a: Expr, b: Expr) -> bool:
    """True when one expression is exactly the negation of the other.

    The check is symmetric and structural: ``!(A * B)`` complements
    ``(A * B)`` regardless of which side is passed first.
    """
    if isinstance(a, Not) and a.operand == b:
        return True
    return isinstance(b, Not) and b.operand == a


def is_constant(expr: Expr, value: bool) -> bool:
    return isinstance(expr, Constant) and expr.value is value


def has_complementary_pair(terms: Sequence[Expr]) -> bool:
    """True when some term and its negation are both present."""
    present = set(terms)
    return any(isinstance(t, Not) and t.operand in present for t in terms)


# --- Flattening and rebuilding ---------------------------------------------


def collect_terms(expr: Expr, node_type: Type[BinaryOp]) -> List[Expr]:
    """Flatten a chain of ``node_type`` nodes into its operands, left to right.

    ``(A + B) + (C + D * E)`` flattened over Or gives ``A, B, C, (D * E)``.
    """
    terms: List[Expr] = []
    stack = [expr]
    while stack:
        node = stack.pop()
        if type(node) is node_type:
            stack.append(node.right)
            stack.append(node.left)
        else:
            terms.append(node)
    return terms


def build_balanced(terms: Sequence[Expr], node_type: Type[BinaryOp]) -> Expr:
    """Build a balanced binary tree of ``node_type`` over ``terms``.

    Args:
        terms: At least one operand, kept in order
        node_type: And or Or

    Returns:
        The single term itself, or a tree split at ``len(terms) // 2``
    """
    if not terms:
        raise ValueError("Cannot build an expression from an empty term list")
    if len(terms) == 1:
        return terms[0]
    mid = len(terms) // 2
    return node_type(
        build_balanced(terms[:mid], node_type),
        build_balanced(terms[mid:], node_type),
    )


# --- Traversal ---------------------------------------------------------------


def iter_subexpressions(expr: Expr) -> Iterator[Expr]:
    """Yield ``expr`` and all of its descendants in pre-order."""
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, BinaryOp):
            stack.append(node.right)
            stack.append(node.left)
        elif isinstance(node, Not):
            stack.append(node.operand)


def any_subexpression(expr: Expr, predicate: Callable[[Expr], bool]) -> bool:
    return any(predicate(node) for node in iter_subexpressions(expr))


def map_children(expr: Expr, fn: Callable[[Expr], Expr]) -> Expr:
    """Rebuild ``expr`` with ``fn`` applied to its direct children.

    Returns ``expr`` itself when every child comes back unchanged.
    """
    if isinstance(expr, BinaryOp):
        left = fn(expr.left)
        right = fn(expr.right)
        if left is expr.left and right is expr.right:
            return expr
        return type(expr)(left, right)
    if isinstance(expr, Not):
        operand = fn(expr.operand)
        if operand is expr.operand:
            return expr
        return Not(operand)
    return expr


def rewrite_bottom_up(expr: Expr, fn: Callable[[Expr], Expr]) -> Expr:
    """Single bottom-up pass: rewrite children, then offer the node to ``fn``."""
    current = map_children(expr, lambda child: rewrite_bottom_up(child, fn))
    return fn(current)


def rewrite_top_down(expr: Expr, fn: Callable[[Expr], Expr]) -> Expr:
    """Single top-down pass: rewrite the node, then descend into the result.

    Descending into the rewritten node lets one pass push a transformation
    all the way down, e.g. De Morgan through nested negated groups.
    """
    current = fn(expr)
    return map_children(current, lambda child: rewrite_top_down(child, fn))


def recursive_rule(
    info: RuleInfo,
    matches: Callable[[Expr], bool],
    rewrite: Callable[[Expr], Expr],
    top_down: bool = False,
) -> SimplificationRule:
    """Lift a local rewrite to a rule acting on every matching node.

    Args:
        info: Rule metadata
        matches: Local test for a single node
        rewrite: Local rewrite, only called on matching nodes
        top_down: Traverse parents before children

    Returns:
        Rule whose ``can_apply`` is "some node matches"
    """

    def local(node: Expr) -> Expr:
        return rewrite(node) if matches(node) else node

    traverse = rewrite_top_down if top_down else rewrite_bottom_up

    return SimplificationRule(
        info,
        can_apply=lambda expr: any_subexpression(expr, matches),
        apply=lambda expr: traverse(expr, local),
    )


def first_index_pair(
    terms: Sequence[Expr], combine: Callable[[Expr, Expr], Optional[Expr]]
) -> Optional[tuple]:
    """Find the first ordered pair ``(i, j)`` for which ``combine`` succeeds.

    Returns:
        ``(i, j, combined)`` or None
    """
    for i, first in enumerate(terms):
        for j, second in enumerate(terms):
            if i == j:
                continue
            combined = combine(first, second)
            if combined is not None:
                return i, j, combined
    return None
