# parser/ast_nodes.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Abstract Syntax Tree node classes for boolean expression representation

"""AST node classes for representing parsed boolean expressions.

This module defines immutable and hashable node classes used to construct tree
representations of boolean expressions. The node set is closed: variables,
constants, negation and the six binary connectives (AND, OR and the derived
XOR, NAND, NOR, XNOR operators).

Node Types:
    Variable, Constant: Leaves of the tree
    Not: Unary negation
    And, Or, Xor, Nand, Nor, Xnor: Binary connectives sharing ``BinaryOp``

Nodes are value types. Equality and hashing are structural, so two trees
built independently compare equal when they have the same shape. Invariants
are checked at construction time: a binary node always carries both
children, constants carry a ``bool`` and variable names are uppercase
letters. All nodes support the visitor design pattern.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import ClassVar, Protocol

VARIABLE_NAME = re.compile(r"^[A-Z]+$")


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_nand(self, n: Nand): ...

    def visit_nor(self, n: Nor): ...

    def visit_xnor(self, n: Xnor): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all boolean expression nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and implement
    ``accept`` for visitor dispatch and ``__str__`` for the canonical text.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable such as ``A``.

    Attributes:
        name: One or more uppercase letters
    """

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not VARIABLE_NAME.match(self.name):
            raise ValueError(
                f"Invalid variable name {self.name!r}: use uppercase letters (A-Z)"
            )

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant, rendered as ``1`` or ``0``.

    Attributes:
        value: Truth value of the constant
    """

    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError("Constant value must be a boolean.")

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def __post_init__(self):
        if not isinstance(self.operand, Expr):
            raise TypeError("NOT expression requires an operand")

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!({self.operand})"


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Common shape of the binary connectives.

    Subclasses only set ``symbol`` and ``latex``; both children are
    mandatory, which keeps a half-built binary node unrepresentable.

    Attributes:
        left: Left operand
        right: Right operand
    """

    symbol: ClassVar[str] = "?"
    latex: ClassVar[str] = "?"

    left: Expr
    right: Expr

    def __post_init__(self):
        if not isinstance(self.left, Expr) or not isinstance(self.right, Expr):
            raise TypeError(
                f"{type(self).__name__.upper()} expression requires both operands"
            )

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Conjunction, true when both operands are true."""

    symbol: ClassVar[str] = "*"
    latex: ClassVar[str] = r"\land"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Disjunction, true when at least one operand is true."""

    symbol: ClassVar[str] = "+"
    latex: ClassVar[str] = r"\lor"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryOp):
    """Exclusive or, true when the operands differ."""

    symbol: ClassVar[str] = "^"
    latex: ClassVar[str] = r"\oplus"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Nand(BinaryOp):
    """Negated conjunction."""

    symbol: ClassVar[str] = "@"
    latex: ClassVar[str] = r"\uparrow"

    def accept(self, v: Visitor):
        return v.visit_nand(self)


@dataclass(frozen=True, slots=True)
class Nor(BinaryOp):
    """Negated disjunction."""

    symbol: ClassVar[str] = "#"
    latex: ClassVar[str] = r"\downarrow"

    def accept(self, v: Visitor):
        return v.visit_nor(self)


@dataclass(frozen=True, slots=True)
class Xnor(BinaryOp):
    """Equivalence, true when the operands agree."""

    symbol: ClassVar[str] = "<=>"
    latex: ClassVar[str] = r"\leftrightarrow"

    def accept(self, v: Visitor):
        return v.visit_xnor(self)


TRUE = Constant(True)
FALSE = Constant(False)
