# simplifier/laws.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Regex law table over canonical text, convertible into rules

"""String-level law table.

An alternate encoding of a handful of algebraic laws as regular expressions
over the canonical text produced by ``to_boolean``. Each ``Law`` rewrites the
first match in the text and the result is parsed back into a tree. The
patterns only match single-letter variables and constants, which is enough
for small textbook identities; the structural rules in ``simplifier.rules``
cover the same laws for arbitrary subtrees.

The table is not part of the default rule set. Callers opt in with
``convert_laws_to_rules()``; the resulting rules carry the ``law`` category
and run in the algebraic phase.

Example:
    >>> from simplifier import simplify, get_default_rules
    >>> from simplifier.laws import convert_laws_to_rules
    >>> rules = get_default_rules() + convert_laws_to_rules()
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from parser import ParserOptions, parse_expression
from parser.ast_nodes import Expr
from parser.exceptions import ParseError
from parser.formatter import to_boolean
from parser.normalizer import InputFormat
from utils.logger import get_logger
from .rule import LAW, RuleInfo, SimplificationRule

Replacement = Union[str, Callable[[re.Match], str]]

_STRICT = ParserOptions(input_format=InputFormat.STANDARD, auto_fix=False, silent=True)


@dataclass(frozen=True)
class Law:
    """A law written as a regex rewrite of canonical text.

    Attributes:
        name: Law name shown in step logs
        formula: The law in LaTeX notation
        pattern: Regular expression over canonical text
        replacement: Replacement string (backreferences allowed) or callable
        category: Textbook family the law belongs to
    """

    name: str
    formula: str
    pattern: str
    replacement: Replacement
    category: str


def _first_group(match: re.Match) -> str:
    return next(group for group in match.groups() if group is not None)


def _negate_constant(match: re.Match) -> str:
    return "0" if match.group(1) == "1" else "1"


LAWS = (
    Law("Identity Law (AND)", r"A \land 1 = A",
        r"\(([A-Z]) \* 1\)|\(1 \* ([A-Z])\)", _first_group, "identity"),
    Law("Identity Law (OR)", r"A \lor 0 = A",
        r"\(([A-Z]) \+ 0\)|\(0 \+ ([A-Z])\)", _first_group, "identity"),
    Law("Domination Law (AND)", r"A \land 0 = 0",
        r"\([A-Z01] \* 0\)|\(0 \* [A-Z01]\)", "0", "domination"),
    Law("Domination Law (OR)", r"A \lor 1 = 1",
        r"\([A-Z01] \+ 1\)|\(1 \+ [A-Z01]\)", "1", "domination"),
    Law("Idempotent Law (AND)", r"A \land A = A",
        r"\(([A-Z]) \* \1\)", r"\1", "idempotent"),
    Law("Idempotent Law (OR)", r"A \lor A = A",
        r"\(([A-Z]) \+ \1\)", r"\1", "idempotent"),
    Law("Double Negation Law", r"\lnot\lnot A = A",
        r"!\(!\(([A-Z01])\)\)", r"\1", "doubleNegation"),
    Law("Complement Law (AND)", r"A \land \lnot A = 0",
        r"\(([A-Z]) \* !\(\1\)\)|\(!\(([A-Z])\) \* \2\)", "0", "complement"),
    Law("Complement Law (OR)", r"A \lor \lnot A = 1",
        r"\(([A-Z]) \+ !\(\1\)\)|\(!\(([A-Z])\) \+ \2\)", "1", "complement"),
    Law("Absorption Law (OR)", r"A \lor (A \land B) = A",
        r"\(([A-Z]) \+ \(\1 \* [A-Z]\)\)", r"\1", "absorption"),
    Law("Absorption Law (AND)", r"A \land (A \lor B) = A",
        r"\(([A-Z]) \* \(\1 \+ [A-Z]\)\)", r"\1", "absorption"),
    Law("NOT Constant", r"\lnot 1 = 0,\ \lnot 0 = 1",
        r"!\(([01])\)", _negate_constant, "constantReduction"),
)


def get_laws() -> List[Law]:
    return list(LAWS)


def _law_to_rule(law: Law) -> SimplificationRule:
    pattern = re.compile(law.pattern)

    def rewrite(expr: Expr) -> Optional[Expr]:
        text = to_boolean(expr)
        new_text, count = pattern.subn(law.replacement, text, count=1)
        if count == 0 or new_text == text:
            return None
        try:
            return parse_expression(new_text, _STRICT)
        except ParseError as exc:
            get_logger().debug(
                f"Law '{law.name}' produced unparseable text {new_text!r}: {exc}"
            )
            return None

    def apply(expr: Expr) -> Expr:
        rewritten = rewrite(expr)
        return expr if rewritten is None else rewritten

    return SimplificationRule(
        RuleInfo(
            name=law.name,
            description=f"Regex law ({law.category})",
            formula=law.formula,
            category=LAW,
        ),
        can_apply=lambda expr: pattern.search(to_boolean(expr)) is not None
        and rewrite(expr) is not None,
        apply=apply,
    )


def convert_laws_to_rules(laws: Optional[Sequence[Law]] = None) -> List[SimplificationRule]:
    """Turn law table entries into simplification rules.

    Args:
        laws: Laws to convert; defaults to the whole table

    Returns:
        One rule per law, in table order
    """
    return [_law_to_rule(law) for law in (LAWS if laws is None else laws)]
