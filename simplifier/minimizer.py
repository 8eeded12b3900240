# simplifier/minimizer.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Two-level minimization with the Quine-McCluskey method

"""Quine-McCluskey minimization.

The function is taken from the truth table as a list of minterms. Minterms
are written as bit patterns over the sorted variables and merged pairwise
when they differ in exactly one fixed bit, which becomes a ``-``; patterns
that never merge are the prime implicants. The cover keeps every essential
prime implicant (the only one covering some minterm) and covers what is left
with the fewest further primes. Large charts fall back to a greedy choice of
the prime covering the most remaining minterms, which may miss the smallest
cover but always yields an equivalent sum of products.

Example:
    >>> format_to_boolean(minimize(parse("A * B + A * !B + !A * B")))
    '(A + B)'
"""

from collections import defaultdict
from dataclasses import dataclass
from functools import reduce
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from parser.ast_nodes import Expr, Variable, Constant, Not, And, Or
from utils.logger import get_logger
from .canonical import minterms as truth_minterms
from .evaluator import evaluate, extract_variables
from .rule import iter_subexpressions

# Charts with more open primes than this are covered greedily
EXACT_COVER_LIMIT = 16

# Sort order of pattern characters: positive literal, negative literal, absent
_BIT_ORDER = {"1": 0, "0": 1, "-": 2}


@dataclass(frozen=True)
class Implicant:
    """A product term as a bit pattern over the variable columns.

    Attributes:
        bits: One of ``1``, ``0`` or ``-`` per variable, first variable first
        covered: Minterm indices the term is true on
    """

    bits: str
    covered: FrozenSet[int]

    @property
    def literal_count(self) -> int:
        return len(self.bits) - self.bits.count("-")

    def sort_key(self):
        return tuple(_BIT_ORDER[bit] for bit in self.bits)


def _merge(first: str, second: str) -> Optional[str]:
    diff = [i for i, (a, b) in enumerate(zip(first, second)) if a != b]
    if len(diff) != 1:
        return None
    index = diff[0]
    if "-" in (first[index], second[index]):
        return None
    return f"{first[:index]}-{first[index + 1:]}"


def prime_implicants(indices: Iterable[int], width: int) -> List[Implicant]:
    """All prime implicants of the function true on ``indices``.

    Args:
        indices: Minterm numbers
        width: Number of variables

    Returns:
        Prime implicants in literal order (see ``Implicant.sort_key``)
    """
    current: Set[Implicant] = {
        Implicant(format(index, f"0{width}b"), frozenset([index])) for index in indices
    }
    primes: Set[Implicant] = set()

    while current:
        groups: Dict[int, List[Implicant]] = defaultdict(list)
        for implicant in current:
            groups[implicant.bits.count("1")].append(implicant)

        merged: Set[Implicant] = set()
        used: Set[Implicant] = set()
        for ones in sorted(groups):
            for low in groups[ones]:
                for high in groups.get(ones + 1, ()):
                    bits = _merge(low.bits, high.bits)
                    if bits is None:
                        continue
                    merged.add(Implicant(bits, low.covered | high.covered))
                    used.add(low)
                    used.add(high)

        primes.update(current - used)
        current = merged

    return sorted(primes, key=Implicant.sort_key)


def _smallest_cover(candidates: List[Implicant], remaining: Set[int]) -> List[Implicant]:
    for size in range(1, len(candidates) + 1):
        covers = [
            combo
            for combo in combinations(candidates, size)
            if remaining <= set().union(*(p.covered for p in combo))
        ]
        if covers:
            return list(min(covers, key=lambda combo: sum(p.literal_count for p in combo)))
    return []


def select_cover(primes: List[Implicant], indices: Iterable[int]) -> List[Implicant]:
    """Pick prime implicants covering every minterm in ``indices``.

    Essential primes come first. The rest of the chart is covered exactly
    (fewest terms, then fewest literals) when at most ``EXACT_COVER_LIMIT``
    primes remain, and greedily otherwise. The result is in literal order.
    """
    remaining = set(indices)
    chosen: List[Implicant] = []

    for index in sorted(remaining):
        covering = [prime for prime in primes if index in prime.covered]
        if len(covering) == 1 and covering[0] not in chosen:
            chosen.append(covering[0])
    for prime in chosen:
        remaining -= prime.covered

    candidates = [p for p in primes if p not in chosen and p.covered & remaining]
    if len(candidates) <= EXACT_COVER_LIMIT:
        chosen.extend(_smallest_cover(candidates, remaining))
        remaining.clear()

    while remaining:
        best = max(
            candidates,
            key=lambda p: (len(p.covered & remaining), -p.literal_count),
        )
        chosen.append(best)
        remaining -= best.covered

    return sorted(chosen, key=Implicant.sort_key)


def implicant_to_expression(implicant: Implicant, variables: List[str]) -> Expr:
    literals: List[Expr] = []
    for name, bit in zip(variables, implicant.bits):
        if bit == "1":
            literals.append(Variable(name))
        elif bit == "0":
            literals.append(Not(Variable(name)))
    if not literals:
        return Constant(True)
    return reduce(And, literals)


def literal_count(expr: Expr) -> int:
    """Number of variable occurrences in ``expr``."""
    return sum(1 for node in iter_subexpressions(expr) if isinstance(node, Variable))


def minimize(expr: Expr) -> Expr:
    """Minimal sum of products of ``expr`` by Quine-McCluskey.

    Raises:
        ValueError: More than ``MAX_TRUTH_TABLE_VARIABLES`` variables
    """
    variables = extract_variables(expr)
    if not variables:
        return Constant(evaluate(expr, {}))

    indices = truth_minterms(expr, variables)
    if not indices:
        return Constant(False)

    primes = prime_implicants(indices, len(variables))
    cover = select_cover(primes, indices)
    get_logger().debug(
        f"Quine-McCluskey over {variables}: {len(indices)} minterm(s), "
        f"{len(primes)} prime(s), {len(cover)} selected"
    )

    return reduce(Or, (implicant_to_expression(prime, variables) for prime in cover))
