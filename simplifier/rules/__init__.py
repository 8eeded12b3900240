# simplifier/rules/__init__.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Rule family exports and the default rule set

"""Rule families for the simplifier.

Every ``get_*_rules`` function builds fresh rule objects, so rule lists can
be combined and filtered freely by callers.
"""

from typing import List

from ..rule import SimplificationRule
from .constants import get_constant_rules
from .consensus import get_consensus_rules, is_consensus_triple
from .contradiction import get_contradiction_rules, get_redundancy_rules
from .derived import (
    get_derived_rules,
    get_expansion_rules,
    get_nand_rules,
    get_nor_rules,
    get_xnor_rules,
    get_xor_rules,
)
from .distributive import (
    get_absorption_rules,
    get_distributive_rules,
    get_factorization_rules,
)
from .idempotence import get_idempotence_rules
from .structural import (
    get_de_morgan_rules,
    get_double_negation_rules,
    get_structural_rules,
)


def get_default_rules() -> List[SimplificationRule]:
    """The rule set used when a caller does not supply one.

    Factorization and the regex law table are deliberately absent; see
    ``get_factorization_rules`` and ``simplifier.laws``.
    """
    return (
        get_constant_rules()
        + get_contradiction_rules()
        + get_derived_rules()
        + get_structural_rules()
        + get_idempotence_rules()
        + get_redundancy_rules()
        + get_absorption_rules()
        + get_consensus_rules()
        + get_distributive_rules()
    )


__all__ = [
    "get_default_rules",
    "get_constant_rules",
    "get_contradiction_rules",
    "get_redundancy_rules",
    "get_derived_rules",
    "get_expansion_rules",
    "get_xor_rules",
    "get_nand_rules",
    "get_nor_rules",
    "get_xnor_rules",
    "get_structural_rules",
    "get_double_negation_rules",
    "get_de_morgan_rules",
    "get_idempotence_rules",
    "get_absorption_rules",
    "get_consensus_rules",
    "get_distributive_rules",
    "get_factorization_rules",
    "is_consensus_triple",
]
