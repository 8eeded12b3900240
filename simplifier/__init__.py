# simplifier/__init__.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Rule-based simplification of boolean expression trees

"""Boolean expression simplification.

Takes trees produced by ``parser`` and rewrites them with a library of
algebraic rules (constants, contradictions, derived operators, De Morgan,
idempotence, absorption, consensus, distribution) until no rule applies or
an effort budget runs out. Every rewrite is recorded as a step with the rule
name, its LaTeX formula and the canonical text before and after.

Core Functions:
    simplify: Tree in, ``SimplificationResult`` out
    simplify_expression: Text in, canonical strings out
    get_latex_results: Text in, LaTeX strings out
    get_default_rules: The default rule set
    to_sum_of_products / to_product_of_sums: Canonical normal forms
    minimize: Minimal sum of products by Quine-McCluskey

Example:
    >>> from parser import parse
    >>> from simplifier import simplify
    >>> simplify(parse("(A * B) + (A * !B)")).simplified_expression_string
    'A'
"""

from .config import SimplifierConfig
from .canonical import maxterms, minterms, to_product_of_sums, to_sum_of_products
from .context import SimplificationContext, SimplificationResult, SimplificationStep
from .engine import (
    PHASES,
    Phase,
    Simplifier,
    get_latex_results,
    group_rules_by_phase,
    simplify,
    simplify_expression,
)
from .evaluator import (
    MAX_TRUTH_TABLE_VARIABLES,
    are_equivalent,
    evaluate,
    extract_variables,
    truth_table,
)
from .exceptions import SimplificationError
from .minimizer import minimize
from .rule import RuleInfo, SimplificationRule
from .rules import get_default_rules

__all__ = [
    "simplify",
    "simplify_expression",
    "get_latex_results",
    "get_default_rules",
    "group_rules_by_phase",
    "Simplifier",
    "SimplifierConfig",
    "SimplificationContext",
    "SimplificationResult",
    "SimplificationStep",
    "SimplificationError",
    "SimplificationRule",
    "RuleInfo",
    "Phase",
    "PHASES",
    "evaluate",
    "extract_variables",
    "truth_table",
    "are_equivalent",
    "MAX_TRUTH_TABLE_VARIABLES",
    "to_sum_of_products",
    "to_product_of_sums",
    "minterms",
    "maxterms",
    "minimize",
]

__version__ = "1.0.0"
