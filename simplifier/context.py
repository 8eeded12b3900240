# simplifier/context.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Step log, per-call bookkeeping and the result of a simplification run

"""Bookkeeping for one simplification run.

A ``SimplificationContext`` lives exactly as long as one ``simplify`` call:
it collects the ordered ``SimplificationStep`` log and the application count
of every rule, and is turned into an immutable ``SimplificationResult`` when
the run ends. Nothing here is shared between calls.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from parser.ast_nodes import Expr
from .rule import RuleInfo


@dataclass(frozen=True)
class SimplificationStep:
    """One successful rewrite, with canonical text before and after."""

    rule_name: str
    rule_formula: str
    expression_before: str
    expression_after: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "rule_name": self.rule_name,
            "rule_formula": self.rule_formula,
            "before": self.expression_before,
            "after": self.expression_after,
        }

    def __str__(self) -> str:
        return f"{self.rule_name}: {self.expression_before} → {self.expression_after}"


@dataclass
class SimplificationContext:
    """Mutable state of a single run."""

    steps: List[SimplificationStep] = field(default_factory=list)
    rule_application_counts: Dict[str, int] = field(default_factory=dict)
    total_applications: int = 0
    iterations: int = 0
    max_iterations_reached: bool = False

    def applications_of(self, rule_name: str) -> int:
        return self.rule_application_counts.get(rule_name, 0)

    def record(self, info: RuleInfo, before: str, after: str) -> SimplificationStep:
        """Append a step for ``info`` and bump its counters."""
        step = SimplificationStep(info.name, info.formula, before, after)
        self.steps.append(step)
        self.rule_application_counts[info.name] = self.applications_of(info.name) + 1
        self.total_applications += 1
        return step


@dataclass(frozen=True)
class SimplificationResult:
    """Outcome of ``simplify``.

    Attributes:
        original_expression: Input tree
        simplified_expression: Best tree reached
        simplified_expression_string: Canonical text of the result
        simplified_expression_latex: LaTeX of the result
        steps: Rewrites in application order
        total_applications: Number of rewrites
        iterations: Outer passes performed
        rule_application_counts: Rewrites per rule name
        max_iterations_reached: The outer budget ran out before convergence
        verified: Truth-table check outcome, None when not performed
    """

    original_expression: Expr
    simplified_expression: Expr
    simplified_expression_string: str
    simplified_expression_latex: str
    steps: List[SimplificationStep]
    total_applications: int
    iterations: int
    rule_application_counts: Dict[str, int]
    max_iterations_reached: bool
    verified: Optional[bool] = None

    def to_dict(self) -> Dict:
        """JSON-serializable view of the result."""
        return {
            "original": str(self.original_expression),
            "result": self.simplified_expression_string,
            "latex": self.simplified_expression_latex,
            "steps": [step.to_dict() for step in self.steps],
            "total_applications": self.total_applications,
            "iterations": self.iterations,
            "rule_application_counts": dict(self.rule_application_counts),
            "max_iterations_reached": self.max_iterations_reached,
            "verified": self.verified,
        }
