# simplifier/config.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Effort budgets and options for a simplification run

from dataclasses import dataclass

DEFAULT_MAX_TOTAL_ITERATIONS = 20
DEFAULT_MAX_PHASE_INTERNAL_LOOPS = 10
DEFAULT_MAX_RULE_APPLICATIONS_PER_RULE = 50


@dataclass(frozen=True)
class SimplifierConfig:
    """Budgets bounding the work of one ``simplify`` call.

    Termination comes from these caps, not from proving that a fixed point
    was reached; a run that hits the outer cap still returns its best tree
    and reports ``max_iterations_reached``.

    Attributes:
        max_total_iterations: Outer passes over all phases
        max_phase_internal_loops: Rewrites attempted per phase per pass
        max_rule_applications_per_rule: Applications of one rule per call
        verify_result: Check the result against the input by truth table
        minimize: Finish with Quine-McCluskey minimization when it yields
            fewer literals than the rule-based result
    """

    max_total_iterations: int = DEFAULT_MAX_TOTAL_ITERATIONS
    max_phase_internal_loops: int = DEFAULT_MAX_PHASE_INTERNAL_LOOPS
    max_rule_applications_per_rule: int = DEFAULT_MAX_RULE_APPLICATIONS_PER_RULE
    verify_result: bool = False
    minimize: bool = False

    def __post_init__(self):
        for field_name in (
            "max_total_iterations",
            "max_phase_internal_loops",
            "max_rule_applications_per_rule",
        ):
            if getattr(self, field_name) < 1:
                raise ValueError(f"{field_name} must be at least 1")
