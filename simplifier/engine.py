# simplifier/engine.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Phased, bounded fixed-point iteration over the rule library

"""Simplification orchestrator.

The engine rewrites a tree by running the rule library in five phases, in a
fixed order, over and over until the tree stops changing:

1. constants      constant folding, contradiction, tautology
2. derived-ops    XOR/NAND/NOR/XNOR native rules, then expansions
3. negations      double negation, De Morgan
4. algebraic      idempotence, complement redundancy, absorption,
                  consensus, distribution (and any unclaimed category)
5. cleanup        negation, constant and idempotence rules once more

Inside a phase the rules are tried in order; the first rule that changes the
tree is recorded as a step and the phase restarts from its first rule, so
earlier, more specific rules always win. A phase ends when no rule changes
the tree or after ``max_phase_internal_loops`` rewrites.

Termination is guaranteed by budgets rather than by detecting a true fixed
point: at most ``max_total_iterations`` outer passes, at most
``max_rule_applications_per_rule`` applications of any one rule, and no
rewrite may return to a tree already visited in the same call. The canonical
text of a tree (``to_boolean``) is its signature for all of these checks.
Running out of outer passes is reported through ``max_iterations_reached``;
it is never an error.

With ``SimplifierConfig.minimize`` set, the rule result is finally handed to
the Quine-McCluskey minimizer and replaced, as one more recorded step, when
the minimal sum of products has fewer literals.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple

from parser import ParserOptions, parse_expression
from parser.ast_nodes import Expr
from parser.exceptions import ParseError
from parser.formatter import to_boolean, to_latex
from utils.logger import get_logger
from . import rule as categories
from .config import SimplifierConfig
from .context import SimplificationContext, SimplificationResult
from .evaluator import are_equivalent
from .exceptions import SimplificationError
from .minimizer import literal_count, minimize
from .rule import RuleInfo, SimplificationRule
from .rules import get_default_rules


@dataclass(frozen=True)
class Phase:
    """A named group of rule categories run together."""

    name: str
    categories: Tuple[str, ...]


ALGEBRAIC_PHASE = "algebraic"

MINIMIZATION_RULE = RuleInfo(
    name="Quine-McCluskey Minimization",
    description="Replace the expression by a minimal cover of its prime implicants",
    formula=r"f = \sum \text{prime implicants}",
    category=categories.MINIMIZATION,
)

PHASES = (
    Phase("constants", (categories.CONSTANT, categories.CONTRADICTION)),
    Phase("derived-ops", (categories.DERIVED, categories.EXPANSION)),
    Phase("negations", (categories.NEGATION,)),
    Phase(
        ALGEBRAIC_PHASE,
        (
            categories.IDEMPOTENCE,
            categories.REDUNDANCY,
            categories.ABSORPTION,
            categories.CONSENSUS,
            categories.DISTRIBUTIVE,
            categories.FACTORIZATION,
            categories.LAW,
        ),
    ),
    Phase(
        "cleanup",
        (
            categories.NEGATION,
            categories.CONSTANT,
            categories.CONTRADICTION,
            categories.IDEMPOTENCE,
        ),
    ),
)


def group_rules_by_phase(
    rules: Sequence[SimplificationRule],
) -> List[Tuple[Phase, List[SimplificationRule]]]:
    """Assign rules to phases by category.

    Within a phase, rules are ordered by the phase's category order and then
    by their position in ``rules``. Rules whose category no phase lists are
    appended to the algebraic phase.
    """
    claimed = {category for phase in PHASES for category in phase.categories}
    unclaimed = [r for r in rules if r.info.category not in claimed]

    grouped = []
    for phase in PHASES:
        phase_rules = [
            r for category in phase.categories for r in rules
            if r.info.category == category
        ]
        if phase.name == ALGEBRAIC_PHASE:
            phase_rules.extend(unclaimed)
        grouped.append((phase, phase_rules))
    return grouped


def _unchanged(before: Expr, after: Expr) -> bool:
    # Identity is the fast path; an equal rebuilt tree is still a no-op
    return after is before or after == before


class Simplifier:
    """Runs the phased rewrite loop for one rule set and configuration.

    A ``Simplifier`` holds no per-call state; every ``run`` creates its own
    context and visited set, so one instance may serve concurrent callers.

    Attributes:
        rules: Rule list the phases are built from
        config: Effort budgets
    """

    def __init__(
        self,
        rules: Optional[Sequence[SimplificationRule]] = None,
        config: Optional[SimplifierConfig] = None,
    ):
        self.rules = list(get_default_rules() if rules is None else rules)
        self.config = config or SimplifierConfig()
        self._phases = group_rules_by_phase(self.rules)

    def run(self, expression: Expr) -> SimplificationResult:
        """Simplify ``expression``.

        Args:
            expression: Tree to simplify

        Returns:
            SimplificationResult with the best tree reached and the step log
        """
        if not isinstance(expression, Expr):
            raise TypeError(
                f"Expected an expression tree, got {type(expression).__name__}"
            )

        logger = get_logger()
        config = self.config
        context = SimplificationContext()

        current = expression
        visited: Set[str] = {to_boolean(current)}
        seen_at_pass_start: Set[str] = set()

        logger.simplification_start(to_boolean(current), len(self.rules))

        for iteration in range(1, config.max_total_iterations + 1):
            signature = to_boolean(current)
            if signature in seen_at_pass_start:
                logger.debug(f"Cycle detected at {signature}, stopping")
                break
            seen_at_pass_start.add(signature)
            context.iterations = iteration

            for phase, phase_rules in self._phases:
                before_phase = context.total_applications
                current = self._run_phase(phase_rules, current, context, visited)
                logger.phase_finished(
                    phase.name, iteration, context.total_applications - before_phase
                )

            if to_boolean(current) == signature:
                logger.debug(f"Converged after {iteration} iteration(s)")
                break
        else:
            context.max_iterations_reached = True
            logger.debug(
                f"Iteration budget of {config.max_total_iterations} exhausted"
            )

        if config.minimize:
            current = self._minimize(current, context)

        verified = self._verify(expression, current) if config.verify_result else None

        logger.simplification_finished(
            to_boolean(current), context.iterations, context.rule_application_counts
        )

        return SimplificationResult(
            original_expression=expression,
            simplified_expression=current,
            simplified_expression_string=to_boolean(current),
            simplified_expression_latex=to_latex(current),
            steps=list(context.steps),
            total_applications=context.total_applications,
            iterations=context.iterations,
            rule_application_counts=dict(context.rule_application_counts),
            max_iterations_reached=context.max_iterations_reached,
            verified=verified,
        )

    def _run_phase(
        self,
        rules: List[SimplificationRule],
        expr: Expr,
        context: SimplificationContext,
        visited: Set[str],
    ) -> Expr:
        for _ in range(self.config.max_phase_internal_loops):
            for rule in rules:
                rewritten = self._try_rule(rule, expr, context, visited)
                if rewritten is not None:
                    expr = rewritten
                    break
            else:
                # No rule changed the tree
                return expr
        return expr

    def _try_rule(
        self,
        rule: SimplificationRule,
        expr: Expr,
        context: SimplificationContext,
        visited: Set[str],
    ) -> Optional[Expr]:
        """Apply ``rule`` once; return the new tree or None when nothing happened."""
        if context.applications_of(rule.name) >= self.config.max_rule_applications_per_rule:
            return None
        if not rule.can_apply(expr):
            return None

        rewritten = rule.apply(expr)
        if _unchanged(expr, rewritten):
            return None

        after = to_boolean(rewritten)
        if after in visited:
            get_logger().debug(f"{rule.name} would revisit {after}, skipped")
            return None
        visited.add(after)

        before = to_boolean(expr)
        context.record(rule.info, before, after)
        get_logger().rule_applied(rule.name, before, after)
        return rewritten

    def _minimize(self, expr: Expr, context: SimplificationContext) -> Expr:
        """Replace ``expr`` by its Quine-McCluskey form when that has fewer literals."""
        logger = get_logger()
        try:
            minimized = minimize(expr)
        except ValueError as exc:
            logger.debug(f"Minimization skipped: {exc}")
            return expr

        if literal_count(minimized) >= literal_count(expr) or _unchanged(expr, minimized):
            return expr

        before, after = to_boolean(expr), to_boolean(minimized)
        context.record(MINIMIZATION_RULE, before, after)
        logger.rule_applied(MINIMIZATION_RULE.name, before, after)
        return minimized

    def _verify(self, original: Expr, simplified: Expr) -> Optional[bool]:
        logger = get_logger()
        try:
            equivalent = are_equivalent(original, simplified)
        except ValueError as exc:
            logger.debug(f"Verification skipped: {exc}")
            return None

        if not equivalent:
            logger.warning(
                f"⚠️  Simplified form {to_boolean(simplified)} is not equivalent "
                f"to {to_boolean(original)}"
            )
        return equivalent


def simplify(
    expression: Expr,
    rules: Optional[Sequence[SimplificationRule]] = None,
    config: Optional[SimplifierConfig] = None,
) -> SimplificationResult:
    """Simplify an expression tree with the given (or default) rules.

    Args:
        expression: Tree to simplify
        rules: Rule list; defaults to ``get_default_rules()``
        config: Budgets; defaults to ``SimplifierConfig()``

    Returns:
        SimplificationResult

    Example:
        >>> simplify(parse("A * (B + !B)")).simplified_expression_string
        'A'
    """
    return Simplifier(rules, config).run(expression)


def _parse_for_simplification(
    text: str, options: Optional[ParserOptions], prefix: str
) -> Expr:
    try:
        return parse_expression(text, options)
    except ParseError as exc:
        raise SimplificationError(f"{prefix}: {exc}") from exc


def simplify_expression(
    text: str,
    rules: Optional[Sequence[SimplificationRule]] = None,
    config: Optional[SimplifierConfig] = None,
    options: Optional[ParserOptions] = None,
) -> Dict:
    """Parse and simplify text, returning canonical strings.

    Args:
        text: Expression in any supported dialect
        rules: Optional rule list
        config: Optional budgets
        options: Optional parser options

    Returns:
        ``{"steps": [{"rule_name", "rule_formula", "before", "after"}, ...],
        "final_expression": str}``

    Raises:
        SimplificationError: ``Error simplifying expression: <cause>`` when
            the text cannot be parsed
    """
    tree = _parse_for_simplification(text, options, "Error simplifying expression")
    result = simplify(tree, rules, config)
    return {
        "steps": [step.to_dict() for step in result.steps],
        "final_expression": result.simplified_expression_string,
    }


def get_latex_results(
    text: str,
    rules: Optional[Sequence[SimplificationRule]] = None,
    config: Optional[SimplifierConfig] = None,
    options: Optional[ParserOptions] = None,
) -> Dict:
    """Parse and simplify text, rendering every step as LaTeX.

    Returns:
        ``{"steps": [{"rule_name", "rule_formula", "before_latex",
        "after_latex"}, ...], "final_latex": str}``

    Raises:
        SimplificationError: ``Error simplifying LaTeX expression: <cause>``
    """
    tree = _parse_for_simplification(
        text, options, "Error simplifying LaTeX expression"
    )
    result = simplify(tree, rules, config)

    strict = ParserOptions(auto_fix=False, silent=True)
    steps = []
    for step in result.steps:
        steps.append(
            {
                "rule_name": step.rule_name,
                "rule_formula": step.rule_formula,
                "before_latex": to_latex(parse_expression(step.expression_before, strict)),
                "after_latex": to_latex(parse_expression(step.expression_after, strict)),
            }
        )
    return {"steps": steps, "final_latex": result.simplified_expression_latex}
