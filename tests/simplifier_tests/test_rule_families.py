# tests/simplifier_tests/test_rule_families.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Test suite for individual rule families applied in isolation

"""Test suite for the rule library.

Each rule is applied once, on its own, to a tree parsed from text; the
result is compared as canonical text. Every rewrite is also checked for
equivalence by truth table, so a rule can never change the meaning of an
expression.
"""

import pytest
from parser import format_to_boolean, parse
from simplifier.evaluator import are_equivalent
from simplifier.laws import convert_laws_to_rules
from simplifier.rules import (
    get_absorption_rules,
    get_consensus_rules,
    get_constant_rules,
    get_contradiction_rules,
    get_de_morgan_rules,
    get_default_rules,
    get_derived_rules,
    get_distributive_rules,
    get_double_negation_rules,
    get_expansion_rules,
    get_factorization_rules,
    get_idempotence_rules,
    get_redundancy_rules,
    is_consensus_triple,
)
from simplifier.rule import is_constant
from parser.ast_nodes import And, Or, Variable, Not
from utils.logger import get_logger


def _rule(rules, name):
    matches = [rule for rule in rules if rule.name == name]
    assert matches, f"No rule named {name!r}"
    return matches[0]


class TestRuleApplication:
    """Test cases for single applications of named rules."""

    def setup_method(self):
        """Build the full rule library for each test method."""
        self.logger = get_logger()
        self.rules = get_default_rules() + get_factorization_rules()

    RULE_CASES = [
        # Constants
        ("Constant Simplification", "A * 1", "A"),
        ("Constant Simplification", "A * 0", "0"),
        ("Constant Simplification", "A + 1", "1"),
        ("Constant Simplification", "0 + A", "A"),
        ("Constant Simplification", "!1", "0"),
        ("Constant Simplification", "!(A * 0) + B", "1"),
        # Contradiction and tautology, also across a flattened chain
        ("Contradiction", "A * !A", "0"),
        ("Contradiction", "(A * B) * !A", "0"),
        ("Contradiction", "(A + B) * !(A + B)", "0"),
        ("Tautology", "A + !A", "1"),
        ("Tautology", "!B + (A + B)", "1"),
        # Negations
        ("Double Negation", "!!A", "A"),
        ("Double Negation", "!!!A", "!(A)"),
        ("Double Negation", "!!!!(A + B)", "(A + B)"),
        ("De Morgan's Law (AND)", "!(A * B)", "(!(A) + !(B))"),
        ("De Morgan's Law (OR)", "!(A + B)", "(!(A) * !(B))"),
        ("De Morgan's Law (OR)", "!(A + !(B + C))", "(!(A) * !((!(B) * !(C))))"),
        # Idempotence
        ("AND Idempotence", "A * A", "A"),
        ("AND Idempotence", "A * B * A", "(A * B)"),
        ("OR Idempotence", "A + A", "A"),
        ("OR Idempotence", "(A * B) + C + (A * B)", "((A * B) + C)"),
        # Complement redundancy
        ("Complement Redundancy (OR of ANDs)", "(A * B) + (A * !B)", "A"),
        ("Complement Redundancy (OR of ANDs)", "(B * A) + (!B * A)", "A"),
        ("Complement Redundancy (OR of ANDs)", "(A * B * C) + (A * B * !C)", "(A * B)"),
        ("Complement Redundancy (OR of ANDs)", "C + (A * B) + (A * !B)", "(C + A)"),
        ("Complement Redundancy (AND of ORs)", "(A + B) * (A + !B)", "A"),
        # Absorption
        ("OR Absorption", "A + (A * B)", "A"),
        ("OR Absorption", "(B * A) + A", "A"),
        ("OR Absorption", "(A * B) + (A * B * C)", "(A * B)"),
        ("AND Absorption", "A * (A + B)", "A"),
        ("AND Absorption", "(B + A) * A", "A"),
        # Consensus
        ("Consensus Theorem OR", "(A * B) + (!A * C) + (B * C)", "((A * B) + (!(A) * C))"),
        ("Consensus Theorem OR", "(B * C) + (A * B) + (!A * C)", "((A * B) + (!(A) * C))"),
        ("Consensus Theorem OR", "(B * A) + (C * !A) + (C * B)", "((B * A) + (C * !(A)))"),
        # A*B is the consensus of A*!C and B*C over C
        ("Consensus Theorem OR", "(A * B) + (A * !C) + (B * C)", "((A * !(C)) + (B * C))"),
        ("Consensus Theorem AND", "(A + B) * (!A + C) * (B + C)", "((A + B) * (!(A) + C))"),
        # Distribution
        ("Distributive Law Left", "A * (B + C)", "((A * B) + (A * C))"),
        ("Distributive Law Right", "(A + B) * C", "((A * C) + (B * C))"),
        # Factorization (not in the default set)
        ("Factorization Left", "(A * B) + (A * C)", "(A * (B + C))"),
        ("Factorization Right", "(B * A) + (C * A)", "((B + C) * A)"),
        ("Factorization Left-Right", "(A * B) + (C * A)", "(A * (B + C))"),
        ("Factorization Right-Left", "(B * A) + (A * C)", "(A * (B + C))"),
        ("Distributive Law (OR over AND)", "A + (B * C)", "((A + B) * (A + C))"),
        # XOR
        ("XOR Identity", "A ^ 0", "A"),
        ("XOR with True", "A ^ 1", "!(A)"),
        ("XOR with True", "1 ^ A", "!(A)"),
        ("XOR Self-Cancellation", "A ^ A", "0"),
        ("XOR with Complement", "A ^ !A", "1"),
        # NAND
        ("NAND with False", "A @ 0", "1"),
        ("NAND with True", "A @ 1", "!(A)"),
        ("NAND Self-Negation", "A @ A", "!(A)"),
        ("NAND with Complement", "!A @ A", "1"),
        ("Double NAND", "!(A @ B)", "(A * B)"),
        # NOR
        ("NOR with True", "A # 1", "0"),
        ("NOR with False", "A # 0", "!(A)"),
        ("NOR Self-Negation", "A # A", "!(A)"),
        ("NOR with Complement", "A # !A", "0"),
        ("Double NOR", "!(A # B)", "(A + B)"),
        # XNOR
        ("XNOR Identity", "A <=> 1", "A"),
        ("XNOR with False", "A <=> 0", "!(A)"),
        ("XNOR Self-Equivalence", "A <=> A", "1"),
        ("XNOR with Complement", "A <=> !A", "0"),
        # Expansions
        ("XOR Expansion", "A ^ B", "((A * !(B)) + (!(A) * B))"),
        ("NAND Expansion", "A @ B", "!((A * B))"),
        ("NOR Expansion", "A # B", "!((A + B))"),
        ("XNOR Expansion", "A <=> B", "((A * B) + (!(A) * !(B)))"),
    ]

    @pytest.mark.parametrize("rule_name, formula, expected", RULE_CASES)
    def test_rule_rewrites(self, rule_name, formula, expected):
        """Test a rule produces the expected tree and preserves meaning."""
        rule = _rule(self.rules, rule_name)
        before = parse(formula)

        assert rule.can_apply(before), f"{rule_name} should apply to '{formula}'"
        after = rule.apply(before)
        actual = format_to_boolean(after)
        self.logger.debug(f"{rule_name}: {formula} -> {actual}")

        assert actual == expected, (
            f"{rule_name} on '{formula}':\n"
            f"Expected: {expected}\n"
            f"Actual: {actual}"
        )
        assert are_equivalent(before, after), f"{rule_name} changed the meaning of '{formula}'"

    NOT_APPLICABLE_CASES = [
        ("Constant Simplification", "A * B"),
        ("Contradiction", "A * !B"),
        ("Tautology", "A + B"),
        ("Double Negation", "!A"),
        ("De Morgan's Law (AND)", "!(A + B)"),
        ("AND Idempotence", "A * B"),
        ("Complement Redundancy (OR of ANDs)", "(A * B) + (!A * C)"),
        ("Complement Redundancy (OR of ANDs)", "(A * B * C) + (A * !B)"),
        ("OR Absorption", "A + (B * C)"),
        ("OR Absorption", "(A * B) + (A * C)"),
        # B*D is not the consensus of A*B and !A*C
        ("Consensus Theorem OR", "(A * B) + (!A * C) + (B * D)"),
        ("Consensus Theorem OR", "(A * B) + (!A * C)"),
        ("Distributive Law Left", "A + (B * C)"),
        ("XOR Identity", "A ^ B"),
        ("XOR Identity", "A ^ 1"),
        ("XOR with True", "0 ^ A"),
        ("Double NAND", "!(A * B)"),
    ]

    @pytest.mark.parametrize("rule_name, formula", NOT_APPLICABLE_CASES)
    def test_rule_does_not_apply(self, rule_name, formula):
        """Test rules leave non-matching trees as the identical object."""
        rule = _rule(self.rules, rule_name)
        tree = parse(formula)

        assert not rule.can_apply(tree), f"{rule_name} should not apply to '{formula}'"
        assert rule.apply(tree) is tree

    def test_rules_apply_below_the_root(self):
        """Test local rules find matches anywhere in the tree."""
        rule = _rule(self.rules, "Contradiction")
        tree = parse("C + (D * (A * !A))")
        assert format_to_boolean(rule.apply(tree)) == "(C + (D * 0))"

    def test_double_negation_is_one_step(self):
        """Test stacked negations collapse in a single application."""
        rule = _rule(self.rules, "Double Negation")
        tree = parse("!!!!!!!A + !!B")
        assert format_to_boolean(rule.apply(tree)) == "(!(A) + B)"

    def test_de_morgan_pushes_through_nested_groups(self):
        rule = _rule(self.rules, "De Morgan's Law (AND)")
        tree = parse("!(A * !(B * C))")
        assert format_to_boolean(rule.apply(tree)) == "(!(A) + !((!(B) + !(C))))"


class TestRuleLibrary:
    """Test cases for rule set composition."""

    def test_rule_names_are_unique(self):
        rules = get_default_rules() + get_factorization_rules()
        names = [rule.name for rule in rules]
        assert len(names) == len(set(names)), "Duplicate rule names"

    def test_factorization_not_in_defaults(self):
        names = {rule.name for rule in get_default_rules()}
        assert "Factorization Left" not in names
        assert "Distributive Law (OR over AND)" not in names

    def test_native_derived_rules_precede_expansions(self):
        names = [rule.name for rule in get_derived_rules()]
        expansions = {rule.name for rule in get_expansion_rules()}
        first_expansion = min(names.index(name) for name in expansions)
        assert all(
            name in expansions for name in names[first_expansion:]
        ), "Expansion rules must come after all native rules"

    def test_every_rule_has_metadata(self):
        for rule in get_default_rules():
            assert rule.info.description, f"{rule.name} lacks a description"
            assert rule.info.formula, f"{rule.name} lacks a formula"
            assert rule.info.category, f"{rule.name} lacks a category"

    def test_getters_return_fresh_lists(self):
        first = get_constant_rules()
        first.clear()
        assert get_constant_rules(), "Rule getters must not share state"

    @pytest.mark.parametrize(
        "getter",
        [
            get_constant_rules,
            get_contradiction_rules,
            get_redundancy_rules,
            get_double_negation_rules,
            get_de_morgan_rules,
            get_idempotence_rules,
            get_absorption_rules,
            get_consensus_rules,
            get_distributive_rules,
        ],
    )
    def test_family_is_in_defaults(self, getter):
        names = {rule.name for rule in get_default_rules()}
        for rule in getter():
            assert rule.name in names, f"{rule.name} missing from default rules"


class TestConsensusTriple:
    """Test cases for the consensus predicate."""

    A, B, C = Variable("A"), Variable("B"), Variable("C")

    def test_valid_triple(self):
        A, B, C = self.A, self.B, self.C
        assert is_consensus_triple(And(A, B), And(Not(A), C), And(B, C), And)
        assert is_consensus_triple(And(B, A), And(C, Not(A)), And(C, B), And)
        assert is_consensus_triple(Or(A, B), Or(Not(A), C), Or(B, C), Or)

    def test_invalid_triple(self):
        A, B, C = self.A, self.B, self.C
        assert not is_consensus_triple(And(A, B), And(A, Not(C)), And(B, C), And)
        assert not is_consensus_triple(And(A, B), And(Not(A), C), And(A, C), And)
        assert not is_consensus_triple(And(A, B), And(Not(A), C), Or(B, C), And)


ALL_RULES = get_default_rules() + get_factorization_rules() + convert_laws_to_rules()


class TestRuleContract:
    """Test every rule, default or optional, against the shared corpus."""

    @pytest.mark.parametrize("rule", ALL_RULES, ids=lambda rule: rule.name)
    def test_rule_contract_on_corpus(self, rule, soundness_corpus):
        """Test inapplicable rules are identities and applied ones are sound."""
        for formula in soundness_corpus:
            before = parse(formula)

            if not rule.can_apply(before):
                assert rule.apply(before) == before, (
                    f"{rule.name} changed '{formula}' although it does not apply"
                )
                continue

            after = rule.apply(before)
            assert are_equivalent(before, after), (
                f"{rule.name} rewrote '{formula}' to non-equivalent "
                f"'{format_to_boolean(after)}'"
            )


class TestStructuralHelpers:
    """Test cases for the shared predicates in ``simplifier.rule``."""

    @pytest.mark.parametrize(
        "formula, value, expected",
        [
            ("1", True, True),
            ("0", False, True),
            ("1", False, False),
            ("A", True, False),
            ("!0", True, False),
        ],
    )
    def test_is_constant(self, formula, value, expected):
        assert is_constant(parse(formula), value) is expected

    def test_only_shared_flattening_helper_is_exported(self):
        import simplifier.rule as rule_module

        for name in ("collect_and_terms", "collect_or_terms", "expressions_equal"):
            assert not hasattr(rule_module, name), f"{name} should not exist"
