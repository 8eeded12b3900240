# tests/simplifier_tests/test_laws.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Test suite for the regex law table and its conversion into rules

"""Test suite for ``simplifier.laws``.

Law rules rewrite the canonical text of a tree and parse the result back,
so their output is compared as canonical text as well.
"""

import pytest
from parser import format_to_boolean, parse
from simplifier import simplify, get_default_rules
from simplifier.evaluator import are_equivalent
from simplifier.laws import LAWS, convert_laws_to_rules, get_laws
from simplifier.rule import LAW


class TestLawRules:
    """Test cases for single law applications."""

    def setup_method(self):
        """Convert the law table for each test method."""
        self.rules = {rule.name: rule for rule in convert_laws_to_rules()}

    LAW_CASES = [
        ("Identity Law (AND)", "A * 1", "A"),
        ("Identity Law (AND)", "1 * B", "B"),
        ("Identity Law (OR)", "A + 0", "A"),
        ("Domination Law (AND)", "A * 0", "0"),
        ("Domination Law (OR)", "1 + A", "1"),
        ("Idempotent Law (AND)", "A * A", "A"),
        ("Idempotent Law (OR)", "B + B", "B"),
        ("Double Negation Law", "!!A", "A"),
        ("Complement Law (AND)", "A * !A", "0"),
        ("Complement Law (OR)", "!A + A", "1"),
        ("Absorption Law (OR)", "A + (A * B)", "A"),
        ("Absorption Law (AND)", "A * (A + B)", "A"),
        ("NOT Constant", "!1", "0"),
        ("NOT Constant", "!0", "1"),
        # Only the first match is rewritten, anywhere in the text
        ("Identity Law (AND)", "(A * 1) + (B * 1)", "(A + (B * 1))"),
    ]

    @pytest.mark.parametrize("law_name, formula, expected", LAW_CASES)
    def test_law_rewrites(self, law_name, formula, expected):
        rule = self.rules[law_name]
        before = parse(formula)

        assert rule.can_apply(before), f"{law_name} should apply to '{formula}'"
        after = rule.apply(before)

        assert format_to_boolean(after) == expected
        assert are_equivalent(before, after)

    @pytest.mark.parametrize(
        "law_name, formula",
        [
            ("Identity Law (AND)", "A * B"),
            ("Idempotent Law (AND)", "A * B"),
            ("Complement Law (AND)", "A * !B"),
            # Patterns only cover single letters
            ("Idempotent Law (OR)", "(A * B) + (A * B)"),
        ],
    )
    def test_law_does_not_apply(self, law_name, formula):
        rule = self.rules[law_name]
        tree = parse(formula)

        assert not rule.can_apply(tree)
        assert rule.apply(tree) is tree


class TestLawTable:
    """Test cases for the table itself and its use with the engine."""

    def test_table_contents(self):
        laws = get_laws()
        assert len(laws) == len(LAWS) == 12
        assert {law.category for law in laws} == {
            "identity",
            "domination",
            "idempotent",
            "doubleNegation",
            "complement",
            "absorption",
            "constantReduction",
        }

    def test_converted_rules_carry_law_category(self):
        rules = convert_laws_to_rules()
        assert all(rule.info.category == LAW for rule in rules)
        assert [rule.name for rule in rules] == [law.name for law in LAWS]

    def test_convert_subset(self):
        rules = convert_laws_to_rules(get_laws()[:2])
        assert [rule.name for rule in rules] == ["Identity Law (AND)", "Identity Law (OR)"]

    def test_law_table_not_in_default_rules(self):
        law_names = {law.name for law in LAWS}
        assert not law_names & {rule.name for rule in get_default_rules()}

    def test_simplify_with_laws_only(self):
        result = simplify(parse("(A * 1) + (B * !B)"), convert_laws_to_rules())

        assert result.simplified_expression_string == "A"
        assert [step.rule_name for step in result.steps] == [
            "Identity Law (AND)",
            "Complement Law (AND)",
            "Identity Law (OR)",
        ]
