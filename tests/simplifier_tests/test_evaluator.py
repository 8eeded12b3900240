# tests/simplifier_tests/test_evaluator.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Test suite for evaluation, truth tables and equivalence checks

import pytest
from parser import parse
from simplifier.evaluator import (
    MAX_TRUTH_TABLE_VARIABLES,
    are_equivalent,
    evaluate,
    extract_variables,
    truth_table,
)


class TestEvaluate:
    """Test cases for evaluation under an assignment."""

    OPERATOR_TRUTH_TABLES = [
        # formula, outputs for (A, B) = 00, 01, 10, 11
        ("A * B", [False, False, False, True]),
        ("A + B", [False, True, True, True]),
        ("A ^ B", [False, True, True, False]),
        ("A @ B", [True, True, True, False]),
        ("A # B", [True, False, False, False]),
        ("A <=> B", [True, False, False, True]),
        ("!A", [True, True, False, False]),
        ("1", [True, True, True, True]),
        ("0", [False, False, False, False]),
    ]

    @pytest.mark.parametrize("formula, expected", OPERATOR_TRUTH_TABLES)
    def test_operator_semantics(self, formula, expected):
        tree = parse(formula)
        rows = [
            {"A": a, "B": b} for a in (False, True) for b in (False, True)
        ]
        actual = [evaluate(tree, row) for row in rows]

        assert actual == expected, f"Wrong truth table for '{formula}': {actual}"

    def test_unassigned_variables_are_false(self):
        assert evaluate(parse("A + B"), {}) is False
        assert evaluate(parse("!C"), {"A": True}) is True


class TestTruthTables:
    """Test cases for variable extraction and truth tables."""

    def test_extract_variables_sorted_and_unique(self):
        assert extract_variables(parse("C * A + !C * B")) == ["A", "B", "C"]
        assert extract_variables(parse("1 + 0")) == []

    def test_extract_variables_over_several_trees(self):
        assert extract_variables(parse("A"), parse("B * C")) == ["A", "B", "C"]

    def test_truth_table_rows(self):
        rows = truth_table(parse("A * !B"))

        assert len(rows) == 4
        assert rows[0] == ({"A": False, "B": False}, False)
        assert [value for _, value in rows] == [False, False, True, False]

    def test_truth_table_with_explicit_columns(self):
        rows = truth_table(parse("A"), ["A", "B"])
        assert len(rows) == 4

    def test_truth_table_variable_limit(self):
        columns = [chr(ord("A") + i) for i in range(MAX_TRUTH_TABLE_VARIABLES + 1)]
        with pytest.raises(ValueError):
            truth_table(parse("A"), columns)


class TestEquivalence:
    """Test cases for ``are_equivalent``."""

    EQUIVALENT_PAIRS = [
        ("!(A * B)", "!A + !B"),
        ("!(A + B)", "!A * !B"),
        ("A ^ B", "(A * !B) + (!A * B)"),
        ("A <=> B", "!(A ^ B)"),
        ("(A * B) + (!A * C) + (B * C)", "(A * B) + (!A * C)"),
        ("A + (A * B)", "A"),
        ("A * !A", "0"),
    ]

    @pytest.mark.parametrize("first, second", EQUIVALENT_PAIRS)
    def test_equivalent(self, first, second):
        assert are_equivalent(parse(first), parse(second)), (
            f"'{first}' and '{second}' should be equivalent"
        )

    @pytest.mark.parametrize(
        "first, second",
        [("A", "B"), ("A * B", "A + B"), ("A ^ B", "A <=> B"), ("A", "1")],
    )
    def test_not_equivalent(self, first, second):
        assert not are_equivalent(parse(first), parse(second))

    def test_variable_limit(self):
        wide = parse(" * ".join("ABCDEFGHIJKLM"))
        with pytest.raises(ValueError):
            are_equivalent(wide, wide)
