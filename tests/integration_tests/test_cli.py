# tests/integration_tests/test_cli.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Test suite for the command-line interface

"""Integration tests for ``run_simplifier.py``.

The CLI is driven through ``main(argv)``; results printed to stdout are
captured with ``capsys`` and exit codes are checked against the documented
mapping.
"""

import json

import pytest
from run_simplifier import create_argument_parser, main, read_expression_file


class TestCommandLine:
    """Test cases for argument handling, output and exit codes."""

    def test_simplify_single_expression(self, capsys):
        exit_code = main(["(A * B) + (A * !B)"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "A"

    def test_latex_output(self, capsys):
        exit_code = main(["!(A * B)", "--latex"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == r"(\lnot A \lor \lnot B)"

    def test_steps_output(self, capsys):
        exit_code = main(["A * !A", "--steps"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Contradiction: (A * !(A)) → 0" in out
        assert out.rstrip().endswith("= 0")

    def test_json_output(self, capsys):
        exit_code = main(["!!A", "--json", "--verify"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["result"] == "A"
        assert data["verified"] is True
        assert data["steps"][0]["rule_name"] == "Double Negation"

    def test_latex_input_format(self, capsys):
        exit_code = main([r"A \land \overline{A}", "--format", "latex"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_expression_file(self, tmp_path, capsys):
        path = tmp_path / "expressions.txt"
        path.write_text("% sample\nA * 1\n\n!!B\n", encoding="utf-8")

        exit_code = main(["-f", str(path)])

        assert exit_code == 0
        assert capsys.readouterr().out.split() == ["A", "B"]

    def test_parse_error_exit_code(self, capsys):
        assert main(["A +"]) == 2

    def test_strict_mode_rejects_juxtaposition(self):
        assert main(["AB", "--strict"]) == 2
        assert main(["AB"]) == 0

    def test_missing_file_exit_code(self, tmp_path):
        assert main(["-f", str(tmp_path / "missing.txt")]) == 3

    def test_empty_file_exit_code(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n% only a comment\n", encoding="utf-8")
        assert main(["-f", str(path)]) == 3

    def test_expression_and_file_are_exclusive(self, tmp_path):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["A", "-f", str(tmp_path / "x.txt")])

    def test_invalid_iteration_budget(self):
        with pytest.raises(SystemExit):
            main(["A", "--max-iterations", "0"])

    def test_read_expression_file(self, tmp_path):
        path = tmp_path / "input.txt"
        path.write_text("  A + B  \n% skip\nC\n", encoding="utf-8")

        assert read_expression_file(path) == ["A + B", "C"]

    def test_canonical_sum_of_products(self, capsys):
        exit_code = main(["A ^ B", "--canonical", "sop"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "((!(A) * B) + (A * !(B)))"

    def test_canonical_product_of_sums_latex(self, capsys):
        exit_code = main(["A ^ B", "--canonical", "pos", "--latex"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == (
            r"((A \lor B) \land (\lnot A \lor \lnot B))"
        )

    def test_minimize_flag(self, capsys):
        exit_code = main(["A * B + A * !B + !A * B", "--minimize", "--verify"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "(A + B)"

    def test_digit_variable_is_parse_error(self):
        assert main(["A1 + B"]) == 2
