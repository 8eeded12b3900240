# tests/conftest.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Quine simplifier tests.

This module provides pytest configuration and fixtures shared by the parser,
simplifier and integration suites. It ensures the project root is importable
and offers small helpers for building trees from text.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import simplifier
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def tree():
    """Parse helper: ``tree("A * B")`` returns the expression tree."""
    from parser import parse

    return parse


@pytest.fixture
def canonical():
    """Round a text expression through the parser into canonical text."""
    from parser import format_to_boolean, parse

    return lambda text: format_to_boolean(parse(text))


@pytest.fixture
def soundness_corpus():
    """Expressions covering every operator and rule family.

    Returns:
        List[str]: Inputs whose simplified form must stay equivalent
    """
    return [
        "A",
        "!A",
        "A * !A",
        "A + !A",
        "A * 1",
        "A + 0",
        "!(A * B)",
        "!(A + B + C)",
        "!!!A",
        "A ^ B",
        "A ^ 1",
        "A @ B",
        "A # B",
        "A <=> B",
        "!(A @ B)",
        "!(A # B)",
        "(A * B) + (A * !B)",
        "(A + B) * (A + !B)",
        "(A * B) + (!A * C) + (B * C)",
        "(A + B) * (!A + C) * (B + C)",
        "A * (B + C)",
        "(A + B) * (C + D)",
        "A + (A * B)",
        "A * (A + B)",
        "A * (B + !B)",
        "(A ^ B) * (A <=> B)",
        "!(A ^ B) + C",
        "(A + B + C) * !(A * B * C)",
        "A * B * C + A * B * !C + A * !B",
        "(A # B) @ (C ^ D)",
    ]
