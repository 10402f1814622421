# tests/conftest.py
# This file is part of the QML expression toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the QML formatter tests.

This module puts the project root on the import path, checks that the
packages under test import cleanly, and provides the terms and atomic
formulas most tests are built from.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from qml.ast_nodes import IdentityNode, PredicationNode, constant, variable  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import qml
        import qml.utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def x():
    return variable("x")


@pytest.fixture
def y():
    return variable("y")


@pytest.fixture
def a():
    return constant("a")


@pytest.fixture
def b():
    return constant("b")


@pytest.fixture
def px(x):
    """Atomic formula P(x)."""
    return PredicationNode("P", [x])


@pytest.fixture
def qy(y):
    """Atomic formula Q(y)."""
    return PredicationNode("Q", [y])


@pytest.fixture
def a_equals_b(a, b):
    """Identity a = b."""
    return IdentityNode(a, b)
