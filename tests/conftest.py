# tests/conftest.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for fol-rewrite tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures for parser and rewrite tests
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

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import fol
        import rewrite
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the shared logger to the session stream before any test captures output
    utils.get_logger()

    yield


@pytest.fixture
def long_formula():
    """Formula mixing every connective, a quantifier and grouping.

    Returns:
        str: Formula in canonical spelling
    """
    return "E.x f(x) | A.y (!Q -> P(y, z)) & R"


@pytest.fixture
def nested_quantifier_formula():
    """Formula with nested quantifiers and one free variable (z).

    Returns:
        str: Formula in canonical spelling
    """
    return "A.x E.y (f(x) | !P(x, y, z))"
