# tests/rewrite_tests/test_implications.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Test suite for implication elimination

"""Test suite for ``remove_implications``."""

import pytest
from fol import parse
from rewrite import remove_implications, stringify


def removed(formula: str) -> str:
    return stringify(remove_implications(parse(formula)))


class TestRemoveImplications:
    """Test cases for implication elimination."""

    REMOVAL_CASES = [
        ("P -> Q", "!P | Q"),
        ("(P -> Q)", "(!P | Q)"),
        ("(P -> Q) -> (R -> S)", "(P & !Q) | (!R | S)"),
        ("P -> Q -> R", "!P | !Q | R"),
        ("A.x f(x) -> E.y g(y)", "E.x !f(x) | E.y g(y)"),
        ("A.x (f(x) -> g(y))", "A.x (!f(x) | g(y))"),
        ("!(P -> Q)", "!(!P | Q)"),
        ("P & Q -> R", "!P | !Q | R"),
        ("!P -> Q", "P | Q"),
        ("P & Q | R", "P & Q | R"),
    ]

    @pytest.mark.parametrize("formula, expected", REMOVAL_CASES)
    def test_remove_implications(self, formula, expected):
        """Test implication elimination.

        Args:
            formula: Formula containing implications
            expected: Canonical text of the result
        """
        assert removed(formula) == expected

    @pytest.mark.parametrize("formula, expected", REMOVAL_CASES)
    def test_no_implication_remains(self, formula, expected):
        assert "->" not in removed(formula)

    def test_removal_does_not_alter_input(self):
        s = "A.x (f(x) -> g(x)) -> P(f(x), y) | (P -> Q)"
        obj = parse(s)
        remove_implications(obj)
        assert stringify(obj) == s

    def test_removal_of_long_formula(self):
        s = "A.x (f(x) -> g(x)) -> P(f(x), y) | (P -> Q)"
        assert removed(s) == "E.x !(!f(x) | g(x)) | P(f(x), y) | (!P | Q)"
