# tests/rewrite_tests/test_naming.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Test suite for name collection and free variable queries

"""Test suite for ``collect_names``, ``mark_free`` and ``contains_free``."""

import pytest
from fol import parse
from fol.exceptions import NameConflictError, RewriteError
from rewrite import NameKind, collect_names, contains_free, free_variables, mark_free, stringify

VAR = NameKind.VARIABLE_OR_CONSTANT
FUN = NameKind.FUNCTION_EXPRESSION


class TestCollectNames:
    """Test cases for name collection."""

    NAME_CASES = [
        ("f(x, g(y, z))", {"f": FUN, "x": VAR, "g": FUN, "y": VAR, "z": VAR}),
        ("P(x, g(y, z))", {"x": VAR, "g": FUN, "y": VAR, "z": VAR}),
        ("f(x) | g(y)", {"f": FUN, "x": VAR, "g": FUN, "y": VAR}),
        ("A.x f(x)", {"x": VAR, "f": FUN}),
        ("(P(x))", {"x": VAR}),
        ("!f(x)", {"f": FUN, "x": VAR}),
        ("P & Q -> True", {}),
        ("", {}),
    ]

    @pytest.mark.parametrize("formula, expected", NAME_CASES)
    def test_collect_names(self, formula, expected):
        """Test that names are collected with their kinds.

        Args:
            formula: Formula to inspect
            expected: Expected name mapping
        """
        assert collect_names(parse(formula)) == expected

    def test_names_are_in_first_seen_order(self):
        names = collect_names(parse("A.z h(z) & E.w k(w, z)"))
        assert list(names) == ["z", "h", "w", "k"]

    def test_name_conflict(self):
        with pytest.raises(NameConflictError, match="'f'") as exc_info:
            collect_names(parse("f(x) | g(f)"))

        assert exc_info.value.name == "f"
        assert isinstance(exc_info.value, RewriteError)

    def test_name_conflict_with_bound_variable(self):
        with pytest.raises(NameConflictError, match="'g'"):
            collect_names(parse("A.g f(g(x))"))

    def test_predicate_names_do_not_conflict(self):
        assert collect_names(parse("P(x) & p")) == {"x": VAR, "p": VAR}


class TestMarkFree:
    """Test cases for free variable marking."""

    def test_mark_free_in_quantified_expression(self):
        marked = mark_free(parse("A.x f(x, y, g(y))"))
        assert marked.variable.free is False
        assert marked.expression.arguments[0].free is False
        assert marked.expression.arguments[1].free is True
        assert marked.expression.arguments[2].arguments[0].free is True

    def test_mark_free_in_nested_quantifiers(self, nested_quantifier_formula):
        marked = mark_free(parse(nested_quantifier_formula))
        expr = marked.expression.expression.expression  # f(x) | !P(x, y, z)
        assert expr.left.arguments[0].free is False
        assert expr.right.argument.arguments[0].free is False
        assert expr.right.argument.arguments[1].free is False
        assert expr.right.argument.arguments[2].free is True

    def test_scope_closes_after_quantifier(self):
        """Test that a name bound in one subtree stays free in its sibling."""
        marked = mark_free(parse("A.x P(x) | Q(x)"))
        assert marked.left.expression.arguments[0].free is False
        assert marked.right.arguments[0].free is True

    def test_initial_quantified_names(self):
        marked = mark_free(parse("P(x, y)"), quantified=["x"])
        assert marked.arguments[0].free is False
        assert marked.arguments[1].free is True

    def test_mark_free_does_not_alter_input(self):
        original = parse("A.x f(x, y)")
        mark_free(original)
        assert original.variable.free is None
        assert original.expression.arguments[1].free is None

    def test_marked_tree_prints_unchanged(self):
        s = "A.x E.y (f(x) | !P(x, y, z))"
        assert stringify(mark_free(parse(s))) == s


class TestContainsFree:
    """Test cases for the free occurrence query."""

    CONTAINS_FREE_CASES = [
        ("A.y f(x, y)", "x", True),
        ("A.x f(x, y)", "x", False),
        ("A.x f(y, z)", "x", False),
        ("A.y P(x, y) | E.x Q(x, y)", "y", True),
        ("A.y P(x, y) | E.x Q(x, y)", "x", True),
        ("P(x) | A.x Q(x)", "x", True),
        ("!A.y P(x, y)", "x", True),
        ("!A.y (P(x, y) | f(x))", "x", True),
        ("A.x (P(x) | E.x Q(x))", "x", False),
        ("P", "x", False),
    ]

    @pytest.mark.parametrize("formula, name, expected", CONTAINS_FREE_CASES)
    def test_contains_free(self, formula, name, expected):
        """Test free occurrence detection.

        Args:
            formula: Formula to inspect
            name: Variable name to look for
            expected: Whether it occurs free
        """
        assert contains_free(parse(formula), name) is expected

    def test_initial_quantified_names(self):
        assert contains_free(parse("P(x)"), "x", quantified=["x"]) is False

    def test_free_variables(self):
        assert free_variables(parse("A.x P(x, y) | E.z Q(z, x, w)")) == {"y", "x", "w"}
