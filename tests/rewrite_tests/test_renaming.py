# tests/rewrite_tests/test_renaming.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Test suite for capture-avoiding renaming

import string

import pytest
from fol import parse
from fol.exceptions import FormulaTooComplexError, NameConflictError
from rewrite import Scope, rename, stringify


def renamed(formula: str) -> str:
    return stringify(rename(parse(formula)))


class TestRename:
    """Test cases for bound variable renaming."""

    RENAME_CASES = [
        # Nothing clashes
        ("A.x P(x)", "A.x P(x)"),
        ("A.x P(x) | E.y Q(y)", "A.x P(x) | E.y Q(y)"),
        ("P(x, y) & f(z)", "P(x, y) & f(z)"),
        # Sibling quantifiers reusing a name
        ("A.y f(y) | E.y g(y)", "A.y f(y) | E.a g(a)"),
        ("A.x P(x) | A.x Q(x)", "A.x P(x) | A.a Q(a)"),
        # Nested quantifiers reusing a name
        ("A.x A.x P(x)", "A.x A.a P(a)"),
        ("A.x (A.x P(x) | Q(x))", "A.x (A.a P(a) | Q(x))"),
        # A free variable forces its binder to move away
        ("P(y) & A.y Q(y)", "P(y) & A.a Q(a)"),
        ("Q(x) | E.x f(x, y)", "Q(x) | E.a f(a, y)"),
        # Fresh names skip every name in the formula
        ("A.y P(y) | E.y P(a, y)", "A.y P(y) | E.b P(a, b)"),
        ("A.a f(a) | A.a g(a, b, c)", "A.a f(a) | A.d g(d, b, c)"),
    ]

    @pytest.mark.parametrize("formula, expected", RENAME_CASES)
    def test_rename(self, formula, expected):
        """Test renaming of clashing binders.

        Args:
            formula: Formula to rename
            expected: Canonical text of the result
        """
        assert renamed(formula) == expected

    def test_consecutive_fresh_names(self):
        assert renamed("A.x P(x) | A.x Q(x) | A.x R(x)") == "A.x P(x) | A.a Q(a) | A.b R(b)"

    def test_rename_is_stable(self):
        once = rename(parse("A.y f(y) | E.y g(y)"))
        assert rename(once) == once

    def test_rename_does_not_alter_input(self):
        s = "A.y f(y) | E.y g(y)"
        obj = parse(s)
        rename(obj)
        assert stringify(obj) == s

    def test_rename_with_supplied_scope(self):
        """Test that a caller-supplied scope is consulted and updated."""
        scope = Scope(used={"x"})
        result = rename(parse("A.x P(x)"), scope)

        assert stringify(result) == "A.a P(a)"
        assert {"a", "x"} <= scope.used
        assert scope.available[0] == "b"
        assert scope.renames == {}
        assert scope.quantified == []

    def test_name_conflict_is_reported(self):
        with pytest.raises(NameConflictError):
            rename(parse("A.f f(f(x))"))

    def test_formula_too_complex(self):
        """Test running out of single-letter names."""
        letters = string.ascii_lowercase[:25]
        formula = f"P({', '.join(letters)}) & A.a Q(a) & A.b Q(b)"

        with pytest.raises(FormulaTooComplexError, match="too complex"):
            rename(parse(formula))


class TestScope:
    """Test cases for the renaming bookkeeping."""

    def test_for_formula(self):
        scope = Scope.for_formula(parse("A.x f(x, y) | g(b)"))
        assert scope.used == {"y", "b"}
        assert scope.available[:4] == ["a", "c", "d", "e"]
        assert not {"f", "g", "x", "y", "b"} & set(scope.available)

    def test_fresh_names_in_order(self):
        scope = Scope(available=["p", "q"])
        assert scope.fresh_name() == "p"
        assert scope.fresh_name() == "q"
        assert scope.used == {"p", "q"}

        with pytest.raises(FormulaTooComplexError):
            scope.fresh_name()

    def test_substitute(self):
        scope = Scope(renames={"x": "a"})
        assert scope.substitute("x") == "a"
        assert scope.substitute("y") == "y"
