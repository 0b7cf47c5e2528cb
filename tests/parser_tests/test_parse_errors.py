# tests/parser_tests/test_parse_errors.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Test suite for parser syntax validation and error handling

"""Test suite for parser syntax validation and error handling.

Verifies that malformed formulas are rejected with the specific error class
for the problem, and that every error carries the offending token and its
source position.
"""

import pytest
from fol import parse
from fol.exceptions import (
    EmptyFunctionArgumentsError,
    InvalidArgumentError,
    LexError,
    MissingVariableError,
    ParseError,
    UnexpectedTokenError,
)
from utils.logger import get_logger


class TestFOLParserErrors:
    """Test cases for parser error detection."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_function_without_arguments(self):
        with pytest.raises(EmptyFunctionArgumentsError, match="at least one argument"):
            parse("f()")

    def test_predicate_as_function_argument(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse("f(x, P)")

        error = exc_info.value
        assert "Function arguments should be variables, constants, or other functions" in str(error)
        assert "(got Predicate)" in str(error)
        assert error.parent == "FunctionExpression"
        assert error.position == 5

    def test_predicate_as_predicate_argument(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse("P(x, Q)")

        error = exc_info.value
        assert "Predicate arguments should be variables, constants, or functions" in str(error)
        assert "(got Predicate)" in str(error)
        assert error.parent == "Predicate"

    INVALID_ARGUMENT_CASES = [
        "P(!x)",
        "P(x | y)",
        "f(x & y)",
        "P(True)",
        "f((x))",
        "P(A.x f(x))",
    ]

    @pytest.mark.parametrize("formula", INVALID_ARGUMENT_CASES)
    def test_non_term_arguments_rejected(self, formula):
        """Test that only variables, constants and functions are arguments.

        Args:
            formula: Formula with a non-term argument
        """
        with pytest.raises(InvalidArgumentError):
            parse(formula)

    def test_quantifier_without_variable(self):
        with pytest.raises(MissingVariableError) as exc_info:
            parse("E. f(x)")

        assert "Expected a variable for quantification (got FunctionExpression)" in str(
            exc_info.value
        )
        assert exc_info.value.position == 3

    def test_quantifier_followed_by_predicate(self):
        with pytest.raises(MissingVariableError, match="got Predicate"):
            parse("A.P Q")

    def test_quantifier_at_end_of_input(self):
        with pytest.raises(MissingVariableError, match="got End"):
            parse("A.")

    # Invalid syntax cases: (formula, description)
    UNEXPECTED_TOKEN_CASES = [
        ("(P", "Unclosed parenthesis"),
        ("(P & Q))", "Unbalanced right parenthesis"),
        ("P | (Q & R", "Unclosed parenthesis in nested expression"),
        ("P | Q) & R", "Unopened parenthesis"),
        ("()", "Empty expression within parentheses"),
        ("P | | Q", "Double operator"),
        ("P &", "Trailing operator"),
        ("-> P", "Leading operator"),
        ("P Q", "Missing operator between predicates"),
        ("P ! Q", "Infix negation"),
        ("f(x", "Unclosed argument list"),
        ("P(x,)", "Trailing comma"),
        ("A.x", "Quantifier without body"),
        (",", "Bare comma"),
    ]

    @pytest.mark.parametrize("formula, description", UNEXPECTED_TOKEN_CASES)
    def test_unexpected_tokens(self, formula, description):
        """Test that structural errors raise UnexpectedTokenError.

        Args:
            formula: Malformed formula
            description: What is wrong with it
        """
        self.logger.debug(f"Testing invalid syntax ({description}): {formula}")

        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse(formula)

        assert exc_info.value.token_id is not None
        assert exc_info.value.position is not None

    def test_missing_right_paren_reports_expected_token(self):
        with pytest.raises(UnexpectedTokenError, match="Expected RightParen") as exc_info:
            parse("(P & Q")

        assert exc_info.value.token_id == "End"
        assert exc_info.value.position == 6

    def test_trailing_token_position(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("P Q")

        assert exc_info.value.token_id == "Predicate"
        assert exc_info.value.position == 2

    def test_lexical_errors_propagate(self):
        """Test that tokenizer failures surface from parse unchanged."""
        with pytest.raises(LexError, match="Unrecognized symbol: '\\*'"):
            parse("P * Q")

        with pytest.raises(LexError):
            parse("P - Q")

    def test_all_errors_are_parse_errors(self):
        """Test that every syntax error can be caught as ParseError."""
        for formula in ("f()", "f(x, P)", "E. f(x)", "(P", "P $ Q"):
            with pytest.raises(ParseError):
                parse(formula)
