# fol/__init__.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Formula tokenization and parsing components for first-order logic

"""First-order logic formula parsing.

This package converts textual formulas into immutable abstract syntax trees.
Parsing is a two-stage pipeline: a SLY lexer turns the text into tokens, and
a top-down operator precedence (Pratt) parser builds the tree from them.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees
    tokenize: Converts formula strings into token lists

Notation:
    - Connectives: & ∧, | ∨, -> →, ! ¬ ~
    - Quantifiers: A. ∀, E. ∃ (each binds one variable)
    - Booleans: True 1 ⊤, False 0 ⊥
    - Uppercase names are predicates, lowercase names followed by '(' are
      function symbols, other lowercase names are variables or constants

Example:
    >>> from fol import parse
    >>> ast = parse("A.x (P(x) -> Q(f(x)))")
    >>> str(ast)
    'A.x (P(x) -> Q(f(x)))'
"""

from .exceptions import (
    EmptyFunctionArgumentsError,
    InvalidArgumentError,
    LexError,
    MissingVariableError,
    ParseError,
    UnexpectedTokenError,
)
from .grammar import parse_formula
from .lexer import Token, TokenId, tokenize
from utils.logger import get_logger


def parse(source: str):
    """Parse a formula string into Abstract Syntax Tree representation.

    Uses a fresh parser cursor for each invocation, so concurrent calls on
    different formulas do not interfere.

    Args:
        source: Formula string to parse

    Returns:
        Root AST node representing the parsed formula structure, or ``Empty``
        when the input holds no tokens

    Raises:
        ParseError: Formula syntax is malformed or contains unsupported constructs

    Example:
        >>> ast = parse("P & !Q")
        >>> # Returns BinaryExpression with a Predicate and a UnaryExpression
    """
    logger = get_logger()

    try:
        return parse_formula(source)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "tokenize",
    "Token",
    "TokenId",
    "ParseError",
    "LexError",
    "UnexpectedTokenError",
    "InvalidArgumentError",
    "EmptyFunctionArgumentsError",
    "MissingVariableError",
]

__version__ = "1.0.0"
__description__ = "First-order logic formula tokenization and parsing"
