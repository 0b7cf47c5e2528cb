# fol/lexer.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Lexical analyzer for first-order logic formula tokenization using SLY

"""Lexical analyzer for first-order logic formula strings.

This module implements tokenization of formula text, breaking input strings
into tokens for parser consumption. Rules are tried in the order they are
declared, which gives the priority order of the notation:

1. Boolean digits and glyphs (``0``, ``1``, ``⊤``, ``⊥``)
2. Quantifier shorthand ``A.``/``E.`` and alphabetic names; a name is
   classified as a boolean word, predicate, function symbol or
   variable/constant by its spelling and by whether ``(`` follows it
3. Implication written ``->``
4. Single-character operators and punctuation

Supported Tokens:
- Operators: & ∧ | ∨ -> → ! ¬ ~ ( ) ,
- Quantifiers: A. ∀ E. ∃
- Booleans: True False 1 0 ⊤ ⊥ (words are case-insensitive)
- Names: [A-Za-z]+
- Whitespace: ignored during tokenization
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from sly import Lexer

from .exceptions import LexError
from utils.logger import get_logger


class TokenId(Enum):
    """Token identifiers shared by the lexer and the parser's symbol table."""

    CONJUNCTION = "Conjunction"
    DISJUNCTION = "Disjunction"
    IMPLICATION = "Implication"
    NEGATION = "Negation"
    UNIVERSAL = "Universal"
    EXISTENTIAL = "Existential"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    COMMA = "Comma"
    TRUE = "True"
    FALSE = "False"
    PREDICATE = "Predicate"
    FUNCTION_EXPRESSION = "FunctionExpression"
    VARIABLE_OR_CONSTANT = "VariableOrConstant"
    END = "End"


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        id: What the token is
        kind: ``"operator"``, ``"name"`` or ``"boolean"``
        start: Source offset of the first character
        end: Source offset just past the last character
        value: Matched text, for name tokens only
    """

    id: TokenId
    kind: str
    start: int
    end: int
    value: Optional[str] = None


_BOOLEAN_TYPES = {"TRUE", "FALSE"}
_NAME_TYPES = {"PREDICATE", "FUNCTION_EXPRESSION", "VARIABLE_OR_CONSTANT"}


class FOLLexer(Lexer):
    """SLY-based lexer for first-order logic formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "CONJUNCTION",
        "DISJUNCTION",
        "IMPLICATION",
        "NEGATION",
        "UNIVERSAL",
        "EXISTENTIAL",
        "LEFT_PAREN",
        "RIGHT_PAREN",
        "COMMA",
        "TRUE",
        "FALSE",
        "NAME",
        "PREDICATE",
        "FUNCTION_EXPRESSION",
        "VARIABLE_OR_CONSTANT",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n\f\v"

    # Boolean digits and glyphs
    TRUE = r"1|⊤"
    FALSE = r"0|⊥"

    # Quantifier shorthand must win over the name rule for a lone 'A' or 'E'
    UNIVERSAL = r"A\.|∀"
    EXISTENTIAL = r"E\.|∃"

    @_(r"[A-Za-z]+")
    def NAME(self, t):
        """Classify an alphabetic run as a boolean word or a kind of name."""
        lowered = t.value.lower()
        if lowered == "true":
            t.type = "TRUE"
        elif lowered == "false":
            t.type = "FALSE"
        elif t.value[0].isupper():
            t.type = "PREDICATE"
        elif self.text[self.index : self.index + 1] == "(":
            t.type = "FUNCTION_EXPRESSION"
        else:
            t.type = "VARIABLE_OR_CONSTANT"
        return t

    IMPLICATION = r"->|→"
    CONJUNCTION = r"&|∧"
    DISJUNCTION = r"\||∨"
    NEGATION = r"!|¬|~"
    LEFT_PAREN = r"\("
    RIGHT_PAREN = r"\)"
    COMMA = r","

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            LexError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise LexError(illegal_char, error_pos)


def tokenize(source: Optional[str]) -> List[Token]:
    """Tokenize formula text into a list of ``Token`` records.

    Args:
        source: Formula text; ``None`` is treated as empty

    Returns:
        Tokens in source order

    Raises:
        LexError: The text contains a character outside the notation
    """
    if not source:
        return []

    tokens = []
    for t in FOLLexer().tokenize(source):
        end = t.index + len(t.value)
        if t.type in _BOOLEAN_TYPES:
            kind, value = "boolean", None
        elif t.type in _NAME_TYPES:
            kind, value = "name", t.value
        else:
            kind, value = "operator", None
        tokens.append(Token(TokenId[t.type], kind, t.index, end, value))
    return tokens
