# fol/grammar.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Top-down operator precedence (Pratt) parser for first-order logic formulas

"""First-order logic grammar implemented as a Pratt parser.

Each token id is registered once, at import time, in a symbol table holding
its left binding power together with its prefix (``nud``) and infix (``led``)
handlers. The parser walks the token list produced by :mod:`fol.lexer` and
builds the AST defined in :mod:`fol.ast_nodes`.

Binding Powers:
- Implication ('->'): 40
- Conjunction ('&') and Disjunction ('|'): 50, equal precedence
- Negation ('!'): 70, prefix
- Quantifiers and parentheses: prefix forms with no binding power

The right operand of a binary operator is parsed at one less than the
operator's own binding power, so chains of '&' and '|' group to the right:
``P & Q | R`` is ``P & (Q | R)``.

A quantifier scopes over a single primary expression only: ``E.x f(x) | g(x)``
is ``(E.x f(x)) | g(x)``. Wider scopes are written with parentheses.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .ast_nodes import (
    BinaryExpression,
    Empty,
    ExpressionStatement,
    FunctionExpression,
    Literal,
    Node,
    Operator,
    Predicate,
    QuantifiedExpression,
    Quantifier,
    UnaryExpression,
    VariableOrConstant,
)
from .exceptions import (
    EmptyFunctionArgumentsError,
    InvalidArgumentError,
    MissingVariableError,
    ParseError,
    UnexpectedTokenError,
)
from .lexer import Token, TokenId, tokenize
from utils.logger import get_logger

NEGATION_BINDING_POWER = 70


@dataclass(frozen=True)
class Symbol:
    """Parser behaviour attached to a token id.

    Attributes:
        lbp: Left binding power; zero for tokens that never continue an expression
        nud: Handler for the token at the start of an expression
        led: Handler for the token following a complete left operand
    """

    lbp: int = 0
    nud: Optional[Callable[["_FOLParser", Token], Node]] = None
    led: Optional[Callable[["_FOLParser", Token, Node], Node]] = None


def _nud_variable(p: "_FOLParser", token: Token) -> Node:
    return VariableOrConstant(token.value, start=token.start, end=token.end)


def _nud_true(p: "_FOLParser", token: Token) -> Node:
    return Literal(True, start=token.start, end=token.end)


def _nud_false(p: "_FOLParser", token: Token) -> Node:
    return Literal(False, start=token.start, end=token.end)


def _nud_predicate(p: "_FOLParser", token: Token) -> Node:
    arguments = []
    end = token.end
    if p.token.id is TokenId.LEFT_PAREN:
        p.advance()
        if p.token.id is not TokenId.RIGHT_PAREN:
            arguments = p.argument_list("Predicate")
        end = p.token.end
        p.advance(TokenId.RIGHT_PAREN)
    return Predicate(token.value, tuple(arguments), start=token.start, end=end)


def _nud_function(p: "_FOLParser", token: Token) -> Node:
    p.advance(TokenId.LEFT_PAREN)
    if p.token.id is TokenId.RIGHT_PAREN:
        raise EmptyFunctionArgumentsError(position=token.start)
    arguments = p.argument_list("FunctionExpression")
    end = p.token.end
    p.advance(TokenId.RIGHT_PAREN)
    return FunctionExpression(token.value, tuple(arguments), start=token.start, end=end)


def _nud_negation(p: "_FOLParser", token: Token) -> Node:
    argument = p.expression(NEGATION_BINDING_POWER)
    return UnaryExpression(
        Operator.NEGATION, argument, start=token.start, end=argument.end
    )


def _nud_group(p: "_FOLParser", token: Token) -> Node:
    expression = p.expression()
    end = p.token.end
    p.advance(TokenId.RIGHT_PAREN)
    return ExpressionStatement(expression, start=token.start, end=end)


def _quantifier_nud(quantifier: Quantifier):
    def nud(p: "_FOLParser", token: Token) -> Node:
        if p.token.id is not TokenId.VARIABLE_OR_CONSTANT:
            raise MissingVariableError(p.token.id.value, position=p.token.start)
        # Variable and body are single primary expressions, so trailing
        # binary operators stay outside the quantifier's scope.
        variable = p.single_expression()
        expression = p.single_expression()
        return QuantifiedExpression(
            quantifier, variable, expression, start=token.start, end=expression.end
        )

    return nud


def _infix_led(operator: Operator, binding_power: int):
    def led(p: "_FOLParser", token: Token, left: Node) -> Node:
        right = p.expression(binding_power - 1)
        return BinaryExpression(operator, left, right, start=left.start, end=right.end)

    return led


SYMBOL_TABLE: Dict[TokenId, Symbol] = {
    TokenId.END: Symbol(),
    TokenId.RIGHT_PAREN: Symbol(),
    TokenId.COMMA: Symbol(),
    TokenId.VARIABLE_OR_CONSTANT: Symbol(nud=_nud_variable),
    TokenId.TRUE: Symbol(nud=_nud_true),
    TokenId.FALSE: Symbol(nud=_nud_false),
    TokenId.PREDICATE: Symbol(nud=_nud_predicate),
    TokenId.FUNCTION_EXPRESSION: Symbol(nud=_nud_function),
    TokenId.NEGATION: Symbol(nud=_nud_negation),
    TokenId.LEFT_PAREN: Symbol(nud=_nud_group),
    TokenId.UNIVERSAL: Symbol(nud=_quantifier_nud(Quantifier.UNIVERSAL)),
    TokenId.EXISTENTIAL: Symbol(nud=_quantifier_nud(Quantifier.EXISTENTIAL)),
    TokenId.DISJUNCTION: Symbol(50, led=_infix_led(Operator.DISJUNCTION, 50)),
    TokenId.CONJUNCTION: Symbol(50, led=_infix_led(Operator.CONJUNCTION, 50)),
    TokenId.IMPLICATION: Symbol(40, led=_infix_led(Operator.IMPLICATION, 40)),
}

_TERM_TYPES = (VariableOrConstant, FunctionExpression)


class _FOLParser:
    """Cursor over one token list; create a fresh instance per formula.

    Attributes:
        token: The current (not yet consumed) token
    """

    def __init__(self, tokens: List[Token], length: int):
        self._tokens = tokens
        self._index = 0
        self._end = Token(TokenId.END, "operator", length, length)
        self.token = self._end
        self.advance()

    def advance(self, expected: Optional[TokenId] = None) -> Token:
        """Move to the next token, optionally checking the current one first.

        Args:
            expected: Token id the current token must have

        Returns:
            The new current token

        Raises:
            UnexpectedTokenError: The current token is not ``expected``
        """
        if expected is not None and self.token.id is not expected:
            raise UnexpectedTokenError(
                f"Expected {expected.value} (got {self.token.id.value}) "
                f"at position {self.token.start}",
                token_id=self.token.id.value,
                position=self.token.start,
            )
        if self._index >= len(self._tokens):
            self.token = self._end
        else:
            self.token = self._tokens[self._index]
            self._index += 1
        return self.token

    def _nud(self, token: Token) -> Node:
        nud = SYMBOL_TABLE[token.id].nud
        if nud is None:
            if token.id is TokenId.END:
                message = "Unexpected end of formula"
            else:
                message = f"Unexpected {token.id.value} at position {token.start}"
            raise UnexpectedTokenError(
                message, token_id=token.id.value, position=token.start
            )
        return nud(self, token)

    def expression(self, rbp: int = 0) -> Node:
        """Parse an expression whose operators bind tighter than ``rbp``."""
        token = self.token
        self.advance()
        left = self._nud(token)
        while rbp < SYMBOL_TABLE[self.token.id].lbp:
            token = self.token
            self.advance()
            left = SYMBOL_TABLE[token.id].led(self, token, left)
        return left

    def single_expression(self) -> Node:
        """Parse exactly one primary expression, without infix continuation."""
        token = self.token
        self.advance()
        return self._nud(token)

    def argument_list(self, parent: str) -> List[Node]:
        """Parse comma-separated terms up to (not including) the closing paren."""
        arguments = []
        while True:
            argument = self.expression()
            if not isinstance(argument, _TERM_TYPES):
                raise InvalidArgumentError(
                    parent, type(argument).__name__, position=argument.start
                )
            arguments.append(argument)
            if self.token.id is not TokenId.COMMA:
                return arguments
            self.advance()

    def parse(self) -> Node:
        if self.token.id is TokenId.END:
            return Empty(start=0, end=0)

        result = self.expression()
        if self.token.id is not TokenId.END:
            raise UnexpectedTokenError(
                f"Unexpected {self.token.id.value} at position {self.token.start}",
                token_id=self.token.id.value,
                position=self.token.start,
            )
        return result


def parse_formula(text: str) -> Node:
    """Tokenize and parse formula text.

    Args:
        text: Formula string to parse

    Returns:
        Root AST node; ``Empty`` for empty input

    Raises:
        ParseError: If the formula is malformed
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {text}")

    tokens = tokenize(text)
    result = _FOLParser(tokens, len(text or "")).parse()

    logger.debug(f"Successfully parsed formula into {type(result).__name__}")
    return result


__all__ = ["parse_formula", "ParseError", "SYMBOL_TABLE", "Symbol"]
