# rewrite/prenex.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Moving quantifiers to the left, towards prenex form

"""Moves quantifiers out of conjunctions and disjunctions.

Provided ``x`` is not free in ``P``:

- ``P | A.x Q(x)`` == ``A.x (P | Q(x))``
- ``P | E.x Q(x)`` == ``E.x (P | Q(x))``
- ``P & A.x Q(x)`` == ``A.x (P & Q(x))``
- ``P & E.x Q(x)`` == ``E.x (P & Q(x))``

Children are rewritten first. A conjunction or disjunction whose right
operand starts with a quantifier then has the quantifier prefixes of both
operands pulled in front of it, left prefix first, and the remaining binary
expression is parenthesized under the innermost quantifier. An operand keeps
its own parentheses if it was parenthesized in the input, or if dropping them
would make the printed result reparse differently: a binary left body, or an
implication on the right, so for a parsed formula
``parse(stringify(result)) == result`` holds.

The move is skipped when it could change which quantifier binds a variable:
when a variable of the right prefix occurs free in the left operand, when a
variable of the left prefix occurs free in the right operand, or when both
prefixes bind the same name. Implications are never rearranged.
"""

from __future__ import annotations
from typing import List, Tuple

from fol import ast_nodes as ast
from .base import TreeTransformer
from .naming import contains_free
from utils.logger import get_logger


def _strip_quantifiers(
    node: ast.Node,
) -> Tuple[List[ast.QuantifiedExpression], ast.Node]:
    """Split a leading chain of quantifiers from its body."""
    prefix = []
    while isinstance(node, ast.QuantifiedExpression):
        prefix.append(node)
        node = node.expression
    return prefix, node


def _parenthesized(body: ast.Node, inner: ast.Node) -> ast.Node:
    if isinstance(body, ast.ExpressionStatement):
        return body
    return ast.ExpressionStatement(inner)


def _unwrap_left(body: ast.Node) -> ast.Node:
    # Binary operators print without precedence and group to the right, so a
    # binary left operand must stay parenthesized to reparse the same way.
    inner = ast.unwrap(body)
    if isinstance(inner, ast.BinaryExpression):
        return _parenthesized(body, inner)
    return inner


def _unwrap_right(body: ast.Node) -> ast.Node:
    inner = ast.unwrap(body)
    if (
        isinstance(inner, ast.BinaryExpression)
        and inner.operator is ast.Operator.IMPLICATION
    ):
        return _parenthesized(body, inner)
    return inner


def _can_move(
    left: ast.Node,
    right: ast.Node,
    left_prefix: List[ast.QuantifiedExpression],
    right_prefix: List[ast.QuantifiedExpression],
) -> bool:
    right_names = {q.variable.name for q in right_prefix}
    left_names = {q.variable.name for q in left_prefix}
    if right_names & left_names:
        return False
    if any(contains_free(left, name) for name in right_names):
        return False
    return not any(contains_free(right, name) for name in left_names)


class QuantifierMover(TreeTransformer):
    """Pulls quantifiers out of binary expressions, bottom-up."""

    def visit_binary_expression(self, n: ast.BinaryExpression) -> ast.Node:
        keep_left_wrap = isinstance(n.left, ast.ExpressionStatement)
        keep_right_wrap = isinstance(n.right, ast.ExpressionStatement)
        left = self._visit(n.left)
        right = self._visit(n.right)

        if n.operator is ast.Operator.IMPLICATION or not isinstance(
            right, ast.QuantifiedExpression
        ):
            return ast.BinaryExpression(
                n.operator, left, right, start=n.start, end=n.end
            )

        left_prefix, left_body = _strip_quantifiers(left)
        right_prefix, right_body = _strip_quantifiers(right)
        if not _can_move(left, right, left_prefix, right_prefix):
            return ast.BinaryExpression(
                n.operator, left, right, start=n.start, end=n.end
            )

        if not keep_left_wrap:
            left_body = _unwrap_left(left_body)
        if not keep_right_wrap:
            right_body = _unwrap_right(right_body)

        prefix = left_prefix + right_prefix
        get_logger().quantifiers_moved(
            " ".join(f"{q.quantifier.symbol}{q.variable}" for q in prefix),
            n.operator.symbol,
        )

        result: ast.Node = ast.ExpressionStatement(
            ast.BinaryExpression(n.operator, left_body, right_body)
        )
        for quantified in reversed(prefix):
            result = ast.QuantifiedExpression(
                quantified.quantifier, quantified.variable, result
            )
        return result

    def visit_expression_statement(self, n: ast.ExpressionStatement) -> ast.Node:
        expression = self._visit(n.expression)
        # A quantifier chain already scopes over its parenthesized body.
        if isinstance(expression, ast.QuantifiedExpression):
            return expression
        return ast.ExpressionStatement(expression, start=n.start, end=n.end)


def move_quantifiers_left(node: ast.Node) -> ast.Node:
    """Move quantifiers left through conjunctions and disjunctions.

    Args:
        node: Formula to rewrite (left untouched)

    Returns:
        Equivalent tree with quantifiers moved towards the front
    """
    result = QuantifierMover().transform(node)
    get_logger().rewrite_applied("move_quantifiers_left", str(node), str(result))
    return result
