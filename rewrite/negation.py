# rewrite/negation.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Single-step negation and negation collapsing

"""Negation rewrites.

``negate`` pushes one logical negation into a formula:

- atoms (variables, constants, booleans, predicates, function terms) are
  wrapped in a negation
- ``!x`` becomes ``x``
- ``(e)`` becomes ``(negate(e))``
- De Morgan for ``&``/``|``, and ``P -> Q`` becomes ``P & negate(Q)``
- ``A.x e`` becomes ``E.x negate(e)`` and vice versa; a parenthesized body is
  wrapped as ``!(e)`` rather than entered

Only the outermost layer is negated: ``negate(negate(x))`` of an atom strips
the negation the first call added and gives back ``x``, while ``!!!x``
becomes ``!!x``.

``collapse_negations`` walks the whole tree and reduces every run of stacked
negations by parity, pushing a surviving negation into parenthesized groups
and through quantifiers. The result is a fixed point of the operation.
"""

from __future__ import annotations
from dataclasses import replace

from fol import ast_nodes as ast
from .base import TreeTransformer
from utils.logger import get_logger

_ATOMS = (
    ast.VariableOrConstant,
    ast.Literal,
    ast.Predicate,
    ast.FunctionExpression,
)

_DE_MORGAN = {
    ast.Operator.CONJUNCTION: ast.Operator.DISJUNCTION,
    ast.Operator.DISJUNCTION: ast.Operator.CONJUNCTION,
}


class Negator(ast.Visitor):
    """Applies one step of negation to the visited node."""

    def visit_empty(self, n: ast.Empty) -> ast.Node:
        return n

    def _wrap(self, n: ast.Node) -> ast.Node:
        return ast.negation(n, start=n.start, end=n.end)

    visit_variable_or_constant = _wrap
    visit_literal = _wrap
    visit_predicate = _wrap
    visit_function_expression = _wrap

    def visit_unary_expression(self, n: ast.UnaryExpression) -> ast.Node:
        return n.argument

    def visit_expression_statement(self, n: ast.ExpressionStatement) -> ast.Node:
        return replace(n, expression=n.expression.accept(self))

    def visit_binary_expression(self, n: ast.BinaryExpression) -> ast.Node:
        if n.operator is ast.Operator.IMPLICATION:
            # !(P -> Q) == P & !Q
            return replace(
                n, operator=ast.Operator.CONJUNCTION, right=n.right.accept(self)
            )
        return replace(
            n,
            operator=_DE_MORGAN[n.operator],
            left=n.left.accept(self),
            right=n.right.accept(self),
        )

    def visit_quantified_expression(self, n: ast.QuantifiedExpression) -> ast.Node:
        if isinstance(n.expression, ast.ExpressionStatement):
            body = self._wrap(n.expression)
        else:
            body = n.expression.accept(self)
        return replace(n, quantifier=n.quantifier.dual(), expression=body)


_NEGATOR = Negator()


def negate(node: ast.Node) -> ast.Node:
    """Negate the outermost logical layer of a formula.

    Args:
        node: Formula to negate (left untouched)

    Returns:
        New tree equivalent to the negation of ``node``
    """
    result = node.accept(_NEGATOR)
    get_logger().rewrite_applied("negate", str(node), str(result))
    return result


class NegationCollapser(TreeTransformer):
    """Removes redundant negations throughout a tree.

    A run of ``n`` stacked negations over a core formula is replaced by the
    collapsed core when ``n`` is even, and by one negation of it when ``n``
    is odd. An odd run over an atom stays a single ``!``; over anything else
    the negation is pushed inside with ``negate`` and the result collapsed
    again.
    """

    def visit_unary_expression(self, n: ast.UnaryExpression) -> ast.Node:
        count = 0
        core: ast.Node = n
        while ast.is_negation(core):
            count += 1
            core = core.argument

        if count % 2 == 0:
            return self._visit(core)
        if isinstance(core, _ATOMS):
            return ast.negation(self._visit(core), start=n.start, end=n.end)
        return self._visit(core.accept(_NEGATOR))


def collapse_negations(node: ast.Node) -> ast.Node:
    """Collapse stacked negations everywhere in a formula.

    Args:
        node: Formula to simplify (left untouched)

    Returns:
        New tree without double negations; applying the operation again
        returns an equal tree
    """
    result = NegationCollapser().transform(node)
    get_logger().rewrite_applied("collapse_negations", str(node), str(result))
    return result
