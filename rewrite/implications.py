# rewrite/implications.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Implication elimination

"""Rewrites every implication as a disjunction: ``P -> Q`` becomes ``!P | Q``.

Children are rewritten before their parent, so the left operand handed to
``negate`` is already implication-free and nested implications disappear
bottom-up. The result contains no implication operator.
"""

from __future__ import annotations
from dataclasses import replace

from fol import ast_nodes as ast
from .base import TreeTransformer
from .negation import negate
from utils.logger import get_logger


class ImplicationRemover(TreeTransformer):
    """Replaces implications with equivalent disjunctions."""

    def visit_binary_expression(self, n: ast.BinaryExpression) -> ast.Node:
        left = self._visit(n.left)
        right = self._visit(n.right)
        if n.operator is ast.Operator.IMPLICATION:
            return replace(
                n, operator=ast.Operator.DISJUNCTION, left=negate(left), right=right
            )
        return replace(n, left=left, right=right)


def remove_implications(node: ast.Node) -> ast.Node:
    """Eliminate all implications from a formula.

    Args:
        node: Formula to rewrite (left untouched)

    Returns:
        Equivalent tree using only negation, conjunction and disjunction
    """
    result = ImplicationRemover().transform(node)
    get_logger().rewrite_applied("remove_implications", str(node), str(result))
    return result
