# rewrite/base.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Structural tree transformer shared by the rewrite operations

"""Base visitor for tree-to-tree rewrites.

``TreeTransformer`` rebuilds every node from its transformed children and
leaves leaves untouched. Rewrites subclass it and override only the node
types they change. Nodes are frozen, so unchanged subtrees may be shared
between the input and output trees without any risk of mutation.
"""

from __future__ import annotations
from dataclasses import replace

from fol import ast_nodes as ast


class TreeTransformer(ast.Visitor):
    """Identity rewrite that rebuilds the tree bottom-up."""

    def transform(self, root: ast.Node) -> ast.Node:
        return self._visit(root)

    def _visit(self, node: ast.Node) -> ast.Node:
        return node.accept(self)

    def visit_empty(self, n: ast.Empty) -> ast.Node:
        return n

    def visit_variable_or_constant(self, n: ast.VariableOrConstant) -> ast.Node:
        return n

    def visit_literal(self, n: ast.Literal) -> ast.Node:
        return n

    def visit_predicate(self, n: ast.Predicate) -> ast.Node:
        return replace(n, arguments=tuple(self._visit(a) for a in n.arguments))

    def visit_function_expression(self, n: ast.FunctionExpression) -> ast.Node:
        return replace(n, arguments=tuple(self._visit(a) for a in n.arguments))

    def visit_unary_expression(self, n: ast.UnaryExpression) -> ast.Node:
        return replace(n, argument=self._visit(n.argument))

    def visit_binary_expression(self, n: ast.BinaryExpression) -> ast.Node:
        return replace(n, left=self._visit(n.left), right=self._visit(n.right))

    def visit_expression_statement(self, n: ast.ExpressionStatement) -> ast.Node:
        return replace(n, expression=self._visit(n.expression))

    def visit_quantified_expression(self, n: ast.QuantifiedExpression) -> ast.Node:
        # The bound variable is a binder, not an occurrence, so it is not visited.
        return replace(n, expression=self._visit(n.expression))
