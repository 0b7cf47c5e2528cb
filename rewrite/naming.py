# rewrite/naming.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Name collection and variable scoping queries

"""Names and scopes of a formula.

A formula's identifiers come in two kinds: variables/constants and function
symbols. ``collect_names`` records the kind each identifier was first seen
with and rejects an identifier used with both. Predicate names live in their
own namespace and are not collected.

Scoping follows the quantifier nesting: an occurrence of ``x`` is bound when
some enclosing ``QuantifiedExpression`` binds ``x`` and free otherwise.
``mark_free`` annotates every variable leaf accordingly and ``contains_free``
asks whether a given name occurs free at all.
"""

from __future__ import annotations
from dataclasses import replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set

from fol import ast_nodes as ast
from fol.exceptions import NameConflictError
from .base import TreeTransformer
from utils.logger import get_logger


class NameKind(Enum):
    """Syntactic role of a collected identifier."""

    VARIABLE_OR_CONSTANT = "VariableOrConstant"
    FUNCTION_EXPRESSION = "FunctionExpression"


class NameCollector(ast.Visitor):
    """Accumulates ``name -> NameKind`` in first-seen order.

    Attributes:
        names: Collected names, updated as the tree is visited
    """

    def __init__(self):
        self.names: Dict[str, NameKind] = {}

    def _add(self, name: str, kind: NameKind):
        seen = self.names.setdefault(name, kind)
        if seen is not kind:
            raise NameConflictError(name)

    def visit_empty(self, n: ast.Empty):
        pass

    def visit_literal(self, n: ast.Literal):
        pass

    def visit_variable_or_constant(self, n: ast.VariableOrConstant):
        self._add(n.name, NameKind.VARIABLE_OR_CONSTANT)

    def visit_predicate(self, n: ast.Predicate):
        for argument in n.arguments:
            argument.accept(self)

    def visit_function_expression(self, n: ast.FunctionExpression):
        self._add(n.name, NameKind.FUNCTION_EXPRESSION)
        for argument in n.arguments:
            argument.accept(self)

    def visit_unary_expression(self, n: ast.UnaryExpression):
        n.argument.accept(self)

    def visit_binary_expression(self, n: ast.BinaryExpression):
        n.left.accept(self)
        n.right.accept(self)

    def visit_expression_statement(self, n: ast.ExpressionStatement):
        n.expression.accept(self)

    def visit_quantified_expression(self, n: ast.QuantifiedExpression):
        n.variable.accept(self)
        n.expression.accept(self)


def collect_names(node: ast.Node) -> Dict[str, NameKind]:
    """Collect every variable, constant and function name in a formula.

    Args:
        node: Formula to inspect

    Returns:
        Mapping from each name to the kind it was first seen as

    Raises:
        NameConflictError: A name is used both as a function symbol and as
            a variable or constant
    """
    collector = NameCollector()
    node.accept(collector)
    return collector.names


class FreeMarker(TreeTransformer):
    """Sets ``free`` on every variable leaf according to the enclosing binders."""

    def __init__(self, quantified: Optional[Iterable[str]] = None):
        self._quantified: List[str] = list(quantified or [])

    def visit_variable_or_constant(self, n: ast.VariableOrConstant) -> ast.Node:
        return replace(n, free=n.name not in self._quantified)

    def visit_quantified_expression(self, n: ast.QuantifiedExpression) -> ast.Node:
        self._quantified.append(n.variable.name)
        expression = self._visit(n.expression)
        self._quantified.pop()
        return replace(n, variable=replace(n.variable, free=False), expression=expression)


def mark_free(node: ast.Node, quantified: Optional[Iterable[str]] = None) -> ast.Node:
    """Return a copy of the formula with every variable's ``free`` flag set.

    Args:
        node: Formula to annotate (left untouched)
        quantified: Names to treat as already bound at the root

    Returns:
        Annotated tree; binders themselves are marked not free
    """
    return FreeMarker(quantified).transform(node)


class FreeOccurrenceFinder(ast.Visitor):
    """Answers whether one name occurs free in the visited tree."""

    def __init__(self, name: str, quantified: Optional[Iterable[str]] = None):
        self.name = name
        self._quantified: List[str] = list(quantified or [])

    def visit_empty(self, n: ast.Empty) -> bool:
        return False

    def visit_literal(self, n: ast.Literal) -> bool:
        return False

    def visit_variable_or_constant(self, n: ast.VariableOrConstant) -> bool:
        return n.name == self.name and n.name not in self._quantified

    def visit_predicate(self, n: ast.Predicate) -> bool:
        return any(argument.accept(self) for argument in n.arguments)

    def visit_function_expression(self, n: ast.FunctionExpression) -> bool:
        return any(argument.accept(self) for argument in n.arguments)

    def visit_unary_expression(self, n: ast.UnaryExpression) -> bool:
        return n.argument.accept(self)

    def visit_binary_expression(self, n: ast.BinaryExpression) -> bool:
        return n.left.accept(self) or n.right.accept(self)

    def visit_expression_statement(self, n: ast.ExpressionStatement) -> bool:
        return n.expression.accept(self)

    def visit_quantified_expression(self, n: ast.QuantifiedExpression) -> bool:
        self._quantified.append(n.variable.name)
        result = n.expression.accept(self)
        self._quantified.pop()
        return result


def contains_free(
    node: ast.Node, name: str, quantified: Optional[Iterable[str]] = None
) -> bool:
    """Check whether ``name`` occurs free anywhere in a formula.

    Args:
        node: Formula to inspect
        name: Variable name to look for
        quantified: Names to treat as already bound at the root

    Returns:
        True if some occurrence of ``name`` is not bound by an enclosing quantifier
    """
    return node.accept(FreeOccurrenceFinder(name, quantified))


def free_variables(node: ast.Node) -> Set[str]:
    """Return the names that occur free in a formula."""
    names = collect_names(node)
    free = {
        name
        for name, kind in names.items()
        if kind is NameKind.VARIABLE_OR_CONSTANT and contains_free(node, name)
    }
    get_logger().debug(f"Free variables of {str(node)!r}: {sorted(free)}")
    return free
