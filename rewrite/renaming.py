# rewrite/renaming.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Capture-avoiding renaming of bound variables

"""Capture-avoiding renaming of bound variables.

Every quantifier whose variable name is already taken, either by a free
variable of the formula or by an earlier binder or occurrence, is given a
fresh single-letter name, and the occurrences it binds are rewritten to
match. Fresh letters come from ``a``..``z`` in order, skipping every name
that appears in the formula, so the result is deterministic.

Example:
    >>> str(rename(parse("A.y f(y) | E.y g(y)")))
    'A.y f(y) | E.a g(a)'
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from string import ascii_lowercase
from typing import Dict, List, Optional, Set

from fol import ast_nodes as ast
from fol.exceptions import FormulaTooComplexError
from .base import TreeTransformer
from .naming import collect_names, free_variables
from utils.logger import get_logger


@dataclass
class Scope:
    """Mutable bookkeeping for a single ``rename`` call.

    Attributes:
        used: Names already claimed by a free variable, binder or occurrence
        quantified: Names bound by the quantifiers enclosing the current node
        renames: Active substitutions from source names to output names
        available: Unused single-letter names, handed out front to back
    """

    used: Set[str] = field(default_factory=set)
    quantified: List[str] = field(default_factory=list)
    renames: Dict[str, str] = field(default_factory=dict)
    available: List[str] = field(default_factory=lambda: list(ascii_lowercase))

    @classmethod
    def for_formula(cls, node: ast.Node) -> Scope:
        """Build the initial scope for renaming ``node``.

        Raises:
            NameConflictError: The formula uses a name with two kinds
        """
        names = collect_names(node)
        return cls(
            used=free_variables(node),
            available=[c for c in ascii_lowercase if c not in names],
        )

    def fresh_name(self) -> str:
        """Take the next unused letter from the pool.

        Raises:
            FormulaTooComplexError: The pool is exhausted
        """
        if not self.available:
            raise FormulaTooComplexError(
                "Formula too complex: no unused single-letter variable names left"
            )
        name = self.available.pop(0)
        self.used.add(name)
        return name

    def substitute(self, name: str) -> str:
        return self.renames.get(name, name)


class Renamer(TreeTransformer):
    """Rewrites binders and bound occurrences using a ``Scope``."""

    def __init__(self, scope: Scope):
        self.scope = scope

    def visit_variable_or_constant(self, n: ast.VariableOrConstant) -> ast.Node:
        self.scope.used.add(n.name)
        name = self.scope.substitute(n.name)
        if name == n.name:
            return n
        return replace(n, name=name)

    def visit_quantified_expression(self, n: ast.QuantifiedExpression) -> ast.Node:
        scope = self.scope
        original = n.variable.name
        if original in scope.used:
            name = scope.fresh_name()
            get_logger().rename_allocated(original, name)
        else:
            name = original
            scope.used.add(original)

        shadowed = scope.renames.get(original)
        scope.renames[original] = name
        scope.quantified.append(name)

        expression = self._visit(n.expression)

        scope.quantified.pop()
        if shadowed is None:
            del scope.renames[original]
        else:
            scope.renames[original] = shadowed

        return replace(n, variable=replace(n.variable, name=name), expression=expression)


def rename(node: ast.Node, scope: Optional[Scope] = None) -> ast.Node:
    """Give clashing bound variables fresh names.

    Args:
        node: Formula to rewrite (left untouched)
        scope: Bookkeeping to use; built with ``Scope.for_formula`` when omitted.
            A caller-supplied scope is updated in place.

    Returns:
        Equivalent tree in which no binder reuses a name already in use

    Raises:
        NameConflictError: The formula uses a name with two kinds
        FormulaTooComplexError: More fresh names are needed than letters remain
    """
    if scope is None:
        scope = Scope.for_formula(node)
    result = Renamer(scope).transform(node)
    get_logger().rewrite_applied("rename", str(node), str(result))
    return result
