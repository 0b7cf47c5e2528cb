# rewrite/formula.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Convenience wrapper binding a parsed formula to the rewrite operations

"""Object wrapper around a parsed formula.

``Formula`` holds an immutable tree and exposes each rewrite as a method that
returns a new ``Formula``, so operations can be chained:

    >>> Formula("!(P -> Q)").collapse_negations().stringify()
    '(P & !Q)'
"""

from __future__ import annotations
from typing import Dict, Union

from fol import parse
from fol import ast_nodes as ast
from .implications import remove_implications
from .naming import NameKind, collect_names, contains_free, mark_free
from .negation import collapse_negations, negate
from .prenex import move_quantifiers_left
from .printer import stringify
from .renaming import rename


class Formula:
    """A first-order formula parsed once and rewritten on demand.

    Attributes:
        node: Root of the formula's AST
    """

    def __init__(self, source: Union[str, ast.Node, Formula]):
        if isinstance(source, str):
            self.node = parse(source)
        elif isinstance(source, Formula):
            self.node = source.node
        elif isinstance(source, ast.Node):
            self.node = source
        else:
            raise TypeError(f"Invalid formula input format: {source!r}")

    def stringify(self) -> str:
        return stringify(self.node)

    def negate(self) -> Formula:
        return Formula(negate(self.node))

    def collapse_negations(self) -> Formula:
        return Formula(collapse_negations(self.node))

    def remove_implications(self) -> Formula:
        return Formula(remove_implications(self.node))

    def move_quantifiers_left(self) -> Formula:
        return Formula(move_quantifiers_left(self.node))

    def rename(self) -> Formula:
        return Formula(rename(self.node))

    def mark_free(self) -> Formula:
        return Formula(mark_free(self.node))

    def names(self) -> Dict[str, NameKind]:
        return collect_names(self.node)

    def contains_free(self, name: str) -> bool:
        return contains_free(self.node, name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self.node == other.node

    def __hash__(self) -> int:
        return hash(self.node)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Formula({self.stringify()!r})"
