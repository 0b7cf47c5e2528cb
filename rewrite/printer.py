# rewrite/printer.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Canonical textual form of a formula

"""Printing formulas back to text.

Each AST node renders itself through ``__str__``: names as written, argument
lists as ``name(a, b)``, binary operators as ``&``, ``|`` and ``->`` with
single spaces, negation as ``!``, quantifiers as ``A.x``/``E.x`` and
parenthesized groups exactly where the tree records them. For text already in
this canonical spelling ``stringify(parse(text)) == text``.
"""

from fol import ast_nodes as ast


def stringify(node: ast.Node) -> str:
    """Return the canonical text of a formula."""
    return str(node)
