# rewrite/__init__.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Equivalence-preserving rewrites over first-order logic syntax trees

"""Rewrite engine for first-order logic formulas.

Every operation takes a tree produced by :func:`fol.parse` and returns either
a new tree or a derived value; input trees are never modified. Transforms are
independent and explicitly invoked; none of them chains into another
normal form on its own.

Transforms:
    negate: Negate the outermost layer (De Morgan, quantifier duality)
    collapse_negations: Reduce stacked negations by parity, everywhere
    remove_implications: Rewrite ``P -> Q`` as ``!P | Q``, everywhere
    mark_free: Annotate variable leaves with their free/bound status
    rename: Capture-avoiding renaming of clashing bound variables
    move_quantifiers_left: Pull quantifiers out of ``&``/``|`` towards prenex form

Queries:
    stringify: Canonical text of a formula
    collect_names: Variables, constants and function symbols with their kinds
    contains_free: Whether a name occurs free

Example:
    >>> from fol import parse
    >>> from rewrite import remove_implications, stringify
    >>> stringify(remove_implications(parse("(P -> Q) -> (R -> S)")))
    '(P & !Q) | (!R | S)'
"""

from .formula import Formula
from .implications import remove_implications
from .naming import NameKind, collect_names, contains_free, free_variables, mark_free
from .negation import collapse_negations, negate
from .prenex import move_quantifiers_left
from .printer import stringify
from .renaming import Scope, rename
from fol.exceptions import FormulaTooComplexError, NameConflictError, RewriteError

__all__ = [
    "Formula",
    "stringify",
    "negate",
    "collapse_negations",
    "remove_implications",
    "collect_names",
    "NameKind",
    "mark_free",
    "contains_free",
    "free_variables",
    "rename",
    "Scope",
    "move_quantifiers_left",
    "RewriteError",
    "NameConflictError",
    "FormulaTooComplexError",
]
