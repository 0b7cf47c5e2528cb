# fol/ast_nodes.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Abstract Syntax Tree node classes for first-order logic formula representation

"""AST node classes for representing parsed first-order logic formulas.

This module defines immutable and hashable node classes used to construct tree
representations of first-order logic formulas. The set of node classes is
closed: every rewrite operation is a visitor implementing one ``visit_*``
method per class below.

Node Types:
    Empty: The result of parsing an empty formula
    VariableOrConstant: Lowercase identifiers used as terms
    Literal: Boolean constants
    Predicate: Uppercase relation symbols with zero or more term arguments
    FunctionExpression: Lowercase function symbols with one or more arguments
    UnaryExpression: Negation
    BinaryExpression: Conjunction, disjunction and implication
    ExpressionStatement: An explicitly parenthesized sub-formula
    QuantifiedExpression: Universal or existential quantification

Every node carries the half-open source range ``start``/``end`` it was parsed
from. The range is diagnostic only and does not take part in equality, so two
trees with the same shape compare equal regardless of where they came from.

``str(node)`` yields the canonical textual form of the formula.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, Tuple, Union


class Operator(Enum):
    """Logical connectives, with their canonical spelling."""

    CONJUNCTION = "Conjunction"
    DISJUNCTION = "Disjunction"
    IMPLICATION = "Implication"
    NEGATION = "Negation"

    @property
    def symbol(self) -> str:
        return _OPERATOR_SYMBOLS[self]


class Quantifier(Enum):
    """Quantifiers, with their canonical ASCII spelling."""

    UNIVERSAL = "Universal"
    EXISTENTIAL = "Existential"

    @property
    def symbol(self) -> str:
        return "A." if self is Quantifier.UNIVERSAL else "E."

    def dual(self) -> Quantifier:
        """Return the other quantifier (used when negating)."""
        if self is Quantifier.UNIVERSAL:
            return Quantifier.EXISTENTIAL
        return Quantifier.UNIVERSAL


_OPERATOR_SYMBOLS = {
    Operator.CONJUNCTION: "&",
    Operator.DISJUNCTION: "|",
    Operator.IMPLICATION: "->",
    Operator.NEGATION: "!",
}


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_empty(self, n: Empty): ...

    def visit_variable_or_constant(self, n: VariableOrConstant): ...

    def visit_literal(self, n: Literal): ...

    def visit_predicate(self, n: Predicate): ...

    def visit_function_expression(self, n: FunctionExpression): ...

    def visit_unary_expression(self, n: UnaryExpression): ...

    def visit_binary_expression(self, n: BinaryExpression): ...

    def visit_expression_statement(self, n: ExpressionStatement): ...

    def visit_quantified_expression(self, n: QuantifiedExpression): ...


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes in first-order logic formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.

    Attributes:
        start: Source offset of the first character of the node
        end: Source offset just past the last character of the node
    """

    start: Optional[int] = field(default=None, compare=False, repr=False, kw_only=True)
    end: Optional[int] = field(default=None, compare=False, repr=False, kw_only=True)

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Empty(Node):
    """Formula parsed from empty (or whitespace-only) input."""

    def accept(self, v: Visitor):
        return v.visit_empty(self)

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class VariableOrConstant(Node):
    """Lowercase identifier used as a term.

    Attributes:
        name: The identifier string
        free: Whether the occurrence is free; ``None`` until marked
    """

    name: str
    free: Optional[bool] = field(default=None, kw_only=True)

    def accept(self, v: Visitor):
        return v.visit_variable_or_constant(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Literal(Node):
    """Boolean constant ``True`` or ``False``."""

    value: bool

    def accept(self, v: Visitor):
        return v.visit_literal(self)

    def __str__(self) -> str:
        return "True" if self.value else "False"


@dataclass(frozen=True, slots=True)
class Predicate(Node):
    """Relation symbol applied to zero or more terms.

    Attributes:
        name: Uppercase-initial predicate name
        arguments: Argument terms, empty for a propositional symbol
    """

    name: str
    arguments: Tuple[Term, ...] = ()

    def accept(self, v: Visitor):
        return v.visit_predicate(self)

    def __str__(self) -> str:
        if not self.arguments:
            return self.name
        return f"{self.name}({', '.join(str(a) for a in self.arguments)})"


@dataclass(frozen=True, slots=True)
class FunctionExpression(Node):
    """Function symbol applied to one or more terms.

    Attributes:
        name: Lowercase-initial function name
        arguments: Argument terms, never empty
    """

    name: str
    arguments: Tuple[Term, ...]

    def accept(self, v: Visitor):
        return v.visit_function_expression(self)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(a) for a in self.arguments)})"


@dataclass(frozen=True, slots=True)
class UnaryExpression(Node):
    """Logical negation of a formula.

    Attributes:
        operator: Always ``Operator.NEGATION``
        argument: The negated formula
    """

    operator: Operator
    argument: Node

    def accept(self, v: Visitor):
        return v.visit_unary_expression(self)

    def __str__(self) -> str:
        return f"{self.operator.symbol}{self.argument}"


@dataclass(frozen=True, slots=True)
class BinaryExpression(Node):
    """Conjunction, disjunction or implication of two formulas."""

    operator: Operator
    left: Node
    right: Node

    def accept(self, v: Visitor):
        return v.visit_binary_expression(self)

    def __str__(self) -> str:
        return f"{self.left} {self.operator.symbol} {self.right}"


@dataclass(frozen=True, slots=True)
class ExpressionStatement(Node):
    """Sub-formula that was explicitly wrapped in parentheses.

    Kept as its own node so that printing reproduces the source grouping.
    """

    expression: Node

    def accept(self, v: Visitor):
        return v.visit_expression_statement(self)

    def __str__(self) -> str:
        return f"({self.expression})"


@dataclass(frozen=True, slots=True)
class QuantifiedExpression(Node):
    """Quantifier binding a single variable over a formula.

    Attributes:
        quantifier: Universal or existential
        variable: The bound variable
        expression: The quantified formula (the quantifier's scope)
    """

    quantifier: Quantifier
    variable: VariableOrConstant
    expression: Node

    def accept(self, v: Visitor):
        return v.visit_quantified_expression(self)

    def __str__(self) -> str:
        return f"{self.quantifier.symbol}{self.variable} {self.expression}"


Term = Union[VariableOrConstant, FunctionExpression]


def negation(argument: Node, **span) -> UnaryExpression:
    """Build a negation node around ``argument``."""
    return UnaryExpression(Operator.NEGATION, argument, **span)


def is_negation(node: Node) -> bool:
    return isinstance(node, UnaryExpression) and node.operator is Operator.NEGATION


def unwrap(node: Node) -> Node:
    """Strip one level of explicit parenthesization, if present."""
    if isinstance(node, ExpressionStatement):
        return node.expression
    return node
