# fol/exceptions.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Custom exceptions for formula parsing and transformation

"""Domain-specific exceptions for first-order logic formula processing.

Two families are defined here. ``ParseError`` and its subclasses signal
malformed source text and always carry the offending token id and source
offset. ``RewriteError`` and its subclasses signal that a well-formed tree
violates a precondition of a rewrite operation (conflicting names, or too
many names for the renaming pool).
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Attributes:
        token_id: Id of the offending token (or the offending character for
            lexical errors), if known
        position: 0-based source offset of the offending token, if known
    """

    def __init__(
        self,
        message: str,
        token_id: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.token_id = token_id
        self.position = position


class LexError(ParseError):
    """Raised by the tokenizer for a character outside the grammar."""

    def __init__(self, char: str, position: int):
        super().__init__(
            f"Unrecognized symbol: '{char}' (at {position + 1})",
            token_id=char,
            position=position,
        )
        self.char = char


class UnexpectedTokenError(ParseError):
    """A specific token was required but another one (or end of input) was found."""

    pass


class InvalidArgumentError(ParseError):
    """A predicate or function argument is not a variable, constant or function."""

    def __init__(self, parent: str, got: str, position: Optional[int] = None):
        if parent == "Predicate":
            message = (
                "Predicate arguments should be variables, constants, "
                f"or functions (got {got})"
            )
        else:
            message = (
                "Function arguments should be variables, constants, "
                f"or other functions (got {got})"
            )
        super().__init__(message, token_id=got, position=position)
        self.parent = parent


class EmptyFunctionArgumentsError(ParseError):
    """A function symbol was applied to an empty argument list."""

    def __init__(self, position: Optional[int] = None):
        super().__init__(
            "Functions should have at least one argument",
            token_id="FunctionExpression",
            position=position,
        )


class MissingVariableError(ParseError):
    """A quantifier was not immediately followed by a variable."""

    def __init__(self, got: str, position: Optional[int] = None):
        super().__init__(
            f"Expected a variable for quantification (got {got})",
            token_id=got,
            position=position,
        )


class RewriteError(RuntimeError):
    """Base class for failures of the tree-rewriting operations."""

    pass


class NameConflictError(RewriteError):
    """A name is used both as a function symbol and as a variable or constant."""

    def __init__(self, name: str):
        super().__init__(
            f"Found conflict between variable and function name ('{name}')."
        )
        self.name = name


class FormulaTooComplexError(RewriteError):
    """The pool of fresh single-letter variable names ran out while renaming."""

    pass
