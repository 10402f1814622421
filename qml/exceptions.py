# qml/exceptions.py
# This file is part of the QML expression toolkit
#
# Custom exceptions for formula rendering

"""Domain-specific exceptions for QML formula formatting.

This module defines the exceptions raised while rendering a formula tree into
its canonical notation. Construction of a tree never fails, so every error
here surfaces at format time and signals a programming error in the caller
that built the tree.
"""


class FormatError(RuntimeError):
    """Base class for all failures raised while formatting a formula.

    Allows callers to handle any rendering failure with a single except
    clause while still distinguishing the specific cause when needed.
    """

    pass


class UnsupportedOperatorError(FormatError):
    """Exception raised when an operator or quantifier has no canonical glyph.

    Some operators are declared in the expression model but have no entry in
    the glyph table. Formatting a node that carries one of them fails with
    this error instead of producing a blank or guessed symbol.

    Attributes:
        operator: The operator or quantifier that could not be rendered
    """

    def __init__(self, operator):
        self.operator = operator
        name = getattr(operator, "name", repr(operator))
        super().__init__(f"No glyph defined for operator {name}")


class InvalidArityError(FormatError):
    """Exception raised when a predication has no arguments.

    Attributes:
        predicate: Name of the offending predicate
        arity: Number of arguments found
    """

    def __init__(self, predicate: str, arity: int = 0):
        self.predicate = predicate
        self.arity = arity
        super().__init__(
            f"Predicate '{predicate}' needs at least one argument, got {arity}"
        )
