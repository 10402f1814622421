# qml/__init__.py
# This file is part of the QML expression toolkit
#
# Formula model and canonical formatting for quantified modal logic

"""Quantified Modal Logic formula trees and their canonical notation.

This package models QML formulas as immutable abstract syntax trees and
renders them into standard logical notation using ¬, ∧, ∨, →, □, ⋄, the
quantifier symbols and the word-like epistemic, deontic and normality
operators.

Core Components:
    ast_nodes: Terms, operators, quantifiers and the five formula node kinds
    formatter: The recursive renderer and its glyph tables
    exceptions: Errors raised when a tree cannot be rendered

Example:
    >>> from qml import QuantificationNode, PredicationNode, Quantifier, variable, format
    >>> x = variable("x")
    >>> format(QuantificationNode(Quantifier.EXISTENTIAL, x, PredicationNode("P", [x])))
    '∃x P(x)'
"""

from .ast_nodes import (
    BinaryNode,
    Expression,
    IdentityNode,
    Operator,
    PredicationNode,
    QuantificationNode,
    Quantifier,
    Term,
    TermKind,
    UnaryNode,
    Visitor,
    constant,
    variable,
)
from .exceptions import FormatError, InvalidArityError, UnsupportedOperatorError
from .formatter import (
    OPERATOR_GLYPHS,
    QUANTIFIER_GLYPHS,
    Formatter,
    format,
    operator_glyph,
    quantifier_glyph,
)

__all__ = [
    "BinaryNode",
    "Expression",
    "IdentityNode",
    "Operator",
    "PredicationNode",
    "QuantificationNode",
    "Quantifier",
    "Term",
    "TermKind",
    "UnaryNode",
    "Visitor",
    "constant",
    "variable",
    "FormatError",
    "InvalidArityError",
    "UnsupportedOperatorError",
    "OPERATOR_GLYPHS",
    "QUANTIFIER_GLYPHS",
    "Formatter",
    "format",
    "operator_glyph",
    "quantifier_glyph",
]

__version__ = "1.0.0"
__description__ = "Quantified modal logic formula model and canonical formatter"
