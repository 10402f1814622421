# qml/formatter.py
# This file is part of the QML expression toolkit
#
# Canonical notation renderer for QML formula trees

"""Renders QML formula trees into canonical logical notation.

The formatter is a structure-directed visitor with one rule per node kind:

- Unary formulas print the operator glyph directly before their scope. Word
  glyphs such as ``"Must "`` already carry their trailing space.
- Binary formulas are always fully parenthesized: ``(φ ∧ ψ)``.
- Quantified formulas print the quantifier glyph, the bound variable, a space
  and the scope: ``∀x P(x)``.
- Identities print as ``a = b``, predications as ``P(a, b)``.

A negated identity is rendered with the inequality sign, ``a ≠ b``, instead of
the generic ``¬a = b``.

Recursion depth equals the nesting depth of the formula, so extremely deep
trees can exceed Python's recursion limit.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping
from . import ast_nodes as ast
from .exceptions import FormatError, InvalidArityError, UnsupportedOperatorError
from .utils.logger import get_logger


OPERATOR_GLYPHS: Mapping[ast.Operator, str] = MappingProxyType({
    ast.Operator.NEGATION: "¬",
    ast.Operator.CONJUNCTION: "∧",
    ast.Operator.DISJUNCTION: "∨",
    ast.Operator.CONDITIONAL: "→",
    ast.Operator.CONDITIONAL_MATERIAL: "⊃",
    ast.Operator.BICONDITIONAL: "↔",
    ast.Operator.NECESSITY: "□",
    ast.Operator.POSSIBILITY: "⋄",
    ast.Operator.EPISTEMIC_NECESSITY: "Must ",
    ast.Operator.EPISTEMIC_POSSIBILITY: "Might ",
    ast.Operator.DEONTIC_NECESSITY: "Ought ",
    ast.Operator.DEONTIC_POSSIBILITY: "May ",
    ast.Operator.NORMAL_NECESSITY: "Normally ",
    ast.Operator.NORMAL_POSSIBILITY: "Sometimes ",
})

QUANTIFIER_GLYPHS: Mapping[ast.Quantifier, str] = MappingProxyType({
    ast.Quantifier.UNIVERSAL: "∀",
    ast.Quantifier.EXISTENTIAL: "∃",
})


def operator_glyph(op: ast.Operator) -> str:
    """Look up the canonical glyph of an operator.

    Args:
        op: Operator to render

    Returns:
        The operator's glyph or keyword

    Raises:
        UnsupportedOperatorError: The operator has no glyph
    """
    try:
        return OPERATOR_GLYPHS[op]
    except KeyError:
        raise UnsupportedOperatorError(op) from None


def quantifier_glyph(q: ast.Quantifier) -> str:
    try:
        return QUANTIFIER_GLYPHS[q]
    except KeyError:
        raise UnsupportedOperatorError(q) from None


class Formatter(ast.Visitor):
    """Visitor rendering each node kind into its canonical string.

    The formatter holds no state, so a single instance can be reused for any
    number of formulas.
    """

    def format(self, expr: ast.Expression) -> str:
        """Render a whole formula tree."""
        return expr.accept(self)

    def visit_unary(self, n: ast.UnaryNode) -> str:
        """Render a unary formula, writing negated identities with ≠.

        Args:
            n: Unary node

        Returns:
            Operator glyph followed by the rendered scope, or ``a ≠ b``
        """
        if n.operator is ast.Operator.NEGATION and isinstance(n.scope, ast.IdentityNode):
            prejacent = n.scope.accept(self)
            return prejacent.replace("=", "≠", 1)

        return f"{operator_glyph(n.operator)}{n.scope.accept(self)}"

    def visit_binary(self, n: ast.BinaryNode) -> str:
        glyph = operator_glyph(n.operator)
        return f"({n.lhs.accept(self)} {glyph} {n.rhs.accept(self)})"

    def visit_quantification(self, n: ast.QuantificationNode) -> str:
        return (
            f"{quantifier_glyph(n.quantifier)}{n.variable.literal} "
            f"{n.scope.accept(self)}"
        )

    def visit_identity(self, n: ast.IdentityNode) -> str:
        return f"{n.lhs.literal} = {n.rhs.literal}"

    def visit_predication(self, n: ast.PredicationNode) -> str:
        """Render a predication with comma-separated arguments.

        Raises:
            InvalidArityError: The predication has no arguments
        """
        if not n.arguments:
            raise InvalidArityError(n.predicate, len(n.arguments))

        argument_list = ", ".join(arg.literal for arg in n.arguments)
        return f"{n.predicate}({argument_list})"


def format(expression: ast.Expression) -> str:
    """Render a QML formula tree into its canonical notation string.

    Rendering is deterministic and either produces the complete string or
    raises; no partial output is ever returned.

    Args:
        expression: Root node of the formula tree

    Returns:
        The canonical notation of the formula

    Raises:
        UnsupportedOperatorError: A node carries an operator with no glyph
        InvalidArityError: A predication has no arguments

    Example:
        >>> from qml.ast_nodes import PredicationNode, UnaryNode, Operator, variable
        >>> format(UnaryNode(Operator.NECESSITY, PredicationNode("P", [variable("x")])))
        '□P(x)'
    """
    logger = get_logger()
    node_type = type(expression).__name__

    try:
        rendered = Formatter().format(expression)
    except FormatError as exc:
        logger.format_rejected(node_type, str(exc))
        raise

    logger.expression_formatted(node_type, rendered)
    return rendered
