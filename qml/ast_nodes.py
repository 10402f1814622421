# qml/ast_nodes.py
# This file is part of the QML expression toolkit
#
# Abstract Syntax Tree node classes for quantified modal logic formulas

"""AST node classes for representing Quantified Modal Logic formulas.

This module defines immutable and hashable node classes used to build tree
representations of QML formulas. A formula is always one of five node kinds,
bottoming out in atomic formulas over terms.

Node Types:
    UnaryNode: Negation, actuality and the modal operators
    BinaryNode: Conjunction, disjunction, conditionals and biconditional
    QuantificationNode: Existential and universal quantification
    IdentityNode: Atomic identity statement between two terms
    PredicationNode: Atomic predicate applied to a sequence of terms

Nodes carry no behavior besides construction and visitor dispatch. Whether an
operator is placed in a node of matching arity is left to the caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, Tuple


class TermKind(Enum):
    """Kind tag of a term."""
    CONSTANT = auto()
    VARIABLE = auto()


class Operator(Enum):
    """Logical and modal connectives.

    Negation, actuality and every modal operator are unary; the remaining
    connectives are binary. The arity class is implied by the node kind that
    embeds the operator and is not checked.
    """
    NEGATION = auto()
    CONJUNCTION = auto()
    DISJUNCTION = auto()
    CONDITIONAL = auto()
    CONDITIONAL_MATERIAL = auto()
    CONDITIONAL_STRICT = auto()
    BICONDITIONAL = auto()
    ACTUALITY = auto()
    NECESSITY = auto()
    POSSIBILITY = auto()
    EPISTEMIC_NECESSITY = auto()
    EPISTEMIC_POSSIBILITY = auto()
    DEONTIC_NECESSITY = auto()
    DEONTIC_POSSIBILITY = auto()
    NORMAL_NECESSITY = auto()
    NORMAL_POSSIBILITY = auto()


class Quantifier(Enum):
    EXISTENTIAL = auto()
    UNIVERSAL = auto()


@dataclass(frozen=True, slots=True)
class Term:
    """Constant or variable symbol used inside atomic formulas.

    Attributes:
        literal: The string representation of the term
        kind: Whether the term is a constant or a variable
    """

    literal: str
    kind: TermKind


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors implement one visit method per node kind, which makes
    the five node kinds a closed set from the visitor's point of view.
    """

    def visit_unary(self, n: UnaryNode): ...

    def visit_binary(self, n: BinaryNode): ...

    def visit_quantification(self, n: QuantificationNode): ...

    def visit_identity(self, n: IdentityNode): ...

    def visit_predication(self, n: PredicationNode): ...


@dataclass(frozen=True, slots=True)
class Expression:
    """Base class for all QML formula nodes.

    Only the concrete subclasses represent formulas. The base class exists to
    give every node a common type and the visitor entry point.

    Raises:
        TypeError: If the base class itself is instantiated
    """

    def __new__(cls, *args, **kwargs):
        if cls is Expression:
            raise TypeError(
                "Expression cannot be instantiated; build one of its node kinds"
            )
        return object.__new__(cls)

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class UnaryNode(Expression):
    """Unary formula ``Op φ``.

    Attributes:
        operator: A unary operator (negation, actuality or a modal operator)
        scope: The formula the operator applies to
    """

    operator: Operator
    scope: Expression

    def accept(self, v: Visitor):
        return v.visit_unary(self)


@dataclass(frozen=True, slots=True)
class BinaryNode(Expression):
    """Binary formula ``φ Op ψ``.

    Attributes:
        operator: A binary connective
        lhs: Left operand
        rhs: Right operand
    """

    operator: Operator
    lhs: Expression
    rhs: Expression

    def accept(self, v: Visitor):
        return v.visit_binary(self)


@dataclass(frozen=True, slots=True)
class QuantificationNode(Expression):
    """Quantified formula ``Qv φ``.

    The bound term is conventionally a variable, but any term is accepted.

    Attributes:
        quantifier: Existential or universal quantifier
        variable: The bound term
        scope: The quantified formula
    """

    quantifier: Quantifier
    variable: Term
    scope: Expression

    def accept(self, v: Visitor):
        return v.visit_quantification(self)


@dataclass(frozen=True, slots=True)
class IdentityNode(Expression):
    """Atomic identity statement ``a = b``."""

    lhs: Term
    rhs: Term

    def accept(self, v: Visitor):
        return v.visit_identity(self)


@dataclass(frozen=True, slots=True)
class PredicationNode(Expression):
    """Atomic predication ``P(a, b, ...)``.

    Arguments may be given as any iterable of terms; they are stored as a
    tuple in their original order. An empty argument sequence is allowed
    here, although it cannot be formatted.

    Attributes:
        predicate: Name of the predicate
        arguments: Ordered argument terms
    """

    predicate: str
    arguments: Tuple[Term, ...] = ()

    def __post_init__(self):
        # Frozen dataclass: bypass __setattr__ to normalize the container
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def accept(self, v: Visitor):
        return v.visit_predication(self)


def constant(literal: str) -> Term:
    """Build a constant term."""
    return Term(literal, TermKind.CONSTANT)


def variable(literal: str) -> Term:
    """Build a variable term."""
    return Term(literal, TermKind.VARIABLE)

