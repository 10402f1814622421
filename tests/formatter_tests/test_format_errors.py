# tests/formatter_tests/test_format_errors.py
# This file is part of the QML expression toolkit
#
# Test suite for formatting failures

"""Test suite for formatter error handling.

Verifies that operators without a glyph and predications without arguments
fail with dedicated exceptions, including when the offending node is nested
deep inside an otherwise valid formula.
"""

import pytest
from qml import format
from qml.ast_nodes import (
    BinaryNode,
    Operator,
    PredicationNode,
    QuantificationNode,
    Quantifier,
    UnaryNode,
    constant,
)
from qml.exceptions import FormatError, InvalidArityError, UnsupportedOperatorError
from qml.formatter import operator_glyph, quantifier_glyph
from qml.utils.logger import get_logger


class TestFormatErrors:
    """Test cases for formatter failure conditions."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_actuality_is_unsupported(self):
        node = UnaryNode(Operator.ACTUALITY, PredicationNode("P", [constant("a")]))

        with pytest.raises(UnsupportedOperatorError) as exc_info:
            format(node)

        assert exc_info.value.operator is Operator.ACTUALITY
        assert "ACTUALITY" in str(exc_info.value)

    def test_strict_conditional_is_unsupported(self, px, qy):
        node = BinaryNode(Operator.CONDITIONAL_STRICT, px, qy)

        with pytest.raises(UnsupportedOperatorError) as exc_info:
            format(node)

        assert exc_info.value.operator is Operator.CONDITIONAL_STRICT

    @pytest.mark.parametrize("op", [Operator.ACTUALITY, Operator.CONDITIONAL_STRICT])
    def test_glyph_lookup_rejects_missing_entries(self, op):
        with pytest.raises(UnsupportedOperatorError):
            operator_glyph(op)

    @pytest.mark.parametrize("quantifier", ["bogus", None, Operator.NECESSITY])
    def test_quantifier_lookup_rejects_unknown_quantifiers(self, quantifier):
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            quantifier_glyph(quantifier)

        assert exc_info.value.operator is quantifier

    def test_quantification_with_unknown_quantifier_fails_cleanly(self, x, px):
        with pytest.raises(UnsupportedOperatorError):
            format(QuantificationNode("bogus", x, px))

    def test_empty_predication_is_invalid_arity(self):
        with pytest.raises(InvalidArityError) as exc_info:
            format(PredicationNode("R", []))

        assert exc_info.value.predicate == "R"
        assert exc_info.value.arity == 0

    def test_nested_errors_propagate(self, x, px):
        formula = QuantificationNode(
            Quantifier.UNIVERSAL,
            x,
            BinaryNode(
                Operator.CONJUNCTION,
                px,
                UnaryNode(Operator.NECESSITY, PredicationNode("R", [])),
            ),
        )

        self.logger.debug("Formatting formula with nested empty predication")
        with pytest.raises(InvalidArityError):
            format(formula)

    def test_errors_share_a_base_class(self):
        assert issubclass(UnsupportedOperatorError, FormatError)
        assert issubclass(InvalidArityError, FormatError)
        assert issubclass(FormatError, RuntimeError)

        with pytest.raises(FormatError):
            format(UnaryNode(Operator.ACTUALITY, PredicationNode("R", [])))
