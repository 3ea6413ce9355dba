"""
Unit tests for the converter module in cvtr.

Tests the ConversionRequest/ConversionResult models and the convert function
which runs a request through radix resolution, parsing and formatting.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cvtr.converter import (
    DEFAULT_OUTPUTS,
    ConversionRequest,
    ConversionResult,
    convert,
    select_source_radix,
)
from cvtr.errors import (
    ConflictingRadixError,
    IntegerOverflowError,
    InvalidRadixError,
    MultipleSourceRadixError,
    ParseFailureError,
)
from cvtr.radix import Radix


class TestConversionRequest:
    """Test suite for ConversionRequest."""

    @pytest.mark.smoke
    def test_default_outputs(self):
        """No requested outputs selects every radix."""
        request = ConversionRequest(raw_input="10")

        assert request.requested_outputs == list(Radix)
        assert tuple(request.requested_outputs) == DEFAULT_OUTPUTS
        assert request.explicit_source_radix is None

    @pytest.mark.smoke
    def test_outputs_display_order(self):
        request = ConversionRequest(
            raw_input="10", requested_outputs=[Radix.HEX, Radix.BINARY, Radix.HEX]
        )

        assert request.requested_outputs == [Radix.BINARY, Radix.HEX]

    @pytest.mark.sanity
    def test_outputs_from_ints(self):
        request = ConversionRequest(raw_input="10", requested_outputs=[16, 10])

        assert request.requested_outputs == [Radix.DECIMAL, Radix.HEX]
        assert all(isinstance(radix, Radix) for radix in request.requested_outputs)

    @pytest.mark.sanity
    def test_unsupported_output(self):
        with pytest.raises(ValidationError):
            ConversionRequest(raw_input="10", requested_outputs=[7])

    @pytest.mark.sanity
    def test_explicit_radix_validated_on_convert(self):
        """An unsupported source radix is an InvalidRadixError, not a ValidationError."""
        request = ConversionRequest(raw_input="10", explicit_source_radix=7)

        with pytest.raises(InvalidRadixError):
            convert(request)


class TestConversionResult:
    """Test suite for ConversionResult."""

    @pytest.fixture
    def result(self) -> ConversionResult:
        return ConversionResult(
            source_radix=Radix.DECIMAL,
            value=10,
            outputs={Radix.BINARY: "1010", Radix.HEX: "a"},
        )

    @pytest.mark.smoke
    def test_lines(self, result):
        assert result.lines(label_width=0) == ["binary: 1010", "hex: a"]

    @pytest.mark.sanity
    def test_lines_padded(self, result):
        assert result.lines(label_width=10) == ["binary:    1010", "hex:       a"]

    @pytest.mark.sanity
    def test_lines_default_width(self, result):
        with patch("cvtr.converter.settings") as mock_settings:
            mock_settings.label_width = 8
            assert result.lines() == ["binary:  1010", "hex:     a"]


class TestSelectSourceRadix:
    """Test suite for select_source_radix."""

    @pytest.mark.smoke
    @pytest.mark.parametrize(
        ("radices", "expected"),
        [
            ((), None),
            ((None, None), None),
            ((None, 16, None), 16),
            ((16, Radix.HEX), 16),
            ((7,), 7),
        ],
    )
    def test_select(self, radices, expected):
        assert select_source_radix(*radices) == expected

    @pytest.mark.sanity
    def test_multiple_radices(self):
        with pytest.raises(MultipleSourceRadixError) as exc_info:
            select_source_radix(Radix.HEX, None, Radix.BINARY)

        assert exc_info.value.radices == [2, 16]
        assert exc_info.value.exit_code == ConflictingRadixError.exit_code
        assert "multiple input radices defined: 2, 16" in str(exc_info.value)


class TestConvert:
    """Test suite for the convert function."""

    @pytest.mark.smoke
    @pytest.mark.parametrize(
        ("raw_input", "explicit", "expected_value"),
        [
            ("0x20", None, 32),
            ("0b101", None, 5),
            ("0o17", None, 15),
            ("20", 16, 32),
            ("32", None, 32),
            ("0", None, 0),
        ],
        ids=["hex_prefix", "bin_prefix", "oct_prefix", "explicit", "decimal", "zero"],
    )
    def test_value(self, raw_input, explicit, expected_value):
        result = convert(
            ConversionRequest(raw_input=raw_input, explicit_source_radix=explicit)
        )

        assert result.value == expected_value
        assert list(result.outputs) == list(Radix)

    @pytest.mark.smoke
    def test_decimal_from_hex_prefix(self):
        result = convert(
            ConversionRequest(raw_input="0x20", requested_outputs=[Radix.DECIMAL])
        )

        assert result.source_radix == Radix.HEX
        assert result.outputs == {Radix.DECIMAL: "32"}
        assert result.lines(label_width=0) == ["decimal: 32"]

    @pytest.mark.smoke
    def test_binary_and_hex(self):
        result = convert(
            ConversionRequest(
                raw_input="10", requested_outputs=[Radix.HEX, Radix.BINARY]
            )
        )

        assert result.lines(label_width=0) == ["binary: 1010", "hex: a"]

    @pytest.mark.sanity
    def test_zero_in_every_radix(self):
        result = convert(ConversionRequest(raw_input="0"))

        assert set(result.outputs.values()) == {"0"}

    @pytest.mark.sanity
    @pytest.mark.parametrize(
        ("raw_input", "explicit", "error"),
        [
            ("2", 2, ParseFailureError),
            ("g", 16, ParseFailureError),
            ("0xg", None, ParseFailureError),
            ("0x", None, ParseFailureError),
            ("", None, ParseFailureError),
            ("18446744073709551616", None, IntegerOverflowError),
            ("0x20", 8, ConflictingRadixError),
            ("20", 3, InvalidRadixError),
        ],
    )
    def test_errors(self, raw_input, explicit, error):
        with pytest.raises(error):
            convert(
                ConversionRequest(raw_input=raw_input, explicit_source_radix=explicit)
            )

    @pytest.mark.sanity
    def test_width_argument(self):
        request = ConversionRequest(raw_input="18446744073709551616")

        assert convert(request, width=128).value == 2**64

    @pytest.mark.sanity
    def test_width_from_settings(self):
        request = ConversionRequest(raw_input="0x1ffffffffffffffff")

        with patch("cvtr.converter.settings") as mock_settings:
            mock_settings.int_width = 128
            assert convert(request).value == 2**65 - 1

    @pytest.mark.sanity
    @patch("cvtr.converter.logger")
    def test_failure_logged(self, mock_logger):
        with pytest.raises(ParseFailureError):
            convert(ConversionRequest(raw_input="0b2"))

        assert mock_logger.debug.call_count == 2

    @pytest.mark.regression
    @pytest.mark.parametrize("value", [1, 10, 255, 65535, 2**32 + 7, 2**64 - 1])
    def test_round_trip(self, value):
        """Hex, octal and binary renderings convert back to the decimal value."""
        result = convert(ConversionRequest(raw_input=str(value)))

        for radix, prefix in (
            (Radix.BINARY, "0b"),
            (Radix.OCTAL, "0o"),
            (Radix.HEX, "0x"),
        ):
            by_prefix = convert(
                ConversionRequest(
                    raw_input=prefix + result.outputs[radix],
                    requested_outputs=[Radix.DECIMAL],
                )
            )
            by_flag = convert(
                ConversionRequest(
                    raw_input=result.outputs[radix],
                    explicit_source_radix=radix,
                    requested_outputs=[Radix.DECIMAL],
                )
            )
            assert by_prefix.outputs[Radix.DECIMAL] == str(value)
            assert by_flag.value == value
