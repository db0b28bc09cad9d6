"""Tests for journey.parser."""

from __future__ import annotations

import pytest

from journey.errors import InvalidArgumentError, MalformedInputError, UnsupportedUnitError
from journey.parser import Quantity, Token, parse_duration, parse_quantity, tokenize


class TestTokenize:
    def test_single_token_with_space(self) -> None:
        assert tokenize("100 km") == [Token("100", "km", 0, 6)]

    def test_compound_unit(self) -> None:
        assert tokenize("50km/h") == [Token("50", "km/h", 0, 6)]

    def test_multiple_tokens(self) -> None:
        tokens = tokenize("1h 30min")
        assert [(t.magnitude, t.unit) for t in tokens] == [("1", "h"), ("30", "min")]
        assert tokens[1].start == 3
        assert tokens[1].end == 8

    def test_skips_bare_numbers(self) -> None:
        assert [(t.magnitude, t.unit) for t in tokenize("12 34km")] == [("34", "km")]

    def test_no_tokens(self) -> None:
        assert tokenize("garbage") == []
        assert tokenize("") == []
        assert tokenize("42") == []

    def test_decimal_magnitude(self) -> None:
        assert tokenize("2.5 mi") == [Token("2.5", "mi", 0, 6)]

    def test_non_ascii_letters_end_the_unit(self) -> None:
        assert [t.unit for t in tokenize("5 kmé")] == ["km"]


class TestParseQuantity:
    @pytest.mark.parametrize("text", ["100km", "100 km", "100   km", "100\tkm"])
    def test_whitespace_between_value_and_unit_is_optional(self, text: str) -> None:
        assert parse_quantity(text) == Quantity(100.0, "km")

    def test_compound_unit(self) -> None:
        assert parse_quantity("50 km/h") == Quantity(50.0, "km/h")

    def test_decimal_value(self) -> None:
        quantity = parse_quantity("0.5mi")
        assert quantity.magnitude == pytest.approx(0.5)
        assert quantity.unit == "mi"

    def test_leading_decimal_point(self) -> None:
        assert parse_quantity(".5 km") == Quantity(0.5, "km")

    def test_unit_is_not_validated(self) -> None:
        assert parse_quantity("3 parsecs") == Quantity(3.0, "parsecs")

    @pytest.mark.parametrize(
        "text",
        [
            "100km!",
            " 100 km",
            "100 km ",
            "100",
            "km",
            "",
            "-5 km",
            "100 km 5",
            "1h 30min",
            "100 k m",
        ],
    )
    def test_rejects_anything_but_one_whole_token(self, text: str) -> None:
        with pytest.raises(MalformedInputError, match="Expected format"):
            parse_quantity(text)

    @pytest.mark.parametrize("text", ["1.2.3 km", ". km", "..km"])
    def test_rejects_unparseable_magnitude(self, text: str) -> None:
        with pytest.raises(MalformedInputError):
            parse_quantity(text)

    def test_does_not_read_numeric_prefix_of_bad_magnitude(self) -> None:
        with pytest.raises(MalformedInputError, match="1.2.3 km"):
            parse_quantity("1.2.3 km")

    def test_rejects_magnitude_overflowing_to_infinity(self) -> None:
        with pytest.raises(MalformedInputError):
            parse_quantity("9" * 400 + " m")

    def test_error_keeps_offending_text(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse_quantity("100km!")
        assert exc_info.value.text == "100km!"


class TestParseDuration:
    def test_composite(self) -> None:
        assert parse_duration("1h 30min") == pytest.approx(5400.0)

    def test_garbage_between_tokens_is_skipped(self) -> None:
        assert parse_duration("1h extra 30min") == pytest.approx(5400.0)

    def test_trailing_garbage_is_skipped(self) -> None:
        assert parse_duration("2h!!") == pytest.approx(7200.0)

    def test_single_term(self) -> None:
        assert parse_duration("45 s") == pytest.approx(45.0)

    def test_all_time_units(self) -> None:
        assert parse_duration("1d 1h 1min 1s") == pytest.approx(86400 + 3600 + 60 + 1)

    def test_decimal_terms(self) -> None:
        assert parse_duration("1.5h") == pytest.approx(5400.0)

    def test_repeated_units_add_up(self) -> None:
        assert parse_duration("10min 10min") == pytest.approx(1200.0)

    @pytest.mark.parametrize("text", ["garbage", "", "90", "h min"])
    def test_no_token_at_all(self, text: str) -> None:
        with pytest.raises(MalformedInputError, match="1h 30min"):
            parse_duration(text)

    def test_unknown_time_unit(self) -> None:
        with pytest.raises(UnsupportedUnitError, match="Unsupported time unit: hours"):
            parse_duration("2 hours")

    def test_zero_duration_parses(self) -> None:
        assert parse_duration("0h") == 0.0


class TestQuantity:
    def test_is_immutable(self) -> None:
        quantity = Quantity(1.0, "m")
        with pytest.raises(AttributeError):
            quantity.magnitude = 2.0  # type: ignore[misc]

    @pytest.mark.parametrize("magnitude", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite_magnitude(self, magnitude: float) -> None:
        with pytest.raises(InvalidArgumentError, match="finite"):
            Quantity(magnitude, "m")
