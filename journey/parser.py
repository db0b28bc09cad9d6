"""Parse human-entered values such as ``"100 km"`` or ``"1h 30min"``.

Both parse modes share one lexical rule: a *token* is a run of digits and
decimal points (the magnitude), optional whitespace, then a run of ASCII
letters or slashes (the unit, so ``"km/h"`` is a single symbol).

- :func:`parse_quantity` accepts exactly one token spanning the whole input.
- :func:`parse_duration` sums every token it finds and skips anything between
  them, so ``"1h extra 30min"`` is 5400 seconds.
"""

from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass

from journey.errors import InvalidArgumentError, MalformedInputError
from journey.units import UnitKind, to_base

logger = logging.getLogger(__name__)

QUANTITY_EXAMPLE = "value unit (e.g., 100 km)"
DURATION_EXAMPLE = "value unit (e.g., 1h 30min)"

_MAGNITUDE_CHARS = frozenset(string.digits + ".")
_UNIT_CHARS = frozenset(string.ascii_letters + "/")


@dataclass(frozen=True)
class Quantity:
    """A magnitude paired with the unit symbol it was expressed in."""

    magnitude: float
    unit: str

    def __post_init__(self) -> None:
        if not math.isfinite(self.magnitude):
            msg = f"Magnitude must be finite, got {self.magnitude}"
            raise InvalidArgumentError(msg)


@dataclass(frozen=True)
class Token:
    """One lexical ``<magnitude><unit>`` match and where it sits in the input."""

    magnitude: str
    unit: str
    start: int
    end: int  # exclusive


def _scan(text: str, pos: int, chars: frozenset[str]) -> int:
    """Return the index of the first character at or after *pos* not in *chars*."""
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def tokenize(text: str) -> list[Token]:
    """Find every non-overlapping token in *text*, left to right.

    Characters that cannot start a token, and magnitude runs with no unit after
    them, are skipped.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        if text[pos] not in _MAGNITUDE_CHARS:
            pos += 1
            continue

        start = pos
        magnitude_end = _scan(text, start, _MAGNITUDE_CHARS)
        unit_start = _skip_whitespace(text, magnitude_end)
        unit_end = _scan(text, unit_start, _UNIT_CHARS)
        if unit_end == unit_start:
            # A bare number; resume after it.
            pos = magnitude_end
            continue

        tokens.append(
            Token(
                magnitude=text[start:magnitude_end],
                unit=text[unit_start:unit_end],
                start=start,
                end=unit_end,
            )
        )
        pos = unit_end
    return tokens


def _magnitude(token: Token, text: str, expected: str) -> float:
    """Convert a token's magnitude run to a finite float."""
    # Stricter than a longest-numeric-prefix read: "1.2.3" is malformed, not 1.2.
    try:
        value = float(token.magnitude)
    except ValueError:
        raise MalformedInputError(text, expected) from None
    if not math.isfinite(value):
        raise MalformedInputError(text, expected)
    return value


def parse_quantity(text: str) -> Quantity:
    """Parse a single ``<value> <unit>`` entry such as ``"100 km"`` or ``"50km/h"``.

    The whole string must be exactly one token; leading, trailing or
    interleaved extra characters are rejected.

    Raises
    ------
    MalformedInputError
        If *text* is not exactly one well-formed token.
    """
    tokens = tokenize(text)
    if len(tokens) != 1 or tokens[0].start != 0 or tokens[0].end != len(text):
        raise MalformedInputError(text, QUANTITY_EXAMPLE)

    token = tokens[0]
    quantity = Quantity(_magnitude(token, text, QUANTITY_EXAMPLE), token.unit)
    logger.debug("Parsed %r as %s %s", text, quantity.magnitude, quantity.unit)
    return quantity


def parse_duration(text: str) -> float:
    """Parse a possibly composite duration such as ``"1h 30min"`` into seconds.

    Every token is converted through the time table and summed. Text between
    tokens is ignored.

    Raises
    ------
    MalformedInputError
        If *text* contains no token at all.
    UnsupportedUnitError
        If a token's unit is not a time unit.
    """
    tokens = tokenize(text)
    if not tokens:
        raise MalformedInputError(text, DURATION_EXAMPLE)

    total_s = 0.0
    for token in tokens:
        total_s += to_base(UnitKind.TIME, _magnitude(token, text, DURATION_EXAMPLE), token.unit)
    logger.debug("Parsed duration %r as %d token(s), %s s", text, len(tokens), total_s)
    return total_s
