"""Failures raised by the journey metrics engine.

Every failure is a :class:`ValueError`, so callers that only care about
"bad input" can catch that; the shell catches :class:`JourneyError`.
"""

from __future__ import annotations


class JourneyError(ValueError):
    """Base class for all engine failures."""


class UnsupportedUnitError(JourneyError):
    """A unit symbol is not registered for the requested quantity kind."""

    def __init__(self, kind: str, unit: str) -> None:
        self.kind = kind
        self.unit = unit
        super().__init__(f"Unsupported {kind} unit: {unit}")


class MalformedInputError(JourneyError):
    """Input text does not match the value/unit grammar."""

    def __init__(self, text: str, expected: str) -> None:
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid input format {text!r}. Expected format: {expected}")


class InvalidArgumentError(JourneyError):
    """A domain precondition was violated (e.g. a non-positive duration)."""
