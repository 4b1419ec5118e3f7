"""
Custom exception hierarchy for number spelling.

Each exception type maps to a specific category of spelling failure,
so callers can decide per category whether to fall back to a raw numeral.
"""

from __future__ import annotations


class SpellingError(Exception):
    """Base exception for all number spelling failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MagnitudeOverflow(SpellingError):
    """The value needs a scale word the grammar does not have."""

    def __init__(self, required_power: int, max_power: int, grammar: str = ""):
        self.required_power = required_power
        self.max_power = max_power
        super().__init__(
            "MAGNITUDE_OVERFLOW",
            f"Number is too big for grammar {grammar!r}: needs a power of "
            f"{required_power}, supports at most {max_power}",
            {
                "grammar": grammar,
                "required_power": required_power,
                "max_power": max_power,
            },
        )


class UnsupportedFraction(SpellingError):
    """The grammar only spells integers and was handed a fractional value."""

    def __init__(self, grammar: str, fraction: str):
        super().__init__(
            "UNSUPPORTED_FRACTION",
            f"Grammar {grammar!r} does not spell fractional values (.{fraction})",
            {"grammar": grammar, "fraction": fraction},
        )


class InvalidNumberError(SpellingError, ValueError):
    """The input is not a finite number with an exact decimal form."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class UnknownLocaleError(SpellingError):
    """No grammar is registered for the requested locale tag."""

    def __init__(self, locale: str, known: list[str]):
        super().__init__(
            "UNKNOWN_LOCALE",
            f"No grammar registered for locale {locale!r}",
            {"locale": locale, "known_locales": known},
        )
