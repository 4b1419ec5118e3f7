"""
Caller-side facade: pick a grammar for a locale tag and spell with it.

Usage:
    speller = NumberSpeller("es_ES")
    speller.spell(1_000_000)   # "un millón"
    speller.spell_digit(7)     # "siete"

The default locale comes from NUMBER_SPELLER_LOCALE and falls back to en_GB,
which is also what an unknown tag resolves to unless ``strict=True``.
"""

from __future__ import annotations

import logging
import os

from .cjk import ZH_CN, ZH_TW
from .digits import MagnitudeLimit, Number, to_digits
from .english import EN_GB, EN_US
from .exceptions import InvalidNumberError, MagnitudeOverflow, UnknownLocaleError
from .grammar import NumberGrammar
from .models import DecimalDigits
from .spanish import ES_ES

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "NUMBER_SPELLER_LOCALE"
FALLBACK_LOCALE = "en_GB"

# Registration order decides which grammar a bare language tag ("en") gets.
GRAMMARS: dict[str, NumberGrammar] = {
    grammar.name: grammar for grammar in (EN_GB, EN_US, ES_ES, ZH_CN, ZH_TW)
}


# ─── Locale Lookup ──────────────────────────────────────────────────


def normalize_locale(tag: str) -> str:
    """Canonicalise a tag: 'en-us' → 'en_US', ' ES ' → 'es'."""
    language, _, region = tag.strip().replace("-", "_").partition("_")
    if region:
        return f"{language.lower()}_{region.upper()}"
    return language.lower()


def get_grammar(locale: str | None = None, strict: bool = False) -> NumberGrammar:
    """Return the grammar registered for ``locale``.

    Args:
        locale: Locale tag such as "en_US" or "zh-TW". ``None`` reads
            NUMBER_SPELLER_LOCALE, then falls back to en_GB.
        strict: Raise instead of falling back when the tag is unknown.

    Raises:
        UnknownLocaleError: Only when ``strict`` is set.
    """
    tag = locale or os.getenv(LOCALE_ENV_VAR) or FALLBACK_LOCALE
    key = normalize_locale(tag)

    grammar = GRAMMARS.get(key)
    if grammar is None and "_" not in key:
        grammar = next(
            (g for name, g in GRAMMARS.items() if name.split("_")[0] == key), None
        )

    if grammar is None:
        if strict:
            raise UnknownLocaleError(tag, sorted(GRAMMARS))
        logger.warning("No grammar for locale %r, falling back to %s", tag, FALLBACK_LOCALE)
        grammar = GRAMMARS[FALLBACK_LOCALE]

    logger.debug("Locale %r resolved to grammar %s", tag, grammar.name)
    return grammar


# ─── Speller ────────────────────────────────────────────────────────


class NumberSpeller:
    """Spells numbers with one grammar, chosen once at construction."""

    def __init__(self, locale: str | None = None, strict: bool = False):
        self.grammar = get_grammar(locale, strict=strict)

    @property
    def locale(self) -> str:
        return self.grammar.name

    def spell(self, value: Number | DecimalDigits) -> str:
        """Spell ``value`` out in the speller's language.

        Raises:
            InvalidNumberError: Non-finite or unparseable input.
            MagnitudeOverflow: Too many digits for the grammar's scale words.
            UnsupportedFraction: Fractional input to a Chinese grammar.
        """
        return self.grammar.to_text(value)

    def spell_digit(self, value: object) -> str:
        """Spell a single decimal digit 0-9; return anything else as ``str(value)``.

        Fractions are not truncated: ``Decimal("2.5")`` comes back as "2.5", not
        as the word for 2.
        """
        try:
            number = to_digits(value, MagnitudeLimit(width=1, max_power=0))  # type: ignore[arg-type]
        except (InvalidNumberError, MagnitudeOverflow):
            return str(value)
        if number.negative or not number.is_integer:
            return str(value)
        return self.grammar.digit_word(int(number.integer))


def spell(value: Number | DecimalDigits, locale: str | None = None) -> str:
    """One-shot helper: ``spell(123, "en_US")`` → "one hundred twenty-three"."""
    return get_grammar(locale).to_text(value)
