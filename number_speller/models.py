"""
Pydantic models for spelled-out numbers: the exact decimal value and the
vocabulary tables every grammar is built from.

Vocabularies are frozen. A grammar instance is built once and then shared by
every caller, so nothing here may change after construction.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

_FROZEN = {"frozen": True, "extra": "forbid"}


# ─── Exact Decimal Value ────────────────────────────────────────────


class DecimalDigits(BaseModel):
    """A signed number as exact base-10 digit strings.

    ``integer`` never carries leading zeros (zero is ``"0"``) and ``fraction``
    never carries trailing zeros, so an empty ``fraction`` means the value is
    an integer. Zero is never negative.
    """

    negative: bool = False
    integer: str = Field(pattern=r"^(0|[1-9][0-9]*)$")
    fraction: str = Field(default="", pattern=r"^([0-9]*[1-9])?$")

    model_config = _FROZEN

    @model_validator(mode="before")
    @classmethod
    def _zero_is_unsigned(cls, data):
        if isinstance(data, dict) and data.get("integer") == "0" and not data.get("fraction"):
            return {**data, "negative": False}
        return data

    @property
    def is_integer(self) -> bool:
        return not self.fraction

    @property
    def is_zero(self) -> bool:
        return self.integer == "0" and not self.fraction


# ─── Vocabulary Tables ──────────────────────────────────────────────


class ScaleWord(BaseModel):
    """Magnitude word for one power of the grouping base."""

    singular: str
    plural: str = ""  # Empty when the grammar has no plural form

    model_config = _FROZEN

    def select(self, plural: bool) -> str:
        return self.plural if plural and self.plural else self.singular


class WesternVocabulary(BaseModel):
    """Word tables for a grammar that groups digits by thousands.

    Index ``n`` of ``digits`` / ``teens`` / ``tens`` / ``hundreds`` holds the
    word for digit ``n`` in that position. ``scales[0]`` names 10^3.
    """

    digits: tuple[str, ...] = Field(min_length=10, max_length=10)
    teens: tuple[str, ...] = Field(min_length=10, max_length=10)  # 10..19
    tens: tuple[str, ...] = Field(min_length=10, max_length=10)  # "", ten, twenty...
    hundreds: tuple[str, ...] = Field(default=(), max_length=10)
    hundred: str = ""
    scales: tuple[ScaleWord, ...] = Field(min_length=1)

    minus: str
    decimal_point: str
    conjunction: str = ""  # "and" / "y"
    tens_joiner: str = " "  # Between a tens word and the following unit
    separator: str = " "

    model_config = _FROZEN

    @property
    def max_power(self) -> int:
        return len(self.scales)


class CJKVocabulary(BaseModel):
    """Glyph tables for a grammar that groups digits by myriads (10^4).

    ``units`` holds the in-group position words for 10, 100 and 1000;
    ``scales[0]`` names 10^4.
    """

    digits: tuple[str, ...] = Field(min_length=10, max_length=10)
    units: tuple[str, str, str]  # 十, 百, 千
    scales: tuple[str, ...] = Field(min_length=1)
    zero: str
    minus: str

    model_config = _FROZEN

    @property
    def max_power(self) -> int:
        return len(self.scales)
