"""
Exact decimal extraction and magnitude chunking.

Every grammar works on base-10 digit strings, never on binary floats:

    to_digits(Decimal("-1.20"))   → DecimalDigits(negative=True, integer="1", fraction="2")
    to_digits(10**30)              → DecimalDigits(integer="1000000000000000000000000000000")
    list(iter_groups("1234567", 3))
        → [DigitGroup(power=2, end=1, slots=(-1, -1, 1)),
           DigitGroup(power=1, end=4, slots=(2, 3, 4)),
           DigitGroup(power=0, end=7, slots=(5, 6, 7))]

A grammar passes its MagnitudeLimit so that "1e1000000000000" is rejected from
its exponent alone, before a single zero is written out.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal, InvalidOperation
from typing import Iterator, NamedTuple, Union

from .exceptions import InvalidNumberError, MagnitudeOverflow
from .models import DecimalDigits

Number = Union[int, float, Decimal, str]

WESTERN_GROUP_WIDTH = 3
CJK_GROUP_WIDTH = 4

MAX_FRACTION_DIGITS = 1000  # Each fraction digit is spelled as its own word


# ─── Magnitude Limit ────────────────────────────────────────────────


class MagnitudeLimit(NamedTuple):
    """The largest integer part a grammar has scale words for."""

    width: int
    max_power: int
    grammar: str = ""

    def check(self, integer_length: int) -> None:
        """Raise MagnitudeOverflow if ``integer_length`` digits need a group past ``max_power``."""
        power = (integer_length - 1) // self.width
        if power > self.max_power:
            raise MagnitudeOverflow(power, self.max_power, self.grammar)


# ─── Exact Decimal Extraction ───────────────────────────────────────


def to_digits(
    value: Number | DecimalDigits, limit: MagnitudeLimit | None = None
) -> DecimalDigits:
    """Split a numeric value into sign, integer digits and fraction digits.

    Args:
        value: ``int`` of any size, ``Decimal``, a numeric string such as
            ``"-12.50"`` or ``"1e3"``, or a ``float``. Floats go through their
            shortest ``repr`` so ``0.1`` stays ``"0.1"``.
        limit: Checked against the length of the integer part, worked out
            from the coefficient and exponent before the digits are expanded.

    Returns:
        DecimalDigits with leading integer zeros and trailing fraction zeros
        removed.

    Raises:
        InvalidNumberError: For booleans, non-finite values (NaN, infinity),
            anything that does not parse as a decimal number, and values with
            more than MAX_FRACTION_DIGITS fraction digits.
        MagnitudeOverflow: The integer part is longer than ``limit`` allows.
    """
    if isinstance(value, DecimalDigits):
        if limit is not None:
            limit.check(len(value.integer))
        return value
    if isinstance(value, bool):
        raise InvalidNumberError(
            f"Booleans are not numbers: {value!r}", {"value": repr(value)}
        )
    if isinstance(value, numbers.Integral):
        # Decimal(int) is exact and, unlike str(int), has no digit-count cap
        return _from_decimal(Decimal(int(value)), value, limit)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberError(
                f"Cannot spell a non-finite number: {value!r}", {"value": repr(value)}
            )
        return _from_decimal(Decimal(repr(value)), value, limit)
    if isinstance(value, Decimal):
        return _from_decimal(value, value, limit)
    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip().replace("_", ""))
        except InvalidOperation:
            raise InvalidNumberError(
                f"Not a decimal number: {value!r}", {"value": value}
            ) from None
        return _from_decimal(parsed, value, limit)
    raise InvalidNumberError(
        f"Unsupported numeric type: {type(value).__name__}",
        {"value": repr(value), "type": type(value).__name__},
    )


def _from_decimal(
    number: Decimal, original: object, limit: MagnitudeLimit | None
) -> DecimalDigits:
    """Read the exact digits out of a Decimal's (sign, digits, exponent) tuple."""
    if not number.is_finite():
        raise InvalidNumberError(
            f"Cannot spell a non-finite number: {original!r}",
            {"value": repr(original)},
        )

    sign, digit_tuple, exponent = number.as_tuple()
    assert isinstance(exponent, int)  # finite Decimals always have an int exponent
    coefficient = "".join(str(d) for d in digit_tuple).lstrip("0")
    if not coefficient:
        return DecimalDigits(integer="0")

    if exponent < 0:
        # Fold trailing coefficient zeros into the exponent: "1.50" is 15e-1
        shift = min(len(coefficient) - len(coefficient.rstrip("0")), -exponent)
        coefficient = coefficient[: len(coefficient) - shift]
        exponent += shift

    integer_length = len(coefficient) + exponent
    if limit is not None and integer_length > 0:
        limit.check(integer_length)
    if -exponent > MAX_FRACTION_DIGITS:
        raise InvalidNumberError(
            f"Too many fraction digits to spell: {-exponent} "
            f"(at most {MAX_FRACTION_DIGITS})",
            {"value": repr(original), "fraction_digits": -exponent},
        )

    if exponent >= 0:
        integer, fraction = coefficient + "0" * exponent, ""
    else:
        padded = coefficient.zfill(-exponent + 1)
        integer, fraction = padded[:exponent], padded[exponent:]

    return DecimalDigits(
        negative=bool(sign), integer=integer.lstrip("0") or "0", fraction=fraction
    )


# ─── Magnitude Chunking ─────────────────────────────────────────────


class DigitGroup(NamedTuple):
    """One window of the digit string, most significant slot first.

    ``end`` is the count of digits up to and including this group, so only
    the most significant group has ``end <= width``. Slots that fall before
    the first digit hold ``-1``.
    """

    power: int
    end: int
    slots: tuple[int, ...]

    @property
    def value(self) -> int:
        total = 0
        for digit in self.slots:
            total = total * 10 + max(digit, 0)
        return total


def required_power(digits: str, width: int) -> int:
    """Power index of the most significant group (0 for up to ``width`` digits)."""
    return (len(digits) - 1) // width


def iter_groups(digits: str, width: int) -> Iterator[DigitGroup]:
    """Yield the digit groups from the most significant one down to power 0."""
    for power in range(required_power(digits, width), -1, -1):
        end = len(digits) - power * width
        window = digits[max(0, end - width):end]
        slots = (-1,) * (width - len(window)) + tuple(int(c) for c in window)
        yield DigitGroup(power=power, end=end, slots=slots)
