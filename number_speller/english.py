"""
English cardinal numbers, British and American.

    en_GB: 1002 → "one thousand and two",  123 → "one hundred and twenty-three"
    en_US: 1002 → "one thousand two",      123 → "one hundred twenty-three"

Both variants share every table and the same group hook. The American
vocabulary is the British one with the "and" connector blanked out.
"""

from __future__ import annotations

from .models import ScaleWord, WesternVocabulary
from .western import WesternGrammar, join_words

# ─── Word Tables ────────────────────────────────────────────────────

_DIGITS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

_TENS = ("", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

# Short scale: each step is another factor of 1,000.
_SCALES = tuple(
    ScaleWord(singular=word)
    for word in (
        "thousand",  # 10^3
        "million",  # 10^6
        "billion",  # 10^9
        "trillion",  # 10^12
        "quadrillion",  # 10^15
        "quintillion",  # 10^18
        "sextillion",  # 10^21
        "septillion",  # 10^24
        "octillion",  # 10^27
        "nonillion",  # 10^30
        "decillion",  # 10^33
        "undecillion",  # 10^36
        "duodecillion",  # 10^39
        "tredecillion",  # 10^42
        "quattuordecillion",  # 10^45
        "quindecillion",  # 10^48
        "sexdecillion",  # 10^51
        "septendecillion",  # 10^54
        "octodecillion",  # 10^57
        "novemdecillion",  # 10^60
        "vigintillion",  # 10^63
    )
)

EN_GB_VOCABULARY = WesternVocabulary(
    digits=_DIGITS,
    teens=_TEENS,
    tens=_TENS,
    hundred="hundred",
    scales=_SCALES,
    minus="minus",
    decimal_point="point",
    conjunction="and",
    tens_joiner="-",
)

EN_US_VOCABULARY = EN_GB_VOCABULARY.model_copy(update={"conjunction": ""})


# ─── Group Hook ─────────────────────────────────────────────────────


def render_english_group(
    vocab: WesternVocabulary,
    number: str,
    group_len: int,
    power: int,
    hundreds: int,
    tens: int,
    units: int,
) -> str:
    """Render one 3-digit group plus its scale word.

    "and" goes after a spoken hundred ("two hundred and six") and at the
    start of a trailing group that has no hundreds ("one thousand and six").
    """
    if hundreds <= 0 and tens <= 0 and units <= 0:
        return vocab.digits[0] if len(number) == 1 else ""

    has_remainder = tens > 0 or units > 0
    words: list[str] = []

    if hundreds > 0:
        words += [vocab.digits[hundreds], vocab.hundred]
        if has_remainder:
            words.append(vocab.conjunction)
    elif hundreds == 0 and group_len > 3 and has_remainder:
        words.append(vocab.conjunction)

    if tens == 1:
        words.append(vocab.teens[units])
    elif tens > 1:
        tens_word = vocab.tens[tens]
        if units > 0:
            tens_word += vocab.tens_joiner + vocab.digits[units]
        words.append(tens_word)
    elif units > 0:
        words.append(vocab.digits[units])

    if power > 0:
        words.append(vocab.scales[power - 1].select(plural=False))

    return join_words(vocab, *words)


# ─── Grammars ───────────────────────────────────────────────────────

EN_GB = WesternGrammar(name="en_GB", vocabulary=EN_GB_VOCABULARY, render_group=render_english_group)
EN_US = WesternGrammar(name="en_US", vocabulary=EN_US_VOCABULARY, render_group=render_english_group)
