"""
Spanish cardinal numbers (es_ES, long scale).

Spanish has several irregular spellings. Each one is a separate rule below
so it can be tested on its own:

    cien / ciento      100 → "cien",            127 → "ciento veintisiete"
    veinti-            22 → "veintidós",         27 → "veintisiete"
    un / uno           1 000 000 → "un millón",  41 → "cuarenta y uno"
    bare mil           1 000 → "mil",            2 000 → "dos mil"
    plural scales      2 000 000 → "dos millones"
"""

from __future__ import annotations

from .models import ScaleWord, WesternVocabulary
from .western import WesternGrammar, join_words

# ─── Word Tables ────────────────────────────────────────────────────

_DIGITS = ("cero", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve")

_TEENS = (
    "diez", "once", "doce", "trece", "catorce",
    "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
)

_TENS = (
    "", "diez", "veinte", "treinta", "cuarenta",
    "cincuenta", "sesenta", "setenta", "ochenta", "noventa",
)

_HUNDREDS = (
    "", "ciento", "doscientos", "trescientos", "cuatrocientos",
    "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos",
)

# Long scale: every "-illón" is a million times the previous one, with the
# "-illardo" forms naming the thousand-fold steps in between.
_SCALES = (
    ScaleWord(singular="mil", plural="mil"),  # 10^3
    ScaleWord(singular="millón", plural="millones"),  # 10^6
    ScaleWord(singular="billardo", plural="billardos"),  # 10^9
    ScaleWord(singular="billón", plural="billones"),  # 10^12
    ScaleWord(singular="trillardo", plural="trillardos"),  # 10^15
    ScaleWord(singular="trillón", plural="trillones"),  # 10^18
    ScaleWord(singular="cuatrillardo", plural="cuatrillardos"),  # 10^21
    ScaleWord(singular="cuatrillón", plural="cuatrillones"),  # 10^24
    ScaleWord(singular="quintillardo", plural="quintillardos"),  # 10^27
    ScaleWord(singular="quintillón", plural="quintillones"),  # 10^30
    ScaleWord(singular="sextillardo", plural="sextillardos"),  # 10^33
    ScaleWord(singular="sextillón", plural="sextillones"),  # 10^36
    ScaleWord(singular="septillardo", plural="septillardos"),  # 10^39
    ScaleWord(singular="septillón", plural="septillones"),  # 10^42
    ScaleWord(singular="octillardo", plural="octillardos"),  # 10^45
    ScaleWord(singular="octillón", plural="octillones"),  # 10^48
    ScaleWord(singular="nonillardo", plural="nonillardos"),  # 10^51
    ScaleWord(singular="nonillón", plural="nonillones"),  # 10^54
    ScaleWord(singular="decillardo", plural="decillardos"),  # 10^57
    ScaleWord(singular="decillón", plural="decillones"),  # 10^60
)

ES_ES_VOCABULARY = WesternVocabulary(
    digits=_DIGITS,
    teens=_TEENS,
    tens=_TENS,
    hundreds=_HUNDREDS,
    hundred="cien",
    scales=_SCALES,
    minus="menos",
    decimal_point="coma",
    conjunction="y",
)

# Irregular words that no table position covers
UNIT_APOCOPE = "un"
TWENTIES_PREFIX = "veinti"
TWENTY_ONE_APOCOPE = "veintiún"
CONTRACTED_TWENTIES = {2: "veintidós", 3: "veintitrés", 6: "veintiséis"}


# ─── Irregular Rules ────────────────────────────────────────────────


def hundreds_word(vocab: WesternVocabulary, hundreds: int, tens: int, units: int) -> str:
    """Exactly one hundred is "cien"; 101-199 use "ciento"."""
    if hundreds == 1 and tens <= 0 and units <= 0:
        return vocab.hundred
    return vocab.hundreds[hundreds]


def unit_word(vocab: WesternVocabulary, units: int, power: int) -> str:
    """Shorten "uno" to "un" in front of a scale word."""
    if units == 1 and power > 0:
        return UNIT_APOCOPE
    return vocab.digits[units]


def twenties_word(vocab: WesternVocabulary, units: int, power: int) -> str:
    """20-29 are written as one word: "veinte", "veintidós", "veintiún"."""
    if units <= 0:
        return vocab.tens[2]
    if units in CONTRACTED_TWENTIES:
        return CONTRACTED_TWENTIES[units]
    if units == 1 and power > 0:
        return TWENTY_ONE_APOCOPE
    return TWENTIES_PREFIX + vocab.digits[units]


def is_bare_thousand(power: int, hundreds: int, tens: int, units: int) -> bool:
    """A thousands group worth exactly one is just "mil", never "un mil"."""
    return power == 1 and hundreds <= 0 and tens <= 0 and units == 1


def needs_plural_scale(hundreds: int, tens: int, units: int) -> bool:
    """Scale words are plural unless the group's value is exactly one."""
    return not (hundreds <= 0 and tens <= 0 and units == 1)


# ─── Group Hook ─────────────────────────────────────────────────────


def render_spanish_group(
    vocab: WesternVocabulary,
    number: str,
    group_len: int,
    power: int,
    hundreds: int,
    tens: int,
    units: int,
) -> str:
    """Render one 3-digit group plus its (possibly plural) scale word."""
    if hundreds <= 0 and tens <= 0 and units <= 0:
        return vocab.digits[0] if len(number) == 1 else ""

    if is_bare_thousand(power, hundreds, tens, units):
        return vocab.scales[0].singular

    words: list[str] = []

    if hundreds > 0:
        words.append(hundreds_word(vocab, hundreds, tens, units))

    if tens == 1:
        words.append(vocab.teens[units])
    elif tens == 2:
        words.append(twenties_word(vocab, units, power))
    elif tens > 2:
        words.append(vocab.tens[tens])
        if units > 0:
            words += [vocab.conjunction, unit_word(vocab, units, power)]
    elif units > 0:
        words.append(unit_word(vocab, units, power))

    if power > 0:
        scale = vocab.scales[power - 1]
        words.append(scale.select(plural=needs_plural_scale(hundreds, tens, units)))

    return join_words(vocab, *words)


# ─── Grammar ────────────────────────────────────────────────────────

ES_ES = WesternGrammar(name="es_ES", vocabulary=ES_ES_VOCABULARY, render_group=render_spanish_group)
