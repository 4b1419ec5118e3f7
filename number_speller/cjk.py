"""
Chinese cardinal numbers, simplified and traditional glyphs.

Digits are grouped by myriads (10^4), so the scale words step by 10,000:
万 (10^4), 亿 (10^8), 兆 (10^12) ...

Zero elision needs to look across group boundaries, which is why this is not
a WesternGrammar:

    1001       → 一千零一          (run of zeros inside a group: one 零)
    10100      → 一万零一百        (zeros leading a lower group: one 零)
    100001000  → 一亿零一千        (a whole zero group: still one 零)
    10001000   → 一千万一千        (zeros trailing a group: not read)

The "seen a nonzero digit" / "zero pending" flags are threaded through each
group render as an explicit ElisionState value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from .digits import CJK_GROUP_WIDTH, DigitGroup, MagnitudeLimit, Number, iter_groups, to_digits
from .exceptions import UnsupportedFraction
from .grammar import GrammarFamily
from .models import CJKVocabulary, DecimalDigits

# ─── Glyph Tables ───────────────────────────────────────────────────

ZH_CN_VOCABULARY = CJKVocabulary(
    digits=("零", "一", "二", "三", "四", "五", "六", "七", "八", "九"),
    units=("十", "百", "千"),
    scales=("万", "亿", "兆", "京", "垓", "秭", "穰", "沟", "涧", "正", "载"),
    zero="零",
    minus="负",
)

ZH_TW_VOCABULARY = CJKVocabulary(
    digits=("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖"),
    units=("拾", "佰", "仟"),
    scales=("萬", "億", "兆", "京", "垓", "秭", "穰", "溝", "澗", "正", "載"),
    zero="零",
    minus="負",
)


# ─── Group Rendering ────────────────────────────────────────────────


class ElisionState(NamedTuple):
    """Zero-elision flags carried from one group to the next."""

    seen_nonzero: bool = False
    pending_zero: bool = False


def is_leading_ten(number: str, place: int, digit: int) -> bool:
    """10-19 read as 十, 十五; everywhere else the 一 is spoken (一百一十)."""
    return place == 1 and digit == 1 and len(number) <= 2


def render_myriad_group(
    vocab: CJKVocabulary,
    number: str,
    group: DigitGroup,
    state: ElisionState,
) -> tuple[str, ElisionState]:
    """Render one 4-digit group and its scale word.

    Args:
        vocab: Glyph tables.
        number: The full integer digit string (for the leading-ten rule).
        group: The group to render.
        state: Flags left by the more significant groups.

    Returns:
        (text, state) where ``text`` is empty for an all-zero group and
        ``state`` is what the next group must be rendered with.
    """
    seen_nonzero, pending_zero = state
    glyphs: list[str] = []

    for position, digit in enumerate(group.slots):
        place = CJK_GROUP_WIDTH - 1 - position  # 3 = 千 ... 0 = units
        if digit < 0:
            continue
        if digit == 0:
            pending_zero = pending_zero or seen_nonzero
            continue

        if pending_zero:
            glyphs.append(vocab.zero)
            pending_zero = False

        if is_leading_ten(number, place, digit):
            glyphs.append(vocab.units[0])
        elif place > 0:
            glyphs += [vocab.digits[digit], vocab.units[place - 1]]
        else:
            glyphs.append(vocab.digits[digit])
        seen_nonzero = True

    if glyphs:
        if group.power > 0:
            glyphs.append(vocab.scales[group.power - 1])
        # zeros trailing a nonzero group are swallowed by its scale word
        pending_zero = False

    return "".join(glyphs), ElisionState(seen_nonzero, pending_zero)


# ─── Grammar ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CJKGrammar:
    """Myriad-grouping grammar; the glyph table is the only per-locale part."""

    name: str
    vocabulary: CJKVocabulary
    family: GrammarFamily = field(default="cjk", init=False)

    @property
    def zero_word(self) -> str:
        return self.vocabulary.zero

    @property
    def minus_word(self) -> str:
        return self.vocabulary.minus

    @property
    def max_power(self) -> int:
        return self.vocabulary.max_power

    def digit_word(self, digit: int) -> str:
        return self.vocabulary.digits[digit]

    def to_text(self, value: Number | DecimalDigits) -> str:
        """Spell an integer out in Chinese numerals.

        Raises:
            UnsupportedFraction: ``value`` has a nonzero fractional part.
            MagnitudeOverflow: The value needs a scale word past 载/載.
            InvalidNumberError: ``value`` has no exact decimal form.
        """
        vocab = self.vocabulary
        number = to_digits(value, MagnitudeLimit(CJK_GROUP_WIDTH, vocab.max_power, self.name))

        if not number.is_integer:
            raise UnsupportedFraction(self.name, number.fraction)

        parts: list[str] = []
        if number.negative:
            parts.append(vocab.minus)

        if number.is_zero:
            parts.append(vocab.zero)
        else:
            state = ElisionState()
            for group in iter_groups(number.integer, CJK_GROUP_WIDTH):
                text, state = render_myriad_group(vocab, number.integer, group, state)
                parts.append(text)

        return "".join(parts)


ZH_CN = CJKGrammar(name="zh_CN", vocabulary=ZH_CN_VOCABULARY)
ZH_TW = CJKGrammar(name="zh_TW", vocabulary=ZH_TW_VOCABULARY)
