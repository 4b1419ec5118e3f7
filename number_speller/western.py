"""
Shared skeleton for grammars that group digits by thousands.

The skeleton owns everything that is the same across Western languages:

  1. sign       → minus word
  2. chunking   → 3-digit groups, most significant first
  3. per group  → locale hook renders words + the group's scale word
  4. fraction   → decimal-point word, then one digit at a time
  5. join       → fragments separated by the vocabulary's separator

Locale rules live only in the hook. A hook receives the full integer digit
string, the count of digits up to the end of its group, the group's power and
the hundreds/tens/units digits (``-1`` where the most significant group is
shorter than three digits), and returns the group's text or ``""``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .digits import WESTERN_GROUP_WIDTH, MagnitudeLimit, Number, iter_groups, to_digits
from .grammar import GrammarFamily
from .models import DecimalDigits, WesternVocabulary

GroupRenderer = Callable[[WesternVocabulary, str, int, int, int, int, int], str]


@dataclass(frozen=True)
class WesternGrammar:
    """A Western grammar: vocabulary tables plus one group-rendering hook."""

    name: str
    vocabulary: WesternVocabulary
    render_group: GroupRenderer
    family: GrammarFamily = field(default="western", init=False)

    @property
    def zero_word(self) -> str:
        return self.vocabulary.digits[0]

    @property
    def minus_word(self) -> str:
        return self.vocabulary.minus

    @property
    def max_power(self) -> int:
        return self.vocabulary.max_power

    def digit_word(self, digit: int) -> str:
        return self.vocabulary.digits[digit]

    def to_text(self, value: Number | DecimalDigits) -> str:
        """Spell ``value`` out.

        Raises:
            MagnitudeOverflow: The integer part needs a scale word past the
                end of the vocabulary.
            InvalidNumberError: ``value`` has no exact decimal form.
        """
        vocab = self.vocabulary
        number = to_digits(
            value, MagnitudeLimit(WESTERN_GROUP_WIDTH, vocab.max_power, self.name)
        )

        fragments: list[str] = []
        if number.negative:
            fragments.append(vocab.minus)

        for group in iter_groups(number.integer, WESTERN_GROUP_WIDTH):
            hundreds, tens, units = group.slots
            fragments.append(
                self.render_group(
                    vocab, number.integer, group.end, group.power, hundreds, tens, units
                )
            )

        if number.fraction:
            fragments.append(vocab.decimal_point)
            for digit in number.fraction:
                fragments.append(self.render_group(vocab, digit, 1, 0, -1, -1, int(digit)))

        return vocab.separator.join(f for f in fragments if f)


def join_words(vocab: WesternVocabulary, *words: str) -> str:
    """Join the non-empty words of one group with the vocabulary's separator."""
    return vocab.separator.join(w for w in words if w)
