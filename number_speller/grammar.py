"""
The spelling capability shared by every grammar.

Two algorithm families implement it and share nothing but this contract:

  - "western": thousands grouping with a per-locale group hook (western.py)
  - "cjk":     myriad grouping with cross-group zero elision (cjk.py)
"""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

from .digits import Number
from .models import DecimalDigits

GrammarFamily = Literal["western", "cjk"]


@runtime_checkable
class NumberGrammar(Protocol):
    """Spells a number in one language or script.

    Implementations are immutable once built; ``to_text`` keeps all of its
    working state local to the call.
    """

    name: str
    family: GrammarFamily

    @property
    def zero_word(self) -> str: ...

    @property
    def minus_word(self) -> str: ...

    @property
    def max_power(self) -> int: ...

    def digit_word(self, digit: int) -> str: ...

    def to_text(self, value: Number | DecimalDigits) -> str: ...
