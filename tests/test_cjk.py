"""
Chinese grammars (zh_CN / zh_TW): myriad grouping, zero elision, the
leading-ten rule and the traditional glyph table.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from number_speller.cjk import (
    ZH_CN,
    ZH_CN_VOCABULARY,
    ZH_TW,
    ElisionState,
    is_leading_ten,
    render_myriad_group,
)
from number_speller.digits import DigitGroup
from number_speller.exceptions import MagnitudeOverflow, UnsupportedFraction


# ═══════════════════════════════════════════════════════════════════════
# SIMPLIFIED
# ═══════════════════════════════════════════════════════════════════════


class TestSimplifiedChinese:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "零"),
            (1, "一"),
            (127, "一百二十七"),
            (256, "二百五十六"),
            (1000, "一千"),
            (1000000, "一百万"),
            (2000000, "二百万"),
            (1200000, "一百二十万"),
            (2427000, "二百四十二万七千"),
            (100000000, "一亿"),
        ],
    )
    def test_known_values(self, value, expected):
        assert ZH_CN.to_text(value) == expected

    def test_negative(self):
        assert ZH_CN.to_text(-1) == "负一"

    def test_no_separator_between_glyphs(self):
        assert " " not in ZH_CN.to_text(-98765432101)


# ═══════════════════════════════════════════════════════════════════════
# ZERO ELISION
# ═══════════════════════════════════════════════════════════════════════


class TestZeroElision:
    def test_single_zero_inside_group(self):
        assert ZH_CN.to_text(105) == "一百零五"

    def test_zero_run_collapses(self):
        assert ZH_CN.to_text(1001) == "一千零一"

    def test_split_zero_runs(self):
        assert ZH_CN.to_text(1010) == "一千零一十"

    def test_trailing_zeros_not_read(self):
        assert ZH_CN.to_text(1100) == "一千一百"

    def test_zeros_leading_a_lower_group(self):
        assert ZH_CN.to_text(10100) == "一万零一百"

    def test_zeros_trailing_a_higher_group(self):
        assert ZH_CN.to_text(10001000) == "一千万一千"

    def test_whole_zero_group_reads_one_zero(self):
        assert ZH_CN.to_text(100001000) == "一亿零一千"

    def test_zero_groups_and_leading_zeros_collapse(self):
        assert ZH_CN.to_text(100000001) == "一亿零一"

    def test_zero_groups_without_tail_read_nothing(self):
        assert ZH_CN.to_text(10**12) == "一兆"

    def test_zero_group_emits_no_scale_word(self):
        assert "万" not in ZH_CN.to_text(100000005)


class TestElisionState:
    def test_state_threaded_out_of_group(self):
        group = DigitGroup(power=1, end=4, slots=(1, 0, 0, 0))
        text, state = render_myriad_group(ZH_CN_VOCABULARY, "10000000", group, ElisionState())
        assert text == "一千万"
        assert state == ElisionState(seen_nonzero=True, pending_zero=False)

    def test_zero_group_leaves_zero_pending(self):
        group = DigitGroup(power=1, end=5, slots=(0, 0, 0, 0))
        text, state = render_myriad_group(
            ZH_CN_VOCABULARY, "100000000", group, ElisionState(seen_nonzero=True)
        )
        assert text == ""
        assert state.pending_zero

    def test_pending_zero_is_spoken_before_next_digit(self):
        group = DigitGroup(power=0, end=9, slots=(1, 0, 0, 0))
        text, _ = render_myriad_group(
            ZH_CN_VOCABULARY, "100001000", group, ElisionState(True, True)
        )
        assert text == "零一千"

    def test_leading_zeros_ignored_before_any_digit(self):
        group = DigitGroup(power=0, end=4, slots=(0, 0, 0, 7))
        text, _ = render_myriad_group(ZH_CN_VOCABULARY, "0007", group, ElisionState())
        assert text == "七"


# ═══════════════════════════════════════════════════════════════════════
# LEADING TEN
# ═══════════════════════════════════════════════════════════════════════


class TestLeadingTen:
    def test_ten(self):
        assert ZH_CN.to_text(10) == "十"

    def test_teen(self):
        assert ZH_CN.to_text(15) == "十五"

    def test_ten_after_hundred_keeps_one(self):
        assert ZH_CN.to_text(110) == "一百一十"

    def test_ten_in_higher_group_keeps_one(self):
        assert ZH_CN.to_text(100000) == "一十万"

    def test_rule_only_for_short_numbers(self):
        assert is_leading_ten("12", 1, 1)
        assert not is_leading_ten("112", 1, 1)
        assert not is_leading_ten("22", 1, 2)


# ═══════════════════════════════════════════════════════════════════════
# TRADITIONAL
# ═══════════════════════════════════════════════════════════════════════


class TestTraditionalChinese:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "零"),
            (1, "壹"),
            (127, "壹佰贰拾柒"),
            (256, "贰佰伍拾陆"),
            (1000, "壹仟"),
            (1000000, "壹佰萬"),
            (2000000, "贰佰萬"),
            (1200000, "壹佰贰拾萬"),
            (2427000, "贰佰肆拾贰萬柒仟"),
        ],
    )
    def test_known_values(self, value, expected):
        assert ZH_TW.to_text(value) == expected

    def test_negative(self):
        assert ZH_TW.to_text(-1) == "負壹"

    def test_same_algorithm_as_simplified(self):
        """Only the glyphs differ: elision and leading ten behave identically."""
        assert ZH_TW.to_text(10100) == "壹萬零壹佰"
        assert ZH_TW.to_text(15) == "拾伍"


# ═══════════════════════════════════════════════════════════════════════
# LIMITS
# ═══════════════════════════════════════════════════════════════════════


class TestCJKLimits:
    def test_fraction_rejected(self):
        with pytest.raises(UnsupportedFraction) as exc_info:
            ZH_CN.to_text(Decimal("1.5"))
        assert exc_info.value.code == "UNSUPPORTED_FRACTION"
        assert exc_info.value.details == {"grammar": "zh_CN", "fraction": "5"}

    def test_integral_decimal_accepted(self):
        assert ZH_TW.to_text(Decimal("3.00")) == "叁"

    def test_largest_scale(self):
        assert ZH_CN.max_power == 11
        assert ZH_CN.to_text(10**44) == "一载"

    def test_overflow(self):
        with pytest.raises(MagnitudeOverflow) as exc_info:
            ZH_CN.to_text(10**48)
        assert exc_info.value.required_power == 12
        assert exc_info.value.max_power == 11
