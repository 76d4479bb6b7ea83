"""Tests for eetoolbox.color_code — band encoding and resistance decoding."""

from __future__ import annotations

import itertools

import pytest

from eetoolbox.bands import MULTIPLIER_BANDS
from eetoolbox.color_code import (
    DecodedBands,
    ResistorReading,
    decode,
    encode,
    format_decoded,
    format_reading,
)

# ===========================================================================
# encode
# ===========================================================================


class TestEncode:
    def test_yellow_violet_red(self):
        assert encode(4, 7, 2) == 4700.0

    def test_brown_black_black(self):
        assert encode(1, 0, 0) == 10.0

    def test_white_multiplier(self):
        assert encode(1, 0, 9) == 1e10

    def test_gold_multiplier(self):
        assert encode(4, 7, 10) == 47 * 0.1
        assert encode(4, 7, 10) == pytest.approx(4.7)

    def test_silver_multiplier(self):
        assert encode(3, 3, 11) == pytest.approx(0.33)

    def test_zero_digits(self):
        assert encode(0, 0, 5) == 0.0

    def test_every_combination_matches_table(self):
        for d1, d2, m in itertools.product(range(10), range(10), range(12)):
            expected = (d1 * 10 + d2) * MULTIPLIER_BANDS[m].value
            assert encode(d1, d2, m) == expected


# ===========================================================================
# decode
# ===========================================================================


class TestDecode:
    def test_exact_two_digit_value(self):
        result = decode(4700)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (4, 7, 2)
        assert encode(4, 7, 2) == 4700

    def test_round_trip_through_encode(self):
        for ohms in (10, 33, 220, 4700, 56_000, 680_000, 1_200_000):
            result = decode(ohms)
            assert result.approx_resistance == pytest.approx(ohms)

    def test_carry_into_next_decade(self):
        # 996 -> 99.6 x10 -> rounds to 100 -> carried to 10 x100
        result = decode(996)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (1, 0, 2)
        assert result.approx_resistance == pytest.approx(1000)

    def test_carry_at_half(self):
        result = decode(99.5)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (1, 0, 1)

    def test_round_half_up(self):
        # Python's round() would give 12 and 4 here
        assert decode(12.5).digit2 == 3
        assert decode(4.5).digit2 == 5

    def test_rounds_down_below_half(self):
        result = decode(4749)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (4, 7, 2)

    def test_one_ohm(self):
        # Exponent cannot go below 0, so 1 ohm reads as digits 0,1 x1
        result = decode(1.0)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (0, 1, 0)
        assert result.approx_resistance == 1.0

    def test_ten_ohms(self):
        result = decode(10.0)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (1, 0, 0)

    def test_sub_ohm(self):
        assert decode(0.04).approx_resistance == 0.0
        assert decode(0.5).approx_resistance == 1.0

    def test_one_gigaohm(self):
        result = decode(1e9)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (1, 0, 8)
        assert result.multiplier_exponent <= 9

    def test_clamped_at_top_decade(self):
        result = decode(5e12)
        assert result.multiplier_exponent == 9
        assert (result.digit1, result.digit2) == (9, 9)

    def test_carry_at_cap_does_not_reach_gold(self):
        result = decode(9.97e10)
        assert result.multiplier_exponent == 9
        assert (result.digit1, result.digit2) == (9, 9)

    def test_largest_exact_value(self):
        result = decode(9.9e10)
        assert (result.digit1, result.digit2, result.multiplier_exponent) == (9, 9, 9)

    def test_never_uses_fractional_multipliers(self):
        for ohms in (0.01, 0.1, 1, 9.4, 150, 3.3e5, 1e11):
            assert 0 <= decode(ohms).multiplier_exponent <= 9

    def test_keeps_input_resistance(self):
        assert decode(996).resistance == 996


# ===========================================================================
# Display and summaries
# ===========================================================================


class TestReading:
    def test_resistance_and_tolerance(self):
        reading = ResistorReading(4, 7, 2, 6)
        assert reading.resistance == 4700
        assert reading.tolerance_text == "±5%"

    def test_summary(self):
        reading = ResistorReading(4, 7, 2, 6)
        assert reading.summary() == "[Color→Resistance] (4,7,m=2,t=6) = 4700 Ω, tol ±5%"

    def test_summary_fractional(self):
        reading = ResistorReading(4, 7, 10, 7)
        assert reading.summary().endswith("= 4.7 Ω, tol ±10%")

    def test_format_reading(self):
        text = format_reading(ResistorReading(4, 7, 2, 6))
        assert "Bands: 4 Yellow | 7 Violet | 2 Red x100 | 6 Gold ±5%" in text
        assert "Approx resistance: 4.7 kΩ" in text
        assert "Tolerance: ±5%" in text


class TestDecodedBands:
    def test_summary(self):
        assert decode(4700).summary() == "[Resistance→Color] R=4700 → (4,7,m=2)"

    def test_labels(self):
        assert decode(4700).band_labels() == ["4 Yellow", "7 Violet", "2 Red x100"]

    def test_format_decoded(self):
        text = format_decoded(decode(996))
        assert "Approx resistance: 996 Ω" in text
        assert "Band 1: 1 Brown" in text
        assert "Band 2: 0 Black" in text
        assert "Band 3: 2 Red x100" in text
        assert "choose based on component tolerance" in text

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DecodedBands(1.0, 0, 1, 0).digit1 = 5
