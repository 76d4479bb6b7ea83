"""Tests for eetoolbox.notation."""

from __future__ import annotations

from eetoolbox.notation import format_general, format_resistance


class TestFormatResistance:
    def test_kilohm(self):
        assert format_resistance(4700) == "4.7 kΩ"

    def test_base_unit_below_1k(self):
        assert format_resistance(999) == "999 Ω"

    def test_megohm(self):
        assert format_resistance(2_500_000) == "2.5 MΩ"

    def test_exact_thresholds(self):
        assert format_resistance(1000) == "1 kΩ"
        assert format_resistance(1e6) == "1 MΩ"

    def test_four_significant_digits(self):
        assert format_resistance(12346) == "12.35 kΩ"
        assert format_resistance(999_999) == "1000 kΩ"

    def test_no_giga_tier(self):
        assert format_resistance(4.7e9) == "4700 MΩ"

    def test_sub_ohm_stays_in_ohms(self):
        assert format_resistance(0.47) == "0.47 Ω"


class TestFormatGeneral:
    def test_integer_valued(self):
        assert format_general(4700.0) == "4700"

    def test_six_digits(self):
        assert format_general(1 / 3) == "0.333333"

    def test_exponent_form(self):
        assert format_general(1e-5) == "1e-05"
        assert format_general(1234567.0) == "1.23457e+06"

    def test_custom_digits(self):
        assert format_general(3.14159, 3) == "3.14"
