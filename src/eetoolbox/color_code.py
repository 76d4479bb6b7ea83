"""Resistor color code: bands to resistance and resistance to bands.

Encoding multiplies the two significant digits by the tabulated multiplier.
Decoding normalizes a resistance to two significant digits and a power-of-ten
exponent, rounding half up and carrying into the next decade when rounding
produces three digits (99.6 -> 100 -> 10 at one decade higher).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from eetoolbox.bands import (
    MAX_DECADE,
    digit_label,
    multiplier_label,
    multiplier_value,
    tolerance_label,
    tolerance_value_text,
)
from eetoolbox.notation import format_general, format_resistance


@dataclass(frozen=True)
class ResistorReading:
    """Band selections for a 4-band resistor."""

    digit1: int
    digit2: int
    multiplier_index: int
    tolerance_index: int

    @property
    def resistance(self) -> float:
        return encode(self.digit1, self.digit2, self.multiplier_index)

    @property
    def tolerance_text(self) -> str:
        return tolerance_value_text(self.tolerance_index)

    def band_labels(self) -> list[str]:
        return [
            digit_label(self.digit1),
            digit_label(self.digit2),
            multiplier_label(self.multiplier_index),
            tolerance_label(self.tolerance_index),
        ]

    def summary(self) -> str:
        """One-line log entry for this reading."""
        return (
            f"[Color→Resistance] ({self.digit1},{self.digit2},"
            f"m={self.multiplier_index},t={self.tolerance_index}) = "
            f"{format_general(self.resistance)} Ω, tol {self.tolerance_text}"
        )


@dataclass(frozen=True)
class DecodedBands:
    """Suggested first three bands for a resistance. Tolerance is not inferred."""

    resistance: float
    digit1: int
    digit2: int
    multiplier_exponent: int

    @property
    def approx_resistance(self) -> float:
        return encode(self.digit1, self.digit2, self.multiplier_exponent)

    def band_labels(self) -> list[str]:
        return [
            digit_label(self.digit1),
            digit_label(self.digit2),
            multiplier_label(self.multiplier_exponent),
        ]

    def summary(self) -> str:
        return (
            f"[Resistance→Color] R={format_general(self.resistance)} → "
            f"({self.digit1},{self.digit2},m={self.multiplier_exponent})"
        )


def encode(digit1: int, digit2: int, multiplier_index: int) -> float:
    """Return the resistance in ohms for two digit bands and a multiplier band."""
    base = digit1 * 10 + digit2
    return base * multiplier_value(multiplier_index)


def decode(resistance: float) -> DecodedBands:
    """Convert a positive resistance to two significant digits and an exponent.

    The exponent never exceeds 9 (x1G): larger resistances are clamped
    rather than rejected, and a rounding carry at the cap saturates the
    digits at 99 instead of stepping onto the fractional gold band.
    """
    base = resistance
    exponent = 0

    while base >= 100 and exponent < MAX_DECADE:
        base /= 10
        exponent += 1
    while base < 10 and exponent > 0:
        base *= 10
        exponent -= 1

    rounded = math.floor(base + 0.5)

    # Carry: rounding pushed two digits into three
    if rounded >= 100:
        if exponent < MAX_DECADE:
            rounded = 10
            exponent += 1
        else:
            rounded = 99

    return DecodedBands(
        resistance=resistance,
        digit1=rounded // 10,
        digit2=rounded % 10,
        multiplier_exponent=exponent,
    )


def format_reading(reading: ResistorReading) -> str:
    """Render the result block shown after a color→resistance conversion."""
    return "\n".join(
        [
            "--- Result ---",
            "Bands: " + " | ".join(reading.band_labels()),
            f"Approx resistance: {format_resistance(reading.resistance)}",
            f"Tolerance: {reading.tolerance_text}",
        ]
    )


def format_decoded(decoded: DecodedBands) -> str:
    """Render the suggested-colors block shown after a resistance→color conversion."""
    band1, band2, band3 = decoded.band_labels()
    return "\n".join(
        [
            "--- Suggested Colors ---",
            f"Approx resistance: {format_resistance(decoded.resistance)}",
            f"Band 1: {band1}",
            f"Band 2: {band2}",
            f"Band 3: {band3}",
            "Band 4: (choose based on component tolerance)",
        ]
    )
