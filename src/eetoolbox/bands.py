"""Fixed 4-band resistor color-code tables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BandEntry:
    """One selectable color in a band table."""

    index: int
    label: str
    value: float | None = None


# Band 1 & 2: significant digits (index == digit)
DIGIT_BANDS: tuple[BandEntry, ...] = tuple(
    BandEntry(i, f"{i} {name}", float(i))
    for i, name in enumerate(
        (
            "Black",
            "Brown",
            "Red",
            "Orange",
            "Yellow",
            "Green",
            "Blue",
            "Violet",
            "Grey",
            "White",
        )
    )
)

# Band 3: multiplier. Gold and silver (10, 11) are fractional, not 10**index.
MULTIPLIER_BANDS: tuple[BandEntry, ...] = (
    BandEntry(0, "0 Black x1", 1.0),
    BandEntry(1, "1 Brown x10", 10.0),
    BandEntry(2, "2 Red x100", 100.0),
    BandEntry(3, "3 Orange x1k", 1e3),
    BandEntry(4, "4 Yellow x10k", 1e4),
    BandEntry(5, "5 Green x100k", 1e5),
    BandEntry(6, "6 Blue x1M", 1e6),
    BandEntry(7, "7 Violet x10M", 1e7),
    BandEntry(8, "8 Grey x100M", 1e8),
    BandEntry(9, "9 White x1G", 1e9),
    BandEntry(10, "10 Gold x0.1", 0.1),
    BandEntry(11, "11 Silver x0.01", 0.01),
)

# Band 4: tolerance (percent)
TOLERANCE_BANDS: tuple[BandEntry, ...] = (
    BandEntry(0, "0 Brown ±1%", 1.0),
    BandEntry(1, "1 Red ±2%", 2.0),
    BandEntry(2, "2 Green ±0.5%", 0.5),
    BandEntry(3, "3 Blue ±0.25%", 0.25),
    BandEntry(4, "4 Violet ±0.1%", 0.1),
    BandEntry(5, "5 Grey ±0.05%", 0.05),
    BandEntry(6, "6 Gold ±5%", 5.0),
    BandEntry(7, "7 Silver ±10%", 10.0),
)

TOLERANCE_TEXT: tuple[str, ...] = (
    "±1%",
    "±2%",
    "±0.5%",
    "±0.25%",
    "±0.1%",
    "±0.05%",
    "±5%",
    "±10%",
)

MAX_DIGIT = len(DIGIT_BANDS) - 1
MAX_MULTIPLIER = len(MULTIPLIER_BANDS) - 1
MAX_TOLERANCE = len(TOLERANCE_BANDS) - 1

# Largest integer power-of-ten multiplier (White, x1G)
MAX_DECADE = 9

_LEGEND = """\
4-band meaning:
  Band 1: 1st digit
  Band 2: 2nd digit
  Band 3: multiplier
  Band 4: tolerance"""


def _lookup(table: tuple[BandEntry, ...], index: int) -> BandEntry:
    if not 0 <= index < len(table):
        raise IndexError(f"Band index {index} out of range 0-{len(table) - 1}")
    return table[index]


def digit_label(index: int) -> str:
    return _lookup(DIGIT_BANDS, index).label


def multiplier_label(index: int) -> str:
    return _lookup(MULTIPLIER_BANDS, index).label


def multiplier_value(index: int) -> float:
    """Return the scale factor for a multiplier band (tabulated, never computed)."""
    return _lookup(MULTIPLIER_BANDS, index).value


def tolerance_label(index: int) -> str:
    return _lookup(TOLERANCE_BANDS, index).label


def tolerance_value_text(index: int) -> str:
    _lookup(TOLERANCE_BANDS, index)
    return TOLERANCE_TEXT[index]


def format_table(title: str, entries: tuple[BandEntry, ...]) -> str:
    """Render a band table as a heading followed by one label per line."""
    lines = [f"== {title} =="]
    lines.extend(entry.label for entry in entries)
    return "\n".join(lines)


def digit_table() -> str:
    return format_table("Digit Color Table (Band 1 & 2)", DIGIT_BANDS)


def multiplier_table() -> str:
    return format_table("Multiplier Color Table (Band 3)", MULTIPLIER_BANDS)


def tolerance_table() -> str:
    return format_table("Tolerance Color Table (Band 4)", TOLERANCE_BANDS)


def format_all_tables() -> str:
    """Render every band table plus the 4-band legend."""
    return "\n\n".join(
        [
            "=== Resistor Color Code Tables ===",
            digit_table(),
            multiplier_table(),
            tolerance_table(),
            _LEGEND,
        ]
    )
