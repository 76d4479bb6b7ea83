"""Engineering-notation display for resistances and general results."""

from __future__ import annotations

# Resistance display tiers, largest first. No sub-ohm tiers: resistances
# entered or decoded here are never displayed in milli/micro ohms.
_RESISTANCE_PREFIXES = [
    (1e6, "M"),
    (1e3, "k"),
]


def format_general(value: float, digits: int = 6) -> str:
    """Format *value* with *digits* significant digits, C ``%g`` style.

    Examples: 4700.0 -> "4700", 1e-05 -> "1e-05", 0.333333333 -> "0.333333"
    """
    return f"{value:.{digits}g}"


def format_resistance(value: float) -> str:
    """Format a resistance with the most readable unit (Ω, kΩ or MΩ).

    Uses 4 significant digits: 4700 -> "4.7 kΩ", 999 -> "999 Ω",
    2_500_000 -> "2.5 MΩ".
    """
    for threshold, prefix in _RESISTANCE_PREFIXES:
        if abs(value) >= threshold:
            return f"{format_general(value / threshold, 4)} {prefix}Ω"
    return f"{format_general(value, 4)} Ω"
