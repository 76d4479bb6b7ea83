"""Validated console input.

Every numeric value the toolbox works with comes through ``read_int`` or
``read_positive_real``. Both re-prompt until the entry is valid and never
return a bad value. Running out of input is the one fatal condition: it
prints a message and exits with status 1.
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

# Leading whitespace, optional sign, longest numeric prefix (strtol/strtod style)
_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_REAL_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

# strtol saturates at the C long range
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


def _read_line(prompt: str) -> str:
    """Read one line, exiting the process if the input stream is gone."""
    try:
        return input(prompt)
    except EOFError:
        logger.debug("End of input while waiting for %r", prompt)
        print("\nInput error. Exiting.")
        raise SystemExit(1) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None


def _only_blanks(rest: str) -> bool:
    return rest.strip(" \t\r\n") == ""


def parse_int(text: str) -> tuple[int | None, str]:
    """Split *text* into a leading integer and the unparsed remainder.

    Returns ``(None, text)`` when no integer prefix is present.
    """
    m = _INT_RE.match(text)
    if m is None:
        return None, text
    digits = m.group(1)
    try:
        value = int(digits)
    except ValueError:
        # Longer than the int string conversion limit
        value = _LONG_MIN if digits.startswith("-") else _LONG_MAX
    return max(_LONG_MIN, min(_LONG_MAX, value)), text[m.end() :]


def parse_real(text: str) -> tuple[float | None, str]:
    """Split *text* into a leading floating-point literal and the remainder."""
    m = _REAL_RE.match(text)
    if m is None:
        return None, text
    return float(m.group(1)), text[m.end() :]


def read_int(prompt: str, minimum: int, maximum: int) -> int:
    """Prompt until the user enters an integer in ``[minimum, maximum]``."""
    while True:
        line = _read_line(prompt)
        value, rest = parse_int(line)
        if value is None:
            print("Please enter an integer.")
            continue
        if not _only_blanks(rest):
            print("Unexpected characters. Try again.")
            continue
        if value < minimum or value > maximum:
            print(f"Value must be between {minimum} and {maximum}.")
            continue
        return value


def read_positive_real(prompt: str) -> float:
    """Prompt until the user enters a real number strictly greater than zero."""
    while True:
        line = _read_line(prompt)
        value, rest = parse_real(line)
        # "1e999" overflows to inf
        if value is None or not math.isfinite(value):
            print("Enter a valid number.")
            continue
        if not _only_blanks(rest):
            print("Invalid characters. Try again.")
            continue
        if value <= 0.0:
            print("Value must be > 0.")
            continue
        return value


def prompt_yes_no(question: str) -> bool:
    """Ask a yes/no question once. Only an answer starting with y/Y is a yes.

    End of input counts as "no".
    """
    try:
        answer = input(question)
    except EOFError:
        return False
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    return answer[:1] in ("y", "Y")
