"""Closed-form circuit formulas: resistor networks, RC transients, Ohm's law."""

from __future__ import annotations

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Series / parallel
# ---------------------------------------------------------------------------


def series(resistances: list[float]) -> float:
    """Equivalent resistance of resistors in series."""
    if not resistances:
        raise ValueError("At least one resistor is required")
    return sum(resistances)


def parallel(resistances: list[float]) -> float:
    """Equivalent resistance of resistors in parallel: 1 / sum(1/R)."""
    if not resistances:
        raise ValueError("At least one resistor is required")
    inv_sum = sum(1.0 / r for r in resistances)
    if inv_sum == 0.0:
        raise ValueError("Math error.")
    return 1.0 / inv_sum


# ---------------------------------------------------------------------------
# RC charging / discharging
# ---------------------------------------------------------------------------


def time_constant(r: float, c: float) -> float:
    """tau = R * C, in seconds for ohms and farads."""
    return r * c


def _decay(r: float, c: float, t: float) -> float:
    """e^(-t/RC). Raises ValueError when R*C underflows to zero."""
    tau = time_constant(r, c)
    if tau == 0.0:
        raise ValueError("Math error.")
    return math.exp(-t / tau)


def rc_charge(r: float, c: float, v: float, t: float) -> float:
    """Capacitor voltage while charging from 0: Vc(t) = V (1 - e^(-t/RC))."""
    return v * (1.0 - _decay(r, c, t))


def rc_discharge(r: float, c: float, v0: float, t: float) -> float:
    """Capacitor voltage while discharging from V0: Vc(t) = V0 e^(-t/RC)."""
    return v0 * _decay(r, c, t)


# ---------------------------------------------------------------------------
# Ohm's law & power
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OhmResult:
    voltage: float
    current: float
    resistance: float
    power: float


def _from_vr(v: float, r: float) -> OhmResult:
    i = v / r
    return OhmResult(v, i, r, v * i)


def _from_vi(v: float, i: float) -> OhmResult:
    return OhmResult(v, i, v / i, v * i)


def _from_vp(v: float, p: float) -> OhmResult:
    # R = V^2 / P stays defined when P/V underflows to zero
    return OhmResult(v, p / v, v * v / p, p)


def _from_ir(i: float, r: float) -> OhmResult:
    v = i * r
    return OhmResult(v, i, r, v * i)


def _from_ip(i: float, p: float) -> OhmResult:
    v = p / i
    return OhmResult(v, i, v / i, p)


def _from_rp(r: float, p: float) -> OhmResult:
    v = math.sqrt(p * r)
    return OhmResult(v, v / r, r, p)


# Known pair -> solver, in menu order
_OHM_SOLVERS = {
    "VR": _from_vr,
    "VI": _from_vi,
    "VP": _from_vp,
    "IR": _from_ir,
    "IP": _from_ip,
    "RP": _from_rp,
}

OHM_PAIRS: tuple[str, ...] = tuple(_OHM_SOLVERS)


def solve_ohm(known: str, a: float, b: float) -> OhmResult:
    """Solve V, I, R and P from two known quantities.

    *known* names the pair in order, e.g. ``"VR"`` means ``a`` is the
    voltage and ``b`` the resistance. Raises ValueError for an unknown pair.
    """
    key = known.upper()
    if key not in _OHM_SOLVERS:
        raise ValueError(f"Unknown quantity pair '{known}'. Available: {list(OHM_PAIRS)}")
    return _OHM_SOLVERS[key](a, b)
