"""Interactive console menus for the EE toolbox.

Each screen reads validated input through ``eetoolbox.prompts``, computes
with the pure calculation modules, prints the result and offers to save a
one-line summary to the result log.
"""

from __future__ import annotations

import logging

from eetoolbox import bands, circuits, signals
from eetoolbox.color_code import (
    ResistorReading,
    decode,
    format_decoded,
    format_reading,
)
from eetoolbox.notation import format_general as g
from eetoolbox.notation import format_resistance
from eetoolbox.prompts import read_int, read_positive_real
from eetoolbox.result_log import ResultLog, ResultLogError, ask_and_save

logger = logging.getLogger(__name__)

_MAX_RESISTORS = 10
_MAX_SAMPLES = 100

_BANNER = """\
====================================
     Electrical Engineering Toolbox
===================================="""

# ---------------------------------------------------------------------------
# Module 1: resistor color code
# ---------------------------------------------------------------------------


def color_to_resistance(log: ResultLog) -> None:
    print("\n=== Color → Resistance (4-band) ===")

    print("\n" + bands.digit_table())
    d1 = read_int(f"Select Band 1 (0–{bands.MAX_DIGIT}): ", 0, bands.MAX_DIGIT)
    d2 = read_int(f"Select Band 2 (0–{bands.MAX_DIGIT}): ", 0, bands.MAX_DIGIT)

    print("\n" + bands.multiplier_table())
    m = read_int(
        f"Select Multiplier (0–{bands.MAX_MULTIPLIER}): ", 0, bands.MAX_MULTIPLIER
    )

    print("\n" + bands.tolerance_table())
    t = read_int(f"Select Tolerance (0–{bands.MAX_TOLERANCE}): ", 0, bands.MAX_TOLERANCE)

    reading = ResistorReading(d1, d2, m, t)
    print("\n" + format_reading(reading))
    ask_and_save(reading.summary(), log)


def resistance_to_color(log: ResultLog) -> None:
    print("\n=== Resistance → Color (approx) ===")
    print("Uses two significant digits.")

    r = read_positive_real("Enter resistance (Ω): ")
    decoded = decode(r)
    print("\n" + format_decoded(decoded))
    ask_and_save(decoded.summary(), log)


def color_code_menu(log: ResultLog) -> None:
    while True:
        print("\n== Resistor Color Code Tool ==")
        print("1. Color → Resistance")
        print("2. Resistance → Color")
        print("3. Show Tables")
        print("0. Back")

        choice = read_int("Select: ", 0, 3)
        if choice == 0:
            return
        if choice == 1:
            color_to_resistance(log)
        elif choice == 2:
            resistance_to_color(log)
        else:
            print("\n" + bands.format_all_tables())


# ---------------------------------------------------------------------------
# Module 2: series / parallel
# ---------------------------------------------------------------------------


def series_parallel(log: ResultLog) -> None:
    print("\n==== Series / Parallel Resistors ====")

    n = read_int(f"Number of resistors (1–{_MAX_RESISTORS}): ", 1, _MAX_RESISTORS)
    values = [read_positive_real(f"Enter R{i} (Ω): ") for i in range(1, n + 1)]

    print("\nConnection Type:")
    print("1. Series")
    print("2. Parallel")
    mode = read_int("Select: ", 1, 2)

    if mode == 1:
        total = circuits.series(values)
        print("\n--- Series Result ---")
    else:
        try:
            total = circuits.parallel(values)
        except ValueError as exc:
            print(exc)
            return
        print("\n--- Parallel Result ---")

    print(f"Approx resistance: {format_resistance(total)}")
    mode_name = "series" if mode == 1 else "parallel"
    ask_and_save(f"Series/Parallel: n={n}, mode={mode_name} → {g(total)} Ω", log)


# ---------------------------------------------------------------------------
# Module 3: RC charging / discharging
# ---------------------------------------------------------------------------


def rc_charge_discharge(log: ResultLog) -> None:
    print("\n==== RC Charging/Discharging ====")
    print("Use SI units: R(Ω), C(F), t(s)\n")

    r = read_positive_real("Enter R (Ω): ")
    c = read_positive_real("Enter C (F): ")
    print(f"\nTime constant τ = {g(circuits.time_constant(r, c))} s")

    print("\nCalculation mode:")
    print("1. Charging: Vc(t) = V(1 - e^(-t/RC))")
    print("2. Discharging: Vc(t) = V0 e^(-t/RC)")
    mode = read_int("Select: ", 1, 2)

    t = read_positive_real("Enter time t (s): ")

    try:
        if mode == 1:
            v = read_positive_real("Enter supply voltage V (V): ")
            vc = circuits.rc_charge(r, c, v, t)
            heading = "Charging"
            summary = f"RC charge: R={g(r)}, C={g(c)}, V={g(v)}, t={g(t)} → {g(vc)} V"
        else:
            v0 = read_positive_real("Enter initial voltage V0 (V): ")
            vc = circuits.rc_discharge(r, c, v0, t)
            heading = "Discharging"
            summary = f"RC discharge: R={g(r)}, C={g(c)}, V0={g(v0)}, t={g(t)} → {g(vc)} V"
    except ValueError as exc:
        print(exc)
        return

    print(f"\n--- {heading} Result ---")
    print(f"Vc(t = {g(t)} s) = {g(vc)} V")
    ask_and_save(summary, log)


# ---------------------------------------------------------------------------
# Module 4: Ohm's law & power
# ---------------------------------------------------------------------------

_QUANTITY_PROMPTS = {
    "V": "V(V): ",
    "I": "I(A): ",
    "R": "R(Ω): ",
    "P": "P(W): ",
}


def ohm_and_power(log: ResultLog) -> None:
    print("\n==== Ohm’s Law / Power ====")
    print("Choose known quantities:")
    for i, pair in enumerate(circuits.OHM_PAIRS, 1):
        print(f"{i}. {pair[0]} & {pair[1]}")

    choice = read_int("Select: ", 1, len(circuits.OHM_PAIRS))
    pair = circuits.OHM_PAIRS[choice - 1]
    a = read_positive_real(_QUANTITY_PROMPTS[pair[0]])
    b = read_positive_real(_QUANTITY_PROMPTS[pair[1]])
    try:
        result = circuits.solve_ohm(pair, a, b)
    except ValueError as exc:
        print(exc)
        return

    print("\n--- Result ---")
    print(f"Voltage  V = {g(result.voltage)} V")
    print(f"Current  I = {g(result.current)} A")
    print(f"Resistance R = {g(result.resistance)} Ω")
    print(f"Power     P = {g(result.power)} W")

    ask_and_save(
        f"Ohm/Power: V={g(result.voltage)}, I={g(result.current)}, "
        f"R={g(result.resistance)}, P={g(result.power)}",
        log,
    )


# ---------------------------------------------------------------------------
# Module 5: signal generation / analysis
# ---------------------------------------------------------------------------

# Menu option -> waveform name
_WAVEFORM_CHOICES = {2: "sine", 3: "square", 4: "triangle"}


def _frequency_info(log: ResultLog) -> None:
    f = read_positive_real("Enter f (Hz): ")
    period, omega = signals.period_and_angular_frequency(f)

    print("\n--- Result ---")
    print(f"Period T = {g(period)} s")
    print(f"Angular freq ω = {g(omega)} rad/s")
    ask_and_save(f"Signal: f={g(f)} Hz, T={g(period)} s, ω={g(omega)} rad/s", log)


def _sample_waveform(waveform: str, log: ResultLog) -> None:
    if waveform == "sine":
        print("\nSignal: x(t) = A sin(2πft)")
    else:
        print(f"\nSignal: {waveform} wave, amplitude ±A")
    f = read_positive_real("Frequency f (Hz): ")
    amplitude = read_positive_real("Amplitude A: ")
    fs = read_positive_real("Sampling freq fs (Hz): ")
    n = read_int(f"Number of samples (1–{_MAX_SAMPLES}): ", 1, _MAX_SAMPLES)

    times, values = signals.generate(waveform, amplitude, f, fs, n)
    print("\n" + signals.format_sample_table(times, values))

    label = waveform.capitalize()
    ask_and_save(f"{label}: f={g(f)} Hz, A={g(amplitude)}, fs={g(fs)} Hz, N={n}", log)


def signal_menu(log: ResultLog) -> None:
    print("\n==== Signal Generation / Analysis ====")
    while True:
        print("\n1. Given f → T & ω")
        print("2. Generate sine samples")
        print("3. Generate square samples")
        print("4. Generate triangle samples")
        print("0. Back")

        choice = read_int("Select: ", 0, 4)
        if choice == 0:
            return
        if choice == 1:
            _frequency_info(log)
        else:
            _sample_waveform(_WAVEFORM_CHOICES[choice], log)


# ---------------------------------------------------------------------------
# Module 6: file / log tools
# ---------------------------------------------------------------------------


def view_log(log: ResultLog) -> None:
    try:
        text = log.read()
    except ResultLogError:
        print("No file or cannot open (maybe empty).")
        return
    print("\n--- File Start ---")
    print(text, end="")
    print("--- File End ---")


def clear_log(log: ResultLog) -> None:
    try:
        log.clear()
    except ResultLogError:
        print("Failed to clear file.")
        return
    print("File cleared.")


def log_tools_menu(log: ResultLog) -> None:
    while True:
        print("\n==== File & Log Tools ====")
        print(f'Current log file: "{log.path}"')
        print("1. View file")
        print("2. Clear file")
        print("0. Back")

        choice = read_int("Select: ", 0, 2)
        if choice == 0:
            return
        if choice == 1:
            view_log(log)
        else:
            clear_log(log)


# ---------------------------------------------------------------------------
# Main menu
# ---------------------------------------------------------------------------

_MODULES = {
    1: ("Resistor Color Code", color_code_menu),
    2: ("Series/Parallel Resistors", series_parallel),
    3: ("RC Charge/Discharge", rc_charge_discharge),
    4: ("Ohm’s Law & Power", ohm_and_power),
    5: ("Signal Generation/Analysis", signal_menu),
    6: ("File/Log Tools", log_tools_menu),
}


def run(log: ResultLog) -> int:
    """Run the main menu until the user selects 0. Returns the exit status."""
    while True:
        print("\n" + _BANNER)
        for key, (title, _) in _MODULES.items():
            print(f"{key}. {title}")
        print("0. Exit")

        choice = read_int("Select: ", 0, len(_MODULES))
        if choice == 0:
            return 0
        title, handler = _MODULES[choice]
        logger.debug("Entering module %d (%s)", choice, title)
        handler(log)
