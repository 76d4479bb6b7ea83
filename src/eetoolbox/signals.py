"""Periodic signal helpers and sampled waveform generation."""

from __future__ import annotations

import math

import numpy as np

from eetoolbox.notation import format_general


def period_and_angular_frequency(frequency: float) -> tuple[float, float]:
    """Return ``(T, omega)`` for a frequency in Hz."""
    return 1.0 / frequency, 2.0 * math.pi * frequency


def sample_times(fs: float, n: int) -> np.ndarray:
    """Sample instants t[n] = n / fs for n = 0..n-1."""
    return np.arange(n) / fs


def sine_samples(amplitude: float, frequency: float, fs: float, n: int) -> np.ndarray:
    """x[n] = A sin(2 pi f n / fs)."""
    t = sample_times(fs, n)
    return amplitude * np.sin(2.0 * np.pi * frequency * t)


def square_samples(amplitude: float, frequency: float, fs: float, n: int) -> np.ndarray:
    """+A for the first half of each period, -A for the second half."""
    phase = np.mod(frequency * sample_times(fs, n), 1.0)
    return np.where(phase < 0.5, amplitude, -amplitude)


def triangle_samples(amplitude: float, frequency: float, fs: float, n: int) -> np.ndarray:
    """Triangle wave in phase with the sine: 0 -> +A -> 0 -> -A -> 0."""
    phase = np.mod(frequency * sample_times(fs, n) + 0.25, 1.0)
    return amplitude * (1.0 - 4.0 * np.abs(phase - 0.5))


WAVEFORMS = {
    "sine": sine_samples,
    "square": square_samples,
    "triangle": triangle_samples,
}


def generate(
    waveform: str, amplitude: float, frequency: float, fs: float, n: int
) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(times, values)`` for a named waveform.

    Raises ValueError for an unknown waveform name.
    """
    if waveform not in WAVEFORMS:
        raise ValueError(f"Unknown waveform '{waveform}'. Available: {sorted(WAVEFORMS)}")
    return sample_times(fs, n), WAVEFORMS[waveform](amplitude, frequency, fs, n)


def format_sample_table(times: np.ndarray, values: np.ndarray) -> str:
    lines = ["n\t t(s)\t\t x[n]"]
    for i, (t, x) in enumerate(zip(times, values)):
        lines.append(f"{i}\t {format_general(float(t))}\t {format_general(float(x))}")
    return "\n".join(lines)
