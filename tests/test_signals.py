"""Tests for eetoolbox.signals."""

from __future__ import annotations

import math

import numpy as np
import pytest

from eetoolbox.signals import (
    format_sample_table,
    generate,
    period_and_angular_frequency,
    sample_times,
    sine_samples,
    square_samples,
    triangle_samples,
)


class TestFrequency:
    def test_50hz(self):
        period, omega = period_and_angular_frequency(50.0)
        assert period == pytest.approx(0.02)
        assert omega == pytest.approx(100 * math.pi)


class TestSamples:
    def test_sample_times(self):
        np.testing.assert_allclose(sample_times(4.0, 4), [0.0, 0.25, 0.5, 0.75])

    def test_sine_quarter_period_steps(self):
        x = sine_samples(2.0, 1.0, 4.0, 4)
        np.testing.assert_allclose(x, [0.0, 2.0, 0.0, -2.0], atol=1e-12)

    def test_square(self):
        x = square_samples(1.5, 1.0, 4.0, 8)
        np.testing.assert_array_equal(x, [1.5, 1.5, -1.5, -1.5] * 2)

    def test_triangle(self):
        x = triangle_samples(2.0, 1.0, 4.0, 5)
        np.testing.assert_allclose(x, [0.0, 2.0, 0.0, -2.0, 0.0], atol=1e-12)

    def test_sample_count(self):
        assert len(sine_samples(1.0, 10.0, 1000.0, 100)) == 100

    def test_generate_dispatch(self):
        times, values = generate("square", 1.0, 1.0, 4.0, 4)
        np.testing.assert_allclose(times, [0.0, 0.25, 0.5, 0.75])
        np.testing.assert_array_equal(values, [1.0, 1.0, -1.0, -1.0])

    def test_generate_unknown(self):
        with pytest.raises(ValueError, match="Unknown waveform"):
            generate("sawtooth", 1.0, 1.0, 4.0, 4)


class TestSampleTable:
    def test_rows(self):
        text = format_sample_table(np.array([0.0, 0.25]), np.array([0.0, 2.0]))
        lines = text.splitlines()
        assert lines[0] == "n\t t(s)\t\t x[n]"
        assert lines[1] == "0\t 0\t 0"
        assert lines[2] == "1\t 0.25\t 2"
