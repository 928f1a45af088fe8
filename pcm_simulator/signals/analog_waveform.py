"""
Analog Waveform
===============

This module models the continuous "analog" input of the PCM chain: a pure
sinusoid

    x(t) = amplitude * sin(2 * π * frequency * t + phase)

It provides:
1. evaluate_waveform: the waveform at arbitrary time(s)
2. render_analog_waveform: a dense trace of the waveform for display

The dense trace only exists to draw a smooth curve. Nothing downstream of
it (sampling, quantization, error, SNR) ever reads its values; the sampler
evaluates the waveform directly on its own time grid.
"""

import math

import numpy as np
from typing import TYPE_CHECKING, Union

from .timed_signal import TimedSignal

if TYPE_CHECKING:
    from ..simulation.signal_parameters import SignalParameters


# Aim for roughly this many points per signal period
POINTS_PER_CYCLE: int = 200

# Never draw fewer points than this, even for very slow/short signals
MINIMUM_ANALOG_POINTS: int = 500

# Tolerance used when deciding whether the trace already reaches end time
TIME_TOLERANCE_SECONDS: float = 1e-9


def evaluate_waveform(
    time_seconds: Union[float, np.ndarray],
    frequency_hz: float,
    amplitude: float,
    phase_radians: float
) -> Union[float, np.ndarray]:
    """
    Evaluate the analog sinusoid at one or more time instants.

    Args:
        time_seconds: A scalar time or an array of times.
        frequency_hz: Signal frequency in Hertz.
        amplitude: Peak amplitude.
        phase_radians: Initial phase in radians.

    Returns:
        The waveform value(s), same shape as time_seconds.
    """
    angular_frequency_radians_per_second: float = 2.0 * np.pi * frequency_hz
    return amplitude * np.sin(
        angular_frequency_radians_per_second * time_seconds + phase_radians
    )


def compute_analog_point_count(duration_seconds: float, frequency_hz: float) -> int:
    """
    Number of points used to draw the analog trace.

    ~200 points per cycle, with a floor of 500 points so that short or
    low-frequency signals still render smoothly.
    """
    return max(
        MINIMUM_ANALOG_POINTS,
        math.ceil(duration_seconds * frequency_hz * POINTS_PER_CYCLE)
    )


def render_analog_waveform(parameters: "SignalParameters") -> TimedSignal:
    """
    Produce a dense, evenly spaced trace of the waveform over
    [start_time, end_time].

    Points are spaced by duration / (point_count - 1). Accumulated
    floating-point error can leave the last point slightly before end
    time; when it falls short by more than TIME_TOLERANCE_SECONDS an
    explicit terminal point at end time is appended.

    Args:
        parameters: Validated signal parameters.

    Returns:
        TimedSignal: The analog trace.
    """
    start_time: float = parameters.start_time_seconds
    end_time: float = parameters.end_time_seconds
    duration: float = parameters.duration_seconds

    point_count: int = compute_analog_point_count(duration, parameters.frequency_hz)
    analog_time_step: float = duration / (point_count - 1)

    time_axis: np.ndarray = start_time + np.arange(point_count) * analog_time_step

    # ===== TERMINAL POINT =====
    if time_axis[-1] < end_time - TIME_TOLERANCE_SECONDS:
        time_axis = np.append(time_axis, end_time)

    values: np.ndarray = evaluate_waveform(
        time_axis,
        parameters.frequency_hz,
        parameters.amplitude,
        parameters.phase_radians
    )

    return TimedSignal(time_axis_seconds=time_axis, values=values)
