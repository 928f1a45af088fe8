"""
Sampler
=======

Uniform sampling of the analog waveform.

Samples are taken at

    t[i] = start_time + i * sampling_interval,   sampling_interval = 1 / fs

The number of grid points is capped at floor(duration / interval) + 1,
but the real stopping rule is a tolerance check: the first time that
exceeds end_time by more than 1e-9 (and every time after it) is dropped.
Both rules are needed to get the right sample count at boundary
durations such as duration = k * interval.

The sample grid produced here is the ONLY time axis used by quantization,
encoding, error analysis and reconstruction.
"""

import math

import numpy as np
from typing import TYPE_CHECKING

from .analog_waveform import evaluate_waveform, TIME_TOLERANCE_SECONDS
from .timed_signal import TimedSignal

if TYPE_CHECKING:
    from ..simulation.signal_parameters import SignalParameters


def compute_sample_grid(
    start_time_seconds: float,
    end_time_seconds: float,
    sampling_interval_seconds: float
) -> np.ndarray:
    """
    Compute the sampling instants for the interval [start, end].

    Args:
        start_time_seconds: Time of the first sample.
        end_time_seconds: Last time that may be sampled (within tolerance).
        sampling_interval_seconds: Spacing between samples.

    Returns:
        np.ndarray: Sample times, strictly increasing.
    """
    duration: float = end_time_seconds - start_time_seconds

    # Safety cap on the loop length
    maximum_number_of_samples: int = math.floor(duration / sampling_interval_seconds) + 1

    candidate_times: np.ndarray = (
        start_time_seconds
        + np.arange(maximum_number_of_samples) * sampling_interval_seconds
    )

    # Stopping rule: cut at the first time past end_time + tolerance
    overshoot: np.ndarray = np.nonzero(
        candidate_times > end_time_seconds + TIME_TOLERANCE_SECONDS
    )[0]
    if len(overshoot) > 0:
        candidate_times = candidate_times[:overshoot[0]]

    return candidate_times


def sample_waveform(parameters: "SignalParameters") -> TimedSignal:
    """
    Sample the analog waveform on the uniform grid.

    Args:
        parameters: Validated signal parameters.

    Returns:
        TimedSignal: The sampled signal, one point per sampling instant.
    """
    sample_times: np.ndarray = compute_sample_grid(
        parameters.start_time_seconds,
        parameters.end_time_seconds,
        parameters.sampling_interval_seconds
    )

    sample_values: np.ndarray = evaluate_waveform(
        sample_times,
        parameters.frequency_hz,
        parameters.amplitude,
        parameters.phase_radians
    )

    return TimedSignal(time_axis_seconds=sample_times, values=sample_values)
