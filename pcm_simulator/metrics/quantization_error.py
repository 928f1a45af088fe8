"""
Quantization Error
==================

The quantization error of sample n is the difference between the sampled
value and its quantized representative:

    e[n] = x[n] - q[n]

For a midpoint quantizer with step Δ and an in-range input, |e[n]| ≤ Δ/2.
"""

import numpy as np

from ..signals.timed_signal import TimedSignal


def compute_quantization_error(
    sampled_signal: TimedSignal,
    quantized_signal: TimedSignal
) -> TimedSignal:
    """
    Compute the per-sample quantization error.

    Both signals must share the same time axis; the error uses it as is.

    Args:
        sampled_signal: The sampled analog values.
        quantized_signal: The quantized values on the same grid.

    Returns:
        TimedSignal: Error values on the sampling grid.
    """
    if len(sampled_signal) != len(quantized_signal):
        raise ValueError("Sampled and quantized signals have different lengths")

    if not np.array_equal(sampled_signal.time_axis_seconds, quantized_signal.time_axis_seconds):
        raise ValueError("Sampled and quantized signals have different time axes")

    error_values: np.ndarray = sampled_signal.values - quantized_signal.values

    return TimedSignal(
        time_axis_seconds=sampled_signal.time_axis_seconds.copy(),
        values=error_values
    )


def compute_maximum_absolute_error(error_signal: TimedSignal) -> float:
    """Return max |e[n]|, or 0.0 for an empty signal."""
    if len(error_signal) == 0:
        return 0.0
    return float(np.max(np.abs(error_signal.values)))
