"""
Zero-Order Hold Reconstruction
==============================

This module implements zero-order hold (ZOH) reconstruction of the
quantized samples.

A ZOH output holds every quantized value constant until the next sample
arrives. To draw that staircase with connected points, two points are
emitted at every sample time t[i] (i > 0):

    (t[i], q[i-1])   closes the previous hold
    (t[i], q[i])     starts the new hold

which produces the vertical step of the ZOH when plotted.

First segment:
    The hold starts from the quantized waveform value at start_time. The
    closing point of the first sample is emitted only when that sample
    lies exactly at start_time; it then repeats the first value, which is
    a harmless zero-height step. The sampler always places the first
    sample at start_time, so in practice every sample contributes two
    points.

Final segment:
    After the last sample the hold is extended to
        min(end_time, last_sample_time + sampling_interval)
    provided that lies more than 1e-9 after the last sample, so the trace
    reaches (or approaches) end_time instead of stopping at the last
    sample.
"""

import numpy as np
from typing import List, Optional

from ..signals.timed_signal import TimedSignal


# Minimum extension for the final hold point to be emitted
TIME_TOLERANCE_SECONDS: float = 1e-9


class ZeroOrderHold:
    """
    Zero-order hold reconstructor for a uniformly sampled signal.

    Attributes:
        start_time_seconds: Start of the observation interval.
        end_time_seconds: End of the observation interval.
        sampling_interval_seconds: Spacing between samples.
    """

    def __init__(
        self,
        start_time_seconds: float,
        end_time_seconds: float,
        sampling_interval_seconds: float
    ) -> None:
        """
        Initialize the reconstructor.

        Args:
            start_time_seconds: Start of the observation interval.
            end_time_seconds: End of the observation interval.
            sampling_interval_seconds: Spacing between samples (> 0).
        """
        if sampling_interval_seconds <= 0:
            raise ValueError("Sampling interval must be positive.")

        self.start_time_seconds: float = start_time_seconds
        self.end_time_seconds: float = end_time_seconds
        self.sampling_interval_seconds: float = sampling_interval_seconds

    def reconstruct(
        self,
        quantized_signal: TimedSignal,
        initial_hold_value: Optional[float] = None
    ) -> TimedSignal:
        """
        Build the ZOH trace of a quantized signal.

        Args:
            quantized_signal: Quantized samples on the sampling grid.
            initial_hold_value: Quantized waveform value at start_time.
                Defaults to the first quantized sample.

        Returns:
            TimedSignal: The reconstructed staircase trace.
        """
        number_of_samples: int = len(quantized_signal)
        if number_of_samples == 0:
            return TimedSignal.empty()

        sample_times: np.ndarray = quantized_signal.time_axis_seconds
        quantized_values: np.ndarray = quantized_signal.values

        if initial_hold_value is None:
            initial_hold_value = float(quantized_values[0])

        reconstructed_times: List[float] = []
        reconstructed_values: List[float] = []
        held_value: float = initial_hold_value

        # ===== STEPS AT EACH SAMPLE =====
        for sample_index in range(number_of_samples):
            sample_time: float = float(sample_times[sample_index])
            quantized_value: float = float(quantized_values[sample_index])

            if sample_index > 0 or sample_time == self.start_time_seconds:
                reconstructed_times.append(sample_time)
                reconstructed_values.append(held_value)

            reconstructed_times.append(sample_time)
            reconstructed_values.append(quantized_value)
            held_value = quantized_value

        # ===== EXTEND THE FINAL HOLD =====
        last_sample_time: float = float(sample_times[-1])
        final_time: float = min(
            self.end_time_seconds,
            last_sample_time + self.sampling_interval_seconds
        )
        if final_time > last_sample_time + TIME_TOLERANCE_SECONDS:
            reconstructed_times.append(final_time)
            reconstructed_values.append(held_value)

        return TimedSignal(
            time_axis_seconds=np.array(reconstructed_times),
            values=np.array(reconstructed_values)
        )
