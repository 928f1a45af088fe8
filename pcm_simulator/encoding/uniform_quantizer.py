"""
Uniform Quantizer Module
========================

This module provides the uniform mid-rise quantizer used by the PCM chain.

The input range [-A, A] is split into L equal cells of width

    step = 2A / L

Each cell is represented by its MIDPOINT:

    level_value(k) = -A + (k + 0.5) * step,   k = 0 .. L-1

so the quantized signal never reaches ±A exactly and the maximum
quantization error is step / 2.

Quantization Process:
1. Clamp to [-A, A - 1e-9]. The upper bound is deliberately just below A:
   a sample of exactly +A would otherwise land in cell L, one past the
   last valid level.
2. level_index = floor((clamped + A) / step)
3. Clamp level_index to [0, L-1] (floating-point guard), before any
   integer conversion
4. Map to the level midpoint
"""

import numpy as np
from typing import Tuple


# Keeps a full-scale sample inside the top cell
UPPER_CLAMP_MARGIN: float = 1e-9

# Largest level index that float64 and int64 both hold exactly
EXACT_LEVEL_INDEX_LIMIT: int = 2 ** 53


class UniformQuantizer:
    """
    Uniform midpoint quantizer over the symmetric range [-A, A].

    Attributes:
        amplitude: Half-width of the input range (A).
        number_of_levels: Number of quantization levels (L >= 2).
        step_size: Width of one level, 2A / L.
    """

    def __init__(self, amplitude: float, number_of_levels: int) -> None:
        """
        Initialize the quantizer.

        Args:
            amplitude: Peak amplitude of the signal to quantize (> 0).
            number_of_levels: Number of quantization levels (>= 2).
        """
        if amplitude <= 0:
            raise ValueError(f"Quantizer amplitude must be positive. Received: {amplitude}")

        if number_of_levels < 2:
            raise ValueError("Quantizer must have at least 2 levels.")

        self.amplitude: float = amplitude
        self.number_of_levels: int = number_of_levels
        self.signal_minimum: float = -amplitude
        self.signal_maximum: float = amplitude
        self.step_size: float = (self.signal_maximum - self.signal_minimum) / number_of_levels

    def quantize_to_level_indices(self, input_values: np.ndarray) -> np.ndarray:
        """
        Map input values to integer level indices in [0, L-1].

        Args:
            input_values: Sample values (scalar or array).

        Returns:
            np.ndarray: Level indices as int64, or as Python ints (object
            dtype) when L - 1 exceeds EXACT_LEVEL_INDEX_LIMIT.
        """
        clamped_values: np.ndarray = np.clip(
            input_values,
            self.signal_minimum,
            self.signal_maximum - UPPER_CLAMP_MARGIN
        )

        scaled_values: np.ndarray = np.floor(
            (clamped_values - self.signal_minimum) / self.step_size
        )

        if self.number_of_levels - 1 <= EXACT_LEVEL_INDEX_LIMIT:
            return np.clip(scaled_values, 0, self.number_of_levels - 1).astype(np.int64)

        # float(L - 1) may round up to L here, so clamp on exact ints
        return np.frompyfunc(self._clamp_level_index, 1, 1)(scaled_values)

    def _clamp_level_index(self, scaled_value: float) -> int:
        return min(max(int(scaled_value), 0), self.number_of_levels - 1)

    def get_level_values(self, level_indices: np.ndarray) -> np.ndarray:
        """Return the midpoint value of each level index."""
        return self.signal_minimum + (np.asarray(level_indices, dtype=float) + 0.5) * self.step_size

    def quantize_signal(self, input_values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Quantize a whole signal.

        Args:
            input_values: Sample values.

        Returns:
            Tuple of (level_indices, quantized_values).
        """
        level_indices: np.ndarray = self.quantize_to_level_indices(input_values)
        quantized_values: np.ndarray = self.get_level_values(level_indices)
        return level_indices, quantized_values

    def quantize(self, input_value: float) -> float:
        """Quantize a single input value to its level midpoint."""
        level_index = self.quantize_to_level_indices(np.asarray(input_value))
        return float(self.get_level_values(level_index))

    def get_number_of_levels(self) -> int:
        """Return the number of quantization levels."""
        return self.number_of_levels

    def get_output_range(self) -> Tuple[float, float]:
        """Return the (min, max) output values, i.e. the outermost midpoints."""
        return (
            float(self.get_level_values(0)),
            float(self.get_level_values(self.number_of_levels - 1))
        )
