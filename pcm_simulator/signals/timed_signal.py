"""
Timed Signal
============

This module provides the data classes used to carry signals between the
stages of the PCM pipeline.

Every stage (analog rendering, sampling, quantization, reconstruction,
error analysis) produces an ordered sequence of (time, value) points.
The points are stored as two parallel numpy arrays so the numeric stages
can work vectorised, while consumers can still index and iterate the
signal point by point.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class TimedSample:
    """
    A single point of a signal.

    Attributes:
        time: Time of the point in seconds.
        value: Amplitude of the signal at that time.
    """
    time: float
    value: float


@dataclass
class TimedSignal:
    """
    Ordered sequence of TimedSample points backed by numpy arrays.

    Points are ordered by non-decreasing time. The zero-order hold trace
    repeats a time value at every step, so strictly increasing time is
    NOT required.

    Attributes:
        time_axis_seconds: Time of each point.
        values: Amplitude of each point.
    """
    time_axis_seconds: np.ndarray
    values: np.ndarray

    def __post_init__(self) -> None:
        self.time_axis_seconds = np.asarray(self.time_axis_seconds, dtype=float)
        self.values = np.asarray(self.values, dtype=float)
        self.validate()

    def validate(self) -> bool:
        """Validate that both arrays are 1-D, equal length and time-ordered."""
        if self.time_axis_seconds.ndim != 1 or self.values.ndim != 1:
            raise ValueError("Time axis and values must be 1-D arrays")

        if len(self.time_axis_seconds) != len(self.values):
            raise ValueError(
                f"Time axis length ({len(self.time_axis_seconds)}) does not "
                f"match values length ({len(self.values)})"
            )

        if np.any(np.diff(self.time_axis_seconds) < 0):
            raise ValueError("Time axis must be non-decreasing")

        return True

    def __len__(self) -> int:
        return len(self.time_axis_seconds)

    def __getitem__(self, index: int) -> TimedSample:
        return TimedSample(
            time=float(self.time_axis_seconds[index]),
            value=float(self.values[index])
        )

    def __iter__(self) -> Iterator[TimedSample]:
        for index in range(len(self)):
            yield self[index]

    def get_number_of_samples(self) -> int:
        """Return the number of points in the signal."""
        return len(self.time_axis_seconds)

    @classmethod
    def empty(cls) -> "TimedSignal":
        """Return a signal with no points."""
        return cls(time_axis_seconds=np.empty(0), values=np.empty(0))
