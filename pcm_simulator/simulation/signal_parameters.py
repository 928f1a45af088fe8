"""
Signal Parameters
=================

This module provides the input parameters of a PCM pipeline run and their
validation.

Two entry points are provided:

1. validate_signal_parameters(): takes raw, possibly malformed values (NaN,
   non-integer level counts, reversed time ranges) and collects EVERY
   problem into a ValidationReport. Intended for user-facing front ends
   that want to show all messages at once.

2. SignalParameters: the immutable, validated parameter set consumed by the
   pipeline. Construction fails fast with InvalidParameterError when any
   error is found; warnings (e.g. sampling below the Nyquist rate) do not
   block construction.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from ..encoding.pcm_encoder import compute_bits_per_sample


# Longest time range (end - start) accepted, in seconds
MAXIMUM_DURATION_SECONDS: float = 20.0

# Defaults used by the command-line front end
DEFAULT_FREQUENCY_HZ: float = 5.0
DEFAULT_AMPLITUDE: float = 1.0
DEFAULT_PHASE_DEGREES: float = 0.0
DEFAULT_SAMPLING_RATE_HZ: float = 50.0
DEFAULT_QUANTIZATION_LEVELS: int = 8
DEFAULT_START_TIME_SECONDS: float = 0.0
DEFAULT_END_TIME_SECONDS: float = 1.0


@dataclass(frozen=True)
class ParameterProblem:
    """
    One validation finding.

    Attributes:
        field_name: Name of the offending SignalParameters field.
        message: Human-readable description.
        is_warning: True for non-blocking findings.
    """
    field_name: str
    message: str
    is_warning: bool = False


@dataclass
class ValidationReport:
    """All findings of one validation pass."""
    problems: List[ParameterProblem] = field(default_factory=list)

    @property
    def errors(self) -> List[ParameterProblem]:
        return [problem for problem in self.problems if not problem.is_warning]

    @property
    def warnings(self) -> List[ParameterProblem]:
        return [problem for problem in self.problems if problem.is_warning]

    @property
    def is_valid(self) -> bool:
        """True when there are no errors (warnings are allowed)."""
        return len(self.errors) == 0

    def get_message(self) -> str:
        """All messages on one line, separated by single spaces."""
        return " ".join(problem.message for problem in self.problems)


class InvalidParameterError(ValueError):
    """
    Raised when a SignalParameters instance violates a precondition.

    Attributes:
        field_name: The first offending field.
        problems: Every error found during validation.
    """

    def __init__(self, problems: List[ParameterProblem]) -> None:
        self.problems: List[ParameterProblem] = list(problems)
        self.field_name: str = self.problems[0].field_name if self.problems else ""
        super().__init__(" ".join(problem.message for problem in self.problems))


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def _is_integer(value: Any) -> bool:
    if not _is_number(value):
        return False
    return float(value).is_integer()


def validate_signal_parameters(
    frequency_hz: Any,
    amplitude: Any,
    phase_degrees: Any,
    sampling_rate_hz: Any,
    quantization_levels: Any,
    start_time_seconds: Any,
    end_time_seconds: Any,
    maximum_duration_seconds: float = MAXIMUM_DURATION_SECONDS
) -> ValidationReport:
    """
    Check raw parameter values and collect every problem.

    Checks performed:
    - frequency, amplitude and sampling rate must be positive numbers
    - phase must be a number
    - quantization levels must be an integer >= 2
    - start and end time must be numbers >= 0
    - end time must be greater than start time
    - the duration must not exceed maximum_duration_seconds
    - WARNING when the sampling rate is below the Nyquist rate (2 * f)

    Args:
        frequency_hz .. end_time_seconds: Raw values, any type.
        maximum_duration_seconds: Longest accepted time range.

    Returns:
        ValidationReport: Errors and warnings, in check order.
    """
    problems: List[ParameterProblem] = []

    # ===== INDIVIDUAL VALUES =====
    if not _is_number(frequency_hz) or frequency_hz <= 0:
        problems.append(ParameterProblem("frequency_hz", "Frequency must be > 0."))

    if not _is_number(amplitude) or amplitude <= 0:
        problems.append(ParameterProblem("amplitude", "Amplitude must be > 0."))

    if not _is_number(phase_degrees):
        problems.append(ParameterProblem("phase_degrees", "Phase must be a number."))

    if not _is_number(sampling_rate_hz) or sampling_rate_hz <= 0:
        problems.append(ParameterProblem("sampling_rate_hz", "Sampling Rate must be > 0."))

    if not _is_integer(quantization_levels) or quantization_levels < 2:
        problems.append(ParameterProblem(
            "quantization_levels",
            "Quantization Levels must be an integer ≥ 2."
        ))

    if not _is_number(start_time_seconds) or start_time_seconds < 0:
        problems.append(ParameterProblem("start_time_seconds", "Start Time must be ≥ 0."))

    if not _is_number(end_time_seconds) or end_time_seconds < 0:
        problems.append(ParameterProblem("end_time_seconds", "End Time must be ≥ 0."))

    # ===== TIME RANGE =====
    if _is_number(start_time_seconds) and _is_number(end_time_seconds):
        if end_time_seconds <= start_time_seconds:
            problems.append(ParameterProblem(
                "end_time_seconds",
                "End Time must be greater than Start Time."
            ))
        else:
            duration_seconds: float = end_time_seconds - start_time_seconds
            if duration_seconds > maximum_duration_seconds:
                problems.append(ParameterProblem(
                    "end_time_seconds",
                    f"Time range duration ({duration_seconds:.2f}s) exceeds "
                    f"maximum ({maximum_duration_seconds:g}s)."
                ))

            # Nyquist check, only meaningful when both rates are usable
            if (
                _is_number(frequency_hz) and frequency_hz > 0
                and _is_number(sampling_rate_hz) and sampling_rate_hz > 0
                and sampling_rate_hz < 2 * frequency_hz
            ):
                problems.append(ParameterProblem(
                    "sampling_rate_hz",
                    f"Warning: Sampling Rate ({sampling_rate_hz:g} Hz) may be below "
                    f"Nyquist rate ({2 * frequency_hz:.1f} Hz). Aliasing may occur.",
                    is_warning=True
                ))

    return ValidationReport(problems=problems)


@dataclass(frozen=True)
class SignalParameters:
    """
    Immutable input of one PCM pipeline run.

    Attributes:
        frequency_hz: Frequency of the analog sinusoid (> 0).
        amplitude: Peak amplitude of the sinusoid, also the quantizer
            full-scale (> 0).
        phase_degrees: Initial phase in degrees.
        sampling_rate_hz: Sampling frequency (> 0).
        quantization_levels: Number of quantization levels (integer >= 2).
        start_time_seconds: Start of the observation interval (>= 0).
        end_time_seconds: End of the observation interval (> start).
        maximum_duration_seconds: Longest accepted interval.

    Raises:
        InvalidParameterError: On construction, if any value is invalid.
    """
    frequency_hz: float
    amplitude: float
    phase_degrees: float
    sampling_rate_hz: float
    quantization_levels: int
    start_time_seconds: float
    end_time_seconds: float
    maximum_duration_seconds: float = MAXIMUM_DURATION_SECONDS

    def __post_init__(self) -> None:
        """Validate parameters and normalise the level count to int."""
        report: ValidationReport = validate_signal_parameters(
            self.frequency_hz,
            self.amplitude,
            self.phase_degrees,
            self.sampling_rate_hz,
            self.quantization_levels,
            self.start_time_seconds,
            self.end_time_seconds,
            maximum_duration_seconds=self.maximum_duration_seconds
        )

        if not report.is_valid:
            raise InvalidParameterError(report.errors)

        object.__setattr__(self, "quantization_levels", int(self.quantization_levels))

    # ===== DERIVED QUANTITIES =====

    @property
    def duration_seconds(self) -> float:
        return self.end_time_seconds - self.start_time_seconds

    @property
    def phase_radians(self) -> float:
        return self.phase_degrees * math.pi / 180.0

    @property
    def sampling_interval_seconds(self) -> float:
        return 1.0 / self.sampling_rate_hz

    @property
    def nyquist_rate_hz(self) -> float:
        """Minimum sampling rate that avoids aliasing: 2 * f."""
        return 2.0 * self.frequency_hz

    @property
    def quantization_step(self) -> float:
        """Width of one quantization level: 2A / L."""
        return (2.0 * self.amplitude) / self.quantization_levels

    @property
    def bits_per_sample(self) -> int:
        return compute_bits_per_sample(self.quantization_levels)

    def get_warnings(self) -> List[ParameterProblem]:
        """Non-blocking findings for these (valid) parameters."""
        return validate_signal_parameters(
            self.frequency_hz,
            self.amplitude,
            self.phase_degrees,
            self.sampling_rate_hz,
            self.quantization_levels,
            self.start_time_seconds,
            self.end_time_seconds,
            maximum_duration_seconds=self.maximum_duration_seconds
        ).warnings

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the parameters."""
        return {
            "frequency_hz": self.frequency_hz,
            "amplitude": self.amplitude,
            "phase_degrees": self.phase_degrees,
            "sampling_rate_hz": self.sampling_rate_hz,
            "quantization_levels": self.quantization_levels,
            "start_time_seconds": self.start_time_seconds,
            "end_time_seconds": self.end_time_seconds,
            "duration_seconds": self.duration_seconds,
            "sampling_interval_seconds": self.sampling_interval_seconds,
            "quantization_step": self.quantization_step,
            "bits_per_sample": self.bits_per_sample
        }
