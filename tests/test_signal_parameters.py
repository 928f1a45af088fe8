import dataclasses
import math

import pytest

from pcm_simulator.simulation.signal_parameters import (
    InvalidParameterError,
    SignalParameters,
    validate_signal_parameters,
)


def _raw(**overrides):
    values = {
        "frequency_hz": 1.0,
        "amplitude": 1.0,
        "phase_degrees": 0.0,
        "sampling_rate_hz": 10.0,
        "quantization_levels": 4,
        "start_time_seconds": 0.0,
        "end_time_seconds": 1.0,
    }
    values.update(overrides)
    return values


class TestValidateSignalParameters:
    def test_valid_values_have_no_problems(self):
        report = validate_signal_parameters(**_raw())
        assert report.is_valid
        assert report.problems == []
        assert report.get_message() == ""

    @pytest.mark.parametrize(
        "overrides, field_name, message",
        [
            ({"frequency_hz": 0.0}, "frequency_hz", "Frequency must be > 0."),
            ({"frequency_hz": math.nan}, "frequency_hz", "Frequency must be > 0."),
            ({"amplitude": -1.0}, "amplitude", "Amplitude must be > 0."),
            ({"phase_degrees": math.nan}, "phase_degrees", "Phase must be a number."),
            ({"sampling_rate_hz": 0.0}, "sampling_rate_hz", "Sampling Rate must be > 0."),
            ({"quantization_levels": 1}, "quantization_levels", "Quantization Levels must be an integer ≥ 2."),
            ({"quantization_levels": 4.5}, "quantization_levels", "Quantization Levels must be an integer ≥ 2."),
            ({"start_time_seconds": -0.5}, "start_time_seconds", "Start Time must be ≥ 0."),
            ({"end_time_seconds": 0.0}, "end_time_seconds", "End Time must be greater than Start Time."),
        ],
    )
    def test_single_error(self, overrides, field_name, message):
        report = validate_signal_parameters(**_raw(**overrides))

        assert not report.is_valid
        assert report.errors[0].field_name == field_name
        assert report.errors[0].message == message

    def test_duration_above_maximum(self):
        report = validate_signal_parameters(**_raw(end_time_seconds=25.0))

        assert not report.is_valid
        assert report.errors[0].message == "Time range duration (25.00s) exceeds maximum (20s)."

    def test_custom_maximum_duration(self):
        report = validate_signal_parameters(**_raw(end_time_seconds=25.0), maximum_duration_seconds=30.0)
        assert report.is_valid

    def test_sub_nyquist_rate_is_only_a_warning(self):
        report = validate_signal_parameters(**_raw(frequency_hz=10.0, sampling_rate_hz=15.0))

        assert report.is_valid
        assert len(report.warnings) == 1
        assert "Nyquist rate (20.0 Hz)" in report.warnings[0].message

    def test_every_problem_is_collected(self):
        report = validate_signal_parameters(
            **_raw(frequency_hz=-1.0, amplitude=0.0, quantization_levels=0)
        )

        assert [problem.field_name for problem in report.errors] == [
            "frequency_hz",
            "amplitude",
            "quantization_levels",
        ]
        assert report.get_message() == (
            "Frequency must be > 0. Amplitude must be > 0. "
            "Quantization Levels must be an integer ≥ 2."
        )

    def test_non_numeric_values(self):
        report = validate_signal_parameters(**_raw(amplitude="1.0", phase_degrees=None))
        assert {problem.field_name for problem in report.errors} == {"amplitude", "phase_degrees"}

    def test_integer_too_large_for_a_float(self):
        report = validate_signal_parameters(**_raw(quantization_levels=10 ** 400))

        assert not report.is_valid
        assert [problem.field_name for problem in report.errors] == ["quantization_levels"]


class TestSignalParameters:
    def test_derived_quantities(self, parameters_factory):
        parameters = parameters_factory(phase_degrees=90.0, start_time_seconds=0.5, end_time_seconds=2.0)

        assert parameters.duration_seconds == pytest.approx(1.5)
        assert parameters.phase_radians == pytest.approx(math.pi / 2)
        assert parameters.sampling_interval_seconds == pytest.approx(0.1)
        assert parameters.nyquist_rate_hz == pytest.approx(2.0)
        assert parameters.quantization_step == pytest.approx(0.5)
        assert parameters.bits_per_sample == 2

    def test_invalid_value_raises_structured_error(self, parameters_factory):
        with pytest.raises(InvalidParameterError) as excinfo:
            parameters_factory(sampling_rate_hz=-10.0)

        assert excinfo.value.field_name == "sampling_rate_hz"
        assert isinstance(excinfo.value, ValueError)
        assert "Sampling Rate must be > 0." in str(excinfo.value)

    def test_integer_too_large_for_a_float_raises_structured_error(self, parameters_factory):
        with pytest.raises(InvalidParameterError) as excinfo:
            parameters_factory(quantization_levels=10 ** 400)

        assert excinfo.value.field_name == "quantization_levels"

    def test_reversed_time_range_raises(self, parameters_factory):
        with pytest.raises(InvalidParameterError) as excinfo:
            parameters_factory(start_time_seconds=2.0, end_time_seconds=1.0)
        assert excinfo.value.field_name == "end_time_seconds"

    def test_integral_float_levels_are_normalised(self, parameters_factory):
        parameters = parameters_factory(quantization_levels=8.0)
        assert parameters.quantization_levels == 8
        assert isinstance(parameters.quantization_levels, int)

    def test_parameters_are_immutable(self, boundary_parameters):
        with pytest.raises(dataclasses.FrozenInstanceError):
            boundary_parameters.amplitude = 2.0

    def test_warnings_do_not_block_construction(self, parameters_factory):
        parameters = parameters_factory(frequency_hz=6.0, sampling_rate_hz=10.0)
        assert [problem.field_name for problem in parameters.get_warnings()] == ["sampling_rate_hz"]

    def test_summary_dict(self, boundary_parameters):
        summary = boundary_parameters.get_summary_dict()
        assert summary["quantization_levels"] == 4
        assert summary["bits_per_sample"] == 2
        assert summary["duration_seconds"] == pytest.approx(1.0)
