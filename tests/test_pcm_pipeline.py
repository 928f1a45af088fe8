import math

import numpy as np
import pytest

from pcm_simulator import PcmPipelineRunner, generate
from pcm_simulator.encoding.pcm_encoder import decode_pcm_code


PROPERTY_CASES = [
    {"quantization_levels": 2},
    {"quantization_levels": 3, "phase_degrees": 45.0},
    {"quantization_levels": 5, "amplitude": 0.3, "sampling_rate_hz": 37.0},
    {"quantization_levels": 8, "frequency_hz": 4.0, "sampling_rate_hz": 100.0, "end_time_seconds": 3.0},
    {"quantization_levels": 16, "phase_degrees": 90.0, "start_time_seconds": 0.3, "end_time_seconds": 1.7},
    {"quantization_levels": 255, "amplitude": 12.0, "frequency_hz": 0.2, "sampling_rate_hz": 3.0},
]


class TestBoundaryScenario:
    def test_sample_count_and_first_sample(self, boundary_parameters):
        result = generate(boundary_parameters)

        assert result.get_number_of_samples() == 11
        assert result.sampled[0].time == 0.0
        assert result.sampled[0].value == 0.0
        assert result.level_indices[0] == 2
        assert result.quantized[0].value == pytest.approx(0.25)
        assert result.bits_per_sample == 2
        assert result.pcm_codes[0] == "10"

    def test_codes_follow_the_sine(self, boundary_parameters):
        codes = generate(boundary_parameters).pcm_codes

        assert codes[1:5] == ["11", "11", "11", "11"]
        assert codes[6:10] == ["00", "00", "00", "00"]

    def test_reconstruction_has_two_points_per_sample(self, boundary_parameters):
        result = generate(boundary_parameters)

        assert len(result.reconstructed) == 22
        assert result.reconstructed[0].value == result.reconstructed[1].value
        assert result.reconstructed.time_axis_seconds[-1] == pytest.approx(1.0)

    def test_echoed_scalars(self, boundary_parameters):
        result = generate(boundary_parameters)

        assert result.amplitude == 1.0
        assert result.start_time_seconds == 0.0
        assert result.end_time_seconds == 1.0
        assert result.sampling_interval_seconds == pytest.approx(0.1)
        assert result.quantization_step == pytest.approx(0.5)

    def test_analog_trace_is_dense(self, boundary_parameters):
        assert len(generate(boundary_parameters).analog) == 500


class TestPipelineProperties:
    @pytest.mark.parametrize("overrides", PROPERTY_CASES)
    def test_channels_are_aligned(self, parameters_factory, overrides):
        result = generate(parameters_factory(**overrides))

        assert result.validate()
        number_of_samples = len(result.sampled)
        assert len(result.quantized) == number_of_samples
        assert len(result.error) == number_of_samples
        assert len(result.pcm_codes) == number_of_samples
        np.testing.assert_array_equal(result.quantized.time_axis_seconds, result.sampled.time_axis_seconds)
        np.testing.assert_array_equal(result.error.time_axis_seconds, result.sampled.time_axis_seconds)

    def test_validate_rejects_codes_that_do_not_decode(self, boundary_parameters):
        result = generate(boundary_parameters)
        result.pcm_codes[0] = "00"

        with pytest.raises(ValueError, match="decode"):
            result.validate()

    @pytest.mark.parametrize("overrides", PROPERTY_CASES)
    def test_quantized_values_on_midpoint_grid(self, parameters_factory, overrides):
        parameters = parameters_factory(**overrides)
        result = generate(parameters)
        amplitude = parameters.amplitude
        step = parameters.quantization_step

        values = result.quantized.values
        assert np.all(values >= -amplitude)
        assert np.all(values < amplitude)

        level_positions = (values + amplitude) / step - 0.5
        np.testing.assert_allclose(level_positions, np.round(level_positions), atol=1e-6)
        assert np.all(np.round(level_positions) >= 0)
        assert np.all(np.round(level_positions) <= parameters.quantization_levels - 1)

    @pytest.mark.parametrize("overrides", PROPERTY_CASES)
    def test_codes_have_fixed_width_and_valid_range(self, parameters_factory, overrides):
        parameters = parameters_factory(**overrides)
        result = generate(parameters)
        expected_width = math.ceil(math.log2(parameters.quantization_levels))

        for code, level_index in zip(result.pcm_codes, result.level_indices):
            assert len(code) == expected_width
            assert decode_pcm_code(code) == level_index
            assert 0 <= decode_pcm_code(code) <= parameters.quantization_levels - 1

    @pytest.mark.parametrize("overrides", PROPERTY_CASES)
    def test_error_identity(self, parameters_factory, overrides):
        result = generate(parameters_factory(**overrides))
        np.testing.assert_allclose(
            result.error.values,
            result.sampled.values - result.quantized.values,
            atol=1e-9,
        )

    @pytest.mark.parametrize("overrides", PROPERTY_CASES)
    def test_error_bounded_by_half_step(self, parameters_factory, overrides):
        parameters = parameters_factory(**overrides)
        result = generate(parameters)
        assert np.all(np.abs(result.error.values) <= parameters.quantization_step / 2 + 1e-9)

    def test_finer_quantization_never_lowers_snr(self, parameters_factory):
        snr_values = [
            generate(
                parameters_factory(
                    frequency_hz=3.0,
                    sampling_rate_hz=1000.0,
                    end_time_seconds=2.0,
                    quantization_levels=levels,
                )
            ).snr_db
            for levels in (4, 8, 16, 32, 64, 128)
        ]
        assert snr_values == sorted(snr_values)

    def test_huge_level_count_gives_infinite_snr(self, parameters_factory):
        result = generate(parameters_factory(quantization_levels=2 ** 30))

        assert result.snr_db == math.inf
        assert result.get_snr_text() == "SNR: ∞ dB"
        assert result.bits_per_sample == 30

    def test_level_count_beyond_int64_keeps_exact_indices(self, parameters_factory):
        result = generate(parameters_factory(quantization_levels=2 ** 64))

        assert result.snr_db == math.inf
        assert result.bits_per_sample == 64
        assert result.pcm_codes[0] == "1" + "0" * 63
        assert all(len(code) == 64 for code in result.pcm_codes)
        assert [decode_pcm_code(code) for code in result.pcm_codes] == list(result.level_indices)
        np.testing.assert_allclose(result.quantized.values, result.sampled.values, atol=1e-8)

    def test_generate_is_idempotent(self, dense_parameters):
        first = generate(dense_parameters)
        second = generate(dense_parameters)

        for channel in ("analog", "sampled", "quantized", "reconstructed", "error"):
            np.testing.assert_array_equal(
                getattr(first, channel).time_axis_seconds,
                getattr(second, channel).time_axis_seconds,
            )
            np.testing.assert_array_equal(getattr(first, channel).values, getattr(second, channel).values)
        assert first.pcm_codes == second.pcm_codes
        assert first.snr_db == second.snr_db
        assert first is not second

    def test_final_hold_extends_toward_end_time(self, parameters_factory):
        result = generate(parameters_factory(sampling_rate_hz=4.0, end_time_seconds=1.1))

        assert len(result.sampled) == 5
        last_point = result.reconstructed[len(result.reconstructed) - 1]
        assert last_point.time == pytest.approx(1.1)
        assert last_point.value == result.quantized[4].value


class TestResultDisplays:
    def test_pcm_output_text(self, boundary_parameters):
        result = generate(boundary_parameters)

        text = result.get_pcm_output_text()

        assert text.split(" ") == result.pcm_codes
        assert text.startswith("10 11")

    def test_pcm_table_rows(self, boundary_parameters):
        rows = generate(boundary_parameters).get_pcm_table_rows()

        assert len(rows) == 11
        assert rows[0] == ["0", "0.0000", "0.0000", "0.2500", "-0.2500", "10"]
        assert rows[1][1] == "0.1000"

    def test_metrics_dict(self, dense_parameters):
        result = generate(dense_parameters)

        metrics = result.get_metrics_dict()

        assert metrics["number_of_samples"] == len(result.sampled)
        assert metrics["bits_per_sample"] == 4
        assert metrics["snr_db"] == result.snr_db
        assert metrics["theoretical_snr_db"] == pytest.approx(25.84)
        assert metrics["maximum_absolute_error"] <= dense_parameters.quantization_step / 2 + 1e-9

    def test_snr_close_to_ideal_converter(self, dense_parameters):
        result = generate(dense_parameters)
        assert result.snr_db == pytest.approx(25.84, abs=1.5)

    def test_print_summary_and_table(self, boundary_parameters, capsys):
        result = generate(boundary_parameters)

        result.print_summary()
        result.print_pcm_table()

        output = capsys.readouterr().out
        assert "PCM RESULTS SUMMARY" in output
        assert result.get_snr_text() in output
        assert "Nyquist Rate:" in output
        assert "PCM Code" in output

    def test_verbose_run_reports_progress(self, boundary_parameters, capsys):
        PcmPipelineRunner(boundary_parameters).run(verbose=True)

        output = capsys.readouterr().out
        assert "[1/5]" in output
        assert "[5/5]" in output
        assert "Quantizer output range: [-0.75, 0.75]" in output

    def test_silent_by_default(self, boundary_parameters, capsys):
        generate(boundary_parameters)
        assert capsys.readouterr().out == ""
