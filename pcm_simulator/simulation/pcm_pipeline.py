"""
PCM Pipeline
============

This module provides the orchestration that turns a SignalParameters set
into a complete PipelineResult.

The PcmPipelineRunner class handles:
1. Analog waveform rendering (display only)
2. Sampling
3. Quantization and PCM encoding
4. Quantization error and zero-order hold reconstruction
5. SNR calculation and results aggregation

Every run is pure: it reads the parameters, builds fresh arrays and
returns a new PipelineResult. Nothing is cached between runs, so two runs
with equal parameters give bit-identical results.

This is the main entry point for running the PCM chain:

    result = generate(SignalParameters(...))
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..signals.timed_signal import TimedSignal
from ..signals.analog_waveform import evaluate_waveform, render_analog_waveform
from ..signals.sampler import sample_waveform
from ..encoding.uniform_quantizer import UniformQuantizer
from ..encoding.pcm_encoder import PcmEncoder
from ..reconstruction.zero_order_hold import ZeroOrderHold
from ..metrics.quantization_error import (
    compute_quantization_error,
    compute_maximum_absolute_error
)
from ..metrics.signal_to_noise_ratio import (
    compute_signal_to_noise_ratio,
    format_signal_to_noise_ratio
)
from ..metrics.effective_number_of_bits import (
    compute_effective_number_of_bits,
    compute_theoretical_snr_for_uniform_quantizer
)
from .signal_parameters import SignalParameters


@dataclass
class PipelineResult:
    """
    Container for all outputs of one PCM pipeline run.

    The sampled, quantized and error signals and the pcm_codes /
    level_indices lists are index-aligned: entry i of each describes
    the same logical sample i.

    Attributes:
        parameters: The SignalParameters used for this run.
        analog: Dense analog trace (display only).
        sampled: Samples of the analog waveform.
        quantized: Level-midpoint values on the sampling grid.
        reconstructed: Zero-order hold staircase trace.
        error: Quantization error on the sampling grid.
        pcm_codes: Binary code word of each sample.
        level_indices: Quantization level index of each sample.
        amplitude: Echo of the signal amplitude.
        start_time_seconds: Echo of the interval start.
        end_time_seconds: Echo of the interval end.
        sampling_interval_seconds: 1 / sampling rate.
        quantization_step: Width of one quantization level.
        bits_per_sample: Width of each PCM code word.
        snr_db: Signal-to-quantization-noise ratio (dB, or ±inf / nan).
    """
    # Parameters used
    parameters: SignalParameters

    # Signals
    analog: TimedSignal
    sampled: TimedSignal
    quantized: TimedSignal
    reconstructed: TimedSignal
    error: TimedSignal

    # PCM data
    pcm_codes: List[str] = field(default_factory=list)
    level_indices: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))

    # Echoed / derived scalars
    amplitude: float = 0.0
    start_time_seconds: float = 0.0
    end_time_seconds: float = 0.0
    sampling_interval_seconds: float = 0.0
    quantization_step: float = 0.0
    bits_per_sample: int = 0

    # Performance metric
    snr_db: float = float("nan")

    def validate(self) -> bool:
        """Validate channel lengths and times, and that the PCM codes decode back."""
        expected_length: int = len(self.sampled)

        if len(self.quantized) != expected_length:
            raise ValueError("Quantized signal length mismatch")

        if len(self.error) != expected_length:
            raise ValueError("Error signal length mismatch")

        if len(self.pcm_codes) != expected_length:
            raise ValueError("PCM code count mismatch")

        if len(self.level_indices) != expected_length:
            raise ValueError("Level index count mismatch")

        if not np.array_equal(self.sampled.time_axis_seconds, self.quantized.time_axis_seconds):
            raise ValueError("Quantized signal time axis mismatch")

        if not np.array_equal(self.sampled.time_axis_seconds, self.error.time_axis_seconds):
            raise ValueError("Error signal time axis mismatch")

        decoded_indices: np.ndarray = PcmEncoder(self.parameters.quantization_levels).decode(self.pcm_codes)
        if not np.array_equal(decoded_indices, self.level_indices):
            raise ValueError("PCM codes do not decode to the level indices")

        return True

    def get_number_of_samples(self) -> int:
        """Return the number of samples taken."""
        return len(self.sampled)

    def get_pcm_output_text(self) -> str:
        """All PCM code words as one space-separated string."""
        return " ".join(self.pcm_codes)

    def get_snr_text(self) -> str:
        """SNR formatted for display, e.g. 'SNR: 25.84 dB'."""
        return format_signal_to_noise_ratio(self.snr_db)

    def get_pcm_table_rows(self) -> List[List[str]]:
        """
        Return one row per sample for tabular display.

        Columns: index, time, sample value, quantized value, error, PCM code.
        Numeric columns are formatted with 4 decimals.
        """
        rows: List[List[str]] = []
        for sample_index in range(self.get_number_of_samples()):
            rows.append([
                str(sample_index),
                f"{self.sampled.time_axis_seconds[sample_index]:.4f}",
                f"{self.sampled.values[sample_index]:.4f}",
                f"{self.quantized.values[sample_index]:.4f}",
                f"{self.error.values[sample_index]:.4f}",
                self.pcm_codes[sample_index]
            ])
        return rows

    def get_metrics_dict(self) -> Dict[str, Any]:
        """
        Return all metrics as a dictionary.

        Useful for programmatic access, logging, or export to files.

        Returns:
            Dict containing all pipeline metrics.
        """
        return {
            "number_of_samples": self.get_number_of_samples(),
            "bits_per_sample": self.bits_per_sample,
            "quantization_step": self.quantization_step,
            "snr_db": self.snr_db,
            "enob": compute_effective_number_of_bits(self.snr_db),
            "theoretical_snr_db": compute_theoretical_snr_for_uniform_quantizer(
                self.bits_per_sample
            ),
            "maximum_absolute_error": compute_maximum_absolute_error(self.error)
        }

    def print_summary(self) -> None:
        """
        Print a formatted summary of the pipeline results.

        This method displays all key metrics in a readable format,
        useful for quick analysis and comparison of different runs.
        """
        parameters = self.parameters
        metrics = self.get_metrics_dict()

        print("\n" + "=" * 70)
        print("PCM RESULTS SUMMARY")
        print("=" * 70)

        # Parameters section
        print("\n--- Parameters ---")
        print(f"  Signal Frequency:        {parameters.frequency_hz:g} Hz")
        print(f"  Amplitude:               {parameters.amplitude:g}")
        print(f"  Phase:                   {parameters.phase_degrees:g} deg")
        print(f"  Sampling Rate:           {parameters.sampling_rate_hz:g} Hz")
        print(f"  Nyquist Rate:            {parameters.nyquist_rate_hz:g} Hz")
        print(f"  Quantization Levels:     {parameters.quantization_levels}")
        print(f"  Time Range:              {self.start_time_seconds:g} s to {self.end_time_seconds:g} s")

        # Encoding section
        print("\n--- Encoding ---")
        print(f"  Number of Samples:       {metrics['number_of_samples']}")
        print(f"  Bits per Sample:         {metrics['bits_per_sample']}")
        print(f"  Quantization Step:       {metrics['quantization_step']:.6f}")
        print(f"  Max |Error|:             {metrics['maximum_absolute_error']:.6f}"
              f" (bound {self.quantization_step / 2:.6f})")

        # Performance section
        print("\n--- Performance Metrics ---")
        print(f"  {self.get_snr_text()}")
        print(f"  ENOB (measured):         {metrics['enob']:.2f} bits")
        print(f"  SNR (ideal {self.bits_per_sample}-bit):      {metrics['theoretical_snr_db']:.2f} dB")

        print("\n" + "=" * 70)

    def print_pcm_table(self) -> None:
        """Print the per-sample PCM table."""
        header: List[str] = ["#", "Time (s)", "Sample", "Quantized", "Error", "PCM Code"]
        print(
            f"{header[0]:>5}  {header[1]:>10}  {header[2]:>10}  "
            f"{header[3]:>10}  {header[4]:>10}  {header[5]}"
        )
        print("-" * 70)
        for row in self.get_pcm_table_rows():
            print(
                f"{row[0]:>5}  {row[1]:>10}  {row[2]:>10}  "
                f"{row[3]:>10}  {row[4]:>10}  {row[5]}"
            )


class PcmPipelineRunner:
    """
    Orchestrator for one PCM pipeline run.

    This class coordinates all stages of the chain:
    1. Analog rendering (render_analog_waveform)
    2. Sampling (sample_waveform)
    3. Quantization (UniformQuantizer) and encoding (PcmEncoder)
    4. Reconstruction (ZeroOrderHold) and error analysis
    5. SNR

    Usage:
        parameters = SignalParameters(
            frequency_hz=1.0, amplitude=1.0, phase_degrees=0.0,
            sampling_rate_hz=10.0, quantization_levels=4,
            start_time_seconds=0.0, end_time_seconds=1.0
        )
        result = PcmPipelineRunner(parameters).run()
        result.print_summary()

    Attributes:
        parameters: The SignalParameters for this runner.
        quantizer: The UniformQuantizer instance.
        encoder: The PcmEncoder instance.
        reconstructor: The ZeroOrderHold instance.
    """

    def __init__(self, parameters: SignalParameters) -> None:
        """
        Initialize the runner and create the stage components.

        Args:
            parameters: Validated SignalParameters.
        """
        self.parameters: SignalParameters = parameters

        self.quantizer: UniformQuantizer = UniformQuantizer(
            amplitude=parameters.amplitude,
            number_of_levels=parameters.quantization_levels
        )

        self.encoder: PcmEncoder = PcmEncoder(
            number_of_levels=parameters.quantization_levels
        )

        self.reconstructor: ZeroOrderHold = ZeroOrderHold(
            start_time_seconds=parameters.start_time_seconds,
            end_time_seconds=parameters.end_time_seconds,
            sampling_interval_seconds=parameters.sampling_interval_seconds
        )

    def run(self, verbose: bool = False) -> PipelineResult:
        """
        Execute the complete pipeline.

        Args:
            verbose: If True, print progress messages.

        Returns:
            PipelineResult containing all signals, codes and the SNR.
        """
        parameters = self.parameters

        if verbose:
            print("\n" + "-" * 50)
            print(f"Running PCM pipeline:  f={parameters.frequency_hz:g} Hz, "
                  f"fs={parameters.sampling_rate_hz:g} Hz, "
                  f"L={self.quantizer.get_number_of_levels()}")
            output_minimum, output_maximum = self.quantizer.get_output_range()
            print(f"Quantizer output range: [{output_minimum:g}, {output_maximum:g}]")
            print("-" * 50)

        # ===== STEP 1: RENDER ANALOG WAVEFORM =====
        if verbose:
            print("  [1/5] Rendering analog waveform...")

        analog: TimedSignal = render_analog_waveform(parameters)

        # ===== STEP 2: SAMPLE =====
        if verbose:
            print("  [2/5] Sampling...")

        sampled: TimedSignal = sample_waveform(parameters)

        # ===== STEP 3: QUANTIZE AND ENCODE =====
        if verbose:
            print("  [3/5] Quantizing and encoding...")

        level_indices, quantized_values = self.quantizer.quantize_signal(sampled.values)
        quantized: TimedSignal = TimedSignal(
            time_axis_seconds=sampled.time_axis_seconds.copy(),
            values=quantized_values
        )
        pcm_codes: List[str] = self.encoder.encode(level_indices)

        # ===== STEP 4: ERROR AND RECONSTRUCTION =====
        if verbose:
            print("  [4/5] Computing error and reconstructing (ZOH)...")

        error: TimedSignal = compute_quantization_error(sampled, quantized)

        initial_hold_value: float = self.quantizer.quantize(
            evaluate_waveform(
                parameters.start_time_seconds,
                parameters.frequency_hz,
                parameters.amplitude,
                parameters.phase_radians
            )
        )
        reconstructed: TimedSignal = self.reconstructor.reconstruct(
            quantized,
            initial_hold_value=initial_hold_value
        )

        # ===== STEP 5: SNR AND PACKAGING =====
        if verbose:
            print("  [5/5] Calculating SNR...")

        snr_db: float = compute_signal_to_noise_ratio(sampled.values, error.values)

        result: PipelineResult = PipelineResult(
            parameters=parameters,
            analog=analog,
            sampled=sampled,
            quantized=quantized,
            reconstructed=reconstructed,
            error=error,
            pcm_codes=pcm_codes,
            level_indices=level_indices,
            amplitude=parameters.amplitude,
            start_time_seconds=parameters.start_time_seconds,
            end_time_seconds=parameters.end_time_seconds,
            sampling_interval_seconds=parameters.sampling_interval_seconds,
            quantization_step=self.quantizer.step_size,
            bits_per_sample=self.encoder.bits_per_sample,
            snr_db=snr_db
        )
        result.validate()

        if verbose:
            print(f"  Pipeline complete! {len(sampled)} samples, {result.get_snr_text()}")

        return result


def generate(parameters: SignalParameters) -> PipelineResult:
    """
    Run the PCM pipeline once.

    Args:
        parameters: Validated SignalParameters.

    Returns:
        PipelineResult: A fresh result for these parameters.
    """
    return PcmPipelineRunner(parameters).run(verbose=False)
