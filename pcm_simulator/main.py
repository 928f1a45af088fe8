"""
PCM Simulator - Main Entry Point
================================

This is the command-line entry point of the PCM simulator.

The workflow is:
1. Read signal parameters from the command line
2. Validate them (errors stop the run, warnings are printed)
3. Run the PCM pipeline
4. Print the summary, PCM code stream and SNR
5. Optionally print the per-sample table and plot the results

Usage:
    pcm-simulator --frequency 5 --sampling-rate 50 --levels 8 --table --plot

Or import and use programmatically:
    from pcm_simulator import SignalParameters, generate
"""

import argparse
import sys
from typing import List, Optional

from .simulation.signal_parameters import (
    DEFAULT_AMPLITUDE,
    DEFAULT_END_TIME_SECONDS,
    DEFAULT_FREQUENCY_HZ,
    DEFAULT_PHASE_DEGREES,
    DEFAULT_QUANTIZATION_LEVELS,
    DEFAULT_SAMPLING_RATE_HZ,
    DEFAULT_START_TIME_SECONDS,
    SignalParameters,
    ValidationReport,
    validate_signal_parameters
)
from .simulation.pcm_pipeline import PcmPipelineRunner, PipelineResult


def build_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog='pcm-simulator',
        description='Pulse Code Modulation of a sinusoid: sampling, quantization, '
                    'binary encoding and zero-order hold reconstruction.'
    )
    parser.add_argument(
        '--frequency', type=float, default=DEFAULT_FREQUENCY_HZ,
        help=f'Signal frequency in Hz (default: {DEFAULT_FREQUENCY_HZ:g})'
    )
    parser.add_argument(
        '--amplitude', type=float, default=DEFAULT_AMPLITUDE,
        help=f'Peak amplitude (default: {DEFAULT_AMPLITUDE:g})'
    )
    parser.add_argument(
        '--phase', type=float, default=DEFAULT_PHASE_DEGREES,
        help=f'Initial phase in degrees (default: {DEFAULT_PHASE_DEGREES:g})'
    )
    parser.add_argument(
        '--sampling-rate', type=float, default=DEFAULT_SAMPLING_RATE_HZ,
        help=f'Sampling rate in Hz (default: {DEFAULT_SAMPLING_RATE_HZ:g})'
    )
    parser.add_argument(
        '--levels', type=float, default=DEFAULT_QUANTIZATION_LEVELS,
        help=f'Number of quantization levels, integer >= 2 '
             f'(default: {DEFAULT_QUANTIZATION_LEVELS})'
    )
    parser.add_argument(
        '--start-time', type=float, default=DEFAULT_START_TIME_SECONDS,
        help=f'Start time in seconds (default: {DEFAULT_START_TIME_SECONDS:g})'
    )
    parser.add_argument(
        '--end-time', type=float, default=DEFAULT_END_TIME_SECONDS,
        help=f'End time in seconds (default: {DEFAULT_END_TIME_SECONDS:g})'
    )
    parser.add_argument(
        '--table', action='store_true',
        help='Print the per-sample PCM table'
    )
    parser.add_argument(
        '--plot', action='store_true',
        help='Show the signal plots'
    )
    parser.add_argument(
        '--save-figure', type=str, default=None, metavar='PATH',
        help='Save the signal plots to PATH'
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Print pipeline progress'
    )
    return parser


def run_from_arguments(arguments: argparse.Namespace) -> Optional[PipelineResult]:
    """
    Validate parsed arguments and run the pipeline.

    Returns:
        The PipelineResult, or None if validation failed.
    """
    report: ValidationReport = validate_signal_parameters(
        frequency_hz=arguments.frequency,
        amplitude=arguments.amplitude,
        phase_degrees=arguments.phase,
        sampling_rate_hz=arguments.sampling_rate,
        quantization_levels=arguments.levels,
        start_time_seconds=arguments.start_time,
        end_time_seconds=arguments.end_time
    )

    for problem in report.errors:
        print(f"ERROR: {problem.message}")

    if not report.is_valid:
        return None

    for problem in report.warnings:
        print(problem.message)

    parameters = SignalParameters(
        frequency_hz=arguments.frequency,
        amplitude=arguments.amplitude,
        phase_degrees=arguments.phase,
        sampling_rate_hz=arguments.sampling_rate,
        quantization_levels=int(arguments.levels),
        start_time_seconds=arguments.start_time,
        end_time_seconds=arguments.end_time
    )

    return PcmPipelineRunner(parameters).run(verbose=arguments.verbose)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        int: Process exit status (0 on success, 1 on invalid parameters).
    """
    arguments = build_argument_parser().parse_args(argv)

    result = run_from_arguments(arguments)
    if result is None:
        return 1

    result.print_summary()

    print("\n--- PCM Output ---")
    print(result.get_pcm_output_text())

    if arguments.table:
        print("\n--- PCM Table ---")
        result.print_pcm_table()

    if arguments.plot or arguments.save_figure:
        # matplotlib is only loaded when plotting
        from .visualization.pcm_plotter import PcmPlotter

        PcmPlotter.plot_pipeline_result(
            result,
            save_path=arguments.save_figure,
            show=arguments.plot
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
