"""
PCM Simulator Package
=====================

This package provides a simulation of Pulse Code Modulation (PCM): an
analog sinusoid is sampled, quantized to a finite set of levels, encoded
as fixed-width binary code words and reconstructed with a zero-order hold.

Package Structure:
- signals/: Analog waveform, sampler and timed-signal containers
- encoding/: Uniform quantizer and PCM binary encoder
- reconstruction/: Zero-order hold reconstruction
- metrics/: Quantization error, SNR and ENOB
- visualization/: Plotting tools
- simulation/: Parameters, validation and pipeline orchestration
"""

from .simulation.signal_parameters import (
    InvalidParameterError,
    SignalParameters,
    validate_signal_parameters
)
from .simulation.pcm_pipeline import PcmPipelineRunner, PipelineResult, generate

__version__ = "1.0.0"

__all__ = [
    "InvalidParameterError",
    "SignalParameters",
    "validate_signal_parameters",
    "PcmPipelineRunner",
    "PipelineResult",
    "generate"
]
