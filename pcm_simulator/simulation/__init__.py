"""
Simulation Module
=================

This module provides the parameter model and the orchestration layer that
ties together all stages of the PCM pipeline.
"""

from .signal_parameters import (
    MAXIMUM_DURATION_SECONDS,
    InvalidParameterError,
    ParameterProblem,
    SignalParameters,
    ValidationReport,
    validate_signal_parameters
)
from .pcm_pipeline import PcmPipelineRunner, PipelineResult, generate

__all__ = [
    "MAXIMUM_DURATION_SECONDS",
    "InvalidParameterError",
    "ParameterProblem",
    "SignalParameters",
    "ValidationReport",
    "validate_signal_parameters",
    "PcmPipelineRunner",
    "PipelineResult",
    "generate"
]
