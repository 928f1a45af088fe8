"""
Signals Module
==============

This module contains the analog waveform model, the sampler and the
timed-signal containers shared by every stage of the PCM pipeline.
"""

from .timed_signal import TimedSample, TimedSignal
from .analog_waveform import evaluate_waveform, render_analog_waveform
from .sampler import compute_sample_grid, sample_waveform

__all__ = [
    "TimedSample",
    "TimedSignal",
    "evaluate_waveform",
    "render_analog_waveform",
    "compute_sample_grid",
    "sample_waveform"
]
