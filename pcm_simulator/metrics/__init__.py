"""
Metrics Module
==============

This module contains functions for calculating performance metrics:
- Quantization error
- SNR (Signal-to-Noise Ratio)
- ENOB (Effective Number of Bits)
"""

from .quantization_error import (
    compute_quantization_error,
    compute_maximum_absolute_error
)
from .signal_to_noise_ratio import (
    compute_signal_to_noise_ratio,
    format_signal_to_noise_ratio
)
from .effective_number_of_bits import (
    compute_effective_number_of_bits,
    compute_theoretical_snr_for_uniform_quantizer
)

__all__ = [
    "compute_quantization_error",
    "compute_maximum_absolute_error",
    "compute_signal_to_noise_ratio",
    "format_signal_to_noise_ratio",
    "compute_effective_number_of_bits",
    "compute_theoretical_snr_for_uniform_quantizer"
]
