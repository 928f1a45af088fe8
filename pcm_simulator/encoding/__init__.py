"""
Encoding Module
===============

This module contains the quantizer and the PCM binary encoder.
"""

from .uniform_quantizer import UniformQuantizer
from .pcm_encoder import (
    PcmEncoder,
    compute_bits_per_sample,
    encode_level_index,
    encode_level_indices,
    decode_pcm_code
)

__all__ = [
    "UniformQuantizer",
    "PcmEncoder",
    "compute_bits_per_sample",
    "encode_level_index",
    "encode_level_indices",
    "decode_pcm_code"
]
