"""
PCM Encoder
===========

Encodes quantization level indices as fixed-width binary PCM code words.

Word length:

    bits_per_sample = ceil(log2(L))

computed exactly as the bit length of the largest index (L - 1) instead
of through floating-point log2, which can overshoot for powers of two.

L does not have to be a power of two. With L = 5, for example, three
bits are needed and codes 101, 110, 111 exist but are never emitted.
"""

import numpy as np
from typing import Iterable, List

from .uniform_quantizer import EXACT_LEVEL_INDEX_LIMIT


def compute_bits_per_sample(number_of_levels: int) -> int:
    """
    Minimum code width able to represent every level index.

    Args:
        number_of_levels: Number of quantization levels (>= 2).

    Returns:
        int: Bits per PCM code word.

    Example:
        2 → 1, 4 → 2, 5 → 3, 8 → 3, 9 → 4
    """
    if number_of_levels < 2:
        raise ValueError(
            f"Number of levels must be at least 2. Received: {number_of_levels}"
        )

    return max(1, (int(number_of_levels) - 1).bit_length())


def encode_level_index(level_index: int, bits_per_sample: int) -> str:
    """Encode one level index as a left-zero-padded binary string."""
    return format(int(level_index), f"0{bits_per_sample}b")


def encode_level_indices(
    level_indices: Iterable[int],
    bits_per_sample: int
) -> List[str]:
    """Encode every level index of a signal."""
    return [encode_level_index(index, bits_per_sample) for index in level_indices]


def decode_pcm_code(pcm_code: str) -> int:
    """Decode a binary PCM code word back to its level index."""
    return int(pcm_code, 2)


class PcmEncoder:
    """
    Fixed-width PCM encoder for a given number of quantization levels.

    Attributes:
        number_of_levels: Number of quantization levels.
        bits_per_sample: Width of every emitted code word.
    """

    def __init__(self, number_of_levels: int) -> None:
        self.number_of_levels: int = number_of_levels
        self.bits_per_sample: int = compute_bits_per_sample(number_of_levels)

    def encode(self, level_indices: np.ndarray) -> List[str]:
        """Encode an array of level indices."""
        return encode_level_indices(level_indices, self.bits_per_sample)

    def decode(self, pcm_codes: Iterable[str]) -> np.ndarray:
        """Decode code words back to level indices."""
        level_indices: List[int] = [decode_pcm_code(code) for code in pcm_codes]

        if self.number_of_levels - 1 <= EXACT_LEVEL_INDEX_LIMIT:
            return np.array(level_indices, dtype=np.int64)
        return np.array(level_indices, dtype=object)
