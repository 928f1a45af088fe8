"""
Effective Number of Bits (ENOB) Computation
===========================================

ENOB is the number of bits of an ideal converter that would have the same
SNR as the signal under test.

The relationship between SNR and ENOB for a full-scale sine is:

    SNR (dB) = 6.02 * N + 1.76

Therefore:

    ENOB = (SNR - 1.76) / 6.02

Where:
- 6.02 dB comes from the fact that each bit doubles the number of
  quantization levels, improving SNR by 20*log10(2) ≈ 6.02 dB
- 1.76 dB is a correction factor for quantization noise in an ideal
  converter (derived from the quantization noise power of a full-scale
  sine wave)

For the PCM chain the sine spans the full quantizer range [-A, A], so a
well-sampled signal with L = 2^N levels should measure close to the
theoretical 6.02 * N + 1.76 dB.
"""


def compute_effective_number_of_bits(signal_to_noise_ratio_db: float) -> float:
    """
    Compute ENOB from measured SNR.

    Formula:  ENOB = (SNR - 1.76) / 6.02

    Infinite or undefined SNR values pass through (+inf → +inf, nan → nan).

    Args:
        signal_to_noise_ratio_db: The measured SNR in decibels.

    Returns:
        float:  Effective number of bits.

    Example:
        SNR = 49.92 dB → ENOB = (49.92 - 1.76) / 6.02 = 8 bits
    """
    enob: float = (signal_to_noise_ratio_db - 1.76) / 6.02

    return enob


def compute_theoretical_snr_for_uniform_quantizer(quantizer_bits: int) -> float:
    """
    Theoretical SNR of an ideal N-bit uniform quantizer for a full-scale sine.

    Formula: SNR = 6.02 * N + 1.76

    Args:
        quantizer_bits: Number of bits (N >= 1).

    Returns:
        float:  SNR in decibels.
    """
    if quantizer_bits < 1:
        raise ValueError("Quantizer must have at least 1 bit")

    snr_db: float = 6.02 * quantizer_bits + 1.76
    return snr_db
