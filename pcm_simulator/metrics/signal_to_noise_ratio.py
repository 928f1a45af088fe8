"""
Signal-to-Noise Ratio (SNR) Computation
=======================================

SNR measures the ratio of signal power to quantization-noise power,
expressed in decibels (dB):

    signal_power = mean(x[n]²)
    noise_power  = mean(e[n]²),   e[n] = x[n] - q[n]

    SNR_dB = 10 * log10(signal_power / noise_power)

Degenerate cases are reported as sentinel values, never as errors:

    noise_power  < 1e-12  →  +inf   (perfect reconstruction)
    signal_power < 1e-12  →  -inf   (no signal)
    no samples at all     →  nan    (displayed as "N/A")

The noise check comes first, so a zero signal that is also reconstructed
without error is +inf.
"""

import math

import numpy as np


# Powers below this are treated as zero
POWER_EPSILON: float = 1e-12


def compute_signal_to_noise_ratio(
    signal_values: np.ndarray,
    error_values: np.ndarray
) -> float:
    """
    Compute the SNR of a quantized signal from its samples and errors.

    Args:
        signal_values: The sampled (unquantized) values.
        error_values: Per-sample quantization error, same length.

    Returns:
        float: SNR in dB, or +inf / -inf / nan for the degenerate cases.
    """
    signal_values = np.asarray(signal_values, dtype=float)
    error_values = np.asarray(error_values, dtype=float)

    if len(signal_values) != len(error_values):
        raise ValueError(
            f"Signal length ({len(signal_values)}) does not match "
            f"error length ({len(error_values)})"
        )

    if len(signal_values) == 0:
        return math.nan

    signal_power: float = float(np.mean(signal_values ** 2))
    noise_power: float = float(np.mean(error_values ** 2))

    if noise_power < POWER_EPSILON:
        return math.inf

    if signal_power < POWER_EPSILON:
        return -math.inf

    snr_db: float = 10.0 * math.log10(signal_power / noise_power)

    return snr_db


def format_signal_to_noise_ratio(snr_db: float) -> str:
    """
    Format an SNR value for display.

    Examples:
        12.345 → "SNR: 12.35 dB"
        +inf   → "SNR: ∞ dB"
        -inf   → "SNR: N/A"
        nan    → "SNR: N/A"
    """
    if math.isfinite(snr_db):
        return f"SNR: {snr_db:.2f} dB"

    if snr_db == math.inf:
        return "SNR: ∞ dB"

    return "SNR: N/A"
