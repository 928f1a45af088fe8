"""
Reconstruction Module
=====================

Contains the zero-order hold used to turn quantized samples back into a
continuous-time staircase approximation of the analog input.
"""

from .zero_order_hold import ZeroOrderHold

__all__ = ["ZeroOrderHold"]
