"""
Visualization Module
====================

This module provides plotting functions for analyzing the stages of the
PCM pipeline.
"""

from .pcm_plotter import PcmPlotter

__all__ = ["PcmPlotter"]
