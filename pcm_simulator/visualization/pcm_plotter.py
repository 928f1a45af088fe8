"""
PCM Plotter
===========

This module provides plotting functions for visualizing the stages of the
PCM pipeline.

Plots included (one figure, four stacked panels sharing the time axis):
1. Original wave & samples
2. Quantized signal
3. Reconstructed signal (zero-order hold)
4. Quantization error
"""

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Dict, Optional, Tuple

from ..metrics.quantization_error import compute_maximum_absolute_error
from ..simulation.pcm_pipeline import PipelineResult


class PcmPlotter:
    """
    Plotting utilities for PCM pipeline results.

    All methods are static to allow easy use without instantiation.
    """

    DEFAULT_FIGURE_SIZE: Tuple[int, int] = (12, 12)

    COLORS: Dict[str, str] = {
        "analog": "#3b82f6",
        "sampled": "#ef4444",
        "quantized": "#10b981",
        "reconstructed": "#8b5cf6",
        "error": "#f59e0b"
    }

    # Quantized markers are only drawn for short signals
    QUANTIZED_MARKER_LIMIT: int = 60

    @staticmethod
    def compute_y_axis_limits(
        result: PipelineResult,
        is_error_axis: bool = False
    ) -> Tuple[float, float]:
        """
        Compute the y-axis range of a panel.

        Signal panels use ±1.1 * amplitude. The error panel is fitted to
        the largest absolute error plus a 15% margin (and 1e-6 so a
        zero-error plot still has a non-empty range). With no samples the
        error range falls back to amplitude / 2.

        Args:
            result: The pipeline result being plotted.
            is_error_axis: True for the quantization error panel.

        Returns:
            (y_min, y_max)
        """
        if not is_error_axis:
            return (-result.amplitude * 1.1, result.amplitude * 1.1)

        if len(result.error) > 0:
            maximum_absolute_error: float = compute_maximum_absolute_error(result.error)
        else:
            maximum_absolute_error = result.amplitude / 2

        buffer: float = maximum_absolute_error * 0.15 + 1e-6
        return (-maximum_absolute_error - buffer, maximum_absolute_error + buffer)

    @staticmethod
    def compute_marker_size(number_of_points: int) -> float:
        """Scatter marker radius: smaller markers for denser signals."""
        if number_of_points > 250:
            return 1.5
        if number_of_points > 80:
            return 2.5
        return 3.5

    @staticmethod
    def plot_pipeline_result(
        result: PipelineResult,
        title_prefix: str = "",
        save_path: Optional[str] = None,
        show: bool = True
    ) -> Figure:
        """
        Plot the four stages of a PCM pipeline run.

        Args:
            result: The PipelineResult to plot.
            title_prefix: Optional prefix for the main title.
            save_path: If provided, save figure to this path.
            show: If True, display the figure (blocking).

        Returns:
            Figure: The matplotlib figure.
        """
        colors = PcmPlotter.COLORS
        signal_limits = PcmPlotter.compute_y_axis_limits(result)
        error_limits = PcmPlotter.compute_y_axis_limits(result, is_error_axis=True)

        # Marker sizes in points², from the radius used for each channel
        sample_marker_area: float = (
            2 * PcmPlotter.compute_marker_size(len(result.sampled))
        ) ** 2
        error_marker_area: float = (
            2 * PcmPlotter.compute_marker_size(len(result.error))
        ) ** 2

        fig, axes = plt.subplots(4, 1, figsize=PcmPlotter.DEFAULT_FIGURE_SIZE, sharex=True)
        fig.suptitle(
            f"{title_prefix}Pulse Code Modulation",
            fontsize=14,
            fontweight='bold'
        )

        # ===== SUBPLOT 1: Analog Wave & Samples =====
        axes[0].plot(
            result.analog.time_axis_seconds, result.analog.values,
            color=colors["analog"], linewidth=1.5, label='Analog'
        )
        axes[0].scatter(
            result.sampled.time_axis_seconds, result.sampled.values,
            color=colors["sampled"], s=sample_marker_area, zorder=3, label='Sampled'
        )
        axes[0].set_ylabel('Amplitude', fontsize=10)
        axes[0].set_title('Original Wave & Samples', fontsize=11)
        axes[0].set_ylim(*signal_limits)

        # ===== SUBPLOT 2: Quantized Signal =====
        show_quantized_markers: bool = len(result.quantized) < PcmPlotter.QUANTIZED_MARKER_LIMIT
        axes[1].step(
            result.quantized.time_axis_seconds, result.quantized.values,
            where='pre', color=colors["quantized"], linewidth=1.5,
            marker='o' if show_quantized_markers else None, markersize=5,
            label='Quantized'
        )
        axes[1].set_ylabel('Quantized Amp.', fontsize=10)
        axes[1].set_title('Quantized Signal', fontsize=11)
        axes[1].set_ylim(*signal_limits)

        # ===== SUBPLOT 3: Reconstructed Signal (ZOH) =====
        axes[2].plot(
            result.reconstructed.time_axis_seconds, result.reconstructed.values,
            drawstyle='steps-pre', color=colors["reconstructed"], linewidth=1.5,
            label='Reconstructed'
        )
        axes[2].set_ylabel('Reconstructed Amp.', fontsize=10)
        axes[2].set_title('Reconstructed Signal (ZOH)', fontsize=11)
        axes[2].set_ylim(*signal_limits)

        # ===== SUBPLOT 4: Quantization Error =====
        axes[3].scatter(
            result.error.time_axis_seconds, result.error.values,
            color=colors["error"], s=error_marker_area, label='Error'
        )
        axes[3].set_xlabel('Time (s)', fontsize=10)
        axes[3].set_ylabel('Quantization Error', fontsize=10)
        axes[3].set_title('Quantization Error', fontsize=11)
        axes[3].set_ylim(*error_limits)

        for axis in axes:
            axis.grid(True, alpha=0.3)
            axis.axhline(y=0, color='k', linewidth=0.5)
            axis.legend(loc='upper right', fontsize=9)
        axes[3].set_xlim(result.start_time_seconds, result.end_time_seconds)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Figure saved to:  {save_path}")

        if show:
            plt.show()

        return fig
