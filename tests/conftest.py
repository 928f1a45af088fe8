"""Pytest configuration and fixtures for pcm-simulator tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from pcm_simulator.simulation.signal_parameters import SignalParameters


def make_parameters(**overrides) -> SignalParameters:
    values = {
        "frequency_hz": 1.0,
        "amplitude": 1.0,
        "phase_degrees": 0.0,
        "sampling_rate_hz": 10.0,
        "quantization_levels": 4,
        "start_time_seconds": 0.0,
        "end_time_seconds": 1.0,
    }
    values.update(overrides)
    return SignalParameters(**values)


@pytest.fixture
def boundary_parameters() -> SignalParameters:
    """f=1 Hz, A=1, fs=10 Hz, 4 levels over [0, 1] s."""
    return make_parameters()


@pytest.fixture
def dense_parameters() -> SignalParameters:
    return make_parameters(
        frequency_hz=3.0,
        amplitude=2.5,
        phase_degrees=30.0,
        sampling_rate_hz=1000.0,
        quantization_levels=16,
        start_time_seconds=0.25,
        end_time_seconds=2.0,
    )


@pytest.fixture
def parameters_factory():
    """Build SignalParameters from the boundary defaults plus overrides."""
    return make_parameters
