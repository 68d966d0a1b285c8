"""
Pytest configuration and shared fixtures.

Provides response-time histories used across unit tests.
"""

from typing import List

import pytest


@pytest.fixture
def stable_history() -> List[float]:
    """
    Fixture providing a steady latency history around 100ms.

    Mean is 100.1 and population standard deviation is 1.7, so:
    - 100ms is normal
    - 104.5ms sits between mean + 2*std and mean + 3*std
    - 500ms is far beyond mean * 2

    Returns:
        List[float]: chronological latencies, oldest first
    """
    return [100.0, 102.0, 98.0, 101.0, 99.0, 100.0, 103.0, 97.0, 100.0, 101.0]


@pytest.fixture
def unit_history() -> List[float]:
    """
    Fixture with mean 1.0 and standard deviation exactly 1.0.

    Makes boundary z-scores exact: 4.0 gives z = 3.0, -2.0 gives z = -3.0.
    """
    return [0.0, 2.0]


@pytest.fixture
def constant_history() -> List[float]:
    """Fixture with zero dispersion."""
    return [250.0] * 15


def pytest_configure(config):
    """
    Pytest hook for custom configuration.
    
    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
