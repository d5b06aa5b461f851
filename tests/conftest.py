#!/usr/bin/env python3
"""
Pytest configuration and fixtures for compensated summation tests.

This file contains shared test fixtures and configuration used across
the test suite.
"""

import pytest
import numpy as np
import torch

from .utils import lognormal_values, signed_values


@pytest.fixture(scope="session")
def random_seed():
    """Seed for reproducible tests."""
    return 42


@pytest.fixture
def lognormal_data(random_seed):
    """A thousand positive doubles spanning many orders of magnitude."""
    return lognormal_values(random_seed, 1000)


@pytest.fixture
def signed_data(random_seed):
    """A thousand signed doubles spanning many orders of magnitude."""
    return signed_values(random_seed, 1000)


@pytest.fixture(params=[np.float32, np.float64])
def dtype(request):
    """Parameterized fixture for single and double precision."""
    return request.param


@pytest.fixture(params=["cpu"] + (["cuda"] if torch.cuda.is_available() else []))
def device(request):
    """Parameterized fixture for different devices."""
    return torch.device(request.param)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Mark long randomized sweeps as slow."""
    for item in items:
        if "sweep" in item.name:
            item.add_marker(pytest.mark.slow)
