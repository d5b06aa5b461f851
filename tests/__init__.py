"""
Test suite for the Compensated Summation Library.

Test Structure:
- test_transforms.py: Error-free transforms
- test_core.py: Kahan-Babuska and Kahan-Babuska-Neumaier accumulators
- test_algorithms.py: Reduction of sequences, arrays and tensors
- test_dev.py: Equivalence of the alternative formulations
- conftest.py: Shared fixtures and configuration

Usage:
    # Run all tests
    pytest

    # Run only fast tests
    pytest -m "not slow"
"""
