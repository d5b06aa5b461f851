#!/usr/bin/env python3
"""
Unit tests for the error-free transforms.

Tests the functions in the compsum.transforms module.
"""

import math

import pytest
import numpy as np
import torch

from compsum.transforms import (
    ExactSum,
    two_sum,
    two_sub,
    fast_two_sum,
    abs_two_sum
)

from .utils import exact, lognormal_values, signed_values


class CountingFloat(float):
    """Float that counts the subtractions it takes part in."""

    subtractions = 0

    def __sub__(self, other):
        CountingFloat.subtractions += 1
        return float.__sub__(self, other)

    def __rsub__(self, other):
        CountingFloat.subtractions += 1
        return float.__rsub__(self, other)


def random_pairs(seed, size, dtype):
    a = signed_values(seed, size, dtype)
    b = signed_values(seed + 1, size, dtype)
    return list(zip(a, b))


class TestTwoSum:
    """Test cases for two_sum."""

    def test_known_split(self):
        """The unit lost next to 1e100 is recovered exactly."""
        assert two_sum(1e100, 1.0) == (1e100, 1.0)
        assert two_sum(1.0, 1e100) == (1e100, 1.0)

    def test_exact_addition(self):
        """No error when the sum is representable."""
        assert two_sum(1.5, 2.25) == (3.75, 0.0)

    def test_result_type(self):
        """Results are ExactSum tuples with named fields."""
        result = two_sum(0.1, 0.2)

        assert isinstance(result, ExactSum)
        assert result.s == 0.1 + 0.2
        assert result.t == result[1]

    def test_identity(self, dtype, random_seed):
        """a + b == s + t exactly, for any operand order."""
        for a, b in random_pairs(random_seed, 1000, dtype):
            s, t = two_sum(a, b)

            assert s == a + b
            assert exact(a) + exact(b) == exact(s) + exact(t)

    def test_preserves_precision(self):
        """Single precision operands give single precision results."""
        s, t = two_sum(np.float32(0.1), np.float32(0.2))

        assert s.dtype == np.float32
        assert t.dtype == np.float32
        assert exact(np.float32(0.1)) + exact(np.float32(0.2)) == exact(s) + exact(t)

    def test_nan_propagates(self):
        """NaN operands give a NaN sum without raising."""
        s, t = two_sum(float('nan'), 1.0)

        assert math.isnan(s)
        assert math.isnan(t)

    def test_infinity_propagates(self):
        """Infinite operands give an infinite sum without raising."""
        s, _ = two_sum(float('inf'), 1.0)

        assert s == float('inf')


class TestTwoSub:
    """Test cases for two_sub."""

    def test_known_split(self):
        assert two_sub(1e100, -1.0) == (1e100, 1.0)

    def test_identity(self, dtype, random_seed):
        """a - b == s + t exactly."""
        for a, b in random_pairs(random_seed, 1000, dtype):
            s, t = two_sub(a, b)

            assert s == a - b
            assert exact(a) - exact(b) == exact(s) + exact(t)

    def test_matches_two_sum_of_negation(self, dtype, random_seed):
        """two_sub(a, b) is bit-identical to two_sum(a, -b)."""
        for a, b in random_pairs(random_seed, 1000, dtype):
            assert two_sub(a, b) == two_sum(a, -b)

    def test_positive_operands(self, random_seed):
        a_values = lognormal_values(random_seed, 1000)
        b_values = lognormal_values(random_seed + 1, 1000)

        for a, b in zip(a_values, b_values):
            assert two_sub(a, b) == two_sum(a, -b)


class TestFastTwoSum:
    """Test cases for fast_two_sum."""

    def test_matches_two_sum_when_ordered(self, dtype, random_seed):
        """With |a| >= |b| the fast transform equals two_sum."""
        for a, b in random_pairs(random_seed, 1000, dtype):
            if abs(a) < abs(b):
                a, b = b, a
            assert fast_two_sum(a, b) == two_sum(a, b)

    def test_zero_operand(self):
        """Either operand being zero satisfies the precondition."""
        assert fast_two_sum(0.0, 0.1) == (0.1, 0.0)
        assert fast_two_sum(0.1, 0.0) == (0.1, 0.0)

    def test_unordered_operands_lose_error(self):
        """Violating the precondition degrades t silently."""
        s, t = fast_two_sum(1.0, 1e100)

        assert s == 1e100
        assert t == 0.0
        assert two_sum(1.0, 1e100).t == 1.0


class TestAbsTwoSum:
    """Test cases for abs_two_sum."""

    def test_matches_two_sum(self, dtype, random_seed):
        """Bit-identical to two_sum for finite operands."""
        for a, b in random_pairs(random_seed, 1000, dtype):
            assert abs_two_sum(a, b) == two_sum(a, b)

    def test_matches_two_sum_positive(self, random_seed):
        a_values = lognormal_values(random_seed, 1000)
        b_values = lognormal_values(random_seed + 1, 1000)

        for a, b in zip(a_values, b_values):
            assert abs_two_sum(a, b) == two_sum(a, b)

    @pytest.mark.parametrize("a, b", [
        (0.1, 0.1),
        (0.1, -0.1),
        (-3.0, 3.0),
        (1e100, 1e100),
        (0.0, 0.0),
    ])
    def test_equal_magnitudes(self, a, b):
        """Ties take the a branch and still match two_sum."""
        assert abs_two_sum(a, b) == two_sum(a, b)

    def test_numpy_arrays(self, dtype, random_seed):
        """Arrays are transformed elementwise."""
        a = signed_values(random_seed, 100, dtype)
        b = signed_values(random_seed + 1, 100, dtype)

        s, t = abs_two_sum(a, b)
        expected_s, expected_t = two_sum(a, b)

        assert s.dtype == dtype
        np.testing.assert_array_equal(s, expected_s)
        np.testing.assert_array_equal(t, expected_t)

    def test_tensors(self, random_seed, device):
        """Tensors are transformed elementwise on their device."""
        a = torch.tensor(signed_values(random_seed, 100, np.float32), device=device)
        b = torch.tensor(signed_values(random_seed + 1, 100, np.float32), device=device)

        s, t = abs_two_sum(a, b)
        expected_s, expected_t = two_sum(a, b)

        assert s.device == a.device
        assert torch.equal(s, expected_s)
        assert torch.equal(t, expected_t)

    @pytest.mark.parametrize("a, b", [
        (1e100, 1.0),
        (1.0, 1e100),
        (-2.5, 2.5),
    ])
    def test_scalars_form_one_residual(self, a, b):
        """Scalar operands only evaluate the branch that is taken."""
        a, b = CountingFloat(a), CountingFloat(b)
        CountingFloat.subtractions = 0

        result = abs_two_sum(a, b)

        assert CountingFloat.subtractions == 2
        assert result == two_sum(float(a), float(b))
