#!/usr/bin/env python3
"""
Basic usage examples for the Compensated Summation Library.

This script demonstrates the error-free transforms, both accumulators
and the reduction helpers, and how they compare with naive addition.
"""

import numpy as np
import torch

from compsum import (
    two_sum,
    fast_two_sum,
    KahanBabuska,
    KahanBabuskaNeumaier,
    compensated_sum,
    reduce
)


def demonstrate_exact_transforms():
    """Show the rounded sum and its exact error."""
    print("=" * 60)
    print("DEMONSTRATION: Error-Free Transforms")
    print("=" * 60)

    s, t = two_sum(0.1, 0.2)
    print(f"two_sum(0.1, 0.2)       -> s = {s!r}, t = {t!r}")

    s, t = two_sum(1.0, 1e100)
    print(f"two_sum(1.0, 1e100)     -> s = {s!r}, t = {t!r}")

    # Operands in the wrong order for the fast transform
    s, t = fast_two_sum(1.0, 1e100)
    print(f"fast_two_sum(1.0, 1e100) -> s = {s!r}, t = {t!r}  (error lost)")
    print()


def demonstrate_precision_loss():
    """Show how naive summation loses precision."""
    print("=" * 60)
    print("DEMONSTRATION: Precision Loss in Naive Summation")
    print("=" * 60)

    values = [0.1, 0.2, -0.3]
    naive = 0.0
    for value in values:
        naive += value

    print(f"Test data: {values}")
    print(f"Naive result:                  {naive!r}")
    print(f"Kahan-Babuska result:          {compensated_sum(values, kind='kb')!r}")
    print(f"Kahan-Babuska-Neumaier result: {compensated_sum(values, kind='kbn')!r}")
    print(f"Machine epsilon:               {np.finfo(np.float64).eps!r}")
    print()


def demonstrate_large_magnitudes():
    """Show where Neumaier's variant beats Kahan-Babuska."""
    print("=" * 60)
    print("DEMONSTRATION: Terms Larger Than the Running Sum")
    print("=" * 60)

    values = [1.0, 1e100, 1.0, -1e100]
    print(f"Test data: {values}  (exact sum: 2.0)")
    print(f"Naive:                  {sum(values)!r}")
    print(f"Kahan-Babuska:          {compensated_sum(values, kind='kb')!r}")
    print(f"Kahan-Babuska-Neumaier: {compensated_sum(values, kind='kbn')!r}")
    print()


def demonstrate_incremental_summation():
    """Show incremental summation with an accumulator."""
    print("=" * 60)
    print("DEMONSTRATION: Incremental Summation")
    print("=" * 60)

    acc = KahanBabuskaNeumaier()
    values = [1e8, 0.1, 0.2, 0.3, -1e8]

    print(f"{'Value':<15} {'Sum':<25} {'Compensation':<15}")
    print("-" * 55)

    for value in values:
        acc += value
        print(f"{value:<15} {acc.sum!r:<25} {acc.comp:<15.2e}")

    print()
    print(f"Final total: {acc.total()!r}")
    print()


def demonstrate_single_precision():
    """Show float32 and tensor accumulation."""
    print("=" * 60)
    print("DEMONSTRATION: Single Precision and Tensors")
    print("=" * 60)

    values = np.array([1e8, 1.0, -1e8], dtype=np.float32)
    print(f"NumPy float32 sum:    {np.sum(values)!r}")
    print(f"Compensated float32:  {compensated_sum(values)!r}")

    matrix = torch.tensor([[1.0, 1e30, 1.0, -1e30],
                           [0.5, 1e30, 0.5, -1e30]], dtype=torch.float32)
    print(f"torch row sums:       {matrix.sum(dim=1)}")
    print(f"Compensated row sums: {compensated_sum(matrix, axis=1)}")

    acc = reduce([0.1] * 10, kind=KahanBabuska)
    print(f"Ten tenths (KB):      {acc.total()!r}")
    print()


def main():
    """Run all demonstrations."""
    print("COMPENSATED SUMMATION LIBRARY - BASIC USAGE EXAMPLES")
    print()

    demonstrate_exact_transforms()
    demonstrate_precision_loss()
    demonstrate_large_magnitudes()
    demonstrate_incremental_summation()
    demonstrate_single_precision()

    print("All demonstrations completed!")


if __name__ == "__main__":
    main()
