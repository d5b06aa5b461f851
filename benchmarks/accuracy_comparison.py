#!/usr/bin/env python3
"""
Accuracy comparison benchmarks for compensated summation.

This script measures the error of naive, Kahan-Babuska and
Kahan-Babuska-Neumaier summation against the exact rational sum of
each test case, in single and double precision.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from fractions import Fraction
from typing import Dict, Tuple

from compsum import compensated_sum


def naive_sum(values):
    total = values.dtype.type(0)
    for value in values:
        total = total + value
    return total


class AccuracyBenchmark:
    """
    Accuracy benchmark suite for the summation algorithms.
    """

    def __init__(self, seed: int = 42):
        self.seed = seed
        self.algorithms = {
            'naive': naive_sum,
            'kb': lambda x: compensated_sum(x, kind='kb'),
            'kbn': lambda x: compensated_sum(x, kind='kbn'),
        }

        self.results = []

    def generate_test_case(self, case_type: str, size: int, dtype=np.float64) -> np.ndarray:
        """
        Generate one test sequence.

        Args:
            case_type: Type of test case
            size: Number of values
            dtype: Data type

        Returns:
            The test values
        """
        rng = np.random.default_rng(self.seed)
        sigma = 40.0 if dtype == np.float64 else 8.0

        if case_type == 'lognormal':
            data = rng.lognormal(0.0, sigma, size)
        elif case_type == 'signed_lognormal':
            data = rng.choice([-1.0, 1.0], size) * rng.lognormal(0.0, sigma, size)
        elif case_type == 'tenths':
            data = np.full(size, 0.1)
        elif case_type == 'large_cancellation':
            # [1, big, 1, -big, ...]: the units survive only with Neumaier
            big = 1e100 if dtype == np.float64 else 1e30
            data = np.tile([1.0, big, 1.0, -big], size // 4 + 1)[:size]
        elif case_type == 'harmonic_series':
            data = 1.0 / np.arange(1, size + 1, dtype=np.float64)
        else:
            raise ValueError(f"Unknown test case type: {case_type}")

        return data.astype(dtype)

    @staticmethod
    def exact_sum(data: np.ndarray) -> Fraction:
        """Exact rational sum of the (already rounded) input values."""
        return sum((Fraction(float(v)) for v in data), Fraction(0))

    def run_single_benchmark(self, test_name: str, data: np.ndarray) -> Dict:
        """Error of every algorithm on one test case."""
        exact = self.exact_sum(data)
        results = {'test_name': test_name, 'size': len(data), 'exact_result': float(exact)}

        for alg_name, algorithm in self.algorithms.items():
            result = algorithm(data)
            absolute_error = abs(Fraction(float(result)) - exact)
            relative_error = absolute_error / abs(exact) if exact != 0 else absolute_error

            results[f'{alg_name}_result'] = float(result)
            results[f'{alg_name}_abs_error'] = float(absolute_error)
            results[f'{alg_name}_rel_error'] = float(relative_error)

        return results

    def run_comprehensive_benchmark(self, sizes=(100, 1000, 10000)) -> pd.DataFrame:
        """Run every test case at every size in both precisions."""
        test_cases = [
            'lognormal',
            'signed_lognormal',
            'tenths',
            'large_cancellation',
            'harmonic_series',
        ]
        dtypes = [np.float32, np.float64]

        print("Running accuracy benchmark...")
        total_tests = len(test_cases) * len(sizes) * len(dtypes)
        test_count = 0

        for case_type in test_cases:
            for size in sizes:
                for dtype in dtypes:
                    test_count += 1
                    test_name = f"{case_type}_{dtype.__name__}_{size}"
                    print(f"[{test_count}/{total_tests}] Running {test_name}...")

                    data = self.generate_test_case(case_type, size, dtype)
                    result = self.run_single_benchmark(test_name, data)
                    result['case_type'] = case_type
                    result['dtype'] = dtype.__name__
                    self.results.append(result)

        return pd.DataFrame(self.results)

    def analyze_results(self, df: pd.DataFrame) -> None:
        """Print median relative error per algorithm and test case."""
        print("\n" + "=" * 80)
        print("ACCURACY BENCHMARK ANALYSIS")
        print("=" * 80)

        for (case_type, dtype), case_df in df.groupby(['case_type', 'dtype']):
            print(f"\n{case_type} ({dtype}):")
            for alg in self.algorithms:
                median_error = case_df[f'{alg}_rel_error'].median()
                print(f"  {alg:<6} {median_error:.2e}")

    def plot_results(self, df: pd.DataFrame, save_plots: bool = True) -> None:
        """Bar chart of median relative error per test case."""
        case_types = df['case_type'].unique()
        x_pos = np.arange(len(case_types))
        bar_width = 0.25

        plt.figure(figsize=(14, 8))
        for i, alg in enumerate(self.algorithms):
            # Exact results plot at the floor of the log axis.
            errors = [max(df[df['case_type'] == case][f'{alg}_rel_error'].median(), 1e-20)
                      for case in case_types]
            plt.bar(x_pos + i * bar_width, errors, bar_width, label=alg, alpha=0.8)

        plt.xlabel('Test Case Type')
        plt.ylabel('Median Relative Error (log scale)')
        plt.title('Accuracy by Test Case Type')
        plt.yscale('log')
        plt.xticks(x_pos + bar_width, case_types, rotation=45, ha='right')
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        if save_plots:
            plt.savefig('accuracy_by_test_case.png', dpi=300, bbox_inches='tight')
        plt.show()


def main():
    """Run the complete accuracy benchmark suite."""
    print("COMPENSATED SUMMATION LIBRARY - ACCURACY BENCHMARK")
    print("=" * 60)

    benchmark = AccuracyBenchmark()
    results_df = benchmark.run_comprehensive_benchmark()

    results_df.to_csv('accuracy_benchmark_results.csv', index=False)
    print("\nResults saved to accuracy_benchmark_results.csv")

    benchmark.analyze_results(results_df)

    try:
        benchmark.plot_results(results_df)
    except Exception as e:
        print(f"\nError creating plots: {e}")

    print("\n" + "=" * 60)
    print("Accuracy benchmark completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
