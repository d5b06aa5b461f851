#!/usr/bin/env python3
"""
Performance comparison benchmarks for compensated summation.

This script times naive summation, both accumulators and every
alternative formulation over inputs of increasing size.
"""

import numpy as np
import time
import psutil
import gc
import pandas as pd
import matplotlib.pyplot as plt
from typing import Callable, Dict, Tuple

from compsum import KahanBabuska, KahanBabuskaNeumaier, compensated_sum
from compsum import dev


def naive_sum(values):
    total = 0.0
    for value in values:
        total += value
    return total


class PerformanceBenchmark:
    """
    Timing benchmark suite for the summation formulations.
    """

    def __init__(self, seed: int = 42):
        self.seed = seed
        self.algorithms = {
            'naive': naive_sum,
            'Kahan-Babuska': lambda x: KahanBabuska.from_iterable(x).total(),
            'kahan_babuska_sum': dev.kahan_babuska_sum,
            'Kahan-Babuska-Neumaier': lambda x: KahanBabuskaNeumaier.from_iterable(x).total(),
            'kahan_babuska_neumaier_sum': dev.kahan_babuska_neumaier_sum,
            'kahan_babuska_neumaier_abs_sum': dev.kahan_babuska_neumaier_abs_sum,
            'kahan_babuska_neumaier_abs_two_sum': dev.kahan_babuska_neumaier_abs_two_sum,
        }

        self.results = []

    def generate_values(self, size: int) -> list:
        """Log-normal samples over many orders of magnitude, as builtin floats."""
        rng = np.random.default_rng(self.seed)
        return rng.lognormal(0.0, 40.0, size).tolist()

    def measure_memory_usage(self, func: Callable, data) -> Tuple[float, float]:
        """
        Measure resident memory around one function execution.

        Returns:
            Tuple of (peak_memory_mb, memory_increase_mb)
        """
        process = psutil.Process()

        gc.collect()
        initial_memory = process.memory_info().rss / 1024 / 1024  # MB

        func(data)

        peak_memory = process.memory_info().rss / 1024 / 1024  # MB
        return peak_memory, peak_memory - initial_memory

    def benchmark_execution_time(self, func: Callable, data,
                                 num_runs: int = 5) -> Dict:
        """
        Benchmark execution time with multiple runs.

        Args:
            func: Function to benchmark
            data: Input data
            num_runs: Number of benchmark runs

        Returns:
            Dictionary with timing statistics
        """
        times = []

        # Warm up
        func(data[:min(1000, len(data))])

        for _ in range(num_runs):
            start_time = time.perf_counter()
            func(data)
            times.append(time.perf_counter() - start_time)

        return {
            'mean_time': np.mean(times),
            'std_time': np.std(times),
            'min_time': np.min(times),
            'median_time': np.median(times),
        }

    def run_scalability_benchmark(self, sizes=(1, 10, 100, 10_000, 1_000_000)) -> pd.DataFrame:
        """
        Time every algorithm over increasing input sizes.

        Returns:
            DataFrame with one row per (algorithm, size)
        """
        print("Running scalability benchmark...")

        values = self.generate_values(max(sizes))

        for size in sizes:
            print(f"  Size: {size:,}")
            data = values[:size]

            for alg_name, algorithm in self.algorithms.items():
                timing_stats = self.benchmark_execution_time(algorithm, data)
                _, mem_increase = self.measure_memory_usage(algorithm, data)

                self.results.append({
                    'algorithm': alg_name,
                    'size': size,
                    'memory_increase_mb': mem_increase,
                    'throughput': size / timing_stats['mean_time'],
                    **timing_stats,
                })

        return pd.DataFrame(self.results)

    def run_vectorized_benchmark(self, lanes: int = 1000, length: int = 1000) -> pd.DataFrame:
        """Time reductions along an axis against per-lane scalar reductions."""
        print("Running vectorized benchmark...")

        rng = np.random.default_rng(self.seed)
        data = rng.lognormal(0.0, 40.0, (length, lanes))

        rows = []
        for kind in ('kb', 'kbn'):
            vectorized = self.benchmark_execution_time(
                lambda x: compensated_sum(x, kind=kind, axis=0), data, num_runs=3)
            per_lane = self.benchmark_execution_time(
                lambda x: [compensated_sum(x[:, j], kind=kind) for j in range(x.shape[1])],
                data, num_runs=1)
            rows.append({
                'kind': kind,
                'vectorized_time': vectorized['mean_time'],
                'per_lane_time': per_lane['mean_time'],
                'speedup': per_lane['mean_time'] / vectorized['mean_time'],
            })

        return pd.DataFrame(rows)

    def analyze_scalability_results(self, df: pd.DataFrame) -> None:
        """Print time per element relative to naive summation."""
        print("\n" + "=" * 80)
        print("PERFORMANCE ANALYSIS")
        print("=" * 80)
        print(f"{'Algorithm':<36} {'Size':>10} {'Mean Time (ms)':>15} {'vs naive':>10}")
        print("-" * 75)

        for size in sorted(df['size'].unique()):
            size_df = df[df['size'] == size]
            naive_time = size_df[size_df['algorithm'] == 'naive']['mean_time'].iloc[0]

            for _, row in size_df.iterrows():
                ratio = row['mean_time'] / naive_time
                print(f"{row['algorithm']:<36} {size:>10,} "
                      f"{row['mean_time'] * 1000:>15.3f} {ratio:>9.2f}x")

    def plot_performance_results(self, df: pd.DataFrame, save_plots: bool = True) -> None:
        """Plot throughput against input size on log-log axes."""
        plt.figure(figsize=(12, 8))

        for alg_name in self.algorithms:
            alg_df = df[df['algorithm'] == alg_name]
            plt.loglog(alg_df['size'], alg_df['throughput'], 'o-',
                       label=alg_name, markersize=6)

        plt.xlabel('Number of Elements')
        plt.ylabel('Throughput (elements/s)')
        plt.title('Compensated Summation Throughput')
        plt.legend()
        plt.grid(True, alpha=0.3)

        if save_plots:
            plt.savefig('throughput_vs_size.png', dpi=300, bbox_inches='tight')
        plt.show()


def main():
    """Run the complete performance benchmark suite."""
    print("COMPENSATED SUMMATION LIBRARY - PERFORMANCE BENCHMARK")
    print("=" * 60)

    benchmark = PerformanceBenchmark()

    scalability_df = benchmark.run_scalability_benchmark()
    vectorized_df = benchmark.run_vectorized_benchmark()

    scalability_df.to_csv('scalability_benchmark.csv', index=False)
    vectorized_df.to_csv('vectorized_benchmark.csv', index=False)
    print("\nResults saved to CSV files")

    benchmark.analyze_scalability_results(scalability_df)
    print("\nVECTORIZED REDUCTION:")
    print(vectorized_df.to_string(index=False))

    try:
        benchmark.plot_performance_results(scalability_df)
    except Exception as e:
        print(f"\nError creating plots: {e}")

    print("\n" + "=" * 60)
    print("Performance benchmark completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
