#!/usr/bin/env python3
"""
Benchmark for MultiTapSincDelay.

Times per-sample process() calls against process_block() for several tap
counts and reports throughput relative to realtime at 44100 Hz.

Run with: python benchmarks/benchmark_delay.py [--samples N] [--runs N]

MIT License
"""

import argparse
import sys
import time
from dataclasses import dataclass
import numpy as np

# Add src to path for development
sys.path.insert(0, 'src')

from sincdelay import MultiTapSincDelay


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""
    name: str
    samples_per_run: int
    times_s: list[float]
    
    @property
    def mean_time_ms(self) -> float:
        return np.mean(self.times_s) * 1000
    
    @property
    def min_time_ms(self) -> float:
        return np.min(self.times_s) * 1000
    
    @property
    def realtime_ratio(self) -> float:
        """Ratio vs realtime at 44100 Hz (>1 = faster than realtime)."""
        realtime_s = self.samples_per_run / 44100
        return realtime_s / (self.mean_time_ms / 1000) if self.mean_time_ms > 0 else 0


def make_delay(k: int) -> MultiTapSincDelay:
    delay = MultiTapSincDelay(4096, initial_k=k)
    delay.set_tau1(100.5)
    delay.set_tau2(500.7)
    return delay


def run_per_sample(k: int, signal: np.ndarray, alphas: np.ndarray) -> None:
    delay = make_delay(k)
    for x, a in zip(signal, alphas):
        delay.set_alpha(a)
        delay.process(x)


def run_block(k: int, signal: np.ndarray, alphas: np.ndarray) -> None:
    make_delay(k).process_block(signal, alpha=alphas)


def benchmark(name, fn, k, signal, alphas, runs) -> BenchmarkResult:
    # warm-up compiles the kernels
    fn(k, signal[:16], alphas[:16])
    times = []
    for _ in range(runs):
        t0 = time.perf_counter()
        fn(k, signal, alphas)
        times.append(time.perf_counter() - t0)
    return BenchmarkResult(name=name, samples_per_run=len(signal), times_s=times)


def main():
    parser = argparse.ArgumentParser(description="Benchmark MultiTapSincDelay")
    parser.add_argument("--samples", type=int, default=44100)
    parser.add_argument("--runs", type=int, default=5)
    args = parser.parse_args()

    rng = np.random.default_rng(0)
    signal = rng.standard_normal(args.samples)
    alphas = np.linspace(0.0, 1.0, args.samples)

    print(f"{'benchmark':<24} {'mean ms':>10} {'min ms':>10} {'x realtime':>12}")
    for k in [0, 2, 8]:
        for label, fn in [("process", run_per_sample), ("process_block", run_block)]:
            result = benchmark(f"{label} K={k}", fn, k, signal, alphas, args.runs)
            print(
                f"{result.name:<24} {result.mean_time_ms:>10.2f} "
                f"{result.min_time_ms:>10.2f} {result.realtime_ratio:>12.1f}"
            )


if __name__ == "__main__":
    main()
