#!/usr/bin/env python3
"""
noisy Benchmark Suite
=====================

Times construction and 1D/2D/3D evaluation of every generator.

Usage:
    python run_benchmarks.py [--output results.json] [--quick] [--seed N]

License: MIT
"""

import argparse
import json
import time
import sys
from pathlib import Path
from typing import Callable, List
from dataclasses import dataclass, asdict

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from noisy import GeneratorType, get_generator, __version__


@dataclass
class BenchmarkResult:
    """Single benchmark result"""
    generator: str
    operation: str
    iterations: int
    total_ms: float
    ns_per_call: float


def _time_calls(fn: Callable[[], object], iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) * 1000


def benchmark_generator(
    generator_type: GeneratorType,
    iterations: int,
    seed: int
) -> List[BenchmarkResult]:
    """Benchmark construction and evaluation of one generator type"""
    rng = np.random.default_rng(seed)
    coords = rng.uniform(-1000.0, 1000.0, size=(iterations, 3)).tolist()
    generator = get_generator(generator_type, seed=seed)

    timings = {}
    construct_iterations = max(1, iterations // 100)
    timings['new'] = (
        construct_iterations,
        _time_calls(lambda: get_generator(generator_type), construct_iterations),
    )

    start = time.perf_counter()
    for x, _, _ in coords:
        generator.noise1d(x)
    timings['noise1d'] = (iterations, (time.perf_counter() - start) * 1000)

    start = time.perf_counter()
    for x, y, _ in coords:
        generator.noise2d(x, y)
    timings['noise2d'] = (iterations, (time.perf_counter() - start) * 1000)

    start = time.perf_counter()
    for x, y, z in coords:
        generator.noise3d(x, y, z)
    timings['noise3d'] = (iterations, (time.perf_counter() - start) * 1000)

    return [
        BenchmarkResult(
            generator=generator_type.value,
            operation=operation,
            iterations=count,
            total_ms=total_ms,
            ns_per_call=total_ms * 1e6 / count,
        )
        for operation, (count, total_ms) in timings.items()
    ]


def print_results(results: List[BenchmarkResult]) -> None:
    print(f"{'Generator':<16} {'Operation':<10} {'Iterations':>10} {'Total ms':>10} {'ns/call':>10}")
    print("-" * 60)
    for r in results:
        print(f"{r.generator:<16} {r.operation:<10} {r.iterations:>10} "
              f"{r.total_ms:>10.2f} {r.ns_per_call:>10.0f}")


def main():
    parser = argparse.ArgumentParser(description='noisy benchmark suite')
    parser.add_argument('--output', '-o', help='Write results as JSON to this file')
    parser.add_argument('--quick', action='store_true', help='Run fewer iterations')
    parser.add_argument('--seed', type=int, default=1337, help='Seed for tables and coordinates')
    args = parser.parse_args()

    iterations = 2_000 if args.quick else 100_000

    print("=" * 60)
    print(f"noisy {__version__} benchmark ({iterations:,} calls per operation)")
    print("=" * 60)

    results: List[BenchmarkResult] = []
    for generator_type in (GeneratorType.CHECKERBOARD, GeneratorType.PERLIN, GeneratorType.SIMPLEX):
        results.extend(benchmark_generator(generator_type, iterations, args.seed))

    print_results(results)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump({
                'version': __version__,
                'iterations': iterations,
                'results': [asdict(r) for r in results],
            }, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == '__main__':
    main()
