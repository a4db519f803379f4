"""
Benchmark Package

This package times the ciphers against AES-256 and against the PRF and
stream primitives they are built from.
"""

from .runner import BenchmarkResult, BENCHMARK_DEFAULT_PARAMS, build_benchmarks, run_benchmarks, main

__all__ = ['BenchmarkResult', 'BENCHMARK_DEFAULT_PARAMS', 'build_benchmarks', 'run_benchmarks', 'main']
