"""
Benchmark Runner

Times single-block encryption with both ciphers next to an AES-256
baseline, a keyed BLAKE2b-256 commitment, and the cost of deriving the
round and whitening keys with HChaCha20 versus one ChaCha20 keystream
fill of the same size.
"""

import argparse
import hashlib
import logging
import os
import secrets
import sys
import timeit
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from Cryptodome.Cipher import AES

from ..cipher_core.feistel import HChaChaCha
from ..cipher_core.lai_massey import HChaChaCha2
from ..prf.hchacha20 import HChaCha20, chacha20_fill

logger = logging.getLogger(__name__)

BENCHMARK_DEFAULT_PARAMS = {
    'iterations': 2000,   # Calls per timing run
    'repeat': 5,          # Timing runs, best one is reported
}

ITERATIONS_ENV_VAR = 'HCHACHACHA_BENCH_ITERATIONS'
BASELINE = 'AES-256'

CHACHA20_NONCE_SIZE = 12
POLY1305_TAG_SIZE = 16


@dataclass
class BenchmarkResult:
    """Timing of one benchmark."""
    name: str
    iterations: int
    seconds_per_op: float
    relative: float       # seconds_per_op divided by the baseline's

    @property
    def ops_per_second(self) -> float:
        return 1.0 / self.seconds_per_op if self.seconds_per_op else float('inf')


def _derive_keys(prf: HChaCha20, output: bytearray, key: bytes, counter: bytearray, count: int) -> None:
    for _ in range(count):
        counter[-1] = (counter[-1] + 1) & 0xFF
        prf.derive_key(output, key, counter)


def build_benchmarks(key: Optional[bytes] = None) -> Dict[str, Callable[[], None]]:
    """
    Create the benchmark callables over shared random inputs.

    Args:
        key: 32-byte key (random when omitted)

    Returns:
        Ordered mapping of benchmark name to zero-argument callable
    """
    key = key if key is not None else secrets.token_bytes(HChaChaCha.KEY_SIZE)
    plaintext = secrets.token_bytes(HChaChaCha.BLOCK_SIZE)
    ciphertext = bytearray(HChaChaCha.BLOCK_SIZE)
    nonce = secrets.token_bytes(CHACHA20_NONCE_SIZE)
    tag = secrets.token_bytes(POLY1305_TAG_SIZE)
    counter = bytearray(plaintext)

    prf = HChaCha20()
    output = bytearray(prf.OUTPUT_SIZE)
    feistel = HChaChaCha(prf=prf)
    lai_massey = HChaChaCha2(prf=prf)
    # One whitening key plus one key per round
    feistel_keys = bytearray(prf.OUTPUT_SIZE * (feistel.num_rounds + 1))
    lai_massey_keys = bytearray(prf.OUTPUT_SIZE * (lai_massey.num_rounds + 1))

    def run_aes():
        AES.new(key, AES.MODE_ECB).encrypt(plaintext)

    def run_ctx():
        blake2b = hashlib.blake2b(digest_size=prf.OUTPUT_SIZE, key=key)
        blake2b.update(nonce)
        # Skipping associated data
        blake2b.update(b'')
        blake2b.update(tag)
        blake2b.digest()

    return {
        BASELINE: run_aes,
        'CTX with keyed BLAKE2b-256': run_ctx,
        'HChaChaCha (balanced Feistel)': lambda: feistel.encrypt(ciphertext, plaintext, key),
        'HChaChaCha2 (Lai-Massey)': lambda: lai_massey.encrypt(ciphertext, plaintext, key),
        'HChaCha20 subkeys and whitening keys derivation (Feistel)':
            lambda: _derive_keys(prf, output, key, counter, feistel.num_rounds + 1),
        'HChaCha20 subkeys and whitening keys derivation (Lai-Massey)':
            lambda: _derive_keys(prf, output, key, counter, lai_massey.num_rounds + 1),
        'ChaCha20 subkeys and whitening keys derivation (Feistel)':
            lambda: chacha20_fill(feistel_keys, nonce, key),
        'ChaCha20 subkeys and whitening keys derivation (Lai-Massey)':
            lambda: chacha20_fill(lai_massey_keys, nonce, key),
        'HChaCha20': lambda: prf.derive_key(output, key, plaintext),
        'ChaCha20 with 256-bit output': lambda: chacha20_fill(output, nonce, key),
    }


def run_benchmarks(iterations: Optional[int] = None, repeat: Optional[int] = None,
                   only: Optional[Sequence[str]] = None) -> List[BenchmarkResult]:
    """
    Run the benchmarks and report the best timing of each.

    Args:
        iterations: Calls per timing run (default: HCHACHACHA_BENCH_ITERATIONS
            or BENCHMARK_DEFAULT_PARAMS)
        repeat: Number of timing runs per benchmark
        only: Case-insensitive substrings selecting benchmarks to run; the
            baseline always runs

    Returns:
        List of BenchmarkResult in definition order
    """
    if iterations is None:
        iterations = int(os.environ.get(ITERATIONS_ENV_VAR, BENCHMARK_DEFAULT_PARAMS['iterations']))
    if repeat is None:
        repeat = BENCHMARK_DEFAULT_PARAMS['repeat']
    if iterations < 1 or repeat < 1:
        raise ValueError("iterations and repeat must be positive")

    benchmarks = build_benchmarks()
    if only:
        patterns = [pattern.lower() for pattern in only]
        benchmarks = {name: func for name, func in benchmarks.items()
                      if name == BASELINE or any(p in name.lower() for p in patterns)}

    timings = {}
    for name, func in benchmarks.items():
        logger.info("Running %s (%d x %d)", name, repeat, iterations)
        best = min(timeit.repeat(func, number=iterations, repeat=repeat))
        timings[name] = best / iterations

    baseline = timings[BASELINE]
    return [BenchmarkResult(name, iterations, seconds, seconds / baseline if baseline else float('inf'))
            for name, seconds in timings.items()]


def format_results(results: List[BenchmarkResult]) -> str:
    width = max(len(result.name) for result in results)
    lines = [f"{'Benchmark':<{width}}  {'ns/op':>12}  {'Ratio':>8}"]
    lines.append('-' * len(lines[0]))
    for result in results:
        lines.append(f"{result.name:<{width}}  {result.seconds_per_op * 1e9:>12.1f}  {result.relative:>8.2f}")
    return '\n'.join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the HChaCha20-based block ciphers")
    parser.add_argument("--iterations", type=int, default=None,
                        help=f"Calls per timing run (default: ${ITERATIONS_ENV_VAR} or "
                             f"{BENCHMARK_DEFAULT_PARAMS['iterations']})")
    parser.add_argument("--repeat", type=int, default=BENCHMARK_DEFAULT_PARAMS['repeat'],
                        help="Timing runs per benchmark, best is reported")
    parser.add_argument("--only", nargs="+", metavar="NAME", help="Run benchmarks whose name contains NAME")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each benchmark as it runs")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        results = run_benchmarks(args.iterations, args.repeat, args.only)
    except ValueError as e:
        parser.error(str(e))
    print(format_results(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
