"""
Avalanche Measurement

Encrypts random blocks, flips one input bit at a time and compares the
two ciphertexts. A sound cipher flips about half of the output bits for
every single-bit input change.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from ..cipher_core.block_cipher import PRFBlockCipher

logger = logging.getLogger(__name__)


@dataclass
class AvalancheReport:
    """Summary statistics for one avalanche experiment."""
    samples: int
    mean_bit_ratio: float     # Mean fraction of output bits flipped
    min_bits_changed: int
    max_bits_changed: int
    min_bytes_changed: int
    mean_bytes_changed: float


def hamming_distance_bits(a: bytes, b: bytes) -> int:
    """
    Count differing bits between two equal-length byte strings.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        The number of bit positions that differ
    """
    diff = np.bitwise_xor(np.frombuffer(a, dtype=np.uint8), np.frombuffer(b, dtype=np.uint8))
    return int(np.unpackbits(diff).sum())


def _flip_bit(data: bytes, bit_pos: int) -> bytes:
    modified = bytearray(data)
    modified[bit_pos // 8] ^= 1 << (bit_pos % 8)
    return bytes(modified)


def _measure(samples: int, input_bits: int, rng: np.random.Generator,
             encrypt_pair: Callable[[int], tuple]) -> AvalancheReport:
    if samples < 1:
        raise ValueError(f"samples must be positive, got {samples}")

    bits_changed = np.empty(samples, dtype=np.int64)
    bytes_changed = np.empty(samples, dtype=np.int64)
    output_bits = 0

    for n, bit_pos in enumerate(rng.integers(0, input_bits, size=samples)):
        original, modified = encrypt_pair(int(bit_pos))
        output_bits = len(original) * 8
        bits_changed[n] = hamming_distance_bits(original, modified)
        bytes_changed[n] = int(np.count_nonzero(
            np.frombuffer(original, dtype=np.uint8) != np.frombuffer(modified, dtype=np.uint8)))

    return AvalancheReport(
        samples=samples,
        mean_bit_ratio=float(bits_changed.mean() / output_bits),
        min_bits_changed=int(bits_changed.min()),
        max_bits_changed=int(bits_changed.max()),
        min_bytes_changed=int(bytes_changed.min()),
        mean_bytes_changed=float(bytes_changed.mean()),
    )


def plaintext_avalanche(cipher: PRFBlockCipher, samples: int = 64,
                        key: Optional[bytes] = None, seed: Optional[int] = None) -> AvalancheReport:
    """
    Measure ciphertext change for single-bit plaintext flips under one key.

    Args:
        cipher: The cipher to measure
        samples: Number of (plaintext, bit) pairs to test
        key: Master key (random when omitted)
        seed: Seed for the sampling generator, for reproducible runs

    Returns:
        An AvalancheReport
    """
    rng = np.random.default_rng(seed)
    key = key if key is not None else rng.bytes(cipher.KEY_SIZE)

    def encrypt_pair(bit_pos):
        plaintext = rng.bytes(cipher.BLOCK_SIZE)
        return (cipher.encrypt_block(plaintext, key),
                cipher.encrypt_block(_flip_bit(plaintext, bit_pos), key))

    report = _measure(samples, cipher.BLOCK_SIZE * 8, rng, encrypt_pair)
    logger.info("%s plaintext avalanche: %.2f%% of bits changed over %d samples",
                cipher.name, report.mean_bit_ratio * 100, samples)
    return report


def key_avalanche(cipher: PRFBlockCipher, samples: int = 64,
                  plaintext: Optional[bytes] = None, seed: Optional[int] = None) -> AvalancheReport:
    """
    Measure ciphertext change for single-bit master key flips.

    Every key bit feeds every PRF call of the key schedule, so one flipped
    key bit should change the whole schedule and thus the ciphertext.

    Args:
        cipher: The cipher to measure
        samples: Number of (key, bit) pairs to test
        plaintext: Fixed plaintext block (random when omitted)
        seed: Seed for the sampling generator, for reproducible runs

    Returns:
        An AvalancheReport
    """
    rng = np.random.default_rng(seed)
    plaintext = plaintext if plaintext is not None else rng.bytes(cipher.BLOCK_SIZE)

    def encrypt_pair(bit_pos):
        key = rng.bytes(cipher.KEY_SIZE)
        return (cipher.encrypt_block(plaintext, key),
                cipher.encrypt_block(plaintext, _flip_bit(key, bit_pos)))

    report = _measure(samples, cipher.KEY_SIZE * 8, rng, encrypt_pair)
    logger.info("%s key avalanche: %.2f%% of bits changed over %d samples",
                cipher.name, report.mean_bit_ratio * 100, samples)
    return report
