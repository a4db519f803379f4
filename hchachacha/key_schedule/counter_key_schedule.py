"""
Counter-based Key Schedule Implementation

This module expands a 256-bit master key into one whitening key and N
round keys. Each value is a separate PRF call keyed by the master key,
with a 16-byte counter nonce whose last byte is incremented before every
call, so no two derivations within one schedule share an input.
"""

import secrets
from contextlib import contextmanager
from typing import Iterator

from ..prf.hchacha20 import PseudorandomFunction
from ..utils.memory import secure_buffers, zero_memory


class KeySchedule:
    """
    Whitening and round keys for a single encrypt or decrypt call.

    The whitening buffer holds one full PRF output: bytes 0..16 are the
    pre-whitening key and bytes 16..32 the post-whitening key. Round keys
    are stored back to back, KEY_SIZE bytes each.
    """

    def __init__(self, num_rounds: int,
                 key_size: int = PseudorandomFunction.KEY_SIZE,
                 output_size: int = PseudorandomFunction.OUTPUT_SIZE):
        self.num_rounds = num_rounds
        self.key_size = key_size
        self.whitening_keys = bytearray(output_size)
        self.round_keys = bytearray(key_size * num_rounds)

    def round_key(self, index: int) -> memoryview:
        """Return a view of the key for round ``index``."""
        start = index * self.key_size
        return memoryview(self.round_keys)[start:start + self.key_size]

    def pre_whitening(self, half_size: int):
        """Return the (left, right) pre-whitening key halves."""
        keys = memoryview(self.whitening_keys)
        return keys[:half_size], keys[half_size:2 * half_size]

    def post_whitening(self, half_size: int):
        """Return the (left, right) post-whitening key halves."""
        keys = memoryview(self.whitening_keys)
        end = len(keys)
        return keys[end - 2 * half_size:end - half_size], keys[end - half_size:]

    def wipe(self) -> None:
        """Overwrite all derived key material with zeros."""
        zero_memory(self.whitening_keys)
        zero_memory(self.round_keys)


def generate_key(key_size: int = PseudorandomFunction.KEY_SIZE) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 32)

    Returns:
        A random key as bytes
    """
    return secrets.token_bytes(key_size)


def expand_key(prf: PseudorandomFunction, master_key, schedule: KeySchedule) -> None:
    """
    Fill a key schedule from the master key.

    The whitening keys use counter value 1 and round key i uses counter
    value i + 2. Nothing here depends on the block being processed.

    Args:
        prf: The PRF used for derivation
        master_key: The 32-byte master key
        schedule: Schedule to fill in place
    """
    with secure_buffers(prf.NONCE_SIZE) as (counter,):
        counter[-1] += 1
        prf.derive_key(schedule.whitening_keys, master_key, counter)

        for i in range(schedule.num_rounds):
            counter[-1] += 1
            prf.derive_key(schedule.round_key(i), master_key, counter)


@contextmanager
def derive_key_schedule(prf: PseudorandomFunction, master_key, num_rounds: int) -> Iterator[KeySchedule]:
    """
    Derive a key schedule that is wiped when the block exits.

    Args:
        prf: The PRF used for derivation
        master_key: The 32-byte master key
        num_rounds: Number of round keys to derive

    Yields:
        The populated KeySchedule
    """
    schedule = KeySchedule(num_rounds, prf.KEY_SIZE, prf.OUTPUT_SIZE)
    try:
        expand_key(prf, master_key, schedule)
        yield schedule
    finally:
        schedule.wipe()
