"""
HChaCha20 Pseudorandom Function

This module provides the PRF used as both key derivation function and
round function by the block ciphers. HChaCha20 maps a 256-bit key and a
128-bit input to a 256-bit output; it is the subkey derivation step of
XChaCha20.
"""

from abc import ABC, abstractmethod

from Cryptodome.Cipher import ChaCha20
from Cryptodome.Cipher.ChaCha20 import _HChaCha20

from ..utils.memory import secure_buffers, zero_memory
from ..utils.validation import equal_to_size


class PseudorandomFunction(ABC):
    """
    Keyed function with a fixed-size input and a fixed-size output.

    Implementations must be deterministic and must not fail for inputs of
    the declared sizes.
    """

    KEY_SIZE = 32
    NONCE_SIZE = 16
    OUTPUT_SIZE = 32

    @abstractmethod
    def derive_key(self, output, key, nonce) -> None:
        """
        Write PRF(key, nonce) into output.

        Args:
            output: Writable buffer of OUTPUT_SIZE bytes
            key: KEY_SIZE bytes of key material
            nonce: NONCE_SIZE bytes of input
        """


class HChaCha20(PseudorandomFunction):
    """HChaCha20 backed by the pycryptodomex ChaCha20 implementation."""

    def derive_key(self, output, key, nonce) -> None:
        equal_to_size('output', len(output), self.OUTPUT_SIZE)
        equal_to_size('key', len(key), self.KEY_SIZE)
        equal_to_size('nonce', len(nonce), self.NONCE_SIZE)

        # Copies keep memoryview slices away from the C bindings and are wiped afterwards
        with secure_buffers(self.KEY_SIZE, self.NONCE_SIZE) as (key_copy, nonce_copy):
            key_copy[:] = key
            nonce_copy[:] = nonce
            subkey = _HChaCha20(key_copy, nonce_copy)
            try:
                output[:] = subkey
            finally:
                zero_memory(subkey)

    def __repr__(self) -> str:
        return 'HChaCha20()'


def chacha20_fill(output, nonce: bytes, key: bytes) -> None:
    """
    Fill a buffer with ChaCha20 keystream.

    This is the stream alternative to deriving round keys with one
    HChaCha20 call each, and is only used for comparative benchmarks.

    Args:
        output: Writable buffer to fill
        nonce: 8 or 12 byte ChaCha20 nonce
        key: 32-byte key
    """
    equal_to_size('key', len(key), PseudorandomFunction.KEY_SIZE)
    cipher = ChaCha20.new(key=bytes(key), nonce=bytes(nonce))
    output[:] = cipher.encrypt(bytes(len(output)))
