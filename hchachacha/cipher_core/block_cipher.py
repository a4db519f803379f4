"""
Block Cipher Base

This module provides the parts shared by the PRF-based block ciphers:
fixed-size input validation, the per-call key schedule lifecycle and the
byte-returning convenience API. Subclasses only supply the network that
runs between pre-whitening and post-whitening.
"""

import logging
from typing import Optional

from ..key_schedule.counter_key_schedule import KeySchedule, derive_key_schedule
from ..prf.hchacha20 import HChaCha20, PseudorandomFunction
from ..utils.validation import equal_to_size

logger = logging.getLogger(__name__)

KEY_SIZE = 32
BLOCK_SIZE = 16
HALF_SIZE = BLOCK_SIZE // 2


class PRFBlockCipher:
    """
    128-bit block cipher built from a 256-bit keyed PRF.

    Instances hold no key material, only the PRF and the round count, so a
    single instance can be shared between threads.
    """

    name = 'PRFBlockCipher'
    KEY_SIZE = KEY_SIZE
    BLOCK_SIZE = BLOCK_SIZE
    default_rounds = 0

    def __init__(self, num_rounds: Optional[int] = None, prf: Optional[PseudorandomFunction] = None):
        """
        Initialize the block cipher.

        Args:
            num_rounds: Number of rounds (default: the variant's default)
            prf: PRF used for the key schedule and the round function
                (default: HChaCha20)
        """
        self.num_rounds = self.default_rounds if num_rounds is None else num_rounds
        self._check_rounds(self.num_rounds)
        self.prf = prf if prf is not None else HChaCha20()
        logger.debug("Initialized %s with %d rounds using %r", self.name, self.num_rounds, self.prf)

    def _check_rounds(self, num_rounds: int) -> None:
        if num_rounds < 1:
            raise ValueError(f"{self.name} needs at least one round, got {num_rounds}")

    def encrypt(self, ciphertext, plaintext, key) -> None:
        """
        Encrypt one block into a caller-supplied buffer.

        Args:
            ciphertext: Writable output buffer of BLOCK_SIZE bytes
            plaintext: The BLOCK_SIZE byte plaintext block
            key: The KEY_SIZE byte master key

        Raises:
            SizeMismatchError: If any buffer has the wrong length
        """
        equal_to_size('ciphertext', len(ciphertext), BLOCK_SIZE)
        equal_to_size('plaintext', len(plaintext), BLOCK_SIZE)
        equal_to_size('key', len(key), KEY_SIZE)

        with derive_key_schedule(self.prf, key, self.num_rounds) as schedule:
            self._encrypt(ciphertext, plaintext, schedule)

    def decrypt(self, plaintext, ciphertext, key) -> None:
        """
        Decrypt one block into a caller-supplied buffer.

        Args:
            plaintext: Writable output buffer of BLOCK_SIZE bytes
            ciphertext: The BLOCK_SIZE byte ciphertext block
            key: The KEY_SIZE byte master key

        Raises:
            SizeMismatchError: If any buffer has the wrong length
        """
        equal_to_size('plaintext', len(plaintext), BLOCK_SIZE)
        equal_to_size('ciphertext', len(ciphertext), BLOCK_SIZE)
        equal_to_size('key', len(key), KEY_SIZE)

        with derive_key_schedule(self.prf, key, self.num_rounds) as schedule:
            self._decrypt(plaintext, ciphertext, schedule)

    def encrypt_block(self, plaintext, key) -> bytes:
        """
        Encrypt a single block and return the ciphertext.

        Args:
            plaintext: The plaintext block to encrypt (16 bytes)
            key: The master key (32 bytes)

        Returns:
            The encrypted ciphertext block
        """
        ciphertext = bytearray(BLOCK_SIZE)
        self.encrypt(ciphertext, plaintext, key)
        return bytes(ciphertext)

    def decrypt_block(self, ciphertext, key) -> bytes:
        """
        Decrypt a single block and return the plaintext.

        Args:
            ciphertext: The ciphertext block to decrypt (16 bytes)
            key: The master key (32 bytes)

        Returns:
            The decrypted plaintext block
        """
        plaintext = bytearray(BLOCK_SIZE)
        self.decrypt(plaintext, ciphertext, key)
        return bytes(plaintext)

    def _encrypt(self, ciphertext, plaintext, schedule: KeySchedule) -> None:
        raise NotImplementedError

    def _decrypt(self, plaintext, ciphertext, schedule: KeySchedule) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(num_rounds={self.num_rounds}, prf={self.prf!r})"
