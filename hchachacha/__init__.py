"""
HChaChaCha - 128-bit Block Ciphers from a Wide-Block PRF

This library turns the HChaCha20 pseudorandom function into two
narrow-block, invertible permutations suitable as building blocks for
small-domain encryption.

Key Features:
- 128-bit block size, 256-bit key
- HChaChaCha: balanced Feistel network, 8 rounds
- HChaChaCha2: Lai-Massey network with a linear orthomorphism, 6 rounds
- Counter-based key schedule with pre- and post-whitening keys
- Derived key material is wiped on every exit path
- Pluggable PRF for testing against mock primitives

"""

from .cipher_core import (
    BLOCK_SIZE, KEY_SIZE, PRFBlockCipher, HChaChaCha, HChaChaCha2,
    CIPHER_VARIANTS, get_cipher, encrypt_block, decrypt_block,
)
from .key_schedule import generate_key
from .prf import PseudorandomFunction, HChaCha20
from .utils import SizeMismatchError

__version__ = '0.1.0'
__author__ = 'HChaChaCha Team'

__all__ = [
    'BLOCK_SIZE', 'KEY_SIZE', 'PRFBlockCipher', 'HChaChaCha', 'HChaChaCha2',
    'CIPHER_VARIANTS', 'get_cipher', 'encrypt_block', 'decrypt_block',
    'generate_key', 'PseudorandomFunction', 'HChaCha20', 'SizeMismatchError',
]
