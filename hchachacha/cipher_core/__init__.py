"""
Cipher Core Package

This package implements the two 128-bit block ciphers built on the
HChaCha20 PRF: a balanced Feistel network (HChaChaCha) and a Lai-Massey
network (HChaChaCha2).
"""

from .block_cipher import PRFBlockCipher, BLOCK_SIZE, KEY_SIZE
from .feistel import HChaChaCha
from .lai_massey import HChaChaCha2
from .orthomorphism import orthomorphism, inverse_orthomorphism
from .variants import CIPHER_VARIANTS, get_cipher, encrypt_block, decrypt_block

__all__ = [
    'PRFBlockCipher', 'BLOCK_SIZE', 'KEY_SIZE', 'HChaChaCha', 'HChaChaCha2',
    'orthomorphism', 'inverse_orthomorphism',
    'CIPHER_VARIANTS', 'get_cipher', 'encrypt_block', 'decrypt_block',
]
