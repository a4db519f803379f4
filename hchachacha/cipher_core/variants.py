"""
Cipher Variants

Name lookup for the available ciphers and module-level convenience
functions in the style of one-shot block encryption.
"""

from .block_cipher import PRFBlockCipher
from .feistel import HChaChaCha
from .lai_massey import HChaChaCha2

CIPHER_VARIANTS = {
    'feistel': HChaChaCha,
    'hchachacha': HChaChaCha,
    'lai-massey': HChaChaCha2,
    'hchachacha2': HChaChaCha2,
}


def get_cipher(variant: str = 'feistel', **kwargs) -> PRFBlockCipher:
    """
    Construct a cipher by variant name.

    Args:
        variant: One of the CIPHER_VARIANTS keys (case-insensitive)
        **kwargs: Passed to the cipher constructor (num_rounds, prf)

    Returns:
        The cipher instance
    """
    try:
        cipher_class = CIPHER_VARIANTS[variant.lower()]
    except KeyError:
        raise ValueError(f"Unknown cipher variant {variant!r}, expected one of {sorted(CIPHER_VARIANTS)}") from None
    return cipher_class(**kwargs)


def encrypt_block(plaintext, key, variant: str = 'feistel') -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt (16 bytes)
        key: The master key (32 bytes)
        variant: Cipher variant name (default: 'feistel')

    Returns:
        The encrypted ciphertext block
    """
    return get_cipher(variant).encrypt_block(plaintext, key)


def decrypt_block(ciphertext, key, variant: str = 'feistel') -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt (16 bytes)
        key: The master key (32 bytes)
        variant: Cipher variant name (default: 'feistel')

    Returns:
        The decrypted plaintext block
    """
    return get_cipher(variant).decrypt_block(ciphertext, key)
