"""
Pseudorandom Function Package

This package defines the wide-block PRF interface consumed by the key
schedule and the round functions, and its HChaCha20 implementation.
"""

from .hchacha20 import PseudorandomFunction, HChaCha20, chacha20_fill

__all__ = ['PseudorandomFunction', 'HChaCha20', 'chacha20_fill']
