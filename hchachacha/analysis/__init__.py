"""
Diffusion Analysis Package

This package measures how plaintext and key bit flips propagate through
the ciphers. It is a regression check for round wiring, not a
cryptanalytic tool.
"""

from .avalanche import AvalancheReport, plaintext_avalanche, key_avalanche, hamming_distance_bits

__all__ = ['AvalancheReport', 'plaintext_avalanche', 'key_avalanche', 'hamming_distance_bits']
