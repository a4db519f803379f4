"""
Utilities Package

This package provides the input size checks and the scoped buffer erasure
shared by the PRF wrapper, the key schedule and both cipher networks.
"""

from .validation import SizeMismatchError, equal_to_size
from .memory import zero_memory, secure_buffers, xor_bytes

__all__ = ['SizeMismatchError', 'equal_to_size', 'zero_memory', 'secure_buffers', 'xor_bytes']
