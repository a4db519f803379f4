"""
Key Schedule Package

This package implements the key expansion that turns a master key into
whitening keys and per-round keys using the PRF with a counter nonce.
"""

from .counter_key_schedule import KeySchedule, expand_key, derive_key_schedule, generate_key

__all__ = ['KeySchedule', 'expand_key', 'derive_key_schedule', 'generate_key']
