import hashlib

import pytest

from hchachacha.prf import PseudorandomFunction


class HashPRF(PseudorandomFunction):
    """Deterministic stand-in for HChaCha20: SHA-256 over key || nonce."""

    def __init__(self):
        self.calls = []

    def derive_key(self, output, key, nonce):
        self.calls.append((bytes(key), bytes(nonce)))
        output[:] = hashlib.sha256(bytes(key) + bytes(nonce)).digest()


class RecordingPRF(HashPRF):
    """Keeps references to every buffer it is handed so tests can inspect them later."""

    def __init__(self, fail_after=None):
        super().__init__()
        self.fail_after = fail_after
        self.buffers = []

    def derive_key(self, output, key, nonce):
        if self.fail_after is not None and len(self.calls) >= self.fail_after:
            raise RuntimeError("PRF failure")
        super().derive_key(output, key, nonce)
        self.buffers.append(('output', output))
        self.buffers.append(('key', key))
        self.buffers.append(('nonce', nonce))


class ZeroPRF(PseudorandomFunction):
    """Degenerate PRF whose output is always zero."""

    def derive_key(self, output, key, nonce):
        output[:] = bytes(len(output))


@pytest.fixture
def hash_prf():
    return HashPRF()


@pytest.fixture
def key():
    return bytes(range(32))
