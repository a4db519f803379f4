import pytest

from hchachacha import HChaChaCha, HChaChaCha2

from conftest import RecordingPRF

CIPHERS = [HChaChaCha, HChaChaCha2]


def derived_buffers(prf, key):
    return [(kind, buffer) for kind, buffer in prf.buffers if buffer is not key]


@pytest.mark.parametrize("cipher_class", CIPHERS)
@pytest.mark.parametrize("direction", ["encrypt", "decrypt"])
def test_buffers_are_wiped_after_success(cipher_class, direction, key):
    prf = RecordingPRF()
    cipher = cipher_class(prf=prf)
    output = bytearray(16)

    getattr(cipher, direction)(output, bytes.fromhex("c1c0e58bd913006feba00f4b3cc3594e"), key)

    assert any(output)
    buffers = derived_buffers(prf, key)
    # Round keys are the only key argument besides the master key
    assert sum(kind == 'key' for kind, _ in buffers) == cipher.num_rounds
    for kind, buffer in buffers:
        assert not any(buffer), kind


@pytest.mark.parametrize("cipher_class", CIPHERS)
@pytest.mark.parametrize("fail_after", [1, 5, 10])
def test_buffers_are_wiped_when_prf_fails(cipher_class, fail_after, key):
    prf = RecordingPRF(fail_after=fail_after)
    output = bytearray(b'\xaa' * 16)

    with pytest.raises(RuntimeError):
        cipher_class(prf=prf).encrypt(output, bytes(range(16)), key)

    assert output == bytearray(b'\xaa' * 16)
    for kind, buffer in derived_buffers(prf, key):
        assert not any(buffer), kind


def test_master_key_is_not_modified(key):
    master = bytearray(key)
    HChaChaCha().encrypt_block(bytes(16), master)
    HChaChaCha2().encrypt_block(bytes(16), master)
    assert master == bytearray(key)
