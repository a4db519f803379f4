import pytest

from hchachacha import HChaChaCha, SizeMismatchError, generate_key

from conftest import HashPRF

TEST_VECTORS = [
    (
        "9e16adbfb3922e0d544230ffed5a0b70",
        "00000000000000000000000000000000",
        "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
    ),
    (
        "8be3abc3b41ffe0ea7fa9756824b63da",
        "00000000000000000000000000000000",
        "1001000000000000000000000000000000000000000000000000000000000000",
    ),
    (
        "aac6ad4b7e52bbc6aef51aad628f3aa1",
        "c1c0e58bd913006feba00f4b3cc3594e",
        "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f",
    ),
]

INVALID_PARAMETER_SIZES = [
    (HChaChaCha.BLOCK_SIZE + 1, HChaChaCha.BLOCK_SIZE, HChaChaCha.KEY_SIZE),
    (HChaChaCha.BLOCK_SIZE - 1, HChaChaCha.BLOCK_SIZE, HChaChaCha.KEY_SIZE),
    (HChaChaCha.BLOCK_SIZE, HChaChaCha.BLOCK_SIZE + 1, HChaChaCha.KEY_SIZE),
    (HChaChaCha.BLOCK_SIZE, HChaChaCha.BLOCK_SIZE - 1, HChaChaCha.KEY_SIZE),
    (HChaChaCha.BLOCK_SIZE, HChaChaCha.BLOCK_SIZE, HChaChaCha.KEY_SIZE + 1),
    (HChaChaCha.BLOCK_SIZE, HChaChaCha.BLOCK_SIZE, HChaChaCha.KEY_SIZE - 1),
]


@pytest.mark.parametrize("ciphertext, plaintext, key", TEST_VECTORS)
def test_encrypt_valid(ciphertext, plaintext, key):
    c = bytearray(len(ciphertext) // 2)
    HChaChaCha().encrypt(c, bytes.fromhex(plaintext), bytes.fromhex(key))
    assert c.hex() == ciphertext


@pytest.mark.parametrize("ciphertext, plaintext, key", TEST_VECTORS)
def test_decrypt_valid(ciphertext, plaintext, key):
    p = bytearray(len(plaintext) // 2)
    HChaChaCha().decrypt(p, bytes.fromhex(ciphertext), bytes.fromhex(key))
    assert p.hex() == plaintext


@pytest.mark.parametrize("ciphertext_size, plaintext_size, key_size", INVALID_PARAMETER_SIZES)
def test_encrypt_invalid(ciphertext_size, plaintext_size, key_size):
    prf = HashPRF()
    c = bytearray(b'\xaa' * ciphertext_size)
    with pytest.raises(SizeMismatchError):
        HChaChaCha(prf=prf).encrypt(c, bytes(plaintext_size), bytes(key_size))
    assert c == bytearray(b'\xaa' * ciphertext_size)
    assert prf.calls == []


@pytest.mark.parametrize("ciphertext_size, plaintext_size, key_size", INVALID_PARAMETER_SIZES)
def test_decrypt_invalid(ciphertext_size, plaintext_size, key_size):
    prf = HashPRF()
    p = bytearray(b'\xaa' * plaintext_size)
    with pytest.raises(SizeMismatchError):
        HChaChaCha(prf=prf).decrypt(p, bytes(ciphertext_size), bytes(key_size))
    assert p == bytearray(b'\xaa' * plaintext_size)
    assert prf.calls == []


def test_size_error_names_the_buffer():
    with pytest.raises(SizeMismatchError) as excinfo:
        HChaChaCha().encrypt(bytearray(16), bytes(15), bytes(32))
    assert excinfo.value.name == 'plaintext'
    assert excinfo.value.actual == 15
    assert excinfo.value.expected == 16


def test_round_trip_random_blocks():
    cipher = HChaChaCha()
    for _ in range(20):
        key, plaintext = generate_key(), generate_key(16)
        assert cipher.decrypt_block(cipher.encrypt_block(plaintext, key), key) == plaintext


@pytest.mark.parametrize("num_rounds", [2, 4, 10])
def test_round_trip_other_round_counts(num_rounds, key):
    cipher = HChaChaCha(num_rounds=num_rounds, prf=HashPRF())
    plaintext = bytes.fromhex("c1c0e58bd913006feba00f4b3cc3594e")
    ciphertext = cipher.encrypt_block(plaintext, key)
    assert ciphertext != plaintext
    assert cipher.decrypt_block(ciphertext, key) == plaintext


@pytest.mark.parametrize("num_rounds", [0, 1, 7, -2])
def test_rejects_odd_or_empty_round_counts(num_rounds):
    with pytest.raises(ValueError):
        HChaChaCha(num_rounds=num_rounds)


def test_prf_call_count(key):
    prf = HashPRF()
    HChaChaCha(prf=prf).encrypt_block(bytes(16), key)
    # One whitening key, eight round keys and eight round functions
    assert len(prf.calls) == 17


def test_round_function_inputs_are_zero_padded_halves(key):
    prf = HashPRF()
    plaintext = bytes.fromhex("c1c0e58bd913006feba00f4b3cc3594e")
    HChaChaCha(prf=prf).encrypt_block(plaintext, key)
    for _, nonce in prf.calls[9:]:
        assert nonce[8:] == bytes(8)


def test_deterministic(key):
    cipher = HChaChaCha()
    plaintext = bytes(range(16))
    assert cipher.encrypt_block(plaintext, key) == cipher.encrypt_block(plaintext, key)


def test_encrypt_in_place(key):
    block = bytearray.fromhex("c1c0e58bd913006feba00f4b3cc3594e")
    cipher = HChaChaCha()
    cipher.encrypt(block, block, key)
    assert block.hex() == "aac6ad4b7e52bbc6aef51aad628f3aa1"
    cipher.decrypt(block, block, key)
    assert block.hex() == "c1c0e58bd913006feba00f4b3cc3594e"


def test_single_bit_flip_changes_several_bytes(key):
    cipher = HChaChaCha()
    reference = cipher.encrypt_block(bytes(16), key)
    for bit in range(128):
        plaintext = bytearray(16)
        plaintext[bit // 8] ^= 1 << (bit % 8)
        ciphertext = cipher.encrypt_block(plaintext, key)
        assert sum(a != b for a, b in zip(reference, ciphertext)) > 1


def test_key_byte_change_changes_ciphertext(key):
    cipher = HChaChaCha()
    for i in range(32):
        other = bytearray(key)
        other[i] ^= 0x80
        assert cipher.encrypt_block(bytes(16), other) != cipher.encrypt_block(bytes(16), key)
