"""
Balanced Feistel Network

HChaChaCha splits the 128-bit block into two 64-bit halves and updates
them alternately with HChaCha20 keyed by the round key and fed the other
half, zero-padded to the 128-bit PRF input. Only the first 8 bytes of each
PRF output are used.
"""

from .block_cipher import PRFBlockCipher, HALF_SIZE
from ..key_schedule.counter_key_schedule import KeySchedule
from ..utils.memory import secure_buffers, xor_bytes


class HChaChaCha(PRFBlockCipher):
    """
    Feistel cipher with pre- and post-whitening.

    Rounds are processed in pairs, one update of each half per pair, so the
    round count must be even.
    """

    name = 'HChaChaCha'
    default_rounds = 8

    def _check_rounds(self, num_rounds: int) -> None:
        if num_rounds < 2 or num_rounds % 2:
            raise ValueError(f"{self.name} needs a positive even number of rounds, got {num_rounds}")

    def _encrypt(self, ciphertext, plaintext, schedule: KeySchedule) -> None:
        prf = self.prf
        with secure_buffers(prf.OUTPUT_SIZE, prf.NONCE_SIZE, prf.NONCE_SIZE) as (output, left_nonce, right_nonce):
            left_nonce[:HALF_SIZE] = plaintext[:HALF_SIZE]
            right_nonce[:HALF_SIZE] = plaintext[HALF_SIZE:]
            left_half = memoryview(left_nonce)[:HALF_SIZE]
            right_half = memoryview(right_nonce)[:HALF_SIZE]

            pre_left, pre_right = schedule.pre_whitening(HALF_SIZE)
            xor_bytes(left_half, pre_left)
            xor_bytes(right_half, pre_right)

            for i in range(0, self.num_rounds, 2):
                prf.derive_key(output, schedule.round_key(i), right_nonce)
                xor_bytes(left_half, output)

                prf.derive_key(output, schedule.round_key(i + 1), left_nonce)
                xor_bytes(right_half, output)

            post_left, post_right = schedule.post_whitening(HALF_SIZE)
            xor_bytes(left_half, post_left)
            xor_bytes(right_half, post_right)

            ciphertext[:HALF_SIZE] = left_half
            ciphertext[HALF_SIZE:] = right_half

    def _decrypt(self, plaintext, ciphertext, schedule: KeySchedule) -> None:
        prf = self.prf
        with secure_buffers(prf.OUTPUT_SIZE, prf.NONCE_SIZE, prf.NONCE_SIZE) as (output, left_nonce, right_nonce):
            left_nonce[:HALF_SIZE] = ciphertext[:HALF_SIZE]
            right_nonce[:HALF_SIZE] = ciphertext[HALF_SIZE:]
            left_half = memoryview(left_nonce)[:HALF_SIZE]
            right_half = memoryview(right_nonce)[:HALF_SIZE]

            post_left, post_right = schedule.post_whitening(HALF_SIZE)
            xor_bytes(left_half, post_left)
            xor_bytes(right_half, post_right)

            for i in range(self.num_rounds - 1, 0, -2):
                prf.derive_key(output, schedule.round_key(i), left_nonce)
                xor_bytes(right_half, output)

                prf.derive_key(output, schedule.round_key(i - 1), right_nonce)
                xor_bytes(left_half, output)

            pre_left, pre_right = schedule.pre_whitening(HALF_SIZE)
            xor_bytes(left_half, pre_left)
            xor_bytes(right_half, pre_right)

            plaintext[:HALF_SIZE] = left_half
            plaintext[HALF_SIZE:] = right_half
