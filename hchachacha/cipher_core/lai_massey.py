"""
Lai-Massey Network

HChaChaCha2 feeds the XOR of both halves to HChaCha20 once per round and
XORs the first 8 bytes of the output into both halves. Because the XOR
of the halves is unchanged by that step, a linear orthomorphism on the
left half is applied between rounds to keep consecutive rounds from
seeing related inputs.
"""

from .block_cipher import PRFBlockCipher, HALF_SIZE
from .orthomorphism import orthomorphism, inverse_orthomorphism
from ..key_schedule.counter_key_schedule import KeySchedule
from ..utils.memory import secure_buffers, xor_bytes


class HChaChaCha2(PRFBlockCipher):
    """Lai-Massey cipher with pre- and post-whitening."""

    name = 'HChaChaCha2'
    default_rounds = 6

    def _round(self, output, nonce, left_half, right_half, round_key) -> None:
        combined = memoryview(nonce)[:HALF_SIZE]
        for j in range(HALF_SIZE):
            combined[j] = left_half[j] ^ right_half[j]
        self.prf.derive_key(output, round_key, nonce)
        xor_bytes(left_half, output)
        xor_bytes(right_half, output)

    def _encrypt(self, ciphertext, plaintext, schedule: KeySchedule) -> None:
        prf = self.prf
        with secure_buffers(prf.OUTPUT_SIZE, prf.NONCE_SIZE, HALF_SIZE, HALF_SIZE) as (output, nonce, left_half, right_half):
            left_half[:] = plaintext[:HALF_SIZE]
            right_half[:] = plaintext[HALF_SIZE:]

            pre_left, pre_right = schedule.pre_whitening(HALF_SIZE)
            xor_bytes(left_half, pre_left)
            xor_bytes(right_half, pre_right)

            for i in range(self.num_rounds):
                self._round(output, nonce, left_half, right_half, schedule.round_key(i))
                # Skipped after the final round, where it adds no diffusion
                if i < self.num_rounds - 1:
                    orthomorphism(left_half)

            post_left, post_right = schedule.post_whitening(HALF_SIZE)
            xor_bytes(left_half, post_left)
            xor_bytes(right_half, post_right)

            ciphertext[:HALF_SIZE] = left_half
            ciphertext[HALF_SIZE:] = right_half

    def _decrypt(self, plaintext, ciphertext, schedule: KeySchedule) -> None:
        prf = self.prf
        with secure_buffers(prf.OUTPUT_SIZE, prf.NONCE_SIZE, HALF_SIZE, HALF_SIZE) as (output, nonce, left_half, right_half):
            left_half[:] = ciphertext[:HALF_SIZE]
            right_half[:] = ciphertext[HALF_SIZE:]

            post_left, post_right = schedule.post_whitening(HALF_SIZE)
            xor_bytes(left_half, post_left)
            xor_bytes(right_half, post_right)

            for i in range(self.num_rounds - 1, -1, -1):
                self._round(output, nonce, left_half, right_half, schedule.round_key(i))
                if i > 0:
                    inverse_orthomorphism(left_half)

            pre_left, pre_right = schedule.pre_whitening(HALF_SIZE)
            xor_bytes(left_half, pre_left)
            xor_bytes(right_half, pre_right)

            plaintext[:HALF_SIZE] = left_half
            plaintext[HALF_SIZE:] = right_half
