"""
Linear Orthomorphism

The Lai-Massey network applies this map to the left half between rounds.
The half is treated as two equal quarters (a, b):

    forward:  (a, b)     -> (b, a ^ b)
    inverse:  (b, a ^ b) -> (a, b)

Both functions work in place on a bytearray or writable memoryview.
"""


def orthomorphism(half) -> None:
    """Map (a, b) to (b, a ^ b) in place."""
    quarter = len(half) // 2
    for j in range(quarter):
        a, b = half[j], half[quarter + j]
        half[j] = b
        half[quarter + j] = a ^ b


def inverse_orthomorphism(half) -> None:
    """Map (b, a ^ b) back to (a, b) in place."""
    quarter = len(half) // 2
    for j in range(quarter):
        b, c = half[j], half[quarter + j]
        half[j] = b ^ c
        half[quarter + j] = b
