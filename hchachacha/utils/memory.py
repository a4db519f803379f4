"""
Transient Buffer Handling

Derived key material and PRF scratch space are kept in mutable buffers
that are overwritten with zeros as soon as the owning scope exits,
whether it exits normally or through an exception.
"""

from contextlib import contextmanager
from typing import Iterator, List, Union

Buffer = Union[bytearray, memoryview]


def zero_memory(buffer: Buffer) -> None:
    """
    Overwrite a mutable buffer with zeros in place.

    Args:
        buffer: The bytearray or writable memoryview to clear
    """
    # Same-length slice assignment never reallocates, so exported views stay valid
    buffer[:] = bytes(len(buffer))


@contextmanager
def secure_buffers(*sizes: int) -> Iterator[List[bytearray]]:
    """
    Allocate zero-filled scratch buffers that are wiped on exit.

    Args:
        *sizes: Length in bytes of each buffer to allocate

    Yields:
        A list of bytearrays, one per requested size
    """
    buffers = [bytearray(size) for size in sizes]
    try:
        yield buffers
    finally:
        for buffer in buffers:
            zero_memory(buffer)


def xor_bytes(output: Buffer, data) -> None:
    """XOR the first len(output) bytes of data into output."""
    for i in range(len(output)):
        output[i] ^= data[i]
