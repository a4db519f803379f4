"""
Input Size Validation

Every public entry point works on fixed-size buffers. These helpers reject
a wrong-sized buffer before any key material is derived.
"""


class SizeMismatchError(ValueError):
    """Raised when a buffer length differs from its fixed required size."""

    def __init__(self, name: str, actual: int, expected: int):
        self.name = name
        self.actual = actual
        self.expected = expected
        super().__init__(f"{name} must be exactly {expected} bytes long, got {actual}")


def equal_to_size(name: str, actual: int, expected: int) -> None:
    """
    Check that a buffer has exactly the expected length.

    Args:
        name: Parameter name reported in the error
        actual: Length of the buffer supplied by the caller
        expected: Required length

    Raises:
        SizeMismatchError: If the lengths differ
    """
    if actual != expected:
        raise SizeMismatchError(name, actual, expected)
