"""Exception types raised by fuzzt."""


class FuzztError(Exception):
    """Base class for all fuzzt errors."""


class ValidationError(FuzztError, ValueError):
    """Raised when a parameter is outside its accepted range."""


class AlgorithmError(FuzztError, ValueError):
    """Raised when a metric name is unknown or its feature is disabled."""


class LengthMismatchError(FuzztError, ValueError):
    """Raised by Hamming distance when the inputs differ in length.

    Attributes:
        len_a: Length of the first sequence.
        len_b: Length of the second sequence.
    """

    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(
            f"Differing length arguments provided: len(a)={len_a}, len(b)={len_b}"
        )


__all__ = ["FuzztError", "ValidationError", "AlgorithmError", "LengthMismatchError"]
