__all__ = [
    "BitBlocksError",
    "InvalidWidthError",
    "IndexOutOfRangeError",
    "InvalidModulusError",
    "SelectionOutOfRangeError",
]

class BitBlocksError(Exception):
    """Base class for contract violations detected by bitblocks components."""

class InvalidWidthError(BitBlocksError, ValueError):
    """A width is negative, or too narrow for the requested operation."""

class IndexOutOfRangeError(BitBlocksError, IndexError):
    """A bit index falls outside ``[0, width)``."""

class InvalidModulusError(BitBlocksError, ValueError):
    """A counter modulus is not a positive integer."""

class SelectionOutOfRangeError(BitBlocksError, IndexError):
    """A multiplexer selector does not address one of its options."""
