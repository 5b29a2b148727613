import operator
from collections.abc import Sequence

from bitblocks.bits import BitVector
from bitblocks.errors import InvalidWidthError, SelectionOutOfRangeError

__all__ = ["select"]

def select(index: int, options: Sequence[BitVector]) -> BitVector:
    index = operator.index(index)
    if not 0 <= index < len(options):
        raise SelectionOutOfRangeError(f"Selector {index} out of range for {len(options)} options")

    widths = {option.width for option in options}
    if len(widths) != 1:
        raise InvalidWidthError(f"Multiplexer options must share one width, got {sorted(widths)}")

    return options[index]
