from bitblocks.errors import (
    BitBlocksError, InvalidWidthError, IndexOutOfRangeError, InvalidModulusError, SelectionOutOfRangeError,
)
from bitblocks.bits import BitVector, concat, zero_extend
from bitblocks.arith import half_add, full_add, add
from bitblocks.mux import select
from bitblocks.counter import Counter, ResetDiscipline, counter_width

__all__ = [
    "BitBlocksError", "InvalidWidthError", "IndexOutOfRangeError", "InvalidModulusError", "SelectionOutOfRangeError",
    "BitVector", "concat", "zero_extend",
    "half_add", "full_add", "add",
    "select",
    "Counter", "ResetDiscipline", "counter_width",
]
