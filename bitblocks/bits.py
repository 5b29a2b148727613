import re
import operator
from collections.abc import Iterable
from typing import Union

from bitblocks.errors import InvalidWidthError, IndexOutOfRangeError

__all__ = ["BitVector", "check_width", "concat", "zero_extend"]

def check_width(width) -> int:
    width = operator.index(width)
    if width < 0:
        raise InvalidWidthError(f"Invalid width {width}, must be >= 0")
    return width

class BitVector:
    """A fixed-width bit sequence, ordered from LSB to MSB.

    Indexing and iteration go from the least significant bit upwards. Conversion to and from
    strings goes MSB first, the way binary literals are written. Instances are immutable:
    operations that change bits return a new vector.
    """
    __slots__ = ("_width", "_value")

    def __init__(self, width: int, value: int = 0):
        width = check_width(width)
        self._width = width
        self._value = operator.index(value) & ~(-1 << width)

    @classmethod
    def from_iter(cls, iterable: Iterable) -> "BitVector":
        width = value = 0
        for width, bit in enumerate(iterable, start=1):
            value |= bool(bit) << (width - 1)
        return cls(width, value)

    @classmethod
    def from_str(cls, value: str) -> "BitVector":
        value = re.sub(r"[\s_]", "", value)
        if not re.match(r"^[01]*$", value):
            raise ValueError(f"Invalid input for {cls.__name__}: '{value}'")
        return cls(len(value), int(value, 2) if value else 0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def bits(self) -> tuple[bool, ...]:
        return tuple(self)

    def _check_index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < self._width:
            raise IndexOutOfRangeError(f"Bit index {index} out of range for width {self._width}")
        return index

    def bit(self, index: int) -> bool:
        index = self._check_index(index)
        return bool((self._value >> index) & 1)

    def set_bit(self, index: int, value: bool) -> "BitVector":
        index = self._check_index(index)
        if value:
            return BitVector(self._width, self._value | (1 << index))
        return BitVector(self._width, self._value & ~(1 << index))

    def to_int(self) -> int:
        return self._value

    __int__ = to_int
    __index__ = to_int

    def __len__(self) -> int:
        return self._width

    def __iter__(self):
        for index in range(self._width):
            yield bool((self._value >> index) & 1)

    def __getitem__(self, key) -> Union[bool, "BitVector"]:
        if isinstance(key, slice):
            start, stop, step = key.indices(self._width)
            if step == 1:
                width = max(0, stop - start)
                return BitVector(width, self._value >> start)
            return BitVector.from_iter(self.bit(index) for index in range(start, stop, step))
        return self.bit(key)

    def __eq__(self, other) -> bool:
        if isinstance(other, BitVector):
            return self._width == other._width and self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._width, self._value))

    def __str__(self) -> str:
        if self._width:
            return format(self._value, f"0{self._width}b")
        return ""

    def __repr__(self) -> str:
        return f"BitVector({self._width}, 0b{self})" if self._width else "BitVector(0)"

def concat(*parts: BitVector) -> BitVector:
    """Concatenate vectors, the first part occupying the low bits."""
    width = value = 0
    for part in parts:
        value |= part.to_int() << width
        width += part.width
    return BitVector(width, value)

def zero_extend(vector: BitVector, width: int) -> BitVector:
    width = check_width(width)
    if width < vector.width:
        raise InvalidWidthError(f"Cannot zero-extend a {vector.width}-bit vector to {width} bits")
    return BitVector(width, vector.to_int())
