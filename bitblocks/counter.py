import enum
import logging
import operator
from typing import Optional

from bitblocks.arith import add
from bitblocks.bits import BitVector
from bitblocks.errors import InvalidModulusError
from bitblocks.mux import select

__all__ = ["ResetDiscipline", "Counter", "check_modulus", "counter_width"]

logger = logging.getLogger(__name__)

class ResetDiscipline(enum.Enum):
    SYNCHRONOUS = "sync"
    ASYNCHRONOUS = "async"

def check_modulus(modulus) -> int:
    modulus = operator.index(modulus)
    if modulus <= 0:
        raise InvalidModulusError(f"Invalid modulus {modulus}, must be > 0")
    return modulus

def counter_width(modulus: int) -> int:
    return max(1, (check_modulus(modulus) - 1).bit_length())

class Counter:
    """Modulo-N counter model advancing by one on every clock event.

    Parameters
    ----------
    modulus : int
        Number of distinct values the counter cycles through.
    reset_discipline : ResetDiscipline or str
        ``sync``: reset is sampled on the clock event. ``async``: asserting reset clears the
        register at once and holds it while asserted.
    optimize : bool
        Let the carry-out truncation of the incrementer do the wrapping when the modulus fills
        the register exactly, instead of comparing against ``modulus - 1``.
    """
    def __init__(self, modulus: int, reset_discipline=ResetDiscipline.SYNCHRONOUS, *, optimize: bool = True):
        self.modulus = check_modulus(modulus)
        self.reset_discipline = ResetDiscipline(reset_discipline)
        self.width = counter_width(self.modulus)

        self.is_power_of_two = (self.modulus & (self.modulus - 1)) == 0
        self.fills_register = self.modulus == 1 << self.width
        self.uses_comparator = not (optimize and self.fills_register)

        self._one = BitVector(1, 1)
        self._zero = BitVector(self.width)
        self._last = BitVector(self.width, self.modulus - 1)

        self._reset = False
        self._value = self._zero
        self._next_value = self._build_next_value()

        logger.debug(
            f"Counter modulus={self.modulus} width={self.width} reset={self.reset_discipline.value} "
            f"comparator={self.uses_comparator}"
        )

    @property
    def is_async(self) -> bool:
        return self.reset_discipline is ResetDiscipline.ASYNCHRONOUS

    @property
    def value(self) -> BitVector:
        return self._value

    @property
    def reset(self) -> bool:
        return self._reset

    def __int__(self) -> int:
        return self._value.to_int()

    def _increment(self, value: BitVector) -> BitVector:
        return add(self._one, value)[:self.width]

    def _at_last(self, value: BitVector) -> bool:
        return value == self._last

    def _reset_asserted(self, value: BitVector) -> bool:
        return self._reset

    def _build_next_value(self):
        conditions = []
        if self.uses_comparator:
            conditions.append(self._at_last)
        if not self.is_async:
            conditions.append(self._reset_asserted)
        self._wrap_conditions = tuple(conditions)

        if not conditions:
            return self._increment

        def next_value(value: BitVector) -> BitVector:
            wrap = any(condition(value) for condition in conditions)
            return select(int(wrap), [self._increment(value), self._zero])

        return next_value

    def drive_reset(self, level: bool):
        self._reset = bool(level)
        if self._reset and self.is_async:
            self._value = self._zero

    def tick(self, reset: Optional[bool] = None) -> BitVector:
        if reset is not None:
            self.drive_reset(reset)

        if self._reset and self.is_async:
            return self._value

        # Next state depends only on the pre-tick value and reset level; committed in one assignment.
        self._value = self._next_value(self._value)
        return self._value

    def run(self, ticks: int):
        for _ in range(ticks):
            yield self.tick()
