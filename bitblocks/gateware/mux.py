from amaranth import *

from bitblocks.bits import check_width
from bitblocks.errors import SelectionOutOfRangeError

__all__ = ["Multiplexer"]

class Multiplexer(Elaboratable):
    """
    Selects one of ``count`` equally wide inputs

    Parameters
    ----------
    width : int
        Width of every input and of the output
    count : int
        Number of inputs

    Attributes
    ----------
    inputs : list of Signal(width), in
    sel : Signal(range(count)), in
    o : Signal(width), out
    invalid : Signal, out
        Asserted when ``sel`` does not address an input, ``o`` is zero meanwhile
    """
    def __init__(self, width, count):
        if count <= 0:
            raise SelectionOutOfRangeError(f"Invalid input count {count}, must be > 0")

        self.width = check_width(width)
        self.count = count

        self.inputs = [Signal(self.width, name=f'i{i}') for i in range(count)]
        self.sel = Signal(range(count))
        self.o = Signal(self.width)
        self.invalid = Signal()

    def elaborate(self, platform):
        m = Module()

        with m.Switch(self.sel):
            for i, option in enumerate(self.inputs):
                with m.Case(i):
                    m.d.comb += self.o.eq(option)
            with m.Default():
                m.d.comb += self.invalid.eq(1)

        return m
