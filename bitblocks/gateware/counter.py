import logging
from functools import reduce
from operator import or_

from amaranth import *

from bitblocks.counter import ResetDiscipline, check_modulus, counter_width
from bitblocks.gateware.adder import Adder
from bitblocks.gateware.mux import Multiplexer

__all__ = ["Counter"]

logger = logging.getLogger(__name__)

class Counter(Elaboratable):
    """
    Modulo-N counter built on the ripple adder

    Parameters
    ----------
    modulus : int
        Number of distinct values the counter cycles through
    reset_discipline : ResetDiscipline or str
        Whether ``reset`` acts on the next clock edge or immediately
    domain : str
        Clock domain the counter advances in
    optimize : bool
        Leave out the comparator and multiplexer when the register wraps on its own

    Attributes
    ----------
    reset : Signal, in
        Forces the count to zero
    count : Signal(counter_width(modulus)), out
        Current count
    """
    def __init__(self, modulus, reset_discipline=ResetDiscipline.SYNCHRONOUS, domain='sync', optimize=True):
        self.modulus = check_modulus(modulus)
        self.reset_discipline = ResetDiscipline(reset_discipline)
        if domain is None or domain == 'comb':
            raise ValueError(f"Invalid domain {domain}, counter must be clocked")

        self.domain = domain
        self.width = counter_width(self.modulus)

        self.is_power_of_two = (self.modulus & (self.modulus - 1)) == 0
        self.fills_register = self.modulus == 1 << self.width
        self.uses_comparator = not (optimize and self.fills_register)

        self.reset = Signal()
        self.count = Signal(self.width)

    @property
    def is_async(self) -> bool:
        return self.reset_discipline is ResetDiscipline.ASYNCHRONOUS

    def elaborate(self, platform):
        m = Module()

        logger.debug(
            f"Elaborating counter modulus={self.modulus} width={self.width} "
            f"reset={self.reset_discipline.value} comparator={self.uses_comparator}"
        )

        m.submodules.adder = adder = Adder(1, self.width)
        m.d.comb += [
            adder.a.eq(1),
            adder.b.eq(self.count),
        ]
        incremented = adder.o[:self.width]

        if self.is_async:
            m.domains.count = cd_count = ClockDomain('count', async_reset=True, local=True)
            m.d.comb += [
                cd_count.clk.eq(ClockSignal(self.domain)),
                cd_count.rst.eq(self.reset),
            ]
            domain = 'count'
        else:
            domain = self.domain

        wrap = []
        if self.uses_comparator:
            wrap.append(self.count == self.modulus - 1)
        if not self.is_async:
            wrap.append(self.reset)

        if wrap:
            m.submodules.mux = mux = Multiplexer(self.width, 2)
            m.d.comb += [
                mux.sel.eq(reduce(or_, wrap)),
                mux.inputs[0].eq(incremented),
                mux.inputs[1].eq(0),
            ]
            m.d[domain] += self.count.eq(mux.o)
        else:
            m.d[domain] += self.count.eq(incremented)

        return m
