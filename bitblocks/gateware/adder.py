from amaranth import *

from bitblocks.bits import check_width

__all__ = ["HalfAdder", "FullAdder", "Adder"]

class HalfAdder(Elaboratable):
    def __init__(self):
        self.a = Signal()
        self.b = Signal()

        self.o = Signal()
        self.co = Signal()

    def elaborate(self, platform):
        m = Module()

        m.d.comb += [
            self.o.eq(self.a ^ self.b),
            self.co.eq(self.a & self.b),
        ]

        return m

class FullAdder(Elaboratable):
    def __init__(self):
        self.a = Signal()
        self.b = Signal()
        self.ci = Signal()

        self.o = Signal()
        self.co = Signal()

    def elaborate(self, platform):
        m = Module()

        m.d.comb += [
            self.o.eq(self.a ^ self.b ^ self.ci),
            self.co.eq(
                (self.a & self.b) | (self.a & self.ci) | (self.b & self.ci),
            )
        ]

        return m

class Adder(Elaboratable):
    """
    Ripple-carry adder over operands of independent widths

    Parameters
    ----------
    width_a : int
        Width of ``a``, may be zero
    width_b : int
        Width of ``b``, may be zero
    domain : str or NoneType
        Clock domain registering the sum, use comb or None for combinational

    Attributes
    ----------
    a : Signal(width_a), in
    b : Signal(width_b), in
    o : Signal(max(width_a, width_b) + 1), out
        Sum, the top bit being the final carry
    """
    def __init__(self, width_a, width_b, domain='comb'):
        if domain is None:
            domain = 'comb'

        self.width_a = check_width(width_a)
        self.width_b = check_width(width_b)
        self.width = max(self.width_a, self.width_b)
        self.domain = domain

        self.a = Signal(self.width_a)
        self.b = Signal(self.width_b)
        self.o = Signal(self.width + 1)

    def _operand_bit(self, operand, index):
        if index < len(operand):
            return operand[index]
        return Const(0, 1)

    def elaborate(self, platform):
        m = Module()

        co = Const(0, 1)
        o = []

        for i in range(self.width):
            adder = HalfAdder() if i == 0 else FullAdder()
            m.submodules[f'adder{i}'] = adder

            m.d.comb += [
                adder.a.eq(self._operand_bit(self.a, i)),
                adder.b.eq(self._operand_bit(self.b, i)),
            ]
            if i:
                m.d.comb += adder.ci.eq(co)

            o.append(adder.o)
            co = adder.co

        m.d[self.domain] += self.o.eq(Cat(*o, co))

        return m
