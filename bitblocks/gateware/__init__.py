from bitblocks.gateware.adder import HalfAdder, FullAdder, Adder
from bitblocks.gateware.mux import Multiplexer
from bitblocks.gateware.counter import Counter

__all__ = ["HalfAdder", "FullAdder", "Adder", "Multiplexer", "Counter"]
