from bitblocks.gateware import Adder

def design():
    adder = Adder(4, 3)
    ports = [
        adder.a, adder.b, adder.o,
    ]
    return adder, ports
