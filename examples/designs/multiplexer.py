from bitblocks.gateware import Multiplexer

def design():
    mux = Multiplexer(8, 3)
    ports = [
        *mux.inputs, mux.sel, mux.o, mux.invalid,
    ]
    return mux, ports
