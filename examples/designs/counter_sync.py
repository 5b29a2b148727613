from bitblocks.gateware import Counter

def design():
    counter = Counter(10, reset_discipline='sync')
    ports = [
        counter.reset, counter.count,
    ]
    return counter, ports
