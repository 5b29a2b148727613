from bitblocks.gateware import Counter

def design():
    counter = Counter(16, reset_discipline='async')
    ports = [
        counter.reset, counter.count,
    ]
    return counter, ports
