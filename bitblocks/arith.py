from bitblocks.bits import BitVector

__all__ = ["half_add", "full_add", "add"]

def half_add(a: bool, b: bool) -> tuple[bool, bool]:
    a, b = bool(a), bool(b)
    return a ^ b, a & b

def full_add(a: bool, b: bool, ci: bool) -> tuple[bool, bool]:
    a, b, ci = bool(a), bool(b), bool(ci)
    return a ^ b ^ ci, (a & b) | (a & ci) | (b & ci)

def add(a: BitVector, b: BitVector) -> BitVector:
    """Ripple-carry sum of two vectors of any widths.

    The narrower operand is zero-extended; the result is one bit wider than the wider operand
    and its top bit is the final carry.
    """
    width = max(a.width, b.width)

    o = []
    co = False
    for i in range(width):
        bit_a = a.bit(i) if i < a.width else False
        bit_b = b.bit(i) if i < b.width else False
        if i == 0:
            s, co = half_add(bit_a, bit_b)
        else:
            s, co = full_add(bit_a, bit_b, co)
        o.append(s)

    return BitVector.from_iter([*o, co])
