from amaranth.sim import Simulator

from bitblocks import Counter as CounterModel
from bitblocks.gateware import Counter

def main():
    import os

    path = os.path.dirname(__file__)

    dut = Counter(5, reset_discipline='sync')
    model = CounterModel(5, reset_discipline='sync')

    async def bench(ctx):
        for i in range(12):
            await ctx.tick()
            expected = int(model.tick())
            print(f"tick {i}: count={ctx.get(dut.count)} expected={expected}")

    sim = Simulator(dut)
    sim.add_clock(1e-6)
    sim.add_testbench(bench)
    with sim.write_vcd(os.path.join(path, 'counter.vcd')):
        sim.run()

if __name__ == '__main__':
    main()
