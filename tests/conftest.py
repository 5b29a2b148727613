import pytest
from amaranth.sim import Simulator

@pytest.fixture
def simulate():
    """Run an async testbench against a design, with a ``sync`` clock when ``clock`` is set."""
    def run(dut, bench, clock=False):
        sim = Simulator(dut)
        if clock:
            sim.add_clock(1e-6)
        sim.add_testbench(bench)
        sim.run()
    return run
