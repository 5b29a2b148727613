from typing import Any

from amaranth.back import verilog as _verilog

from bitblocks.hdl import HDL

__all__ = ["Verilog", "convert"]

class Verilog(HDL):
    extensions = ['v']
    open_comment = '/* '
    close_comment = ' */'

    def _convert(self, elaboratable: Any, name: str, platform, ports, **kwargs) -> str:
        # Requires Yosys, either the amaranth-yosys wheel or one found on PATH
        return _verilog.convert(elaboratable, name=name, platform=platform, ports=ports, **kwargs)

def convert(elaboratable: Any, name: str = 'top', ports: list = None, platform=None, spaces: int = 4, **kwargs) -> str:
    return Verilog(
        spaces = spaces,
    ).convert(
        elaboratable,
        name = name,
        ports = ports,
        platform = platform,
        **kwargs
    )
