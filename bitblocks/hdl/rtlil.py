from typing import Any

from amaranth.back import rtlil as _rtlil

from bitblocks.hdl import HDL

__all__ = ["RTLIL", "convert"]

class RTLIL(HDL):
    extensions = ['il']
    open_comment = '# '

    def _convert(self, elaboratable: Any, name: str, platform, ports, **kwargs) -> str:
        return _rtlil.convert(elaboratable, name=name, platform=platform, ports=ports, **kwargs)

def convert(elaboratable: Any, name: str = 'top', ports: list = None, platform=None, spaces: int = 4, **kwargs) -> str:
    return RTLIL(
        spaces = spaces,
    ).convert(
        elaboratable,
        name = name,
        ports = ports,
        platform = platform,
        **kwargs
    )
