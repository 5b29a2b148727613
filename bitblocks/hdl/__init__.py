from typing import Any
import importlib
import pkgutil
from contextlib import contextmanager

from amaranth.back import rtlil as amaranth_rtlil

__all__ = ["HDL", "get_lang_map"]

class HDLExtensions(type):
    extensions: list[str] = []

    @property
    def default_extension(self) -> str:
        if not self.extensions:
            raise RuntimeError(f"No extensions defined for {self.__name__}")
        return self.extensions[0]

class HDL(metaclass=HDLExtensions):
    """Base class for the languages a design can be exported to.

    Subclasses living in this package are picked up by :func:`get_lang_map` and implement
    :meth:`_convert` on top of an Amaranth backend. The emitted RTLIL is indented with
    ``spaces`` spaces per level.
    """
    open_comment = ''
    close_comment = ''

    def __init__(self, spaces: int = 4):
        self.spaces = spaces

    @property
    def default_extension(self) -> str:
        return type(self).default_extension

    def comment(self, text: str) -> str:
        return f'{self.open_comment}{text}{self.close_comment}'

    def _convert(self, elaboratable: Any, name: str, platform, ports, **kwargs) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not implement conversion")

    def convert(self, elaboratable: Any, name='top', platform=None, ports=None, **kwargs) -> str:
        @contextmanager
        def indent(emitter: amaranth_rtlil.Emitter):
            orig = emitter._indent
            emitter._indent += ' ' * self.spaces
            yield
            emitter._indent = orig

        orig_indent = amaranth_rtlil.Emitter.indent
        try:
            amaranth_rtlil.Emitter.indent = indent
            return self._convert(elaboratable, name=name, platform=platform, ports=ports, **kwargs)
        finally:
            amaranth_rtlil.Emitter.indent = orig_indent

def get_lang_map() -> dict[str, type[HDL]]:
    lang_map: dict[str, type[HDL]] = {}
    for _, name, _ in pkgutil.iter_modules(__path__, __name__ + '.'):
        for HDLType in importlib.import_module(name).__dict__.values():
            if isinstance(HDLType, type) and issubclass(HDLType, HDL) and HDLType is not HDL:
                lang_map[name.split('.')[-1]] = HDLType
    return lang_map
