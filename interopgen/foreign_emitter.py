"""Foreign Emitter base - extern declarations paired 1:1 with native wrappers"""

from typing import Iterable

from .naming import NamingPolicy
from .options import GeneratorOptions
from .type_mapper import TypeMapper
from .types import CallVariant, ExposedFunction


class ForeignEmitter:
    """Writes one foreign declaration per eligible variant, in catalog order.

    Only boundary types produced by the type mapper appear in the output.
    """

    type_mapper: type[TypeMapper] = TypeMapper

    def __init__(self, options: GeneratorOptions, naming: NamingPolicy):
        self.options = options
        self.naming = naming

    def write_declarations(self, functions: Iterable[ExposedFunction]) -> list[str]:
        lines = self._header()
        for func in functions:
            for remap in func.remaps:
                if self.naming.is_eligible(remap):
                    lines.extend(self._declaration(remap))
        lines.extend(self._footer())
        return lines

    def return_type(self, remap: CallVariant) -> str:
        if remap.void_return:
            return self.type_mapper.VOID
        return self.type_mapper.map(remap.return_remap.get_new_type())

    def param_types(self, remap: CallVariant) -> list[tuple[str, str]]:
        """(boundary type, name) per parameter"""
        return [(self.type_mapper.map(p.remap.get_new_type()), p.name) for p in remap.parameters]

    def native_strings(self, remap: CallVariant) -> list[str]:
        """Names of parameters (and 'return') that are raw char pointers"""
        names = [p.name for p in remap.parameters
                 if self.type_mapper.is_native_string(p.remap.get_new_type())]
        if not remap.void_return and self.type_mapper.is_native_string(remap.return_remap.get_new_type()):
            names.append("return")
        return names

    def _header(self) -> list[str]:
        raise NotImplementedError

    def _declaration(self, remap: CallVariant) -> list[str]:
        raise NotImplementedError

    def _footer(self) -> list[str]:
        raise NotImplementedError
