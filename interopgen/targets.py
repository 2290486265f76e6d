"""Target languages - each one a set of emission and naming capabilities"""

from dataclasses import dataclass

from .csharp_emitter import CSharpEmitter
from .ctypes_emitter import CtypesEmitter
from .errors import InteropError
from .foreign_emitter import ForeignEmitter
from .naming import NamingPolicy
from .native_emitter import NativeEmitter
from .options import GeneratorOptions
from .parameter_remap import ParameterRemap, ParameterRemapHandleToInt, ParameterRemapUnchanged
from .types import CppType, is_handle


@dataclass(frozen=True)
class Target:
    """Capabilities the driver composes for one foreign language"""
    name: str
    label: str
    naming: NamingPolicy
    foreign_emitter_class: type[ForeignEmitter]
    foreign_suffix: str

    def remap_parameter(self, param_type: CppType) -> ParameterRemap:
        # Handles cross as integers for easier interop
        if is_handle(param_type):
            return ParameterRemapHandleToInt(param_type)
        return ParameterRemapUnchanged(param_type)

    def native_emitter(self, options: GeneratorOptions) -> NativeEmitter:
        return NativeEmitter(options, self.naming, self.label)

    def foreign_emitter(self, options: GeneratorOptions) -> ForeignEmitter:
        return self.foreign_emitter_class(options, self.naming)


TARGETS = {
    'csharp': Target(
        name='csharp',
        label='C#',
        naming=NamingPolicy('_inCS', 'csharp'),
        foreign_emitter_class=CSharpEmitter,
        foreign_suffix='.cs',
    ),
    'ctypes': Target(
        name='ctypes',
        label='ctypes',
        naming=NamingPolicy('_inPY', 'ctypes'),
        foreign_emitter_class=CtypesEmitter,
        foreign_suffix='.py',
    ),
}


def get_target(name: str) -> Target:
    try:
        return TARGETS[name]
    except KeyError:
        raise InteropError(f"Unknown target '{name}' (expected one of: {', '.join(sorted(TARGETS))})") from None
