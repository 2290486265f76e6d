"""
Foreign-Function Binding Emitter

Reads a catalog of resolved C++ call variants and generates:
  1. Exported extern "C" wrapper prototypes and bodies
  2. C# P/Invoke declarations for a managed caller
  3. Python ctypes declarations (alternative foreign target)
"""

from .types import (
    CppType, SimpleType, StructType, HandleType, ConstType, ReferenceType, PointerType,
    Parameter, CallVariant, ExposedFunction, CallCatalog,
)
from .errors import InteropError, CatalogError, MalformedTypeError, SinkClosedError
from .options import GeneratorOptions
from .type_mapper import TypeMapper, CSharpTypeMapper, CtypesTypeMapper
from .naming import NamingPolicy
from .call_emitter import CallEmitter
from .native_emitter import NativeEmitter
from .csharp_emitter import CSharpEmitter
from .ctypes_emitter import CtypesEmitter
from .targets import Target, TARGETS, get_target
from .catalog import build_catalog, decode_type
from .driver import BindingDriver, GeneratedArtifacts

__all__ = [
    'CppType', 'SimpleType', 'StructType', 'HandleType', 'ConstType', 'ReferenceType', 'PointerType',
    'Parameter', 'CallVariant', 'ExposedFunction', 'CallCatalog',
    'InteropError', 'CatalogError', 'MalformedTypeError', 'SinkClosedError',
    'GeneratorOptions', 'TypeMapper', 'CSharpTypeMapper', 'CtypesTypeMapper',
    'NamingPolicy', 'CallEmitter', 'NativeEmitter', 'CSharpEmitter', 'CtypesEmitter',
    'Target', 'TARGETS', 'get_target', 'build_catalog', 'decode_type',
    'BindingDriver', 'GeneratedArtifacts',
]
