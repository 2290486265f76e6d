"""Type mapping from resolved C++ types to boundary-safe foreign types"""

import logging
from typing import Optional

from .types import CppType, is_char, unwrap_qualifiers

logger = logging.getLogger(__name__)


class TypeMapper:
    """Maps C++ types onto a foreign language's primitive vocabulary.

    Subclasses supply the table; the traversal is shared. Pointers always
    cross as the opaque pointer-sized type, never as typed references,
    and names missing from the table fall back to the same opaque type.
    """

    VOID = 'void'
    OPAQUE = 'void*'
    BOUNDARY_TYPES: dict[str, str] = {}

    @classmethod
    def map(cls, cpptype: Optional[CppType]) -> str:
        if cpptype is None:
            return cls.VOID

        unwrapped = unwrap_qualifiers(cpptype)

        if unwrapped.as_pointer_type() is not None:
            return cls.OPAQUE

        type_name = unwrapped.get_local_name()
        boundary = cls.BOUNDARY_TYPES.get(type_name)
        if boundary is None:
            logger.debug("no boundary mapping for %r, using %s", type_name, cls.OPAQUE)
            return cls.OPAQUE
        return boundary

    @classmethod
    def is_native_string(cls, cpptype: Optional[CppType]) -> bool:
        """True for char pointers, which the caller must marshal by hand"""
        if cpptype is None:
            return False
        ptr_type = unwrap_qualifiers(cpptype).as_pointer_type()
        return ptr_type is not None and is_char(ptr_type.pointing_at)


class CSharpTypeMapper(TypeMapper):
    """C# P/Invoke types"""

    VOID = 'void'
    OPAQUE = 'IntPtr'
    BOUNDARY_TYPES = {
        'void': 'void',
        'bool': 'bool',
        'char': 'byte',
        'signed char': 'sbyte',
        'unsigned char': 'byte',
        'short': 'short',
        'short int': 'short',
        'signed short': 'short',
        'signed short int': 'short',
        'unsigned short': 'ushort',
        'unsigned short int': 'ushort',
        'int': 'int',
        'signed': 'int',
        'signed int': 'int',
        'unsigned': 'uint',
        'unsigned int': 'uint',
        # long is 32-bit on Windows
        'long': 'int',
        'long int': 'int',
        'signed long': 'int',
        'signed long int': 'int',
        'unsigned long': 'uint',
        'unsigned long int': 'uint',
        'long long': 'long',
        'long long int': 'long',
        'signed long long': 'long',
        'signed long long int': 'long',
        'unsigned long long': 'ulong',
        'unsigned long long int': 'ulong',
        'int8_t': 'sbyte',
        'uint8_t': 'byte',
        'int16_t': 'short',
        'uint16_t': 'ushort',
        'int32_t': 'int',
        'uint32_t': 'uint',
        'int64_t': 'long',
        'uint64_t': 'ulong',
        'float': 'float',
        'double': 'double',
        'size_t': 'UIntPtr',
        'ptrdiff_t': 'IntPtr',
    }


class CtypesTypeMapper(TypeMapper):
    """Python ctypes types"""

    VOID = 'None'
    OPAQUE = 'c_void_p'
    BOUNDARY_TYPES = {
        'void': 'None',
        'bool': 'c_bool',
        'char': 'c_ubyte',
        'signed char': 'c_byte',
        'unsigned char': 'c_ubyte',
        'short': 'c_short',
        'short int': 'c_short',
        'signed short': 'c_short',
        'signed short int': 'c_short',
        'unsigned short': 'c_ushort',
        'unsigned short int': 'c_ushort',
        'int': 'c_int',
        'signed': 'c_int',
        'signed int': 'c_int',
        'unsigned': 'c_uint',
        'unsigned int': 'c_uint',
        'long': 'c_long',
        'long int': 'c_long',
        'signed long': 'c_long',
        'signed long int': 'c_long',
        'unsigned long': 'c_ulong',
        'unsigned long int': 'c_ulong',
        'long long': 'c_longlong',
        'long long int': 'c_longlong',
        'signed long long': 'c_longlong',
        'signed long long int': 'c_longlong',
        'unsigned long long': 'c_ulonglong',
        'unsigned long long int': 'c_ulonglong',
        'int8_t': 'c_int8',
        'uint8_t': 'c_uint8',
        'int16_t': 'c_int16',
        'uint16_t': 'c_uint16',
        'int32_t': 'c_int32',
        'uint32_t': 'c_uint32',
        'int64_t': 'c_int64',
        'uint64_t': 'c_uint64',
        'float': 'c_float',
        'double': 'c_double',
        'size_t': 'c_size_t',
        'ptrdiff_t': 'c_ssize_t',
    }
