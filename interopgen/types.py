"""Type model and call catalog data types"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .errors import MalformedTypeError

if TYPE_CHECKING:
    from .parameter_remap import ParameterRemap


# Upper bound on nested const/reference layers around a single type
MAX_QUALIFIER_DEPTH = 64

# Only plain char pointers are strings; signed/unsigned char pointers are byte buffers
CHAR_NAMES = frozenset({'char'})


class CppType:
    """Base class for a resolved C++ type node"""

    def get_local_name(self) -> str:
        raise NotImplementedError

    def output_instance(self, name: str) -> str:
        """Render a declaration of `name` with this type"""
        return f"{self.get_local_name()} {name}"

    def as_const_type(self) -> Optional['ConstType']:
        return None

    def as_reference_type(self) -> Optional['ReferenceType']:
        return None

    def as_pointer_type(self) -> Optional['PointerType']:
        return None

    def __str__(self) -> str:
        return self.get_local_name()


@dataclass(frozen=True, eq=False)
class SimpleType(CppType):
    """Builtin or typedef'd type known only by its spelling"""
    name: str

    def get_local_name(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class StructType(CppType):
    """Class, struct or union"""
    name: str

    def get_local_name(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class HandleType(CppType):
    """Opaque resource identifier that crosses the boundary as an integer"""
    name: str

    def get_local_name(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class ConstType(CppType):
    wrapped: CppType

    def get_local_name(self) -> str:
        inner = self.wrapped.get_local_name()
        if self.wrapped.as_pointer_type() is not None:
            return f"{inner} const"
        return f"const {inner}"

    def as_const_type(self) -> 'ConstType':
        return self


@dataclass(frozen=True, eq=False)
class ReferenceType(CppType):
    pointing_at: CppType

    def get_local_name(self) -> str:
        return f"{self.pointing_at.get_local_name()}&"

    def as_reference_type(self) -> 'ReferenceType':
        return self


@dataclass(frozen=True, eq=False)
class PointerType(CppType):
    pointing_at: CppType

    def get_local_name(self) -> str:
        return f"{self.pointing_at.get_local_name()}*"

    def as_pointer_type(self) -> 'PointerType':
        return self


def unwrap_qualifiers(cpptype: CppType) -> CppType:
    """Strip const and reference layers until a terminal node is reached.

    Raises MalformedTypeError when the chain revisits a node or nests
    deeper than MAX_QUALIFIER_DEPTH.
    """
    seen = set()
    node = cpptype
    for depth in range(MAX_QUALIFIER_DEPTH + 1):
        if id(node) in seen:
            raise MalformedTypeError(
                f"qualifier cycle at depth {depth} while unwrapping "
                f"{type(cpptype).__name__} (revisited {type(node).__name__})"
            )
        seen.add(id(node))

        if (const_type := node.as_const_type()) is not None:
            node = const_type.wrapped
        elif (ref_type := node.as_reference_type()) is not None:
            node = ref_type.pointing_at
        else:
            return node

    raise MalformedTypeError(
        f"more than {MAX_QUALIFIER_DEPTH} const/reference layers around "
        f"{type(cpptype).__name__}"
    )


def is_char(cpptype: CppType) -> bool:
    node = unwrap_qualifiers(cpptype)
    return isinstance(node, SimpleType) and node.name in CHAR_NAMES


def is_handle(cpptype: CppType) -> bool:
    return isinstance(unwrap_qualifiers(cpptype), HandleType)


@dataclass
class Parameter:
    """Call variant parameter: remapped type plus generated name"""
    remap: 'ParameterRemap'
    name: str


@dataclass
class CallVariant:
    """One concrete, resolved overload of an exposed function"""
    cpp_name: str
    wrapper_name: str
    unique_name: str
    kind: str = 'function'
    return_remap: Optional['ParameterRemap'] = None
    parameters: list[Parameter] = field(default_factory=list)
    extension: bool = False
    explicit_self: bool = False
    manage_reference_count: bool = False
    num_default_parameters: int = 0

    @property
    def void_return(self) -> bool:
        return self.return_remap is None

    def get_parameter_name(self, n: int) -> str:
        return self.parameters[n].name


@dataclass
class ExposedFunction:
    """Named API entry point owning its call variants"""
    name: str
    remaps: list[CallVariant] = field(default_factory=list)


@dataclass
class CallCatalog:
    """Ordered collection of exposed functions"""
    module: str
    functions: list[ExposedFunction] = field(default_factory=list)

    def iter_variants(self):
        for func in self.functions:
            for remap in func.remaps:
                yield func, remap
