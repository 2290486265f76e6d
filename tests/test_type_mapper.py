import pytest

from interopgen.errors import MalformedTypeError
from interopgen.type_mapper import CSharpTypeMapper, CtypesTypeMapper
from interopgen.types import (
    MAX_QUALIFIER_DEPTH, ConstType, HandleType, PointerType, ReferenceType,
    SimpleType, StructType, is_char, is_handle, unwrap_qualifiers,
)

PRIMITIVES = sorted(CSharpTypeMapper.BOUNDARY_TYPES)


def test_absent_type_is_void():
    assert CSharpTypeMapper.map(None) == "void"
    assert CtypesTypeMapper.map(None) == "None"


@pytest.mark.parametrize("name", PRIMITIVES)
def test_qualifiers_do_not_change_mapping(name):
    bare = CSharpTypeMapper.map(SimpleType(name))
    assert bare
    assert CSharpTypeMapper.map(ReferenceType(ConstType(SimpleType(name)))) == bare
    assert CSharpTypeMapper.map(ConstType(SimpleType(name))) == bare
    assert CSharpTypeMapper.map(ReferenceType(SimpleType(name))) == bare


@pytest.mark.parametrize("name", sorted(CtypesTypeMapper.BOUNDARY_TYPES))
def test_ctypes_table_covers_same_spellings(name):
    assert name in CSharpTypeMapper.BOUNDARY_TYPES
    assert CtypesTypeMapper.map(ConstType(SimpleType(name))) == CtypesTypeMapper.BOUNDARY_TYPES[name]


@pytest.mark.parametrize("pointee", [
    SimpleType("int"),
    SimpleType("char"),
    ConstType(SimpleType("char")),
    StructType("Foo"),
    HandleType("TypeHandle"),
    PointerType(SimpleType("double")),
    SimpleType("void"),
])
def test_pointers_are_opaque(pointee):
    assert CSharpTypeMapper.map(PointerType(pointee)) == "IntPtr"
    assert CSharpTypeMapper.map(ReferenceType(ConstType(PointerType(pointee)))) == "IntPtr"
    assert CtypesTypeMapper.map(PointerType(pointee)) == "c_void_p"


def test_known_primitives():
    assert CSharpTypeMapper.map(SimpleType("unsigned long long")) == "ulong"
    assert CSharpTypeMapper.map(ReferenceType(ConstType(SimpleType("int")))) == "int"
    assert CSharpTypeMapper.map(SimpleType("long")) == "int"
    assert CSharpTypeMapper.map(SimpleType("size_t")) == "UIntPtr"
    assert CSharpTypeMapper.map(SimpleType("char")) == "byte"
    assert CtypesTypeMapper.map(SimpleType("unsigned long long")) == "c_ulonglong"
    assert CtypesTypeMapper.map(SimpleType("ptrdiff_t")) == "c_ssize_t"


def test_unknown_names_fall_back_to_opaque():
    assert CSharpTypeMapper.map(StructType("Foo")) == "IntPtr"
    assert CSharpTypeMapper.map(HandleType("TypeHandle")) == "IntPtr"
    assert CSharpTypeMapper.map(SimpleType("PN_stdfloat")) == "IntPtr"
    assert CSharpTypeMapper.map(PointerType(StructType("Foo"))) == CSharpTypeMapper.map(HandleType("TypeHandle"))


def test_char_pointer_is_reported_not_marshaled():
    char_ptr = PointerType(ConstType(SimpleType("char")))
    assert CSharpTypeMapper.map(char_ptr) == "IntPtr"
    assert CSharpTypeMapper.is_native_string(char_ptr)
    assert CSharpTypeMapper.is_native_string(ReferenceType(PointerType(SimpleType("char"))))
    assert not CSharpTypeMapper.is_native_string(PointerType(SimpleType("int")))
    assert not CSharpTypeMapper.is_native_string(PointerType(SimpleType("unsigned char")))
    assert not CSharpTypeMapper.is_native_string(SimpleType("char"))
    assert not CSharpTypeMapper.is_native_string(None)


def test_qualifier_cycle_fails_fast():
    node = ConstType(SimpleType("int"))
    object.__setattr__(node, "wrapped", ReferenceType(node))
    with pytest.raises(MalformedTypeError, match="cycle"):
        CSharpTypeMapper.map(node)


def test_qualifier_depth_is_bounded():
    node = SimpleType("int")
    for _ in range(MAX_QUALIFIER_DEPTH):
        node = ConstType(node)
    assert unwrap_qualifiers(node).get_local_name() == "int"

    with pytest.raises(MalformedTypeError):
        unwrap_qualifiers(ConstType(node))


def test_predicates_strip_qualifiers():
    assert is_char(ConstType(SimpleType("char")))
    assert not is_char(ConstType(SimpleType("unsigned char")))
    assert not is_char(SimpleType("signed char"))
    assert not is_char(SimpleType("int"))
    assert is_handle(ReferenceType(ConstType(HandleType("TypeHandle"))))
    assert not is_handle(PointerType(HandleType("TypeHandle")))


def test_local_names():
    assert ReferenceType(ConstType(SimpleType("int"))).get_local_name() == "const int&"
    assert PointerType(ConstType(SimpleType("char"))).get_local_name() == "const char*"
    assert ConstType(PointerType(SimpleType("char"))).get_local_name() == "char* const"
    assert PointerType(StructType("Foo")).output_instance("param0") == "Foo* param0"
