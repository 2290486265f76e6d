"""Call catalog loading - decodes resolved call variants from JSON"""

import logging
from typing import Any

from .errors import CatalogError
from .types import (
    CallCatalog, CallVariant, ConstType, CppType, ExposedFunction, HandleType,
    Parameter, PointerType, ReferenceType, SimpleType, StructType,
)

logger = logging.getLogger(__name__)

VARIANT_KINDS = ('function', 'method', 'constructor', 'destructor')

_WRAPPERS = {
    'const': ConstType,
    'reference': ReferenceType,
    'pointer': PointerType,
}

_NAMED = {
    'simple': SimpleType,
    'struct': StructType,
    'handle': HandleType,
}


def decode_type(value: Any) -> CppType:
    """Decode a type encoding.

    A bare string is a simple type spelling ("int", "unsigned long long").
    Objects have exactly one key: "const", "reference" or "pointer"
    wrapping another encoding, or "simple", "struct" or "handle" naming a
    terminal type.
    """
    if isinstance(value, str):
        return SimpleType(value)
    if not isinstance(value, dict) or len(value) != 1:
        raise CatalogError(f"Invalid type encoding: {value!r}")

    (key, inner), = value.items()
    if key in _WRAPPERS:
        return _WRAPPERS[key](decode_type(inner))
    if key in _NAMED:
        if not isinstance(inner, str):
            raise CatalogError(f"Type name for '{key}' must be a string: {inner!r}")
        return _NAMED[key](inner)
    raise CatalogError(f"Unknown type kind '{key}'")


def build_catalog(payload: dict[str, Any], target) -> CallCatalog:
    """Build a CallCatalog, remapping types with the target's policy"""
    functions = payload.get("functions")
    if not isinstance(functions, list):
        raise CatalogError("Catalog missing 'functions' array")

    catalog = CallCatalog(module=str(payload.get("module", "")))
    for entry in functions:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise CatalogError(f"Function entry needs a 'name': {entry!r}")
        func = ExposedFunction(name=entry["name"])
        for index, raw in enumerate(_list_field(entry, "remaps", f"Function '{func.name}'")):
            func.remaps.append(_build_variant(func.name, index, raw, target))
        catalog.functions.append(func)

    check_unique_wrappers(catalog)
    logger.info("loaded %d functions, %d variants",
                len(catalog.functions), sum(len(f.remaps) for f in catalog.functions))
    return catalog


def check_unique_wrappers(catalog: CallCatalog) -> None:
    seen = {}
    for func, remap in catalog.iter_variants():
        if remap.wrapper_name in seen:
            raise CatalogError(
                f"Duplicate wrapper name '{remap.wrapper_name}' "
                f"in '{seen[remap.wrapper_name]}' and '{func.name}'"
            )
        seen[remap.wrapper_name] = func.name


def _build_variant(func_name: str, index: int, raw: Any, target) -> CallVariant:
    where = f"Remap {index} of '{func_name}'"
    if not isinstance(raw, dict):
        raise CatalogError(f"{where} must be an object")

    kind = raw.get("kind", "function")
    if kind not in VARIANT_KINDS:
        raise CatalogError(f"{where} has unknown kind '{kind}'")

    naming = target.naming
    orig_types = [decode_type(t) for t in _list_field(raw, "parameters", where)]

    num_default = raw.get("num_default_parameters", 0)
    if not isinstance(num_default, int) or isinstance(num_default, bool) \
            or not 0 <= num_default <= len(orig_types):
        raise CatalogError(f"{where} has invalid 'num_default_parameters': {num_default!r}")

    if kind in ('method', 'destructor') and naming.synthesize_this_parameter:
        class_name = raw.get("class")
        if not class_name:
            raise CatalogError(f"{where} needs a 'class' for kind '{kind}'")
        receiver = StructType(class_name)
        if raw.get("const", False):
            receiver = ConstType(receiver)
        orig_types.insert(0, PointerType(receiver))

    wrapper_name = raw.get("wrapper_name")
    if wrapper_name is not None and not isinstance(wrapper_name, str):
        raise CatalogError(f"{where} has non-string 'wrapper_name': {wrapper_name!r}")

    return_type = raw.get("return_type")
    if kind == 'constructor' and return_type is None:
        return_type = {"pointer": {"struct": raw.get("class", raw.get("cpp_name", func_name))}}

    return_remap = None
    if return_type not in (None, "void"):
        return_remap = target.remap_parameter(decode_type(return_type))

    return CallVariant(
        cpp_name=raw.get("cpp_name", func_name),
        wrapper_name=wrapper_name or naming.make_wrapper_name(func_name, index),
        unique_name=naming.make_unique_name(func_name, index),
        kind=kind,
        return_remap=return_remap,
        parameters=[
            Parameter(remap=target.remap_parameter(t), name=f"param{n}")
            for n, t in enumerate(orig_types)
        ],
        extension=bool(raw.get("extension", False)),
        explicit_self=bool(raw.get("explicit_self", False)),
        manage_reference_count=bool(raw.get("manage_reference_count", False)),
        num_default_parameters=num_default,
    )


def _list_field(raw: dict[str, Any], key: str, where: str) -> list:
    value = raw.get(key, [])
    if not isinstance(value, list):
        raise CatalogError(f"{where}: '{key}' must be an array, got {value!r}")
    return value
