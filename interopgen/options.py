"""Generator options - build toggles and names used in emitted artifacts"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from .errors import CatalogError


@dataclass(frozen=True)
class GeneratorOptions:
    """Settings shared by the native and foreign emitters"""
    # Export wrappers publicly; otherwise they get internal linkage
    output_function_names: bool = True
    # Emit a trace call at the top of every wrapper body
    generate_spam: bool = False
    export_macro: str = "EXPORT_FUNC"
    namespace: str = "Bindings"
    class_name: str = "NativeMethods"
    library_name: str = "libinterrogate"
    include_headers: tuple[str, ...] = field(default_factory=tuple)

    def with_overrides(self, overrides: dict[str, Any]) -> "GeneratorOptions":
        """Return a copy with the given keys replaced; None values are ignored"""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise CatalogError(f"Unknown generator options: {', '.join(unknown)}")

        changes = {k: v for k, v in overrides.items() if v is not None}
        if 'include_headers' in changes:
            changes['include_headers'] = tuple(changes['include_headers'])
        return replace(self, **changes)
