"""C# Emitter - P/Invoke declarations for the exported wrappers"""

from .foreign_emitter import ForeignEmitter
from .type_mapper import CSharpTypeMapper
from .types import CallVariant


class CSharpEmitter(ForeignEmitter):
    """Generates an internal static NativeMethods class of DllImport externs"""

    type_mapper = CSharpTypeMapper

    def _header(self) -> list[str]:
        return [
            "// AUTO-GENERATED - DO NOT EDIT",
            "using System;",
            "using System.Runtime.InteropServices;",
            "",
            f"namespace {self.options.namespace}",
            "{",
            f"  internal static class {self.options.class_name}",
            "  {",
            f'    private const string DllName = "{self.options.library_name}";',
            "",
        ]

    def _declaration(self, remap: CallVariant) -> list[str]:
        lines = []
        strings = self.native_strings(remap)
        if strings:
            lines.append(f"    // native string: {', '.join(strings)} (marshal manually)")

        params = ", ".join(f"{t} {name}" for t, name in self.param_types(remap))
        lines.extend([
            "    [DllImport(DllName, CallingConvention = CallingConvention.Cdecl)]",
            f"    internal static extern {self.return_type(remap)} {remap.wrapper_name}({params});",
            "",
        ])
        return lines

    def _footer(self) -> list[str]:
        return [
            "  }",
            "}",
            "",
        ]
