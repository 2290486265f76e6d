"""ctypes Emitter - Python declarations for the exported wrappers"""

from .foreign_emitter import ForeignEmitter
from .type_mapper import CtypesTypeMapper
from .types import CallVariant

BANNER = "# ══════════════════════════════════════════════════════════════"


class CtypesEmitter(ForeignEmitter):
    """Generates a module that loads the library once and sets restype/argtypes"""

    type_mapper = CtypesTypeMapper

    def _header(self) -> list[str]:
        return [
            '"""',
            f"AUTO-GENERATED ctypes declarations for {self.options.library_name}",
            "DO NOT EDIT",
            '"""',
            "",
            "import ctypes",
            "import os",
            "import sys",
            "",
            f'LIBRARY_NAME = "{self.options.library_name}"',
            "",
            "",
            "def _load_library():",
            '    """Load the native library"""',
            "    if sys.platform == 'win32':",
            '        lib_name = LIBRARY_NAME + ".dll"',
            "    elif sys.platform == 'darwin':",
            '        lib_name = LIBRARY_NAME + ".dylib"',
            "    else:",
            '        lib_name = LIBRARY_NAME + ".so"',
            "",
            "    lib_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), lib_name)",
            "    if os.path.exists(lib_path):",
            "        return ctypes.CDLL(lib_path)",
            "",
            "    # Try system library path",
            "    return ctypes.CDLL(lib_name)",
            "",
            "",
            "_lib = _load_library()",
            "",
            BANNER,
            "# Function Declarations",
            BANNER,
            "",
        ]

    def _declaration(self, remap: CallVariant) -> list[str]:
        lines = []
        strings = self.native_strings(remap)
        if strings:
            lines.append(f"# native string: {', '.join(strings)} (marshal manually)")

        argtypes = ", ".join(self._qualify(t) for t, _name in self.param_types(remap))
        lines.extend([
            f"_lib.{remap.wrapper_name}.restype = {self._qualify(self.return_type(remap))}",
            f"_lib.{remap.wrapper_name}.argtypes = [{argtypes}]",
            "",
        ])
        return lines

    def _footer(self) -> list[str]:
        return []

    def _qualify(self, boundary: str) -> str:
        if boundary == self.type_mapper.VOID:
            return boundary
        return f"ctypes.{boundary}"
