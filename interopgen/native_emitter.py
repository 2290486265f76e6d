"""Native Emitter - exported C prototypes and wrapper bodies"""

import logging
from typing import Iterable, Optional

from .call_emitter import CallEmitter
from .naming import NamingPolicy
from .options import GeneratorOptions
from .types import CallVariant, ExposedFunction

logger = logging.getLogger(__name__)


class NativeEmitter:
    """Generates the native side of the binding: one extern "C" wrapper per variant"""

    def __init__(self, options: GeneratorOptions, naming: NamingPolicy,
                 label: str, call_emitter: Optional[CallEmitter] = None):
        self.options = options
        self.naming = naming
        self.label = label
        self.call_emitter = call_emitter or CallEmitter()

    def write_prototypes(self, functions: Iterable[ExposedFunction]) -> list[str]:
        lines = self._preamble()
        lines.extend(self._export_macro_block())
        for func in functions:
            for remap in self._eligible(func):
                if self.options.output_function_names:
                    lines.append(f"{self.options.export_macro} {self._function_header(remap, False)};")
                else:
                    lines.append(f"static {self._function_header(remap, False)};")
        lines.append("")
        return lines

    def write_functions(self, functions: Iterable[ExposedFunction]) -> list[str]:
        lines = []
        for func in functions:
            for remap in self._eligible(func):
                lines.extend(self._function_instance(remap))
        return lines

    def _preamble(self) -> list[str]:
        lines = ["// AUTO-GENERATED - DO NOT EDIT"]
        for header in self.options.include_headers:
            lines.append(f'#include "{header}"')
        if self.options.generate_spam:
            lines.append("#include <cstdio>")
        lines.append("")
        return lines

    def _export_macro_block(self) -> list[str]:
        macro = self.options.export_macro
        return [
            "#if __GNUC__ >= 4",
            f'#define {macro} extern "C" __attribute__((used, visibility("default")))',
            "#elif defined(_MSC_VER)",
            f'#define {macro} extern "C" __declspec(dllexport)',
            "#else",
            f'#define {macro} extern "C"',
            "#endif",
            "",
        ]

    def _eligible(self, func: ExposedFunction) -> list[CallVariant]:
        remaps = []
        for remap in func.remaps:
            if self.naming.is_eligible(remap):
                remaps.append(remap)
            else:
                logger.debug("skipping %s: extension or explicit self", remap.wrapper_name)
        return remaps

    def _function_instance(self, remap: CallVariant) -> list[str]:
        lines = [
            "/*",
            f" * {self.label} wrapper for",
            f" * {self.call_emitter.write_orig_prototype(remap)}",
            " */",
        ]

        header = self._function_header(remap, True)
        if not self.options.output_function_names:
            # Not exported from the library
            header = f"static {header}"
        lines.append(f"{header} {{")

        if self.options.generate_spam:
            lines.extend([
                "#ifndef NDEBUG",
                f'  fprintf(stderr, "{remap.wrapper_name}\\n");',
                "#endif",
            ])

        statements, return_expr = self.call_emitter.call_function(remap, "param0")
        managed, return_expr = self.call_emitter.manage_return_value(remap, return_expr)
        lines.extend(f"  {s}" for s in statements + managed)
        if return_expr:
            lines.append(f"  return {return_expr};")

        lines.append("}")
        lines.append("")
        return lines

    def _function_header(self, remap: CallVariant, newline: bool) -> str:
        if remap.void_return:
            ret = "void"
        else:
            ret = remap.return_remap.get_new_type().get_local_name()

        params = ", ".join(p.remap.get_new_type().output_instance(p.name) for p in remap.parameters)
        sep = "\n" if newline else " "
        return f"{ret}{sep}{remap.wrapper_name}({params})"
