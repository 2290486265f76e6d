"""Driver - sequences native and foreign emission over one call catalog"""

import io
import json
import logging
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .errors import CatalogError, SinkClosedError
from .options import GeneratorOptions
from .targets import Target
from .types import CallCatalog, CallVariant, ExposedFunction

logger = logging.getLogger(__name__)


class Sink:
    """Exclusive handle on an output stream for the duration of a `with` block"""

    def __init__(self, stream: TextIO, name: str):
        self.stream = stream
        self.name = name
        self.closed = False

    def write(self, lines: list[str]) -> None:
        if self.closed:
            raise SinkClosedError(f"Sink '{self.name}' is already released")
        for line in lines:
            self.stream.write(line)
            self.stream.write("\n")

    def __enter__(self) -> "Sink":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True
        return False


@dataclass
class GeneratedArtifacts:
    """Rendered output of one generation run"""
    native: str
    foreign: Optional[str] = None
    wrappers: dict[str, list[dict[str, str]]] = field(default_factory=dict)

    def manifest(self) -> str:
        return json.dumps(self.wrappers, indent=2) + "\n"


class BindingDriver:
    """Composes a target's capabilities; never branches on the target language"""

    def __init__(self, target: Target, options: GeneratorOptions):
        self.target = target
        self.options = options

    def render(self, catalog: CallCatalog, with_foreign: bool = True) -> GeneratedArtifacts:
        native_emitter = self.target.native_emitter(self.options)
        functions = catalog.functions

        native_out = io.StringIO()
        foreign_out = io.StringIO() if with_foreign else None

        with Sink(native_out, "native") as native:
            native.write(native_emitter.write_prototypes(functions))
            if foreign_out is not None:
                with Sink(foreign_out, "foreign") as foreign:
                    foreign.write(self.target.foreign_emitter(self.options).write_declarations(functions))
            native.write(native_emitter.write_functions(functions))

        wrappers = self.record_wrappers(catalog)
        logger.info("%s: emitted %d wrappers for %d functions",
                    self.target.name, sum(len(w) for w in wrappers.values()), len(wrappers))

        return GeneratedArtifacts(
            native=native_out.getvalue(),
            foreign=foreign_out.getvalue() if foreign_out is not None else None,
            wrappers=wrappers,
        )

    def record_wrappers(self, catalog: CallCatalog) -> dict[str, list[dict[str, str]]]:
        """Map each function to the wrappers exported for it"""
        recorded: dict[str, list[dict[str, str]]] = {}
        seen = set()
        for func, remap in catalog.iter_variants():
            if not self.target.naming.is_eligible(remap):
                continue
            if remap.wrapper_name in seen:
                raise CatalogError(f"Wrapper name '{remap.wrapper_name}' emitted twice")
            seen.add(remap.wrapper_name)
            self.record_function_wrapper(recorded, func, remap)
        return recorded

    def record_function_wrapper(self, recorded: dict, func: ExposedFunction, remap: CallVariant) -> None:
        recorded.setdefault(func.name, []).append({
            "wrapper": remap.wrapper_name,
            "unique_name": remap.unique_name,
        })
