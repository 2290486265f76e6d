"""Command line front end for the binding emitter"""

import argparse
import logging
import time
from pathlib import Path
from typing import Optional

from .catalog import build_catalog
from .common import load_json_object, sync_files
from .driver import BindingDriver
from .errors import InteropError
from .options import GeneratorOptions
from .targets import TARGETS, get_target


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate exported C wrappers and foreign declarations")
    parser.add_argument("catalog", help="Path to the call catalog JSON")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--target", "-t", default="csharp", choices=sorted(TARGETS), help="Foreign language")
    parser.add_argument("--native-name", default="", help="Native artifact file name")
    parser.add_argument("--foreign-name", default="", help="Foreign artifact file name")
    parser.add_argument("--no-foreign", action="store_true", help="Only generate the native artifact")
    parser.add_argument("--namespace", "-n", default=None, help="Namespace of the foreign declarations")
    parser.add_argument("--class-name", default=None, help="Container class of the foreign declarations")
    parser.add_argument("--library-name", default=None, help="Shared library the foreign side binds to")
    parser.add_argument("--export-macro", default=None, help="Export macro name")
    parser.add_argument("--include", action="append", default=None, help="Header included by the native artifact")
    parser.add_argument("--no-function-names", action="store_true",
                        help="Give wrappers internal linkage instead of exporting them")
    parser.add_argument("--spam", action="store_true", help="Emit trace calls in wrapper bodies")
    parser.add_argument("--manifest", action="store_true", help="Also write a JSON wrapper manifest")
    parser.add_argument("--check", action="store_true", help="Fail if generated files are out of date")
    parser.add_argument("--dry-run", action="store_true", help="Do not write any files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    start_time = time.perf_counter()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    catalog_path = Path(args.catalog)
    try:
        target = get_target(args.target)
        payload = load_json_object(catalog_path)

        options = GeneratorOptions().with_overrides(payload.get("options", {}))
        options = options.with_overrides({
            "namespace": args.namespace,
            "class_name": args.class_name,
            "library_name": args.library_name,
            "export_macro": args.export_macro,
            "include_headers": args.include,
            "output_function_names": False if args.no_function_names else None,
            "generate_spam": True if args.spam else None,
        })

        catalog = build_catalog(payload, target)
        artifacts = BindingDriver(target, options).render(catalog, with_foreign=not args.no_foreign)
    except InteropError as exc:
        raise SystemExit(f"error: {exc}") from exc

    output_dir = Path(args.output_dir)
    stem = catalog.module or catalog_path.stem.replace("-", "_")

    files = {
        output_dir / (args.native_name or f"{stem}_{target.name}_wrappers.cpp"): artifacts.native,
    }
    if artifacts.foreign is not None:
        foreign_name = args.foreign_name or f"{stem}_native_methods{target.foreign_suffix}"
        files[output_dir / foreign_name] = artifacts.foreign
    if args.manifest:
        files[output_dir / f"{stem}_{target.name}_wrappers.json"] = artifacts.manifest()

    stale = sync_files(files, args.check, args.dry_run)
    if args.check:
        return 1 if stale else 0

    for path in files:
        if path not in stale:
            print(f"Up to date: {path}")
        elif args.dry_run:
            print(f"Would generate: {path}")
        else:
            print(f"Generated: {path}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0
