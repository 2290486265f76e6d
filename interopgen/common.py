"""File helpers shared by the driver and the command line"""

import difflib
import json
from pathlib import Path
from typing import Any

from .errors import CatalogError


def load_json_object(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog '{path}': {exc.strerror or exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Invalid JSON in '{path}': {exc}") from exc
    if not isinstance(payload, dict):
        raise CatalogError(f"JSON root in '{path}' must be an object")
    return payload


def sync_files(files: dict[Path, str], check: bool, dry_run: bool) -> list[Path]:
    """Bring generated files up to date and return the stale ones.

    Check mode writes nothing and prints a unified diff per stale file;
    dry-run mode only reports.
    """
    stale = []
    for path, content in files.items():
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
        if existing == content:
            continue
        stale.append(path)

        if check:
            print("\n".join(difflib.unified_diff(
                existing.splitlines(),
                content.splitlines(),
                fromfile=f"a/{path}",
                tofile=f"b/{path}",
                lineterm="",
            )))
        elif not dry_run:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
    return stale
