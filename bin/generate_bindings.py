#!/usr/bin/env python3
"""
Binding Generator

Reads a call catalog (JSON) and generates:
  1. Exported C wrappers (prototypes + bodies)
  2. Foreign declarations for the selected target (C# P/Invoke or ctypes)

Usage:
    python generate_bindings.py catalog.json --output-dir generated/
    python generate_bindings.py catalog.json --target ctypes --no-function-names
"""

import sys
from pathlib import Path

# Add parent directory to path so interopgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from interopgen.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
