#!/usr/bin/env python3
"""Validate modules.json structure.
Exit non-zero if invalid."""
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from catalog import load_module_set  # noqa: E402
from errors import ModuleLoadError, ModuleValidationError  # noqa: E402


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else "modules.json"
    try:
        modules = load_module_set(path)
    except ModuleValidationError as e:
        print(f"Validation failed: {e}", file=sys.stderr)
        return 2
    except ModuleLoadError as e:
        print(e, file=sys.stderr)
        return 1
    print(f"{path} valid: {len(modules)} modules")
    return 0


if __name__ == "__main__":
    sys.exit(main())
