"""Load modules.json into a ModuleSet."""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any

from errors import ModuleLoadError
from .models import ModuleConfig, ModuleSet
from .validator import validate_modules_payload

LOGGER = logging.getLogger(__name__)


def load_modules_json(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ModuleLoadError(f"modules json not found: {p}") from e
    except OSError as e:
        raise ModuleLoadError(f"failed to read {p}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ModuleLoadError(f"failed to decode {p}: {e}") from e
    return data


def load_module_set(path: str | Path) -> ModuleSet:
    data = load_modules_json(path)
    entries = validate_modules_payload(data)
    modules: ModuleSet = {name: ModuleConfig.from_dict(entry) for name, entry in entries.items()}
    LOGGER.info(f"Loaded {len(modules)} module(s) from {path}")
    return modules


__all__ = ["load_modules_json", "load_module_set"]
