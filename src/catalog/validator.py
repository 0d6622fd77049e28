"""Validation for modules.json payload."""

from __future__ import annotations
import logging
from typing import Dict, Any

from errors import ModuleValidationError

LOGGER = logging.getLogger(__name__)

KNOWN_FIELDS = ("git", "branch", "description")


def validate_module_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ModuleValidationError("Module name must be a non-empty string")
    if name != name.strip():
        raise ModuleValidationError(f"Module name has surrounding whitespace: {name!r}")
    if "\0" in name:
        raise ModuleValidationError(f"Module name contains a NUL character: {name!r}")
    if name.startswith("/") or "\\" in name:
        raise ModuleValidationError(f"Module name must be a relative path: {name}")
    # Names become output sub-directories
    for part in name.split("/"):
        if part in ("", ".", ".."):
            raise ModuleValidationError(f"Module name has an invalid path segment: {name}")
    return name


def validate_modules_payload(data: Any) -> Dict[str, Dict[str, Any]]:
    if not isinstance(data, dict):
        raise ModuleValidationError("Root must be an object mapping module names to configs")
    normed: Dict[str, Dict[str, Any]] = {}
    for name, entry in data.items():
        validate_module_name(name)
        if not isinstance(entry, dict):
            raise ModuleValidationError(f"Module '{name}' is not an object")
        for field in KNOWN_FIELDS:
            value = entry.get(field)
            if value is not None and not isinstance(value, str):
                raise ModuleValidationError(f"Module '{name}' field '{field}' must be a string")
        git = entry.get("git") or ""
        if not git.strip():
            raise ModuleValidationError(f"Module '{name}' missing 'git' repository url")
        extra = sorted(set(entry) - set(KNOWN_FIELDS))
        if extra:
            LOGGER.debug(f"Module '{name}': ignoring unknown fields {extra}")
        normed[name] = {
            "git": git,
            "branch": entry.get("branch") or "",
            "description": entry.get("description") or "",
        }
    return normed


__all__ = ["validate_modules_payload", "validate_module_name"]
