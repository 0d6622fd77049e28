"""Module catalog loading & validation."""

from .models import DEFAULT_BRANCH, ModuleConfig, ModuleSet  # noqa: F401
from .loader import load_module_set, load_modules_json  # noqa: F401
from .validator import validate_module_name, validate_modules_payload  # noqa: F401

__all__ = [
    "DEFAULT_BRANCH",
    "ModuleConfig",
    "ModuleSet",
    "load_module_set",
    "load_modules_json",
    "validate_module_name",
    "validate_modules_payload",
]
