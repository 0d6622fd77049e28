"""Generation pipeline: config, load, render, publish."""

from .config import GeneratorConfig  # noqa: F401
from .pipeline import run  # noqa: F401

__all__ = ["GeneratorConfig", "run"]
