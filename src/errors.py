"""
Exception hierarchy for the page generator.

Every failure the CLI reports is a GeneratorError; lower-level errors are
chained with ``raise ... from``.
"""


class GeneratorError(Exception):
    pass


class ConfigError(GeneratorError):
    pass


class ModuleLoadError(GeneratorError):
    pass


class ModuleValidationError(ModuleLoadError):
    pass


class RenderError(GeneratorError):
    pass


class PublishError(GeneratorError):
    pass


__all__ = [
    "GeneratorError",
    "ConfigError",
    "ModuleLoadError",
    "ModuleValidationError",
    "RenderError",
    "PublishError",
]
