"""
Generator configuration and settings.
"""

import os
from pathlib import Path
from typing import Optional

from errors import ConfigError

DEFAULT_MODULES_FILE = "modules.json"
DEFAULT_BUILD_DIR = "build"


class GeneratorConfig:
    """Configuration for one generation run."""

    def __init__(
        self,
        base_url: str = "",
        modules_file: str = DEFAULT_MODULES_FILE,
        build_dir: str = DEFAULT_BUILD_DIR,
        log_file: Optional[str] = None,
    ):
        self.base_url = base_url
        self.modules_file = modules_file
        self.build_dir = build_dir
        self.log_file = log_file

    def __repr__(self):
        return (
            f"GeneratorConfig(base_url={self.base_url!r}, modules_file={self.modules_file!r}, "
            f"build_dir={self.build_dir!r}, log_file={self.log_file!r})"
        )

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create config from environment variables."""
        return cls(
            base_url=os.getenv("VANITY_BASE_URL", ""),
            modules_file=os.getenv("VANITY_MODULES_FILE", DEFAULT_MODULES_FILE),
            build_dir=os.getenv("VANITY_BUILD_DIR", DEFAULT_BUILD_DIR),
            log_file=os.getenv("VANITY_LOG_FILE") or None,
        )

    @classmethod
    def from_args(cls, args) -> "GeneratorConfig":
        """Create config from parsed CLI arguments; unset flags fall back to the environment."""
        env = cls.from_env()
        return cls(
            base_url=args.base_url if args.base_url is not None else env.base_url,
            modules_file=args.modules if args.modules is not None else env.modules_file,
            build_dir=args.build_dir if args.build_dir is not None else env.build_dir,
            log_file=args.log_file if args.log_file is not None else env.log_file,
        )

    def validate(self) -> "GeneratorConfig":
        if not self.base_url:
            raise ConfigError("-base-url is required")
        if not self.modules_file:
            raise ConfigError("-modules is required")
        if not self.build_dir:
            raise ConfigError("-build-dir is required")
        if Path(self.build_dir).name in ("", ".", ".."):
            raise ConfigError(f"-build-dir must name a directory, got {self.build_dir!r}")
        return self
