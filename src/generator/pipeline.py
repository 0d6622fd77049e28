"""Load modules, render pages and publish them into the build directory."""

from __future__ import annotations

import logging
from pathlib import Path

from catalog import load_module_set
from errors import PublishError
from htmlgen import PageRenderer, SiteBuilder
from publish import PublishResult, publish_tree
from .config import GeneratorConfig

LOGGER = logging.getLogger(__name__)


def run(config: GeneratorConfig) -> PublishResult:
    config.validate()
    # Input problems must surface before the build directory is touched
    modules = load_module_set(config.modules_file)
    builder = SiteBuilder(PageRenderer(config.base_url))

    build_dir = Path(config.build_dir)
    try:
        build_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PublishError(f"failed to create build directory {build_dir}: {e}") from e

    result = publish_tree(build_dir, lambda tmp_dir: builder.build(tmp_dir, modules))
    LOGGER.info(f"Generated {result.pages} page(s) for {config.base_url} in {build_dir}")
    return result


__all__ = ["run"]
