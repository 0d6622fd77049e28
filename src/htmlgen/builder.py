"""Writes the rendered page tree to a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from catalog.models import ModuleSet
from errors import RenderError
from .constants import PAGE_FILENAME
from .render import PageRenderer

LOGGER = logging.getLogger(__name__)


class SiteBuilder:
    def __init__(self, renderer: PageRenderer):
        self.renderer = renderer

    def write_page(self, root: Path, name: str, html: str) -> Path:
        """Write ``html`` to ``<root>/<name>/index.html``; an empty name targets the root."""
        dir_path = Path(root) / name if name else Path(root)
        page = dir_path / PAGE_FILENAME
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
            page.write_text(html, encoding="utf-8")
        except (OSError, ValueError) as e:
            raise RenderError(f"failed to write {page}: {e}") from e
        LOGGER.debug(f"Wrote {page}")
        return page

    def build(self, root: Path, modules: ModuleSet) -> int:
        self.write_page(root, "", self.renderer.render_index(modules))
        for name, config in modules.items():
            self.write_page(root, name, self.renderer.render_module(name, config))
        count = len(modules) + 1
        LOGGER.info(f"Rendered {count} page(s) into {root}")
        return count


__all__ = ["SiteBuilder"]
