"""
Jinja2 rendering of the index page and per-module pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape

from catalog.models import ModuleConfig, ModuleSet
from errors import RenderError
from .constants import DOC_URL_PREFIX, INDEX_TEMPLATE, MODULE_TEMPLATE


@dataclass(frozen=True)
class PageHelpers:
    """Derived URLs exposed to templates."""

    base_url: str

    def module_path(self, module: str) -> str:
        return self.base_url + "/" + module

    def module_doc_url(self, module: str) -> str:
        return DOC_URL_PREFIX + self.module_path(module)


def make_environment(helpers: PageHelpers, loader=None) -> Environment:
    env = Environment(
        loader=loader or PackageLoader("htmlgen", "templates"),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.globals["module_path"] = helpers.module_path
    env.globals["module_doc_url"] = helpers.module_doc_url
    return env


class PageRenderer:
    def __init__(self, base_url: str, env: Optional[Environment] = None):
        self.helpers = PageHelpers(base_url)
        self.env = env or make_environment(self.helpers)
        # Parse up front so a broken template fails before anything is written
        try:
            self._index = self.env.get_template(INDEX_TEMPLATE)
            self._module = self.env.get_template(MODULE_TEMPLATE)
        except TemplateError as e:
            raise RenderError(f"failed to parse templates: {e}") from e

    @property
    def base_url(self) -> str:
        return self.helpers.base_url

    def render_index(self, modules: ModuleSet) -> str:
        try:
            return self._index.render(
                base_url=self.base_url,
                modules=sorted(modules.items(), key=lambda item: item[0]),
            )
        except TemplateError as e:
            raise RenderError(f"failed to render index page: {e}") from e

    def render_module(self, module: str, config: ModuleConfig) -> str:
        try:
            return self._module.render(module=module, config=config)
        except TemplateError as e:
            raise RenderError(f"failed to render page for module '{module}': {e}") from e


__all__ = ["PageHelpers", "PageRenderer", "make_environment"]
