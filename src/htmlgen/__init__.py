"""HTML generation for vanity import pages."""

from .builder import SiteBuilder  # noqa: F401
from .render import PageHelpers, PageRenderer, make_environment  # noqa: F401

__all__ = ["SiteBuilder", "PageHelpers", "PageRenderer", "make_environment"]
