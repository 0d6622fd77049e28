"""
Shared constants for page generation.
"""

# Documentation host; module paths are appended verbatim
DOC_URL_PREFIX = "https://pkg.go.dev/"

INDEX_TEMPLATE = "index.html.j2"
MODULE_TEMPLATE = "module.html.j2"

PAGE_FILENAME = "index.html"
