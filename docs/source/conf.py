import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Urlcraft"
copyright = "2026, Urlcraft contributors"
author = "Urlcraft contributors"
import urlcraft

release = urlcraft.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports from urlcraft/__init__ duplicate the builder module entries
suppress_warnings = [
    "ref.python",
]

autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_class_content = "both"
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "Urlcraft"
