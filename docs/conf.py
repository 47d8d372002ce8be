# Sphinx configuration for the pendulab API reference.

import os
import sys

# Import pendulab from the repository root, not from site-packages
sys.path.insert(0, os.path.abspath(".."))

import pendulab  # noqa: E402

# -- Project information -----------------------------------------------------
project = "pendulab"
author = "pendulab contributors"
copyright = "2025, pendulab contributors"
release = pendulab.__version__
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.mathjax",
    "sphinx.ext.intersphinx",
]

exclude_patterns = ["_build"]
root_doc = "index"

# -- Output ------------------------------------------------------------------
html_theme = "alabaster"
html_title = "pendulab"

# -- Extensions --------------------------------------------------------------
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "show-inheritance": True,
}
autodoc_typehints = "description"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
