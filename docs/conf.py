# Sphinx configuration for the circle approximation API docs.
#
# Build from the repository root with:
#     sphinx-build -b html docs docs/_build

import os
import sys

# circle_approx_cli.py sits at the repository root, next to the package
sys.path.insert(0, os.path.abspath(".."))

project = 'Circle Approximation CLI'
copyright = '2025, bitbangr'
author = 'bitbangr'
release = '0.1.0'

extensions = [
    "sphinx.ext.autodoc",           # module and function docstrings
    "sphinx.ext.autosummary",       # one page per module listed in index.md
    "sphinx_autodoc_typehints",     # Color / Circle / ndarray annotations
    "myst_parser",                  # index.md is Markdown
    "sphinx.ext.napoleon",          # Args/Returns sections in search.approximate
]
autosummary_generate = True

# OpenCV and scikit-learn are only needed at run time
autodoc_mock_imports = ["cv2", "sklearn"]

master_doc = "index"
source_suffix = {".md": "markdown"}
exclude_patterns = ["_build"]

html_theme = "sphinx_rtd_theme"
