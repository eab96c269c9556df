"""Sphinx configuration file for Milo documentation."""

from datetime import datetime
import os
import sys

# Add the project root to the path so we can import milo
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Project information
project = "Milo"
copyright = f"{datetime.now().year}, Milo contributors"
author = "Milo contributors"

# Get version from the package
try:
    from milo import __version__

    release = __version__
    version = ".".join(__version__.split(".")[:2])  # Major.minor only
except ImportError:
    release = "0.3.0"
    version = "0.3"

# General configuration
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",  # For Google-style docstrings
]

master_doc = "index"
html_theme = "alabaster"

autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}
# The Chinese segmentation dictionary is not needed to render API docs
autodoc_mock_imports = ["jieba"]

napoleon_google_docstring = True
napoleon_numpy_docstring = False

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
