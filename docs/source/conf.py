import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Urilex"
copyright = "2026, Urilex contributors"
author = "Urilex contributors"
import urilex

release = urilex.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
]

autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "Urilex"
