# Sphinx configuration for the workflow visualizer API docs

import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

from workflow_visualizer import __version__

project = 'GitHub Workflow Visualizer'
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

exclude_patterns = ['_build']

html_theme = 'sphinx_rtd_theme'

# Document the library packages; the FastAPI app and CLI are covered by /api/docs and --help.
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
}

# Docstrings use the Google "Args:/Raises:" style
napoleon_google_docstring = True
napoleon_numpy_docstring = False

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pydantic': ('https://docs.pydantic.dev/latest', None),
    'github': ('https://pygithub.readthedocs.io/en/stable', None),
}
