"""Sphinx configuration for chainset documentation."""

import sys
from datetime import datetime
import pathlib

sys.path.insert(0, str(pathlib.Path('../../src').resolve()))

project = 'chainset'
copyright = f'{datetime.now().year}, bissli'
author = 'bissli'
version = '0.0.1'
release = '0.0.1'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
    'sphinx_copybutton',
    'myst_parser',
]

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True

autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'special-members': '__init__',
    'undoc-members': True,
    'exclude-members': '__weakref__',
    'show-inheritance': True,
}
autodoc_typehints = 'description'
autodoc_typehints_description_target = 'documented'

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'more_itertools': ('https://more-itertools.readthedocs.io/en/stable/', None),
}

myst_enable_extensions = [
    'colon_fence',
    'deflist',
]
source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

html_theme = 'sphinx_rtd_theme'
