# Configuration file for the Sphinx documentation builder.
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import sys
import inspect

__location__ = os.path.join(os.getcwd(), os.path.dirname(
    inspect.getfile(inspect.currentframe())))

# add 'src' to path
sys.path.insert(0, os.path.join(__location__, '../../src'))

# -- Project information -----------------------------------------------------

project = u'solaroptics'
author = u'solaroptics developers'

version = ''
release = ''
try:
    from solaroptics import __version__ as version
except ImportError:
    pass
else:
    release = version

# -- General configuration ---------------------------------------------------

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.intersphinx',
              'sphinx.ext.autosummary', 'sphinx.ext.viewcode',
              'sphinx.ext.mathjax', 'sphinx.ext.napoleon']

napoleon_google_docstring = True
napoleon_numpy_docstring = False

exclude_patterns = ['Thumbs.db', '.DS_Store', 'tests']

master_doc = 'index'

add_module_names = False
autodoc_member_order = 'bysource'

pygments_style = 'friendly'

rst_prolog = """
.. |Series| replace:: :class:`pandas.Series`
.. |DataFrame| replace:: :class:`pandas.DataFrame`
"""

modindex_common_prefix = ['solaroptics.']

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'

# -- External mapping --------------------------------------------------------

python_version = '.'.join(map(str, sys.version_info[0:2]))
intersphinx_mapping = {
    'python': ('https://docs.python.org/' + python_version, None),
    'matplotlib': ('https://matplotlib.org/stable', None),
    'numpy': ('https://numpy.org/doc/stable', None),
    'pandas': ('https://pandas.pydata.org/pandas-docs/stable', None),
    'attrs': ('https://www.attrs.org/en/stable', None),
}
