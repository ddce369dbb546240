"""
The spacescroll version. Bumped by hand before each release; setup.py
parses the ``__version__`` line when building a distribution.
"""

__version__ = "0.2.0"

version_info = tuple(int(i) for i in __version__.split("."))
