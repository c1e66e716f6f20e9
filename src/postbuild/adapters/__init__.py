"""
postbuild.adapters – Adapters that bridge concrete implementations to Protocols.

Modules
-------
glob.py    → StdlibGlobAdapter
git.py     → StaticRevisionProvider
"""

from .git import StaticRevisionProvider
from .glob import StdlibGlobAdapter

__all__ = [
    "StaticRevisionProvider",
    "StdlibGlobAdapter",
]
