"""Directory scanning and tree rendering utilities.

This package scans a directory tree with extension and folder filters and
produces either a flat listing of matching entries or a box-drawing rendering
of the filtered hierarchy.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("metatron")
except PackageNotFoundError:
    __version__ = "unknown"
