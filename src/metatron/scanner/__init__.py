"""Directory traversal producing flat listings and rendered hierarchies.

This package walks a directory tree once per call, applying extension and
folder filters, and returns either the matching entries in traversal order or
a box-drawing rendering of the filtered hierarchy.
"""
