"""Disk usage tree, folder listings and squarified treemap layout for browsing disk space."""

__version__ = "0.11.0"