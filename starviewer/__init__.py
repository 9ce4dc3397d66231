"""Tycho-2 catalogue preparation, cube-sphere quadtree indexing and star colours."""

__version__ = "0.1.0"
__all__ = ["__version__"]