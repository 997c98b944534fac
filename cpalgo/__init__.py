"""Algorithms and data structures: segment trees, ordered lists, wavelet
matrices, Delaunay triangulation, tree algorithms and modular counting."""

__version__ = "0.1.0"