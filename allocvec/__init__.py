"""Growable vectors with explicit capacity, pluggable allocators and an owning iterator."""

__version__ = "0.1.0"
__all__ = ["core", "intoiter", "vector"]