"""Markdown documentation builder for Bruno request collections."""

__version__ = "0.4.0"

__all__ = ["__version__"]
