"""Launcher dashboard for desktop applications with icon theme lookup."""

__version__ = "0.1.0"
__all__ = ["__version__"]