"""Helpers for Go toolchain installations: system Go detection, version records, cache cleanup and path checks."""

__version__ = "0.1.0"
__all__ = ["security", "versions", "system", "manager"]