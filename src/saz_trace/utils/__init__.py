"""Utility helpers for saz_trace.

Only the dependency-free submodules are imported here; `http_utils` builds
entry objects and is imported directly by its users.
"""
from . import formats, headers

__all__ = ["formats", "headers"]
