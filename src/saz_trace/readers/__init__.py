"""Readers exposed by saz_trace.readers

Re-export the archive reader and its functional entry point.
"""
from .saz_reader import SazReader, assemble

__all__ = [
    "SazReader",
    "assemble",
]
