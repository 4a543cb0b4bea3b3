"""Stylesheet build pipeline."""

from .compiler import compile_sources
from .pipeline import build_stages, build_styles, run_stages
from .writer import write_blobs

__all__ = [
    "compile_sources",
    "build_stages",
    "build_styles",
    "run_stages",
    "write_blobs",
]
