"""Exceptions raised while building stylesheets."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Base class for failures that abort a single build."""


class StyleCompileError(BuildError):
    """The SCSS compiler rejected an entry file (or there was none)."""

    def __init__(self, entry: Path | None, message: str):
        self.entry = entry
        self.message = message
        super().__init__(f"{entry}: {message}" if entry else message)


class SvgEncodingError(BuildError):
    """An inline SVG payload could not be percent-decoded."""

    def __init__(self, match: str, reason: str):
        self.match = match
        self.reason = reason
        super().__init__(f"{reason} in {match[:120]!r}")


class BucketConfigError(BuildError, ValueError):
    """Media bucket configuration is unusable."""
