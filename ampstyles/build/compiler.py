"""SCSS compilation through libsass."""

from __future__ import annotations

import logging
from pathlib import Path

import sass

from ..blobs import CssBlob
from ..errors import StyleCompileError
from ..models import BuildConfig

logger = logging.getLogger(__name__)


def find_entries(source_dir: Path, entry_glob: str) -> list[Path]:
    """Entry stylesheets under ``source_dir``; partials (``_x.scss``) are skipped."""
    if not source_dir.is_dir():
        return []
    return sorted(
        p for p in source_dir.glob(entry_glob) if p.is_file() and not p.name.startswith("_")
    )


def compile_entry(entry: Path, source_dir: Path, output_style: str) -> CssBlob:
    try:
        css = sass.compile(
            filename=str(entry),
            output_style=output_style,
            include_paths=[str(source_dir)],
        )
    except sass.CompileError as e:
        raise StyleCompileError(entry, str(e).strip()) from e
    rel = entry.relative_to(source_dir).with_suffix(".css")
    return CssBlob(path=rel.as_posix(), contents=css)


def compile_sources(config: BuildConfig) -> list[CssBlob]:
    """Compile every entry file into a blob.

    Raises:
        StyleCompileError: if there is nothing to compile or libsass fails
    """
    entries = find_entries(config.source_dir, config.entry_glob)
    if not entries:
        raise StyleCompileError(
            None, f"no entry stylesheets matching {config.entry_glob!r} in {config.source_dir}"
        )

    blobs = []
    for entry in entries:
        logger.debug("Compiling %s", entry)
        blobs.append(compile_entry(entry, config.source_dir, config.output_style))
    return blobs
