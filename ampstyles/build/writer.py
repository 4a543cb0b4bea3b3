"""Persist blobs to the output directory."""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from pathlib import Path

from ..blobs import CssBlob
from ..models import OutputInfo

logger = logging.getLogger(__name__)


def compute_sha256(content: bytes | str) -> str:
    """Hex digest used to tell whether an output file already holds ``content``."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def _atomic_write(path: Path, data: bytes) -> None:
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def write_blob(blob: CssBlob, output_dir: Path) -> OutputInfo:
    """Write one blob, skipping files whose bytes are already identical."""
    path = output_dir / blob.path
    data = blob.contents.encode("utf-8")
    digest = compute_sha256(data)

    changed = True
    if path.is_file() and compute_sha256(path.read_bytes()) == digest:
        changed = False
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        _atomic_write(path, data)
        logger.debug("Wrote %s (%d bytes)", path, len(data))

    return OutputInfo(path=path, size=len(data), sha256=digest, changed=changed)


def write_blobs(blobs: list[CssBlob], output_dir: Path) -> list[OutputInfo]:
    """Write every blob under ``output_dir``, keeping their relative paths.

    Each file is replaced atomically, so an interrupted build never leaves
    a truncated stylesheet behind.
    """
    return [write_blob(b, output_dir) for b in blobs]
