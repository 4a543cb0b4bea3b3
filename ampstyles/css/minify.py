"""Optional minification stage."""

from __future__ import annotations

import rcssmin

from ..blobs import CssBlob


def minify_blobs(blobs: list[CssBlob]) -> list[CssBlob]:
    return [b.with_contents(rcssmin.cssmin(b.contents)) for b in blobs]
