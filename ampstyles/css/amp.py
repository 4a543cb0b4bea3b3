"""AMP stylesheet sanitizing."""

from __future__ import annotations

import re

from ..blobs import CssBlob

# Matches inside comments and strings too; CSS is not parsed here.
IMPORTANT_PATTERN = re.compile(r"\s*!important")


def strip_important(css: str) -> str:
    """Remove every ``!important`` together with the whitespace before it."""
    return IMPORTANT_PATTERN.sub("", css)


def is_amp_blob(blob: CssBlob, amp_filename: str) -> bool:
    return amp_filename in blob.all_names()


def sanitize_amp(blobs: list[CssBlob], amp_filename: str) -> list[CssBlob]:
    """Strip ``!important`` from the AMP blobs; pass the rest through."""
    return [
        b.with_contents(strip_important(b.contents)) if is_amp_blob(b, amp_filename) else b
        for b in blobs
    ]
