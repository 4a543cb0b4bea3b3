"""CSS text transforms applied between compilation and writing."""

from .amp import sanitize_amp, strip_important
from .media import split_media
from .minify import minify_blobs
from .svg_inline import inline_svg, inline_svg_blobs

__all__ = [
    "sanitize_amp",
    "strip_important",
    "split_media",
    "minify_blobs",
    "inline_svg",
    "inline_svg_blobs",
]
