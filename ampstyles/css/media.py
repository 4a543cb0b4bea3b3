"""Split compiled stylesheets into per-media-bucket output files."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

import tinycss2

from ..blobs import CssBlob
from ..models import MediaBucket, normalize_query
from ..errors import BucketConfigError

logger = logging.getLogger(__name__)


def _select(css: str, bucket: MediaBucket, source: str) -> str:
    if bucket.media == "all":
        return css

    wanted = set(bucket.queries())
    outside_media = bucket.media == "none"
    parts: list[str] = []
    for rule in tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True):
        if rule.type == "error":
            logger.warning("%s: skipping unparsable CSS (%s)", source, rule.message)
            continue
        is_media = rule.type == "at-rule" and rule.lower_at_keyword == "media"
        if outside_media:
            if not is_media:
                parts.append(rule.serialize())
        elif is_media and normalize_query(tinycss2.serialize(rule.prelude)) in wanted:
            parts.append(rule.serialize())
    return "".join(parts)


def split_media(blobs: list[CssBlob], buckets: list[MediaBucket]) -> list[CssBlob]:
    """Emit one blob per bucket for every input blob, in bucket order.

    Outputs sit beside their source blob and keep its history, so later
    stages can tell where each came from.
    """
    if not buckets:
        raise BucketConfigError("no media buckets configured")
    names = [b.filename for b in buckets]
    if len(set(names)) != len(names):
        raise BucketConfigError(f"duplicate bucket filenames: {names}")

    out: list[CssBlob] = []
    for blob in blobs:
        for bucket in buckets:
            target = PurePosixPath(blob.path).with_name(bucket.filename).as_posix()
            text = _select(blob.contents, bucket, blob.path)
            out.append(blob.renamed(target).with_contents(text))
    return out
