"""Rewrite percent-encoded SVG data URIs in CSS as base64."""

from __future__ import annotations

import base64
import re
from typing import NamedTuple
from urllib.parse import unquote_to_bytes

from ..blobs import CssBlob
from ..errors import SvgEncodingError

# url("data:image/svg+xml,...") with single, double or no quotes.
# Already-encoded ";base64," URIs never match.
SVG_URL_PATTERN = re.compile(r"""url\((['"]?)data:image/svg\+xml,(.*?)\1\)""")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class SvgMatch(NamedTuple):
    source: str
    replacement: str


def encode_svg_payload(payload: str, context: str | None = None) -> str:
    """Percent-decode ``payload`` and return its base64 form.

    Raises:
        SvgEncodingError: on a stray ``%`` or a payload that does not
            decode to UTF-8 text
    """
    where = context if context is not None else payload
    bad = _BAD_ESCAPE.search(payload)
    if bad:
        raise SvgEncodingError(where, f"malformed percent-escape at offset {bad.start()}")
    raw = unquote_to_bytes(payload)
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SvgEncodingError(where, f"payload is not valid UTF-8 ({e.reason})") from e
    return base64.b64encode(raw).decode("ascii")


def find_svg_urls(css: str) -> list[SvgMatch]:
    """Collect every inline SVG URL and what it should become."""
    matches: list[SvgMatch] = []
    for m in SVG_URL_PATTERN.finditer(css):
        quote, payload = m.group(1), m.group(2)
        encoded = encode_svg_payload(payload, context=m.group(0))
        replacement = f"url({quote}data:image/svg+xml;base64,{encoded}{quote})"
        matches.append(SvgMatch(m.group(0), replacement))
    return matches


def inline_svg(css: str) -> str:
    """Base64-encode all ``data:image/svg+xml,`` URLs in ``css``.

    Substitution is by content, not position: each match replaces the
    first remaining occurrence of its source text. Text without a match
    comes back unchanged.
    """
    result = css
    for source, replacement in find_svg_urls(css):
        result = result.replace(source, replacement, 1)
    return result


def inline_svg_blobs(blobs: list[CssBlob]) -> list[CssBlob]:
    return [b.with_contents(inline_svg(b.contents)) for b in blobs]
