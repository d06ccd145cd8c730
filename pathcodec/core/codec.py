"""
Reversible encoding of human-readable path segments for use in URLs.

Spaces become single hyphens and literal hyphens are escaped as double
hyphens, so "August Special" <-> "August-Special" and
"August-Special" <-> "August--Special".

Decoding is a fixed two-pass substitution. Input that was not produced by
to_url_friendly (odd hyphen runs, hyphens next to spaces) decodes
mechanically rather than being rejected.
"""
from __future__ import annotations

import re
from collections.abc import Iterable


_HYPHEN_RE = re.compile(r"-")
_SPACE_RE = re.compile(r" ")
_DOUBLE_SPACE_RE = re.compile(r" {2}")


def to_url_friendly(segment: str) -> str:
    """Encode a segment: "August Special" -> "August-Special", "a-b" -> "a--b"."""
    escaped = _HYPHEN_RE.sub("--", segment)
    return _SPACE_RE.sub("-", escaped)


def from_url_friendly(segment: str) -> str:
    """Decode a URL segment produced by to_url_friendly."""
    with_spaces = _HYPHEN_RE.sub(" ", segment)
    return _DOUBLE_SPACE_RE.sub("-", with_spaces)


def parse_path_segments(path: str | None) -> list[str]:
    """Split a URL path such as "August-Special/file.pdf" into decoded segments.

    Leading, trailing and repeated slashes are ignored.
    """
    if not path:
        return []
    return [from_url_friendly(part) for part in path.split("/") if part]


def build_path(segments: Iterable[str]) -> str:
    """Join segments verbatim with a trailing slash, as the file API expects."""
    parts = list(segments)
    if not parts:
        return ""
    return "/".join(parts) + "/"


def build_url_path(segments: Iterable[str], file_name: str | None = None) -> str:
    """Build a browser path: ["August Special"], "a.pdf" -> "/August-Special/a.pdf"."""
    parts = [to_url_friendly(segment) for segment in segments]
    if not parts and not file_name:
        return "/"

    url_path = "/" + "/".join(parts)
    if file_name:
        url_path += ("/" if parts else "") + to_url_friendly(file_name)
    return url_path
