"""Reversible URL encoding for file/folder path segments."""

from pathcodec.core import (
    build_path,
    build_url_path,
    format_file_size,
    from_url_friendly,
    parse_path_segments,
    to_url_friendly,
)

__version__ = "0.1.0"

__all__ = [
    "build_path",
    "build_url_path",
    "format_file_size",
    "from_url_friendly",
    "parse_path_segments",
    "to_url_friendly",
]
