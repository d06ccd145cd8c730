from pathcodec.core.codec import (
    build_path,
    build_url_path,
    from_url_friendly,
    parse_path_segments,
    to_url_friendly,
)
from pathcodec.core.sizes import format_file_size

__all__ = [
    "build_path",
    "build_url_path",
    "format_file_size",
    "from_url_friendly",
    "parse_path_segments",
    "to_url_friendly",
]
