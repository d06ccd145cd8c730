from pathcodec.core.services.paths_service import (
    api_path,
    decode_segment,
    encode_segment,
    file_size,
    split_url_path,
    url_path,
)

__all__ = [
    "api_path",
    "decode_segment",
    "encode_segment",
    "file_size",
    "split_url_path",
    "url_path",
]
