from __future__ import annotations

from pathcodec.core.codec import (
    build_path,
    build_url_path,
    from_url_friendly,
    parse_path_segments,
    to_url_friendly,
)
from pathcodec.core.errors import APIError
from pathcodec.core.sizes import format_file_size
from pathcodec.models import (
    BuildPathRequest,
    BuildUrlPathRequest,
    FileSizeResponse,
    PathResponse,
    SegmentResult,
    SegmentsResponse,
)


def _check_segment(segment: str, field: str = "segment") -> str:
    if "/" in segment:
        raise APIError(
            400,
            "bad_request",
            f"{field} must not contain '/'",
            details={"field": field, "value": segment},
        )
    return segment


def encode_segment(segment: str) -> SegmentResult:
    _check_segment(segment)
    return SegmentResult(input=segment, output=to_url_friendly(segment))


def decode_segment(segment: str) -> SegmentResult:
    return SegmentResult(input=segment, output=from_url_friendly(segment))


def split_url_path(path: str | None) -> SegmentsResponse:
    return SegmentsResponse(path=path or "", segments=parse_path_segments(path))


def api_path(req: BuildPathRequest) -> PathResponse:
    for idx, segment in enumerate(req.segments):
        _check_segment(segment, f"segments[{idx}]")
    return PathResponse(path=build_path(req.segments))


def url_path(req: BuildUrlPathRequest) -> PathResponse:
    for idx, segment in enumerate(req.segments):
        _check_segment(segment, f"segments[{idx}]")
    if req.file_name:
        _check_segment(req.file_name, "file_name")
    return PathResponse(path=build_url_path(req.segments, req.file_name))


def file_size(size_bytes: int) -> FileSizeResponse:
    return FileSizeResponse(bytes=size_bytes, display=format_file_size(size_bytes))
