from fastapi import APIRouter, Depends, Query

from pathcodec.core.auth import require_api_key
from pathcodec.core.services import (
    api_path,
    decode_segment,
    encode_segment,
    file_size,
    split_url_path,
    url_path,
)
from pathcodec.models import (
    BuildPathRequest,
    BuildUrlPathRequest,
    ErrorResponse,
    FileSizeResponse,
    PathResponse,
    SegmentRequest,
    SegmentResult,
    SegmentsResponse,
)

router = APIRouter(dependencies=[Depends(require_api_key)])

# 1 EiB; larger values are rejected before formatting
MAX_FILE_SIZE = 1024**6

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
}


@router.post(
    "/paths/encode",
    response_model=SegmentResult,
    responses=ERROR_RESPONSES,
    tags=["paths"],
)
def encode_segment_endpoint(req: SegmentRequest) -> SegmentResult:
    return encode_segment(req.segment)


@router.post(
    "/paths/decode",
    response_model=SegmentResult,
    responses=ERROR_RESPONSES,
    tags=["paths"],
)
def decode_segment_endpoint(req: SegmentRequest) -> SegmentResult:
    return decode_segment(req.segment)


@router.get(
    "/paths/segments",
    response_model=SegmentsResponse,
    responses=ERROR_RESPONSES,
    tags=["paths"],
)
def path_segments(path: str = Query("", description="URL path, e.g. 'August-Special/file.pdf'")) -> SegmentsResponse:
    return split_url_path(path)


@router.post(
    "/paths/build",
    response_model=PathResponse,
    responses=ERROR_RESPONSES,
    tags=["paths"],
)
def build_path_endpoint(req: BuildPathRequest) -> PathResponse:
    return api_path(req)


@router.post(
    "/paths/url",
    response_model=PathResponse,
    responses=ERROR_RESPONSES,
    tags=["paths"],
)
def build_url_path_endpoint(req: BuildUrlPathRequest) -> PathResponse:
    return url_path(req)


@router.get(
    "/files/size",
    response_model=FileSizeResponse,
    responses=ERROR_RESPONSES,
    tags=["files"],
)
def file_size_endpoint(
    size_bytes: int = Query(..., alias="bytes", ge=0, le=MAX_FILE_SIZE, description="Size in bytes"),
) -> FileSizeResponse:
    return file_size(size_bytes)
