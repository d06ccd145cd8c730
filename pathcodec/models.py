from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class HealthResponse(BaseModel):
    ok: bool


class SegmentRequest(BaseModel):
    segment: str = Field(..., description="Single path segment, e.g. 'August Special'")


class SegmentResult(BaseModel):
    input: str
    output: str


class SegmentsResponse(BaseModel):
    path: str
    segments: list[str]


class BuildPathRequest(BaseModel):
    segments: list[str] = Field(default_factory=list)


class BuildUrlPathRequest(BaseModel):
    segments: list[str] = Field(default_factory=list)
    file_name: str | None = Field(default=None, description="Optional trailing file name")


class PathResponse(BaseModel):
    path: str


class FileSizeResponse(BaseModel):
    bytes: int
    display: str
