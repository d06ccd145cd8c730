from __future__ import annotations

import os
import secrets
from typing import Annotated

from fastapi import Security
from fastapi.security import APIKeyHeader

from pathcodec.core.errors import APIError


api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def configured_api_key() -> str:
    return os.getenv("PATHCODEC_API_KEY", "")


async def require_api_key(
    x_api_key: Annotated[str | None, Security(api_key_header)],
) -> None:
    """Reject the request unless X-API-Key matches PATHCODEC_API_KEY (when set)."""
    expected = configured_api_key()
    if not expected:
        return
    if not x_api_key or not secrets.compare_digest(x_api_key, expected):
        raise APIError(status_code=401, code="unauthorized", message="Invalid API key")
