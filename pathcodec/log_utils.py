import json
import logging
import os
import time
import uuid
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("pathcodec")


def setup_logging():
    level = os.getenv("PATHCODEC_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))


def route_tag(request: Request) -> str | None:
    """First OpenAPI tag of the matched route ("paths", "files", "health")."""
    route = request.scope.get("route")
    tags = getattr(route, "tags", None) or []
    return str(tags[0]) if tags else None


async def inject_request_id(request: Request, call_next):
    req_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
    request.state.req_id = req_id
    started = time.perf_counter()
    response: Response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    logger.info(json.dumps({
        "msg": "request",
        "req_id": req_id,
        "method": request.method,
        "path": request.url.path,
        "tag": route_tag(request),
        "status": response.status_code,
        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
    }))
    return response
