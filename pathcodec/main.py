from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pathcodec import __version__
from pathcodec.core.errors import APIError
from pathcodec.log_utils import inject_request_id, setup_logging
from pathcodec.routers.api import api_router


load_dotenv()

app = FastAPI(title="Path Codec", version=__version__)
setup_logging()


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.middleware("http")
async def add_req_id(request, call_next):
    return await inject_request_id(request, call_next)


app.include_router(api_router)
