"""
HTTP endpoint for SideHustle idea generation.
"""

import json
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from sidehustle.errors import InvalidRequestBodyError, InvocationFailedError, SideHustleError
from sidehustle.factory import get_pipeline
from sidehustle.utils.constants import ALLOW_HEADERS, ALLOW_METHODS, ALLOW_ORIGIN
from sidehustle.utils.logger import logger

app = FastAPI(title="Mr. SideHustle")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": ALLOW_METHODS,
    "Access-Control-Allow-Headers": ALLOW_HEADERS,
}


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(SideHustleError)
async def sidehustle_error_handler(request: Request, exc: SideHustleError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"}, headers=exc.headers)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def parse_body(raw: bytes) -> Any:
    """
    Decode the request body.
    A JSON string holding an encoded object is decoded a second time.
    """
    if not raw or not raw.strip():
        return {}
    try:
        body = json.loads(raw)
        if isinstance(body, str):
            body = json.loads(body)
    except ValueError as e:
        raise InvalidRequestBodyError(str(e)) from e
    return body if body is not None else {}


@app.options("/ideas")
async def ideas_preflight():
    return Response(status_code=200)


@app.post("/ideas")
async def create_ideas(request: Request):
    try:
        payload = parse_body(await request.body())
        pipeline = get_pipeline()
        result = await run_in_threadpool(pipeline.run, payload)
        return JSONResponse(status_code=200, content=result)
    except SideHustleError:
        raise
    except Exception as e:
        logger.exception(f"Idea generation failed: {e}")
        raise InvocationFailedError(str(e) or repr(e)) from e
