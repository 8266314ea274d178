"""
Service Request Relay API
FastAPI application that relays service request form submissions by email.
"""

import logging
import os
from typing import List

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from request_relay.errors import MethodNotAllowedError, RelayError
from request_relay.routers import service_request

# Configure logging to output to console
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Service Request Relay",
    description="Relays countertop service request submissions to the service team by email",
    version="0.1.0",
)


def get_cors_origins() -> List[str]:
    """
    Build the list of allowed CORS origins.

    Always includes the local form dev server (http://localhost:3000).
    Additional origins are read from the CORS_ORIGINS environment variable
    as a comma-separated list, e.g.:
        CORS_ORIGINS=https://sccountertops.ca,https://www.sccountertops.ca

    Duplicates are removed while preserving order.
    """
    origins: List[str] = ["http://localhost:3000"]

    cors_env = os.getenv("CORS_ORIGINS", "").strip()
    for origin in cors_env.split(","):
        origin = origin.strip()
        if origin and origin not in origins:
            origins.append(origin)

    return origins


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["POST"],
    allow_headers=["*"],
)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Render RelayError subclasses as {"error": <message>}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.msg})


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """
    Render routing 405s (methods the route does not list, such as TRACE)
    like MethodNotAllowedError. Other HTTP errors keep FastAPI's default body.
    """
    if exc.status_code == 405:
        return JSONResponse(
            status_code=405,
            content={"error": MethodNotAllowedError().msg},
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


app.include_router(
    service_request.router,
    prefix="/api/service-request",
    tags=["service-request"],
)


@app.get("/")
async def root():
    return {"message": "Service Request Relay", "version": "0.1.0"}


@app.get("/health")
async def health():
    return {"status": "ok"}
