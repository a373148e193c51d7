"""
FastAPI Application Entry Point

Bootstraps the FastAPI app, logging, middleware, error handling and routes.
Run with ``ptlist <port>`` or ``python -m ptlist.main <port>``.
"""

import argparse
from typing import Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from ptlist.utils.logger import configure_logging
from ptlist.utils.logging_middleware import RequestLoggingMiddleware
from ptlist.routes.api import router as api_router
from ptlist.config import settings
from ptlist.errors import ApplicationError
from ptlist.models.timestamp_models import ErrorBody, ErrorResponse

# Configure logging early
configure_logging(app_name="ptlist", service="api")

app = FastAPI(
    title="ptlist app",
    description="An API listing the timestamps of a periodic task between two invocation points",
    version="1.0.0",
)



def install_cors(app: FastAPI, origins: Sequence[str]) -> None:
    """Allow cross-origin GETs from ``origins``; no CORS headers at all when empty."""
    if origins:
        app.add_middleware(CORSMiddleware, allow_origins=list(origins), allow_methods=["GET"])


# Middleware
app.add_middleware(RequestLoggingMiddleware)
install_cors(app, settings.cors_origins)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    logger.warning(f"  ! [API] {request.url.path} rejected: {exc.message}")
    resp = ErrorResponse(
        status=exc.status_code,
        body=ErrorBody(status=exc.status_code, code=exc.code, desc=exc.message),
    )
    return JSONResponse(status_code=exc.status_code, content=resp.model_dump())


# Routers
app.include_router(api_router)


@app.get("/")
def root():
    return {"status": "ok", "service": "ptlist", "env": settings.app_env}


@app.get("/health")
def health():
    return {"status": "healthy"}


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def parse_port(argv: Optional[Sequence[str]] = None) -> int:
    """
    Read the listen port from the command line.

    A missing or invalid port prints usage and exits the process.
    """
    parser = argparse.ArgumentParser(prog="ptlist", description="Serve the periodic timestamp list API")
    parser.add_argument("port", type=_port, help="Port to listen to")
    args = parser.parse_args(argv)
    return args.port


def run(argv: Optional[Sequence[str]] = None) -> None:
    import uvicorn

    port = parse_port(argv)
    logger.info(f"Listening on port {port}")
    uvicorn.run(app, host=settings.api_host, port=port, log_config=None)


if __name__ == "__main__":
    run()
