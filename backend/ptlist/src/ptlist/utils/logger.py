"""
Loguru logging configuration.

Driven by ``Settings`` (``PTLIST__`` prefix, see ``ptlist.config``):
- log_json: true → one JSON record per line on stdout; false → colored text on stderr
- log_level: minimum level of that sink
- app_env: "dev" turns on extended tracebacks with variable values

Stdlib logging (uvicorn, starlette) is routed into loguru by InterceptHandler,
and every record carries app/env/service in ``extra``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

from ptlist.config import Settings, settings as default_settings


PRETTY_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller depth outside logging module
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _sink(settings: Settings) -> dict:
    debug = settings.app_env == "dev"
    sink = {
        "level": settings.log_level.strip().upper(),
        "backtrace": debug,
        "diagnose": debug,
    }
    if settings.log_json:
        sink.update(sink=sys.stdout, serialize=True)
    else:
        sink.update(sink=sys.stderr, colorize=True, format=PRETTY_FORMAT)
    return sink


def configure_logging(app_name: str, *, service: Optional[str] = None, settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    context = {"app": app_name, "env": settings.app_env}
    if service:
        context["service"] = service

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger().setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    def _patch(record: dict) -> None:
        for key, value in context.items():
            record["extra"].setdefault(key, value)
        record["extra"]["severity"] = record["level"].no

    logger.configure(handlers=[_sink(settings)], extra=context, patcher=_patch)
    logger.info("Logging configured")
