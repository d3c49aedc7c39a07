"""
Structured logging for staffdesk.

Log lines are rendered by structlog on top of stdlib logging. Request-scoped
values (request id, authenticated user) live in structlog's contextvars and
are merged into every event emitted while the request is being served.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    merge_contextvars,
    unbind_contextvars,
)

REQUEST_ID_KEY = "request_id"
USER_ID_KEY = "user_id"


def _resolve_level(debug: bool, log_level: str | None) -> int:
    if log_level:
        level = logging.getLevelName(log_level.upper())
        if isinstance(level, int):
            return level
        return logging.INFO
    return logging.DEBUG if debug else logging.INFO


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Render colored console output instead of JSON lines.
        log_level: Stdlib level name; defaults to DEBUG when ``debug`` is set, else INFO.
    """
    logging.basicConfig(
        level=_resolve_level(debug, log_level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Short random id used to correlate the log lines of one request."""
    return secrets.token_urlsafe(9)


def set_request_context(request_id: str | None = None, user_id: str | None = None) -> str:
    """Start a fresh logging context for a request and return its request id."""
    clear_contextvars()
    request_id = request_id or generate_request_id()
    bind_contextvars(**{REQUEST_ID_KEY: request_id})
    if user_id is not None:
        bind_contextvars(**{USER_ID_KEY: user_id})
    return request_id


def bind_user_id(user_id: str | None) -> None:
    """Attach the authenticated user to subsequent log lines of this request."""
    if user_id is None:
        unbind_contextvars(USER_ID_KEY)
    else:
        bind_contextvars(**{USER_ID_KEY: user_id})


def clear_request_context() -> None:
    clear_contextvars()
