"""
HTTP middleware: per-request logging context and access logs.
"""

import json
import re
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REQUEST_ID_HEADER = "X-Request-ID"
REDACTED = "[REDACTED]"

# Substrings that mark a query parameter as sensitive.
SENSITIVE_KEYS = frozenset(
    {"password", "token", "secret", "auth", "key", "jwt", "session", "cookie", "credential"}
)
# GraphQL GET parameters that carry the document or its inputs.
GRAPHQL_PAYLOAD_PARAMS = ("query", "variables", "extensions")

OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose name contains a sensitive keyword."""
    return {
        key: REDACTED if any(s in key.lower() for s in SENSITIVE_KEYS) else value
        for key, value in params.items()
    }


def _operation_from_payload(data: dict[str, Any]) -> str | None:
    """Name of the GraphQL operation in a request payload.

    Mutations are prefixed with ``mutation:``; documents without a name yield
    ``unnamed_operation`` and introspection yields ``__introspection``.
    """
    name = data.get("operationName")
    if isinstance(name, str) and name:
        return name

    document = data.get("query")
    if not isinstance(document, str) or not document:
        return None
    if "__schema" in document or "IntrospectionQuery" in document:
        return "__introspection"

    match = OPERATION_RE.search(document)
    if match is None:
        return "unnamed_operation"
    kind, operation = match.groups()
    return f"mutation:{operation}" if kind == "mutation" else operation


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Best-effort GraphQL operation name for logging; never the payload itself."""
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        return _operation_from_payload(dict(request.query_params))
    if request.method != "POST":
        return None

    body = await request.body()
    if not body:
        return None
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return _operation_from_payload(data) if isinstance(data, dict) else None


def _query_params_for_log(request: Request) -> dict[str, Any] | None:
    if not request.query_params:
        return None
    params = sanitize_query_params(dict(request.query_params))
    if request.url.path == GRAPHQL_PATH:
        for name in GRAPHQL_PAYLOAD_PARAMS:
            if name in params:
                params[name] = REDACTED
    return params


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Binds a request id for the duration of a request and logs its outcome."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = set_request_context(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()
        operation = await extract_graphql_operation_name(request)

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            query_params=_query_params_for_log(request),
            graphql_operation=operation,
            user_agent=request.headers.get("user-agent"),
            remote_addr=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                graphql_operation=operation,
                error=str(e),
            )
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                graphql_operation=operation,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            return response
        finally:
            clear_request_context()
