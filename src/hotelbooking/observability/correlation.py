"""Per-request correlation id shared by the HTTP middleware and JsonFormatter.

The id lives in a ContextVar, so sync endpoints running in Starlette's
threadpool see the value set by the middleware for their own request.
"""

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Empty string means "outside a request": log lines then omit correlationId.
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Fresh id for a request that arrived without the header."""
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    return correlation_id_var.get()


def set_correlation_id(cid: str) -> Token[str]:
    """Bind *cid* to the current context; pass the token to reset_correlation_id."""
    return correlation_id_var.set(cid)


def reset_correlation_id(token: Token[str]) -> None:
    correlation_id_var.reset(token)
