"""
RequestContext management.
Use ContextVar to share the Lambda request ID with log formatting.
"""

from contextvars import ContextVar
from typing import Optional


# Context variable for the Lambda request ID (context.aws_request_id).
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def set_request_id(request_id: Optional[str]) -> Optional[str]:
    """
    Set the Request ID for the current invocation.

    Args:
        request_id: aws_request_id of the Lambda context, or None

    Returns:
        The Request ID that was set
    """
    _request_id_var.set(request_id)
    return request_id


def clear_request_id() -> None:
    """Clear the Request ID context."""
    _request_id_var.set(None)
