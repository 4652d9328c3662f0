"""
Custom exception classes.

Represent errors raised while decoding VPC Lattice event payloads.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError


class LatticeEventError(Exception):
    """Base exception class for event decoding."""

    error_type = "lattice_event"

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        value: Any = None,
    ):
        self.errors = errors or []
        self.value = value
        super().__init__(message)


class SchemaError(LatticeEventError):
    """Raised when a required field is missing or has the wrong JSON type."""

    error_type = "schema"


class HeaderDecodeError(LatticeEventError):
    """Raised when a header value is neither a string nor an array of strings."""

    error_type = "header_decode"


class UnknownMethodError(LatticeEventError):
    """Raised when the HTTP method token is not a recognized method."""

    error_type = "unknown_method"

    @property
    def token(self) -> Any:
        return self.value


class QueryParamTypeError(LatticeEventError):
    """Raised when a query string parameter value is not a string."""

    error_type = "query_param_type"


ERRORS_BY_TYPE = {
    cls.error_type: cls
    for cls in (SchemaError, HeaderDecodeError, UnknownMethodError, QueryParamTypeError)
}


def _format_location(loc) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def translate_validation_error(exc: ValidationError) -> LatticeEventError:
    """
    Map a ValidationError onto the most specific LatticeEventError.

    The first error tagged by a field codec decides the class; anything else
    (missing fields, wrong JSON types, malformed JSON) is a SchemaError.
    """
    errors = exc.errors(include_url=False)
    for error in errors:
        cls = ERRORS_BY_TYPE.get(error["type"])
        if cls is not None:
            message = f"{_format_location(error['loc'])}: {error['msg']}"
            value = error.get("ctx", {}).get("value", error.get("input"))
            return cls(message, errors, value=value)

    first = errors[0] if errors else {"loc": (), "msg": str(exc)}
    message = f"{_format_location(first['loc'])}: {first['msg']}"
    if len(errors) > 1:
        message += f" (and {len(errors) - 1} more)"
    return SchemaError(message, errors, value=first.get("input"))
