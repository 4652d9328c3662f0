"""
Where: lattice_events/core/codecs.py
What: Wire codecs for headers, HTTP methods and query string parameters.
Why: These fields have encodings a plain string-keyed JSON object cannot express.
"""

import functools
from typing import Any, Callable, Dict, List, Union

from pydantic_core import PydanticCustomError

from ..models.headers import HeaderMap
from ..models.methods import HttpMethod
from .exceptions import (
    HeaderDecodeError,
    LatticeEventError,
    QueryParamTypeError,
    SchemaError,
    UnknownMethodError,
)

_METHODS = {method.value: method for method in HttpMethod}


# ===========================================
# Headers
# ===========================================


def decode_headers(raw: Any) -> HeaderMap:
    """
    Decode a wire header object into a HeaderMap.

    Each value is either a single string or an array of strings; arrays add
    every listed value in order. A missing or null object yields an empty map.
    """
    headers = HeaderMap()
    if raw is None:
        return headers
    if isinstance(raw, HeaderMap):
        return raw.copy()
    if not isinstance(raw, dict):
        raise HeaderDecodeError(
            f"Headers must be an object, got {type(raw).__name__}", value=raw
        )

    for name, value in raw.items():
        if isinstance(value, str):
            headers.add(name, value)
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            for v in value:
                headers.add(name, v)
        else:
            raise HeaderDecodeError(
                f"Header {name!r} must be a string or an array of strings", value=value
            )
    return headers


def encode_headers(headers: HeaderMap) -> Dict[str, Union[str, List[str]]]:
    """
    Encode a HeaderMap for the wire.

    A name with one value is emitted as a string, a name with several values
    as an array holding all of them.
    """
    encoded: Dict[str, Union[str, List[str]]] = {}
    for name in headers.keys():
        values = headers.get_all(name)
        encoded[name] = values[0] if len(values) == 1 else values
    return encoded


# ===========================================
# HTTP method
# ===========================================


def decode_http_method(token: Any) -> HttpMethod:
    """Match token case-sensitively against the canonical uppercase methods."""
    if isinstance(token, HttpMethod):
        return token
    if not isinstance(token, str):
        raise SchemaError(
            f"HTTP method must be a string, got {type(token).__name__}", value=token
        )
    try:
        return _METHODS[token]
    except KeyError:
        raise UnknownMethodError(f"Unknown HTTP method: {token!r}", value=token) from None


def encode_http_method(method: HttpMethod) -> str:
    return method.value


# ===========================================
# String maps
# ===========================================


def decode_string_map(raw: Any) -> Dict[str, str]:
    """Decode a string-to-string object; a missing or null object is empty."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SchemaError(f"Expected an object, got {type(raw).__name__}", value=raw)

    for key, value in raw.items():
        if not isinstance(value, str):
            raise QueryParamTypeError(
                f"Value for {key!r} must be a string, got {type(value).__name__}",
                value=value,
            )
    return dict(raw)


# ===========================================
# Pydantic adapter
# ===========================================


def pydantic_codec(decoder: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Adapt a decoder for use as a Pydantic "before" validator.

    Codec errors are re-raised as PydanticCustomError tagged with the error
    class's error_type so the marshaling layer can restore the class. The
    offending value travels in the error context as "value".
    """

    @functools.wraps(decoder)
    def validate(value: Any) -> Any:
        try:
            return decoder(value)
        except LatticeEventError as e:
            raise PydanticCustomError(
                e.error_type, "{reason}", {"reason": str(e), "value": e.value}
            ) from e

    return validate
