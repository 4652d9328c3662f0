"""
HTTP method enumeration.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """Closed set of HTTP method tokens accepted on the wire."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value
