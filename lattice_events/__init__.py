"""
VPC Lattice Lambda event schema and codec.
"""

from .models import (
    HeaderMap,
    HttpMethod,
    VpcLatticeRequest,
    VpcLatticeRequestContext,
    VpcLatticeRequestIdentity,
    VpcLatticeResponse,
)
from .core.exceptions import (
    HeaderDecodeError,
    LatticeEventError,
    QueryParamTypeError,
    SchemaError,
    UnknownMethodError,
)
from .core.marshaling import (
    decode,
    decode_request,
    decode_response,
    encode,
    encode_request,
    encode_response,
)
from .core.handler import vpc_lattice_handler

__all__ = [
    "HeaderMap",
    "HttpMethod",
    "VpcLatticeRequest",
    "VpcLatticeRequestContext",
    "VpcLatticeRequestIdentity",
    "VpcLatticeResponse",
    "HeaderDecodeError",
    "LatticeEventError",
    "QueryParamTypeError",
    "SchemaError",
    "UnknownMethodError",
    "decode",
    "decode_request",
    "decode_response",
    "encode",
    "encode_request",
    "encode_response",
    "vpc_lattice_handler",
]
