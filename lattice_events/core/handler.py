"""
Lambda handler decorator for VPC Lattice targets.

Decodes the inbound event, passes the typed request to the handler and
encodes whatever response it returns.
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional, Union

from ..models.vpc_lattice import VpcLatticeRequest, VpcLatticeResponse
from .config import LatticeConfig
from .config import config as default_config
from .exceptions import LatticeEventError
from .marshaling import decode_request, decode_response, encode_response
from .request_context import clear_request_id, set_request_id

logger = logging.getLogger("lattice_events.handler")

HandlerResult = Union[VpcLatticeResponse, Dict[str, Any]]


def bad_request_response(exc: LatticeEventError) -> VpcLatticeResponse:
    """Build the 400 response returned for undecodable events."""
    return VpcLatticeResponse.build(
        400,
        body=str(exc),
        headers={"Content-Type": "text/plain; charset=utf-8"},
    )


def _coerce_response(result: Any) -> VpcLatticeResponse:
    if isinstance(result, VpcLatticeResponse):
        return result
    if isinstance(result, dict):
        return decode_response(result)
    raise TypeError(
        f"Handler must return VpcLatticeResponse or dict, got {type(result).__name__}"
    )


def vpc_lattice_handler(
    func: Optional[Callable[[VpcLatticeRequest, Any], HandlerResult]] = None,
    *,
    config: Optional[LatticeConfig] = None,
):
    """
    Decorator turning func(request, context) into a Lambda entry point.

    Usage:
        @vpc_lattice_handler
        def lambda_handler(request, context):
            return VpcLatticeResponse.build(200, body="hello")

    Decode errors are logged and re-raised, unless BAD_REQUEST_ON_DECODE_ERROR
    is enabled, in which case a 400 response is returned.
    A dict returned by func is validated as a response before encoding.
    """

    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(event, context):
            settings = config or default_config
            set_request_id(getattr(context, "aws_request_id", None))
            try:
                try:
                    request = decode_request(event)
                except LatticeEventError as e:
                    logger.warning(
                        f"Failed to decode VPC Lattice event: {e}",
                        extra={"error_type": e.error_type},
                    )
                    if settings.BAD_REQUEST_ON_DECODE_ERROR:
                        return encode_response(bad_request_response(e))
                    raise

                logger.debug(
                    "Decoded VPC Lattice event",
                    extra={"http_method": request.http_method.value, "path": request.path},
                )
                response = _coerce_response(fn(request, context))
                return encode_response(response)
            finally:
                clear_request_id()

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
