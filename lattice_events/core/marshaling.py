"""
Payload marshaling.

Decodes VPC Lattice payloads into models and encodes models back to
JSON-compatible dicts. Pydantic validation errors are translated into the
LatticeEventError taxonomy; nothing here logs.
"""

from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..models.vpc_lattice import VpcLatticeRequest, VpcLatticeResponse
from .exceptions import translate_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = Union[Dict[str, Any], str, bytes, bytearray]


def decode(model_cls: Type[ModelT], payload: Payload) -> ModelT:
    """
    Decode a parsed JSON object or raw JSON text into model_cls.

    Only the camelCase wire names are accepted here; snake_case attribute
    names are for constructing models in Python code.

    Raises:
        SchemaError, HeaderDecodeError, UnknownMethodError, QueryParamTypeError
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model_cls.model_validate_json(payload, by_alias=True, by_name=False)
        return model_cls.model_validate(payload, by_alias=True, by_name=False)
    except ValidationError as e:
        raise translate_validation_error(e) from e


def encode(model: BaseModel) -> Dict[str, Any]:
    """Encode a model to a camelCase dict, omitting absent optional fields."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode_request(payload: Payload) -> VpcLatticeRequest:
    return decode(VpcLatticeRequest, payload)


def decode_response(payload: Payload) -> VpcLatticeResponse:
    return decode(VpcLatticeResponse, payload)


def encode_request(request: VpcLatticeRequest) -> Dict[str, Any]:
    return encode(request)


def encode_response(response: VpcLatticeResponse) -> Dict[str, Any]:
    return encode(response)
