# lattice_events/models/vpc_lattice.py

"""
Pydantic models for the Amazon VPC Lattice Lambda event structure (version 2.0).

Reference: https://docs.aws.amazon.com/vpc-lattice/latest/ug/lambda-functions.html

Python attributes are snake_case; the wire uses camelCase aliases. Optional
fields the platform leaves out are None, never an empty string.
Use lattice_events.core.marshaling to decode and encode payloads.
"""

import base64
from http import HTTPStatus
from typing import Any, Dict, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ..core.codecs import (
    decode_headers,
    decode_http_method,
    decode_string_map,
    encode_headers,
    encode_http_method,
    pydantic_codec,
)
from ..core.exceptions import translate_validation_error
from .headers import HeaderMap
from .methods import HttpMethod

_validate_headers = pydantic_codec(decode_headers)
_validate_http_method = pydantic_codec(decode_http_method)
_validate_string_map = pydantic_codec(decode_string_map)


class LatticeModel(BaseModel):
    """Base model: camelCase on the wire, snake_case or camelCase on construction."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_alias=True,
        validate_by_name=True,
        arbitrary_types_allowed=True,
    )


class VpcLatticeRequestIdentity(LatticeModel):
    """Caller identity (IAM principal and/or mutual TLS certificate attributes)."""

    source_vpc_arn: Optional[StrictStr] = None
    type: Optional[StrictStr] = None
    principal: Optional[StrictStr] = None
    principal_org_id: Optional[StrictStr] = None
    session_name: Optional[StrictStr] = None
    x509_issuer_ou: Optional[StrictStr] = None
    x509_san_dns: Optional[StrictStr] = None
    x509_san_name_cn: Optional[StrictStr] = None
    x509_san_uri: Optional[StrictStr] = None
    x509_subject_cn: Optional[StrictStr] = None


class VpcLatticeRequestContext(LatticeModel):
    """VPC Lattice request context."""

    service_network_arn: Optional[StrictStr] = None
    service_arn: Optional[StrictStr] = None
    target_group_arn: Optional[StrictStr] = None
    identity: VpcLatticeRequestIdentity
    region: Optional[StrictStr] = None
    time_epoch: Optional[StrictStr] = None


class VpcLatticeRequest(LatticeModel):
    """
    VPC Lattice event (v2) received by a Lambda function.

    version is expected to be "2.0" but is carried through unchecked.
    When is_base64_encoded is set, body holds base64 text; see decoded_body().
    """

    version: Optional[StrictStr] = None
    path: Optional[StrictStr] = None
    http_method: HttpMethod
    headers: HeaderMap = Field(default_factory=HeaderMap)
    query_string_parameters: Dict[str, str] = Field(default_factory=dict)
    request_context: VpcLatticeRequestContext
    body: Optional[StrictStr] = None
    is_base64_encoded: StrictBool

    @field_validator("http_method", mode="before")
    @classmethod
    def validate_http_method(cls, value: Any) -> HttpMethod:
        return _validate_http_method(value)

    @field_validator("headers", mode="before")
    @classmethod
    def validate_headers(cls, value: Any) -> HeaderMap:
        return _validate_headers(value)

    @field_validator("query_string_parameters", mode="before")
    @classmethod
    def validate_query_string_parameters(cls, value: Any) -> Dict[str, str]:
        return _validate_string_map(value)

    @field_serializer("http_method")
    def serialize_http_method(self, value: HttpMethod) -> str:
        return encode_http_method(value)

    @field_serializer("headers")
    def serialize_headers(self, value: HeaderMap):
        return encode_headers(value)

    def decoded_body(self) -> Optional[bytes]:
        """Return the raw body bytes, base64-decoding when flagged."""
        if self.body is None:
            return None
        if self.is_base64_encoded:
            return base64.b64decode(self.body, validate=True)
        return self.body.encode("utf-8")


class VpcLatticeResponse(LatticeModel):
    """Response returned from the Lambda function to VPC Lattice."""

    is_base64_encoded: StrictBool
    status_code: StrictInt
    status_description: Optional[StrictStr] = None
    headers: HeaderMap = Field(default_factory=HeaderMap)
    body: Optional[StrictStr] = None

    @field_validator("headers", mode="before")
    @classmethod
    def validate_headers(cls, value: Any) -> HeaderMap:
        return _validate_headers(value)

    @field_serializer("headers")
    def serialize_headers(self, value: HeaderMap):
        return encode_headers(value)

    @classmethod
    def build(
        cls,
        status_code: int,
        body: Union[str, bytes, None] = None,
        headers: Union[HeaderMap, Dict[str, Any], None] = None,
        status_description: Optional[str] = None,
    ) -> "VpcLatticeResponse":
        """
        Build a response, choosing the body encoding.

        bytes that are not valid UTF-8 are base64 encoded and flagged.
        status_description defaults to "<code> <reason>" for known HTTP codes.
        Invalid input raises a LatticeEventError subclass.
        """
        is_base64 = False
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError:
                body = base64.b64encode(body).decode("ascii")
                is_base64 = True

        if status_description is None:
            status_description = default_status_description(status_code)

        try:
            return cls(
                is_base64_encoded=is_base64,
                status_code=status_code,
                status_description=status_description,
                headers=headers,
                body=body,
            )
        except ValidationError as e:
            raise translate_validation_error(e) from e


def default_status_description(status_code: int) -> Optional[str]:
    """Return e.g. "404 Not Found", or None for codes outside the HTTP registry."""
    try:
        status = HTTPStatus(status_code)
    except ValueError:
        return None
    return f"{status.value} {status.phrase}"
