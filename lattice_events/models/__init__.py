"""
Data model definitions package.

Aggregates the VPC Lattice event models for use in other modules.
"""

from .headers import HeaderMap
from .methods import HttpMethod
from .vpc_lattice import (
    VpcLatticeRequest,
    VpcLatticeRequestContext,
    VpcLatticeRequestIdentity,
    VpcLatticeResponse,
)

__all__ = [
    "HeaderMap",
    "HttpMethod",
    "VpcLatticeRequest",
    "VpcLatticeRequestContext",
    "VpcLatticeRequestIdentity",
    "VpcLatticeResponse",
]
