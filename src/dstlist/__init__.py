"""Client for the dstlist daylight saving time service."""

from dstlist.errors import (
    DstListError,
    InvalidArgument,
    MalformedResponse,
    ServiceError,
    TransportFailure,
)
from dstlist.models.dst import DaylightSavingTime, DstQueryOptions
from dstlist.services.dst_service import DSTService

__version__ = "0.1.0"

__all__ = [
    "DaylightSavingTime",
    "DSTService",
    "DstListError",
    "DstQueryOptions",
    "InvalidArgument",
    "MalformedResponse",
    "ServiceError",
    "TransportFailure",
]
