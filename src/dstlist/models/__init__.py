from .dst import (
    Country,
    DaylightSavingTime,
    DstFilter,
    DstQueryOptions,
    DstSpecialType,
    Region,
    TimeChange,
    TimeZoneInfo,
)

__all__ = [
    "Country",
    "DaylightSavingTime",
    "DstFilter",
    "DstQueryOptions",
    "DstSpecialType",
    "Region",
    "TimeChange",
    "TimeZoneInfo",
]
