"""Pydantic models for dstlist records and query configuration."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class DstSpecialType(str, Enum):
    """Special DST status reported for an entry."""

    NOT_SPECIFIED = "notspecified"
    NO_DST = "nodst"
    DST_ALL_YEAR = "allyear"


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Region(BaseModel):
    """Country/timezone region an entry applies to."""

    model_config = ConfigDict(frozen=True)

    country: Country
    description: Optional[str] = None
    biggest_place: Optional[str] = None
    locations: Optional[Tuple[str, ...]] = None  # Only when place listing was requested

    @field_validator("locations")
    @classmethod
    def _empty_locations_are_absent(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        if not value:
            return None
        return tuple(value)


class TimeZoneInfo(BaseModel):
    """A timezone as reported for one side of a DST transition. Offsets are seconds."""

    model_config = ConfigDict(frozen=True)

    abbreviation: Optional[str] = None
    name: Optional[str] = None
    basic_offset: Optional[int] = None
    dst_offset: Optional[int] = None

    @computed_field
    @property
    def total_offset(self) -> Optional[int]:
        if self.basic_offset is None:
            return None
        return self.basic_offset + (self.dst_offset or 0)


class TimeChange(BaseModel):
    """One UTC-offset change within the queried year."""

    model_config = ConfigDict(frozen=True)

    new_dst_offset: Optional[int] = None
    new_timezone: Optional[str] = None
    new_offset: int
    utc_time: datetime
    old_local_time: Optional[datetime] = None
    new_local_time: Optional[datetime] = None

    @field_validator("utc_time")
    @classmethod
    def _utc_time_is_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class DaylightSavingTime(BaseModel):
    """DST status of one country/timezone for the queried year(s)."""

    model_config = ConfigDict(frozen=True)

    region: Region
    standard_timezone: Optional[TimeZoneInfo] = None
    dst_timezone: Optional[TimeZoneInfo] = None
    special: DstSpecialType = DstSpecialType.NOT_SPECIFIED
    dst_start: Optional[datetime] = None
    dst_end: Optional[datetime] = None
    time_changes: Optional[Tuple[TimeChange, ...]] = None  # Only when time-change listing was requested

    @field_validator("time_changes")
    @classmethod
    def _order_time_changes(cls, value: Optional[Tuple[TimeChange, ...]]) -> Optional[Tuple[TimeChange, ...]]:
        if value is None:
            return None
        return tuple(sorted(value, key=lambda change: change.utc_time))

    @property
    def country_code(self) -> str:
        return self.region.country.id

    @property
    def country_name(self) -> str:
        return self.region.country.name

    @property
    def observes_dst(self) -> bool:
        if self.special == DstSpecialType.NO_DST:
            return False
        if self.special == DstSpecialType.DST_ALL_YEAR:
            return True
        return self.dst_start is not None or self.dst_end is not None


class DstQueryOptions(BaseModel):
    """Per-client query toggles. Mutable; validated on assignment."""

    model_config = ConfigDict(validate_assignment=True)

    include_time_changes: bool = Field(default=False, description="Add time changes during the year to each entry")
    include_only_dst_countries: bool = Field(default=True, description="Suppress countries not observing DST")
    include_places_for_every_country: bool = Field(default=True, description="List places belonging to each entry")


class DstFilter(BaseModel):
    """Per-call narrowing of a DST query. Absent parts are None."""

    model_config = ConfigDict(frozen=True)

    country: Optional[str] = None
    year: Optional[int] = None
