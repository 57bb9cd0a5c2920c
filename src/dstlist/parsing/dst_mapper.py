"""Map dstlist XML payloads to DaylightSavingTime records."""

import xml.etree.ElementTree as ET
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from dstlist.errors import MalformedResponse
from dstlist.models.dst import (
    Country,
    DaylightSavingTime,
    DstSpecialType,
    Region,
    TimeChange,
    TimeZoneInfo,
)
from dstlist.utils.time import parse_service_time
from dstlist.utils.xml import parse_document

DST_ENTRY_TAG = "dstentry"


def _text(node: Optional[ET.Element]) -> Optional[str]:
    if node is None or node.text is None:
        return None
    value = node.text.strip()
    return value or None


def _int_attr(node: ET.Element, name: str) -> Optional[int]:
    raw = node.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise MalformedResponse(f"Attribute '{name}' of <{node.tag}> is not an integer: {raw!r}") from e


def _time_value(node: Optional[ET.Element]) -> Optional[datetime]:
    """Read a time element in plain (``<dststart>ISO</dststart>``) or verbose (``<iso>`` child) form."""
    if node is None:
        return None
    iso = node.find("iso")
    raw = _text(iso) if iso is not None else _text(node)
    if raw is None:
        return None
    try:
        return parse_service_time(raw)
    except ValueError as e:
        raise MalformedResponse(f"Invalid timestamp in <{node.tag}>: {raw!r}") from e


def _time_attr(node: ET.Element, name: str) -> Optional[datetime]:
    raw = node.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return parse_service_time(raw)
    except ValueError as e:
        raise MalformedResponse(f"Invalid timestamp in '{name}' of <{node.tag}>: {raw!r}") from e


def _map_locations(node: Optional[ET.Element]) -> Optional[List[str]]:
    if node is None:
        return None
    children = [_text(child) for child in node if child.tag == "location"]
    if children:
        names = [name for name in children if name]
    else:
        names = [part.strip() for part in (node.text or "").split(",") if part.strip()]
    return names or None


def _map_region(entry: ET.Element) -> Region:
    region = entry.find("region")
    if region is None:
        raise MalformedResponse("<dstentry> has no <region> element")
    country = region.find("country")
    if country is None:
        raise MalformedResponse("<region> has no <country> element")

    country_id = country.get("id") or region.get("id")
    country_name = _text(country)
    if not country_id or not country_name:
        raise MalformedResponse("<country> requires an id attribute and a name")

    return Region(
        country=Country(id=country_id, name=country_name),
        description=_text(region.find("desc")),
        biggest_place=_text(region.find("biggestplace")),
        locations=_map_locations(region.find("locations")),
    )


def _map_timezone(node: Optional[ET.Element]) -> Optional[TimeZoneInfo]:
    if node is None:
        return None
    return TimeZoneInfo(
        abbreviation=_text(node.find("zoneabb")),
        name=_text(node.find("zonename")),
        basic_offset=_int_attr(node, "offset"),
        dst_offset=_int_attr(node, "dstoffset"),
    )


def _map_special(entry: ET.Element) -> DstSpecialType:
    node = entry.find("special")
    if node is None:
        return DstSpecialType.NOT_SPECIFIED
    raw = (node.get("type") or _text(node) or "").strip().lower()
    try:
        return DstSpecialType(raw)
    except ValueError:
        return DstSpecialType.NOT_SPECIFIED


def _map_time_changes(entry: ET.Element) -> Optional[List[TimeChange]]:
    node = entry.find("timechanges")
    if node is None:
        return None

    changes: List[TimeChange] = []
    for change in node.findall("change"):
        new_offset = _int_attr(change, "newoffset")
        utc_time = _time_attr(change, "utctime")
        if new_offset is None or utc_time is None:
            raise MalformedResponse("<change> requires newoffset and utctime attributes")
        changes.append(
            TimeChange(
                new_dst_offset=_int_attr(change, "newdst"),
                new_timezone=change.get("newzone") or None,
                new_offset=new_offset,
                utc_time=utc_time,
                old_local_time=_time_attr(change, "oldlocaltime"),
                new_local_time=_time_attr(change, "newlocaltime"),
            )
        )
    return changes


def map_dst_entry(entry: ET.Element) -> DaylightSavingTime:
    """Convert one ``<dstentry>`` element into a record."""
    try:
        return DaylightSavingTime(
            region=_map_region(entry),
            standard_timezone=_map_timezone(entry.find("stdtimezone")),
            dst_timezone=_map_timezone(entry.find("dsttimezone")),
            special=_map_special(entry),
            dst_start=_time_value(entry.find("dststart")),
            dst_end=_time_value(entry.find("dstend")),
            time_changes=_map_time_changes(entry),
        )
    except ValidationError as e:
        raise MalformedResponse(f"Invalid <dstentry>: {e}") from e


def map_dst_list(text: str) -> List[DaylightSavingTime]:
    """
    Parse a validated payload and map every ``<dstentry>`` in document order.

    Raises:
        MalformedResponse: Markup is not well-formed or an entry lacks required structure
    """
    root = parse_document(text)
    return [map_dst_entry(entry) for entry in root.iter(DST_ENTRY_TAG)]
