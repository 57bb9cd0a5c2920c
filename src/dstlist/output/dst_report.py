"""Render DST record lists for the CLI."""

import json
from datetime import datetime
from typing import List, Optional, Sequence

from dstlist.models.dst import DaylightSavingTime, DstSpecialType, TimeZoneInfo


def render_json(records: Sequence[DaylightSavingTime]) -> str:
    """Render records as an indented JSON array."""
    return json.dumps([r.model_dump(mode="json") for r in records], indent=2, ensure_ascii=False)


def _zone(tz: Optional[TimeZoneInfo]) -> str:
    if tz is None:
        return "-"
    if tz.total_offset is None:
        return tz.abbreviation or "-"
    hours, rem = divmod(abs(tz.total_offset), 3600)
    sign = "-" if tz.total_offset < 0 else "+"
    offset = f"UTC{sign}{hours:02d}:{rem // 60:02d}"
    return f"{tz.abbreviation} ({offset})" if tz.abbreviation else offset


def _when(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value else "-"


def _special(record: DaylightSavingTime) -> str:
    if record.special == DstSpecialType.NO_DST:
        return "no DST"
    if record.special == DstSpecialType.DST_ALL_YEAR:
        return "DST all year"
    return ""


def render_text(records: Sequence[DaylightSavingTime], *, show_places: bool = False) -> str:
    """Render records as a fixed-width table, one row per entry."""
    if not records:
        return "No DST entries returned."

    lines: List[str] = [
        f"{'CC':<4} {'Country':<24} {'Standard':<18} {'DST':<18} {'Start':<17} {'End':<17} {'Note':<12}",
        "-" * 116,
    ]
    for record in records:
        lines.append(
            f"{record.country_code:<4} {record.country_name[:24]:<24} "
            f"{_zone(record.standard_timezone):<18} {_zone(record.dst_timezone):<18} "
            f"{_when(record.dst_start):<17} {_when(record.dst_end):<17} {_special(record):<12}".rstrip()
        )
        if show_places and record.region.locations:
            lines.append(f"     places: {', '.join(record.region.locations)}")
        for change in record.time_changes or []:
            lines.append(
                f"     change: {change.utc_time:%Y-%m-%d %H:%M} UTC -> offset {change.new_offset}s"
                + (f" ({change.new_timezone})" if change.new_timezone else "")
            )
    return "\n".join(lines)
