"""Argument assembly for service requests.

The assembled mapping is the only place where boolean options are turned
into the service's numeric wire flags.
"""

from datetime import datetime
from typing import Dict, Optional

from dstlist.auth import AuthenticationOptions
from dstlist.models.dst import DstFilter, DstQueryOptions
from dstlist.config.settings import ServiceSettings


def to_num(value: bool) -> str:
    """Encode a boolean as the service's "0"/"1" flag."""
    return "1" if value else "0"


def assemble_arguments(
    settings: ServiceSettings,
    options: DstQueryOptions,
    authentication: AuthenticationOptions,
    service_name: str,
    filters: Optional[DstFilter] = None,
    *,
    force_all_countries: bool = False,
    timestamp: Optional[datetime] = None,
) -> Dict[str, str]:
    """
    Build the ordered query arguments for one dstlist call.

    Args:
        settings: Shared service settings (language, version, format)
        options: Client query toggles
        authentication: Credentials rendered first in the mapping
        service_name: Service path, also part of the request signature
        filters: Optional country/year narrowing for this call
        force_all_countries: Send onlydst=0 for this call regardless of options
        timestamp: Signing time override (defaults to now)

    Returns:
        Mapping with unique keys in canonical order. ``options`` is never mutated.
    """
    only_dst = options.include_only_dst_countries
    if force_all_countries:
        only_dst = False

    args: Dict[str, str] = dict(authentication.to_arguments(service_name, timestamp))
    args["lang"] = settings.language
    args["timechanges"] = to_num(options.include_time_changes)
    args["onlydst"] = to_num(only_dst)
    args["listplaces"] = to_num(options.include_places_for_every_country)
    args["version"] = str(settings.version)
    args["out"] = settings.output_format
    args["verbosetime"] = str(settings.verbose_time)

    if filters is not None:
        if filters.country:
            args["country"] = filters.country
        if filters.year is not None:
            args["year"] = str(filters.year)

    return args
