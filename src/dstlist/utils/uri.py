"""Query string and service URL assembly."""

from typing import Mapping
from urllib.parse import urlencode


def build_query(arguments: Mapping[str, str]) -> str:
    """URL-encode arguments, keeping their insertion order."""
    return urlencode(list(arguments.items()))


def build_service_url(entry_point: str, service_name: str, arguments: Mapping[str, str]) -> str:
    """
    Join entry point, service name and encoded arguments into a request URL.

    Example:
        >>> build_service_url("https://api.xmltime.com/", "dstlist", {"lang": "en"})
        'https://api.xmltime.com/dstlist?lang=en'
    """
    base = entry_point if entry_point.endswith("/") else entry_point + "/"
    query = build_query(arguments)
    url = base + service_name.lstrip("/")
    return f"{url}?{query}" if query else url


def redact_url(url: str, keys: tuple[str, ...] = ("secretkey", "signature")) -> str:
    """Mask credential values in a request URL before it is logged."""
    if "?" not in url:
        return url
    base, query = url.split("?", 1)
    parts = []
    for pair in query.split("&"):
        name = pair.split("=", 1)[0]
        parts.append(f"{name}=***" if name in keys else pair)
    return f"{base}?{'&'.join(parts)}"
