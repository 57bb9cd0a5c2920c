import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from dstlist.config.settings import ServiceSettings
from dstlist.models.dst import DstQueryOptions

DEFAULT_CONFIG_PATH = Path("dstlist.config.yaml")

ACCESS_KEY_ENV = "DSTLIST_ACCESS_KEY"
SECRET_KEY_ENV = "DSTLIST_SECRET_KEY"


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load client configuration from YAML file.

    Args:
        path: Optional path to the config file. Defaults to dstlist.config.yaml

    Returns:
        Dictionary with configuration (empty if the file is empty)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the document is not a mapping
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    for section in ("credentials", "service", "dst"):
        if section in config and not isinstance(config[section], dict):
            raise ValueError(f"Config section '{section}' must be a dictionary")

    return config


def resolve_credentials(config: Optional[Dict[str, Any]] = None) -> Tuple[str, str]:
    """
    Resolve access and secret key. Environment variables win over the file.

    Raises:
        ValueError: If either key is missing
    """
    credentials = (config or {}).get("credentials") or {}
    access_key = os.environ.get(ACCESS_KEY_ENV) or credentials.get("access_key")
    secret_key = os.environ.get(SECRET_KEY_ENV) or credentials.get("secret_key")

    missing = []
    if not access_key:
        missing.append(f"credentials.access_key / {ACCESS_KEY_ENV}")
    if not secret_key:
        missing.append(f"credentials.secret_key / {SECRET_KEY_ENV}")
    if missing:
        raise ValueError(f"Missing credentials: {', '.join(missing)}")

    return str(access_key), str(secret_key)


def build_service_settings(config: Optional[Dict[str, Any]] = None) -> ServiceSettings:
    """Build shared service settings from the 'service' section (defaults for absent keys)."""
    section = (config or {}).get("service") or {}
    return ServiceSettings(**section)


def build_query_options(config: Optional[Dict[str, Any]] = None) -> DstQueryOptions:
    """
    Build DST query toggles from the 'dst' section.

    Recognised keys: time_changes, only_dst_countries, list_places.
    """
    section = (config or {}).get("dst") or {}
    values: Dict[str, Any] = {}
    if "time_changes" in section:
        values["include_time_changes"] = section["time_changes"]
    if "only_dst_countries" in section:
        values["include_only_dst_countries"] = section["only_dst_countries"]
    if "list_places" in section:
        values["include_places_for_every_country"] = section["list_places"]
    return DstQueryOptions(**values)
