"""Credential parameters for authenticated service requests."""

import base64
import hashlib
import hmac
from datetime import datetime
from typing import Dict, Optional

from dstlist.errors import InvalidArgument
from dstlist.utils.time import utc_timestamp


class AuthenticationOptions:
    """
    Access key credentials, rendered as request arguments.

    Signed mode (the default) never sends the secret key: it sends a
    timestamp and an HMAC-SHA1 signature over access key, service name and
    timestamp. Unsigned mode sends the secret key in clear and should only be
    used over HTTPS.
    """

    def __init__(self, access_key: str, secret_key: str, *, signed: bool = True):
        if not access_key or not secret_key:
            raise InvalidArgument("Both access key and secret key are required")
        self.access_key = access_key
        self.secret_key = secret_key
        self.signed = signed

    def sign(self, service_name: str, timestamp: str) -> str:
        message = f"{self.access_key}{service_name}{timestamp}".encode("utf-8")
        digest = hmac.new(self.secret_key.encode("utf-8"), message, hashlib.sha1).digest()
        return base64.b64encode(digest).decode("ascii")

    def to_arguments(self, service_name: str, timestamp: Optional[datetime] = None) -> Dict[str, str]:
        if not self.signed:
            return {"accesskey": self.access_key, "secretkey": self.secret_key}

        ts = utc_timestamp(timestamp)
        return {
            "accesskey": self.access_key,
            "timestamp": ts,
            "signature": self.sign(service_name, ts),
        }

    def __repr__(self) -> str:
        return f"AuthenticationOptions(access_key={self.access_key!r}, signed={self.signed})"
