"""HTTP transport for service requests."""

from typing import Optional

import requests

from dstlist.errors import TransportFailure
from dstlist.utils.logging import get_logger
from dstlist.utils.uri import redact_url

logger = get_logger(__name__)


class HttpTransport:
    """
    Blocking GET transport backed by a ``requests.Session``.

    Use as a context manager; the session is closed on every exit path.

    Usage:
        with HttpTransport(timeout_seconds=20) as transport:
            text = transport.get_text(url)
    """

    def __init__(self, timeout_seconds: float = 20.0, user_agent: str = "dstlist/0.1"):
        self.timeout = timeout_seconds
        self.user_agent = user_agent
        self._session: Optional[requests.Session] = None

    def __enter__(self) -> "HttpTransport":
        self._session = requests.Session()
        self._session.headers.update(self._get_headers())
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _get_headers(self):
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/xml, text/xml;q=0.9, */*;q=0.1",
        }

    def get_text(self, url: str) -> str:
        """
        Fetch ``url`` and return the body decoded as UTF-8.

        Raises:
            TransportFailure: Connection problems, timeouts and non-2xx statuses
        """
        if self._session is None:
            raise RuntimeError("HttpTransport must be entered before use")

        logger.debug(f"GET {redact_url(url)}")
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportFailure(f"Request to service failed: {e}", url=redact_url(url)) from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportFailure(
                f"Service returned HTTP {response.status_code}",
                url=redact_url(url),
                status_code=response.status_code,
            ) from e

        response.encoding = "utf-8"
        logger.debug(f"Received {len(response.content or b'')} bytes (status {response.status_code})")
        return response.text
