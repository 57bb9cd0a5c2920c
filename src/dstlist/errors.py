"""Exception taxonomy for the dstlist client.

Every failure raised by a retrieval call is one of the four subclasses of
``DstListError``. Nothing is retried or suppressed internally.
"""

from typing import Iterable, Optional


class DstListError(Exception):
    """Base class for all dstlist client failures."""


class InvalidArgument(DstListError, ValueError):
    """A caller-supplied filter or credential is missing or invalid.

    Raised before any network activity.
    """


class TransportFailure(DstListError):
    """The service could not be reached, or answered with a non-2xx status."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ServiceError(DstListError):
    """The service answered, but the payload reports an application error."""

    def __init__(self, messages: Iterable[str], *, code: Optional[str] = None):
        self.messages = [m for m in messages if m] or ["Unknown service error"]
        self.code = code
        text = "; ".join(self.messages)
        if code:
            text = f"[{code}] {text}"
        super().__init__(text)


class MalformedResponse(DstListError):
    """The payload could not be parsed into the expected element structure."""
