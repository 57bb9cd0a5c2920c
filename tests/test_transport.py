"""Tests for HTTP transport error mapping and session lifecycle."""

import pytest
import requests

import dstlist.retrieval.transport as transport_mod
from dstlist.errors import TransportFailure
from dstlist.retrieval.transport import HttpTransport

URL = "https://api.xmltime.com/dstlist?accesskey=a&signature=s3cr3t&lang=en"


class _Response:
    def __init__(self, status_code=200, text="<data/>"):
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class _Session:
    instances = []

    def __init__(self):
        self.headers = {}
        self.closed = False
        self.calls = []
        self.response = _Response()
        self.error = None
        _Session.instances.append(self)

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def fake_session(monkeypatch):
    _Session.instances = []
    monkeypatch.setattr(transport_mod.requests, "Session", _Session)
    return _Session


def test_get_text_returns_body_and_closes_session(fake_session):
    """Test that the body is decoded as UTF-8 and the session is closed."""
    with HttpTransport(timeout_seconds=5, user_agent="tests/1.0") as transport:
        text = transport.get_text(URL)

    session = fake_session.instances[0]
    assert text == "<data/>"
    assert session.calls == [(URL, 5)]
    assert session.headers["User-Agent"] == "tests/1.0"
    assert session.response.encoding == "utf-8"
    assert session.closed is True


def test_http_error_status_raises_transport_failure(fake_session):
    """Test that non-2xx statuses raise TransportFailure with a redacted URL."""
    with HttpTransport() as transport:
        fake_session.instances[0].response = _Response(status_code=503)
        with pytest.raises(TransportFailure) as excinfo:
            transport.get_text(URL)

    assert excinfo.value.status_code == 503
    assert "s3cr3t" not in excinfo.value.url
    assert fake_session.instances[0].closed is True


@pytest.mark.parametrize("error", [requests.ConnectionError("refused"), requests.Timeout("slow")])
def test_request_exceptions_raise_transport_failure(fake_session, error):
    """Test that requests exceptions are chained into TransportFailure."""
    with pytest.raises(TransportFailure) as excinfo:
        with HttpTransport() as transport:
            fake_session.instances[0].error = error
            transport.get_text(URL)

    assert excinfo.value.__cause__ is error
    assert excinfo.value.status_code is None
    assert fake_session.instances[0].closed is True


def test_session_closed_when_caller_fails(fake_session):
    """Test that the session is released when the caller raises."""
    with pytest.raises(RuntimeError):
        with HttpTransport() as transport:
            transport.get_text(URL)
            raise RuntimeError("mapper blew up")

    assert fake_session.instances[0].closed is True


def test_get_text_requires_context(fake_session):
    """Test that get_text outside the context manager is refused."""
    with pytest.raises(RuntimeError):
        HttpTransport().get_text(URL)
