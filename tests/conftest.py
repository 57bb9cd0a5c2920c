"""Pytest configuration and fixtures."""

import pytest

from dstlist.errors import TransportFailure
from dstlist.services.dst_service import DSTService

DST_LIST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<data version="2">
  <dstentry>
    <region id="no">
      <country id="no">Norway</country>
      <desc>All locations</desc>
      <biggestplace>Oslo</biggestplace>
      <locations>
        <location>Oslo</location>
        <location>Bergen</location>
      </locations>
    </region>
    <stdtimezone offset="3600">
      <zoneabb>CET</zoneabb>
      <zonename>Central European Time</zonename>
    </stdtimezone>
    <dsttimezone offset="3600" dstoffset="3600">
      <zoneabb>CEST</zoneabb>
      <zonename>Central European Summer Time</zonename>
    </dsttimezone>
    <dststart>2014-03-30T02:00:00</dststart>
    <dstend>2014-10-26T03:00:00</dstend>
    <timechanges>
      <change newdst="0" newzone="CET" newoffset="3600" utctime="2014-10-26T01:00:00" oldlocaltime="2014-10-26T03:00:00" newlocaltime="2014-10-26T02:00:00"/>
      <change newdst="3600" newzone="CEST" newoffset="7200" utctime="2014-03-30T01:00:00" oldlocaltime="2014-03-30T02:00:00" newlocaltime="2014-03-30T03:00:00"/>
    </timechanges>
  </dstentry>
  <dstentry>
    <region id="jp">
      <country id="jp">Japan</country>
      <desc>All locations</desc>
      <biggestplace>Tokyo</biggestplace>
      <locations/>
    </region>
    <stdtimezone offset="32400">
      <zoneabb>JST</zoneabb>
      <zonename>Japan Standard Time</zonename>
    </stdtimezone>
    <special type="nodst"/>
  </dstentry>
  <dstentry>
    <region id="us">
      <country id="us">United States</country>
      <desc>Eastern Time</desc>
      <biggestplace>New York</biggestplace>
    </region>
    <stdtimezone offset="-18000">
      <zoneabb>EST</zoneabb>
      <zonename>Eastern Standard Time</zonename>
    </stdtimezone>
    <dsttimezone offset="-18000" dstoffset="3600">
      <zoneabb>EDT</zoneabb>
      <zonename>Eastern Daylight Time</zonename>
    </dsttimezone>
    <dststart>2014-03-09T02:00:00</dststart>
    <dstend>2014-11-02T02:00:00</dstend>
  </dstentry>
</data>
"""

EMPTY_LIST_XML = '<?xml version="1.0" encoding="UTF-8"?><data version="2"></data>'

ERROR_XML = """<?xml version="1.0" encoding="UTF-8"?>
<data version="2">
  <errors>
    <error code="403">Invalid access key</error>
  </errors>
</data>
"""

MALFORMED_XML = "<data><dstentry><region></dstentry>"


class FakeTransport:
    """Stands in for HttpTransport: records requests, returns a canned payload."""

    def __init__(self, payload=DST_LIST_XML, error=None):
        self.payload = payload
        self.error = error
        self.urls = []
        self.entered = False
        self.closed = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def get_text(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def make_service():
    """Build a DSTService wired to a FakeTransport. Returns (service, transport)."""

    def _make(payload=DST_LIST_XML, error=None, **kwargs):
        transport = FakeTransport(payload=payload, error=error)
        service = DSTService(
            "test-access",
            "test-secret",
            transport_factory=lambda _settings: transport,
            **kwargs,
        )
        return service, transport

    return _make


@pytest.fixture
def transport_error():
    return TransportFailure("Connection refused", url="https://api.xmltime.com/dstlist")
