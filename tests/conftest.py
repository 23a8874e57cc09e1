from pathlib import Path

import pytest
from requests import Response
from requests.structures import CaseInsensitiveDict

from ldp_webclient.graph import RDFLibEngine

RESOURCES = Path(__file__).parent / "resources"

CONTAINER_LINK = '<http://www.w3.org/ns/ldp#BasicContainer>; rel="type", ' \
                 '<http://www.w3.org/ns/ldp#Container>; rel="type"'


def make_transport(url="https://localhost:8443/", status=200, reason="OK",
                   headers=None, body=""):
    """Builds a completed requests.Response without any network I/O."""
    transport = Response()
    transport.status_code = status
    transport.reason = reason
    transport.url = url
    transport.headers = CaseInsensitiveDict(headers or {})
    transport._content = body.encode("utf-8")
    transport.encoding = "utf-8"
    return transport


class MockSession:
    """Stands in for requests.Session; answers from a url -> transport map.

    A value that is an exception instance is raised instead.
    """
    def __init__(self, transports):
        self.transports = transports
        self.calls = []
        self.auth = None

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        transport = self.transports[url]
        if isinstance(transport, Exception):
            raise transport
        return transport


@pytest.fixture()
def engine():
    return RDFLibEngine()


@pytest.fixture()
def container_source():
    return (RESOURCES / "solid-container.ttl").read_text()
