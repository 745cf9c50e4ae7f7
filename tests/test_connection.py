"""Tests for the HTTPS transport."""

import pytest
import requests
from lxml import etree

from inwx_client.connection import RPCConnection
from inwx_client.exceptions import INWXConnectionError, INWXXMLError

SUCCESS_BODY = (
    b"<?xml version=\"1.0\"?><methodResponse><params><param><value><struct>"
    b"<member><name>code</name><value><int>1000</int></value></member>"
    b"<member><name>msg</name><value><string>Command completed successfully</string></value></member>"
    b"<member><name>resData</name><value><struct>"
    b"<member><name>id</name><value><int>7</int></value></member>"
    b"</struct></value></member>"
    b"</struct></value></param></params></methodResponse>"
)


class FakeHTTPResponse:

    def __init__(self, status_code=200, content=SUCCESS_BODY):
        self.status_code = status_code
        self.content = content


@pytest.fixture
def session():
    return requests.Session()


def test_call_posts_xml_and_decodes(session, monkeypatch):
    sent = {}

    def fake_post(url, data=None, timeout=None, verify=None):
        sent.update(url=url, data=data, timeout=timeout, verify=verify)
        return FakeHTTPResponse()

    monkeypatch.setattr(session, "post", fake_post)
    connection = RPCConnection("https://api.ote.domrobot.com/xmlrpc/", timeout=12, session=session)

    response = connection.call("nameserver.deleteRecord", {"id": 7, "lang": "eng"})

    assert response.code == 1000
    assert response.data == {"id": 7}
    assert sent["url"] == "https://api.ote.domrobot.com/xmlrpc/"
    assert sent["timeout"] == 12
    assert sent["verify"] is True

    root = etree.fromstring(sent["data"])
    assert root.findtext("methodName") == "nameserver.deleteRecord"
    assert len(root.findall("params/param")) == 1


def test_headers(session):
    RPCConnection("https://example.invalid/", session=session)
    assert session.headers["Content-Type"].startswith("text/xml")
    assert session.headers["User-Agent"].startswith("inwx-client/")


def test_network_error_wrapped(session, monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(session, "post", fake_post)
    connection = RPCConnection("https://example.invalid/", session=session)

    with pytest.raises(INWXConnectionError, match="connection refused"):
        connection.call("account.login", {})


def test_http_status_error(session, monkeypatch):
    monkeypatch.setattr(session, "post", lambda *a, **kw: FakeHTTPResponse(status_code=502, content=b""))
    connection = RPCConnection("https://example.invalid/", session=session)

    with pytest.raises(INWXConnectionError, match="502"):
        connection.call("account.login", {})


def test_malformed_body(session, monkeypatch):
    monkeypatch.setattr(session, "post", lambda *a, **kw: FakeHTTPResponse(content=b"not xml"))
    connection = RPCConnection("https://example.invalid/", session=session)

    with pytest.raises(INWXXMLError):
        connection.call("account.login", {})


def test_unencodable_argument_not_sent(session, monkeypatch):
    posted = []
    monkeypatch.setattr(session, "post", lambda *a, **kw: posted.append(True))
    connection = RPCConnection("https://example.invalid/", session=session)

    with pytest.raises(INWXXMLError):
        connection.call("contact.update", {"id": 1, "remarks": "a\x01b"})
    assert posted == []


def test_close(session, monkeypatch):
    closed = []
    monkeypatch.setattr(session, "close", lambda: closed.append(True))
    RPCConnection("https://example.invalid/", session=session).close()
    assert closed == [True]
