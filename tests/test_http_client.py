import asyncio
import json

import pytest
import requests

from collector.http_client import FetchResponse, RequestsHttp


def make_response(status, content=b""):
    response = requests.Response()
    response.status_code = status
    response._content = content
    return response


class StubSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.exc:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


def test_fetch_decodes_json_and_forwards_request():
    session = StubSession(make_response(200, b'{"data": {"voc": null}}'))
    http = RequestsHttp(session=session, timeout=3)
    body = http.json_body({"notepad": {"title": "单词"}})

    result = asyncio.run(
        http.fetch("https://example.test/x", method="POST", headers={"A": "b"}, body=body)
    )

    assert result == FetchResponse(ok=True, status=200, data={"data": {"voc": None}})
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "https://example.test/x")
    assert kwargs["headers"] == {"A": "b"}
    assert kwargs["timeout"] == 3
    assert json.loads(kwargs["data"].decode("utf-8")) == {"notepad": {"title": "单词"}}


def test_fetch_reports_error_status():
    http = RequestsHttp(session=StubSession(make_response(401, b'{"errors": []}')))

    result = asyncio.run(http.fetch("https://example.test/x"))

    assert not result.ok
    assert result.status == 401


def test_fetch_tolerates_non_json_body():
    http = RequestsHttp(session=StubSession(make_response(502, b"<html>Bad gateway</html>")))

    result = asyncio.run(http.fetch("https://example.test/x"))

    assert result.data is None
    assert result.status == 502


def test_transport_errors_propagate():
    http = RequestsHttp(session=StubSession(exc=requests.ConnectionError("refused")))

    with pytest.raises(requests.ConnectionError):
        asyncio.run(http.fetch("https://example.test/x"))


def test_close_closes_session():
    session = StubSession()
    RequestsHttp(session=session).close()
    assert session.closed


def test_timeout_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("MAIMEMO_TIMEOUT", "4.5")
    assert RequestsHttp(session=StubSession()).timeout == 4.5


def test_timeout_default_without_environment(monkeypatch):
    monkeypatch.delenv("MAIMEMO_TIMEOUT", raising=False)
    assert RequestsHttp(session=StubSession()).timeout == 15.0


def test_explicit_timeout_wins_even_when_zero(monkeypatch):
    monkeypatch.setenv("MAIMEMO_TIMEOUT", "30")
    assert RequestsHttp(session=StubSession(), timeout=0).timeout == 0
