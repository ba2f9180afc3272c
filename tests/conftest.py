"""
tests/conftest.py
In-memory stand-in for the host's HTTP utility plus shared fixtures.
"""

import asyncio
import json
from urllib.parse import parse_qs, urlsplit

import pytest

from collector.http_client import FetchResponse
from collector.maimemo_client import MAIMEMO_API_URL

TOKEN = "0123456789abcdef" * 4


def ok(data):
    return FetchResponse(ok=True, status=200, data={"data": data})


def error(status):
    return FetchResponse(ok=False, status=status, data=None)


class FakeHttp:
    """
    Routes `fetch` calls by (method, path) to canned responses or handlers and records each call.
    A handler receives (query, body) and returns a FetchResponse or raises.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    def route(self, method, path, response):
        self.routes[(method, path)] = response

    @staticmethod
    def json_body(data):
        return json.dumps(data)

    async def fetch(self, url, method="GET", headers=None, body=None):
        assert url.startswith(MAIMEMO_API_URL)
        parts = urlsplit(url[len(MAIMEMO_API_URL):])
        query = {k: v[0] for k, v in parse_qs(parts.query).items()}
        payload = json.loads(body) if body else None
        self.calls.append(
            {"method": method, "path": parts.path, "query": query, "headers": headers, "body": payload}
        )

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0.01)
        finally:
            self.in_flight -= 1

        response = self.routes.get((method, parts.path))
        if response is None:
            return error(404)
        if callable(response):
            return response(query, payload)
        return response

    def calls_to(self, method, path):
        return [c for c in self.calls if c["method"] == method and c["path"] == path]

    def close(self):
        pass


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


def brief(notepad_id, title):
    return {
        "id": notepad_id,
        "type": "NOTEPAD",
        "creator": 1,
        "status": "PUBLISHED",
        "title": title,
        "brief": f"brief of {title}",
        "tags": ["Pot"],
        "created_time": "2024-01-01T00:00:00Z",
        "updated_time": "2024-01-02T00:00:00Z",
    }


def paginated(notepads):
    """Listing handler serving `notepads` honouring limit/offset."""

    def handler(query, _body):
        limit = int(query["limit"])
        offset = int(query["offset"])
        return ok({"notepads": notepads[offset:offset + limit]})

    return handler


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def config():
    return {"api_token": TOKEN, "word_list_title": "TestList", "enable_word_check": "disable"}
