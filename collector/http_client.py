"""
Module: http_client.py
Description:
    Default HTTP utility handed to the collector: an async `fetch` over a requests Session
    and the JSON body encoder.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    Any object exposing `async fetch(url, method=, headers=, body=)` and `json_body(data)`
    can replace it (the host application injects its own).
    - Required/used env vars:
        * MAIMEMO_TIMEOUT
"""

import asyncio
import json
import os
from dataclasses import dataclass
from typing import Any, Optional

import requests

DEFAULT_TIMEOUT = 15.0


@dataclass
class FetchResponse:
    ok: bool
    status: int
    data: Any = None


class RequestsHttp:
    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        if timeout is None:
            timeout = float(os.getenv("MAIMEMO_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout

    @staticmethod
    def json_body(data) -> str:
        return json.dumps(data, ensure_ascii=False)

    async def fetch(self, url, method="GET", headers=None, body=None) -> FetchResponse:
        # requests is blocking; a worker thread keeps concurrent fetches concurrent.
        # The Session is shared by those threads; concurrently they only touch its urllib3 pool
        # and its cookie jar, both lock-guarded. Headers and auth are passed per call.
        response = await asyncio.to_thread(
            self.session.request,
            method,
            url,
            headers=headers,
            data=body.encode("utf-8") if isinstance(body, str) else body,
            timeout=self.timeout,
        )

        try:
            data = response.json() if response.content else None
        except ValueError:
            data = None

        return FetchResponse(ok=response.ok, status=response.status_code, data=data)

    def close(self):
        self.session.close()
