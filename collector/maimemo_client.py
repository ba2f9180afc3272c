"""
Module: maimemo_client.py
Description:
    MaiMemo open API calls used by the collector: notepad listing, detail, create, update,
    and dictionary (vocabulary) lookups.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    Every failure is raised as a CollectError whose message is prefixed with the failing call.
    No retries: the injected HTTP utility owns timeouts.
"""

import asyncio
from contextlib import aclosing
from urllib.parse import urlencode

from collector.errors import CollectError, ErrorKind
from collector.formatter import (
    POT_TAG,
    append_word,
    build_notepad_input,
    new_notepad_brief,
)

MAIMEMO_API_URL = "https://open.maimemo.com/open/api/v1"
PAGE_SIZE = 10


class MaimemoClient:
    def __init__(self, api_token, http, logger, api_url=MAIMEMO_API_URL):
        self.http = http
        self.logger = logger
        self.api_url = api_url
        self.headers = {
            "Authorization": f"Bearer {api_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def request(self, endpoint, purpose, method="GET", body=None) -> dict:
        """Send one call and return the `data` object of its JSON envelope (`{}` when empty)."""
        url = f"{self.api_url}{endpoint}"
        try:
            response = await self.http.fetch(url, method=method, headers=self.headers, body=body)
        except CollectError as e:
            raise e.wrap(purpose) from e
        except Exception as e:
            raise CollectError(ErrorKind.TRANSPORT, f"{purpose}: {e}") from e

        if not response.ok:
            raise CollectError(ErrorKind.TRANSPORT, f"{purpose}: HTTP {response.status}")

        envelope = response.data or {}
        data = envelope.get("data") if isinstance(envelope, dict) else envelope
        if data and not isinstance(data, dict):
            raise CollectError(ErrorKind.DATA_SHAPE, f"{purpose}: unexpected response body")
        return data or {}

    async def iter_notepad_pages(self):
        offset = 0
        while True:
            res = await self.request(
                f"/notepads?limit={PAGE_SIZE}&offset={offset}", "fetch notepads failed"
            )
            notepads = res.get("notepads") or []
            if not isinstance(notepads, list):
                raise CollectError(
                    ErrorKind.DATA_SHAPE, "fetch notepads failed: unexpected response body"
                )
            yield notepads

            if len(notepads) < PAGE_SIZE:
                break
            offset += PAGE_SIZE

    async def find_notepad_by_title(self, title: str) -> dict | None:
        """
        Walks the notepad listing page by page and returns the first entry whose title
        equals `title` exactly (case-sensitive), or None once a short page is reached.
        """
        total_found = 0
        try:
            async with aclosing(self.iter_notepad_pages()) as pages:
                async for notepads in pages:
                    total_found += len(notepads)
                    for notepad in notepads:
                        if isinstance(notepad, dict) and notepad.get("title") == title:
                            if not notepad.get("id"):
                                raise CollectError(
                                    ErrorKind.DATA_SHAPE, "matching notepad has no id"
                                )
                            self.logger.log(f'Found notepad "{title}" (ID: {notepad["id"]})')
                            return notepad
        except CollectError as e:
            raise e.wrap("list lookup failed") from e

        self.logger.log(f"Reached the last page, {total_found} notepads searched")
        return None

    async def list_notepads(self) -> list[dict]:
        everything = []
        try:
            async with aclosing(self.iter_notepad_pages()) as pages:
                async for notepads in pages:
                    everything.extend(notepads)
        except CollectError as e:
            raise e.wrap("list lookup failed") from e
        return everything

    async def get_notepad_detail(self, notepad_id) -> dict:
        try:
            res = await self.request(f"/notepads/{notepad_id}", "fetch notepad detail failed")
            notepad = res.get("notepad")
            if not notepad or not isinstance(notepad, dict):
                raise CollectError(ErrorKind.DATA_SHAPE, "malformed detail response")
        except CollectError as e:
            raise e.wrap("fetch list detail failed") from e

        if not notepad.get("id"):
            notepad["id"] = notepad_id
        notepad["content"] = notepad.get("content") or ""
        notepad["list"] = notepad.get("list") or []
        return notepad

    async def create_notepad(self, title: str, word: str) -> dict:
        payload = build_notepad_input(
            status="PUBLISHED",
            content=word.lower(),
            title=title,
            brief=new_notepad_brief(title),
            tags=[POT_TAG],
        )
        try:
            res = await self.request(
                "/notepads", "POST /notepads", method="POST", body=self.http.json_body(payload)
            )
            notepad = res.get("notepad")
            if not notepad:
                raise CollectError(ErrorKind.DATA_SHAPE, "malformed create response")
        except CollectError as e:
            raise e.wrap("create list failed") from e
        return notepad

    async def update_notepad(self, detail: dict, word: str) -> dict:
        payload = build_notepad_input(
            status=detail.get("status"),
            content=append_word(detail.get("content") or "", word),
            title=detail.get("title"),
            brief=detail.get("brief"),
            tags=detail.get("tags"),
        )
        notepad_id = detail.get("id")
        try:
            if not notepad_id:
                raise CollectError(ErrorKind.DATA_SHAPE, "notepad has no id")
            res = await self.request(
                f"/notepads/{notepad_id}",
                f"POST /notepads/{notepad_id}",
                method="POST",
                body=self.http.json_body(payload),
            )
            notepad = res.get("notepad")
            if not notepad:
                raise CollectError(ErrorKind.DATA_SHAPE, "malformed update response")
        except CollectError as e:
            raise e.wrap("update list failed") from e
        return notepad

    async def lookup_vocabulary(self, spelling: str) -> dict | None:
        res = await self.request(
            f"/vocabulary?{urlencode({'spelling': spelling})}", "GET /vocabulary"
        )
        return res.get("voc") or None

    async def check_word_in_vocabulary(self, word: str) -> str:
        """
        Confirm MaiMemo's dictionary knows `word` and return the spelling that matched.

        The vocabulary endpoint is case-sensitive and most entries are lowercase, while a few
        only exist capitalized; a word that is not already lowercase is therefore queried in
        both forms at once.
        """
        lower_word = word.lower()
        words_to_check = [word] if lower_word == word else [lower_word, word]

        results = await asyncio.gather(
            *(self.lookup_vocabulary(w) for w in words_to_check), return_exceptions=True
        )

        for spelling, result in zip(words_to_check, results):
            if result and not isinstance(result, BaseException):
                self.logger.log(f'"{spelling}" is in the MaiMemo dictionary')
                return spelling

        for result in results:
            if isinstance(result, CollectError):
                raise result.wrap("dictionary check failed") from result
            if isinstance(result, BaseException):
                raise result

        raise CollectError(ErrorKind.BUSINESS_RULE, f'word "{word}" not found in dictionary')
