"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Default HTTP transport built on ``urllib`` running in worker threads.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from typing import Any

from .types import FormFields

logger = logging.getLogger("gqlrace.transport")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class UrllibResponse:
    """Response handle over an open ``urllib`` response object."""

    def __init__(
        self,
        raw: Any,
        status_code: int,
        *,
        executor: concurrent.futures.Executor | None = None,
    ) -> None:
        self._raw = raw
        self._status_code = status_code
        self._executor = executor
        self._closed = False

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def closed(self) -> bool:
        return self._closed

    async def read(self) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._raw.read)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._raw.close()


def _close_late_response(future: concurrent.futures.Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    future.result().close()


class UrllibTransport:
    """
    Form-encoded POST transport.

    Non-2xx answers are returned as responses with their status code so the
    caller decides how to classify them. Connection failures and timeouts
    raise ``urllib.error.URLError`` or ``OSError``.

    Requests run on a thread pool owned by the transport, not on the event
    loop's default executor, so closing a loop never waits for abandoned
    requests. A response that arrives after its caller was cancelled is
    closed when the worker thread finishes.
    """

    def __init__(
        self,
        *,
        timeout_s: float = 30.0,
        headers: Mapping[str, str] | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.timeout_s = timeout_s
        self.headers = dict(headers or {})
        self._pool = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="gqlrace-transport",
        )

    async def post_form(self, url: str, fields: FormFields) -> UrllibResponse:
        payload = urllib.parse.urlencode(dict(fields)).encode("utf-8")
        submitted = self._pool.submit(self._post, url, payload)
        try:
            return await asyncio.wrap_future(submitted)
        except asyncio.CancelledError:
            submitted.add_done_callback(_close_late_response)
            raise

    def close(self, *, wait: bool = False) -> None:
        """Stop accepting requests. With ``wait``, block until running ones end."""
        self._pool.shutdown(wait=wait)

    def _post(self, url: str, payload: bytes) -> UrllibResponse:
        headers = {
            "Content-Type": FORM_CONTENT_TYPE,
            "Accept": "application/json",
            **self.headers,
        }
        req = urllib.request.Request(url, data=payload, method="POST", headers=headers)
        try:
            raw = urllib.request.urlopen(req, timeout=self.timeout_s)  # noqa: S310
        except urllib.error.HTTPError as e:
            logger.debug("POST %s answered HTTP %d", url, e.code)
            return UrllibResponse(e, e.code, executor=self._pool)
        return UrllibResponse(raw, raw.status, executor=self._pool)
