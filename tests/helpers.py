from __future__ import annotations

import asyncio
from dataclasses import dataclass, field


class FakeResponse:
    def __init__(self, status_code: int = 200, body: bytes = b"", *, read_error: Exception | None = None):
        self._status_code = status_code
        self._body = body
        self._read_error = read_error
        self.closed = False
        self.close_calls = 0

    @property
    def status_code(self) -> int:
        return self._status_code

    async def read(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def close(self) -> None:
        self.close_calls += 1
        self.closed = True


@dataclass
class Step:
    """One scripted transport answer: wait ``delay_s`` then respond or raise."""

    delay_s: float = 0.0
    status_code: int = 200
    body: bytes = b"{}"
    error: Exception | None = None
    read_error: Exception | None = None


@dataclass
class ScriptedTransport:
    """Transport spy answering the n-th call with the n-th step (last step repeats)."""

    steps: list[Step] = field(default_factory=lambda: [Step()])

    def __post_init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.responses: list[FakeResponse] = []

    async def post_form(self, url, fields):
        index = len(self.calls)
        self.calls.append((url, dict(fields)))
        step = self.steps[min(index, len(self.steps) - 1)]
        await asyncio.sleep(step.delay_s)
        if step.error is not None:
            raise step.error
        response = FakeResponse(step.status_code, step.body, read_error=step.read_error)
        self.responses.append(response)
        return response


def run_async(coro):
    return asyncio.run(coro)
