"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: runtime/racing.py.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger("gqlrace.executor")


@dataclass(frozen=True, slots=True)
class RaceWinner(Generic[T]):
    """Value of the winning attempt and its position in the fan-out."""

    index: int
    value: T


@dataclass(frozen=True, slots=True)
class _Arrival(Generic[T]):
    index: int
    value: T | None
    error: BaseException | None


class Racer:
    """
    Run identical attempts concurrently and settle on one arrival.

    Losing attempts are not cancelled. They stay referenced here until they
    finish, then their values are handed to ``on_discard`` and dropped.
    """

    def __init__(self) -> None:
        self._inflight: set[asyncio.Task[None]] = set()

    @property
    def inflight(self) -> int:
        """Number of attempts, winning or abandoned, still running."""
        return len(self._inflight)

    async def run(
        self,
        attempts: Sequence[Callable[[], Awaitable[T]]],
        *,
        accept: Callable[[T], bool] | None = None,
        on_discard: Callable[[T], None] | None = None,
    ) -> RaceWinner[T]:
        """
        Return the first arrival, or the first accepted arrival when
        ``accept`` is given. Without any accepted arrival the first one wins.
        An attempt that raised wins by re-raising its exception.
        """
        if not attempts:
            raise ValueError("Racer.run requires at least one attempt")

        queue: asyncio.Queue[_Arrival[T]] = asyncio.Queue(maxsize=len(attempts))
        settled = False

        def _discard(arrival: _Arrival[T]) -> None:
            if on_discard is None or arrival.error is not None:
                return
            try:
                on_discard(arrival.value)  # type: ignore[arg-type]
            except Exception:  # noqa: BLE001
                logger.exception("Failed to discard abandoned attempt %d", arrival.index)

        async def _attempt(index: int, attempt: Callable[[], Awaitable[T]]) -> None:
            try:
                arrival = _Arrival(index=index, value=await attempt(), error=None)
            except Exception as e:  # noqa: BLE001
                arrival = _Arrival(index=index, value=None, error=e)
            if settled:
                _discard(arrival)
                return
            queue.put_nowait(arrival)

        for index, attempt in enumerate(attempts):
            task = asyncio.create_task(_attempt(index, attempt))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)

        winner: _Arrival[T] | None = None
        fallback: _Arrival[T] | None = None
        try:
            for _ in range(len(attempts)):
                arrival = await queue.get()
                if accept is None:
                    winner = arrival
                    break
                if arrival.error is None and accept(arrival.value):  # type: ignore[arg-type]
                    winner = arrival
                    break
                if fallback is None:
                    fallback = arrival
                else:
                    _discard(arrival)
            if winner is None:
                winner = fallback
        finally:
            settled = True
            if fallback is not None and fallback is not winner:
                _discard(fallback)
            while not queue.empty():
                _discard(queue.get_nowait())

        if winner is None:
            raise RuntimeError("Race settled without an arrival")
        if winner.error is not None:
            raise winner.error
        return RaceWinner(index=winner.index, value=winner.value)  # type: ignore[arg-type]

    async def drain(self) -> None:
        """Wait for every abandoned attempt to finish."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)
