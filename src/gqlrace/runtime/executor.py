"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Racing executor: fans identical form POSTs out to one endpoint.
"""

from __future__ import annotations

import logging
import time

from ..encoding import build_form_payload
from ..errors import NetworkError, ProtocolError
from ..types import (
    FormFields,
    RaceOutcome,
    Transport,
    TransportOutcome,
    TransportResponse,
)
from .contracts import RacePolicy
from .racing import Racer

logger = logging.getLogger("gqlrace.executor")


def _release(outcome: TransportOutcome) -> None:
    if outcome.response is not None:
        outcome.response.close()


class RacingExecutor:
    """Issue ``policy.fan_out`` identical requests and keep one outcome."""

    def __init__(self, transport: Transport, *, policy: RacePolicy | None = None) -> None:
        self._transport = transport
        self.policy = policy or RacePolicy()
        self._racer = Racer()

    @property
    def inflight(self) -> int:
        """Attempts still running, including abandoned ones."""
        return self._racer.inflight

    async def _post(self, endpoint: str, fields: FormFields) -> TransportResponse:
        try:
            return await self._transport.post_form(endpoint, fields)
        except Exception as e:  # noqa: BLE001
            raise NetworkError(f"Network error calling '{endpoint}': {e}") from e

    async def _attempt(self, endpoint: str, fields: FormFields) -> TransportOutcome:
        try:
            response = await self._post(endpoint, fields)
        except NetworkError as error:
            return TransportOutcome(error=error)

        status = response.status_code
        if status != self.policy.success_status:
            response.close()
            return TransportOutcome(error=ProtocolError(status))
        return TransportOutcome(response=response)

    async def execute(self, endpoint: str, query: str, encoded_variables: str) -> RaceOutcome:
        """
        Race identical attempts and return the winning outcome.

        The winner is the first attempt to complete, whether it succeeded or
        not, unless the policy prefers success. A successful outcome carries
        an open response the caller must close.
        """
        fields = build_form_payload(query, encoded_variables)

        async def _one() -> TransportOutcome:
            return await self._attempt(endpoint, fields)

        started = time.perf_counter()
        winner = await self._racer.run(
            [_one] * self.policy.fan_out,
            accept=(lambda outcome: outcome.ok) if self.policy.prefer_success else None,
            on_discard=_release,
        )
        elapsed = time.perf_counter() - started
        logger.debug(
            "Request took %.3fs (attempt=%d/%d, ok=%s)",
            elapsed,
            winner.index + 1,
            self.policy.fan_out,
            winner.value.ok,
        )
        return RaceOutcome(outcome=winner.value, attempt=winner.index, elapsed_s=elapsed)

    async def drain(self) -> None:
        """Wait for abandoned attempts to finish."""
        await self._racer.drain()
