"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: client.py.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

from .encoding import encode_variables
from .errors import EncodingError, NetworkError, ParseError
from .parsers import JSONParser, as_parser
from .runtime.contracts import RacePolicy
from .runtime.executor import RacingExecutor
from .types import GraphQLRequest, GraphQLResult, Transport

T = TypeVar("T")

logger = logging.getLogger("gqlrace.client")


class GraphQLClient:
    """
    Client bound to one query endpoint and one caller-owned transport.

    Instances share no mutable state, so an application may hold several
    clients configured for different endpoints or transports.
    """

    def __init__(
        self,
        endpoint: str,
        transport: Transport,
        *,
        race_policy: RacePolicy | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.transport = transport
        self._executor = RacingExecutor(transport, policy=race_policy)

    @property
    def race_policy(self) -> RacePolicy:
        return self._executor.policy

    async def execute(self, request: GraphQLRequest[T]) -> GraphQLResult[T]:
        """
        Execute one request and return its parsed result.

        Raises:
            EncodingError: Variables could not be serialized. Nothing was sent.
            NetworkError: The winning attempt failed at the transport level.
            ProtocolError: The winning attempt got a non-success status code.
            ParseError: The result parser rejected the response body.
        """
        parser = as_parser(request.result_parser or JSONParser())

        try:
            encoded = encode_variables(request.variables)
        except EncodingError as e:
            logger.warning("Variable encoding failed: %s", e)
            raise

        race = await self._executor.execute(self.endpoint, request.query, encoded)
        response = race.outcome.response
        if response is None:
            error = race.outcome.error or NetworkError("Winning attempt returned no response")
            logger.warning("Request to %s failed: %s", self.endpoint, error)
            raise error

        try:
            try:
                body = await response.read()
            except Exception as e:  # noqa: BLE001
                logger.warning("Reading response from %s failed: %s", self.endpoint, e)
                raise NetworkError(f"Failed to read response body: {e}") from e
            try:
                value = parser.parse(body)
            except Exception as e:  # noqa: BLE001
                logger.warning("Parse failed with error: %s", e)
                raise ParseError(f"Failed to parse response body: {e}") from e
        finally:
            response.close()

        return GraphQLResult(request=request, value=value)

    def execute_sync(self, request: GraphQLRequest[T]) -> GraphQLResult[T]:
        """
        Synchronous wrapper around :meth:`execute`.

        Raises ``RuntimeError`` if called from inside a running event loop.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.execute(request))
        raise RuntimeError(
            "execute_sync() cannot be called from a running event loop; "
            "use 'await client.execute(...)' instead."
        )

    async def aclose(self) -> None:
        """Wait for abandoned racing attempts to finish."""
        await self._executor.drain()
