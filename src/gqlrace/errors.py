"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error hierarchy for query execution. Each class names the phase that failed.
"""

from __future__ import annotations


class GraphQLClientError(RuntimeError):
    """Base error for every failure surfaced by ``GraphQLClient.execute``."""


class ConfigurationError(GraphQLClientError):
    """Raised when client settings are invalid."""


class EncodingError(GraphQLClientError):
    """Raised when request variables cannot be serialized. Nothing was sent."""


class NetworkError(GraphQLClientError):
    """Raised when the transport failed on the winning attempt."""


class ProtocolError(GraphQLClientError):
    """Raised when the endpoint answered with a non-success status code."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Request received status code: {status_code}")


class ParseError(GraphQLClientError):
    """Raised when the result parser rejected the response body."""
