"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Minimal query/mutation client that races redundant requests to one endpoint.
"""

from __future__ import annotations

from .client import GraphQLClient
from .encoding import build_form_payload, encode_variables
from .errors import (
    ConfigurationError,
    EncodingError,
    GraphQLClientError,
    NetworkError,
    ParseError,
    ProtocolError,
)
from .factory import create_client
from .parsers import CallableParser, JSONParser, ModelParser, as_parser
from .runtime import RacePolicy, RacingExecutor
from .settings import ClientSettings
from .transport import UrllibResponse, UrllibTransport
from .types import (
    GraphQLRequest,
    GraphQLResult,
    JSONObject,
    JSONValue,
    RaceOutcome,
    ResultParser,
    Transport,
    TransportOutcome,
    TransportResponse,
)

__all__ = [
    "GraphQLClient",
    "GraphQLRequest",
    "GraphQLResult",
    "create_client",
    "ClientSettings",
    "RacePolicy",
    "RacingExecutor",
    "RaceOutcome",
    "Transport",
    "TransportResponse",
    "TransportOutcome",
    "UrllibTransport",
    "UrllibResponse",
    "ResultParser",
    "CallableParser",
    "JSONParser",
    "ModelParser",
    "as_parser",
    "encode_variables",
    "build_form_payload",
    "GraphQLClientError",
    "ConfigurationError",
    "EncodingError",
    "NetworkError",
    "ProtocolError",
    "ParseError",
    "JSONObject",
    "JSONValue",
]
