"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Request, result and transport types shared across the client.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import (
    Any,
    Generic,
    Protocol,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]

FormFields: TypeAlias = Mapping[str, str]


@runtime_checkable
class ResultParser(Protocol[T_co]):
    """Turns a fully buffered response body into the caller's result type."""

    def parse(self, raw: bytes) -> T_co:
        ...


@runtime_checkable
class TransportResponse(Protocol):
    """Live response handle returned by a transport."""

    @property
    def status_code(self) -> int:
        ...

    async def read(self) -> bytes:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class Transport(Protocol):
    """Submits one form-encoded POST. Raises on network-level failure."""

    async def post_form(self, url: str, fields: FormFields) -> TransportResponse:
        ...


@dataclass(frozen=True, slots=True)
class GraphQLRequest(Generic[T]):
    """
    One query or mutation to execute.

    Attributes:
        query: Raw query document sent in the ``query`` form field.
        variables: Tree of scalars, mappings and sequences (or models)
            JSON-encoded into the ``variables`` form field.
        result_parser: Parser object or plain ``fn(bytes) -> T`` callable.
    """

    query: str
    variables: Any = None
    result_parser: ResultParser[T] | Callable[[bytes], T] | None = None


@dataclass(frozen=True, slots=True)
class GraphQLResult(Generic[T]):
    """Parsed value paired with the request that produced it."""

    request: GraphQLRequest[T]
    value: T


@dataclass(frozen=True, slots=True)
class TransportOutcome:
    """Result of one racing attempt: a live response or an error, never both."""

    response: TransportResponse | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            raise ValueError("TransportOutcome requires exactly one of response or error")

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class RaceOutcome:
    """Winning attempt outcome with race timing."""

    outcome: TransportOutcome
    attempt: int
    elapsed_s: float
