"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Ready-made result parsers and adaptation of plain parser callables.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from .types import ResultParser

T = TypeVar("T")


class CallableParser(Generic[T]):
    """Adapt ``fn(bytes) -> T`` to the ``ResultParser`` protocol."""

    def __init__(self, fn: Callable[[bytes], T]) -> None:
        self._fn = fn

    def parse(self, raw: bytes) -> T:
        return self._fn(raw)

    def __repr__(self) -> str:
        return f"CallableParser({self._fn!r})"


class JSONParser:
    """
    Decode a UTF-8 JSON body.

    When ``data_key`` is set, the body must be a JSON object and the value
    stored under that key is returned (for example ``"data"`` for a
    GraphQL response envelope).
    """

    def __init__(self, *, data_key: str | None = None) -> None:
        self.data_key = data_key

    def parse(self, raw: bytes) -> Any:
        decoded = json.loads(raw.decode("utf-8"))
        if self.data_key is None:
            return decoded
        if not isinstance(decoded, dict):
            raise ValueError("Response body is not a JSON object")
        if self.data_key not in decoded:
            raise ValueError(f"Response body has no '{self.data_key}' field")
        return decoded[self.data_key]


class ModelParser(Generic[T]):
    """Validate a JSON body against a pydantic model or any annotated type."""

    def __init__(self, model: type[T] | Any, *, data_key: str | None = None) -> None:
        self._adapter: TypeAdapter[T] = TypeAdapter(model)
        self._envelope = JSONParser(data_key=data_key) if data_key is not None else None

    def parse(self, raw: bytes) -> T:
        if self._envelope is None:
            return self._adapter.validate_json(raw)
        return self._adapter.validate_python(self._envelope.parse(raw))


def as_parser(parser: ResultParser[T] | Callable[[bytes], T]) -> ResultParser[T]:
    """Normalize a parser object or plain callable into a ``ResultParser``."""
    if isinstance(parser, ResultParser):
        return parser
    if callable(parser):
        return CallableParser(parser)
    raise TypeError(
        f"Result parser must define parse(bytes) or be callable, got {type(parser).__name__}"
    )
