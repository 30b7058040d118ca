from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from gqlrace import EncodingError, build_form_payload, encode_variables


class _Filter(BaseModel):
    name: str
    tags: list[str] = []


@dataclass
class _Page:
    first: int
    after: str | None = None


class _Cursor:
    def __init__(self, value: str) -> None:
        self.value = value

    def __json__(self):
        return {"cursor": self.value}


class _BrokenHook:
    def __json__(self):
        raise RuntimeError("hook failed")


def test_encode_none_and_empty_values():
    assert encode_variables(None) == "null"
    assert encode_variables({}) == "{}"
    assert encode_variables([]) == "[]"


def test_encoding_is_canonical_and_order_independent():
    a = {"b": 1, "a": {"y": [1, 2], "x": True}}
    b = {"a": {"x": True, "y": [1, 2]}, "b": 1}

    assert encode_variables(a) == encode_variables(a)
    assert encode_variables(a) == encode_variables(b)
    assert encode_variables(a) == '{"a":{"x":true,"y":[1,2]},"b":1}'


def test_encoding_keeps_non_ascii_text():
    assert encode_variables({"name": "Zoë"}) == '{"name":"Zoë"}'


def test_encoding_supports_models_dataclasses_and_hooks():
    encoded = encode_variables(
        {
            "filter": _Filter(name="books", tags=["new"]),
            "page": _Page(first=10),
            "cursor": _Cursor("abc"),
        }
    )

    assert json.loads(encoded) == {
        "filter": {"name": "books", "tags": ["new"]},
        "page": {"first": 10, "after": None},
        "cursor": {"cursor": "abc"},
    }


def test_failing_serialization_hook_raises_encoding_error():
    with pytest.raises(EncodingError) as exc_info:
        encode_variables({"v": _BrokenHook()})

    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.parametrize(
    "value",
    [
        {"v": object()},
        {"v": float("nan")},
        {"v": {1, 2}},
        {1: "a", "b": 2},
    ],
)
def test_unserializable_values_raise_encoding_error(value):
    with pytest.raises(EncodingError):
        encode_variables(value)


def test_circular_reference_raises_encoding_error():
    value: dict = {}
    value["self"] = value

    with pytest.raises(EncodingError):
        encode_variables(value)


def test_build_form_payload():
    assert build_form_payload("{ viewer { id } }", '{"a":1}') == {
        "query": "{ viewer { id } }",
        "variables": '{"a":1}',
    }
