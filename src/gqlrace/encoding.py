"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Variable encoding and form payload construction.

Variables are serialized to canonical JSON: keys sorted, compact separators,
non-ASCII kept as UTF-8. Equal values always encode to the same string.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from pydantic import BaseModel

from .errors import EncodingError

QUERY_FIELD = "query"
VARIABLES_FIELD = "variables"


def _default(value: Any) -> Any:
    """Serialization hook for values ``json`` does not handle natively."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    hook = getattr(value, "__json__", None)
    if callable(hook):
        return hook()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_variables(variables: Any) -> str:
    """Serialize query variables into one JSON form field value."""
    try:
        return json.dumps(
            variables,
            default=_default,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except Exception as e:  # noqa: BLE001
        raise EncodingError(f"Failed to encode query variables: {e}") from e


def build_form_payload(query: str, encoded_variables: str) -> dict[str, str]:
    """Build the form fields posted to the endpoint."""
    return {QUERY_FIELD: query, VARIABLES_FIELD: encoded_variables}
