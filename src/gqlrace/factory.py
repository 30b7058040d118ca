"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: factory.py.
"""

from __future__ import annotations

from collections.abc import Mapping

from .client import GraphQLClient
from .errors import ConfigurationError
from .settings import ClientSettings
from .transport import UrllibTransport
from .types import Transport


def create_client(
    endpoint: str | None = None,
    *,
    settings: ClientSettings | None = None,
    transport: Transport | None = None,
    headers: Mapping[str, str] | None = None,
) -> GraphQLClient:
    """
    Build a client from explicit settings, falling back to the environment.

    A caller-provided ``transport`` is used as-is; otherwise a
    ``UrllibTransport`` is created with the configured timeout and headers.
    """
    cfg = settings or ClientSettings.from_env()
    url = (endpoint or cfg.endpoint).strip()
    if not url:
        raise ConfigurationError("Query endpoint URL is required (GQLRACE_ENDPOINT)")
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError("Query endpoint URL scheme must be http or https")

    if transport is None:
        transport = UrllibTransport(timeout_s=cfg.timeout_s, headers=headers)
    elif headers:
        raise ConfigurationError("headers apply only to the default transport")

    return GraphQLClient(url, transport, race_policy=cfg.race_policy())
