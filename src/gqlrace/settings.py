"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Client settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime.contracts import DEFAULT_FAN_OUT, DEFAULT_SUCCESS_STATUS, RacePolicy


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Explicit settings used to build a ``GraphQLClient``."""

    endpoint: str = ""
    fan_out: int = DEFAULT_FAN_OUT
    timeout_s: float = 30.0
    success_status: int = DEFAULT_SUCCESS_STATUS
    prefer_success: bool = False

    def __post_init__(self) -> None:
        if self.timeout_s <= 0:
            raise ConfigurationError("ClientSettings.timeout_s must be > 0")
        # Validates fan_out and success_status.
        self.race_policy()

    def race_policy(self) -> RacePolicy:
        """Build the racing policy described by these settings."""
        return RacePolicy(
            fan_out=self.fan_out,
            success_status=self.success_status,
            prefer_success=self.prefer_success,
        )

    @staticmethod
    def from_env() -> "ClientSettings":
        """Load settings from environment variables."""
        return ClientSettings(
            endpoint=os.getenv("GQLRACE_ENDPOINT", ""),
            fan_out=_env_number("GQLRACE_FAN_OUT", str(DEFAULT_FAN_OUT), int),
            timeout_s=_env_number("GQLRACE_TIMEOUT_S", "30", float),
            success_status=_env_number(
                "GQLRACE_SUCCESS_STATUS", str(DEFAULT_SUCCESS_STATUS), int
            ),
            prefer_success=os.getenv("GQLRACE_PREFER_SUCCESS", "").strip().lower()
            in {"1", "true", "yes", "on"},
        )
