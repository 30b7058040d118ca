"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Typed policy for redundant request racing.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ConfigurationError

DEFAULT_FAN_OUT = 3
DEFAULT_SUCCESS_STATUS = 200


@dataclass(frozen=True, slots=True)
class RacePolicy:
    """
    Fan-out and winner selection for one request.

    Attributes:
        fan_out: Number of identical attempts launched concurrently.
        success_status: The single status code treated as success.
        prefer_success: When false, the first attempt to complete wins even
            if it failed. When true, the first successful attempt wins and a
            failure is reported only after every attempt failed.
    """

    fan_out: int = DEFAULT_FAN_OUT
    success_status: int = DEFAULT_SUCCESS_STATUS
    prefer_success: bool = False

    def __post_init__(self) -> None:
        if self.fan_out < 1:
            raise ConfigurationError("RacePolicy.fan_out must be >= 1")
        if not 100 <= self.success_status <= 599:
            raise ConfigurationError("RacePolicy.success_status must be an HTTP status code")
