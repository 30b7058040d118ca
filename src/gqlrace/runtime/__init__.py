"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: runtime/__init__.py.
"""

from .contracts import DEFAULT_FAN_OUT, DEFAULT_SUCCESS_STATUS, RacePolicy
from .executor import RacingExecutor
from .racing import Racer, RaceWinner

__all__ = [
    "DEFAULT_FAN_OUT",
    "DEFAULT_SUCCESS_STATUS",
    "RacePolicy",
    "RacingExecutor",
    "Racer",
    "RaceWinner",
]
