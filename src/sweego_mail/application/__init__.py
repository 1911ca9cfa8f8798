"""Application layer - port definitions.

Contains the Protocol definitions adapter implementations satisfy.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter objects and functions
"""

from __future__ import annotations

from .ports import (
    BuildEmailAdapter,
    DisplayConfig,
    EmailAdapter,
    GetConfig,
    InitLogging,
    LoadAdapterConfigFromDict,
)

__all__ = [
    "BuildEmailAdapter",
    "DisplayConfig",
    "EmailAdapter",
    "GetConfig",
    "InitLogging",
    "LoadAdapterConfigFromDict",
]
