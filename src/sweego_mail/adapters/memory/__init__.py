"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.email` - In-memory email adapter (EmailSpy)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .email import EmailSpy, build_email_spy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from sweego_mail.application.ports import (
        BuildEmailAdapter,
        DisplayConfig,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_build_email_spy: BuildEmailAdapter = build_email_spy

__all__ = [
    "EmailSpy",
    "build_email_spy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
