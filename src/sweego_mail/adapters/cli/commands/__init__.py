"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Email commands from :mod:`.email` (subpackage)
"""

from __future__ import annotations

from .config import cli_config
from .email import cli_send_email
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_info",
    "cli_send_email",
]
