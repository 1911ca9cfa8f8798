"""Display configuration through lib_layered_config's Rich renderer.

The ``[sweego]`` API key is masked before rendering; log output is flushed
first so it does not interleave with the display.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from sweego_mail.domain.enums import OutputFormat

_REDACTED = "[REDACTED]"


def redact_secrets(config: Config) -> Config:
    """Return *config* with a non-empty ``sweego.api_key`` masked.

    Example:
        >>> cfg = Config({"sweego": {"api_key": "secret"}}, {})
        >>> redact_secrets(cfg)["sweego"]["api_key"]
        '[REDACTED]'
        >>> empty = Config({}, {})
        >>> redact_secrets(empty) is empty
        True
    """
    section: Any = config.get("sweego", default=None)
    if not isinstance(section, dict) or not cast("dict[str, Any]", section).get("api_key"):
        return config
    return config.with_overrides({"sweego": {"api_key": _REDACTED}})


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render *config* as TOML-like text or JSON.

    Args:
        config: Loaded layered configuration.
        output_format: ``OutputFormat.HUMAN`` or ``OutputFormat.JSON``.
        section: Only display this section when given.
        console: Rich console override, mainly for tests.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: If the requested section doesn't exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(redact_secrets(config), output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config", "redact_secrets"]
