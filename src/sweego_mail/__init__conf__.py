"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; keep them in sync when releasing.
"""

from __future__ import annotations

name = "sweego_mail"
title = "Send transactional email through the Sweego REST API"
version = "0.1.0"
author = "Zapal"
author_email = "hello@zapal.tech"
shell_command = "sweego-mail"

# lib_layered_config identifiers that determine the platform-specific
# configuration paths (XDG on Linux, Application Support on macOS, AppData on Windows).
LAYEREDCONF_VENDOR: str = "zapal"
LAYEREDCONF_APP: str = "sweego-mail"
LAYEREDCONF_SLUG: str = "sweego-mail"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for sweego_mail:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
