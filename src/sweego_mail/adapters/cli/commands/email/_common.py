"""Shared helpers for the send-email command.

Configuration loading, option parsing, and the exception-to-exit-code
mapping live here so the command body stays a straight line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, NoReturn

import httpx
import rich_click as click
from lib_layered_config import Config

from sweego_mail import __init__conf__
from sweego_mail.adapters.sweego.config import AdapterConfig
from sweego_mail.application.ports import LoadAdapterConfigFromDict
from sweego_mail.domain.errors import ConfigurationError, InvalidAttachmentError, ProviderRejectedError
from sweego_mail.domain.message import MessageAttachment
from sweego_mail.domain.results import SweegoSuccess

from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


def load_adapter_config(config: Config, loader: LoadAdapterConfigFromDict) -> AdapterConfig:
    """Read the ``[sweego]`` section or exit with CONFIG_ERROR (78).

    Raises:
        SystemExit: When the section is missing or invalid.
    """
    try:
        return loader(config.as_dict())
    except ConfigurationError as exc:
        logger.error("Sweego configuration error", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        click.echo(
            f"Set sweego.api_key and sweego.default_from_address, e.g. {__init__conf__.shell_command} "
            "--set sweego.api_key=... send-email ...",
            err=True,
        )
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def apply_dry_run_override(base_config: AdapterConfig, dry_run: bool | None) -> AdapterConfig:
    """Return *base_config* with ``dry_run`` replaced when the flag was given.

    Goes through ``model_validate`` so validators rerun on the merged values.

    Example:
        >>> cfg = AdapterConfig(api_key="k", default_from_address="a@b.com", default_from_name="A")
        >>> apply_dry_run_override(cfg, True).dry_run
        True
        >>> apply_dry_run_override(cfg, None) is cfg
        True
    """
    if dry_run is None:
        return base_config
    return AdapterConfig.model_validate({**base_config.model_dump(), "dry_run": dry_run})


def parse_header_options(raw_headers: tuple[str, ...]) -> dict[str, str | list[str]]:
    """Turn repeated ``NAME=VALUE`` options into a header mapping.

    A name given more than once collects its values into a list.

    Raises:
        click.BadParameter: When an entry lacks ``=`` or a name.

    Example:
        >>> parse_header_options(("X-Tag=a", "X-Tag=b", "X-Id=1"))
        {'X-Tag': ['a', 'b'], 'X-Id': '1'}
    """
    headers: dict[str, str | list[str]] = {}
    for raw in raw_headers:
        name, sep, value = raw.partition("=")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(f"Invalid header {raw!r}: expected NAME=VALUE", param_hint="--header")
        existing = headers.get(name)
        if existing is None:
            headers[name] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            headers[name] = [existing, value]
    return headers


def read_attachments(paths: tuple[str, ...]) -> list[MessageAttachment] | None:
    """Read attachment files as bytes, keyed by their base name.

    Raises:
        FileNotFoundError: When a path does not exist.
    """
    if not paths:
        return None
    attachments: list[MessageAttachment] = []
    for raw in paths:
        path = Path(raw)
        attachments.append(MessageAttachment(filename=path.name, content=path.read_bytes()))
    return attachments


def execute_with_email_error_handling(
    *,
    operation: Callable[[], SweegoSuccess],
    recipients: list[str],
) -> SweegoSuccess:
    """Run *operation* and map failures onto exit codes.

    Exceptions are caught most specific first:

    1. InvalidAttachmentError -> INVALID_ARGUMENT (22)
    2. FileNotFoundError -> FILE_NOT_FOUND (2)
    3. ProviderRejectedError -> DELIVERY_FAILURE (69)
    4. httpx.HTTPError -> DELIVERY_FAILURE (69)

    Anything else propagates to the entry point, which prints it through
    lib_cli_exit_tools.

    Raises:
        SystemExit: On any mapped failure.
    """
    try:
        result = operation()
    except InvalidAttachmentError as exc:
        _handle_send_error(exc, "Invalid attachment", "Invalid attachment", exit_code=ExitCode.INVALID_ARGUMENT)
    except FileNotFoundError as exc:
        _handle_send_error(exc, "Attachment file not found", "Attachment file not found", exit_code=ExitCode.FILE_NOT_FOUND)
    except ProviderRejectedError as exc:
        _handle_send_error(exc, "Sweego rejected email", "Sweego rejected the email", exit_code=ExitCode.DELIVERY_FAILURE)
    except httpx.HTTPError as exc:
        _handle_send_error(exc, "Sweego request failed", "Could not reach Sweego", exit_code=ExitCode.DELIVERY_FAILURE)

    transaction_id: Any = result.get("transaction_id") if isinstance(result, dict) else None
    click.echo("\nEmail sent successfully!")
    if transaction_id:
        click.echo(f"Transaction ID: {transaction_id}")
    logger.info("Email sent via CLI", extra={"recipients": recipients, "transaction_id": transaction_id})
    return result


def _handle_send_error(
    exc: Exception,
    log_message: str,
    user_message: str,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
) -> NoReturn:
    """Log *exc*, print it for the user, and exit with *exit_code*.

    Raises:
        SystemExit: Always.
    """
    logger.error(log_message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code) from exc


__all__ = [
    "apply_dry_run_override",
    "execute_with_email_error_handling",
    "load_adapter_config",
    "parse_header_options",
    "read_attachments",
]
