"""Send email CLI command.

Builds an :class:`~sweego_mail.domain.message.OutboundMessage` from the
options and hands it to the configured email adapter.
"""

from __future__ import annotations

import asyncio
import logging

import lib_log_rich.runtime
import rich_click as click

from sweego_mail.domain.message import OutboundMessage
from sweego_mail.domain.results import SweegoSuccess

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import (
    apply_dry_run_override,
    execute_with_email_error_handling,
    load_adapter_config,
    parse_header_options,
    read_attachments,
)

logger = logging.getLogger(__name__)


@click.command("send-email", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--to", "recipients", multiple=True, required=True, help="Recipient address (repeatable)")
@click.option("--subject", required=True, help="Email subject line")
@click.option("--text", default=None, help="Plain-text body")
@click.option("--html", default=None, help="HTML body")
@click.option(
    "--from", "from_address", default=None, help="Sender, e.g. 'Name <a@b.com>' (defaults to the configured sender)"
)
@click.option("--reply-to", "reply_to", multiple=True, help="Reply-to address (repeatable)")
@click.option("--header", "headers", multiple=True, metavar="NAME=VALUE", help="Custom header (repeatable)")
@click.option(
    "--attachment",
    "attachments",
    multiple=True,
    type=click.Path(path_type=str),
    help="File to attach (repeatable)",
)
@click.option("--dry-run/--no-dry-run", default=None, help="Override sweego.dry_run for this send")
@click.pass_context
def cli_send_email(
    ctx: click.Context,
    recipients: tuple[str, ...],
    subject: str,
    text: str | None,
    html: str | None,
    from_address: str | None,
    reply_to: tuple[str, ...],
    headers: tuple[str, ...],
    attachments: tuple[str, ...],
    dry_run: bool | None,
) -> None:
    """Send an email through the Sweego API using the ``[sweego]`` settings."""
    cli_ctx = get_cli_context(ctx)
    resolved_recipients = list(recipients)
    extra = {"command": "send-email", "recipients": resolved_recipients, "subject": subject}

    with lib_log_rich.runtime.bind(job_id="cli-send-email", extra=extra):
        adapter_config = load_adapter_config(cli_ctx.config, cli_ctx.services.load_adapter_config_from_dict)
        adapter_config = apply_dry_run_override(adapter_config, dry_run)
        parsed_headers = parse_header_options(headers)
        adapter = cli_ctx.services.build_email_adapter(adapter_config)

        def _send() -> SweegoSuccess:
            message = OutboundMessage(
                to=resolved_recipients,
                from_address=from_address,
                subject=subject,
                text=text,
                html=html,
                reply_to=list(reply_to) or None,
                headers=parsed_headers or None,
                attachments=read_attachments(attachments),
            )
            return asyncio.run(adapter.send_email(message))

        logger.info(
            "Sending email",
            extra={
                "adapter": adapter.name,
                "dry_run": adapter_config.dry_run,
                "attachment_count": len(attachments),
            },
        )
        execute_with_email_error_handling(operation=_send, recipients=resolved_recipients)


__all__ = ["cli_send_email"]
