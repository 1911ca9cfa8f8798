"""Email CLI commands."""

from __future__ import annotations

from .send_email import cli_send_email

__all__ = ["cli_send_email"]
