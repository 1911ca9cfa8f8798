"""In-memory email adapter for testing.

Provides an adapter that satisfies the EmailAdapter protocol but records
payloads instead of calling the Sweego API.

Contents:
    * :class:`EmailSpy` - Captures sends for test assertions.
    * :func:`build_email_spy` - BuildEmailAdapter implementation for a spy.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from sweego_mail.domain.message import OutboundMessage, coerce_message
from sweego_mail.domain.payload import build_payload
from sweego_mail.domain.results import SweegoSuccess

from ..sweego.config import AdapterConfig


def _empty_payload_list() -> list[dict[str, Any]]:
    return []


def _default_response() -> SweegoSuccess:
    return {"channel": "email", "provider": "sweego", "swg_uids": {}, "transaction_id": "in-memory"}


@dataclass
class EmailSpy:
    """Captures send operations for test assertions.

    Payloads are built with the real mapping, so attachment errors still
    surface; nothing leaves the process.

    Attributes:
        config: Adapter settings used to build payloads.
        sent_payloads: Wire payloads of every send, in call order.
        response: Success body returned by each send.
        raise_exception: When set, sends record the payload then raise it.

    Example:
        >>> import asyncio
        >>> cfg = AdapterConfig(api_key="k", default_from_address="a@b.com", default_from_name="A")
        >>> spy = EmailSpy(config=cfg)
        >>> asyncio.run(spy.send_email({"to": "c@d.com", "subject": "Hi"}))["transaction_id"]
        'in-memory'
        >>> spy.sent_payloads[0]["recipients"]
        [{'email': 'c@d.com'}]
    """

    name: ClassVar[str] = "in-memory"

    config: AdapterConfig
    sent_payloads: list[dict[str, Any]] = field(default_factory=_empty_payload_list)
    response: SweegoSuccess = field(default_factory=_default_response)
    raise_exception: Exception | None = None

    @property
    def default_from_address(self) -> str:
        return self.config.default_from_address

    @property
    def default_from_name(self) -> str:
        return self.config.default_from_name

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.sent_payloads.clear()
        self.raise_exception = None

    async def send_email(self, message: OutboundMessage | Mapping[str, Any]) -> SweegoSuccess:
        """Record the wire payload and answer from spy state.

        Raises:
            InvalidAttachmentError: When an attachment cannot be mapped.
            Exception: If raise_exception is set, raises that exception.
        """
        payload = build_payload(
            coerce_message(message),
            self.config.default_from_address,
            self.config.default_from_name,
            self.config.dry_run,
        )
        self.sent_payloads.append(payload.to_wire())
        if self.raise_exception is not None:
            raise self.raise_exception
        return self.response


def build_email_spy(config: AdapterConfig) -> EmailSpy:
    """Return a fresh EmailSpy bound to *config*."""
    return EmailSpy(config=config)


__all__ = [
    "EmailSpy",
    "build_email_spy",
]
