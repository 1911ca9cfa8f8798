"""Sweego email adapter bound to an immutable configuration.

The adapter matches the host's generic email-adapter capability: a
``name`` plus an async ``send_email(message)`` that either returns the
vendor's success body or raises.

Contents:
    * :class:`SweegoAdapter` - Adapter object holding config and transport.
    * :func:`sweego_adapter` - Factory taking the four configuration values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from sweego_mail.domain.message import OutboundMessage, coerce_message
from sweego_mail.domain.payload import build_payload
from sweego_mail.domain.results import SweegoSuccess

from .config import AdapterConfig
from .transport import post_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SweegoAdapter:
    """Email adapter for the Sweego REST API.

    Each :meth:`send_email` call builds its own payload and performs its own
    request, so concurrent sends are independent.

    Attributes:
        config: Validated adapter settings.
        transport: Optional httpx transport used by every request.

    Example:
        >>> adapter = sweego_adapter(api_key="k", default_from_address="a@b.com", default_from_name="A")
        >>> adapter.name
        'sweego-rest'
        >>> adapter.default_from_address
        'a@b.com'
    """

    name: ClassVar[str] = "sweego-rest"

    config: AdapterConfig
    transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_config(
        cls, config: AdapterConfig, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> SweegoAdapter:
        """Build an adapter from an already validated configuration."""
        return cls(config=config, transport=transport)

    @property
    def default_from_address(self) -> str:
        return self.config.default_from_address

    @property
    def default_from_name(self) -> str:
        return self.config.default_from_name

    async def send_email(self, message: OutboundMessage | Mapping[str, Any]) -> SweegoSuccess:
        """Send *message* through Sweego.

        Args:
            message: Host message, as an OutboundMessage or a plain mapping.

        Returns:
            The vendor's success body, unchanged.

        Raises:
            InvalidAttachmentError: Before any request when an attachment is unusable.
            ProviderRejectedError: When Sweego answers with a non-200 status.
            httpx.HTTPError: On network-level failures.
        """
        payload = build_payload(
            coerce_message(message),
            self.config.default_from_address,
            self.config.default_from_name,
            self.config.dry_run,
        )
        return await post_payload(payload, api_key=self.config.api_key, transport=self.transport)


def sweego_adapter(
    *,
    api_key: str,
    default_from_address: str,
    default_from_name: str,
    dry_run: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SweegoAdapter:
    """Create a Sweego adapter from raw configuration values.

    Args:
        api_key: Sweego API key.
        default_from_address: Sender used when a message has no ``from``.
        default_from_name: Display name for the default sender.
        dry_run: Ask Sweego to accept but not deliver every email.
        transport: Optional httpx transport (tests, proxies, custom timeouts).

    Returns:
        Adapter bound to the validated configuration.

    Raises:
        pydantic.ValidationError: When a value fails validation.
    """
    config = AdapterConfig(
        api_key=api_key,
        default_from_address=default_from_address,
        default_from_name=default_from_name,
        dry_run=dry_run,
    )
    logger.debug("Sweego adapter created", extra={"config": repr(config)})
    return SweegoAdapter.from_config(config, transport=transport)


__all__ = [
    "SweegoAdapter",
    "sweego_adapter",
]
