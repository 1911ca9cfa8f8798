"""Host-side message model handed to the send operation.

Hosts either build an :class:`OutboundMessage` directly or pass a plain
mapping; :meth:`OutboundMessage.from_mapping` accepts both the
nodemailer-style keys (``from``, ``replyTo``) and snake_case keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .addresses import AddressInput, AddressLike


@dataclass(frozen=True, slots=True)
class MessageAttachment:
    """Attachment as supplied by the host.

    ``content`` is typed loosely on purpose: the mapping step decides
    whether it is usable and raises ``InvalidAttachmentError`` otherwise.
    """

    filename: str | None
    content: Any


AttachmentLike = MessageAttachment | Mapping[str, Any]
"""Attachment as a dataclass or a ``{"filename", "content"}`` mapping."""


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """Generic email message supplied by the host.

    Example:
        >>> msg = OutboundMessage(to="a@example.com", subject="Hi", text="Hello")
        >>> msg.subject
        'Hi'
        >>> msg.from_address is None
        True
    """

    to: AddressInput = None
    from_address: AddressLike | None = None
    cc: AddressInput = None
    bcc: AddressInput = None
    subject: str | None = None
    text: Any = None
    html: Any = None
    reply_to: AddressInput = None
    headers: Mapping[str, Any] | None = None
    attachments: Sequence[AttachmentLike] | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> OutboundMessage:
        """Build a message from a host mapping.

        Example:
            >>> msg = OutboundMessage.from_mapping({"from": "a@example.com", "replyTo": "b@example.com"})
            >>> (msg.from_address, msg.reply_to)
            ('a@example.com', 'b@example.com')
        """
        return cls(
            to=data.get("to"),
            from_address=_first_present(data, "from", "from_address"),
            cc=data.get("cc"),
            bcc=data.get("bcc"),
            subject=data.get("subject"),
            text=data.get("text"),
            html=data.get("html"),
            reply_to=_first_present(data, "replyTo", "reply_to"),
            headers=data.get("headers"),
            attachments=data.get("attachments"),
        )


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def coerce_message(message: OutboundMessage | Mapping[str, Any]) -> OutboundMessage:
    """Return *message* as an :class:`OutboundMessage`."""
    if isinstance(message, OutboundMessage):
        return message
    return OutboundMessage.from_mapping(message)


__all__ = [
    "AttachmentLike",
    "MessageAttachment",
    "OutboundMessage",
    "coerce_message",
]
