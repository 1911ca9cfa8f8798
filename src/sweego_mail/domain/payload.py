"""Mapping of an :class:`OutboundMessage` onto the Sweego send payload.

Pure functions only; the result is a frozen :class:`WirePayload` whose
:meth:`WirePayload.to_wire` output is what the transport serializes.

Contents:
    * :func:`map_attachments` - Host attachments to binary wire attachments.
    * :func:`map_headers` - Flatten list-valued headers.
    * :func:`coerce_body` - Text/HTML body to string.
    * :func:`build_payload` - Assemble the full payload.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from .addresses import AddressSpec, map_addresses, map_from_address, map_reply_to
from .errors import InvalidAttachmentError
from .message import AttachmentLike, MessageAttachment, OutboundMessage

#: Vendor identifier sent in every payload.
PROVIDER: Final[str] = "sweego"

#: Channel sent in every payload.
CHANNEL: Final[str] = "email"

#: Separator used when a header carries several values.
HEADER_VALUE_SEPARATOR: Final[str] = ", "


@dataclass(frozen=True, slots=True)
class WireAttachment:
    """Attachment with binary content, ready for the wire."""

    filename: str
    content: bytes

    def to_wire(self) -> dict[str, Any]:
        return {"filename": self.filename, "content": self.content}


@dataclass(frozen=True, slots=True)
class WirePayload:
    """Body of ``POST /send``.

    Optional members left as ``None`` are omitted from :meth:`to_wire`;
    ``dry_run`` is emitted only when true.
    """

    recipients: tuple[AddressSpec, ...]
    from_: AddressSpec
    subject: str
    provider: str = PROVIDER
    channel: str = CHANNEL
    dry_run: bool = False
    message_txt: str | None = None
    message_html: str | None = None
    attachments: tuple[WireAttachment, ...] | None = None
    headers: Mapping[str, str] | None = None
    reply_to: AddressSpec | None = None

    def to_wire(self) -> dict[str, Any]:
        """Return the payload using the vendor's key spelling.

        Example:
            >>> payload = WirePayload(
            ...     recipients=(AddressSpec("to@example.com"),),
            ...     from_=AddressSpec("from@example.com", "From"),
            ...     subject="Hi",
            ... )
            >>> payload.to_wire()["from"]
            {'email': 'from@example.com', 'name': 'From'}
            >>> "dry-run" in payload.to_wire()
            False
        """
        wire: dict[str, Any] = {
            "provider": self.provider,
            "channel": self.channel,
            "recipients": [recipient.to_wire() for recipient in self.recipients],
            "from": self.from_.to_wire(),
            "subject": self.subject,
        }
        if self.attachments:
            wire["attachments"] = [attachment.to_wire() for attachment in self.attachments]
        if self.dry_run:
            wire["dry-run"] = True
        if self.headers is not None:
            wire["headers"] = dict(self.headers)
        if self.message_txt is not None:
            wire["message-txt"] = self.message_txt
        if self.message_html is not None:
            wire["message-html"] = self.message_html
        if self.reply_to is not None:
            wire["reply_to"] = self.reply_to.to_wire()
        return wire


def _attachment_fields(attachment: AttachmentLike) -> tuple[Any, Any]:
    if isinstance(attachment, MessageAttachment):
        return attachment.filename, attachment.content
    return attachment.get("filename"), attachment.get("content")


def map_attachments(attachments: Sequence[AttachmentLike] | None) -> list[WireAttachment] | None:
    """Convert host attachments into binary wire attachments.

    Raises:
        InvalidAttachmentError: When filename or content is missing, or the
            content is neither text nor bytes.

    Examples:
        >>> map_attachments(None) is None
        True
        >>> map_attachments([{"filename": "a.txt", "content": "hé"}])[0].content
        b'h\\xc3\\xa9'
        >>> map_attachments([{"filename": "a.txt", "content": ""}])  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidAttachmentError: Attachment is missing filename or content
    """
    if attachments is None:
        return None

    mapped: list[WireAttachment] = []
    for attachment in attachments:
        filename, content = _attachment_fields(attachment)
        if not filename or content is None or content == "":
            raise InvalidAttachmentError("Attachment is missing filename or content")
        if isinstance(content, str):
            mapped.append(WireAttachment(filename=filename, content=content.encode("utf-8")))
        elif isinstance(content, (bytes, bytearray, memoryview)):
            mapped.append(WireAttachment(filename=filename, content=bytes(content)))
        else:
            raise InvalidAttachmentError("Attachment content must be a string or bytes")
    return mapped


def map_headers(headers: Any) -> dict[str, str]:
    """Flatten header values to single strings.

    Lists of strings are joined with ``", "``; any other value is dropped.

    Examples:
        >>> map_headers({"X-Tag": ["a", "b"], "X-One": "1", "X-Bad": 3})
        {'X-Tag': 'a, b', 'X-One': '1'}
        >>> map_headers("not a mapping")
        {}
    """
    flattened: dict[str, str] = {}
    if not isinstance(headers, Mapping):
        return flattened

    for key, value in headers.items():
        if isinstance(value, str):
            flattened[str(key)] = value
        elif isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            flattened[str(key)] = HEADER_VALUE_SEPARATOR.join(value)
    return flattened


def coerce_body(body: Any) -> str:
    """Return a message body as text.

    Examples:
        >>> coerce_body("<p>Hi</p>")
        '<p>Hi</p>'
        >>> coerce_body(b"plain")
        'plain'
    """
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return str(body) or ""


def build_payload(
    message: OutboundMessage,
    default_from_address: str,
    default_from_name: str,
    dry_run: bool = False,
) -> WirePayload:
    """Assemble the Sweego payload for *message*.

    cc and bcc are not part of the mapping; only ``to`` becomes recipients.

    Args:
        message: Host message to send.
        default_from_address: Sender used when the message carries none.
        default_from_name: Display name paired with the default sender.
        dry_run: Ask the vendor to accept without delivering.

    Returns:
        Frozen payload ready for serialization.

    Raises:
        InvalidAttachmentError: When an attachment cannot be mapped.

    Example:
        >>> payload = build_payload(
        ...     OutboundMessage(to='"Zapal" <hello+to@zapal.tech>', subject="Hi", text="Body"),
        ...     "hello+default@zapal.tech",
        ...     "Zapal",
        ...     dry_run=True,
        ... )
        >>> wire = payload.to_wire()
        >>> wire["recipients"], wire["from"]["email"], wire["dry-run"]
        ([{'email': 'hello+to@zapal.tech', 'name': 'Zapal'}], 'hello+default@zapal.tech', True)
    """
    attachments = map_attachments(message.attachments)

    return WirePayload(
        recipients=tuple(map_addresses(message.to)),
        from_=map_from_address(message.from_address, default_from_name, default_from_address),
        subject=message.subject if message.subject is not None else "",
        dry_run=bool(dry_run),
        attachments=tuple(attachments) if attachments else None,
        headers=map_headers(message.headers) if message.headers is not None else None,
        message_txt=coerce_body(message.text) if message.text else None,
        message_html=coerce_body(message.html) if message.html else None,
        reply_to=map_reply_to(message.reply_to) if message.reply_to else None,
    )


__all__ = [
    "CHANNEL",
    "HEADER_VALUE_SEPARATOR",
    "PROVIDER",
    "WireAttachment",
    "WirePayload",
    "build_payload",
    "coerce_body",
    "map_attachments",
    "map_headers",
]
