"""Domain layer - pure message mapping with no I/O or framework dependencies.

Contents:
    * :mod:`.addresses` - Address string parsing and normalization
    * :mod:`.message` - Host-side message model
    * :mod:`.payload` - Sweego wire payload assembly
    * :mod:`.results` - Response shapes and error aggregation
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .addresses import (
    Address,
    AddressSpec,
    extract_email,
    extract_name,
    map_addresses,
    map_from_address,
    map_reply_to,
    parse_address_string,
)
from .enums import OutputFormat
from .errors import ConfigurationError, EmailAdapterError, InvalidAttachmentError, ProviderRejectedError
from .message import MessageAttachment, OutboundMessage
from .payload import WireAttachment, WirePayload, build_payload, map_attachments, map_headers
from .results import SweegoSuccess, format_provider_error

__all__ = [
    # Addresses
    "Address",
    "AddressSpec",
    "extract_email",
    "extract_name",
    "map_addresses",
    "map_from_address",
    "map_reply_to",
    "parse_address_string",
    # Message and payload
    "MessageAttachment",
    "OutboundMessage",
    "WireAttachment",
    "WirePayload",
    "build_payload",
    "map_attachments",
    "map_headers",
    # Results
    "SweegoSuccess",
    "format_provider_error",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "EmailAdapterError",
    "InvalidAttachmentError",
    "ProviderRejectedError",
]
