"""Public package surface for the Sweego email adapter.

Routes imports through the architectural layers:
- Domain exports: message model, payload mapping, errors
- Adapter exports: the Sweego adapter factory and its configuration
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.sweego import AdapterConfig, SweegoAdapter, load_adapter_config_from_dict, sweego_adapter

# Domain exports
from .domain.addresses import Address, AddressSpec
from .domain.errors import ConfigurationError, EmailAdapterError, InvalidAttachmentError, ProviderRejectedError
from .domain.message import MessageAttachment, OutboundMessage
from .domain.payload import WirePayload, build_payload
from .domain.results import SweegoSuccess

__all__ = [
    "Address",
    "AddressSpec",
    "AdapterConfig",
    "ConfigurationError",
    "EmailAdapterError",
    "InvalidAttachmentError",
    "MessageAttachment",
    "OutboundMessage",
    "ProviderRejectedError",
    "SweegoAdapter",
    "SweegoSuccess",
    "WirePayload",
    "build_payload",
    "load_adapter_config_from_dict",
    "print_info",
    "sweego_adapter",
]
