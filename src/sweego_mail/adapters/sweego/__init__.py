"""Sweego adapter - transactional email over the Sweego REST API.

Structure:
    * :mod:`.config` - Adapter configuration model and loader
    * :mod:`.transport` - Single-request HTTP transport
    * :mod:`.adapter` - Adapter object and factory

Contents:
    * :class:`.config.AdapterConfig` - Adapter configuration container
    * :func:`.config.load_adapter_config_from_dict` - Config dict loader
    * :class:`.adapter.SweegoAdapter` - Host-facing email adapter
    * :func:`.adapter.sweego_adapter` - Adapter factory
    * :func:`.transport.post_payload` - POST and response classification
"""

from __future__ import annotations

from .adapter import SweegoAdapter, sweego_adapter
from .config import AdapterConfig, load_adapter_config_from_dict
from .transport import SWEEGO_SEND_URL, post_payload

__all__ = [
    "AdapterConfig",
    "SWEEGO_SEND_URL",
    "SweegoAdapter",
    "load_adapter_config_from_dict",
    "post_payload",
    "sweego_adapter",
]
