"""Application ports: Protocol definitions for adapter objects and functions.

Each Protocol describes the shape the composition root wires in. Module-level
functions and adapter objects satisfy them via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``AdapterConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.message import OutboundMessage
from ..domain.results import SweegoSuccess

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.sweego.config import AdapterConfig


class EmailAdapter(Protocol):
    """Host-facing email-sending capability."""

    @property
    def name(self) -> str: ...

    @property
    def default_from_address(self) -> str: ...

    @property
    def default_from_name(self) -> str: ...

    async def send_email(self, message: OutboundMessage | Mapping[str, Any]) -> SweegoSuccess: ...


class BuildEmailAdapter(Protocol):
    """Create an email adapter bound to the given configuration."""

    def __call__(self, config: AdapterConfig) -> EmailAdapter: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadAdapterConfigFromDict(Protocol):
    """Load AdapterConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> AdapterConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BuildEmailAdapter",
    "DisplayConfig",
    "EmailAdapter",
    "GetConfig",
    "InitLogging",
    "LoadAdapterConfigFromDict",
]
