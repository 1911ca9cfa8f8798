"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Email services
from ..adapters.sweego.adapter import SweegoAdapter
from ..adapters.sweego.config import AdapterConfig, load_adapter_config_from_dict

# Static conformance assertions: pyright checks each adapter against
# its Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.email import EmailSpy
    from ..application.ports import (
        BuildEmailAdapter,
        DisplayConfig,
        EmailAdapter,
        GetConfig,
        InitLogging,
        LoadAdapterConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_adapter_config: LoadAdapterConfigFromDict = load_adapter_config_from_dict
    _assert_init_logging: InitLogging = init_logging


def build_sweego_adapter(config: AdapterConfig) -> EmailAdapter:
    """Create the production Sweego adapter for *config*."""
    return SweegoAdapter.from_config(config)


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_adapter_config_from_dict: LoadAdapterConfigFromDict
    build_email_adapter: BuildEmailAdapter
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_adapter_config_from_dict=load_adapter_config_from_dict,
        build_email_adapter=build_sweego_adapter,
        init_logging=init_logging,
    )


def build_testing(*, spy: EmailSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Configuration still goes through the real ``[sweego]`` loader so tests
    exercise validation; only I/O boundaries are replaced.

    Args:
        spy: Optional EmailSpy returned for every adapter build. When None,
            each build creates a fresh spy bound to the loaded config.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        build_email_spy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    def _build_email_adapter(config: AdapterConfig) -> EmailAdapter:
        return spy if spy is not None else build_email_spy(config)

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_adapter_config_from_dict=load_adapter_config_from_dict,
        build_email_adapter=_build_email_adapter,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    # Email
    "build_sweego_adapter",
    "load_adapter_config_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
