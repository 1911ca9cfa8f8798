"""Sweego adapter configuration model and loader.

Provides the AdapterConfig Pydantic model for validated, immutable adapter
settings and the loader function to create it from configuration
dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from btx_lib_mail import validate_email_address
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from sweego_mail.domain.errors import ConfigurationError


class AdapterConfig(BaseModel):
    """Validated, immutable Sweego adapter configuration.

    Captured once when the adapter is built and only read afterwards, so
    concurrent sends can share it without coordination.

    Example:
        >>> config = AdapterConfig(
        ...     api_key="key",
        ...     default_from_address="hello@example.com",
        ...     default_from_name="Example",
        ... )
        >>> config.dry_run
        False
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    default_from_address: str
    default_from_name: str
    dry_run: bool = False

    @field_validator("api_key", "default_from_address", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: Any) -> Any:
        """Trim surrounding whitespace picked up from env files."""
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> AdapterConfig:
        """Catch blank keys and malformed sender addresses early.

        Raises:
            ValueError: When configuration values are invalid.

        Example:
            >>> AdapterConfig(api_key="", default_from_address="a@b.com", default_from_name="A")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if not self.api_key:
            raise ValueError("api_key must not be empty")

        validate_email_address(self.default_from_address)

        return self

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Example:
            >>> config = AdapterConfig(api_key="secret123", default_from_address="a@b.com", default_from_name="A")
            >>> "secret123" in repr(config)
            False
            >>> "[REDACTED]" in repr(config)
            True
        """
        fields: list[str] = []
        for name, value in self:
            if name == "api_key":
                fields.append(f"{name}='[REDACTED]'")
            else:
                fields.append(f"{name}={value!r}")
        return f"AdapterConfig({', '.join(fields)})"

    __str__ = __repr__


def load_adapter_config_from_dict(config_dict: Mapping[str, Any]) -> AdapterConfig:
    """Load AdapterConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    AdapterConfig model, reading the ``[sweego]`` section.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        Validated adapter settings.

    Raises:
        ConfigurationError: When the section is missing, not a table, or
            holds invalid values.

    Example:
        >>> cfg = load_adapter_config_from_dict(
        ...     {"sweego": {"api_key": "k", "default_from_address": "a@b.com", "default_from_name": "A"}}
        ... )
        >>> cfg.default_from_name
        'A'
    """
    section: Any = config_dict.get("sweego")
    if not isinstance(section, Mapping):
        raise ConfigurationError("No [sweego] configuration section found")

    try:
        return AdapterConfig.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        problems = "; ".join(
            f"sweego.{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid Sweego configuration ({problems})") from exc


__all__ = [
    "AdapterConfig",
    "load_adapter_config_from_dict",
]
