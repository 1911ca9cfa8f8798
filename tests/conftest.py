"""Shared pytest fixtures for adapter, CLI, and module-entry tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import httpx
import lib_cli_exit_tools
import orjson
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from sweego_mail.adapters.memory.email import EmailSpy
    from sweego_mail.adapters.sweego.config import AdapterConfig
    from sweego_mail.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

SWEEGO_SECTION: dict[str, Any] = {
    "api_key": "test-api-key",
    "default_from_address": "hello+default@zapal.tech",
    "default_from_name": "Zapal",
    "dry_run": False,
}

SUCCESS_BODY: dict[str, Any] = {
    "channel": "email",
    "provider": "sweego",
    "swg_uids": {"hello+to@zapal.tech": "uid-1"},
    "transaction_id": "tx-123",
}


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for clean output (e.g., JSON parsing) so log lines
    on stderr do not contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for commands needing no injection."""
    from sweego_mail.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a test may monkeypatch the
    loader and lose its cache_clear attribute.
    """
    from sweego_mail.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def sweego_section() -> dict[str, Any]:
    """Return a fresh copy of a valid ``[sweego]`` section."""
    return dict(SWEEGO_SECTION)


@pytest.fixture
def adapter_config() -> AdapterConfig:
    """Return a validated AdapterConfig matching ``SWEEGO_SECTION``."""
    from sweego_mail.adapters.sweego.config import AdapterConfig

    return AdapterConfig.model_validate(SWEEGO_SECTION)


@dataclass
class RecordedExchange:
    """Requests seen by a mock Sweego endpoint and the answer it gives."""

    status_code: int = 200
    body: Any = None
    reason_phrase: bytes | None = None
    requests: list[httpx.Request] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.requests is None:
            self.requests = []
        self.requests.append(request)
        extensions = {"reason_phrase": self.reason_phrase} if self.reason_phrase else None
        content = orjson.dumps(self.body if self.body is not None else SUCCESS_BODY)
        return httpx.Response(self.status_code, content=content, extensions=extensions)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def sent_json(self) -> Any:
        """Decoded body of the only request."""
        assert self.requests is not None and len(self.requests) == 1
        return orjson.loads(self.requests[0].content)


@pytest.fixture
def sweego_endpoint() -> Callable[..., RecordedExchange]:
    """Return a factory for mock Sweego endpoints.

    Example:
        def test_send(sweego_endpoint) -> None:
            endpoint = sweego_endpoint(status_code=422, body={"detail": []})
            adapter = SweegoAdapter.from_config(cfg, transport=endpoint.transport)
    """

    def _create(
        *,
        status_code: int = 200,
        body: Any = None,
        reason_phrase: bytes | None = None,
    ) -> RecordedExchange:
        return RecordedExchange(status_code=status_code, body=body, reason_phrase=reason_phrase)

    return _create


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that wires production services around an injected Config.

    Only the I/O boundary (``get_config``) is replaced.
    """
    from sweego_mail.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_adapter_config_from_dict=prod.load_adapter_config_from_dict,
            build_email_adapter=prod.build_email_adapter,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was asked for."""
    from sweego_mail.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            load_adapter_config_from_dict=prod.load_adapter_config_from_dict,
            build_email_adapter=prod.build_email_adapter,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@dataclass
class EmailCliContext:
    """Services factory plus the spy that records every send.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: EmailSpy shared by every adapter the factory builds.
        built_configs: AdapterConfig objects the CLI asked an adapter for.
    """

    factory: Callable[[], Any]
    spy: EmailSpy
    built_configs: list[Any]


@pytest.fixture
def email_cli_context(
    clear_config_cache: None,
    adapter_config: AdapterConfig,
) -> Callable[[dict[str, Any] | None], EmailCliContext]:
    """Create an email CLI context from a ``[sweego]`` section.

    Pass ``None`` to omit the section entirely.

    Example:
        def test_send(cli_runner, email_cli_context) -> None:
            ctx = email_cli_context(SWEEGO_SECTION)
            result = cli_runner.invoke(cli, ["send-email", "--to", "a@b.com", "--subject", "Hi"], obj=ctx.factory)
            assert ctx.spy.sent_payloads[0]["subject"] == "Hi"
    """
    from sweego_mail.adapters.memory.email import EmailSpy as EmailSpyImpl
    from sweego_mail.composition import AppServices, build_production

    def _create(sweego_data: dict[str, Any] | None) -> EmailCliContext:
        config = Config({"sweego": sweego_data} if sweego_data is not None else {}, {})
        spy = EmailSpyImpl(config=adapter_config)
        built_configs: list[Any] = []
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        def _build_spy(cfg: AdapterConfig) -> EmailSpy:
            built_configs.append(cfg)
            spy.config = cfg
            return spy

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_adapter_config_from_dict=prod.load_adapter_config_from_dict,
            build_email_adapter=_build_spy,
            init_logging=prod.init_logging,
        )
        return EmailCliContext(factory=lambda: test_services, spy=spy, built_configs=built_configs)

    return _create
