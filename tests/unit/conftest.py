"""Fixtures for unit tests."""

from types import SimpleNamespace
from typing import Callable, Generator

import pytest
import structlog

from webhooked.configuration.models import DesiredHookModel, HookContentType

HookFactory = Callable[..., SimpleNamespace]


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def desired_hook() -> DesiredHookModel:
    """A desired hook delivering JSON push and pull_request events."""
    return DesiredHookModel(
        url="https://hooks.example.com/github",
        content_type=HookContentType.JSON,
        secret="s3cret",
        events=("push", "pull_request"),
    )


@pytest.fixture
def make_hook() -> HookFactory:
    """Factory for objects shaped like a PyGithub Hook."""

    def _make_hook(
        hook_id: int = 1,
        url: str = "https://hooks.example.com/github",
        content_type: str | None = "json",
        events: list[str] | None = None,
    ) -> SimpleNamespace:
        config: dict[str, str] = {"url": url, "insecure_ssl": "0", "secret": "********"}
        if content_type is not None:
            config["content_type"] = content_type
        return SimpleNamespace(
            id=hook_id,
            config=config,
            events=events if events is not None else ["push", "pull_request"],
            active=True,
        )

    return _make_hook
