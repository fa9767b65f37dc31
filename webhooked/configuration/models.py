"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HookContentType(str, Enum):
    """Enum for the media types a GitHub webhook can deliver."""

    JSON = "json"
    FORM = "form"


class DesiredHookModel(BaseModel):
    """Webhook configuration that every repository should converge to."""

    model_config = ConfigDict(frozen=True)

    url: str
    content_type: HookContentType = HookContentType.JSON
    secret: str = Field(default="", repr=False)
    events: tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class WebhookedConfig:
    """Configuration class for the webhooked CLI."""

    debug: bool
    github_api_url: str
    github_pat_token: str
    owner: str | None
    hook: DesiredHookModel
    monitor_interval: timedelta | None

    @property
    def monitor_mode(self) -> bool:
        """Whether sweeps should repeat forever instead of running once."""
        return self.monitor_interval is not None
