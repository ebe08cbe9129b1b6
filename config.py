"""Application configuration."""
import os
from dataclasses import dataclass
from typing import Optional


def _float_or_none(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    return float(value)


@dataclass
class WebhookConfig:
    """HTTP delivery settings."""

    timeout: Optional[float] = None  # None keeps the transport default
    user_agent: str = "discord-webhook-action"

    @classmethod
    def from_env(cls) -> "WebhookConfig":
        """Load config from environment variables."""
        return cls(
            timeout=_float_or_none(os.getenv("WEBHOOK_TIMEOUT")),
            user_agent=os.getenv("WEBHOOK_USER_AGENT", "discord-webhook-action"),
        )


@dataclass
class AppConfig:
    """Application configuration."""

    input_prefix: str = "INPUT_"
    log_level: str = "INFO"
    webhook: WebhookConfig = None

    def __post_init__(self):
        """Fill default values."""
        if self.webhook is None:
            self.webhook = WebhookConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            input_prefix=os.getenv("WEBHOOK_INPUT_PREFIX", "INPUT_"),
            log_level=os.getenv("WEBHOOK_LOG_LEVEL", "INFO").upper(),
            webhook=WebhookConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
