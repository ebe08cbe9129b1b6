"""Errors raised while building and delivering webhook payloads."""
from typing import Optional


class WebhookActionError(Exception):
    """Base class for every error raised by the webhook action."""


class ConfigError(WebhookActionError):
    """Inputs are missing or unusable (raw-data file, webhook URL, attachment)."""


class InvalidTimestampError(ConfigError):
    """A timestamp input could not be parsed as a date."""

    def __init__(self, value: str):
        super().__init__(f"Invalid timestamp: {value!r}")
        self.value = value


class MalformedEmbedsJson(WebhookActionError):
    """The bulk embeds input is not a JSON array. Recovered by the builder."""


class TransportError(WebhookActionError):
    """The webhook request could not be sent."""


class RemoteRejection(WebhookActionError):
    """The remote service answered with status >= 400. Logged, never raised."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        message = f"Webhook returned {status_code}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
