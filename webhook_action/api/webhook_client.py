"""Discord webhook HTTP client."""
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from config import WebhookConfig
from webhook_action.errors import ConfigError, TransportError


@dataclass
class WebhookResponse:
    """Status and body returned by the webhook endpoint."""

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class WebhookClient:
    """Client for a Discord execute-webhook endpoint."""

    def __init__(self, config: Optional[WebhookConfig] = None, session: Optional[requests.Session] = None):
        """Initialize client."""
        self.config = config or WebhookConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

    @staticmethod
    def build_params(thread_id: Optional[str]) -> Dict[str, str]:
        """Query parameters for the request; thread_id targets a thread."""
        return {"thread_id": thread_id} if thread_id else {}

    def post_json(self, url: str, payload: Any, thread_id: Optional[str] = None) -> WebhookResponse:
        """POST the payload as a JSON body."""
        try:
            response = self.session.post(
                url,
                json=payload,
                params=self.build_params(thread_id),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Failed to execute webhook: {e}") from e

        return WebhookResponse(status_code=response.status_code, body=response.text)

    def upload_file(
        self,
        url: str,
        payload: Any,
        filename: str,
        thread_id: Optional[str] = None,
    ) -> WebhookResponse:
        """POST a multipart form pairing the file with the serialized payload."""
        if not os.path.isfile(filename):
            raise ConfigError(f"File to upload not found: {filename}")

        try:
            with open(filename, "rb") as f:
                response = self.session.post(
                    url,
                    files={"upload-file": (os.path.basename(filename), f)},
                    data={"payload_json": json.dumps(payload)},
                    params=self.build_params(thread_id),
                    timeout=self.config.timeout,
                )
        except requests.RequestException as e:
            raise TransportError(f"Failed to upload file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read file to upload {filename}: {e}") from e

        return WebhookResponse(status_code=response.status_code, body=response.text)
