"""Execute a Discord webhook from step inputs."""
from typing import Optional

from webhook_action.api.webhook_client import WebhookClient, WebhookResponse
from webhook_action.builder import PayloadBuilder
from webhook_action.context.run_context import RunContext
from webhook_action.errors import ConfigError, RemoteRejection
from webhook_action.schema.embed import FILENAME, THREAD_ID, WEBHOOK_URL

DOCS_URL = "https://discord.com/developers/docs/resources/webhook#execute-webhook"


class WebhookExecutor:
    """Builds the payload and delivers it to the webhook."""

    def __init__(self, context: RunContext, client: Optional[WebhookClient] = None):
        """
        Initialize executor.

        Args:
            context: Input source and log sink for this run
            client: WebhookClient instance
        """
        self.context = context
        self.client = client or WebhookClient()
        self.builder = PayloadBuilder(context)

    def execute(self) -> WebhookResponse:
        """
        Build the payload and send it.

        Sends a multipart upload when "filename" is set, a JSON POST otherwise.
        Remote rejections (status >= 400) are logged, not raised.

        Raises:
            ConfigError: If webhook-url is missing or inputs are unusable
            TransportError: If the request cannot be sent
        """
        webhook_url = self.context.get_input(WEBHOOK_URL)
        if not webhook_url:
            raise ConfigError("Input required and not supplied: webhook-url")

        filename = self.context.get_input(FILENAME)
        thread_id = self.context.get_input(THREAD_ID)
        payload = self.builder.build()

        if filename:
            response = self.client.upload_file(webhook_url, payload, filename, thread_id=thread_id)
        else:
            response = self.client.post_json(webhook_url, payload, thread_id=thread_id)

        self.handle_response(response)
        return response

    def handle_response(self, response: WebhookResponse) -> Optional[RemoteRejection]:
        """Log the response; return the rejection when status >= 400."""
        self.context.log_info(
            f"Webhook returned {response.status_code} with message: {response.body}. "
            f"Please see discord documentation at {DOCS_URL} for more information"
        )

        if response.ok:
            return None

        rejection = RemoteRejection(response.status_code, response.body)
        self.context.log_error(
            "Discord Webhook Action failed to execute webhook. "
            "Please see logs above for details. Error printed below:"
        )
        self.context.log_error(str(rejection))
        return rejection


def execute_webhook(context: RunContext, client: Optional[WebhookClient] = None) -> WebhookResponse:
    """Build and deliver the webhook payload for the given run context."""
    return WebhookExecutor(context, client).execute()
