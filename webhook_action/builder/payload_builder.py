"""
Payload Builder - Orchestrates Discord webhook payload generation

Integrates:
- Raw-data override: a JSON file replaces the whole payload
- Top-level fields: content, username, avatar_url
- EmbedBuilder: embeds[] from bulk JSON or discrete inputs
"""

import json
from pathlib import Path
from typing import Any, Dict

from webhook_action.builder.embed_builder import EmbedBuilder
from webhook_action.builder.field_builder import normalize_value
from webhook_action.context.run_context import RunContext
from webhook_action.errors import ConfigError
from webhook_action.schema.embed import EMBEDS, RAW_DATA, TOP_LEVEL_FIELDS, wire_name


class PayloadBuilder:
    """
    Builds the execute-webhook payload for one run

    Usage:
    ```python
    context = MappingRunContext({"content": "hi", "embed-title": "T"})
    payload = PayloadBuilder(context).build()
    # Returns: {"content": "hi", "embeds": [{"title": "T"}]}
    ```
    """

    def __init__(self, context: RunContext):
        """
        Initialize PayloadBuilder

        Args:
            context: Input source and log sink for this run
        """
        self.context = context
        self.embed_builder = EmbedBuilder(context)

    def build(self) -> Any:
        """
        Build the payload

        Returns:
            The parsed raw-data file when "raw-data" is set, otherwise a dict
            with the top-level fields and, when any embed has a field, "embeds"

        Raises:
            ConfigError: If the raw-data file cannot be read or parsed
            InvalidTimestampError: If a timestamp input is not a date
        """
        raw_data = self.context.get_input(RAW_DATA)
        if raw_data:
            return self.load_raw_data(raw_data)

        payload = self.build_top_level()

        entries = self.embed_builder.build()
        if any(not entry.is_empty() for entry in entries):
            payload[EMBEDS] = [entry.to_dict() for entry in entries]

        self.context.log_info(json.dumps(payload))
        return payload

    def build_top_level(self) -> Dict[str, Any]:
        """Map content, username and avatar-url to their payload keys"""
        payload: Dict[str, Any] = {}

        for parameter in TOP_LEVEL_FIELDS:
            value = normalize_value(parameter, self.context.get_input(parameter), self.context)
            if value is None:
                continue

            self.context.log_info(f"{parameter}: {value}")
            payload[wire_name(parameter)] = value

        return payload

    @staticmethod
    def load_raw_data(path: str) -> Any:
        """Read and parse the raw-data JSON file"""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read raw-data file {path}: {e}") from e

        try:
            return json.loads(text)
        except ValueError as e:
            raise ConfigError(f"raw-data file {path} is not valid JSON: {e}") from e


def build_payload(context: RunContext) -> Any:
    """Build the webhook payload for the given run context"""
    return PayloadBuilder(context).build()
