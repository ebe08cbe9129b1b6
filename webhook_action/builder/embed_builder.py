"""
Embed Builder - Constructs embed entries from discrete inputs or a bulk JSON array

Two mutually exclusive modes:
- Bulk: the "embeds" input is a JSON array, one entry per element
- Discrete: one entry built from embed-<field> / embed-<subobject>-<field> inputs
"""

import json
from typing import Any, List, Optional

from webhook_action.builder.field_builder import get_path, normalize_value, scalar_to_str
from webhook_action.context.run_context import RunContext
from webhook_action.errors import MalformedEmbedsJson
from webhook_action.schema.embed import (
    EMBEDS,
    ROOT,
    EmbedEntry,
    input_key,
    iter_embed_fields,
    wire_name,
)


class EmbedBuilder:
    """Builds the list of EmbedEntry objects for one payload"""

    def __init__(self, context: RunContext):
        self.context = context

    def build(self) -> List[EmbedEntry]:
        """
        Build embed entries, choosing bulk mode when "embeds" is a JSON array

        A malformed "embeds" input is logged and discrete mode is used instead.
        """
        raw = self.context.get_input(EMBEDS)
        if raw:
            try:
                elements = self.parse_embeds(raw)
                return self.build_bulk(elements)
            except MalformedEmbedsJson as e:
                self.context.log_error(
                    "User specified embeds but json value is malformed. Error printed below:"
                )
                self.context.log_error(str(e))

        return self.build_discrete()

    @staticmethod
    def parse_embeds(raw: str) -> List[Any]:
        """Parse the bulk embeds input, raising MalformedEmbedsJson unless it is an array"""
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            raise MalformedEmbedsJson(f"Invalid embeds JSON: {e}") from e

        if not isinstance(parsed, list):
            raise MalformedEmbedsJson(
                f"Embeds JSON must be an array, got {type(parsed).__name__}"
            )
        return parsed

    def build_bulk(self, elements: List[Any]) -> List[EmbedEntry]:
        """Build one entry per array element, preserving order"""
        entries = []

        for element in elements:
            entry = EmbedEntry()
            for subobject, field_name in iter_embed_fields():
                value = scalar_to_str(self.lookup(element, subobject, field_name))
                entry.set(subobject, field_name, normalize_value(field_name, value, self.context))
            entries.append(entry)

        self.context.log_debug(f"Built {len(entries)} embeds from bulk input")
        return entries

    def build_discrete(self) -> List[EmbedEntry]:
        """Build the single entry described by the per-field inputs"""
        entry = EmbedEntry()

        for subobject, field_name in iter_embed_fields():
            value = self.context.get_input(input_key(subobject, field_name))
            entry.set(subobject, field_name, normalize_value(field_name, value, self.context))

        return [entry]

    @staticmethod
    def lookup(element: Any, subobject: str, field_name: str) -> Optional[Any]:
        """
        Find a field inside a bulk embed element

        Tries, in order:
        - the nested path ({"author": {"icon-url": ...}}, root fields at top level)
        - the same path with the wire spelling ({"author": {"icon_url": ...}})
        - the flat hyphenated key ({"author-icon-url": ...})
        """
        prefix = [subobject] if subobject != ROOT else []
        candidates = [prefix + [field_name]]

        if wire_name(field_name) != field_name:
            candidates.append(prefix + [wire_name(field_name)])

        if subobject != ROOT:
            candidates.append([f"{subobject}-{field_name}"])

        for path in candidates:
            value = get_path(element, path)
            if value is not None:
                return value

        return None
