"""Static field tables for the Discord execute-webhook payload."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Input keys
WEBHOOK_URL = "webhook-url"
CONTENT = "content"
USERNAME = "username"
AVATAR_URL = "avatar-url"
RAW_DATA = "raw-data"
EMBEDS = "embeds"
FILENAME = "filename"
THREAD_ID = "thread-id"

# Embed field names
TITLE = "title"
DESCRIPTION = "description"
TIMESTAMP = "timestamp"
COLOR = "color"
NAME = "name"
URL = "url"
ICON_URL = "icon-url"
TEXT = "text"

ROOT = ""
AUTHOR = "author"
FOOTER = "footer"
IMAGE = "image"
THUMBNAIL = "thumbnail"

# Prefix of the discrete per-field embed inputs (embed-title, embed-author-name, ...)
EMBED_INPUT_PREFIX = "embed"

DESCRIPTION_LIMIT = 4096
ELLIPSIS = "..."

TOP_LEVEL_FIELDS: Tuple[str, ...] = (CONTENT, USERNAME, AVATAR_URL)

EMBED_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (ROOT, (TITLE, DESCRIPTION, TIMESTAMP, COLOR, URL)),
    (AUTHOR, (NAME, URL, ICON_URL)),
    (FOOTER, (TEXT, ICON_URL)),
    (IMAGE, (URL,)),
    (THUMBNAIL, (URL,)),
)


def wire_name(name: str) -> str:
    """Convert an input field name to its JSON key (avatar-url -> avatar_url)."""
    return name.replace("-", "_")


def composite_key(subobject: str, field_name: str) -> str:
    """Key of a field inside an EmbedEntry, e.g. "author_name" or "_title"."""
    return f"{subobject}_{field_name}"


def input_key(subobject: str, field_name: str) -> str:
    """Name of the discrete input carrying a field, e.g. "embed-author-name"."""
    parts = [EMBED_INPUT_PREFIX, subobject, field_name]
    return "-".join(part for part in parts if part)


def iter_embed_fields():
    """Yield (subobject, field) pairs in schema declaration order."""
    for subobject, field_names in EMBED_FIELDS:
        for field_name in field_names:
            yield subobject, field_name


def allowed_keys() -> List[str]:
    """All composite keys an EmbedEntry may contain."""
    return [composite_key(s, f) for s, f in iter_embed_fields()]


ALLOWED_KEYS = frozenset(allowed_keys())


@dataclass
class EmbedEntry:
    """One embed under construction, keyed by composite "<subobject>_<field>" keys."""

    values: Dict[str, str] = field(default_factory=dict)

    def set(self, subobject: str, field_name: str, value: Optional[str]) -> None:
        """Store a normalized value; absent values are skipped."""
        key = composite_key(subobject, field_name)
        if key not in ALLOWED_KEYS:
            raise ValueError(f"Unknown embed field: {key}")
        if value:
            self.values[key] = value

    def is_empty(self) -> bool:
        return not self.values

    def to_dict(self) -> Dict[str, Any]:
        """
        Nest the flat composite keys into the wire shape.

        {"_title": "T", "author_icon-url": "I"} -> {"title": "T", "author": {"icon_url": "I"}}
        """
        result: Dict[str, Any] = {}

        for subobject, field_name in iter_embed_fields():
            value = self.values.get(composite_key(subobject, field_name))
            if value is None:
                continue

            if subobject == ROOT:
                result[wire_name(field_name)] = value
            else:
                result.setdefault(subobject, {})[wire_name(field_name)] = value

        return result


def input_keys() -> List[str]:
    """Every input key the action understands, embed fields included."""
    keys = [WEBHOOK_URL, CONTENT, USERNAME, AVATAR_URL, RAW_DATA, FILENAME, THREAD_ID, EMBEDS]
    keys.extend(input_key(s, f) for s, f in iter_embed_fields())
    return keys
