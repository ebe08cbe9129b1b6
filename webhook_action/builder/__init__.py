"""
Payload Builder Module

Builds Discord execute-webhook payloads from flat string inputs with:
- Raw-data JSON override
- Top-level field mapping
- Embed construction from bulk JSON or discrete inputs
- Field normalization (timestamps, description limit)
"""

from .payload_builder import PayloadBuilder, build_payload
from .embed_builder import EmbedBuilder
from .field_builder import normalize_value, parse_timestamp, truncate_description, get_path

__all__ = [
    "PayloadBuilder",
    "EmbedBuilder",
    "build_payload",
    "normalize_value",
    "parse_timestamp",
    "truncate_description",
    "get_path",
]
