"""
Unit tests for EmbedBuilder and the embed schema

Tests:
- Schema table order and composite keys
- Discrete mode: per-field inputs
- Bulk mode: JSON array input, nested and flat lookup
- Fallback from malformed bulk input
- EmbedEntry nesting into the wire shape
"""

import json

import pytest

from webhook_action.builder.embed_builder import EmbedBuilder
from webhook_action.errors import MalformedEmbedsJson
from webhook_action.schema.embed import (
    EMBED_FIELDS,
    EmbedEntry,
    allowed_keys,
    input_key,
    input_keys,
    iter_embed_fields,
)


# ============================================================================
# TEST: schema
# ============================================================================


class TestEmbedSchema:
    """Tests for the static field table"""

    def test_declaration_order(self):
        assert [s for s, _ in EMBED_FIELDS] == ["", "author", "footer", "image", "thumbnail"]
        assert list(iter_embed_fields())[:6] == [
            ("", "title"),
            ("", "description"),
            ("", "timestamp"),
            ("", "color"),
            ("", "url"),
            ("author", "name"),
        ]

    def test_input_keys(self):
        assert input_key("", "title") == "embed-title"
        assert input_key("author", "icon-url") == "embed-author-icon-url"
        assert "embed-thumbnail-url" in input_keys()
        assert "webhook-url" in input_keys()

    def test_set_rejects_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown embed field"):
            EmbedEntry().set("author", "email", "x@y")

    def test_allowed_keys(self):
        keys = allowed_keys()
        assert "_title" in keys
        assert "author_icon-url" in keys
        assert len(keys) == 12


# ============================================================================
# TEST: EmbedEntry
# ============================================================================


class TestEmbedEntry:
    """Tests for flat-to-nested conversion"""

    def test_set_skips_absent(self):
        entry = EmbedEntry()
        entry.set("", "title", None)
        entry.set("", "url", "")

        assert entry.is_empty()

    def test_to_dict_nests_sub_objects(self):
        entry = EmbedEntry()
        entry.set("", "title", "T")
        entry.set("author", "name", "A")
        entry.set("author", "icon-url", "http://i")
        entry.set("image", "url", "http://img")

        assert entry.to_dict() == {
            "title": "T",
            "author": {"name": "A", "icon_url": "http://i"},
            "image": {"url": "http://img"},
        }


# ============================================================================
# TEST: discrete mode
# ============================================================================


class TestDiscreteMode:
    """Tests for embeds built from per-field inputs"""

    def test_single_entry(self, make_context):
        context = make_context({"embed-title": "T", "embed-url": "http://x"})

        entries = EmbedBuilder(context).build()

        assert len(entries) == 1
        assert entries[0].values == {"_title": "T", "_url": "http://x"}

    def test_all_sub_objects(self, make_context):
        context = make_context({
            "embed-title": "T",
            "embed-color": "16711680",
            "embed-author-name": "Bot",
            "embed-author-url": "http://a",
            "embed-footer-text": "F",
            "embed-footer-icon-url": "http://f",
            "embed-thumbnail-url": "http://t",
        })

        entry = EmbedBuilder(context).build()[0]

        assert entry.to_dict() == {
            "title": "T",
            "color": "16711680",
            "author": {"name": "Bot", "url": "http://a"},
            "footer": {"text": "F", "icon_url": "http://f"},
            "thumbnail": {"url": "http://t"},
        }

    def test_no_inputs_gives_empty_entry(self, make_context):
        entries = EmbedBuilder(make_context({})).build()

        assert len(entries) == 1
        assert entries[0].is_empty()

    def test_timestamp_normalized(self, make_context):
        entry = EmbedBuilder(make_context({"embed-timestamp": "2024-01-01"})).build()[0]

        assert entry.values["_timestamp"] == "2024-01-01T00:00:00.000Z"

    def test_unknown_inputs_ignored(self, make_context):
        entry = EmbedBuilder(make_context({"embed-author-email": "x@y"})).build()[0]

        assert entry.is_empty()


# ============================================================================
# TEST: bulk mode
# ============================================================================


class TestBulkMode:
    """Tests for embeds built from a JSON array"""

    def test_one_entry_per_element(self, make_context):
        embeds = [{"title": "one"}, {"title": "two"}, {"description": "three"}]
        context = make_context({"embeds": json.dumps(embeds)})

        entries = EmbedBuilder(context).build()

        assert [e.to_dict() for e in entries] == embeds

    def test_nested_sub_objects(self, make_context):
        embeds = [{
            "title": "T",
            "author": {"name": "A", "icon_url": "http://i"},
            "footer": {"text": "F"},
        }]
        context = make_context({"embeds": json.dumps(embeds)})

        entry = EmbedBuilder(context).build()[0]

        assert entry.values == {
            "_title": "T",
            "author_name": "A",
            "author_icon-url": "http://i",
            "footer_text": "F",
        }

    def test_flat_hyphenated_keys(self, make_context):
        embeds = [{"author-name": "A", "image-url": "http://img"}]
        context = make_context({"embeds": json.dumps(embeds)})

        entry = EmbedBuilder(context).build()[0]

        assert entry.to_dict() == {"author": {"name": "A"}, "image": {"url": "http://img"}}

    def test_unknown_fields_dropped(self, make_context):
        embeds = [{"title": "T", "fields": [{"name": "n", "value": "v"}], "extra": "x"}]
        context = make_context({"embeds": json.dumps(embeds)})

        entry = EmbedBuilder(context).build()[0]

        assert set(entry.values) <= set(allowed_keys())
        assert entry.to_dict() == {"title": "T"}

    def test_numeric_color_stringified(self, make_context):
        context = make_context({"embeds": json.dumps([{"color": 255}])})

        entry = EmbedBuilder(context).build()[0]

        assert entry.values == {"_color": "255"}

    def test_whitespace_only_values_absent(self, make_context):
        context = make_context({"embeds": json.dumps([{"title": "   ", "url": " http://x "}])})

        entry = EmbedBuilder(context).build()[0]

        assert entry.values == {"_url": "http://x"}

    def test_bulk_debug_trace(self, make_context):
        context = make_context({"embeds": json.dumps([{"title": "a"}, {"title": "b"}])})

        EmbedBuilder(context).build()

        assert context.debugs == ["Parsing title", "Parsing title", "Built 2 embeds from bulk input"]

    def test_description_truncated(self, make_context):
        context = make_context({"embeds": json.dumps([{"description": "x" * 5000}])})

        entry = EmbedBuilder(context).build()[0]

        assert len(entry.values["_description"]) == 4096

    def test_discrete_inputs_ignored_in_bulk_mode(self, make_context):
        context = make_context({
            "embeds": json.dumps([{"title": "bulk"}]),
            "embed-title": "discrete",
        })

        entries = EmbedBuilder(context).build()

        assert [e.to_dict() for e in entries] == [{"title": "bulk"}]


# ============================================================================
# TEST: malformed bulk input
# ============================================================================


class TestMalformedEmbeds:
    """Tests for the fallback to discrete mode"""

    def test_invalid_json_falls_back(self, make_context):
        context = make_context({"embeds": "[{not json", "embed-title": "T"})

        entries = EmbedBuilder(context).build()

        assert [e.to_dict() for e in entries] == [{"title": "T"}]
        assert context.errors
        assert "malformed" in context.errors[0]

    def test_non_array_falls_back(self, make_context):
        context = make_context({"embeds": '{"title": "object"}', "embed-title": "T"})

        entries = EmbedBuilder(context).build()

        assert [e.to_dict() for e in entries] == [{"title": "T"}]
        assert len(context.errors) == 2

    def test_parse_embeds_raises(self):
        with pytest.raises(MalformedEmbedsJson):
            EmbedBuilder.parse_embeds("nope")

        with pytest.raises(MalformedEmbedsJson):
            EmbedBuilder.parse_embeds('"a string"')

    def test_parse_embeds_array(self):
        assert EmbedBuilder.parse_embeds('[{"title": "T"}]') == [{"title": "T"}]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
