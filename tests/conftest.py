"""Shared fixtures for webhook action tests."""
import json

import pytest

from webhook_action.context.run_context import MappingRunContext


class RecordingContext(MappingRunContext):
    """MappingRunContext that keeps every log line for assertions."""

    def __init__(self, inputs=None):
        super().__init__(inputs)
        self.infos = []
        self.errors = []
        self.debugs = []

    def log_info(self, message):
        self.infos.append(message)

    def log_error(self, message):
        self.errors.append(message)

    def log_debug(self, message):
        self.debugs.append(message)


@pytest.fixture
def make_context():
    """Factory building a RecordingContext from an input dict"""
    def _make(inputs=None):
        return RecordingContext(inputs)
    return _make


@pytest.fixture
def raw_data_file(tmp_path):
    """raw-data file containing {"content": "x"}"""
    path = tmp_path / "payload.json"
    path.write_text(json.dumps({"content": "x"}), encoding="utf-8")
    return path
