"""Tests for resource document loading."""

import json
import tempfile
from pathlib import Path

import pytest
import yaml
from mcprovider.ingest.document_loader import load_document, parse_document
from mcprovider.utils.errors import DocumentLoadError


@pytest.fixture
def document_data(queue_config, audio_preset_config):
    """A document declaring a queue and a preset."""
    return {"resources": [
        {"kind": "aws_media_convert_queue", "config": queue_config},
        {"kind": "preset", "config": audio_preset_config},
    ]}


def _write(data, suffix):
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        if suffix == ".json":
            json.dump(data, f)
        else:
            yaml.safe_dump(data, f)
        return f.name


class TestLoadDocument:
    """Test loading documents from disk."""

    def test_load_yaml(self, document_data):
        """Test loading a YAML document."""
        path = _write(document_data, ".yaml")
        try:
            document = load_document(path)
        finally:
            Path(path).unlink()

        assert document.addresses == ["queue.standard", "preset.audio-only"]
        assert document.source == path
        assert document.get("queue.standard").kind == "queue"

    def test_load_json(self, document_data):
        """Test loading a JSON document."""
        path = _write(document_data, ".json")
        try:
            document = load_document(path)
        finally:
            Path(path).unlink()

        assert len(document.resources) == 2

    def test_missing_file(self):
        """Test that a missing file is reported."""
        with pytest.raises(DocumentLoadError, match="not found"):
            load_document("/nonexistent/resources.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is reported."""
        path = tmp_path / "broken.yaml"
        path.write_text("resources: [unclosed", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="Invalid YAML"):
            load_document(str(path))

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is reported."""
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="Invalid JSON"):
            load_document(str(path))


class TestParseDocument:
    """Test structure checks and normalisation."""

    def test_single_mapping_blocks(self):
        """Test that single mappings are accepted in place of block lists."""
        document = parse_document({"resources": [{
            "kind": "preset",
            "config": {"name": "p", "settings": {"container_settings": {"container": "MP4"}}},
        }]})
        assert document.resources[0].config["settings"] == [{"container_settings": [{"container": "MP4"}]}]

    def test_missing_resources_key(self):
        """Test that a document without resources is empty."""
        assert parse_document({}).resources == []

    @pytest.mark.parametrize("data,message", [
        ([], "must be a mapping"),
        ({"resources": {}}, "must be a list"),
        ({"resources": [], "extra": 1}, "Unknown top-level keys"),
        ({"resources": ["queue"]}, "must be a mapping with 'kind' and 'config'"),
        ({"resources": [{"kind": "queue"}]}, "missing required fields: config"),
        ({"resources": [{"kind": "queue", "config": {}, "depends_on": []}]}, "unknown fields: depends_on"),
        ({"resources": [{"kind": "channel", "config": {}}]}, "unknown kind 'channel'"),
        ({"resources": [{"kind": "queue", "config": []}]}, "config must be a mapping"),
    ])
    def test_structure_errors(self, data, message):
        """Test malformed document structures."""
        with pytest.raises(DocumentLoadError, match=message):
            parse_document(data)

    def test_configuration_errors_listed(self, queue_config):
        """Test that every configuration problem is reported with its address."""
        with pytest.raises(DocumentLoadError) as exc_info:
            parse_document({"resources": [
                {"kind": "queue", "config": dict(queue_config, status="STOPPED")},
                {"kind": "queue", "config": {}},
            ]})
        message = str(exc_info.value)
        assert "queue.standard: status: invalid value 'STOPPED'" in message
        assert "resources[1]: name: is required" in message

    def test_duplicate_address(self, queue_config):
        """Test that the same address cannot be declared twice."""
        with pytest.raises(DocumentLoadError, match="queue.standard: declared more than once"):
            parse_document({"resources": [
                {"kind": "queue", "config": queue_config},
                {"kind": "queues", "config": queue_config},
            ]})
