"""Tests for writing generated documents."""

import json

import yaml

from nitrado_extractor.config import FileFormat
from nitrado_extractor.core.writer import output_filename, write_spec


class TestWriteSpec:
    """Test the write_spec function."""

    def test_writes_json_with_trailing_newline(self, tmp_path):
        """Test JSON output is indented and ends with a newline."""
        path = tmp_path / "out" / "spec.json"

        result = write_spec({"openapi": "3.1.1", "paths": {}}, path, FileFormat.JSON)

        assert result == path
        content = path.read_text(encoding="utf-8")
        assert content.endswith("\n")
        assert '"openapi": "3.1.1"' in content
        assert json.loads(content) == {"openapi": "3.1.1", "paths": {}}

    def test_writes_yaml_without_aliases(self, tmp_path):
        """Test shared sub-structures are written out in full."""
        shared = {"description": "Not Found"}
        data = {"a": {"404": shared}, "b": {"404": shared}}
        path = tmp_path / "spec.yaml"

        write_spec(data, path, FileFormat.YAML)

        content = path.read_text(encoding="utf-8")
        assert "&id" not in content
        assert "*id" not in content
        assert yaml.safe_load(content) == data

    def test_yaml_keeps_key_order(self, tmp_path):
        """Test keys are not sorted."""
        path = tmp_path / "spec.yaml"

        write_spec({"paths": {}, "info": {}}, path, FileFormat.YAML)

        assert path.read_text(encoding="utf-8").index("paths") == 0

    def test_keeps_unicode(self, tmp_path):
        """Test non-ASCII text is written as-is."""
        path = tmp_path / "spec.json"

        write_spec({"title": "Spielserver ✓"}, path, FileFormat.JSON)

        assert "Spielserver ✓" in path.read_text(encoding="utf-8")


class TestOutputFilename:
    """Test the output_filename function."""

    def test_suffix_follows_format(self):
        """Test the extension matches the output format."""
        assert output_filename("nitrado-openapi", FileFormat.JSON) == "nitrado-openapi.json"
        assert output_filename("nitrado-openapi", FileFormat.YAML) == "nitrado-openapi.yaml"
