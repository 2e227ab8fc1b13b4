"""
Tests for loading generation requests from JSON files and overrides.
"""

import json
from pathlib import Path

import pytest

from assemblyinfo.codegen.core.config import (
    EXAMPLE_REQUEST,
    AdditionalField,
    ConfigError,
    load_request,
    parse_additional_fields,
)
from assemblyinfo.codegen.core.fields import Severity, build_fields


def _write(tmp_path: Path, data, name="version.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadRequest:
    def test_from_file(self, tmp_path: Path):
        request = load_request(config_file=_write(tmp_path, EXAMPLE_REQUEST))
        assert request.code_language == "c#"
        assert request.public_release is True
        assert request.git_commit_date_ticks == "637450560000000000"
        assert request.additional_fields[0] == AdditionalField(
            "BuildAgent", {"String": "ci-01"}
        )

    def test_overrides_win(self, tmp_path: Path):
        path = _write(tmp_path, {"code_language": "c#", "assembly_version": "1.0"})
        request = load_request(
            custom_config={"code_language": "vb", "assembly_version": None},
            config_file=path,
        )
        assert request.code_language == "vb"
        assert request.assembly_version == "1.0"

    def test_language_required(self):
        with pytest.raises(ConfigError, match="code_language"):
            load_request(custom_config={"assembly_version": "1.0"})

    def test_unknown_keys_ignored(self):
        request = load_request(custom_config={"code_language": "c#", "colour": "blue"})
        assert request.code_language == "c#"

    def test_numbers_become_strings(self):
        request = load_request(
            custom_config={"code_language": "c#", "git_commit_date_ticks": 42}
        )
        assert request.git_commit_date_ticks == "42"

    def test_string_booleans(self):
        request = load_request(
            custom_config={"code_language": "c#", "public_release": "True"}
        )
        assert request.public_release is True

    def test_invalid_boolean(self):
        with pytest.raises(ConfigError, match="public_release"):
            load_request(custom_config={"code_language": "c#", "public_release": "yes"})

    def test_nested_scalar_rejected(self):
        with pytest.raises(ConfigError, match="assembly_title"):
            load_request(custom_config={"code_language": "c#", "assembly_title": ["x"]})

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_request(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path: Path):
        path = tmp_path / "version.yaml"
        path.write_text("code_language: c#\n")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_request(config_file=path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "version.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_request(config_file=path)

    def test_top_level_array(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="JSON object"):
            load_request(config_file=_write(tmp_path, ["c#"]))


class TestAdditionalFields:
    def test_list_form(self):
        fields = parse_additional_fields([{"name": "Flag", "Boolean": True}])
        assert fields == (AdditionalField("Flag", {"Boolean": "true"}),)

    def test_mapping_form(self):
        fields = parse_additional_fields({"Built": {"Ticks": 5}})
        assert fields == (AdditionalField("Built", {"Ticks": "5"}),)

    def test_none(self):
        assert parse_additional_fields(None) == ()

    def test_missing_name(self):
        with pytest.raises(ConfigError, match="'name'"):
            parse_additional_fields([{"String": "x"}])

    def test_bad_metadata(self):
        with pytest.raises(ConfigError):
            parse_additional_fields({"Built": "5"})

    def test_bad_container(self):
        with pytest.raises(ConfigError):
            parse_additional_fields("Built=5")

    def test_metadata_lookup_ignores_case(self):
        field = AdditionalField("A", {"emitifempty": "true"})
        assert field.has("EmitIfEmpty")
        assert field.get("EMITIFEMPTY") == "true"
        assert field.get("String") is None

    def test_null_metadata_is_empty(self):
        fields = parse_additional_fields([{"name": "Agent", "String": None}])
        assert fields == (AdditionalField("Agent", {"String": ""}),)

    def test_null_string_is_dropped_with_warning(self, tmp_path: Path):
        path = _write(
            tmp_path,
            {
                "code_language": "c#",
                "additional_fields": [{"name": "Agent", "String": None}],
            },
        )
        fields, errors = build_fields(load_request(config_file=path))
        assert "Agent" not in {f.name for f in fields}
        assert [(e.field_name, e.severity) for e in errors] == [
            ("Agent", Severity.WARNING)
        ]
