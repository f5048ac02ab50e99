"""Tests for preset files and share tokens."""

import json
from pathlib import Path

import pytest
import yaml

from codeshot.presets import (
    Preset,
    decode_share_token,
    dump_preset,
    encode_share_token,
    load_preset,
    preset_from_data,
    resolve_preset_path,
)
from codeshot.schemas import SettingsValidationError


@pytest.fixture
def preset(settings_validator, export_validator, full_settings_payload, full_export_payload):
    return Preset(
        settings=settings_validator.parse(full_settings_payload),
        export=export_validator.parse(full_export_payload),
    )


class TestPresetFromData:
    def test_missing_sections_default(self, registry):
        p = preset_from_data({}, registry)
        assert p.settings.padding == 64
        assert p.export.format == "png"

    def test_null_document_defaults(self, registry):
        assert preset_from_data(None, registry) == Preset()

    def test_non_mapping_rejected(self, registry):
        with pytest.raises(ValueError, match="must be a mapping"):
            preset_from_data(["settings"], registry)

    def test_invalid_settings_section(self, registry):
        with pytest.raises(SettingsValidationError) as exc_info:
            preset_from_data({"settings": {"padding": 7}}, registry)
        assert exc_info.value.fields == ["padding"]

    def test_invalid_export_section(self, registry):
        with pytest.raises(SettingsValidationError) as exc_info:
            preset_from_data({"export": {"scale": 3}}, registry)
        assert exc_info.value.fields == ["scale"]


class TestPresetFiles:
    def test_load_yaml(self, tmp_path, registry):
        path = tmp_path / "preset.yaml"
        path.write_text(yaml.safe_dump({"settings": {"language": "rs", "padding": 16}}))
        p = load_preset(path, registry)
        assert p.settings.language == "rs"
        assert p.settings.padding == 16

    def test_load_json(self, tmp_path, registry):
        path = tmp_path / "preset.json"
        path.write_text(json.dumps({"export": {"format": "svg", "scale": 6}}))
        p = load_preset(path, registry)
        assert p.export.format == "svg"
        assert p.export.scale == 6

    def test_invalid_yaml(self, tmp_path, registry):
        path = tmp_path / "broken.yaml"
        path.write_text("settings: {padding: [\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_preset(path, registry)

    def test_invalid_json(self, tmp_path, registry):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_preset(path, registry)

    @pytest.mark.parametrize("name", ["out.yaml", "nested/out.json"])
    def test_dump_then_load(self, tmp_path, registry, preset, name):
        path = dump_preset(preset, tmp_path / name)
        assert load_preset(path, registry) == preset

    def test_dump_uses_wire_names(self, tmp_path, preset):
        path = dump_preset(preset, tmp_path / "out.yaml")
        data = yaml.safe_load(path.read_text())
        assert "lineNumbers" in data["settings"]
        assert "jpegQuality" in data["export"]

    def test_dump_without_suffix_uses_default_format(self, tmp_path, registry, preset):
        path = dump_preset(preset, tmp_path / "shared", default_format="json")
        assert path == tmp_path / "shared.json"
        assert json.loads(path.read_text())["export"]["scale"] == preset.export.scale
        assert load_preset(path, registry) == preset

    def test_explicit_suffix_wins_over_default_format(self, tmp_path, preset):
        path = dump_preset(preset, tmp_path / "out.yaml", default_format="json")
        assert path.suffix == ".yaml"
        assert "settings" in yaml.safe_load(path.read_text())


class TestResolvePresetPath:
    def test_bare_name_not_found_gives_default_format_target(self, tmp_path):
        assert resolve_preset_path("dark", tmp_path, "json") == tmp_path / "dark.json"

    def test_bare_name_finds_existing_file(self, tmp_path):
        (tmp_path / "dark.yml").write_text("settings: {}\n")
        assert resolve_preset_path("dark", tmp_path, "yaml") == tmp_path / "dark.yml"

    def test_default_format_preferred(self, tmp_path):
        (tmp_path / "dark.yaml").write_text("{}\n")
        (tmp_path / "dark.json").write_text("{}\n")
        assert resolve_preset_path("dark", tmp_path, "json") == tmp_path / "dark.json"

    @pytest.mark.parametrize("name", ["dark.yaml", "sub/dark"])
    def test_explicit_paths_unchanged(self, tmp_path, name):
        assert str(resolve_preset_path(name, tmp_path / "presets")) == str(Path(name))

    def test_existing_file_unchanged(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "dark").write_text("{}\n")
        assert resolve_preset_path("dark", tmp_path / "presets") == Path("dark")


class TestShareTokens:
    def test_round_trip(self, registry, preset):
        token = encode_share_token(preset)
        assert decode_share_token(token, registry) == preset

    def test_token_is_url_safe(self, preset):
        token = encode_share_token(preset)
        assert not set(token) & {"+", "/", "=", " "}

    def test_malformed_token(self, registry):
        with pytest.raises(ValueError, match="Malformed share token"):
            decode_share_token("bm90IGpzb24", registry)  # "not json"

    def test_token_with_invalid_settings(self, registry):
        import base64

        raw = json.dumps({"settings": {"width": 100}}).encode()
        token = base64.urlsafe_b64encode(raw).decode().rstrip("=")
        with pytest.raises(SettingsValidationError) as exc_info:
            decode_share_token(token, registry)
        assert exc_info.value.fields == ["width"]
